from django.core.exceptions import ObjectDoesNotExist


class MenuNotFound(ObjectDoesNotExist):
    """Raised when a menu id does not exist."""

    code = "menu_not_found"


class ItemNotFound(ObjectDoesNotExist):
    """Raised when a menu item id does not exist."""

    code = "menu_item_not_found"
