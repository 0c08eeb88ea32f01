from .menu_item_forms import MenuItemForm
