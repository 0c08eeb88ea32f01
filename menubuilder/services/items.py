from django.core.exceptions import ValidationError
from django.db import transaction
from django.forms.models import model_to_dict

from menubuilder.exceptions import ItemNotFound, MenuNotFound
from menubuilder.forms import MenuItemForm
from menubuilder.models import Menu, MenuItem

from .ordering import lock_menu, next_order


def get_menu(menu_id) -> Menu:
    try:
        return Menu.objects.get(pk=menu_id)
    except Menu.DoesNotExist:
        raise MenuNotFound(f"Menu {menu_id} does not exist")


def get_item(pk) -> MenuItem:
    try:
        return MenuItem.objects.select_related("menu").get(pk=pk)
    except MenuItem.DoesNotExist:
        raise ItemNotFound(f"Menu item {pk} does not exist")


def _form_data(payload):
    """API payloads use "class"; the model field is link_class."""
    data = dict(payload)
    if "class" in data:
        data["link_class"] = data.pop("class")
    return data


def _validated_form(form):
    if not form.is_valid():
        raise ValidationError(form.errors.as_data())
    return form


@transaction.atomic
def create_item(payload) -> MenuItem:
    """Create an item at the end of its sibling group."""
    form = _validated_form(MenuItemForm(data=_form_data(payload)))

    item = form.save(commit=False)
    lock_menu(item.menu_id)
    item.order = next_order(item.menu_id, item.parent_id)
    item.save()
    return item


@transaction.atomic
def update_item(item: MenuItem, payload) -> MenuItem:
    """Overwrite the supplied fields; everything else keeps its current value.

    An item moved under a new parent is appended to that sibling group.
    """
    current = model_to_dict(item, fields=MenuItemForm.Meta.fields)
    form = _validated_form(MenuItemForm(data={**current, **_form_data(payload)}, instance=item))

    item = form.save(commit=False)
    if "parent" in form.changed_data:
        lock_menu(item.menu_id)
        item.order = next_order(item.menu_id, item.parent_id)
    item.save()
    return item
