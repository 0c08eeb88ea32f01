from django.db.models import F, Max

from menubuilder.models import Menu, MenuItem


def sibling_queryset(menu_id, parent_id):
    """All items in the (menu, parent) group. parent_id=None is the root group."""
    qs = MenuItem.objects.filter(menu_id=menu_id)
    if parent_id is None:
        return qs.filter(parent__isnull=True)
    return qs.filter(parent_id=parent_id)


def lock_menu(menu_id) -> Menu:
    """Lock the menu row for the rest of the transaction.

    Serializes order allocation within one menu: two requests cannot both
    read the same max(order) and hand it out twice.
    """
    return Menu.objects.select_for_update().get(pk=menu_id)


def next_order(menu_id, parent_id=None) -> int:
    """First free order number at the end of a sibling group."""
    current = sibling_queryset(menu_id, parent_id).aggregate(m=Max("order"))["m"]
    return (current or 0) + 1


def shift_siblings_after(item: MenuItem) -> int:
    """Make room directly after `item` in its sibling group.

    Every other sibling with order > item.order moves up by one, in one
    UPDATE statement, so item.order + 1 is free afterwards. Concurrent
    readers never see two siblings sharing an order value.

    Returns the number of shifted rows.
    """
    return (
        sibling_queryset(item.menu_id, item.parent_id)
        .filter(order__gt=item.order)
        .exclude(pk=item.pk)
        .update(order=F("order") + 1)
    )
