import logging

from django.db import transaction

from menubuilder.models import MenuItem

from .ordering import lock_menu, shift_siblings_after

logger = logging.getLogger(__name__)

# Fields that the database fills in for a new row.
NOT_COPIED = ("id", "created_at", "updated_at")


def _copyable_fields(item: MenuItem):
    return {
        f.attname: getattr(item, f.attname)
        for f in item._meta.concrete_fields
        if f.name not in NOT_COPIED
    }


def recursively_duplicate(item: MenuItem, parent_id=None, order=None) -> MenuItem:
    """Copy `item` and its whole subtree into new rows.

    parent_id/order override the copied values when given. Children are read
    from the original item and keep their own order values under the copy.
    """
    data = _copyable_fields(item)
    if parent_id is not None:
        data["parent_id"] = parent_id
    if order is not None:
        data["order"] = order

    clone = MenuItem.objects.create(**data)

    for child in item.children.order_by("order", "id"):
        recursively_duplicate(child, parent_id=clone.pk)

    return clone


@transaction.atomic
def duplicate_item(item: MenuItem) -> MenuItem:
    """Insert a deep copy of `item` directly after it among its siblings."""
    lock_menu(item.menu_id)
    # Another writer may have shifted this item before we got the lock.
    item.refresh_from_db(fields=["order", "parent"])
    shifted = shift_siblings_after(item)
    clone = recursively_duplicate(item, parent_id=item.parent_id, order=item.order + 1)

    logger.info(
        "Duplicated menu item %s as %s (shifted %d sibling(s))", item.pk, clone.pk, shifted
    )
    return clone
