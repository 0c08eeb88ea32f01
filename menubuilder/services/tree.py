"""Reading, reordering and deleting whole menu trees."""

import logging
from collections import defaultdict

from django.core.exceptions import ValidationError
from django.db import transaction

from menubuilder.exceptions import ItemNotFound
from menubuilder.linktypes import registry
from menubuilder.models import Menu, MenuItem

from .ordering import lock_menu

logger = logging.getLogger(__name__)

# Deeper submissions are rejected before any recursive walk.
MAX_TREE_DEPTH = 50


def _children_by_parent(menu: Menu):
    """Load every item of the menu once, grouped by parent id."""
    by_parent = defaultdict(list)
    for item in menu.items.order_by("order", "id"):
        by_parent[item.parent_id].append(item)
    return by_parent


def _serialize(item, by_parent):
    data = item.to_dict()
    data["children"] = [_serialize(child, by_parent) for child in by_parent.get(item.id, [])]
    return data


def root_items(menu: Menu):
    """Root items of a menu with nested children, as plain dicts.

    Roots whose link class is not registered (or no longer imports) are left
    out.
    """
    by_parent = _children_by_parent(menu)
    return [
        _serialize(item, by_parent)
        for item in by_parent.get(None, [])
        if registry.resolve(item.link_class) is not None
    ]


def _walk_ids(forest):
    for node in forest:
        yield node["id"]
        yield from _walk_ids(node.get("children") or [])


def validate_forest(menu: Menu, forest):
    """Check a submitted tree before it is written.

    Shape: list of {"id": int, "children": [...]} objects. Every id must
    exist in `menu` and appear only once.
    """
    def check_shape(nodes, path, depth=1):
        if depth > MAX_TREE_DEPTH:
            raise ValidationError({"menuItems": [f"Tree is nested deeper than {MAX_TREE_DEPTH} levels."]})
        if not isinstance(nodes, list):
            raise ValidationError({"menuItems": [f"{path} must be a list."]})
        for idx, node in enumerate(nodes):
            here = f"{path}[{idx}]"
            if not isinstance(node, dict) or "id" not in node:
                raise ValidationError({"menuItems": [f"{here} must be an object with an id."]})
            if not isinstance(node["id"], int) or isinstance(node["id"], bool):
                raise ValidationError({"menuItems": [f"{here}.id must be an integer."]})
            check_shape(node.get("children") or [], f"{here}.children", depth + 1)

    check_shape(forest, "menuItems")

    ids = list(_walk_ids(forest))
    if len(ids) != len(set(ids)):
        raise ValidationError({"menuItems": ["An item can only appear once in the tree."]})

    known = set(MenuItem.objects.filter(menu=menu, pk__in=ids).values_list("pk", flat=True))
    foreign = [pk for pk in ids if pk not in known]
    if foreign:
        raise ValidationError(
            {"menuItems": [f"Items not in menu {menu.pk}: {', '.join(map(str, foreign))}"]}
        )


def _save_with_order(order, node, parent_id=None):
    try:
        item = MenuItem.objects.get(pk=node["id"])
    except MenuItem.DoesNotExist:
        raise ItemNotFound(f"Menu item {node['id']} does not exist")

    item.order = order
    item.parent_id = parent_id
    item.save(update_fields=["order", "parent", "updated_at"])

    for position, child in enumerate(node.get("children") or [], start=1):
        _save_with_order(position, child, item.id)


@transaction.atomic
def save_tree(menu: Menu, forest):
    """Rewrite order and parent of every node in `forest`.

    Siblings get 1..N in submission order. Writes happen top-down in
    descriptor order, one per node, inside a single transaction.
    """
    lock_menu(menu.pk)
    for position, node in enumerate(forest, start=1):
        _save_with_order(position, node)

    logger.info("Saved tree of menu %s with %d root item(s)", menu.pk, len(forest))


def descendant_ids(item: MenuItem):
    """Ids of every transitive child of `item` (not including item itself)."""
    found = []
    frontier = [item.pk]
    while frontier:
        frontier = list(MenuItem.objects.filter(parent_id__in=frontier).values_list("pk", flat=True))
        found.extend(frontier)
    return found


@transaction.atomic
def delete_item(item: MenuItem) -> int:
    """Delete an item together with its whole subtree.

    Returns the number of deleted items.
    """
    ids = descendant_ids(item)
    # Listing every id lets the collector write one history row per item.
    MenuItem.objects.filter(pk__in=[item.pk, *ids]).delete()
    logger.info("Deleted menu item %s and %d descendant(s)", item.pk, len(ids))
    return len(ids) + 1
