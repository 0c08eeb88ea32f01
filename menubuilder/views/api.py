import json
import logging
from functools import wraps

from django.contrib.admin.views.decorators import staff_member_required
from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from menubuilder.exceptions import ItemNotFound, MenuNotFound
from menubuilder.services import duplication, items, tree, types

logger = logging.getLogger(__name__)


class BadPayload(Exception):
    pass


def _payload(request):
    """Request body as a dict. JSON bodies are parsed, form posts flattened."""
    if request.content_type == "application/json":
        try:
            data = json.loads(request.body or b"{}")
        except (ValueError, RecursionError):
            raise BadPayload("Request body is not valid JSON")
        if not isinstance(data, dict):
            raise BadPayload("Request body must be a JSON object")
        return data
    return request.POST.dict()


def _success(**extra):
    return JsonResponse({"success": True, **extra})


def api_errors(view):
    """Map menu builder errors to JSON responses.

    Database errors are not caught here; they surface as a normal 500.
    """
    @wraps(view)
    def wrapper(request, *args, **kwargs):
        try:
            return view(request, *args, **kwargs)
        except (MenuNotFound, ItemNotFound) as e:
            return JsonResponse({"error": e.code}, status=404)
        except ValidationError as e:
            errors = e.message_dict if hasattr(e, "error_dict") else {"__all__": e.messages}
            return JsonResponse({"errors": errors}, status=422)
        except BadPayload as e:
            return JsonResponse({"error": "bad_request", "detail": str(e)}, status=400)
    return wrapper


@staff_member_required
@require_http_methods(["GET", "POST"])
@api_errors
def menu_items(request, menu_id: int):
    """GET: root items with nested children. POST: save the whole tree."""
    menu = items.get_menu(menu_id)

    if request.method == "GET":
        return JsonResponse(tree.root_items(menu), safe=False)

    forest = _payload(request).get("menuItems") or []
    tree.validate_forest(menu, forest)
    tree.save_tree(menu, forest)
    return _success()


@staff_member_required
@require_http_methods(["POST"])
@api_errors
def create_item(request):
    item = items.create_item(_payload(request))
    logger.info("Created menu item %s in menu %s", item.pk, item.menu_id)
    return _success(id=item.pk)


@staff_member_required
@require_http_methods(["GET"])
@api_errors
def get_item(request, pk: int):
    return JsonResponse(items.get_item(pk).to_dict())


@staff_member_required
@require_http_methods(["POST", "PUT"])
@api_errors
def update_item(request, pk: int):
    item = items.get_item(pk)
    items.update_item(item, _payload(request))
    return _success()


@staff_member_required
@require_http_methods(["POST", "DELETE"])
@api_errors
def delete_item(request, pk: int):
    item = items.get_item(pk)
    deleted = tree.delete_item(item)
    return _success(deleted=deleted)


@staff_member_required
@require_http_methods(["POST"])
@api_errors
def duplicate_item(request, pk: int):
    item = items.get_item(pk)
    clone = duplication.duplicate_item(item)
    return _success(id=clone.pk)


@staff_member_required
@require_http_methods(["GET"])
def item_types(request, locale: str):
    return JsonResponse(types.list_item_types(locale), safe=False)
