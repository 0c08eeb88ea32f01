import pytest

from menubuilder.models import Menu, MenuItem

STATIC_URL = "menubuilder.linktypes.builtin.StaticURL"
INTERNAL_ROUTE = "menubuilder.linktypes.builtin.InternalRoute"
TEXT = "menubuilder.linktypes.builtin.TextItem"


@pytest.fixture
def menu(db):
    return Menu.objects.create(name="Main", slug="main")


@pytest.fixture
def other_menu(db):
    return Menu.objects.create(name="Footer", slug="footer")


@pytest.fixture
def make_item(menu):
    """Create an item directly in the store, bypassing the services."""
    def _make(name, order, parent=None, in_menu=None, **fields):
        fields.setdefault("link_class", STATIC_URL)
        fields.setdefault("value", f"/{name.lower()}/")
        return MenuItem.objects.create(
            menu=in_menu or menu,
            parent=parent,
            name=name,
            order=order,
            **fields,
        )
    return _make


@pytest.fixture
def siblings():
    """(name, order) pairs of one sibling group, in order."""
    def _siblings(menu, parent=None):
        qs = MenuItem.objects.filter(menu=menu, parent=parent).order_by("order", "id")
        return [(item.name, item.order) for item in qs]
    return _siblings


@pytest.fixture
def editor(django_user_model):
    return django_user_model.objects.create_user(username="editor", password="secret", is_staff=True)


@pytest.fixture
def api_client(client, editor):
    client.force_login(editor)
    return client
