import pytest
from django.core.exceptions import ValidationError

from menubuilder.exceptions import ItemNotFound, MenuNotFound
from menubuilder.services.items import create_item, get_item, get_menu, update_item

from .conftest import STATIC_URL, TEXT


def item_payload(menu, **overrides):
    data = {
        "menu": menu.pk,
        "class": STATIC_URL,
        "name": "Home",
        "value": "/",
        "enabled": True,
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestCreateItem:
    def test_empty_parameters_stored_as_null(self, menu):
        item = create_item(item_payload(menu, parameters=""))

        item.refresh_from_db()
        assert item.parameters is None

    @pytest.mark.parametrize("empty", [{}, [], None])
    def test_other_empty_parameters_stored_as_null(self, menu, empty):
        item = create_item(item_payload(menu, parameters=empty))
        assert item.parameters is None

    def test_keeps_real_parameters(self, menu):
        item = create_item(item_payload(menu, parameters={"ref": "nav"}))
        item.refresh_from_db()
        assert item.parameters == {"ref": "nav"}

    def test_appended_to_root_group(self, menu, make_item):
        make_item("A", 1)
        make_item("B", 5)

        item = create_item(item_payload(menu))

        assert item.order == 6
        assert item.parent_id is None

    def test_appended_to_parent_group(self, menu, make_item):
        root = make_item("Root", 10)
        make_item("Child", 1, parent=root)

        item = create_item(item_payload(menu, parent=root.pk))

        assert (item.parent_id, item.order) == (root.pk, 2)

    def test_first_item_gets_order_one(self, menu):
        assert create_item(item_payload(menu)).order == 1

    def test_defaults_target(self, menu):
        assert create_item(item_payload(menu)).target == "_self"

    def test_records_history(self, menu):
        item = create_item(item_payload(menu))
        assert item.history.count() == 1

    @pytest.mark.parametrize("field", ["class", "name", "menu"])
    def test_required_fields(self, menu, field):
        data = item_payload(menu)
        del data[field]

        with pytest.raises(ValidationError):
            create_item(data)

    @pytest.mark.parametrize("field", ["value", "enabled"])
    def test_fields_must_be_present(self, menu, field):
        data = item_payload(menu, **{"class": TEXT})
        del data[field]

        with pytest.raises(ValidationError) as exc:
            create_item(data)
        assert field in exc.value.message_dict

    def test_present_but_empty_value_is_fine_for_text(self, menu):
        item = create_item(item_payload(menu, **{"class": TEXT, "value": "", "enabled": False}))
        assert item.value == ""
        assert item.enabled is False

    def test_static_url_needs_value(self, menu):
        with pytest.raises(ValidationError) as exc:
            create_item(item_payload(menu, value=""))
        assert "value" in exc.value.message_dict

    def test_empty_name_rejected(self, menu):
        with pytest.raises(ValidationError):
            create_item(item_payload(menu, name=""))

    def test_unknown_class_rejected(self, menu):
        with pytest.raises(ValidationError) as exc:
            create_item(item_payload(menu, **{"class": "nowhere.LinkType"}))
        assert "link_class" in exc.value.message_dict

    def test_parent_from_other_menu_rejected(self, menu, other_menu, make_item):
        foreign = make_item("Foreign", 1, in_menu=other_menu)

        with pytest.raises(ValidationError) as exc:
            create_item(item_payload(menu, parent=foreign.pk))
        assert "parent" in exc.value.message_dict


@pytest.mark.django_db
class TestUpdateItem:
    def test_overwrites_only_supplied_fields(self, menu, make_item):
        item = make_item("Old", 3, value="/old/", parameters={"a": 1})

        update_item(item, {"name": "New"})

        item.refresh_from_db()
        assert item.name == "New"
        assert item.value == "/old/"
        assert item.parameters == {"a": 1}
        assert item.order == 3

    def test_empty_parameters_normalized(self, menu, make_item):
        item = make_item("Item", 1, parameters={"a": 1})

        update_item(item, {"parameters": ""})

        item.refresh_from_db()
        assert item.parameters is None

    def test_menu_cannot_change(self, menu, other_menu, make_item):
        item = make_item("Item", 1)

        update_item(item, {"menu": other_menu.pk})

        item.refresh_from_db()
        assert item.menu_id == menu.pk

    def test_new_parent_appends_to_its_group(self, menu, make_item):
        root = make_item("Root", 1)
        make_item("Existing", 1, parent=root)
        item = make_item("Mover", 2)

        update_item(item, {"parent": root.pk})

        item.refresh_from_db()
        assert (item.parent_id, item.order) == (root.pk, 2)

    def test_cannot_move_under_own_child(self, menu, make_item):
        root = make_item("Root", 1)
        child = make_item("Child", 1, parent=root)

        with pytest.raises(ValidationError) as exc:
            update_item(root, {"parent": child.pk})
        assert "parent" in exc.value.message_dict

    def test_cannot_be_own_parent(self, menu, make_item):
        item = make_item("Item", 1)

        with pytest.raises(ValidationError):
            update_item(item, {"parent": item.pk})

    def test_class_key_is_mapped(self, menu, make_item):
        item = make_item("Item", 1)

        update_item(item, {"class": TEXT, "value": ""})

        item.refresh_from_db()
        assert item.link_class == TEXT

    def test_item_with_unregistered_class_can_be_renamed(self, menu, make_item):
        item = make_item("Old", 1, link_class="gone.LinkType")

        update_item(item, {"name": "Renamed", "enabled": False})

        item.refresh_from_db()
        assert (item.name, item.enabled, item.link_class) == ("Renamed", False, "gone.LinkType")

    def test_switching_to_unknown_class_rejected(self, menu, make_item):
        item = make_item("Item", 1)

        with pytest.raises(ValidationError) as exc:
            update_item(item, {"class": "nowhere.LinkType"})
        assert "link_class" in exc.value.message_dict


@pytest.mark.django_db
class TestLookups:
    def test_get_menu(self, menu):
        assert get_menu(menu.pk) == menu

    def test_missing_menu(self, db):
        with pytest.raises(MenuNotFound):
            get_menu(424242)

    def test_get_item(self, make_item):
        item = make_item("Item", 1)
        assert get_item(item.pk) == item

    def test_missing_item(self, db):
        with pytest.raises(ItemNotFound):
            get_item(424242)
