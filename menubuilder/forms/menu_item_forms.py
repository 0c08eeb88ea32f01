from django import forms
from django.core.exceptions import ValidationError

from menubuilder.linktypes import registry
from menubuilder.models import MenuItem
from menubuilder.services.tree import descendant_ids


def link_class_choices():
    return [(path, link_type.get_name()) for path, link_type in registry.resolved()]


class MenuItemForm(forms.ModelForm):
    # Must be sent on create, even if empty/false.
    PRESENT_FIELDS = ("value", "enabled")

    class Meta:
        model = MenuItem
        fields = ["menu", "parent", "name", "link_class", "value", "target", "enabled", "parameters", "data"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["link_class"].widget = forms.Select(choices=link_class_choices())
        self.fields["target"].required = False
        if self.instance.pk:
            # An item never moves to another menu.
            self.fields["menu"].disabled = True

    def clean_target(self):
        return self.cleaned_data.get("target") or MenuItem.Target.SELF

    def clean_parameters(self):
        # "" / {} / [] all mean "no parameters"; store NULL, never an empty string.
        return self.cleaned_data.get("parameters") or None

    def clean_link_class(self):
        path = self.cleaned_data["link_class"]
        # An item whose type has since been unregistered can still be edited.
        if self.instance.pk and "link_class" not in self.changed_data:
            return path
        if registry.resolve(path) is None:
            raise ValidationError(f"Unknown menu item type: {path}")
        return path

    def clean(self):
        cleaned = super().clean()

        if not self.instance.pk:
            for key in self.PRESENT_FIELDS:
                if key not in self.data:
                    self.add_error(key, "This field must be present.")

        menu = cleaned.get("menu")
        parent = cleaned.get("parent")
        if menu and parent:
            if parent.menu_id != menu.pk:
                self.add_error("parent", "Parent must belong to the same menu.")
            elif self.instance.pk and self._would_create_cycle(parent):
                self.add_error("parent", "An item cannot be placed under itself or its children.")

        link_type = registry.resolve(cleaned.get("link_class") or "")
        if link_type is not None:
            try:
                link_type.validate(cleaned.get("value"), cleaned.get("data"))
            except ValidationError as e:
                self.add_error(None, e)

        return cleaned

    def _would_create_cycle(self, parent):
        return parent.pk == self.instance.pk or parent.pk in descendant_ids(self.instance)
