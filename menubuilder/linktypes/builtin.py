from urllib.parse import urlencode

from django.core.exceptions import ValidationError
from django.utils import translation
from django.utils.translation import gettext_lazy as _

from menubuilder.utils.url_choices import discover_named_urls

from .base import MenuLinkable


class StaticURL(MenuLinkable):
    """Free-form URL: absolute (https://...), site-relative (/about/) or an anchor."""

    name = _("Static URL")
    type = "static-url"

    @classmethod
    def get_value(cls, value, data=None, parameters=None):
        if not value:
            return None
        if isinstance(parameters, dict) and parameters:
            sep = "&" if "?" in value else "?"
            return f"{value}{sep}{urlencode(parameters)}"
        return value

    @classmethod
    def validate(cls, value, data=None):
        super().validate(value, data)
        if not value:
            raise ValidationError({"value": ["A URL is required."]})


class InternalRoute(MenuLinkable):
    """A named route of this project, picked from a select box."""

    name = _("Internal route")
    type = "select"

    @classmethod
    def get_options(cls, locale):
        with translation.override(locale):
            return {path: label for path, label in discover_named_urls()}

    @classmethod
    def validate(cls, value, data=None):
        super().validate(value, data)
        if not value:
            raise ValidationError({"value": ["Choose a route."]})


class TextItem(MenuLinkable):
    """Plain label without a link, e.g. a heading for a group of children."""

    name = _("Text")
    type = "text"
    fields = (
        {"name": "description", "label": _("Description"), "type": "text", "required": False},
    )

    @classmethod
    def get_value(cls, value, data=None, parameters=None):
        return None
