"""App settings, read from the single ``MENU_BUILDER`` dict in Django settings."""

from django.conf import settings

DEFAULTS = {
    "LINK_TYPES": [
        "menubuilder.linktypes.builtin.StaticURL",
        "menubuilder.linktypes.builtin.InternalRoute",
        "menubuilder.linktypes.builtin.TextItem",
    ],
}


def get_setting(name):
    user_settings = getattr(settings, "MENU_BUILDER", {})
    if name in user_settings:
        return user_settings[name]
    return DEFAULTS[name]
