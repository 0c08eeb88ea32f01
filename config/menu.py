from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _

MENUBUILDER_APP_LABEL = "menubuilder"
AUTH_APP_LABEL = "auth"


def admin_changelist(app_label: str, model: str):
    """
    model must be the lowercase model name used by Django admin url patterns.
    Examples:
      admin:menubuilder_menu_changelist
      admin:menubuilder_menuitem_changelist
      admin:auth_user_changelist
    """
    return reverse_lazy(f"admin:{app_label}_{model}_changelist")


UNFOLD = {
    "SITE_HEADER": "Menu Builder",
    "SITE_TITLE": "Menu Builder",
    "SITE_URL": "/",

    "SIDEBAR": {
        "show_search": True,
        "show_all_applications": False,
        "navigation": [
            {
                "title": _("Navigation"),
                "separator": True,
                "collapsible": True,
                "items": [
                    {"title": _("Menus"), "icon": "menu", "link": admin_changelist(MENUBUILDER_APP_LABEL, "menu")},
                    {"title": _("Menu items"), "icon": "account_tree", "link": admin_changelist(MENUBUILDER_APP_LABEL, "menuitem")},
                ],
            },
            {
                "title": _("Users & Permissions"),
                "collapsible": True,
                "items": [
                    {"title": _("Users"), "icon": "manage_accounts", "link": admin_changelist(AUTH_APP_LABEL, "user")},
                    {"title": _("Groups"), "icon": "admin_panel_settings", "link": admin_changelist(AUTH_APP_LABEL, "group")},
                ],
            },
        ],
    },
}
