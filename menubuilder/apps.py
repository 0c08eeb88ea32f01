from django.apps import AppConfig


class MenuBuilderConfig(AppConfig):
    name = "menubuilder"
    label = "menubuilder"
    verbose_name = "Menu builder"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self):
        from menubuilder.conf import get_setting
        from menubuilder.linktypes import registry

        registry.populate(get_setting("LINK_TYPES"))
