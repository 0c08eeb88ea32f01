from django.core.exceptions import ValidationError


class MenuLinkable:
    """Base class for everything a menu item can point to.

    Subclasses set ``name``, ``type`` and optionally ``fields``. A subclass
    that offers a fixed set of values (e.g. a select box) also defines
    ``get_options(locale)``; its presence is what the editor looks for.
    """

    name = None
    type = "static-url"

    # Extra inputs shown in the editor. Values end up in MenuItem.data.
    # Each entry: {"name": ..., "label": ..., "type": ..., "required": bool}
    fields = ()

    @classmethod
    def get_name(cls):
        return str(cls.name or cls.__name__)

    @classmethod
    def get_type(cls):
        return cls.type

    @classmethod
    def get_fields(cls):
        return [
            {**field, "label": str(field.get("label", field["name"]))}
            for field in cls.fields
        ]

    @classmethod
    def get_value(cls, value, data=None, parameters=None):
        """Resolve the stored value into the href rendered on the site."""
        return value or None

    @classmethod
    def validate(cls, value, data=None):
        """Raise ValidationError if value/data are not acceptable for this type."""
        required = [f["name"] for f in cls.fields if f.get("required")]
        missing = [name for name in required if not (data or {}).get(name)]
        if missing:
            raise ValidationError(
                {"data": [f"Missing required field: {name}" for name in missing]}
            )
