from menubuilder.linktypes import registry


def list_item_types(locale):
    """Describe every usable link type for the editor.

    Registered paths that do not resolve are skipped. "options" is only
    present for types that implement get_options(locale).
    """
    item_types = []
    for path, link_type in registry.resolved():
        data = {
            "name": link_type.get_name(),
            "type": link_type.get_type(),
            "fields": link_type.get_fields() or [],
            "class": path,
        }
        if hasattr(link_type, "get_options"):
            data["options"] = link_type.get_options(locale)
        item_types.append(data)
    return item_types
