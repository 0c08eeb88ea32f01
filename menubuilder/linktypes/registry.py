import logging

from django.utils.module_loading import import_string

from .base import MenuLinkable

logger = logging.getLogger(__name__)


def load_link_type(path):
    """Import a link type by dotted path. Returns None if it cannot be used."""
    try:
        obj = import_string(path)
    except ImportError:
        logger.debug("Link type %s cannot be imported", path)
        return None

    if not (isinstance(obj, type) and issubclass(obj, MenuLinkable)):
        logger.debug("Link type %s is not a MenuLinkable", path)
        return None
    return obj


class LinkTypeRegistry:
    """Registered link type paths, in registration order.

    Populated once from settings when the app is ready. Paths are stored as
    given; a path whose class has since disappeared stays registered but
    resolves to None.
    """

    def __init__(self, paths=()):
        self._paths = tuple(dict.fromkeys(paths))

    def populate(self, paths):
        self._paths = tuple(dict.fromkeys(paths))

    @property
    def paths(self):
        return self._paths

    def is_registered(self, path) -> bool:
        return path in self._paths

    def resolve(self, path):
        if not self.is_registered(path):
            return None
        return load_link_type(path)

    def resolved(self):
        """Yield (path, link type) for every registered path that resolves."""
        for path in self._paths:
            link_type = load_link_type(path)
            if link_type is None:
                continue
            yield path, link_type
