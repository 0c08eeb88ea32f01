from .base import MenuLinkable
from .registry import LinkTypeRegistry, load_link_type

# Process-wide registry, filled by MenuBuilderConfig.ready()
registry = LinkTypeRegistry()
