from .menu import Menu
from .menu_item import MenuItem
