"""Scrollable, filterable, grouped selection lists for terminal UIs.

The engine (Viewport, Filter, GroupManager, SelectionManager) keeps cursor,
scroll window, grouping and selection consistent; FilterGroupList is a
ready-made Rich.Live consumer built on top of it.

Example:
    from rich_list import FilterGroupList, Group, ListItem

    picker = FilterGroupList(
        title="Fruit",
        groups=[
            Group("Apples", [ListItem("f1", "Fuji Apple", "Red apple from Japan")]),
            Group("Citrus", [ListItem("c1", "Navel Orange", "Seedless orange")]),
        ],
    )
    selected_ids = picker.show()  # ["f1"]
"""

__version__ = "0.1.0"

from .components import ExpandableItem, ListItem, SectionItem, SelectableItem
from .filtering import Filter
from .group import Group, GroupManager
from .keys import (
    KeyMap,
    default_keymap,
    is_backspace,
    is_down,
    is_enter,
    is_escape,
    is_exit,
    is_select,
    is_space,
    is_up,
    key_name,
)
from .selection import SelectionManager
from .themes import DEFAULT_THEME, Theme
from .types import (
    NOT_FOUND,
    Action,
    FilterableItem,
    Item,
    MatchAware,
    SelectionMode,
    Slot,
)
from .viewport import Viewport
from .widget import FilterGroupList

__all__ = [
    # Engine
    "Viewport",
    "Filter",
    "Group",
    "GroupManager",
    "SelectionManager",
    # Types
    "Action",
    "SelectionMode",
    "Item",
    "FilterableItem",
    "MatchAware",
    "Slot",
    "NOT_FOUND",
    # Components
    "ListItem",
    "SectionItem",
    "SelectableItem",
    "ExpandableItem",
    # Widget
    "FilterGroupList",
    # Theming
    "Theme",
    "DEFAULT_THEME",
    # Keys
    "KeyMap",
    "default_keymap",
    "key_name",
    "is_enter",
    "is_escape",
    "is_exit",
    "is_up",
    "is_down",
    "is_backspace",
    "is_space",
    "is_select",
]
