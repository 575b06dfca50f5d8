"""Type definitions for rich_list.

Shared enums, item capability protocols and the slot record produced by
group flattening. Items only ever need an ``id``; the richer capabilities are
probed with ``isinstance`` where they are used.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple, Protocol, runtime_checkable


# ── enums ─────────────────────────────────────────────────────────────────


class SelectionMode(str, Enum):
    """How a SelectionManager treats repeated selects."""

    NONE = "none"
    SINGLE = "single"
    MULTIPLE = "multiple"

    def __str__(self) -> str:
        return self.value


class Action(Enum):
    """Semantic list actions a widget maps key presses onto."""

    NONE = auto()

    # Navigation
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    MOVE_TO_TOP = auto()
    MOVE_TO_BOTTOM = auto()

    # Selection
    SELECT = auto()
    DESELECT = auto()
    TOGGLE_SELECTION = auto()
    SELECT_ALL = auto()
    DESELECT_ALL = auto()
    INVERT_SELECTION = auto()

    # Item actions
    CONFIRM = auto()
    CANCEL = auto()
    DELETE = auto()
    EDIT = auto()
    NEW = auto()

    # Filter
    FILTER = auto()
    FILTER_CLEAR = auto()

    # Groups
    TOGGLE_GROUP = auto()
    EXPAND_ALL = auto()
    COLLAPSE_ALL = auto()

    # System
    HELP = auto()
    QUIT = auto()


# ── item capabilities ─────────────────────────────────────────────────────


@runtime_checkable
class Item(Protocol):
    """Anything with a stable, unique string id."""

    id: str


@runtime_checkable
class FilterableItem(Protocol):
    """An item that exposes the text a filter query is matched against."""

    id: str

    def filter_value(self) -> str: ...


@runtime_checkable
class MatchAware(Protocol):
    """An item that wants every match offset for highlighting."""

    def set_match_indexes(self, indexes: list[int]) -> None: ...


# ── flattening ────────────────────────────────────────────────────────────


class Slot(NamedTuple):
    """One addressable position in a flattened group sequence.

    Attributes:
        is_header: True for a group header, False for a leaf item.
        group_index: Index of the owning group (-1 when not found).
        item_index: Index of the item inside its group (-1 for headers).
    """

    is_header: bool
    group_index: int
    item_index: int


NOT_FOUND = Slot(False, -1, -1)
