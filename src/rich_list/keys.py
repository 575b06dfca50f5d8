"""Keyboard input helpers for rich_list.

Translates raw readchar keys into symbolic key names ("up", "pgdown",
"ctrl+a", "enter", ...) and maps those names onto semantic list Actions via a
configurable KeyMap.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace

import readchar

from .types import Action


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations)."""
    return key in (readchar.key.ESC, "\x1b", "\x1b\x1b")


def is_exit(key: str) -> bool:
    """Check if key is a quit key (q only)."""
    return key.lower() == "q"


def is_up(key: str) -> bool:
    """Check if key is up arrow or vim 'k'."""
    return key == "k" or key == readchar.key.UP


def is_down(key: str) -> bool:
    """Check if key is down arrow or vim 'j'."""
    return key == "j" or key == readchar.key.DOWN


def is_backspace(key: str) -> bool:
    """Check if key is backspace (handles terminal variations)."""
    return key in (readchar.key.BACKSPACE, "\x7f", "\b")


def is_space(key: str) -> bool:
    """Check if key is space."""
    return key == " "


def is_select(key: str) -> bool:
    """Check if key is a selection key (Enter or Space)."""
    return is_enter(key) or is_space(key)


def is_printable(key: str) -> bool:
    """Check if key is a single printable character (filter input)."""
    return len(key) == 1 and key.isprintable()


_NAMED_KEYS = {
    readchar.key.UP: "up",
    readchar.key.DOWN: "down",
    readchar.key.LEFT: "left",
    readchar.key.RIGHT: "right",
    readchar.key.PAGE_UP: "pgup",
    readchar.key.PAGE_DOWN: "pgdown",
    readchar.key.HOME: "home",
    readchar.key.END: "end",
    readchar.key.SUPR: "delete",
    readchar.key.TAB: "tab",
    " ": " ",
}


def key_name(key: str) -> str:
    """Return the symbolic name for a raw readchar key.

    Printable characters map to themselves, control characters to
    ``ctrl+<letter>``, and unknown escape sequences are returned unchanged.
    """
    if is_enter(key):
        return "enter"
    if is_escape(key):
        return "esc"
    if is_backspace(key):
        return "backspace"
    if key in _NAMED_KEYS:
        return _NAMED_KEYS[key]
    if len(key) == 1 and 1 <= ord(key) <= 26:
        return f"ctrl+{chr(ord(key) + 96)}"
    return key


@dataclass
class KeyMap:
    """Key names bound to each list action.

    Fields are checked in declaration order by ``match_action``, so a key
    bound to several actions resolves to the first one.
    """

    # Navigation
    up: list[str] = field(default_factory=lambda: ["up", "k"])
    down: list[str] = field(default_factory=lambda: ["down", "j"])
    left: list[str] = field(default_factory=lambda: ["left", "h"])
    right: list[str] = field(default_factory=lambda: ["right", "l"])
    page_up: list[str] = field(default_factory=lambda: ["pgup", "ctrl+u"])
    page_down: list[str] = field(default_factory=lambda: ["pgdown", "ctrl+d"])
    home: list[str] = field(default_factory=lambda: ["home", "g"])
    end: list[str] = field(default_factory=lambda: ["end", "G"])

    # Selection
    select: list[str] = field(default_factory=list)
    deselect: list[str] = field(default_factory=list)
    toggle_select: list[str] = field(default_factory=lambda: [" ", "enter"])
    select_all: list[str] = field(default_factory=lambda: ["ctrl+a"])
    deselect_all: list[str] = field(default_factory=lambda: ["ctrl+x"])
    invert_select: list[str] = field(default_factory=lambda: ["tab"])

    # Actions
    confirm: list[str] = field(default_factory=lambda: ["enter"])
    cancel: list[str] = field(default_factory=lambda: ["esc"])
    delete: list[str] = field(default_factory=lambda: ["d", "delete"])
    edit: list[str] = field(default_factory=lambda: ["e"])
    new: list[str] = field(default_factory=lambda: ["n", "ctrl+n"])

    # Filter
    filter: list[str] = field(default_factory=lambda: ["/"])
    filter_clear: list[str] = field(default_factory=lambda: ["esc"])

    # Groups
    toggle_group: list[str] = field(default_factory=lambda: ["enter", " "])
    expand_all: list[str] = field(default_factory=lambda: ["ctrl+e"])
    collapse_all: list[str] = field(default_factory=lambda: ["ctrl+w"])

    # System
    help: list[str] = field(default_factory=lambda: ["?", "ctrl+g"])
    quit: list[str] = field(default_factory=lambda: ["q", "ctrl+c"])

    def match_action(self, key: str) -> Action:
        """Return the action bound to a key name, or Action.NONE."""
        for name, action in _FIELD_ACTIONS:
            if key in getattr(self, name):
                return action
        return Action.NONE

    def with_overrides(self, overrides: dict[str, list[str] | str]) -> "KeyMap":
        """Return a copy with some bindings replaced; unknown names are ignored."""
        known = {f.name for f in fields(self)}
        changes = {}
        for name, keys in overrides.items():
            if name not in known:
                continue
            changes[name] = [keys] if isinstance(keys, str) else list(keys)
        return replace(self, **changes)

    def bindings(self) -> dict[str, list[str]]:
        return {f.name: list(getattr(self, f.name)) for f in fields(self)}


_FIELD_ACTIONS: tuple[tuple[str, Action], ...] = (
    ("up", Action.MOVE_UP),
    ("down", Action.MOVE_DOWN),
    ("left", Action.MOVE_LEFT),
    ("right", Action.MOVE_RIGHT),
    ("page_up", Action.PAGE_UP),
    ("page_down", Action.PAGE_DOWN),
    ("home", Action.MOVE_TO_TOP),
    ("end", Action.MOVE_TO_BOTTOM),
    ("select", Action.SELECT),
    ("deselect", Action.DESELECT),
    ("toggle_select", Action.TOGGLE_SELECTION),
    ("select_all", Action.SELECT_ALL),
    ("deselect_all", Action.DESELECT_ALL),
    ("invert_select", Action.INVERT_SELECTION),
    ("confirm", Action.CONFIRM),
    ("cancel", Action.CANCEL),
    ("delete", Action.DELETE),
    ("edit", Action.EDIT),
    ("new", Action.NEW),
    ("filter", Action.FILTER),
    ("filter_clear", Action.FILTER_CLEAR),
    ("toggle_group", Action.TOGGLE_GROUP),
    ("expand_all", Action.EXPAND_ALL),
    ("collapse_all", Action.COLLAPSE_ALL),
    ("help", Action.HELP),
    ("quit", Action.QUIT),
)


def default_keymap() -> KeyMap:
    """Return a fresh KeyMap with the stock bindings."""
    return KeyMap()
