"""Collapsible groups flattened into a single slot sequence.

A GroupManager owns an ordered list of Groups and derives the flat slot list
the Viewport addresses: one header slot per group, followed by one leaf slot
per item when the group is expanded. The flat list is rebuilt from scratch
after every structural change.

Expansion changes keep the cursor anchored to the slot it pointed at: a header
stays on its header, a leaf stays on its leaf while visible and falls back to
its group's header once hidden.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .types import NOT_FOUND, Item, Slot

logger = logging.getLogger(__name__)


class Group:
    """Titled, collapsible run of items.

    Items are kept in insertion order; the same object is never held twice.
    """

    def __init__(self, title: str, items: Iterable[Item] = (), expanded: bool = True):
        self.title = title
        self.expanded = expanded
        self._items: list[Item] = []
        self.set_items(items)

    def __repr__(self) -> str:
        return f"Group(title={self.title!r}, items={len(self._items)}, expanded={self.expanded})"

    @property
    def items(self) -> list[Item]:
        return list(self._items)

    def set_items(self, items: Iterable[Item]) -> None:
        self._items = []
        for item in items:
            self.add_item(item)

    def add_item(self, item: Item) -> None:
        if any(existing is item for existing in self._items):
            return
        self._items.append(item)

    def item_count(self) -> int:
        return len(self._items)

    def set_expanded(self, expanded: bool) -> None:
        self.expanded = expanded

    def toggle(self) -> None:
        self.expanded = not self.expanded


class GroupManager:
    """Groups plus their flattened view and a cursor into it."""

    def __init__(self, groups: Iterable[Group] | None = None):
        self._groups: list[Group] = []
        self._slots: list[Slot] = []
        self._cursor = 0
        if groups is not None:
            self.set_groups(groups)

    # ── structure ─────────────────────────────────────────────────────────

    @property
    def groups(self) -> list[Group]:
        return list(self._groups)

    def set_groups(self, groups: Iterable[Group]) -> None:
        """Replace every group, rebuild and clamp the cursor."""
        self._groups = list(groups)
        self._flatten()
        self.clamp_cursor()

    def add_group(self, group: Group) -> None:
        self._groups.append(group)
        self._flatten()
        self.clamp_cursor()

    def clear(self) -> None:
        self._groups = []
        self._slots = []
        self._cursor = 0

    def refresh(self) -> None:
        """Rebuild after a group's items were changed in place."""
        self._reflow()

    def _flatten(self) -> None:
        slots: list[Slot] = []
        for gi, group in enumerate(self._groups):
            slots.append(Slot(True, gi, -1))
            if group.expanded:
                slots.extend(Slot(False, gi, li) for li in range(group.item_count()))
        self._slots = slots
        logger.debug("flattened %d groups into %d slots", len(self._groups), len(slots))

    def _reflow(self) -> None:
        """Re-flatten while keeping the cursor on the same logical slot."""
        anchor = self.get_item_at(self._cursor)
        self._flatten()
        if anchor == NOT_FOUND:
            self.clamp_cursor()
            return
        try:
            self._cursor = self._slots.index(anchor)
        except ValueError:
            self._cursor = self.header_index(anchor.group_index)
        self.clamp_cursor()

    # ── counts ────────────────────────────────────────────────────────────

    def count(self) -> int:
        """Number of flat slots (headers plus visible items)."""
        return len(self._slots)

    def visible_item_count(self) -> int:
        return sum(1 for slot in self._slots if not slot.is_header)

    def total_item_count(self) -> int:
        return sum(group.item_count() for group in self._groups)

    def group_count(self) -> int:
        return len(self._groups)

    def expanded_group_count(self) -> int:
        return sum(1 for group in self._groups if group.expanded)

    # ── cursor ────────────────────────────────────────────────────────────

    @property
    def cursor(self) -> int:
        return self._cursor

    def set_cursor(self, cursor: int) -> None:
        self._cursor = cursor
        self.clamp_cursor()

    def move_up(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def move_down(self) -> None:
        if self._cursor < len(self._slots) - 1:
            self._cursor += 1

    def clamp_cursor(self) -> None:
        if not self._slots:
            self._cursor = 0
        else:
            self._cursor = max(0, min(self._cursor, len(self._slots) - 1))

    def is_at_group(self) -> bool:
        slot = self.get_item_at(self._cursor)
        return slot.is_header

    def is_at_item(self) -> bool:
        slot = self.get_item_at(self._cursor)
        return slot != NOT_FOUND and not slot.is_header

    def current_group_index(self) -> int:
        return self.get_item_at(self._cursor).group_index

    def current_group(self) -> Group | None:
        """Group owning the cursor slot (header or leaf), or None."""
        gi = self.current_group_index()
        return self._groups[gi] if 0 <= gi < len(self._groups) else None

    def current_item(self) -> Item | None:
        """Item under the cursor, or None when on a header or out of range."""
        return self._item_for(self.get_item_at(self._cursor))

    # ── expansion ─────────────────────────────────────────────────────────

    def toggle_group_at(self, group_index: int) -> None:
        if 0 <= group_index < len(self._groups):
            self._groups[group_index].toggle()
            self._reflow()

    def toggle_current_group(self) -> None:
        """Toggle the group whose header is under the cursor (else no-op)."""
        if not self.is_at_group():
            return
        self.toggle_group_at(self.current_group_index())

    def expand_group(self, group_index: int) -> None:
        if 0 <= group_index < len(self._groups):
            self._groups[group_index].set_expanded(True)
            self._reflow()

    def collapse_group(self, group_index: int) -> None:
        if 0 <= group_index < len(self._groups):
            self._groups[group_index].set_expanded(False)
            self._reflow()

    def expand_all(self) -> None:
        for group in self._groups:
            group.set_expanded(True)
        self._reflow()

    def collapse_all(self) -> None:
        for group in self._groups:
            group.set_expanded(False)
        self._reflow()

    # ── lookup ────────────────────────────────────────────────────────────

    def get_item_at(self, index: int) -> Slot:
        """Slot at a flat index, or NOT_FOUND when out of range."""
        if 0 <= index < len(self._slots):
            return self._slots[index]
        return NOT_FOUND

    def all_items(self) -> list[Item]:
        """Every visible (non-header) item in flat order."""
        items = []
        for slot in self._slots:
            item = self._item_for(slot)
            if item is not None:
                items.append(item)
        return items

    def find_item_id(self, item_id: str) -> int:
        for i, slot in enumerate(self._slots):
            item = self._item_for(slot)
            if item is not None and item.id == item_id:
                return i
        return -1

    def header_index(self, group_index: int) -> int:
        """Flat index of a group's header slot, or -1."""
        for i, slot in enumerate(self._slots):
            if slot.is_header and slot.group_index == group_index:
                return i
        return -1

    def find_group_title(self, title: str) -> int:
        for i, slot in enumerate(self._slots):
            if slot.is_header and self._groups[slot.group_index].title == title:
                return i
        return -1

    def _item_for(self, slot: Slot) -> Item | None:
        if slot.is_header or not 0 <= slot.group_index < len(self._groups):
            return None
        items = self._groups[slot.group_index]._items
        if 0 <= slot.item_index < len(items):
            return items[slot.item_index]
        return None
