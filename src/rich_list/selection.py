"""Selection state keyed by item id.

Selection never refers to positions, so it survives filtering and group
collapse unchanged. Reconciling "selected but filtered out" items is left to
the consuming widget.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .types import Item, SelectionMode


class SelectionManager:
    """Set of selected item ids under a selection mode.

    In SINGLE mode at most one id is selected; selecting another evicts it.
    NONE mode ignores every select.
    """

    def __init__(self, mode: SelectionMode = SelectionMode.MULTIPLE):
        self._mode = SelectionMode(mode)
        # dict keeps insertion order for selected_ids()
        self._selected: dict[str, None] = {}

    def __repr__(self) -> str:
        return f"SelectionManager(mode={self._mode}, count={len(self._selected)})"

    @property
    def mode(self) -> SelectionMode:
        return self._mode

    def set_mode(self, mode: SelectionMode) -> None:
        """Switch mode; any existing selection is cleared on change."""
        mode = SelectionMode(mode)
        if mode != self._mode:
            self._mode = mode
            self.clear()

    # ── mutation ──────────────────────────────────────────────────────────

    def select(self, item_id: str) -> None:
        if self._mode == SelectionMode.NONE:
            return
        if self._mode == SelectionMode.SINGLE:
            self._selected.clear()
        self._selected[item_id] = None

    def deselect(self, item_id: str) -> None:
        self._selected.pop(item_id, None)

    def toggle(self, item_id: str) -> None:
        if self.is_selected(item_id):
            self.deselect(item_id)
        else:
            self.select(item_id)

    def select_only(self, item_id: str) -> None:
        if self._mode == SelectionMode.NONE:
            return
        self._selected = {item_id: None}

    def clear(self) -> None:
        self._selected = {}

    def set_selected_ids(self, ids: Iterable[str]) -> None:
        self._selected = {}
        for item_id in ids:
            self.select(item_id)

    def select_all(self, items: Sequence[Item]) -> None:
        """Select every item; SINGLE mode selects only the first one."""
        if self._mode == SelectionMode.NONE or not items:
            return
        if self._mode == SelectionMode.SINGLE:
            self.select_only(items[0].id)
            return
        for item in items:
            self.select(item.id)

    def select_range(self, items: Sequence[Item], start: int, end: int) -> None:
        """Select items[start..end] inclusive (bounds may be reversed)."""
        if self._mode == SelectionMode.NONE or not items:
            return
        if self._mode == SelectionMode.SINGLE:
            self.clear()
            if 0 <= start < len(items):
                self.select(items[start].id)
            return
        if start > end:
            start, end = end, start
        start = max(0, start)
        end = min(len(items) - 1, end)
        for i in range(start, end + 1):
            self.select(items[i].id)

    def select_visible(self, items: Sequence[Item], start: int, end: int) -> None:
        self.select_range(items, start, end)

    def invert_selection(self, items: Iterable[Item]) -> None:
        """Flip the state of each item (MULTIPLE mode only)."""
        if self._mode != SelectionMode.MULTIPLE:
            return
        self._selected = {item.id: None for item in items if item.id not in self._selected}

    # ── queries ───────────────────────────────────────────────────────────

    def is_selected(self, item_id: str) -> bool:
        return item_id in self._selected

    def count(self) -> int:
        return len(self._selected)

    def has_selection(self) -> bool:
        return bool(self._selected)

    def all_selected(self, total: int) -> bool:
        return total > 0 and len(self._selected) == total

    def selected_ids(self) -> list[str]:
        return list(self._selected)

    def get_selected(self, items: Iterable[Item]) -> list[Item]:
        return [item for item in items if item.id in self._selected]
