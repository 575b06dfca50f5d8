"""Virtualized scroll window over a list of addressable slots.

A Viewport owns the cursor and the scroll offset for ``total`` slots of which
``visible`` fit on screen. Every cursor-moving call restores the follow
invariant ``offset <= cursor < offset + visible`` by moving the offset the
minimum distance. ``set_total``/``set_visible``/``set_offset`` only clamp, so an
explicit scroll may leave the cursor outside the window until it next moves.
"""

from __future__ import annotations

from .themes import DEFAULT_THEME, Theme


class Viewport:
    """Visible window into a larger list.

    Args:
        visible: Number of rows that fit on screen.
        total: Number of addressable slots.
    """

    def __init__(self, visible: int = 10, total: int = 0):
        self._offset = 0
        self._cursor = 0
        self._visible = max(0, visible)
        self._total = max(0, total)

    def __repr__(self) -> str:
        return (
            f"Viewport(cursor={self._cursor}, offset={self._offset}, "
            f"visible={self._visible}, total={self._total})"
        )

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def visible(self) -> int:
        return self._visible

    @property
    def total(self) -> int:
        return self._total

    # ── capacity ──────────────────────────────────────────────────────────

    def set_total(self, total: int) -> None:
        """Update the slot count and re-clamp cursor and offset."""
        self._total = max(0, total)
        self._clamp()

    def set_visible(self, visible: int) -> None:
        """Update the window height and re-clamp cursor and offset."""
        self._visible = max(0, visible)
        self._clamp()

    def set_offset(self, offset: int) -> None:
        """Scroll explicitly without moving the cursor."""
        self._offset = offset
        self._clamp()

    # ── cursor movement ───────────────────────────────────────────────────

    def set_cursor(self, cursor: int) -> None:
        """Place the cursor (clamped) and scroll it into view."""
        if self._total == 0:
            return
        self._cursor = max(0, min(cursor, self._total - 1))
        self._follow()

    move_to = set_cursor

    def move_up(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1
            self._follow()

    def move_down(self) -> None:
        if self._cursor < self._total - 1:
            self._cursor += 1
            self._follow()

    def move_to_top(self) -> None:
        if self._total == 0:
            return
        self._cursor = 0
        self._offset = 0

    def move_to_bottom(self) -> None:
        if self._total == 0:
            return
        self._cursor = self._total - 1
        self._offset = self._max_offset()

    def page_up(self) -> None:
        if self._total == 0:
            return
        self._cursor = max(0, self._cursor - self._visible)
        self._follow()

    def page_down(self) -> None:
        if self._total == 0:
            return
        self._cursor = min(self._total - 1, self._cursor + self._visible)
        self._follow()

    def scroll_to(self, index: int) -> None:
        """Bring ``index`` into view with the smallest offset change.

        The cursor is left where it is.
        """
        if index < 0 or index >= self._total:
            return
        if index < self._offset:
            self._offset = index
        elif index >= self._offset + self._visible:
            self._offset = index - self._visible + 1
        self._clamp_offset()

    # ── queries ───────────────────────────────────────────────────────────

    def range(self) -> tuple[int, int]:
        """Half-open ``(start, end)`` slice of slots to paint."""
        if self._total == 0:
            return 0, 0
        return self._offset, min(self._offset + self._visible, self._total)

    def is_first(self) -> bool:
        return self._cursor == 0

    def is_last(self) -> bool:
        return self._total == 0 or self._cursor == self._total - 1

    def is_visible(self, index: int) -> bool:
        return self._offset <= index < self._offset + self._visible and index < self._total

    def has_scroll(self) -> bool:
        return self._total > self._visible

    def can_scroll_up(self) -> bool:
        return self._offset > 0

    def can_scroll_down(self) -> bool:
        return self._offset + self._visible < self._total

    def scroll_indicator(self, theme: Theme = DEFAULT_THEME) -> str:
        """Short text describing which directions have hidden rows."""
        up, down = self.can_scroll_up(), self.can_scroll_down()
        if not self.has_scroll() or not (up or down):
            return "All"
        if up and down:
            return f"{theme.scroll_up_icon} {theme.scroll_down_icon}"
        return theme.scroll_up_icon if up else theme.scroll_down_icon

    # ── internals ─────────────────────────────────────────────────────────

    def _max_offset(self) -> int:
        return max(0, self._total - self._visible)

    def _follow(self) -> None:
        if self._cursor < self._offset:
            self._offset = self._cursor
        elif self._cursor >= self._offset + self._visible:
            self._offset = self._cursor - self._visible + 1
        self._clamp_offset()

    def _clamp_offset(self) -> None:
        self._offset = max(0, min(self._offset, self._max_offset()))

    def _clamp(self) -> None:
        if self._total == 0:
            self._cursor = 0
            self._offset = 0
            return
        self._cursor = max(0, min(self._cursor, self._total - 1))
        self._clamp_offset()
