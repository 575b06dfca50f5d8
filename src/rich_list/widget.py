"""Filterable, grouped, selectable list rendered with Rich.Live.

FilterGroupList is a thin consumer of the engine: it owns one Viewport,
Filter, GroupManager and SelectionManager, turns key presses into Actions,
applies each Action to the engine, and paints purely from the engine's query
methods (``Viewport.range``, ``GroupManager.get_item_at``,
``SelectionManager.is_selected``).

Example:
    from rich_list import FilterGroupList, Group, ListItem

    picker = FilterGroupList(
        title="Fruit",
        groups=[
            Group("Apples", [ListItem("f1", "Fuji"), ListItem("f2", "Gala")]),
            Group("Citrus", [ListItem("c1", "Navel Orange")]),
        ],
    )
    chosen = picker.show()  # ["f1", "c1"]
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

import readchar
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel

from .components import highlight_markup
from .filtering import Filter
from .group import Group, GroupManager
from .keys import (
    KeyMap,
    default_keymap,
    is_backspace,
    is_enter,
    is_escape,
    is_printable,
    key_name,
)
from .selection import SelectionManager
from .themes import DEFAULT_THEME, Theme
from .types import Action, Item, SelectionMode, Slot
from .viewport import Viewport

logger = logging.getLogger(__name__)

# Callback signature: (list, item under cursor or None) -> True to exit
ActionHandler = Callable[["FilterGroupList", "Item | None"], bool]

_NAVIGATION = {
    Action.MOVE_UP: Viewport.move_up,
    Action.MOVE_DOWN: Viewport.move_down,
    Action.PAGE_UP: Viewport.page_up,
    Action.PAGE_DOWN: Viewport.page_down,
    Action.MOVE_TO_TOP: Viewport.move_to_top,
    Action.MOVE_TO_BOTTOM: Viewport.move_to_bottom,
}


class FilterGroupList:
    """Interactive grouped list with live filtering and id-based selection.

    Keyboard controls (default KeyMap):
        - Up/Down or j/k, PgUp/PgDn, g/G: Navigate
        - Left/Right or h/l: Collapse/expand the current group
        - Enter/Space: Toggle group on a header, toggle selection on an item
        - /: Type a filter (Enter keeps it, Esc clears it)
        - Ctrl+A / Ctrl+X / Tab: Select all / clear / invert among filtered items
        - Ctrl+E / Ctrl+W: Expand / collapse all groups
        - q: Finish and return the selection; Esc: cancel

    Args:
        title: Panel title.
        groups: Source groups; the list never mutates their items.
        mode: Selection mode. In SINGLE mode choosing an item finishes.
        visible: Fixed row count; derived from the terminal height if None.
        case_sensitive: Whether filter matching is case-sensitive.
        keymap: Key bindings (defaults to ``default_keymap()``).
        theme: Visual theme.
        console: Rich Console (creates one if None).
        action_handlers: Optional callbacks for DELETE/EDIT/NEW and friends.
    """

    def __init__(
        self,
        title: str,
        groups: Sequence[Group],
        *,
        mode: SelectionMode = SelectionMode.MULTIPLE,
        visible: int | None = None,
        case_sensitive: bool = False,
        keymap: KeyMap | None = None,
        theme: Theme | None = None,
        console: Console | None = None,
        action_handlers: dict[Action, ActionHandler] | None = None,
    ):
        self.title = title
        self.console = console or Console()
        self.theme = theme or DEFAULT_THEME
        self.keymap = keymap or default_keymap()
        self.action_handlers = action_handlers or {}

        self._fixed_visible = visible
        self._source_groups: list[Group] = list(groups)
        self._view_sources: list[int] = []

        self.viewport = Viewport(visible if visible is not None else self._terminal_rows())
        self.filter = Filter(case_sensitive=case_sensitive)
        self.groups = GroupManager()
        self.selection = SelectionManager(mode)

        self.filter_mode = False
        self.show_help = False
        self.should_exit = False
        self.confirmed = False

        self._rebuild_view()

    # ── engine wiring ─────────────────────────────────────────────────────

    def _terminal_rows(self) -> int:
        calculated = self.console.height - self.theme.panel_padding
        return max(self.theme.min_visible_items, min(self.theme.max_visible_items, calculated))

    def _sync_viewport(self) -> None:
        """Resize the viewport to the flat slot count and follow the cursor."""
        self.viewport.set_total(self.groups.count())
        self.viewport.set_cursor(self.groups.cursor)

    def _rebuild_view(self) -> None:
        """Re-derive the grouped view from the source groups and the filter.

        The cursor stays on the same item (or group header) when it survives
        the new filter.
        """
        anchor_item = self.groups.current_item()
        anchor_group = self.groups.current_group() if self.groups.is_at_group() else None

        if not self.filter.active:
            views = list(self._source_groups)
            self._view_sources = list(range(len(views)))
            self.filter.set_matches([])
        else:
            views = []
            self._view_sources = []
            # matches index into all_items(), across every source group
            matches: list[int] = []
            base = 0
            for gi, group in enumerate(self._source_groups):
                matched = self.filter.apply(group.items)
                matches.extend(base + i for i in self.filter.matches)
                base += group.item_count()
                if matched:
                    views.append(Group(group.title, matched, expanded=group.expanded))
                    self._view_sources.append(gi)
            self.filter.set_matches(matches)

        self.groups.set_groups(views)

        target = -1
        if anchor_item is not None:
            target = self.groups.find_item_id(anchor_item.id)
        elif anchor_group is not None:
            target = self.groups.find_group_title(anchor_group.title)
        self.groups.set_cursor(target if target >= 0 else 0)
        self._sync_viewport()

    def _write_back_expansion(self) -> None:
        """Copy expansion state of filtered views onto their source groups."""
        for view, source_index in zip(self.groups.groups, self._view_sources):
            self._source_groups[source_index].set_expanded(view.expanded)

    def set_query(self, query: str) -> None:
        """Replace the filter query and re-filter from scratch."""
        self.filter.set_query(query)
        logger.debug("query changed to %r", query)
        self._rebuild_view()

    def set_groups(self, groups: Sequence[Group]) -> None:
        """Swap in new source groups, keeping filter and selection."""
        self._source_groups = list(groups)
        self._rebuild_view()

    def filtered_items(self) -> list[Item]:
        """Items passing the filter, including those in collapsed groups."""
        return [item for group in self.groups.groups for item in group.items]

    def all_items(self) -> list[Item]:
        return [item for group in self._source_groups for item in group.items]

    def selected_items(self) -> list[Item]:
        """Selected items in source order, whether filtered out or not."""
        seen: set[str] = set()
        result = []
        for item in self.all_items():
            if item.id in seen or not self.selection.is_selected(item.id):
                continue
            seen.add(item.id)
            result.append(item)
        return result

    def visible_slots(self) -> list[tuple[int, Slot]]:
        """``(flat_index, slot)`` pairs inside the viewport window."""
        start, end = self.viewport.range()
        return [(i, self.groups.get_item_at(i)) for i in range(start, end)]

    # ── actions ───────────────────────────────────────────────────────────

    def _toggle_current(self) -> None:
        if self.groups.is_at_group():
            self.groups.toggle_current_group()
            self._write_back_expansion()
            return
        item = self.groups.current_item()
        if item is None:
            return
        if self.selection.mode == SelectionMode.SINGLE:
            self.selection.select(item.id)
            self.confirmed = True
            self.should_exit = True
            return
        self.selection.toggle(item.id)

    def _collapse_current(self) -> None:
        gi = self.groups.current_group_index()
        if gi < 0:
            return
        if self.groups.is_at_item():
            self.groups.set_cursor(self.groups.header_index(gi))
            return
        self.groups.collapse_group(gi)
        self._write_back_expansion()

    def _expand_current(self) -> None:
        if self.groups.is_at_group():
            self.groups.expand_group(self.groups.current_group_index())
            self._write_back_expansion()

    def _invert_filtered(self) -> None:
        """Invert among filtered items, leaving hidden selections alone."""
        filtered = self.filtered_items()
        filtered_ids = {item.id for item in filtered}
        hidden = [i for i in self.selection.selected_ids() if i not in filtered_ids]
        self.selection.invert_selection(filtered)
        for item_id in hidden:
            self.selection.select(item_id)

    def handle_action(self, action: Action) -> None:
        """Apply one semantic action to the engine."""
        handler = self.action_handlers.get(action)
        if handler is not None:
            if handler(self, self.groups.current_item()):
                self.should_exit = True
            self._rebuild_view()
            return

        if action in _NAVIGATION:
            _NAVIGATION[action](self.viewport)
            self.groups.set_cursor(self.viewport.cursor)
            return

        if action == Action.MOVE_LEFT:
            self._collapse_current()
        elif action == Action.MOVE_RIGHT:
            self._expand_current()
        elif action in (Action.TOGGLE_SELECTION, Action.TOGGLE_GROUP):
            self._toggle_current()
        elif action == Action.SELECT:
            item = self.groups.current_item()
            if item is not None:
                self.selection.select(item.id)
        elif action == Action.DESELECT:
            item = self.groups.current_item()
            if item is not None:
                self.selection.deselect(item.id)
        elif action == Action.SELECT_ALL:
            self.selection.select_all(self.filtered_items())
        elif action == Action.DESELECT_ALL:
            self.selection.clear()
        elif action == Action.INVERT_SELECTION:
            self._invert_filtered()
        elif action == Action.EXPAND_ALL:
            self.groups.expand_all()
            self._write_back_expansion()
        elif action == Action.COLLAPSE_ALL:
            self.groups.collapse_all()
            self._write_back_expansion()
        elif action == Action.FILTER:
            self.filter_mode = True
        elif action == Action.FILTER_CLEAR:
            self.set_query("")
        elif action == Action.CANCEL:
            if self.filter.active:
                self.set_query("")
            else:
                self.should_exit = True
                self.confirmed = False
        elif action in (Action.CONFIRM, Action.QUIT):
            self.should_exit = True
            self.confirmed = True
        elif action == Action.HELP:
            self.show_help = not self.show_help

        self._sync_viewport()

    def _handle_filter_key(self, key: str) -> None:
        if is_enter(key):
            self.filter_mode = False
        elif is_escape(key):
            self.filter_mode = False
            self.set_query("")
        elif is_backspace(key):
            if self.filter.query:
                self.set_query(self.filter.query[:-1])
        elif key == readchar.key.CTRL_C:
            self.should_exit = True
        elif is_printable(key):
            self.set_query(self.filter.query + key)

    def handle_key(self, key: str) -> None:
        """Handle one raw key press."""
        if self.filter_mode:
            self._handle_filter_key(key)
            return
        self.handle_action(self.keymap.match_action(key_name(key)))

    # ── rendering ─────────────────────────────────────────────────────────

    def _render_header(self, slot: Slot, is_current: bool) -> str:
        theme = self.theme
        group = self.groups.groups[slot.group_index]
        icon = theme.expanded_icon if group.expanded else theme.collapsed_icon
        chosen = sum(1 for item in group.items if self.selection.is_selected(item.id))
        title = escape(group.title) or "(untitled)"
        line = (
            f"{icon} [{theme.header_color}]{title}[/{theme.header_color}] "
            f"[{theme.dim_color}]({chosen}/{group.item_count()})[/{theme.dim_color}]"
        )
        if is_current:
            line = f"[{theme.cursor_color}]{line}[/{theme.cursor_color}]"
        return line

    def _render_item(self, item: Item, is_current: bool) -> str:
        theme = self.theme
        if self.selection.is_selected(item.id):
            mark = f"[{theme.selected_color}]{theme.checked_icon}[/{theme.selected_color}]"
        else:
            mark = f"[{theme.dim_color}]{theme.unchecked_icon}[/{theme.dim_color}]"
        render = getattr(item, "render", None)
        body = render(theme, self.filter) if callable(render) else highlight_markup(item.id, self.filter, theme)
        if is_current:
            body = f"[bold]{body}[/bold]"
        return f"  {mark} {body}"

    def _footer(self) -> str:
        theme = self.theme
        if self.filter_mode:
            hint = "type to filter • Enter keep • Esc clear"
        elif self.show_help:
            bound = self.keymap.bindings()
            hint = " • ".join(f"{name}: {'/'.join(keys)}" for name, keys in bound.items() if keys)
        else:
            hint = (
                f"{theme.scroll_up_icon}{theme.scroll_down_icon}/jk navigate • Space toggle "
                f"• / filter • ? help • q done • Esc cancel"
            )
        return f"[{theme.dim_color}]{escape(hint)}[/{theme.dim_color}]"

    def render(self) -> Panel:
        """Render the current window as a Rich Panel."""
        theme = self.theme
        if self._fixed_visible is None:
            self.viewport.set_visible(self._terminal_rows())
            self.viewport.set_cursor(self.groups.cursor)

        lines: list[str] = []
        if self.filter_mode or self.filter.active:
            cursor = "█" if self.filter_mode else ""
            shown = len(self.filtered_items())
            lines.append(
                f"Filter: {escape(self.filter.query)}{cursor} "
                f"[{theme.dim_color}]({shown}/{len(self.all_items())})[/{theme.dim_color}]"
            )

        start, end = self.viewport.range()
        if self.viewport.can_scroll_up():
            lines.append(
                f"[{theme.dim_color}]  {theme.scroll_up_icon} {start} more above[/{theme.dim_color}]"
            )

        for index, slot in self.visible_slots():
            is_current = index == self.viewport.cursor
            prefix = (
                f"[{theme.cursor_color}]{theme.cursor_icon}[/{theme.cursor_color}]"
                if is_current
                else " "
            )
            if slot.is_header:
                lines.append(f"{prefix} {self._render_header(slot, is_current)}")
            else:
                item = self.groups.groups[slot.group_index].items[slot.item_index]
                lines.append(f"{prefix} {self._render_item(item, is_current)}")

        if self.groups.count() == 0:
            empty = "No matches" if self.filter.active else "No items"
            lines.append(f"[{theme.dim_color}]  {empty}[/{theme.dim_color}]")

        below = self.viewport.total - end
        if below > 0:
            lines.append(
                f"[{theme.dim_color}]  {theme.scroll_down_icon} {below} more below[/{theme.dim_color}]"
            )

        selected = self.selection.count()
        subtitle = f"{selected} selected" if selected else None
        content = "\n".join(lines)
        return Panel(
            f"{content}\n\n{self._footer()}",
            title=f"[bold]{escape(self.title)}[/bold]",
            subtitle=subtitle,
            border_style=theme.border_color,
            width=theme.panel_width,
        )

    def show(self) -> list[str]:
        """Display the list and block until the user finishes.

        Returns:
            Selected ids when finished (q by default, or any key bound to
            CONFIRM or QUIT), or [] when cancelled.
        """
        with Live(self.render(), console=self.console, refresh_per_second=20) as live:
            while not self.should_exit:
                try:
                    key = readchar.readkey()
                    self.handle_key(key)
                    live.update(self.render())
                except KeyboardInterrupt:
                    self.should_exit = True
                    self.confirmed = False

        if not self.confirmed:
            return []
        return self.selection.selected_ids()
