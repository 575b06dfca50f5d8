"""Configurable themes for rich_list rendering.

The Theme dataclass holds the visual tokens (colors, icons, layout bounds)
used by components and the reference FilterGroupList widget. The engine
itself never reads a theme.
"""

from dataclasses import dataclass, fields


@dataclass
class Theme:
    """Visual theme for list rendering.

    All colors use Rich markup format (e.g., "green", "bold cyan", "dim").

    Attributes:
        cursor_color: Color for the cursor indicator and current row.
        header_color: Color for group header titles.
        selected_color: Color for selected items.
        dim_color: Color for dimmed/secondary text.
        match_color: Style wrapped around filter matches.
        border_color: Color for panel border.

        cursor_icon: Character shown next to the current row.
        expanded_icon: Marker for an expanded group header.
        collapsed_icon: Marker for a collapsed group header.
        checked_icon: Marker for a selected item.
        unchecked_icon: Marker for an unselected item.
        scroll_up_icon: Character indicating more rows above.
        scroll_down_icon: Character indicating more rows below.

        panel_width: Fixed width of the list panel.
        min_visible_items: Minimum rows to show before scrolling.
        max_visible_items: Maximum rows to show (caps tall terminals).
        panel_padding: Lines reserved for borders/title/footer.
    """

    # Colors
    cursor_color: str = "cyan"
    header_color: str = "bold"
    selected_color: str = "green"
    dim_color: str = "dim"
    match_color: str = "bold yellow"
    border_color: str = "cyan"

    # Icons
    cursor_icon: str = "›"
    expanded_icon: str = "▾"
    collapsed_icon: str = "▸"
    checked_icon: str = "✓"
    unchecked_icon: str = "·"
    scroll_up_icon: str = "▲"
    scroll_down_icon: str = "▼"

    # Layout
    panel_width: int = 80
    min_visible_items: int = 5
    max_visible_items: int = 20
    panel_padding: int = 8

    def highlight_markers(self) -> tuple[str, str]:
        """Return the (before, after) markup pair for Filter.highlight."""
        return f"[{self.match_color}]", f"[/{self.match_color}]"

    @classmethod
    def from_overrides(cls, overrides: dict) -> "Theme":
        """Build a theme from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in overrides.items() if k in known})


# Default theme used when none is specified
DEFAULT_THEME = Theme()
