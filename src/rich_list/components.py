"""Stock list items for rich_list.

Ready-made items implementing the capability protocols in ``types``:
- ListItem: id + title + description, filterable and match-aware
- SectionItem: a standalone section header
- SelectableItem: ListItem that tracks its own checked state
- ExpandableItem: ListItem with an expanded/collapsed flag
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.markup import escape

from .filtering import Filter
from .themes import DEFAULT_THEME, Theme


def highlight_markup(text: str, flt: Filter | None, theme: Theme = DEFAULT_THEME) -> str:
    """Escape ``text`` for Rich and wrap every filter match in match markup."""
    if flt is None or not flt.active:
        return escape(text)
    before, after = theme.highlight_markers()
    parts: list[str] = []
    last = 0
    for start, end in flt.find_all_spans(text):
        if start < last:
            continue
        parts.append(escape(text[last:start]))
        parts.append(f"{before}{escape(text[start:end])}{after}")
        last = end
    parts.append(escape(text[last:]))
    return "".join(parts)


@dataclass
class ListItem:
    """Basic filterable item.

    Attributes:
        id: Unique, stable identifier used by selection.
        title: Display text.
        desc: Optional secondary text.
        match_indexes: Offsets of the last filter matches in ``filter_value()``.
    """

    id: str
    title: str
    desc: str = ""
    match_indexes: list[int] = field(default_factory=list, compare=False, repr=False)

    def filter_value(self) -> str:
        """Title and description joined by a space."""
        return f"{self.title} {self.desc}"

    def set_match_indexes(self, indexes: list[int]) -> None:
        self.match_indexes = list(indexes)

    def render(self, theme: Theme = DEFAULT_THEME, flt: Filter | None = None) -> str:
        """Render this item as a Rich markup string."""
        title = highlight_markup(self.title, flt, theme)
        if not self.desc:
            return title
        desc = highlight_markup(self.desc, flt, theme)
        return f"{title} [{theme.dim_color}]- {desc}[/{theme.dim_color}]"


@dataclass
class SectionItem:
    """Section header shown inline in a flat list."""

    title: str
    info: str = ""
    width: int = 0
    height: int = 1
    index: int = -1
    id: str = ""

    def __post_init__(self):
        if not self.id:
            self.id = f"section-{self.title}"

    @property
    def is_section_header(self) -> bool:
        return True

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def render(self, theme: Theme = DEFAULT_THEME, flt: Filter | None = None) -> str:
        line = f"[{theme.header_color}]{escape(self.title)}[/{theme.header_color}]"
        if self.info:
            line += f" [{theme.dim_color}]{escape(self.info)}[/{theme.dim_color}]"
        return line


@dataclass
class SelectableItem(ListItem):
    """ListItem carrying its own selected flag."""

    selected: bool = False

    def toggle(self) -> None:
        self.selected = not self.selected


@dataclass
class ExpandableItem(ListItem):
    """ListItem with an expanded flag (collapsed by default)."""

    expanded: bool = False

    def toggle(self) -> None:
        self.expanded = not self.expanded
