"""Tests for stock items, highlighting and themes."""

from rich_list import ExpandableItem, Filter, ListItem, SectionItem, SelectableItem, Theme
from rich_list.components import highlight_markup


class TestTheme:
    def test_defaults(self):
        theme = Theme()
        assert theme.cursor_color == "cyan"
        assert theme.checked_icon == "✓"
        assert theme.highlight_markers() == ("[bold yellow]", "[/bold yellow]")

    def test_from_overrides_ignores_unknown(self):
        theme = Theme.from_overrides({"cursor_color": "magenta", "nope": 1})
        assert theme.cursor_color == "magenta"
        assert theme.dim_color == "dim"


class TestHighlightMarkup:
    def test_inactive_escapes(self):
        assert highlight_markup("[x]", None) == "\\[x]"
        assert highlight_markup("plain", Filter()) == "plain"

    def test_wraps_matches(self):
        theme = Theme(match_color="red")
        assert highlight_markup("Banana", Filter("an"), theme) == "B[red]an[/red][red]an[/red]a"

    def test_escapes_around_matches(self):
        out = highlight_markup("[a] apple", Filter("apple"), Theme(match_color="u"))
        assert out == "\\[a] [u]apple[/u]"


class TestListItem:
    def test_filter_value(self):
        assert ListItem("1", "Fuji", "Red").filter_value() == "Fuji Red"

    def test_render_with_desc(self):
        out = ListItem("1", "Fuji", "Red").render(Theme())
        assert out == "Fuji [dim]- Red[/dim]"

    def test_render_title_only(self):
        assert ListItem("1", "Fuji").render() == "Fuji"

    def test_equality_ignores_match_indexes(self):
        a = ListItem("1", "Fuji")
        b = ListItem("1", "Fuji")
        a.set_match_indexes([0])
        assert a == b


class TestOtherItems:
    def test_section_item(self):
        section = SectionItem("Recent", info="3 items", width=40)
        assert section.id == "section-Recent"
        assert section.is_section_header
        assert section.size() == (40, 1)
        section.set_size(20, 2)
        assert section.size() == (20, 2)
        assert "Recent" in section.render()

    def test_selectable_item(self):
        item = SelectableItem("1", "One")
        item.toggle()
        assert item.selected is True

    def test_expandable_item(self):
        item = ExpandableItem("1", "One")
        assert item.expanded is False
        item.toggle()
        assert item.expanded is True
        assert item.filter_value() == "One "


class TestHighlightUnicode:
    def test_match_after_length_changing_char(self):
        out = highlight_markup("İstanbul", Filter("stan"))
        assert out == "İ[bold yellow]stan[/bold yellow]bul"
