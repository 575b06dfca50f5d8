"""Tests for rich_list type definitions."""

from rich_list import NOT_FOUND, Action, FilterableItem, Item, ListItem, MatchAware, SelectionMode, Slot


class TestSelectionMode:
    def test_values(self):
        assert str(SelectionMode.NONE) == "none"
        assert str(SelectionMode.SINGLE) == "single"
        assert str(SelectionMode.MULTIPLE) == "multiple"

    def test_str_enum(self):
        assert SelectionMode.SINGLE == "single"
        assert SelectionMode("multiple") == SelectionMode.MULTIPLE


class TestAction:
    def test_none_is_distinct(self):
        assert Action.NONE != Action.QUIT
        assert len({a for a in Action}) == len(list(Action))


class TestSlot:
    def test_fields(self):
        slot = Slot(False, 1, 2)
        assert slot.is_header is False
        assert slot.group_index == 1
        assert slot.item_index == 2

    def test_not_found(self):
        assert NOT_FOUND == Slot(False, -1, -1)
        assert Slot(True, 0, -1) != NOT_FOUND


class _Plain:
    id = "x"


class TestProtocols:
    def test_list_item_capabilities(self):
        item = ListItem("a", "Alpha")
        assert isinstance(item, Item)
        assert isinstance(item, FilterableItem)
        assert isinstance(item, MatchAware)

    def test_plain_item_is_not_filterable(self):
        assert isinstance(_Plain(), Item)
        assert not isinstance(_Plain(), FilterableItem)
        assert not isinstance(_Plain(), MatchAware)
