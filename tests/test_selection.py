"""Tests for id-based selection."""

from rich_list import ListItem, SelectionManager, SelectionMode


def _items(n=5):
    return [ListItem(f"i{k}", f"Item {k}") for k in range(n)]


class TestMultiple:
    def test_default_mode(self):
        assert SelectionManager().mode == SelectionMode.MULTIPLE

    def test_select_and_deselect(self):
        sm = SelectionManager()
        sm.select("a")
        sm.select("b")
        assert sm.is_selected("a")
        assert sm.count() == 2
        sm.deselect("a")
        assert not sm.is_selected("a")
        sm.deselect("missing")
        assert sm.count() == 1

    def test_selected_ids_keep_insertion_order(self):
        sm = SelectionManager()
        for item_id in ("c", "a", "b"):
            sm.select(item_id)
        assert sm.selected_ids() == ["c", "a", "b"]

    def test_toggle_twice_restores(self):
        sm = SelectionManager()
        sm.select("keep")
        sm.toggle("x")
        sm.toggle("x")
        assert sm.selected_ids() == ["keep"]

    def test_select_only(self):
        sm = SelectionManager()
        sm.set_selected_ids(["a", "b"])
        sm.select_only("c")
        assert sm.selected_ids() == ["c"]

    def test_select_all_and_all_selected(self):
        sm = SelectionManager()
        items = _items(3)
        sm.select_all(items)
        assert sm.all_selected(3)
        assert not sm.all_selected(4)
        assert not SelectionManager().all_selected(0)

    def test_select_range_inclusive_and_reversed(self):
        items = _items()
        sm = SelectionManager()
        sm.select_range(items, 3, 1)
        assert sm.selected_ids() == ["i1", "i2", "i3"]

    def test_select_range_clamps(self):
        items = _items(3)
        sm = SelectionManager()
        sm.select_range(items, -5, 10)
        assert sm.count() == 3

    def test_select_visible(self):
        sm = SelectionManager()
        sm.select_visible(_items(), 0, 1)
        assert sm.selected_ids() == ["i0", "i1"]

    def test_invert(self):
        items = _items(4)
        sm = SelectionManager()
        sm.select("i0")
        sm.select("i2")
        sm.invert_selection(items)
        assert sm.selected_ids() == ["i1", "i3"]

    def test_get_selected_and_clear(self):
        items = _items(3)
        sm = SelectionManager()
        sm.select("i2")
        assert sm.get_selected(items) == [items[2]]
        assert sm.has_selection()
        sm.clear()
        assert not sm.has_selection()

    def test_selection_survives_filtering(self):
        from rich_list import Filter

        items = _items()
        sm = SelectionManager()
        sm.select("i4")
        Filter("Item 1").apply(items)
        assert sm.is_selected("i4")


class TestSingle:
    def test_select_evicts_previous(self):
        sm = SelectionManager(SelectionMode.SINGLE)
        sm.select("a")
        sm.select("b")
        assert sm.selected_ids() == ["b"]

    def test_toggle_stays_exclusive(self):
        sm = SelectionManager(SelectionMode.SINGLE)
        for item_id in ("a", "b", "b", "c", "a"):
            sm.toggle(item_id)
            assert sm.count() <= 1
        assert sm.selected_ids() == ["a"]

    def test_select_all_picks_first(self):
        sm = SelectionManager(SelectionMode.SINGLE)
        sm.select_all(_items())
        assert sm.selected_ids() == ["i0"]

    def test_select_range_picks_start(self):
        sm = SelectionManager(SelectionMode.SINGLE)
        sm.select_range(_items(), 2, 4)
        assert sm.selected_ids() == ["i2"]

    def test_set_selected_ids_keeps_last(self):
        sm = SelectionManager(SelectionMode.SINGLE)
        sm.set_selected_ids(["a", "b", "c"])
        assert sm.selected_ids() == ["c"]

    def test_invert_is_noop(self):
        sm = SelectionManager(SelectionMode.SINGLE)
        sm.select("i0")
        sm.invert_selection(_items())
        assert sm.selected_ids() == ["i0"]


class TestNone:
    def test_select_is_ignored(self):
        sm = SelectionManager(SelectionMode.NONE)
        sm.select("a")
        sm.toggle("b")
        sm.select_only("c")
        sm.select_all(_items())
        sm.select_range(_items(), 0, 2)
        assert sm.count() == 0


class TestModeSwitch:
    def test_changing_mode_clears(self):
        sm = SelectionManager()
        sm.select("a")
        sm.set_mode(SelectionMode.SINGLE)
        assert sm.count() == 0
        assert sm.mode == SelectionMode.SINGLE

    def test_same_mode_keeps_selection(self):
        sm = SelectionManager()
        sm.select("a")
        sm.set_mode(SelectionMode.MULTIPLE)
        assert sm.selected_ids() == ["a"]

    def test_mode_from_string(self):
        assert SelectionManager("single").mode == SelectionMode.SINGLE

    def test_empty_select_all_is_noop(self):
        sm = SelectionManager()
        sm.select_all([])
        assert sm.count() == 0
