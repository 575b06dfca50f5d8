"""Tests for groups and the flattened group view."""

from rich_list import NOT_FOUND, Group, GroupManager, ListItem, Slot


def make_items(prefix, count):
    return [ListItem(f"{prefix}{i}", f"{prefix.upper()} item {i}") for i in range(count)]


def _manager(*sizes, expanded=True):
    return GroupManager(
        [Group(f"G{gi}", make_items(f"g{gi}-", n), expanded=expanded) for gi, n in enumerate(sizes)]
    )


def _expected_count(groups):
    return sum(1 + (g.item_count() if g.expanded else 0) for g in groups)


class TestGroup:
    def test_defaults(self):
        g = Group("Fruit")
        assert g.title == "Fruit"
        assert g.expanded is True
        assert g.item_count() == 0

    def test_items_is_a_copy(self):
        g = Group("Fruit", make_items("f", 2))
        g.items.append(ListItem("x", "X"))
        assert g.item_count() == 2

    def test_add_item_ignores_same_object(self):
        item = ListItem("a", "A")
        g = Group("G", [item, item])
        g.add_item(item)
        assert g.item_count() == 1

    def test_distinct_objects_with_same_id_are_kept(self):
        g = Group("G", [ListItem("a", "A"), ListItem("a", "A")])
        assert g.item_count() == 2

    def test_toggle_and_set_expanded(self):
        g = Group("G")
        g.toggle()
        assert g.expanded is False
        g.set_expanded(True)
        assert g.expanded is True


class TestFlatten:
    def test_all_expanded(self):
        gm = _manager(3, 2)
        assert gm.count() == 7
        assert gm.get_item_at(0) == Slot(True, 0, -1)
        assert gm.get_item_at(1) == Slot(False, 0, 0)
        assert gm.get_item_at(4) == Slot(True, 1, -1)
        assert gm.get_item_at(6) == Slot(False, 1, 1)

    def test_collapsed_groups_show_header_only(self):
        gm = _manager(3, 2, expanded=False)
        assert gm.count() == 2
        assert gm.visible_item_count() == 0
        assert gm.total_item_count() == 5

    def test_empty_group_still_has_header(self):
        gm = _manager(0, 2)
        assert gm.count() == 4
        assert gm.get_item_at(1) == Slot(True, 1, -1)

    def test_out_of_range_is_not_found(self):
        gm = _manager(2)
        assert gm.get_item_at(-1) == NOT_FOUND
        assert gm.get_item_at(3) == NOT_FOUND

    def test_count_law_after_every_change(self):
        gm = _manager(3, 0, 4)
        for change in (
            lambda: gm.collapse_group(0),
            lambda: gm.expand_group(0),
            gm.collapse_all,
            lambda: gm.toggle_group_at(2),
            gm.expand_all,
            lambda: gm.add_group(Group("Extra", make_items("e", 2), expanded=False)),
        ):
            change()
            assert gm.count() == _expected_count(gm.groups)

    def test_counts(self):
        gm = _manager(3, 2)
        gm.collapse_group(1)
        assert gm.group_count() == 2
        assert gm.expanded_group_count() == 1
        assert gm.visible_item_count() == 3
        assert gm.total_item_count() == 5

    def test_refresh_after_in_place_edit(self):
        gm = _manager(1)
        gm.groups[0].add_item(ListItem("new", "New"))
        assert gm.count() == 2
        gm.refresh()
        assert gm.count() == 3


class TestCursor:
    def test_move_and_clamp(self):
        gm = _manager(2)
        gm.move_up()
        assert gm.cursor == 0
        for _ in range(5):
            gm.move_down()
        assert gm.cursor == 2
        gm.set_cursor(50)
        assert gm.cursor == 2
        gm.set_cursor(-3)
        assert gm.cursor == 0

    def test_position_queries(self):
        gm = _manager(2)
        assert gm.is_at_group()
        assert not gm.is_at_item()
        assert gm.current_item() is None
        gm.move_down()
        assert gm.is_at_item()
        assert gm.current_item().id == "g0-0"
        assert gm.current_group().title == "G0"
        assert gm.current_group_index() == 0

    def test_empty_manager(self):
        gm = GroupManager()
        assert gm.count() == 0
        assert gm.cursor == 0
        assert not gm.is_at_group()
        assert not gm.is_at_item()
        assert gm.current_group() is None
        assert gm.current_item() is None
        gm.move_down()
        assert gm.cursor == 0

    def test_set_groups_clamps(self):
        gm = _manager(5)
        gm.set_cursor(5)
        gm.set_groups([Group("Small", make_items("s", 1))])
        assert gm.cursor == 1

    def test_add_group_clamps(self):
        gm = _manager(2)
        gm.set_cursor(2)
        gm.add_group(Group("More", make_items("m", 2)))
        assert gm.cursor == 2
        assert gm.count() == 6

    def test_clear(self):
        gm = _manager(3)
        gm.set_cursor(2)
        gm.clear()
        assert gm.count() == 0
        assert gm.cursor == 0
        assert gm.groups == []


class TestExpansion:
    def test_collapse_from_leaf_moves_to_header(self):
        gm = _manager(3, 2)
        gm.set_cursor(2)
        gm.collapse_group(0)
        assert gm.count() == 4
        assert gm.cursor == 0
        assert gm.is_at_group()

    def test_collapse_above_keeps_cursor_on_same_item(self):
        gm = _manager(3, 2)
        gm.set_cursor(5)
        item = gm.current_item()
        gm.collapse_group(0)
        assert gm.cursor == 2
        assert gm.current_item() is item

    def test_expand_above_keeps_header(self):
        gm = _manager(3, 2, expanded=False)
        gm.set_cursor(1)
        gm.expand_group(0)
        assert gm.cursor == 4
        assert gm.get_item_at(gm.cursor) == Slot(True, 1, -1)

    def test_collapse_all_lands_on_own_header(self):
        gm = _manager(3, 2)
        gm.set_cursor(6)
        gm.collapse_all()
        assert gm.count() == 2
        assert gm.cursor == 1

    def test_toggle_current_group_requires_header(self):
        gm = _manager(2)
        gm.move_down()
        gm.toggle_current_group()
        assert gm.groups[0].expanded is True
        gm.move_up()
        gm.toggle_current_group()
        assert gm.groups[0].expanded is False
        assert gm.cursor == 0

    def test_bad_group_index_is_noop(self):
        gm = _manager(2)
        gm.toggle_group_at(5)
        gm.expand_group(-1)
        gm.collapse_group(9)
        assert gm.count() == 3


class TestLookup:
    def test_all_items_visible_only(self):
        gm = _manager(2, 1)
        gm.collapse_group(0)
        assert [i.id for i in gm.all_items()] == ["g1-0"]

    def test_find_item_id(self):
        gm = _manager(2, 1)
        assert gm.find_item_id("g1-0") == 4
        assert gm.find_item_id("missing") == -1
        gm.collapse_group(1)
        assert gm.find_item_id("g1-0") == -1

    def test_header_index(self):
        gm = _manager(2, 1)
        assert gm.header_index(1) == 3
        assert gm.header_index(7) == -1

    def test_find_group_title(self):
        gm = _manager(2, 1)
        assert gm.find_group_title("G1") == 3
        assert gm.find_group_title("nope") == -1
