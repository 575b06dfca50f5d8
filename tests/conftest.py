"""Shared fixtures for rich_list tests."""

from io import StringIO

import pytest
from rich.console import Console

from rich_list import Group, ListItem


@pytest.fixture
def fruit_groups():
    """Two fruit groups mirroring the filter-group demo."""
    return [
        Group(
            "Apples",
            [
                ListItem("f1", "Fuji Apple", "Red apple from Japan"),
                ListItem("f2", "Gala Apple", "Sweet and crisp"),
                ListItem("f3", "Granny Smith", "Tart green apple"),
            ],
        ),
        Group(
            "Citrus",
            [
                ListItem("c1", "Navel Orange", "Seedless orange"),
                ListItem("c2", "Lemon", "Sour citrus"),
            ],
        ),
    ]


@pytest.fixture
def console():
    """Real Rich console writing to a buffer."""
    return Console(file=StringIO(), width=100, height=30, force_terminal=False)


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """Point the config layer at a temp XDG dir."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.delenv("RICH_LIST_CONFIG", raising=False)
    return tmp_path / "rich-list"
