"""YAML-based configuration for rich_list.

Config lives at ``$XDG_CONFIG_HOME/rich-list/config.yaml`` (override with
``RICH_LIST_CONFIG``) and is deep-merged over DEFAULT_CONFIG. Loading never
fails: a missing or broken file yields the defaults.

Also reads the grouped item files consumed by the ``rich-list browse``
command.
"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .components import ListItem
from .group import Group
from .keys import KeyMap, default_keymap
from .themes import Theme
from .types import SelectionMode

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "visible": None,
    "case_sensitive": False,
    "selection_mode": "multiple",
    "debug": False,
    "keys": {},
    "theme": {},
}


class ConfigError(ValueError):
    """Raised when an items file cannot be turned into groups."""


def get_config_dir() -> Path:
    """Get the rich-list config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "rich-list"


def get_config_path() -> Path:
    """Get the config file path, honoring RICH_LIST_CONFIG."""
    override = os.environ.get("RICH_LIST_CONFIG")
    if override:
        return Path(os.path.expanduser(override))
    return get_config_dir() / "config.yaml"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load the config file merged over the defaults."""
    config_path = path or get_config_path()
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return copy.deepcopy(DEFAULT_CONFIG)
    except yaml.YAMLError as e:
        logger.warning("Ignoring invalid config %s: %s", config_path, e)
        return copy.deepcopy(DEFAULT_CONFIG)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read config %s: %s", config_path, e)
        return copy.deepcopy(DEFAULT_CONFIG)
    if not isinstance(data, dict):
        return copy.deepcopy(DEFAULT_CONFIG)
    return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), data)


def save_config(cfg: dict[str, Any], path: Path | None = None) -> None:
    """Write the config as YAML."""
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.safe_dump(cfg, f, default_flow_style=False, sort_keys=False)


def build_keymap(cfg: dict[str, Any]) -> KeyMap:
    keys = cfg.get("keys") or {}
    if not isinstance(keys, dict):
        logger.warning("Ignoring non-mapping 'keys' config")
        return default_keymap()
    return default_keymap().with_overrides(keys)


def build_theme(cfg: dict[str, Any]) -> Theme:
    overrides = cfg.get("theme") or {}
    if not isinstance(overrides, dict):
        logger.warning("Ignoring non-mapping 'theme' config")
        return Theme()
    return Theme.from_overrides(overrides)


def selection_mode(cfg: dict[str, Any]) -> SelectionMode:
    raw = str(cfg.get("selection_mode", "multiple")).strip().lower()
    try:
        return SelectionMode(raw)
    except ValueError:
        logger.warning("Unknown selection_mode %r, using multiple", raw)
        return SelectionMode.MULTIPLE


def visible_rows(cfg: dict[str, Any]) -> int | None:
    """Configured row count, or None to fit the terminal."""
    raw = cfg.get("visible")
    if raw is None:
        return None
    try:
        return max(1, int(raw))
    except (TypeError, ValueError):
        logger.warning("Invalid visible=%r, fitting terminal", raw)
        return None


# ── items files ───────────────────────────────────────────────────────────


def _parse_item(raw: Any, where: str) -> ListItem:
    if isinstance(raw, str):
        return ListItem(id=raw, title=raw)
    if not isinstance(raw, dict) or "id" not in raw:
        raise ConfigError(f"{where}: each item needs an 'id'")
    item_id = str(raw["id"])
    return ListItem(
        id=item_id,
        title=str(raw.get("title", item_id)),
        desc=str(raw.get("desc", raw.get("description", "")) or ""),
    )


def _parse_items(raw: Any, where: str) -> list[ListItem]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ConfigError(f"{where}: 'items' must be a list")
    return [_parse_item(entry, f"{where}[{i}]") for i, entry in enumerate(raw)]


def load_groups_file(path: Path) -> list[Group]:
    """Read groups from a YAML (or JSON) items file.

    Accepts either ``groups: [{title, expanded, items: [...]}]`` or a flat
    ``items: [...]`` list, which becomes a single group.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"File not found: {path}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")
    except UnicodeDecodeError as e:
        raise ConfigError(f"Not a text file: {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping with 'groups' or 'items'")

    if "groups" in data:
        raw_groups = data["groups"]
        if not isinstance(raw_groups, list):
            raise ConfigError(f"{path}: 'groups' must be a list")
        groups = []
        for gi, raw in enumerate(raw_groups):
            where = f"groups[{gi}]"
            if not isinstance(raw, dict):
                raise ConfigError(f"{where}: expected a mapping")
            groups.append(
                Group(
                    str(raw.get("title", f"Group {gi + 1}")),
                    _parse_items(raw.get("items"), f"{where}.items"),
                    expanded=bool(raw.get("expanded", True)),
                )
            )
        return groups

    if "items" in data:
        return [Group(str(data.get("title", "")), _parse_items(data["items"], "items"))]

    raise ConfigError(f"{path}: expected a mapping with 'groups' or 'items'")
