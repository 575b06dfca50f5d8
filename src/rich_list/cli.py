"""CLI interface for rich-list.

Browses a YAML items file with the interactive FilterGroupList and prints
the chosen ids, one per line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__


_console = None


def _print(msg: str = "") -> None:
    """Print with Rich markup support."""
    global _console
    if _console is None:
        from rich.console import Console

        _console = Console(highlight=False)
    _console.print(msg)


def _setup_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )


def cmd_browse(args) -> None:
    """Browse an items file interactively."""
    from . import config
    from .types import SelectionMode
    from .widget import FilterGroupList

    cfg = config.load_config(Path(args.config) if args.config else None)
    _setup_logging(args.debug or bool(cfg.get("debug")))

    try:
        groups = config.load_groups_file(Path(args.file))
    except config.ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    mode = SelectionMode.SINGLE if args.single else config.selection_mode(cfg)
    visible = args.visible if args.visible is not None else cfg.get("visible")
    picker = FilterGroupList(
        title=args.title or Path(args.file).stem,
        groups=groups,
        mode=mode,
        visible=config.visible_rows({"visible": visible}),
        case_sensitive=args.case_sensitive or bool(cfg.get("case_sensitive")),
        keymap=config.build_keymap(cfg),
        theme=config.build_theme(cfg),
    )
    if args.query:
        picker.set_query(args.query)

    for item_id in picker.show():
        print(item_id)


def cmd_keys(args) -> None:
    """Print the effective key bindings."""
    from . import config

    cfg = config.load_config(Path(args.config) if args.config else None)
    keymap = config.build_keymap(cfg)
    for name, keys in keymap.bindings().items():
        shown = ", ".join(repr(k) if k == " " else k for k in keys) or "[dim](unbound)[/dim]"
        _print(f"[bold]{name:<14}[/bold] {shown}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rich-list",
        description="Filterable, grouped selection lists in the terminal",
    )
    parser.add_argument("--version", action="version", version=f"rich-list {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    # browse
    browse_p = subparsers.add_parser("browse", help="Pick items from a YAML items file")
    browse_p.add_argument("file", help="YAML file with 'groups' or 'items'")
    browse_p.add_argument("--single", action="store_true", help="Pick exactly one item")
    browse_p.add_argument("--case-sensitive", action="store_true", help="Case-sensitive filter")
    browse_p.add_argument("--visible", type=int, help="Rows to show (default: fit terminal)")
    browse_p.add_argument("--query", help="Initial filter query")
    browse_p.add_argument("--title", help="Panel title (default: file name)")
    browse_p.add_argument("--config", help="Config file path")
    browse_p.add_argument("--debug", action="store_true", help="Enable debug logging")
    browse_p.set_defaults(func=cmd_browse)

    # keys
    keys_p = subparsers.add_parser("keys", help="Show key bindings")
    keys_p.add_argument("--config", help="Config file path")
    keys_p.set_defaults(func=cmd_keys)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if hasattr(args, "func"):
            args.func(args)
        else:
            parser.print_help()
    except KeyboardInterrupt:
        print()
        sys.exit(130)


if __name__ == "__main__":
    main()
