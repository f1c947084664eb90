"""CLI parser construction for the taskshelf CLI/TUI."""

import argparse
from typing import Any, Mapping


def build_parser(commands: Any, themes: Mapping[str, Any], default_theme: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="tasks.py: a bounded two-pane task list (current + shelf)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--tasks-dir",
        dest="tasks_dir",
        help="storage directory (default: $TASKSHELF_DIR or ~/.tasks)",
    )

    sub = parser.add_subparsers(dest="command", help="Commands")

    tui_p = sub.add_parser("tui", help="Open the full-screen editor")
    tui_p.add_argument("--theme", choices=list(themes.keys()), default=None, help=f"colour theme (default: config or {default_theme})")
    tui_p.set_defaults(func=commands.cmd_tui)

    lp = sub.add_parser("list", help="Print both panes")
    lp.add_argument("--notes", action="store_true", help="include notes")
    lp.add_argument("--pane", choices=["current", "shelf"], help="print one pane only")
    lp.set_defaults(func=commands.cmd_list)

    ap = sub.add_parser("archive", help="Move done.md into a timestamped archive file")
    ap.set_defaults(func=commands.cmd_archive)

    hp = sub.add_parser("hotkey", help="Show or set the global hotkey")
    hp.add_argument("value", nargs="?", help="new hotkey, e.g. Cmd+Ctrl+Alt+Shift+=")
    hp.add_argument("--reset", action="store_true", help="restore the default hotkey")
    hp.set_defaults(func=commands.cmd_hotkey)

    return parser


__all__ = ["build_parser"]
