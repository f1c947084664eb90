#!/usr/bin/env python3
"""
tasks.py: a small bounded task list in two panes, current and shelf.

State lives under ~/.tasks (state.json, done.md, config.yaml).
This module wires the argparse front end to the command functions.
"""

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version

from interface.cli_parser import build_parser as build_cli_parser

from .cli_commands import cmd_archive, cmd_hotkey, cmd_list
from .tui_app import TaskShelfTUI, cmd_tui
from .tui_themes import DEFAULT_THEME, THEMES

__all__ = [
    "cmd_tui",
    "cmd_list",
    "cmd_archive",
    "cmd_hotkey",
    "TaskShelfTUI",
    "build_parser",
    "main",
]


def build_parser() -> argparse.ArgumentParser:
    parser = build_cli_parser(commands=sys.modules[__name__], themes=THEMES, default_theme=DEFAULT_THEME)
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("taskshelf"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    if not getattr(args, "command", None):
        args.command = "tui"
        args.theme = None
        args.func = cmd_tui
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
