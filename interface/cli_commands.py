"""Non-interactive commands: list, archive, hotkey."""

import sys
from pathlib import Path
from typing import List

from config import DEFAULT_HOTKEY, get_tasks_dir, get_user_hotkey, set_user_hotkey
from core import ConfigError, Pane, StoreError
from infrastructure.completion_log import FileCompletionLog
from infrastructure.file_repository import FileTaskStore
from infrastructure.hotkeys import normalize_hotkey

from .i18n import translate
from .tui_render import NOTE_DONE, NOTE_OPEN, notes_badge


def _tasks_dir(args) -> Path:
    value = getattr(args, "tasks_dir", None)
    return Path(value).expanduser() if value else get_tasks_dir()


def format_pane(label: str, tasks, with_notes: bool = False) -> List[str]:
    lines = [f"{label} ({len(tasks)})"]
    if not tasks:
        lines.append(f"  {translate('CLI_LIST_EMPTY')}")
    for idx, task in enumerate(tasks, 1):
        lines.append(f"  {idx:>2}. {task.text}{notes_badge(task)}")
        if with_notes:
            for note in task.notes:
                mark = NOTE_DONE if note.completed else NOTE_OPEN
                lines.append(f"        {mark} {note.text}")
    return lines


def cmd_list(args) -> int:
    try:
        state = FileTaskStore(_tasks_dir(args)).load()
    except StoreError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    panes = [Pane(args.pane)] if getattr(args, "pane", None) else [Pane.CURRENT, Pane.SHELF]
    lines: List[str] = []
    for pane in panes:
        if lines:
            lines.append("")
        label = translate("PANE_CURRENT" if pane is Pane.CURRENT else "PANE_SHELF")
        lines.extend(format_pane(label, state.pane(pane), with_notes=getattr(args, "notes", False)))
    print("\n".join(lines))
    return 0


def cmd_archive(args) -> int:
    log = FileCompletionLog(_tasks_dir(args))
    try:
        name = log.archive()
    except StoreError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(translate("CLI_ARCHIVED", name=name))
    return 0


def cmd_hotkey(args) -> int:
    if getattr(args, "reset", False):
        set_user_hotkey("")
        print(translate("CLI_HOTKEY_SAVED", hotkey=DEFAULT_HOTKEY))
        return 0
    value = getattr(args, "value", None)
    if not value:
        print(translate("CLI_HOTKEY_CURRENT", hotkey=get_user_hotkey()))
        return 0
    try:
        value = normalize_hotkey(value)
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    set_user_hotkey(value)
    print(translate("CLI_HOTKEY_SAVED", hotkey=value))
    return 0


__all__ = ["cmd_list", "cmd_archive", "cmd_hotkey", "format_pane"]
