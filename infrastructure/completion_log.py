"""Append-only log of completed tasks (``<tasks_dir>/done.md``)."""

import shutil
from datetime import date, datetime
from pathlib import Path
from typing import Callable

from core import StoreError, Task
from application.ports import CompletionLog

DONE_FILE = "done.md"
NOTE_DONE_MARK = "✓"
NOTE_OPEN_MARK = "○"


def format_entry(task: Task, day: date, include_notes: bool = True) -> str:
    """``- 2024-05-01: text`` plus one indented line per note."""
    lines = [f"- {day.isoformat()}: {task.text}"]
    if include_notes:
        for note in task.notes:
            mark = NOTE_DONE_MARK if note.completed else NOTE_OPEN_MARK
            lines.append(f"  {mark} {note.text}")
    return "\n".join(lines) + "\n"


class FileCompletionLog(CompletionLog):
    def __init__(
        self,
        tasks_dir: Path,
        include_notes: bool = True,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.tasks_dir = Path(tasks_dir).expanduser()
        self.include_notes = include_notes
        self.clock = clock

    @property
    def path(self) -> Path:
        return self.tasks_dir / DONE_FILE

    def append(self, task: Task) -> None:
        entry = format_entry(task, self.clock().date(), self.include_notes)
        try:
            self.tasks_dir.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as fh:
                fh.write(entry)
        except OSError as exc:
            raise StoreError(f"Failed to append to {self.path}: {exc}") from exc

    def archive(self) -> str:
        """Copy the log to ``done_<timestamp>.md`` and truncate it. Returns the archive name."""
        if not self.path.exists():
            raise StoreError("No completed tasks to archive")
        name = f"done_{self.clock().strftime('%Y-%m-%d_%H%M%S')}.md"
        try:
            shutil.copy2(self.path, self.tasks_dir / name)
            self.path.write_text("", encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"Failed to archive {self.path}: {exc}") from exc
        return name


__all__ = ["FileCompletionLog", "format_entry", "DONE_FILE"]
