from datetime import date, datetime
from pathlib import Path

import pytest

from core import Note, StoreError, Task
from infrastructure.completion_log import FileCompletionLog, format_entry

FIXED = datetime(2024, 5, 1, 9, 30, 15)


def _log(tmp_path: Path, **kwargs) -> FileCompletionLog:
    return FileCompletionLog(tmp_path, clock=lambda: FIXED, **kwargs)


def test_format_entry_with_notes():
    task = Task("write report", (Note("outline", True), Note("draft")))
    assert format_entry(task, date(2024, 5, 1)) == (
        "- 2024-05-01: write report\n"
        "  ✓ outline\n"
        "  ○ draft\n"
    )


def test_format_entry_without_notes_flag():
    task = Task("write report", (Note("outline"),))
    assert format_entry(task, date(2024, 5, 1), include_notes=False) == "- 2024-05-01: write report\n"


def test_append_creates_directory_and_accumulates(tmp_path: Path):
    log = _log(tmp_path / "nested")
    log.append(Task("one"))
    log.append(Task("two", (Note("n"),)))
    assert log.path.read_text(encoding="utf-8") == "- 2024-05-01: one\n- 2024-05-01: two\n  ○ n\n"


def test_append_respects_include_notes(tmp_path: Path):
    log = _log(tmp_path, include_notes=False)
    log.append(Task("one", (Note("hidden"),)))
    assert "hidden" not in log.path.read_text(encoding="utf-8")


def test_append_failure_raises_store_error(tmp_path: Path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    log = _log(blocker)
    with pytest.raises(StoreError):
        log.append(Task("one"))


def test_archive_copies_and_truncates(tmp_path: Path):
    log = _log(tmp_path)
    log.append(Task("one"))

    name = log.archive()

    assert name == "done_2024-05-01_093015.md"
    assert (tmp_path / name).read_text(encoding="utf-8") == "- 2024-05-01: one\n"
    assert log.path.read_text(encoding="utf-8") == ""


def test_archive_without_log_fails(tmp_path: Path):
    log = _log(tmp_path)
    assert not log.path.exists()
    with pytest.raises(StoreError, match="No completed tasks"):
        log.archive()
