import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from core import StoreError, TaskListState
from application.ports import TaskStore

STATE_FILE = "state.json"
CORRUPTED_SUFFIX = ".corrupted"

logger = logging.getLogger("taskshelf.store")


class FileTaskStore(TaskStore):
    """``TaskListState`` persisted as pretty-printed JSON in ``<tasks_dir>/state.json``."""

    def __init__(self, tasks_dir: Optional[Path] = None):
        if tasks_dir is None:
            from config import get_tasks_dir
            self.tasks_dir = get_tasks_dir()
        else:
            self.tasks_dir = Path(tasks_dir).expanduser()
        self.last_signature: int = 0

    @property
    def state_path(self) -> Path:
        return self.tasks_dir / STATE_FILE

    def load(self) -> TaskListState:
        """Read the state file. Missing file -> empty state.

        A file that cannot be parsed is moved aside to ``state.json.corrupted``
        and an empty state is returned.
        """
        path = self.state_path
        if not path.exists():
            self.last_signature = self.compute_signature()
            return TaskListState()
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"Failed to read {path}: {exc}") from exc
        try:
            data = json.loads(content)
            if not isinstance(data, dict):
                raise ValueError("top-level value must be an object")
            state = TaskListState.from_dict(data)
        except (ValueError, AttributeError, TypeError) as exc:
            backup = path.with_name(path.name + CORRUPTED_SUFFIX)
            logger.warning("Failed to parse state file: %s. Starting fresh (backup: %s)", exc, backup)
            try:
                path.replace(backup)
            except OSError as move_exc:
                logger.warning("Could not back up corrupted state file: %s", move_exc)
            self.last_signature = self.compute_signature()
            return TaskListState()
        self.last_signature = self.compute_signature()
        return state

    def save(self, state: TaskListState) -> None:
        payload = json.dumps(state.to_dict(), ensure_ascii=False, indent=2)
        tmp_path: Optional[Path] = None
        try:
            self.tasks_dir.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                delete=False,
                dir=str(self.tasks_dir),
                prefix=".state.",
                suffix=".tmp",
            ) as tmp:
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
                tmp_path = Path(tmp.name)
            os.replace(str(tmp_path), str(self.state_path))
        except OSError as exc:
            raise StoreError(f"Failed to write {self.state_path}: {exc}") from exc
        finally:
            if tmp_path and tmp_path.exists():
                try:
                    tmp_path.unlink()
                except OSError:
                    pass
        self.last_signature = self.compute_signature()

    def compute_signature(self) -> int:
        try:
            return int(self.state_path.stat().st_mtime_ns)
        except OSError:
            return 0

    def changed_externally(self) -> bool:
        """True when the file was written by someone other than this store."""
        return self.compute_signature() != self.last_signature


__all__ = ["FileTaskStore", "STATE_FILE"]
