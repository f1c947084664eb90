"""Bounded undo stack of ``TaskListState`` snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .model import TaskListState

MAX_HISTORY = 50


@dataclass(frozen=True)
class History:
    """Oldest snapshot first. Pushing beyond ``limit`` evicts the oldest."""

    entries: Tuple[TaskListState, ...] = ()
    limit: int = MAX_HISTORY

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def push(self, snapshot: TaskListState) -> "History":
        entries = self.entries + (snapshot,)
        limit = max(self.limit, 0)
        if len(entries) > limit:
            entries = entries[len(entries) - limit:]
        return History(entries=entries, limit=self.limit)

    def pop(self) -> Tuple["History", Optional[TaskListState]]:
        if not self.entries:
            return self, None
        return History(entries=self.entries[:-1], limit=self.limit), self.entries[-1]

    def clear(self) -> "History":
        return History(limit=self.limit)


__all__ = ["History", "MAX_HISTORY"]
