"""Entity model: notes, tasks and the two-pane task list state.

All entities are frozen; every change produces a new value. A snapshot of
``TaskListState`` can therefore be kept in history without copying.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple, Union


class Pane(Enum):
    CURRENT = "current"
    SHELF = "shelf"

    def other(self) -> "Pane":
        return Pane.SHELF if self is Pane.CURRENT else Pane.CURRENT


@dataclass(frozen=True)
class Note:
    text: str
    completed: bool = False

    def toggled(self) -> "Note":
        return replace(self, completed=not self.completed)

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "completed": self.completed}

    @classmethod
    def from_raw(cls, raw: Union[str, Mapping[str, Any]]) -> "Note":
        # Legacy files stored notes as bare strings.
        if isinstance(raw, str):
            return cls(text=raw)
        return cls(text=str(raw.get("text", "")), completed=bool(raw.get("completed", False)))


@dataclass(frozen=True)
class Task:
    text: str
    notes: Tuple[Note, ...] = ()

    def with_text(self, text: str) -> "Task":
        return replace(self, text=text)

    def with_notes(self, notes) -> "Task":
        return replace(self, notes=tuple(notes))

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "notes": [n.to_dict() for n in self.notes]}

    @classmethod
    def from_raw(cls, raw: Union[str, Mapping[str, Any]]) -> "Task":
        if isinstance(raw, str):
            return cls(text=raw)
        notes = raw.get("notes") or []
        return cls(text=str(raw.get("text", "")), notes=tuple(Note.from_raw(n) for n in notes))


@dataclass(frozen=True)
class TaskListState:
    """Both lists. ``current`` is capacity bounded, ``shelf`` is not."""

    current: Tuple[Task, ...] = ()
    shelf: Tuple[Task, ...] = ()

    def pane(self, pane: Pane) -> Tuple[Task, ...]:
        return self.current if pane is Pane.CURRENT else self.shelf

    def with_pane(self, pane: Pane, items) -> "TaskListState":
        if pane is Pane.CURRENT:
            return replace(self, current=tuple(items))
        return replace(self, shelf=tuple(items))

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "current": [t.to_dict() for t in self.current],
            "shelf": [t.to_dict() for t in self.shelf],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TaskListState":
        current = data.get("current") or []
        shelf = data.get("shelf") or []
        return cls(
            current=tuple(Task.from_raw(t) for t in current),
            shelf=tuple(Task.from_raw(t) for t in shelf),
        )


# Tuple helpers: every list edit goes through one of these so callers never
# mutate a sequence in place.

def replace_at(items: Tuple, index: int, value) -> Tuple:
    return items[:index] + (value,) + items[index + 1:]


def remove_at(items: Tuple, index: int) -> Tuple:
    return items[:index] + items[index + 1:]


def insert_at(items: Tuple, index: int, value) -> Tuple:
    return items[:index] + (value,) + items[index:]


def swap(items: Tuple, a: int, b: int) -> Tuple:
    as_list = list(items)
    as_list[a], as_list[b] = as_list[b], as_list[a]
    return tuple(as_list)


__all__ = [
    "Pane",
    "Note",
    "Task",
    "TaskListState",
    "replace_at",
    "remove_at",
    "insert_at",
    "swap",
]
