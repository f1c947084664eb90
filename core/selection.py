"""Pane cursor: active pane, selected task, expanded task, selected note."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence

from .model import Pane, Task, TaskListState


def clamp_index(idx: int, items: Sequence) -> int:
    if not items:
        return 0
    return max(0, min(idx, len(items) - 1))


def clamp_note_index(idx: int, notes: Sequence) -> int:
    if not notes:
        return 0
    return max(0, min(idx, len(notes) - 1))


@dataclass(frozen=True)
class Selection:
    active_pane: Pane = Pane.CURRENT
    selected_index: int = 0
    expanded_index: Optional[int] = None
    selected_note_index: int = 0

    @property
    def expanded(self) -> bool:
        return self.expanded_index is not None

    def active_list(self, state: TaskListState):
        return state.pane(self.active_pane)

    def expanded_task(self, state: TaskListState) -> Optional[Task]:
        if self.expanded_index is None:
            return None
        items = self.active_list(state)
        if 0 <= self.expanded_index < len(items):
            return items[self.expanded_index]
        return None

    def collapsed(self) -> "Selection":
        return replace(self, expanded_index=None, selected_note_index=0)


def reclamp(selection: Selection, state: TaskListState) -> Selection:
    """Bring every index of ``selection`` back inside ``state``.

    An expansion that no longer points at a task is closed.
    """
    items = state.pane(selection.active_pane)
    index = clamp_index(selection.selected_index, items)
    expanded = selection.expanded_index
    if expanded is not None and not (0 <= expanded < len(items)):
        expanded = None
    note_index = 0
    if expanded is not None:
        note_index = clamp_note_index(selection.selected_note_index, items[expanded].notes)
    return Selection(
        active_pane=selection.active_pane,
        selected_index=index,
        expanded_index=expanded,
        selected_note_index=note_index,
    )


def toggle_pane(selection: Selection, state: TaskListState) -> Selection:
    """Switch panes keeping the numeric position, never the identity."""
    pane = selection.active_pane.other()
    return Selection(
        active_pane=pane,
        selected_index=clamp_index(selection.selected_index, state.pane(pane)),
        expanded_index=None,
        selected_note_index=0,
    )


def toggle_expand(selection: Selection, state: TaskListState) -> Selection:
    items = selection.active_list(state)
    if not items:
        return selection
    if selection.expanded_index == selection.selected_index:
        return selection.collapsed()
    return replace(selection, expanded_index=clamp_index(selection.selected_index, items), selected_note_index=0)


def move_cursor(selection: Selection, state: TaskListState, delta: int) -> Selection:
    """Move the note cursor while a task is expanded, the task cursor otherwise."""
    task = selection.expanded_task(state)
    if task is not None:
        return replace(
            selection,
            selected_note_index=clamp_note_index(selection.selected_note_index + delta, task.notes),
        )
    items = selection.active_list(state)
    return replace(selection, selected_index=clamp_index(selection.selected_index + delta, items))


__all__ = [
    "Selection",
    "clamp_index",
    "clamp_note_index",
    "reclamp",
    "toggle_pane",
    "toggle_expand",
    "move_cursor",
]
