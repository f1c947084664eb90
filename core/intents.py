"""Intents consumed by the reducer and effects it hands back to the session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .model import Pane, Task, TaskListState


class IntentKind(Enum):
    # navigation
    MOVE_CURSOR = "move_cursor"
    MOVE_NOTE_CURSOR = "move_note_cursor"
    TOGGLE_PANE = "toggle_pane"
    TOGGLE_EXPAND = "toggle_expand"
    COLLAPSE = "collapse"
    HIDE_WINDOW = "hide_window"
    # task-scoped mutations
    REORDER_TASK = "reorder_task"
    DELETE_TASK = "delete_task"
    COMPLETE_TASK = "complete_task"
    MOVE_TO_OTHER_PANE = "move_to_other_pane"
    UNDO = "undo"
    # note-scoped mutations
    REORDER_NOTE = "reorder_note"
    DELETE_NOTE = "delete_note"
    TOGGLE_NOTE = "toggle_note"
    # edit/create modes
    EDIT_TASK = "edit_task"
    CREATE_TASK = "create_task"
    EDIT_NOTE = "edit_note"
    CREATE_NOTE = "create_note"
    INSERT_TEXT = "insert_text"
    DELETE_BACKWARD = "delete_backward"
    SET_DRAFT = "set_draft"
    SAVE_DRAFT = "save_draft"
    CANCEL = "cancel"
    # overlays
    TOGGLE_HELP = "toggle_help"
    OPEN_SETTINGS = "open_settings"
    CAPTURE_HOTKEY = "capture_hotkey"
    SAVE_HOTKEY = "save_hotkey"
    HOTKEY_SAVED = "hotkey_saved"
    HOTKEY_FAILED = "hotkey_failed"
    # deferred completion lifecycle
    FINISH_COMPLETION = "finish_completion"
    COMPLETION_LOGGED = "completion_logged"
    COMPLETION_FAILED = "completion_failed"
    # external
    RELOAD = "reload"


@dataclass(frozen=True)
class Intent:
    kind: IntentKind
    delta: int = 0
    text: str = ""
    token: int = 0
    state: Optional[TaskListState] = None

    @classmethod
    def of(cls, kind: IntentKind, **payload) -> "Intent":
        return cls(kind=kind, **payload)


# ---------------------------------------------------------------- effects


@dataclass(frozen=True)
class Persist:
    """Hand the new state to the store. ``immediate`` bypasses the debounce."""

    state: TaskListState
    immediate: bool = False


@dataclass(frozen=True)
class LogCompletion:
    task: Task
    token: int


@dataclass(frozen=True)
class ScheduleCompletion:
    token: int


@dataclass(frozen=True)
class Rejected:
    """A well-formed mutation refused by an invariant (UI shakes ``pane``)."""

    pane: Pane


@dataclass(frozen=True)
class Notice:
    """Transient status message, ``key`` is an i18n key."""

    key: str
    detail: str = ""


@dataclass(frozen=True)
class HideWindow:
    pass


@dataclass(frozen=True)
class ApplyHotkey:
    hotkey: str


Effect = Union[Persist, LogCompletion, ScheduleCompletion, Rejected, Notice, HideWindow, ApplyHotkey]


__all__ = [
    "IntentKind",
    "Intent",
    "Persist",
    "LogCompletion",
    "ScheduleCompletion",
    "Rejected",
    "Notice",
    "HideWindow",
    "ApplyHotkey",
    "Effect",
]
