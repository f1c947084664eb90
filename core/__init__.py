from .errors import TaskShelfError, StoreError, ConfigError
from .model import Note, Pane, Task, TaskListState
from .selection import Selection, clamp_index, clamp_note_index
from .modes import (
    NAVIGATE,
    CreateNote,
    CreateTask,
    EditNote,
    EditTask,
    Mode,
    Navigate,
    ShowHelp,
    ShowSettings,
    draft_of,
    is_editing,
    is_note_scoped,
    is_overlay,
)
from .history import History, MAX_HISTORY
from .intents import (
    Intent,
    IntentKind,
    Persist,
    LogCompletion,
    ScheduleCompletion,
    Rejected,
    Notice,
    HideWindow,
    ApplyHotkey,
)
from .engine import EngineOptions, Model, PendingCompletion, Transition, enforce_capacity, reduce
from .dispatcher import KeyEvent, dispatch, event_to_hotkey

__all__ = [
    # Errors
    "TaskShelfError",
    "StoreError",
    "ConfigError",
    # Entities
    "Note",
    "Pane",
    "Task",
    "TaskListState",
    "Selection",
    "clamp_index",
    "clamp_note_index",
    # Modes
    "NAVIGATE",
    "Navigate",
    "EditTask",
    "CreateTask",
    "EditNote",
    "CreateNote",
    "ShowHelp",
    "ShowSettings",
    "Mode",
    "draft_of",
    "is_editing",
    "is_note_scoped",
    "is_overlay",
    # History
    "History",
    "MAX_HISTORY",
    # Intents / effects
    "Intent",
    "IntentKind",
    "Persist",
    "LogCompletion",
    "ScheduleCompletion",
    "Rejected",
    "Notice",
    "HideWindow",
    "ApplyHotkey",
    # Engine
    "EngineOptions",
    "Model",
    "PendingCompletion",
    "Transition",
    "enforce_capacity",
    "reduce",
    # Dispatcher
    "KeyEvent",
    "dispatch",
    "event_to_hotkey",
]
