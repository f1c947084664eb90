"""Mutation engine: the reducer ``(Model, Intent) -> Transition``.

The reducer is pure. It never touches the store, the completion log or the
screen; instead it returns effects for the session to carry out. Every
committing mutation pushes the previous ``TaskListState`` onto the history
*before* the new state replaces it and emits a ``Persist`` effect.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Dict, Optional, Tuple

from .history import History, MAX_HISTORY
from .intents import (
    ApplyHotkey,
    Effect,
    HideWindow,
    Intent,
    IntentKind,
    LogCompletion,
    Notice,
    Persist,
    Rejected,
    ScheduleCompletion,
)
from .model import Note, Pane, Task, TaskListState, insert_at, remove_at, replace_at, swap
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
    is_editing,
    is_overlay,
    with_draft,
)
from .selection import (
    Selection,
    clamp_index,
    clamp_note_index,
    move_cursor,
    reclamp,
    toggle_expand,
    toggle_pane,
)

INSERT_AT_END = "end"
INSERT_AFTER_SELECTION = "after_selection"
INSERT_POSITIONS = (INSERT_AT_END, INSERT_AFTER_SELECTION)


@dataclass(frozen=True)
class EngineOptions:
    max_current: int = 10
    insert_position: str = INSERT_AT_END
    continuous_create: bool = True


@dataclass(frozen=True)
class PendingCompletion:
    """A completion captured at key time, committed after the flash delay."""

    pane: Pane
    index: int
    task: Task
    token: int


@dataclass(frozen=True)
class Model:
    tasks: TaskListState = field(default_factory=TaskListState)
    selection: Selection = field(default_factory=Selection)
    mode: Mode = NAVIGATE
    history: History = field(default_factory=History)
    pending: Optional[PendingCompletion] = None
    next_token: int = 1

    @classmethod
    def initial(cls, tasks: TaskListState, history_limit: int = MAX_HISTORY) -> "Model":
        return cls(tasks=tasks, selection=reclamp(Selection(), tasks), history=History(limit=history_limit))

    @property
    def active_list(self) -> Tuple[Task, ...]:
        return self.tasks.pane(self.selection.active_pane)

    @property
    def expanded_task(self) -> Optional[Task]:
        return self.selection.expanded_task(self.tasks)


@dataclass(frozen=True)
class Transition:
    model: Model
    effects: Tuple[Effect, ...] = ()


def enforce_capacity(state: TaskListState, max_current: int) -> TaskListState:
    """Spill the tail of an over-full ``current`` onto the front of ``shelf``."""
    if len(state.current) <= max_current:
        return state
    keep, spill = state.current[:max_current], state.current[max_current:]
    return TaskListState(current=keep, shelf=spill + state.shelf)


# ---------------------------------------------------------------- helpers


def _commit(
    model: Model,
    tasks: TaskListState,
    selection: Selection,
    mode: Mode = NAVIGATE,
    extra: Tuple[Effect, ...] = (),
) -> Transition:
    history = model.history.push(model.tasks)
    new_model = replace(model, tasks=tasks, selection=selection, mode=mode, history=history)
    return Transition(new_model, (Persist(tasks),) + extra)


def _with_task(model: Model, index: int, task: Task) -> TaskListState:
    pane = model.selection.active_pane
    return model.tasks.with_pane(pane, replace_at(model.active_list, index, task))


def _navigating(model: Model) -> bool:
    return isinstance(model.mode, Navigate)


# ---------------------------------------------------------------- navigation


def _move_cursor(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if not _navigating(model):
        return Transition(model)
    return Transition(replace(model, selection=move_cursor(model.selection, model.tasks, intent.delta)))


def _toggle_pane(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if not _navigating(model):
        return Transition(model)
    return Transition(replace(model, selection=toggle_pane(model.selection, model.tasks)))


def _toggle_expand(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if not _navigating(model):
        return Transition(model)
    return Transition(replace(model, selection=toggle_expand(model.selection, model.tasks)))


def _collapse(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if not _navigating(model) or not model.selection.expanded:
        return Transition(model)
    return Transition(replace(model, selection=model.selection.collapsed()))


def _hide_window(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if not _navigating(model):
        return Transition(model)
    return Transition(model, (HideWindow(),))


# ---------------------------------------------------------------- task mutations


def _reorder_task(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    items = model.active_list
    if not _navigating(model) or model.selection.expanded or len(items) < 2:
        return Transition(model)
    index = clamp_index(model.selection.selected_index, items)
    target = index + intent.delta
    if target < 0 or target >= len(items):
        return Transition(model)
    tasks = model.tasks.with_pane(model.selection.active_pane, swap(items, index, target))
    return _commit(model, tasks, replace(model.selection, selected_index=target))


def _delete_task(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    items = model.active_list
    if not _navigating(model) or not items:
        return Transition(model)
    index = clamp_index(model.selection.selected_index, items)
    remaining = remove_at(items, index)
    tasks = model.tasks.with_pane(model.selection.active_pane, remaining)
    selection = Selection(
        active_pane=model.selection.active_pane,
        selected_index=clamp_index(index, remaining),
    )
    return _commit(model, tasks, selection)


def _complete_task(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    items = model.active_list
    if not _navigating(model) or not items:
        return Transition(model)
    index = clamp_index(model.selection.selected_index, items)
    token = model.next_token
    pending = PendingCompletion(model.selection.active_pane, index, items[index], token)
    new_model = replace(
        model,
        pending=pending,
        next_token=token + 1,
        selection=replace(model.selection, selected_index=index),
    )
    return Transition(new_model, (ScheduleCompletion(token),))


def _pending_still_valid(model: Model, token: int) -> bool:
    pending = model.pending
    if pending is None or pending.token != token:
        return False
    items = model.tasks.pane(pending.pane)
    return 0 <= pending.index < len(items) and items[pending.index] == pending.task


def _finish_completion(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if model.pending is None or model.pending.token != intent.token:
        return Transition(model)
    if not _pending_still_valid(model, intent.token):
        return Transition(replace(model, pending=None))
    return Transition(model, (LogCompletion(model.pending.task, intent.token),))


def _completion_logged(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if not _pending_still_valid(model, intent.token):
        if model.pending is not None and model.pending.token == intent.token:
            return Transition(replace(model, pending=None))
        return Transition(model)
    pending = model.pending
    remaining = remove_at(model.tasks.pane(pending.pane), pending.index)
    tasks = model.tasks.with_pane(pending.pane, remaining)
    if model.selection.active_pane is pending.pane:
        selection = Selection(active_pane=pending.pane, selected_index=clamp_index(pending.index, remaining))
    else:
        selection = reclamp(model.selection, tasks)
    return _commit(replace(model, pending=None), tasks, selection, mode=model.mode)


def _completion_failed(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if model.pending is None or model.pending.token != intent.token:
        return Transition(model)
    return Transition(replace(model, pending=None), (Notice("STATUS_COMPLETE_FAILED", intent.text),))


def _move_to_other_pane(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    items = model.active_list
    if not _navigating(model) or model.selection.expanded or not items:
        return Transition(model)
    source = model.selection.active_pane
    destination = source.other()
    if destination is Pane.CURRENT and len(model.tasks.current) >= options.max_current:
        return Transition(model, (Rejected(Pane.CURRENT),))
    index = clamp_index(model.selection.selected_index, items)
    remaining = remove_at(items, index)
    tasks = model.tasks.with_pane(source, remaining).with_pane(
        destination, model.tasks.pane(destination) + (items[index],)
    )
    return _commit(model, tasks, replace(model.selection, selected_index=clamp_index(index, remaining)))


def _undo(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if not _navigating(model):
        return Transition(model)
    history, snapshot = model.history.pop()
    if snapshot is None:
        return Transition(model)
    selection = reclamp(model.selection.collapsed(), snapshot)
    new_model = replace(model, tasks=snapshot, history=history, selection=selection)
    return Transition(new_model, (Persist(snapshot, immediate=True),))


# ---------------------------------------------------------------- note mutations


def _reorder_note(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    task = model.expanded_task
    if not _navigating(model) or task is None or len(task.notes) < 2:
        return Transition(model)
    index = clamp_note_index(model.selection.selected_note_index, task.notes)
    target = index + intent.delta
    if target < 0 or target >= len(task.notes):
        return Transition(model)
    tasks = _with_task(model, model.selection.expanded_index, task.with_notes(swap(task.notes, index, target)))
    return _commit(model, tasks, replace(model.selection, selected_note_index=target))


def _delete_note(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    task = model.expanded_task
    if not _navigating(model) or task is None or not task.notes:
        return Transition(model)
    index = clamp_note_index(model.selection.selected_note_index, task.notes)
    remaining = remove_at(task.notes, index)
    tasks = _with_task(model, model.selection.expanded_index, task.with_notes(remaining))
    return _commit(model, tasks, replace(model.selection, selected_note_index=clamp_note_index(index, remaining)))


def _toggle_note(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    task = model.expanded_task
    if not _navigating(model) or task is None or not task.notes:
        return Transition(model)
    index = clamp_note_index(model.selection.selected_note_index, task.notes)
    notes = replace_at(task.notes, index, task.notes[index].toggled())
    tasks = _with_task(model, model.selection.expanded_index, task.with_notes(notes))
    return _commit(model, tasks, replace(model.selection, selected_note_index=index))


# ---------------------------------------------------------------- edit/create modes


def _edit_task(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    items = model.active_list
    if not _navigating(model) or model.selection.expanded or not items:
        return Transition(model)
    index = clamp_index(model.selection.selected_index, items)
    return Transition(
        replace(
            model,
            mode=EditTask(index=index, draft=items[index].text),
            selection=replace(model.selection, selected_index=index),
        )
    )


def _create_task(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if not _navigating(model) or model.selection.expanded:
        return Transition(model)
    return Transition(replace(model, mode=CreateTask()))


def _edit_note(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    task = model.expanded_task
    if not _navigating(model) or task is None:
        return Transition(model)
    if not task.notes:
        return Transition(replace(model, mode=CreateNote()))
    index = clamp_note_index(model.selection.selected_note_index, task.notes)
    return Transition(
        replace(
            model,
            mode=EditNote(index=index, draft=task.notes[index].text),
            selection=replace(model.selection, selected_note_index=index),
        )
    )


def _create_note(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if not _navigating(model) or model.expanded_task is None:
        return Transition(model)
    return Transition(replace(model, mode=CreateNote()))


def _insert_text(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if not is_editing(model.mode) or not intent.text:
        return Transition(model)
    return Transition(replace(model, mode=with_draft(model.mode, model.mode.draft + intent.text)))


def _delete_backward(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if not is_editing(model.mode) or not model.mode.draft:
        return Transition(model)
    return Transition(replace(model, mode=with_draft(model.mode, model.mode.draft[:-1])))


def _set_draft(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if not is_editing(model.mode) or model.mode.draft == intent.text:
        return Transition(model)
    return Transition(replace(model, mode=with_draft(model.mode, intent.text)))


def _save_edit_task(model: Model, mode: EditTask, text: str, options: EngineOptions) -> Transition:
    items = model.active_list
    if not (0 <= mode.index < len(items)) or items[mode.index].text == text:
        return Transition(replace(model, mode=NAVIGATE))
    tasks = _with_task(model, mode.index, items[mode.index].with_text(text))
    return _commit(model, tasks, model.selection)


def _save_create_task(model: Model, mode: CreateTask, text: str, options: EngineOptions) -> Transition:
    next_mode: Mode = CreateTask() if options.continuous_create else NAVIGATE
    new_task = Task(text=text)
    pane = model.selection.active_pane
    if pane is Pane.CURRENT and len(model.tasks.current) >= options.max_current:
        tasks = model.tasks.with_pane(Pane.SHELF, model.tasks.shelf + (new_task,))
        return _commit(model, tasks, model.selection, next_mode, (Notice("STATUS_ADDED_TO_SHELF", text),))
    items = model.active_list
    if options.insert_position == INSERT_AFTER_SELECTION and items:
        position = clamp_index(model.selection.selected_index, items) + 1
    else:
        position = len(items)
    tasks = model.tasks.with_pane(pane, insert_at(items, position, new_task))
    return _commit(model, tasks, replace(model.selection, selected_index=position), next_mode)


def _save_edit_note(model: Model, mode: EditNote, text: str, options: EngineOptions) -> Transition:
    task = model.expanded_task
    if task is None or not (0 <= mode.index < len(task.notes)) or task.notes[mode.index].text == text:
        return Transition(replace(model, mode=NAVIGATE))
    notes = replace_at(task.notes, mode.index, replace(task.notes[mode.index], text=text))
    tasks = _with_task(model, model.selection.expanded_index, task.with_notes(notes))
    return _commit(model, tasks, model.selection)


def _save_create_note(model: Model, mode: CreateNote, text: str, options: EngineOptions) -> Transition:
    task = model.expanded_task
    if task is None:
        return Transition(replace(model, mode=NAVIGATE))
    next_mode: Mode = CreateNote() if options.continuous_create else NAVIGATE
    notes = task.notes + (Note(text=text),)
    tasks = _with_task(model, model.selection.expanded_index, task.with_notes(notes))
    return _commit(model, tasks, replace(model.selection, selected_note_index=len(notes) - 1), next_mode)


_SAVERS: Dict[type, Callable] = {
    EditTask: _save_edit_task,
    CreateTask: _save_create_task,
    EditNote: _save_edit_note,
    CreateNote: _save_create_note,
}


def _save_draft(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    mode = model.mode
    if not is_editing(mode):
        return Transition(model)
    text = mode.draft.strip()
    if not text:
        return Transition(replace(model, mode=NAVIGATE))
    return _SAVERS[type(mode)](model, mode, text, options)


def _cancel(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if is_editing(model.mode) or is_overlay(model.mode):
        return Transition(replace(model, mode=NAVIGATE))
    return Transition(model)


# ---------------------------------------------------------------- overlays


def _toggle_help(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if isinstance(model.mode, ShowHelp):
        return Transition(replace(model, mode=NAVIGATE))
    if _navigating(model):
        return Transition(replace(model, mode=ShowHelp()))
    return Transition(model)


def _open_settings(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if not _navigating(model) or model.selection.expanded:
        return Transition(model)
    return Transition(replace(model, mode=ShowSettings()))


def _capture_hotkey(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if not isinstance(model.mode, ShowSettings) or not intent.text:
        return Transition(model)
    return Transition(replace(model, mode=ShowSettings(pending_hotkey=intent.text)))


def _save_hotkey(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    mode = model.mode
    if not isinstance(mode, ShowSettings) or not mode.pending_hotkey:
        return Transition(model)
    return Transition(model, (ApplyHotkey(mode.pending_hotkey),))


def _hotkey_saved(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if not isinstance(model.mode, ShowSettings):
        return Transition(model)
    return Transition(replace(model, mode=NAVIGATE), (Notice("STATUS_HOTKEY_SAVED", intent.text),))


def _hotkey_failed(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    mode = model.mode
    if not isinstance(mode, ShowSettings):
        return Transition(model)
    return Transition(replace(model, mode=replace(mode, error=intent.text or "error")))


# ---------------------------------------------------------------- external reload


def _mode_after_reload(mode: Mode, selection: Selection, tasks: TaskListState) -> Mode:
    items = tasks.pane(selection.active_pane)
    if isinstance(mode, EditTask) and not (0 <= mode.index < len(items)):
        return NAVIGATE
    task = selection.expanded_task(tasks)
    if isinstance(mode, EditNote) and (task is None or not (0 <= mode.index < len(task.notes))):
        return NAVIGATE
    if isinstance(mode, CreateNote) and task is None:
        return NAVIGATE
    return mode


def _reload(model: Model, intent: Intent, options: EngineOptions) -> Transition:
    if intent.state is None:
        return Transition(model)
    tasks = enforce_capacity(intent.state, options.max_current)
    selection = reclamp(model.selection, tasks)
    return Transition(
        replace(
            model,
            tasks=tasks,
            selection=selection,
            mode=_mode_after_reload(model.mode, selection, tasks),
            history=model.history.clear(),
            pending=None,
        )
    )


_HANDLERS: Dict[IntentKind, Callable[[Model, Intent, EngineOptions], Transition]] = {
    IntentKind.MOVE_CURSOR: _move_cursor,
    IntentKind.MOVE_NOTE_CURSOR: _move_cursor,
    IntentKind.TOGGLE_PANE: _toggle_pane,
    IntentKind.TOGGLE_EXPAND: _toggle_expand,
    IntentKind.COLLAPSE: _collapse,
    IntentKind.HIDE_WINDOW: _hide_window,
    IntentKind.REORDER_TASK: _reorder_task,
    IntentKind.DELETE_TASK: _delete_task,
    IntentKind.COMPLETE_TASK: _complete_task,
    IntentKind.MOVE_TO_OTHER_PANE: _move_to_other_pane,
    IntentKind.UNDO: _undo,
    IntentKind.REORDER_NOTE: _reorder_note,
    IntentKind.DELETE_NOTE: _delete_note,
    IntentKind.TOGGLE_NOTE: _toggle_note,
    IntentKind.EDIT_TASK: _edit_task,
    IntentKind.CREATE_TASK: _create_task,
    IntentKind.EDIT_NOTE: _edit_note,
    IntentKind.CREATE_NOTE: _create_note,
    IntentKind.INSERT_TEXT: _insert_text,
    IntentKind.DELETE_BACKWARD: _delete_backward,
    IntentKind.SET_DRAFT: _set_draft,
    IntentKind.SAVE_DRAFT: _save_draft,
    IntentKind.CANCEL: _cancel,
    IntentKind.TOGGLE_HELP: _toggle_help,
    IntentKind.OPEN_SETTINGS: _open_settings,
    IntentKind.CAPTURE_HOTKEY: _capture_hotkey,
    IntentKind.SAVE_HOTKEY: _save_hotkey,
    IntentKind.HOTKEY_SAVED: _hotkey_saved,
    IntentKind.HOTKEY_FAILED: _hotkey_failed,
    IntentKind.FINISH_COMPLETION: _finish_completion,
    IntentKind.COMPLETION_LOGGED: _completion_logged,
    IntentKind.COMPLETION_FAILED: _completion_failed,
    IntentKind.RELOAD: _reload,
}

# Intents that belong to a pending completion's own lifecycle; every other
# intent means the user moved on and the pending completion is dropped.
_COMPLETION_LIFECYCLE = frozenset(
    {
        IntentKind.FINISH_COMPLETION,
        IntentKind.COMPLETION_LOGGED,
        IntentKind.COMPLETION_FAILED,
    }
)


def reduce(model: Model, intent: Intent, options: Optional[EngineOptions] = None) -> Transition:
    """Apply ``intent`` to ``model``. Unknown or illegal intents are no-ops."""
    options = options or EngineOptions()
    if model.pending is not None and intent.kind not in _COMPLETION_LIFECYCLE:
        model = replace(model, pending=None)
    handler = _HANDLERS.get(intent.kind)
    if handler is None:
        return Transition(model)
    return handler(model, intent, options)


__all__ = [
    "EngineOptions",
    "Model",
    "PendingCompletion",
    "Transition",
    "INSERT_AT_END",
    "INSERT_AFTER_SELECTION",
    "INSERT_POSITIONS",
    "enforce_capacity",
    "reduce",
]
