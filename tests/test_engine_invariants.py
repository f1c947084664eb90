"""Drive the reducer with long pseudo-random intent sequences and check invariants."""

import random

import pytest

from core import (
    EngineOptions,
    Intent,
    IntentKind,
    LogCompletion,
    Model,
    Note,
    ScheduleCompletion,
    Task,
    TaskListState,
    is_editing,
    reduce,
)

USER_INTENTS = [
    (IntentKind.MOVE_CURSOR, {"delta": 1}),
    (IntentKind.MOVE_CURSOR, {"delta": -1}),
    (IntentKind.MOVE_NOTE_CURSOR, {"delta": 1}),
    (IntentKind.TOGGLE_PANE, {}),
    (IntentKind.TOGGLE_EXPAND, {}),
    (IntentKind.COLLAPSE, {}),
    (IntentKind.REORDER_TASK, {"delta": 1}),
    (IntentKind.REORDER_TASK, {"delta": -1}),
    (IntentKind.REORDER_NOTE, {"delta": 1}),
    (IntentKind.DELETE_TASK, {}),
    (IntentKind.DELETE_NOTE, {}),
    (IntentKind.TOGGLE_NOTE, {}),
    (IntentKind.COMPLETE_TASK, {}),
    (IntentKind.MOVE_TO_OTHER_PANE, {}),
    (IntentKind.UNDO, {}),
    (IntentKind.EDIT_TASK, {}),
    (IntentKind.CREATE_TASK, {}),
    (IntentKind.CREATE_TASK, {}),
    (IntentKind.EDIT_NOTE, {}),
    (IntentKind.CREATE_NOTE, {}),
    (IntentKind.INSERT_TEXT, {"text": "x"}),
    (IntentKind.SAVE_DRAFT, {}),
    (IntentKind.SAVE_DRAFT, {}),
    (IntentKind.CANCEL, {}),
    (IntentKind.TOGGLE_HELP, {}),
    (IntentKind.OPEN_SETTINGS, {}),
]


def _seed_state():
    return TaskListState(
        current=(Task("a", (Note("n1"), Note("n2"))), Task("b")),
        shelf=(Task("c"), Task("d", (Note("n3"),))),
    )


def _assert_invariants(model: Model, options: EngineOptions):
    tasks = model.tasks
    assert len(tasks.current) <= options.max_current
    items = model.active_list
    sel = model.selection
    if items:
        assert 0 <= sel.selected_index < len(items)
    else:
        assert sel.selected_index == 0
    if sel.expanded_index is not None:
        assert 0 <= sel.expanded_index < len(items)
        notes = items[sel.expanded_index].notes
        if notes:
            assert 0 <= sel.selected_note_index < len(notes)
        else:
            assert sel.selected_note_index == 0
    assert len(model.history) <= model.history.limit


def _feed(model, intent, options):
    """Apply one intent and immediately play back the completion lifecycle."""
    result = reduce(model, intent, options)
    model = result.model
    for effect in result.effects:
        if isinstance(effect, ScheduleCompletion):
            model = _feed(model, Intent.of(IntentKind.FINISH_COMPLETION, token=effect.token), options)
        elif isinstance(effect, LogCompletion):
            model = _feed(model, Intent.of(IntentKind.COMPLETION_LOGGED, token=effect.token), options)
    return model


@pytest.mark.parametrize("seed", range(12))
@pytest.mark.parametrize("max_current", [3, 5, 10])
def test_random_walk_keeps_invariants(seed, max_current):
    rng = random.Random(seed)
    options = EngineOptions(max_current=max_current)
    model = Model.initial(_seed_state(), history_limit=10)
    for _ in range(400):
        kind, payload = rng.choice(USER_INTENTS)
        model = _feed(model, Intent.of(kind, **payload), options)
        _assert_invariants(model, options)


def test_cancel_is_idempotent_for_any_draft():
    rng = random.Random(7)
    options = EngineOptions(max_current=3)
    model = Model.initial(_seed_state())
    for _ in range(50):
        model = reduce(model, Intent.of(IntentKind.EDIT_TASK), options).model
        if not is_editing(model.mode):
            continue
        before = model.tasks
        draft = "".join(rng.choice("abc ") for _ in range(rng.randint(0, 8)))
        model = reduce(model, Intent.of(IntentKind.SET_DRAFT, text=draft), options).model
        model = reduce(model, Intent.of(IntentKind.CANCEL), options).model
        assert model.tasks == before
