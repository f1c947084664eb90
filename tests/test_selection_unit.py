from core import Note, Pane, Selection, Task, TaskListState, clamp_index, clamp_note_index
from core.selection import move_cursor, reclamp, toggle_expand, toggle_pane


def _state():
    return TaskListState(
        current=(Task("a", (Note("x"), Note("y"))), Task("b"), Task("c")),
        shelf=(Task("s"),),
    )


def test_clamp_index_bounds():
    assert clamp_index(5, []) == 0
    assert clamp_index(-3, [1, 2]) == 0
    assert clamp_index(7, [1, 2]) == 1
    assert clamp_note_index(4, ()) == 0


def test_toggle_pane_keeps_numeric_position_clamped():
    sel = Selection(selected_index=2, expanded_index=2)
    moved = toggle_pane(sel, _state())
    assert moved.active_pane is Pane.SHELF
    assert moved.selected_index == 0
    assert moved.expanded_index is None


def test_toggle_expand_opens_and_closes():
    state = _state()
    opened = toggle_expand(Selection(selected_index=0, selected_note_index=3), state)
    assert opened.expanded_index == 0
    assert opened.selected_note_index == 0
    assert toggle_expand(opened, state).expanded_index is None


def test_toggle_expand_noop_on_empty_list():
    sel = Selection(active_pane=Pane.SHELF)
    assert toggle_expand(sel, TaskListState()) == sel


def test_move_cursor_moves_notes_when_expanded():
    state = _state()
    sel = Selection(selected_index=0, expanded_index=0)
    assert move_cursor(sel, state, 1).selected_note_index == 1
    assert move_cursor(sel, state, 1).selected_index == 0
    assert move_cursor(sel, state, -1).selected_note_index == 0


def test_move_cursor_clamps_at_both_ends():
    state = _state()
    assert move_cursor(Selection(selected_index=2), state, 1).selected_index == 2
    assert move_cursor(Selection(selected_index=0), state, -1).selected_index == 0


def test_reclamp_closes_dangling_expansion():
    sel = Selection(selected_index=5, expanded_index=4, selected_note_index=2)
    fixed = reclamp(sel, _state())
    assert fixed.selected_index == 2
    assert fixed.expanded_index is None
    assert fixed.selected_note_index == 0


def test_reclamp_clamps_note_index():
    fixed = reclamp(Selection(expanded_index=0, selected_note_index=9), _state())
    assert fixed.selected_note_index == 1
