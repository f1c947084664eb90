import pytest

from core import History, MAX_HISTORY, Task, TaskListState


def _snap(n):
    return TaskListState(current=(Task(str(n)),))


def test_push_and_pop_lifo():
    history = History().push(_snap(1)).push(_snap(2))
    history, snap = history.pop()
    assert snap == _snap(2)
    history, snap = history.pop()
    assert snap == _snap(1)
    assert not history


def test_pop_empty_is_noop():
    history = History()
    same, snap = history.pop()
    assert snap is None
    assert same is history


def test_push_evicts_oldest_beyond_limit():
    history = History(limit=3)
    for n in range(5):
        history = history.push(_snap(n))
    assert len(history) == 3
    assert history.entries[0] == _snap(2)
    assert history.entries[-1] == _snap(4)


def test_default_limit():
    history = History()
    for n in range(MAX_HISTORY + 5):
        history = history.push(_snap(n))
    assert len(history) == MAX_HISTORY


def test_clear_keeps_limit():
    history = History(limit=7).push(_snap(1)).clear()
    assert len(history) == 0
    assert history.limit == 7


@pytest.mark.parametrize("limit", [0, -3])
def test_non_positive_limit_keeps_nothing(limit):
    history = History(limit=limit)
    for n in range(3):
        history = history.push(_snap(n))
    assert len(history) == 0
    assert history.pop() == (history, None)
