import threading

from core import StoreError, Task, TaskListState
from application.save_service import DebouncedSaver


class MemoryStore:
    def __init__(self, fail: bool = False):
        self.saved = []
        self.fail = fail

    def load(self) -> TaskListState:
        return self.saved[-1] if self.saved else TaskListState()

    def save(self, state: TaskListState) -> None:
        if self.fail:
            raise StoreError("disk full")
        self.saved.append(state)


def _state(text: str) -> TaskListState:
    return TaskListState(current=(Task(text),))


def test_burst_is_coalesced_into_newest_state():
    store = MemoryStore()
    saver = DebouncedSaver(store, delay=60)
    for n in range(5):
        saver.schedule(_state(str(n)))
    assert store.saved == []

    assert saver.flush() is True
    assert store.saved == [_state("4")]
    assert saver.writes == 1
    assert saver.pending is None


def test_zero_delay_writes_immediately():
    store = MemoryStore()
    saver = DebouncedSaver(store, delay=0)
    saver.schedule(_state("a"))
    assert store.saved == [_state("a")]


def test_timer_fires_after_delay():
    store = MemoryStore()
    done = threading.Event()
    saver = DebouncedSaver(store, delay=0.01, on_saved=lambda state: done.set())
    saver.schedule(_state("a"))
    assert done.wait(2.0)
    assert store.saved == [_state("a")]


def test_flush_without_pending_is_success():
    store = MemoryStore()
    assert DebouncedSaver(store).flush() is True
    assert store.saved == []


def test_failed_write_keeps_snapshot_and_reports():
    store = MemoryStore(fail=True)
    errors = []
    saver = DebouncedSaver(store, delay=60, on_error=errors.append)
    saver.schedule(_state("a"))

    assert saver.flush() is False
    assert saver.pending == _state("a")
    assert len(errors) == 1

    store.fail = False
    assert saver.flush() is True
    assert store.saved == [_state("a")]


def test_quiesced_reports_waiting_snapshot():
    saver = DebouncedSaver(MemoryStore(), delay=60)
    with saver.quiesced() as idle:
        assert idle
    saver.schedule(_state("a"))
    with saver.quiesced() as idle:
        assert not idle
    saver.flush()


def test_quiesced_waits_for_running_write():
    entered = threading.Event()
    release = threading.Event()

    class SlowStore(MemoryStore):
        def save(self, state):
            entered.set()
            release.wait(2.0)
            super().save(state)

    store = SlowStore()
    saver = DebouncedSaver(store, delay=60)
    saver.schedule(_state("a"))
    writer = threading.Thread(target=saver.flush)
    writer.start()
    assert entered.wait(2.0)

    seen = []

    def check():
        with saver.quiesced():
            seen.append(list(store.saved))

    checker = threading.Thread(target=check)
    checker.start()
    checker.join(0.1)
    assert seen == []

    release.set()
    writer.join(2.0)
    checker.join(2.0)
    assert seen == [[_state("a")]]
