"""Debounced, coalescing writer in front of the task store."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from core import StoreError, TaskListState
from application.ports import TaskStore

logger = logging.getLogger("taskshelf.store")


class DebouncedSaver:
    """Collapse bursts of saves into one write of the newest state.

    ``schedule`` only records the latest snapshot and restarts the timer.
    Writes are serialized by ``_write_lock`` and always take the newest
    pending snapshot, so an older state can never be written after a newer
    one. ``flush`` writes synchronously.
    """

    def __init__(
        self,
        store: TaskStore,
        delay: float = 0.3,
        on_saved: Optional[Callable[[TaskListState], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ):
        self.store = store
        self.delay = max(0.0, float(delay))
        self.on_saved = on_saved
        self.on_error = on_error
        self._lock = threading.Lock()
        self._write_lock = threading.Lock()
        self._pending: Optional[TaskListState] = None
        self._timer: Optional[threading.Timer] = None
        self.writes = 0

    @property
    def pending(self) -> Optional[TaskListState]:
        return self._pending

    def schedule(self, state: TaskListState) -> None:
        with self._lock:
            self._pending = state
            if self._timer is not None:
                self._timer.cancel()
            if self.delay <= 0:
                self._timer = None
            else:
                self._timer = threading.Timer(self.delay, self._fire)
                self._timer.daemon = True
                self._timer.start()
        if self.delay <= 0:
            self.flush()

    def flush(self) -> bool:
        """Write the pending snapshot now. Returns False if the write failed."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        return self._write_pending()

    @contextmanager
    def quiesced(self) -> Iterator[bool]:
        """Hold off writes for the block. Yields True when nothing is waiting to be written."""
        with self._write_lock:
            yield self._pending is None

    def _fire(self) -> None:
        with self._lock:
            self._timer = None
        self._write_pending()

    def _write_pending(self) -> bool:
        with self._write_lock:
            with self._lock:
                state = self._pending
                self._pending = None
            if state is None:
                return True
            try:
                self.store.save(state)
            except StoreError as exc:
                logger.warning("Saving tasks failed: %s", exc)
                with self._lock:
                    # Keep the newest snapshot for the next attempt.
                    if self._pending is None:
                        self._pending = state
                if self.on_error:
                    self.on_error(exc)
                return False
            self.writes += 1
        if self.on_saved:
            self.on_saved(state)
        return True


__all__ = ["DebouncedSaver"]
