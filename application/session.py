"""Live editing session: owns the model, runs the reducer, executes effects."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import replace
from typing import Callable, List, Optional

from config import AppSettings, set_user_hotkey
from core import (
    ApplyHotkey,
    EngineOptions,
    HideWindow,
    Intent,
    IntentKind,
    KeyEvent,
    LogCompletion,
    Model,
    Notice,
    Pane,
    Persist,
    Rejected,
    ScheduleCompletion,
    StoreError,
    TaskListState,
    TaskShelfError,
    dispatch,
    enforce_capacity,
    reduce,
)
from application.ports import CompletionLog, Renderer, TaskStore, WindowController
from application.save_service import DebouncedSaver

logger = logging.getLogger("taskshelf.session")

NOTICE_TTL = 3.0
REJECT_FLASH = 0.3
SAVED_FLASH = 0.6
RELOAD_POLL_INTERVAL = 0.3


def options_from_settings(settings: AppSettings) -> EngineOptions:
    return EngineOptions(
        max_current=settings.max_current,
        insert_position=settings.insert_position,
        continuous_create=settings.continuous_create,
    )


class TaskSession:
    """Single owner of the ``Model``.

    Every change goes through ``apply``: the reducer returns the next model
    and a tuple of effects, which are executed here in order. Effects may
    feed intents back (the completion lifecycle, hotkey results), so the
    lock is reentrant. Timer callbacks re-enter through ``apply`` as well.
    """

    def __init__(
        self,
        store: TaskStore,
        log: CompletionLog,
        settings: Optional[AppSettings] = None,
        window: Optional[WindowController] = None,
        renderer: Optional[Renderer] = None,
        saver: Optional[DebouncedSaver] = None,
        save_hotkey: Callable[[str], None] = set_user_hotkey,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.store = store
        self.log = log
        self.settings = settings or AppSettings()
        self.options = options_from_settings(self.settings)
        self.window = window
        self.renderer = renderer
        self.saver = saver or DebouncedSaver(store, delay=self.settings.save_debounce)
        self.saver.on_saved = self._on_saved
        self.saver.on_error = self._on_save_error
        self.save_hotkey = save_hotkey
        self.clock = clock
        self._lock = threading.RLock()
        self._completion_timer: Optional[threading.Timer] = None
        self._last_check = 0.0

        self.notice: Optional[Notice] = None
        self.notice_expires = 0.0
        self.reject_pane: Optional[Pane] = None
        self.reject_until = 0.0
        self.saved_until = 0.0

        self.model = Model.initial(self._load_state())

    # ------------------------------------------------------------ loading

    def _load_state(self):
        try:
            state = self.store.load()
        except StoreError as exc:
            logger.warning("Loading tasks failed: %s", exc)
            self.set_notice(Notice("STATUS_LOAD_FAILED", str(exc)))
            return TaskListState()
        return enforce_capacity(state, self.options.max_current)

    def reload(self) -> None:
        """Replace the live state with the store's copy. Clears undo history."""
        with self._lock:
            self.saver.flush()
            try:
                state = self.store.load()
            except StoreError as exc:
                logger.warning("Reloading tasks failed: %s", exc)
                self.set_notice(Notice("STATUS_LOAD_FAILED", str(exc)))
                self._render()
                return
            self._cancel_completion_timer()
            self.apply(Intent.of(IntentKind.RELOAD, state=state))

    def maybe_reload(self, now: Optional[float] = None) -> bool:
        """Reload when the state file changed behind our back. Rate limited."""
        ts = now if now is not None else self.clock()
        if ts - self._last_check < RELOAD_POLL_INTERVAL:
            return False
        self._last_check = ts
        changed = getattr(self.store, "changed_externally", None)
        if changed is None:
            return False
        # The store signature only matches the file between writes.
        with self.saver.quiesced() as idle:
            if not idle or not changed():
                return False
        logger.info("State file changed externally, reloading")
        self.reload()
        return True

    # ------------------------------------------------------------ input

    def handle_key(self, event: KeyEvent) -> bool:
        """Resolve and apply a key press. Returns False when the key meant nothing."""
        with self._lock:
            intent = dispatch(event, self.model)
            if intent is None:
                return False
            self.apply(intent)
            return True

    def apply(self, intent: Intent) -> Model:
        with self._lock:
            transition = reduce(self.model, intent, self.options)
            self.model = transition.model
            for effect in transition.effects:
                self._run_effect(effect)
            self._render()
            return self.model

    def set_draft(self, text: str) -> None:
        self.apply(Intent.of(IntentKind.SET_DRAFT, text=text))

    # ------------------------------------------------------------ effects

    def _run_effect(self, effect) -> None:
        if isinstance(effect, Persist):
            if effect.immediate:
                self.saver.schedule(effect.state)
                self.saver.flush()
            else:
                self.saver.schedule(effect.state)
        elif isinstance(effect, ScheduleCompletion):
            self._schedule_completion(effect.token)
        elif isinstance(effect, LogCompletion):
            self._log_completion(effect)
        elif isinstance(effect, Rejected):
            self.reject_pane = effect.pane
            self.reject_until = self.clock() + REJECT_FLASH
        elif isinstance(effect, Notice):
            self.set_notice(effect)
        elif isinstance(effect, HideWindow):
            if self.window is not None:
                self.window.hide()
        elif isinstance(effect, ApplyHotkey):
            self._apply_hotkey(effect.hotkey)
        else:
            logger.debug("Unhandled effect %r", effect)

    def _schedule_completion(self, token: int) -> None:
        self._cancel_completion_timer()
        delay = self.settings.complete_delay
        if delay <= 0:
            self.finish_completion(token)
            return
        timer = threading.Timer(delay, self.finish_completion, args=(token,))
        timer.daemon = True
        self._completion_timer = timer
        timer.start()

    def finish_completion(self, token: int) -> None:
        self.apply(Intent.of(IntentKind.FINISH_COMPLETION, token=token))

    def _cancel_completion_timer(self) -> None:
        if self._completion_timer is not None:
            self._completion_timer.cancel()
            self._completion_timer = None

    def _log_completion(self, effect: LogCompletion) -> None:
        try:
            self.log.append(effect.task)
        except StoreError as exc:
            logger.warning("Logging completed task failed: %s", exc)
            self.apply(Intent.of(IntentKind.COMPLETION_FAILED, token=effect.token, text=str(exc)))
            return
        self.apply(Intent.of(IntentKind.COMPLETION_LOGGED, token=effect.token))

    def _apply_hotkey(self, hotkey: str) -> None:
        from infrastructure.hotkeys import normalize_hotkey

        try:
            hotkey = normalize_hotkey(hotkey)
            if self.window is not None:
                self.window.set_hotkey(hotkey)
            self.save_hotkey(hotkey)
        except (TaskShelfError, OSError) as exc:
            logger.warning("Hotkey %s rejected: %s", hotkey, exc)
            self.apply(Intent.of(IntentKind.HOTKEY_FAILED, text=str(exc)))
            return
        self.settings = _with_hotkey(self.settings, hotkey)
        self.apply(Intent.of(IntentKind.HOTKEY_SAVED, text=hotkey))

    # ------------------------------------------------------------ transient UI state

    def set_notice(self, notice: Notice) -> None:
        self.notice = notice
        self.notice_expires = self.clock() + NOTICE_TTL

    def active_notice(self) -> Optional[Notice]:
        if self.notice is not None and self.clock() >= self.notice_expires:
            self.notice = None
        return self.notice

    def is_rejecting(self, pane: Pane) -> bool:
        return self.reject_pane is pane and self.clock() < self.reject_until

    def recently_saved(self) -> bool:
        return self.clock() < self.saved_until

    def _on_saved(self, state) -> None:
        self.saved_until = self.clock() + SAVED_FLASH
        self._render()

    def _on_save_error(self, exc: Exception) -> None:
        self.set_notice(Notice("STATUS_SAVE_FAILED", str(exc)))
        self._render()

    def _render(self) -> None:
        if self.renderer is not None:
            self.renderer.render(self.model)

    # ------------------------------------------------------------ shutdown

    def close(self) -> List[str]:
        """Cancel timers and write any pending state. Returns error messages, if any."""
        errors: List[str] = []
        with self._lock:
            self._cancel_completion_timer()
            if not self.saver.flush():
                errors.append("save failed")
        return errors


def _with_hotkey(settings: AppSettings, hotkey: str) -> AppSettings:
    return replace(settings, hotkey=hotkey)


__all__ = ["TaskSession", "options_from_settings"]
