"""Input dispatcher: raw key event + current model -> one intent (or None).

Precedence is fixed: an active overlay sees only its own keys, an active
edit/create mode sees only text input, save and cancel, and only Navigate
mode resolves navigation and mutation keys. Anything unresolved returns
``None`` and is swallowed by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .engine import Model
from .intents import Intent, IntentKind
from .modes import ShowHelp, ShowSettings, is_editing

MODIFIER_KEYS = frozenset({"Meta", "Control", "Alt", "Shift"})
_ARROW_NAMES = {"ArrowUp": "Up", "ArrowDown": "Down", "ArrowLeft": "Left", "ArrowRight": "Right"}


@dataclass(frozen=True)
class KeyEvent:
    """A physical key press. ``key`` uses browser-style names (``Enter``, ``ArrowUp``, ``a``)."""

    key: str
    ctrl: bool = False
    meta: bool = False
    alt: bool = False
    shift: bool = False

    @property
    def command(self) -> bool:
        """Ctrl or Cmd held (the platform "command" chord)."""
        return self.ctrl or self.meta

    @property
    def printable(self) -> bool:
        return len(self.key) == 1 and self.key.isprintable() and not self.command


def event_to_hotkey(event: KeyEvent) -> Optional[str]:
    """Render a chord like ``Cmd+Ctrl+Alt+Shift+=``; plain keys are not hotkeys."""
    if not (event.meta or event.ctrl or event.alt or event.shift):
        return None
    if event.key in MODIFIER_KEYS:
        return None
    parts = []
    if event.meta:
        parts.append("Cmd")
    if event.ctrl:
        parts.append("Ctrl")
    if event.alt:
        parts.append("Alt")
    if event.shift:
        parts.append("Shift")
    key = event.key
    if key == " ":
        key = "Space"
    elif len(key) == 1:
        key = key.upper()
    else:
        key = _ARROW_NAMES.get(key, key)
    parts.append(key)
    return "+".join(parts)


def _intent(kind: IntentKind, **payload) -> Intent:
    return Intent.of(kind, **payload)


def _dispatch_help(event: KeyEvent) -> Optional[Intent]:
    if event.key == "Escape":
        return _intent(IntentKind.CANCEL)
    if event.key == "?":
        return _intent(IntentKind.TOGGLE_HELP)
    return None


def _dispatch_settings(event: KeyEvent) -> Optional[Intent]:
    if event.key == "Escape":
        return _intent(IntentKind.CANCEL)
    if event.key == "Enter" and not (event.meta or event.ctrl or event.alt or event.shift):
        return _intent(IntentKind.SAVE_HOTKEY)
    hotkey = event_to_hotkey(event)
    if hotkey:
        return _intent(IntentKind.CAPTURE_HOTKEY, text=hotkey)
    return None


def _dispatch_edit(event: KeyEvent) -> Optional[Intent]:
    if event.key == "Escape":
        return _intent(IntentKind.CANCEL)
    if event.key == "Enter" and not event.command:
        return _intent(IntentKind.SAVE_DRAFT)
    if event.key == "Backspace" and not event.command:
        return _intent(IntentKind.DELETE_BACKWARD)
    if event.printable:
        return _intent(IntentKind.INSERT_TEXT, text=event.key)
    return None


def _dispatch_navigate(event: KeyEvent, model: Model) -> Optional[Intent]:
    key = event.key
    expanded = model.selection.expanded
    task = model.expanded_task
    has_notes = bool(task and task.notes)
    has_tasks = bool(model.active_list)

    if event.command:
        if key == "Enter":
            if expanded and has_notes:
                return _intent(IntentKind.TOGGLE_NOTE)
            return _intent(IntentKind.COMPLETE_TASK) if has_tasks else None
        if key == "Backspace":
            return _delete(expanded, has_notes, has_tasks)
        return None

    if key in ("j", "ArrowDown"):
        return _intent(IntentKind.MOVE_NOTE_CURSOR if expanded else IntentKind.MOVE_CURSOR, delta=1)
    if key in ("k", "ArrowUp"):
        return _intent(IntentKind.MOVE_NOTE_CURSOR if expanded else IntentKind.MOVE_CURSOR, delta=-1)
    if key == "J":
        return _intent(IntentKind.REORDER_NOTE if expanded else IntentKind.REORDER_TASK, delta=1)
    if key == "K":
        return _intent(IntentKind.REORDER_NOTE if expanded else IntentKind.REORDER_TASK, delta=-1)
    if key == "Tab":
        return _intent(IntentKind.TOGGLE_PANE)
    if key == "Enter":
        return _intent(IntentKind.TOGGLE_EXPAND) if has_tasks else None
    if key == "Delete":
        return _delete(expanded, has_notes, has_tasks)
    if key == "a":
        if expanded:
            return _intent(IntentKind.EDIT_NOTE)
        return _intent(IntentKind.EDIT_TASK) if has_tasks else None
    if key == "o":
        return _intent(IntentKind.CREATE_NOTE if expanded else IntentKind.CREATE_TASK)
    if key == "u":
        return _intent(IntentKind.UNDO)
    if key == "m":
        return None if expanded else _intent(IntentKind.MOVE_TO_OTHER_PANE)
    if key == "?":
        return _intent(IntentKind.TOGGLE_HELP)
    if key == "s":
        return None if expanded else _intent(IntentKind.OPEN_SETTINGS)
    if key == "Escape":
        return _intent(IntentKind.COLLAPSE if expanded else IntentKind.HIDE_WINDOW)
    return None


def _delete(expanded: bool, has_notes: bool, has_tasks: bool) -> Optional[Intent]:
    if expanded and has_notes:
        return _intent(IntentKind.DELETE_NOTE)
    return _intent(IntentKind.DELETE_TASK) if has_tasks else None


def dispatch(event: KeyEvent, model: Model) -> Optional[Intent]:
    mode = model.mode
    if isinstance(mode, ShowHelp):
        return _dispatch_help(event)
    if isinstance(mode, ShowSettings):
        return _dispatch_settings(event)
    if is_editing(mode):
        return _dispatch_edit(event)
    return _dispatch_navigate(event, model)


__all__ = ["KeyEvent", "MODIFIER_KEYS", "event_to_hotkey", "dispatch"]
