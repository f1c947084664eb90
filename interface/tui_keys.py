"""Translate prompt_toolkit key presses into dispatcher ``KeyEvent``s.

Terminals cannot report Ctrl/Cmd+Enter or Ctrl+Backspace, so the command
chords are reachable as ``Ctrl+J`` (complete / toggle note) and ``Ctrl+D``
(delete). Everything else maps one-to-one.
"""

from typing import Dict, Optional

from prompt_toolkit.keys import Keys

from core import KeyEvent

_NAMED: Dict[str, KeyEvent] = {
    Keys.Enter.value: KeyEvent("Enter"),
    Keys.Tab.value: KeyEvent("Tab"),
    Keys.BackTab.value: KeyEvent("Tab", shift=True),
    Keys.Escape.value: KeyEvent("Escape"),
    Keys.Backspace.value: KeyEvent("Backspace"),
    Keys.Delete.value: KeyEvent("Delete"),
    Keys.ControlJ.value: KeyEvent("Enter", ctrl=True),
    Keys.ControlD.value: KeyEvent("Backspace", ctrl=True),
    Keys.Up.value: KeyEvent("ArrowUp"),
    Keys.Down.value: KeyEvent("ArrowDown"),
    Keys.Left.value: KeyEvent("ArrowLeft"),
    Keys.Right.value: KeyEvent("ArrowRight"),
}

_ARROWS = {"up": "ArrowUp", "down": "ArrowDown", "left": "ArrowLeft", "right": "ArrowRight"}


def _key_name(key) -> str:
    return getattr(key, "value", key)


def _modified_key(name: str) -> Optional[KeyEvent]:
    """``c-x``, ``s-up``, ``c-s-left`` and friends."""
    ctrl = shift = False
    rest = name
    while len(rest) > 2 and rest[1] == "-" and rest[0] in "cs":
        ctrl = ctrl or rest[0] == "c"
        shift = shift or rest[0] == "s"
        rest = rest[2:]
    if not (ctrl or shift):
        return None
    if rest in _ARROWS:
        return KeyEvent(_ARROWS[rest], ctrl=ctrl, shift=shift)
    if len(rest) == 1 and rest.isalnum():
        return KeyEvent(rest.lower(), ctrl=ctrl, shift=shift)
    if rest in ("home", "end", "delete"):
        return KeyEvent(rest.capitalize(), ctrl=ctrl, shift=shift)
    return None


def key_event_from_press(key, data: str = "") -> Optional[KeyEvent]:
    """Map one ``KeyPress`` (its ``key`` and raw ``data``) to a ``KeyEvent``."""
    name = _key_name(key)
    if name in _NAMED:
        return _NAMED[name]
    if name == Keys.Any.value or name == "<any>":
        name = data
    if len(name) == 1:
        return KeyEvent(name) if name.isprintable() else None
    if name.startswith("f") and name[1:].isdigit():
        return KeyEvent(name.upper())
    return _modified_key(name)


__all__ = ["key_event_from_press"]
