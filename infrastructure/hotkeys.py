"""Hotkey string grammar: ``Mod+Mod+Key`` (e.g. ``Cmd+Ctrl+Alt+Shift+=``)."""

from dataclasses import dataclass
from typing import FrozenSet, Tuple

from core import ConfigError

_MODIFIERS = {
    "cmd": "super",
    "command": "super",
    "super": "super",
    "meta": "super",
    "ctrl": "control",
    "control": "control",
    "alt": "alt",
    "option": "alt",
    "shift": "shift",
}

_NAMED_KEYS = {
    "=": "equal",
    "equal": "equal",
    "-": "minus",
    "minus": "minus",
    "[": "bracketleft",
    "bracketleft": "bracketleft",
    "]": "bracketright",
    "bracketright": "bracketright",
    "\\": "backslash",
    "backslash": "backslash",
    ";": "semicolon",
    "semicolon": "semicolon",
    "'": "quote",
    "quote": "quote",
    "`": "backquote",
    "backquote": "backquote",
    ",": "comma",
    "comma": "comma",
    ".": "period",
    "period": "period",
    "/": "slash",
    "slash": "slash",
    "space": "space",
    "enter": "enter",
    "return": "enter",
    "tab": "tab",
    "escape": "escape",
    "esc": "escape",
    "backspace": "backspace",
    "delete": "delete",
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
}
_NAMED_KEYS.update({f"f{n}": f"f{n}" for n in range(1, 13)})

_MODIFIER_ORDER = (("super", "Cmd"), ("control", "Ctrl"), ("alt", "Alt"), ("shift", "Shift"))
_KEY_SYMBOLS = {
    name: symbol for symbol, name in _NAMED_KEYS.items() if len(symbol) == 1 and not symbol.isalnum()
}


@dataclass(frozen=True)
class Hotkey:
    modifiers: FrozenSet[str]
    key: str


def _parse_key(token: str) -> str:
    lowered = token.lower()
    if len(lowered) == 1 and (lowered.isascii() and lowered.isalnum()):
        return lowered
    if lowered in _NAMED_KEYS:
        return _NAMED_KEYS[lowered]
    raise ConfigError(f"Unknown key: {token}")


def parse_hotkey(text: str) -> Hotkey:
    """Validate and normalize a hotkey string. Raises ``ConfigError``."""
    if not text or not text.strip():
        raise ConfigError("Empty hotkey")
    parts: Tuple[str, ...] = tuple(text.strip().split("+"))
    # "Cmd++" means the plus key is not expressible; "Cmd+=" is.
    if any(p == "" for p in parts):
        raise ConfigError(f"Malformed hotkey: {text}")
    modifiers = set()
    for part in parts[:-1]:
        mod = _MODIFIERS.get(part.lower())
        if mod is None:
            raise ConfigError(f"Unknown modifier: {part}")
        modifiers.add(mod)
    return Hotkey(modifiers=frozenset(modifiers), key=_parse_key(parts[-1]))


def format_hotkey(hotkey: Hotkey) -> str:
    """Canonical spelling: modifiers in ``Cmd+Ctrl+Alt+Shift`` order, then the key."""
    parts = [label for name, label in _MODIFIER_ORDER if name in hotkey.modifiers]
    key = hotkey.key
    if key in _KEY_SYMBOLS:
        parts.append(_KEY_SYMBOLS[key])
    elif len(key) == 1:
        parts.append(key.upper())
    else:
        parts.append(key.capitalize())
    return "+".join(parts)


def normalize_hotkey(text: str) -> str:
    return format_hotkey(parse_hotkey(text))


__all__ = ["Hotkey", "parse_hotkey", "format_hotkey", "normalize_hotkey"]
