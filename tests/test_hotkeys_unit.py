import pytest

from config import DEFAULT_HOTKEY
from core import ConfigError
from infrastructure.hotkeys import Hotkey, normalize_hotkey, parse_hotkey


def test_default_hotkey_parses():
    hotkey = parse_hotkey(DEFAULT_HOTKEY)
    assert hotkey == Hotkey(frozenset({"super", "control", "alt", "shift"}), "equal")


@pytest.mark.parametrize(
    "text, modifiers, key",
    [
        ("Ctrl+Alt+K", {"control", "alt"}, "k"),
        ("command+option+space", {"super", "alt"}, "space"),
        ("Shift+F5", {"shift"}, "f5"),
        ("Ctrl+Up", {"control"}, "up"),
        ("  Meta+1 ", {"super"}, "1"),
    ],
)
def test_parse_variants(text, modifiers, key):
    hotkey = parse_hotkey(text)
    assert hotkey.modifiers == frozenset(modifiers)
    assert hotkey.key == key


def test_aliases_normalize_to_same_hotkey():
    assert parse_hotkey("Cmd+Return") == parse_hotkey("super+enter")


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "Empty hotkey"),
        ("   ", "Empty hotkey"),
        ("Ctrl++", "Malformed hotkey"),
        ("Hyper+K", "Unknown modifier"),
        ("Ctrl+Pause", "Unknown key"),
    ],
)
def test_invalid_hotkeys(text, message):
    with pytest.raises(ConfigError, match=message):
        parse_hotkey(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        (DEFAULT_HOTKEY, DEFAULT_HOTKEY),
        ("alt+ctrl+k", "Ctrl+Alt+K"),
        ("shift+option+command+equal", "Cmd+Alt+Shift+="),
        ("control+return", "Ctrl+Enter"),
        ("Meta+f5", "Cmd+F5"),
        ("ctrl+space", "Ctrl+Space"),
    ],
)
def test_normalize_hotkey(text, expected):
    assert normalize_hotkey(text) == expected
