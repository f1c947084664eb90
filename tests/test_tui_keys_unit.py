import pytest
from prompt_toolkit.keys import Keys

from core import KeyEvent
from interface.tui_keys import key_event_from_press


@pytest.mark.parametrize(
    "key, data, expected",
    [
        (Keys.Any, "j", KeyEvent("j")),
        (Keys.Any, "K", KeyEvent("K")),
        (Keys.Any, "?", KeyEvent("?")),
        ("x", "x", KeyEvent("x")),
        (Keys.Enter, "\r", KeyEvent("Enter")),
        (Keys.ControlM, "\r", KeyEvent("Enter")),
        (Keys.Tab, "\t", KeyEvent("Tab")),
        (Keys.Escape, "\x1b", KeyEvent("Escape")),
        (Keys.Up, "", KeyEvent("ArrowUp")),
        (Keys.Down, "", KeyEvent("ArrowDown")),
        (Keys.Delete, "", KeyEvent("Delete")),
        (Keys.ControlJ, "\n", KeyEvent("Enter", ctrl=True)),
        (Keys.ControlD, "\x04", KeyEvent("Backspace", ctrl=True)),
        (Keys.ControlK, "", KeyEvent("k", ctrl=True)),
        (Keys.ControlUp, "", KeyEvent("ArrowUp", ctrl=True)),
        (Keys.ShiftLeft, "", KeyEvent("ArrowLeft", shift=True)),
        (Keys.F5, "", KeyEvent("F5")),
    ],
)
def test_key_presses_map_to_events(key, data, expected):
    assert key_event_from_press(key, data) == expected


def test_control_characters_are_dropped():
    assert key_event_from_press(Keys.Any, "\x07") is None


def test_unknown_sequences_are_dropped():
    assert key_event_from_press(Keys.ScrollUp, "") is None
