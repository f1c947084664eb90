from core import Intent, IntentKind, KeyEvent

from interface.tui_settings_panel import render_settings_panel
from tui_helpers import dummy_tui, make_session, plain


def test_panel_shows_current_and_pending_hotkey(tmp_path):
    session = make_session(tmp_path)
    session.handle_key(KeyEvent("s"))
    text = plain(render_settings_panel(dummy_tui(session)))
    assert "Settings" in text
    assert "Cmd+Ctrl+Alt+Shift+=" in text
    assert "(press a chord)" in text
    assert "Current capacity" in text

    session.handle_key(KeyEvent("k", ctrl=True, alt=True))
    assert "Ctrl+Alt+K" in plain(render_settings_panel(dummy_tui(session)))


def test_panel_shows_error_row(tmp_path):
    session = make_session(tmp_path)
    session.apply(Intent.of(IntentKind.OPEN_SETTINGS))
    session.apply(Intent.of(IntentKind.CAPTURE_HOTKEY, text="Ctrl+Pause"))
    session.apply(Intent.of(IntentKind.SAVE_HOTKEY))
    text = plain(render_settings_panel(dummy_tui(session)))
    assert "Error: Unknown key: Pause" in text


def test_panel_lines_have_equal_width(tmp_path):
    session = make_session(tmp_path)
    session.handle_key(KeyEvent("s"))
    lines = plain(render_settings_panel(dummy_tui(session, width=60))).splitlines()
    assert len({len(line) for line in lines}) == 1
