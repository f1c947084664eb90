from core import KeyEvent

from interface.tui_footer import build_footer_text, footer_hint_key
from tui_helpers import dummy_tui, make_session, plain, sample_state


def test_footer_hint_follows_mode(tmp_path):
    session = make_session(tmp_path, sample_state())
    assert footer_hint_key(session.model) == "FOOTER_NAVIGATE"
    session.handle_key(KeyEvent("Enter"))
    assert footer_hint_key(session.model) == "FOOTER_EXPANDED"
    session.handle_key(KeyEvent("a"))
    assert footer_hint_key(session.model) == "FOOTER_EDIT"
    session.handle_key(KeyEvent("Escape"))
    session.handle_key(KeyEvent("o"))
    assert footer_hint_key(session.model) == "FOOTER_CREATE"
    session.handle_key(KeyEvent("Escape"))
    session.handle_key(KeyEvent("Escape"))
    session.handle_key(KeyEvent("?"))
    assert footer_hint_key(session.model) == "FOOTER_HELP"
    session.handle_key(KeyEvent("?"))
    session.handle_key(KeyEvent("s"))
    assert footer_hint_key(session.model) == "FOOTER_SETTINGS"


def test_footer_is_trimmed_to_terminal_width(tmp_path):
    tui = dummy_tui(make_session(tmp_path), width=30)
    border, hint = plain(build_footer_text(tui)).split("\n")
    assert len(border) == 30
    assert len(hint) <= 30
    assert hint.endswith("…")
