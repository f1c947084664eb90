from interface.tui_help import HELP_SECTIONS, render_help
from tui_helpers import dummy_tui, make_session, plain


def test_help_lists_every_binding(tmp_path):
    text = plain(render_help(dummy_tui(make_session(tmp_path))))
    assert "Keyboard" in text
    for _, entries in HELP_SECTIONS:
        for key, _ in entries:
            assert key in text
    assert "complete task" in text
    assert "toggle note" in text
