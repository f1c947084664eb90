import json
import logging

import pytest

from config import AppSettings
from core import CreateTask, KeyEvent, NAVIGATE, Pane, Task
from interface.tui_app import LOG_FILE, TaskShelfTUI, _configure_file_logging
from tui_helpers import plain, sample_state

QUICK = AppSettings(save_debounce=0, complete_delay=0, max_current=5)


@pytest.fixture
def tui(tmp_path):
    (tmp_path / "state.json").write_text(json.dumps(sample_state().to_dict()), encoding="utf-8")
    return TaskShelfTUI(tasks_dir=tmp_path, settings=QUICK)


def test_session_is_wired_to_tui(tui):
    assert tui.session.window is tui
    assert tui.session.renderer is tui
    assert [t.text for t in tui.session.model.tasks.current] == ["write report", "call bank"]


def test_typing_in_edit_field_updates_draft(tui, tmp_path):
    tui.send_key(KeyEvent("o"))
    assert tui.editing_mode
    assert tui.app.layout.has_focus(tui.edit_field)

    tui.edit_buffer.text = "buy milk"
    assert tui.session.model.mode == CreateTask(draft="buy milk")

    tui.send_key(KeyEvent("Enter"))
    assert tui.session.model.tasks.current[-1] == Task("buy milk")
    assert tui.edit_buffer.text == ""
    saved = json.loads((tmp_path / "state.json").read_text(encoding="utf-8"))
    assert saved["current"][-1]["text"] == "buy milk"


def test_leaving_edit_mode_returns_focus(tui):
    tui.send_key(KeyEvent("a"))
    assert tui.edit_buffer.text == "write report"
    tui.send_key(KeyEvent("Escape"))
    assert tui.session.model.mode == NAVIGATE
    assert not tui.editing_mode
    assert tui.app.layout.has_focus(tui.main_window)


def test_overlays_replace_pane_body(tui):
    assert tui._resolve_body_container() is tui.panes_body
    tui.send_key(KeyEvent("?"))
    assert tui._resolve_body_container() is tui.overlay_window
    assert "Keyboard" in plain(tui.get_overlay_text())
    tui.send_key(KeyEvent("?"))
    tui.send_key(KeyEvent("s"))
    assert "Settings" in plain(tui.get_overlay_text())


def test_escape_in_navigate_hides_without_running_app(tui):
    assert tui.send_key(KeyEvent("Escape")) is True


def test_set_hotkey_is_remembered(tui):
    tui.set_hotkey("Ctrl+Alt+K")
    assert tui.registered_hotkey == "Ctrl+Alt+K"


def test_reload_picks_up_external_edit(tui, tmp_path):
    (tmp_path / "state.json").write_text(json.dumps({"current": ["from elsewhere"]}), encoding="utf-8")
    tui.reload()
    assert tui.session.model.tasks.current == (Task("from elsewhere"),)
    assert tui.session.active_notice().key == "STATUS_RELOADED"


def test_pane_text_renders_both_panes(tui):
    assert "write report" in plain(tui.get_pane_text(Pane.CURRENT))
    assert "learn rust" in plain(tui.get_pane_text(Pane.SHELF))
    assert "NAV" in plain(tui.get_status_text())
    assert plain(tui.get_footer_text())


def test_translation_defaults_to_english(tui):
    assert tui._t("PANE_SHELF") == "Shelf"


def test_file_logging_writes_to_tasks_dir(tmp_path):
    _configure_file_logging(tmp_path)
    logger = logging.getLogger("taskshelf")
    try:
        logging.getLogger("taskshelf.tui").warning("hello log")
        for handler in logger.handlers:
            handler.flush()
        assert "hello log" in (tmp_path / LOG_FILE).read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True


def test_edit_prompt_follows_edited_item(tui):
    tui.send_key(KeyEvent("a"))
    assert tui.edit_prompt() == "Task: "
    tui.send_key(KeyEvent("Escape"))
    tui.send_key(KeyEvent("Enter"))
    tui.send_key(KeyEvent("a"))
    assert tui.edit_prompt() == "Note: "
    assert tui.edit_buffer.text == "outline"
