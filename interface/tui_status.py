"""Status bar builder for TaskShelfTUI."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import CreateNote, CreateTask, EditNote, EditTask, Navigate, ShowHelp, ShowSettings

MODE_LABEL_KEYS = {
    Navigate: "MODE_NAVIGATE",
    EditTask: "MODE_EDIT_TASK",
    CreateTask: "MODE_CREATE_TASK",
    EditNote: "MODE_EDIT_NOTE",
    CreateNote: "MODE_CREATE_NOTE",
    ShowHelp: "MODE_HELP",
    ShowSettings: "MODE_SETTINGS",
}

MAX_NOTICE_WIDTH = 80


def notice_text(tui) -> str:
    notice = tui.session.active_notice()
    if notice is None:
        return ""
    return tui._t(notice.key, detail=notice.detail)[:MAX_NOTICE_WIDTH]


def build_status_text(tui) -> FormattedText:
    session = tui.session
    model = session.model
    parts: List[Tuple[str, str]] = [
        ("class:mode", f" {tui._t(MODE_LABEL_KEYS[type(model.mode)])} "),
        ("class:text.dim", " "),
        (
            "class:text.dim",
            tui._t(
                "STATUS_COUNTS",
                current=len(model.tasks.current),
                capacity=session.options.max_current,
                shelf=len(model.tasks.shelf),
            ),
        ),
    ]
    if len(model.history):
        parts.extend(
            [
                ("class:text.dim", " | "),
                ("class:text.dimmer", tui._t("STATUS_UNDO_DEPTH", depth=len(model.history))),
            ]
        )
    if session.recently_saved():
        parts.extend([("class:text.dim", " | "), ("class:icon.check", tui._t("STATUS_SAVED"))])
    message = notice_text(tui)
    if message:
        failed = session.notice.key.endswith("_FAILED")
        parts.extend([("class:text.dim", " | "), ("class:icon.fail" if failed else "class:header", message)])
    return FormattedText(parts)


__all__ = ["build_status_text", "notice_text", "MODE_LABEL_KEYS"]
