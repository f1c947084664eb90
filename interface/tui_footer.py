"""Footer renderer for TaskShelfTUI: key hints for the active mode."""

from prompt_toolkit.formatted_text import FormattedText

from core import CreateNote, CreateTask, EditNote, EditTask, ShowHelp, ShowSettings
from interface.tui_display import DisplayMixin


def footer_hint_key(model) -> str:
    mode = model.mode
    if isinstance(mode, ShowHelp):
        return "FOOTER_HELP"
    if isinstance(mode, ShowSettings):
        return "FOOTER_SETTINGS"
    if isinstance(mode, (CreateTask, CreateNote)):
        return "FOOTER_CREATE"
    if isinstance(mode, (EditTask, EditNote)):
        return "FOOTER_EDIT"
    if model.selection.expanded:
        return "FOOTER_EXPANDED"
    return "FOOTER_NAVIGATE"


def build_footer_text(tui) -> FormattedText:
    hint = tui._t(footer_hint_key(tui.session.model))
    width = max(20, tui.get_terminal_width())
    hint = DisplayMixin._trim_display(hint, width - 2)
    return FormattedText([("class:border", "─" * width + "\n"), ("class:text.dim", " " + hint)])


__all__ = ["build_footer_text", "footer_hint_key"]
