"""Help overlay listing the key map."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

HELP_SECTIONS: Tuple[Tuple[str, Tuple[Tuple[str, str], ...]], ...] = (
    (
        "HELP_SECTION_TASKS",
        (
            ("j / k", "HELP_MOVE"),
            ("J / K", "HELP_REORDER"),
            ("Tab", "HELP_PANE"),
            ("Enter", "HELP_EXPAND"),
            ("Ctrl+J", "HELP_COMPLETE"),
            ("Ctrl+D / Del", "HELP_DELETE"),
            ("a", "HELP_EDIT"),
            ("o", "HELP_CREATE"),
            ("m", "HELP_MOVE_PANE"),
            ("u", "HELP_UNDO"),
            ("s", "HELP_SETTINGS"),
            ("F5", "HELP_RELOAD"),
            ("Esc", "HELP_ESCAPE"),
            ("Ctrl+C", "HELP_QUIT"),
        ),
    ),
    (
        "HELP_SECTION_NOTES",
        (
            ("j / k", "HELP_MOVE"),
            ("J / K", "HELP_REORDER"),
            ("Ctrl+J", "HELP_TOGGLE_NOTE"),
            ("Ctrl+D / Del", "HELP_DELETE"),
            ("a", "HELP_EDIT"),
            ("o", "HELP_CREATE_NOTE"),
        ),
    ),
    (
        "HELP_SECTION_EDIT",
        (
            ("Enter", "HELP_SAVE"),
            ("Esc", "HELP_CANCEL"),
        ),
    ),
)

KEY_COLUMN = 14


def render_help(tui) -> FormattedText:
    lines: List[Tuple[str, str]] = [("class:header", f" {tui._t('HELP_TITLE')}\n\n")]
    for section_key, entries in HELP_SECTIONS:
        lines.append(("class:header.inactive", f" {tui._t(section_key)}\n"))
        for key, action_key in entries:
            lines.append(("class:icon.warn", f"   {key.ljust(KEY_COLUMN)}"))
            lines.append(("class:text", f"{tui._t(action_key)}\n"))
        lines.append(("class:text", "\n"))
    return FormattedText(lines)


__all__ = ["render_help", "HELP_SECTIONS"]
