"""Settings overlay: shows the hotkey and captures a new chord."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import ShowSettings
from core.engine import INSERT_AFTER_SELECTION


def _settings_rows(tui) -> List[Tuple[str, str, str]]:
    session = tui.session
    mode = session.model.mode
    pending = mode.pending_hotkey if isinstance(mode, ShowSettings) else None
    insert_key = "SETTINGS_INSERT_AFTER" if session.options.insert_position == INSERT_AFTER_SELECTION else "SETTINGS_INSERT_END"
    return [
        (tui._t("SETTINGS_HOTKEY"), session.settings.hotkey, "class:text"),
        (tui._t("SETTINGS_PENDING"), pending or tui._t("SETTINGS_NONE"), "class:selected" if pending else "class:text.dim"),
        (tui._t("SETTINGS_CAPACITY"), str(session.options.max_current), "class:text.dim"),
        (tui._t("SETTINGS_INSERT"), tui._t(insert_key), "class:text.dim"),
    ]


def render_settings_panel(tui) -> FormattedText:
    width = max(40, min(80, tui.get_terminal_width() - 4))
    inner_width = width - 2
    rows = _settings_rows(tui)
    label_width = max(len(label) for label, _, _ in rows) + 2
    value_width = max(8, inner_width - label_width)

    lines: List[Tuple[str, str]] = []
    lines.append(("class:border", "+" + "=" * width + "+\n"))
    lines.append(("class:border", "| "))
    lines.append(("class:header", tui._t("SETTINGS_TITLE").center(inner_width)))
    lines.append(("class:border", " |\n"))
    lines.append(("class:border", "+" + "-" * width + "+\n"))
    for label, value, style in rows:
        if len(value) > value_width:
            value = value[: value_width - 1] + "…"
        lines.append(("class:border", "| "))
        lines.append(("class:text", label.ljust(label_width)))
        lines.append((style, value.ljust(value_width)))
        lines.append(("class:border", " |\n"))
    mode = tui.session.model.mode
    if isinstance(mode, ShowSettings) and mode.error:
        error = tui._t("SETTINGS_ERROR", error=mode.error)[:inner_width]
        lines.append(("class:border", "| "))
        lines.append(("class:icon.fail", error.ljust(inner_width)))
        lines.append(("class:border", " |\n"))
    lines.append(("class:border", "+" + "=" * width + "+"))
    return FormattedText(lines)


__all__ = ["render_settings_panel"]
