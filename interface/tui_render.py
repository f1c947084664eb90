"""Pane renderers for TaskShelfTUI: task rows, expanded notes, empty states."""

from typing import List, Optional, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import EditTask, Pane, Task
from interface.constants import PANE_LABEL_KEYS
from interface.tui_display import DisplayMixin

NOTE_DONE = "✓"
NOTE_OPEN = "○"
CURSOR = "▸"
NOTE_INDENT = 6

Fragment = Tuple[str, str]


def notes_badge(task: Task) -> str:
    if not task.notes:
        return ""
    done = sum(1 for note in task.notes if note.completed)
    return f" [{done}/{len(task.notes)}]"


def pane_title(tui, pane: Pane) -> str:
    session = tui.session
    items = session.model.tasks.pane(pane)
    label = tui._t(PANE_LABEL_KEYS[pane.value])
    if pane is Pane.CURRENT:
        return f" {label} {len(items)}/{session.options.max_current} "
    return f" {label} {len(items)} "


def _header(tui, pane: Pane, width: int, active: bool) -> List[Fragment]:
    title = DisplayMixin._trim_display(pane_title(tui, pane), max(1, width - 2))
    if tui.session.is_rejecting(pane):
        style = "class:reject"
    else:
        style = "class:header" if active else "class:header.inactive"
    rule_style = "class:border.active" if active else "class:border"
    fill = "─" * max(0, width - 2 - DisplayMixin._display_width(title))
    return [(rule_style, "─"), (style, title), (rule_style, fill + "─\n")]


def _row_style(tui, pane: Pane, index: int, active: bool) -> str:
    model = tui.session.model
    pending = model.pending
    if pending is not None and pending.pane is pane and pending.index == index:
        return "class:completing"
    if index != model.selection.selected_index:
        return "class:text"
    if not active:
        return "class:selected.inactive"
    return "class:selected"


def _task_row(tui, pane: Pane, index: int, task: Task, width: int, active: bool) -> List[Fragment]:
    model = tui.session.model
    selected = active and index == model.selection.selected_index and not model.selection.expanded
    marker = CURSOR if selected else " "
    prefix = f"{marker}{index + 1:>2}. "
    badge = notes_badge(task)
    text = task.text
    mode = model.mode
    if active and isinstance(mode, EditTask) and mode.index == index:
        text = mode.draft
    room = max(1, width - DisplayMixin._display_width(prefix) - len(badge))
    body = DisplayMixin._pad_display(text, room)
    style = _row_style(tui, pane, index, active)
    return [(style, prefix + body), ("class:text.dim", badge + "\n")]


def _note_rows(tui, task: Task, width: int) -> List[Fragment]:
    selection = tui.session.model.selection
    indent = " " * NOTE_INDENT
    if not task.notes:
        return [("class:text.dimmer", indent + tui._t("NOTES_EMPTY") + "\n")]
    room = max(1, width - NOTE_INDENT - 2)
    parts: List[Fragment] = []
    for idx, note in enumerate(task.notes):
        mark = NOTE_DONE if note.completed else NOTE_OPEN
        selected = idx == selection.selected_note_index
        if selected:
            style = "class:note.selected"
        else:
            style = "class:note.done" if note.completed else "class:note.open"
        cursor = CURSOR if selected else " "
        parts.append((style, f"{indent[:-1]}{cursor}{mark} {DisplayMixin._pad_display(note.text, room)}\n"))
    return parts


def render_pane(tui, pane: Pane, width: Optional[int] = None) -> FormattedText:
    model = tui.session.model
    width = width or max(20, tui.get_terminal_width() // 2 - 1)
    active = model.selection.active_pane is pane
    parts: List[Fragment] = _header(tui, pane, width, active)
    items = model.tasks.pane(pane)
    if not items:
        parts.append(("class:text.dimmer", f"   {tui._t('PANE_EMPTY')}\n"))
        if active:
            parts.append(("class:text.dimmer", f"   {tui._t('PANE_EMPTY_HINT')}\n"))
        return FormattedText(parts)
    for index, task in enumerate(items):
        parts.extend(_task_row(tui, pane, index, task, width, active))
        if active and model.selection.expanded_index == index:
            parts.extend(_note_rows(tui, task, width))
    return FormattedText(parts)


__all__ = ["render_pane", "pane_title", "notes_badge"]
