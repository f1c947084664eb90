"""Mutually exclusive UI modes.

Each mode is its own frozen dataclass carrying only the data that mode
needs; ``Mode`` is their union. Edit/create modes own the draft text, so
leaving the mode drops the draft with it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union


@dataclass(frozen=True)
class Navigate:
    pass


@dataclass(frozen=True)
class EditTask:
    index: int
    draft: str = ""


@dataclass(frozen=True)
class CreateTask:
    draft: str = ""


@dataclass(frozen=True)
class EditNote:
    index: int
    draft: str = ""


@dataclass(frozen=True)
class CreateNote:
    draft: str = ""


@dataclass(frozen=True)
class ShowHelp:
    pass


@dataclass(frozen=True)
class ShowSettings:
    pending_hotkey: Optional[str] = None
    error: Optional[str] = None


Mode = Union[Navigate, EditTask, CreateTask, EditNote, CreateNote, ShowHelp, ShowSettings]
DraftMode = Union[EditTask, CreateTask, EditNote, CreateNote]

NAVIGATE = Navigate()

_DRAFT_MODES = (EditTask, CreateTask, EditNote, CreateNote)
_OVERLAY_MODES = (ShowHelp, ShowSettings)


def is_editing(mode: Mode) -> bool:
    return isinstance(mode, _DRAFT_MODES)


def is_overlay(mode: Mode) -> bool:
    return isinstance(mode, _OVERLAY_MODES)


def is_note_scoped(mode: Mode) -> bool:
    return isinstance(mode, (EditNote, CreateNote))


def draft_of(mode: Mode) -> str:
    return mode.draft if is_editing(mode) else ""


def with_draft(mode: DraftMode, text: str) -> DraftMode:
    return replace(mode, draft=text)


__all__ = [
    "Navigate",
    "EditTask",
    "CreateTask",
    "EditNote",
    "CreateNote",
    "ShowHelp",
    "ShowSettings",
    "Mode",
    "DraftMode",
    "NAVIGATE",
    "is_editing",
    "is_overlay",
    "is_note_scoped",
    "draft_of",
    "with_draft",
]
