"""Editing mixin: keeps the inline edit field in step with the session's draft."""

from typing import TYPE_CHECKING, Optional

from core import draft_of, is_editing, is_note_scoped

if TYPE_CHECKING:
    from prompt_toolkit.application import Application
    from prompt_toolkit.buffer import Buffer
    from prompt_toolkit.layout import Container

    from application.session import TaskSession


class EditingMixin:
    """The draft lives in the model; the buffer only mirrors it.

    Typing into the buffer is forwarded as ``SET_DRAFT``. When the model's
    draft changes on its own (entering a mode, continuous create clearing
    it) the buffer is overwritten without echoing back.
    """

    session: "TaskSession"
    editing_mode: bool
    edit_buffer: "Buffer"
    edit_field: "Container"
    main_window: "Container"
    app: Optional["Application"]
    _syncing_editor: bool

    def _on_edit_changed(self, _buffer) -> None:
        if self._syncing_editor or not self.editing_mode:
            return
        self.session.set_draft(self.edit_buffer.text)

    def _write_buffer(self, text: str) -> None:
        self._syncing_editor = True
        try:
            self.edit_buffer.text = text
            self.edit_buffer.cursor_position = len(text)
        finally:
            self._syncing_editor = False

    def sync_editor(self) -> None:
        mode = self.session.model.mode
        if is_editing(mode):
            draft = draft_of(mode)
            if self.edit_buffer.text != draft:
                self._write_buffer(draft)
            if not self.editing_mode:
                self.editing_mode = True
                self._focus(self.edit_field)
        elif self.editing_mode:
            self.editing_mode = False
            self._write_buffer("")
            self._focus(self.main_window)

    def edit_prompt(self) -> str:
        mode = self.session.model.mode
        if is_note_scoped(mode):
            return self._t("EDIT_PROMPT_NOTE")
        return self._t("EDIT_PROMPT_TASK")

    def _focus(self, container) -> None:
        app = getattr(self, "app", None)
        if app is not None:
            app.layout.focus(container)


__all__ = ["EditingMixin"]
