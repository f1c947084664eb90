"""Full-screen prompt_toolkit front end for the task shelf."""

import logging
import os
from pathlib import Path
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import ConditionalContainer, DynamicContainer, HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import TextArea

from application.session import TaskSession
from config import AppSettings, get_tasks_dir, load_settings
from core import KeyEvent, Model, Notice, Pane, ShowHelp, ShowSettings, is_editing
from infrastructure.completion_log import FileCompletionLog
from infrastructure.file_repository import FileTaskStore

from .i18n import effective_lang, translate
from .tui_display import DisplayMixin
from .tui_editing import EditingMixin
from .tui_footer import build_footer_text
from .tui_help import render_help
from .tui_keys import key_event_from_press
from .tui_render import render_pane
from .tui_settings_panel import render_settings_panel
from .tui_status import build_status_text
from .tui_themes import DEFAULT_THEME, build_style, get_theme_palette

logger = logging.getLogger("taskshelf.tui")

REFRESH_INTERVAL = 0.2
LOG_FILE = "taskshelf.log"


class TaskShelfTUI(EditingMixin, DisplayMixin):
    """Renderer and window controller for a ``TaskSession``.

    Every key press is turned into a ``KeyEvent`` and handed to the session;
    the screen is a pure function of ``session.model`` plus the session's
    transient flashes.
    """

    def __init__(
        self,
        tasks_dir: Optional[Path] = None,
        settings: Optional[AppSettings] = None,
        theme: Optional[str] = None,
        session: Optional[TaskSession] = None,
    ):
        self.app: Optional[Application] = None
        self.settings = settings or load_settings()
        self.tasks_dir = Path(tasks_dir).expanduser() if tasks_dir else get_tasks_dir()
        self.language = effective_lang(self.settings.lang or None)
        self.theme_name = theme or self.settings.theme or DEFAULT_THEME
        self.registered_hotkey = self.settings.hotkey
        if session is None:
            session = TaskSession(
                FileTaskStore(self.tasks_dir),
                FileCompletionLog(self.tasks_dir, include_notes=self.settings.log_notes),
                settings=self.settings,
            )
        session.window = self
        session.renderer = self
        self.session = session

        self.editing_mode = False
        self._syncing_editor = False
        self.edit_field = TextArea(multiline=False, focusable=True, wrap_lines=False)
        self.edit_buffer = self.edit_field.buffer
        self.edit_buffer.on_text_changed += self._on_edit_changed

        self.style = self.build_style(self.theme_name)
        kb = self._build_key_bindings()

        self.status_bar = Window(
            content=FormattedTextControl(self.get_status_text),
            height=1,
            always_hide_cursor=True,
        )
        self.main_window = Window(
            content=FormattedTextControl(lambda: self.get_pane_text(Pane.CURRENT), focusable=True, show_cursor=False),
            always_hide_cursor=True,
            wrap_lines=False,
            width=Dimension(weight=1),
        )
        self.shelf_window = Window(
            content=FormattedTextControl(lambda: self.get_pane_text(Pane.SHELF)),
            always_hide_cursor=True,
            wrap_lines=False,
            width=Dimension(weight=1),
        )
        self.panes_body = VSplit([self.main_window, Window(width=1, char="│", style="class:border"), self.shelf_window])
        self.overlay_window = Window(
            content=FormattedTextControl(self.get_overlay_text, focusable=True, show_cursor=False),
            always_hide_cursor=True,
            wrap_lines=True,
        )
        editing = Condition(lambda: is_editing(self.session.model.mode))
        self.editor_row = ConditionalContainer(
            VSplit(
                [
                    Window(content=FormattedTextControl(lambda: [("class:header", self.edit_prompt())]), dont_extend_width=True),
                    self.edit_field,
                ]
            ),
            filter=editing,
        )
        self.footer = Window(content=FormattedTextControl(self.get_footer_text), height=2, always_hide_cursor=True)
        root = HSplit([self.status_bar, DynamicContainer(self._resolve_body_container), self.editor_row, self.footer])

        self.app = Application(
            layout=Layout(root, focused_element=self.main_window),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            refresh_interval=REFRESH_INTERVAL,
        )
        self.app.before_render += self._before_render
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("TASKSHELF_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

    @staticmethod
    def get_theme_palette(theme: str):
        return get_theme_palette(theme)

    @staticmethod
    def build_style(theme: str) -> Style:
        return build_style(theme)

    @staticmethod
    def get_terminal_width() -> int:
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    def _t(self, key: str, **kwargs) -> str:
        return translate(key, lang=getattr(self, "language", "en"), **kwargs)

    # ------------------------------------------------------------ key bindings

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        kb.timeout = 0
        editing = Condition(lambda: is_editing(self.session.model.mode))
        not_editing = ~editing

        @kb.add("escape", eager=True)
        def _(event):
            self.send_key(KeyEvent("Escape"))

        @kb.add("enter", eager=True, filter=editing)
        def _(event):
            self.send_key(KeyEvent("Enter"))

        @kb.add("c-c")
        @kb.add("c-q")
        def _(event):
            self.exit_app()

        @kb.add("f5", filter=not_editing)
        def _(event):
            self.reload()

        @kb.add(Keys.Any, filter=not_editing)
        def _(event):
            press = event.key_sequence[0]
            key_event = key_event_from_press(press.key, press.data)
            if key_event is not None:
                self.send_key(key_event)

        return kb

    def send_key(self, key_event: KeyEvent) -> bool:
        handled = self.session.handle_key(key_event)
        self.sync_editor()
        self._sync_focus()
        return handled

    def _sync_focus(self) -> None:
        if self.editing_mode or self.app is None:
            return
        target = self._resolve_body_container()
        if target is self.panes_body:
            target = self.main_window
        if not self.app.layout.has_focus(target):
            self.app.layout.focus(target)

    def reload(self) -> None:
        self.session.reload()
        self.session.set_notice(Notice("STATUS_RELOADED"))
        self.sync_editor()

    # ------------------------------------------------------------ Renderer / WindowController

    def render(self, model: Model) -> None:
        if self.app is not None:
            self.app.invalidate()

    def hide(self) -> None:
        """A terminal has no window to hide; leaving the full-screen app is the closest thing."""
        self.exit_app()

    def set_hotkey(self, hotkey: str) -> None:
        # Global OS hotkey registration is out of scope in a terminal; remember it for display.
        self.registered_hotkey = hotkey

    # ------------------------------------------------------------ content

    def _before_render(self, _app) -> None:
        self.session.maybe_reload()
        self.sync_editor()
        self._sync_focus()

    def _resolve_body_container(self):
        if isinstance(self.session.model.mode, (ShowHelp, ShowSettings)):
            return self.overlay_window
        return self.panes_body

    def get_status_text(self) -> FormattedText:
        return build_status_text(self)

    def get_footer_text(self) -> FormattedText:
        return build_footer_text(self)

    def get_pane_text(self, pane: Pane) -> FormattedText:
        width = max(20, (self.get_terminal_width() - 1) // 2)
        return render_pane(self, pane, width)

    def get_overlay_text(self) -> FormattedText:
        if isinstance(self.session.model.mode, ShowSettings):
            return render_settings_panel(self)
        return render_help(self)

    # ------------------------------------------------------------ lifecycle

    def exit_app(self) -> None:
        if self.app is not None and self.app.is_running:
            self.app.exit()

    def run(self) -> int:
        try:
            self.app.run()
        finally:
            errors = self.session.close()
            for message in errors:
                logger.warning("Shutdown: %s", message)
        return 0


def _configure_file_logging(tasks_dir: Path) -> None:
    """Send log records to a file so they do not tear the full-screen display."""
    tasks_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(tasks_dir / LOG_FILE, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("taskshelf")
    root.addHandler(handler)
    root.setLevel(logging.INFO)
    root.propagate = False


def cmd_tui(args) -> int:
    settings = load_settings()
    tasks_dir = Path(args.tasks_dir).expanduser() if getattr(args, "tasks_dir", None) else get_tasks_dir()
    try:
        _configure_file_logging(tasks_dir)
    except OSError as exc:
        logger.warning("File logging disabled: %s", exc)
    tui = TaskShelfTUI(
        tasks_dir=tasks_dir,
        settings=settings,
        theme=getattr(args, "theme", None),
    )
    return tui.run()


__all__ = ["TaskShelfTUI", "cmd_tui"]
