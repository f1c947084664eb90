from types import SimpleNamespace

from application.session import TaskSession
from config import AppSettings
from core import Note, Task, TaskListState
from infrastructure.completion_log import FileCompletionLog
from infrastructure.file_repository import FileTaskStore
from interface.i18n import translate

QUICK = AppSettings(save_debounce=0, complete_delay=0, max_current=5)


def sample_state() -> TaskListState:
    return TaskListState(
        current=(Task("write report", (Note("outline", True), Note("draft"))), Task("call bank")),
        shelf=(Task("learn rust"),),
    )


def make_session(tmp_path, state=None, settings=QUICK) -> TaskSession:
    store = FileTaskStore(tmp_path)
    if state is not None:
        store.save(state)
    return TaskSession(store, FileCompletionLog(tmp_path), settings=settings, save_hotkey=lambda value: None)


def dummy_tui(session, width=80):
    """Bare object carrying what the render helpers read from the TUI."""
    return SimpleNamespace(
        session=session,
        _t=lambda key, **kwargs: translate(key, "en", **kwargs),
        get_terminal_width=lambda: width,
    )


def plain(fragments) -> str:
    return "".join(fragment[1] for fragment in fragments)
