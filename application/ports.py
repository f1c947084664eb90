from typing import Protocol

from core import Task, TaskListState
from core.engine import Model


class TaskStore(Protocol):
    def load(self) -> TaskListState:
        ...

    def save(self, state: TaskListState) -> None:
        ...


class CompletionLog(Protocol):
    def append(self, task: Task) -> None:
        ...

    def archive(self) -> str:
        ...


class WindowController(Protocol):
    def hide(self) -> None:
        ...

    def set_hotkey(self, hotkey: str) -> None:
        ...


class Renderer(Protocol):
    def render(self, model: Model) -> None:
        ...
