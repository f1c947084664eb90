"""Interface-level constants for the taskshelf CLI/TUI."""

PANE_LABEL_KEYS = {
    "current": "PANE_CURRENT",
    "shelf": "PANE_SHELF",
}

LANG_PACK = {
    "en": {
        "PANE_CURRENT": "Current",
        "PANE_SHELF": "Shelf",
        "PANE_EMPTY": "(empty)",
        "PANE_EMPTY_HINT": "press o to add a task",
        "NOTES_EMPTY": "no notes, press o to add one",
        "MODE_NAVIGATE": "NAV",
        "MODE_EDIT_TASK": "EDIT",
        "MODE_CREATE_TASK": "NEW TASK",
        "MODE_EDIT_NOTE": "EDIT NOTE",
        "MODE_CREATE_NOTE": "NEW NOTE",
        "MODE_HELP": "HELP",
        "MODE_SETTINGS": "SETTINGS",
        "STATUS_COUNTS": "{current}/{capacity} current · {shelf} shelved",
        "STATUS_UNDO_DEPTH": "undo {depth}",
        "STATUS_SAVED": "saved",
        "STATUS_ADDED_TO_SHELF": "Current is full, added to shelf: {detail}",
        "STATUS_COMPLETE_FAILED": "Could not log completion, task kept: {detail}",
        "STATUS_SAVE_FAILED": "Save failed: {detail}",
        "STATUS_LOAD_FAILED": "Load failed: {detail}",
        "STATUS_HOTKEY_SAVED": "Hotkey set to {detail}",
        "STATUS_RELOADED": "Reloaded from disk",
        "EDIT_PROMPT_TASK": "Task: ",
        "EDIT_PROMPT_NOTE": "Note: ",
        "FOOTER_NAVIGATE": "j/k move · J/K reorder · Tab pane · Enter notes · a edit · o new · m move · ^J done · ^D delete · u undo · ? help",
        "FOOTER_EXPANDED": "j/k note · J/K reorder · ^J toggle · ^D delete · a edit · o new note · Esc close",
        "FOOTER_EDIT": "Enter save · Esc cancel",
        "FOOTER_CREATE": "Enter add (keeps adding) · empty Enter or Esc to stop",
        "FOOTER_HELP": "? or Esc to close",
        "FOOTER_SETTINGS": "press a chord with modifiers · Enter save · Esc cancel",
        "SETTINGS_TITLE": "Settings",
        "SETTINGS_HOTKEY": "Global hotkey",
        "SETTINGS_PENDING": "New hotkey",
        "SETTINGS_NONE": "(press a chord)",
        "SETTINGS_CAPACITY": "Current capacity",
        "SETTINGS_INSERT": "New tasks go",
        "SETTINGS_INSERT_END": "to the end",
        "SETTINGS_INSERT_AFTER": "after the selection",
        "SETTINGS_ERROR": "Error: {error}",
        "HELP_TITLE": "Keyboard",
        "HELP_SECTION_TASKS": "Tasks",
        "HELP_SECTION_NOTES": "Notes (task expanded)",
        "HELP_SECTION_EDIT": "Editing",
        "HELP_MOVE": "move selection",
        "HELP_REORDER": "reorder",
        "HELP_PANE": "switch pane",
        "HELP_EXPAND": "show notes",
        "HELP_COMPLETE": "complete task",
        "HELP_DELETE": "delete",
        "HELP_EDIT": "edit text",
        "HELP_CREATE": "new task",
        "HELP_MOVE_PANE": "move to other pane",
        "HELP_UNDO": "undo",
        "HELP_SETTINGS": "settings",
        "HELP_RELOAD": "reload from disk",
        "HELP_QUIT": "quit",
        "HELP_ESCAPE": "close notes / quit",
        "HELP_TOGGLE_NOTE": "toggle note",
        "HELP_CREATE_NOTE": "new note",
        "HELP_SAVE": "save",
        "HELP_CANCEL": "cancel",
        "CLI_LIST_EMPTY": "(no tasks)",
        "CLI_ARCHIVED": "Archived completed tasks to {name}",
        "CLI_HOTKEY_CURRENT": "Hotkey: {hotkey}",
        "CLI_HOTKEY_SAVED": "Hotkey saved: {hotkey}",
    },
    "ru": {
        "PANE_CURRENT": "Текущие",
        "PANE_SHELF": "Полка",
        "PANE_EMPTY": "(пусто)",
        "PANE_EMPTY_HINT": "o — добавить задачу",
        "NOTES_EMPTY": "заметок нет, o — добавить",
        "MODE_NAVIGATE": "НАВ",
        "MODE_EDIT_TASK": "ПРАВКА",
        "MODE_CREATE_TASK": "НОВАЯ ЗАДАЧА",
        "MODE_EDIT_NOTE": "ПРАВКА ЗАМЕТКИ",
        "MODE_CREATE_NOTE": "НОВАЯ ЗАМЕТКА",
        "MODE_HELP": "СПРАВКА",
        "MODE_SETTINGS": "НАСТРОЙКИ",
        "STATUS_COUNTS": "{current}/{capacity} текущих · {shelf} на полке",
        "STATUS_UNDO_DEPTH": "отмена {depth}",
        "STATUS_SAVED": "сохранено",
        "STATUS_ADDED_TO_SHELF": "Текущие заполнены, добавлено на полку: {detail}",
        "STATUS_COMPLETE_FAILED": "Не удалось записать выполнение, задача оставлена: {detail}",
        "STATUS_SAVE_FAILED": "Ошибка сохранения: {detail}",
        "STATUS_LOAD_FAILED": "Ошибка загрузки: {detail}",
        "STATUS_HOTKEY_SAVED": "Горячая клавиша: {detail}",
        "STATUS_RELOADED": "Перечитано с диска",
        "EDIT_PROMPT_TASK": "Задача: ",
        "EDIT_PROMPT_NOTE": "Заметка: ",
        "FOOTER_EDIT": "Enter сохранить · Esc отмена",
        "FOOTER_CREATE": "Enter добавить · пустой Enter или Esc — выход",
        "FOOTER_HELP": "? или Esc — закрыть",
        "SETTINGS_TITLE": "Настройки",
        "SETTINGS_HOTKEY": "Глобальная клавиша",
        "SETTINGS_PENDING": "Новая клавиша",
        "SETTINGS_NONE": "(нажмите сочетание)",
        "SETTINGS_CAPACITY": "Ёмкость текущих",
        "SETTINGS_INSERT": "Новые задачи",
        "SETTINGS_INSERT_END": "в конец",
        "SETTINGS_INSERT_AFTER": "после выделенной",
        "SETTINGS_ERROR": "Ошибка: {error}",
        "HELP_TITLE": "Клавиши",
        "HELP_SECTION_TASKS": "Задачи",
        "HELP_SECTION_NOTES": "Заметки (задача раскрыта)",
        "HELP_SECTION_EDIT": "Редактирование",
        "CLI_LIST_EMPTY": "(задач нет)",
        "CLI_ARCHIVED": "Выполненные задачи перенесены в {name}",
    },
}
