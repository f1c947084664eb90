from __future__ import annotations

import logging
import os
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any

DEFAULT_HOTKEY = "Cmd+Ctrl+Alt+Shift+="
MAX_CURRENT_CHOICES = (5, 10)
INSERT_POSITION_CHOICES = ("end", "after_selection")

logger = logging.getLogger("taskshelf.config")


def get_tasks_dir() -> Path:
    """Storage root: ``$TASKSHELF_DIR`` or ``~/.tasks``."""
    override = os.getenv("TASKSHELF_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".tasks"


USER_CONFIG_PATH = get_tasks_dir() / "config.yaml"


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Unreadable config %s: %s", USER_CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    if not data:
        if USER_CONFIG_PATH.exists():
            USER_CONFIG_PATH.unlink()
        return
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    USER_CONFIG_PATH.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def _set_value(key: str, value: Any) -> None:
    data = _load_config()
    if value is None or value == "":
        data.pop(key, None)
    else:
        data[key] = value
    _save_config(data)


def get_user_hotkey() -> str:
    value = str(_load_config().get("hotkey", "") or "").strip()
    return value or DEFAULT_HOTKEY


def set_user_hotkey(value: str) -> None:
    _set_value("hotkey", (value or "").strip())


def get_user_lang() -> str:
    return str(_load_config().get("lang", "") or "").strip()


def set_user_lang(value: str) -> None:
    _set_value("lang", (value or "").strip())


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip()


def set_user_theme(value: str) -> None:
    _set_value("theme", (value or "").strip())


@dataclass(frozen=True)
class AppSettings:
    """Feature flags and timings. Older releases differed in these, so they are configurable."""

    hotkey: str = DEFAULT_HOTKEY
    max_current: int = 10
    insert_position: str = "end"
    continuous_create: bool = True
    log_notes: bool = True
    theme: str = ""
    lang: str = ""
    save_debounce: float = 0.3
    complete_delay: float = 0.15


def _as_float(value: Any, default: float) -> float:
    try:
        return max(0.0, float(value))
    except (TypeError, ValueError):
        return default


def load_settings() -> AppSettings:
    data = _load_config()
    defaults = AppSettings()
    max_current = data.get("max_current", defaults.max_current)
    if max_current not in MAX_CURRENT_CHOICES:
        logger.warning("max_current=%r not in %s, using %s", max_current, MAX_CURRENT_CHOICES, defaults.max_current)
        max_current = defaults.max_current
    insert_position = data.get("insert_position", defaults.insert_position)
    if insert_position not in INSERT_POSITION_CHOICES:
        logger.warning("insert_position=%r not in %s, using %s", insert_position, INSERT_POSITION_CHOICES, defaults.insert_position)
        insert_position = defaults.insert_position
    return AppSettings(
        hotkey=get_user_hotkey(),
        max_current=int(max_current),
        insert_position=str(insert_position),
        continuous_create=bool(data.get("continuous_create", defaults.continuous_create)),
        log_notes=bool(data.get("log_notes", defaults.log_notes)),
        theme=str(data.get("theme", "") or ""),
        lang=str(data.get("lang", "") or ""),
        save_debounce=_as_float(data.get("save_debounce"), defaults.save_debounce),
        complete_delay=_as_float(data.get("complete_delay"), defaults.complete_delay),
    )
