"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "text.dimmer": "#6d717a",
        "selected": "bg:#3b3b3b #d7dfe6 bold",
        "selected.inactive": "#d7dfe6 underline",
        "header": "#ffb347 bold",
        "header.inactive": "#97a0a9",
        "border": "#4b525a",
        "border.active": "#ffb347",
        "reject": "bg:#5c2226 #ff6b6b bold",
        "completing": "#9ad974 strike",
        "note.done": "#9ad974",
        "note.open": "#97a0a9",
        "note.selected": "bg:#3b3b3b #e8eaec",
        "icon.check": "#9ad974 bold",
        "icon.warn": "#f9ac60 bold",
        "icon.fail": "#ff5156 bold",
        "mode": "bg:#4b525a #e8eaec bold",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "text.dimmer": "#6f757d",
        "selected": "bg:#3d4047 #e8eaec bold",
        "selected.inactive": "#e8eaec underline",
        "header": "#ffb347 bold",
        "header.inactive": "#a7b0ba",
        "border": "#5a6169",
        "border.active": "#ffb347",
        "reject": "bg:#6b1f24 #ff6b6b bold",
        "completing": "#b8f171 strike",
        "note.done": "#b8f171",
        "note.open": "#a7b0ba",
        "note.selected": "bg:#3d4047 #ffffff",
        "icon.check": "#b8f171 bold",
        "icon.warn": "#f9ac60 bold",
        "icon.fail": "#ff5156 bold",
        "mode": "bg:#5a6169 #ffffff bold",
    },
    "light": {
        "": "#2b2f33",
        "text": "#2b2f33",
        "text.dim": "#6a737d",
        "text.dimmer": "#a0a7ae",
        "selected": "bg:#dde3e8 #111111 bold",
        "selected.inactive": "#2b2f33 underline",
        "header": "#b35900 bold",
        "header.inactive": "#6a737d",
        "border": "#c2c8ce",
        "border.active": "#b35900",
        "reject": "bg:#f8d7da #a61b29 bold",
        "completing": "#2e7d32 strike",
        "note.done": "#2e7d32",
        "note.open": "#6a737d",
        "note.selected": "bg:#dde3e8 #111111",
        "icon.check": "#2e7d32 bold",
        "icon.warn": "#b35900 bold",
        "icon.fail": "#a61b29 bold",
        "mode": "bg:#c2c8ce #111111 bold",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Palette for ``theme``; unknown names fall back to the default theme."""
    base = THEMES.get(theme) or THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    return Style.from_dict(get_theme_palette(theme))


__all__ = ["THEMES", "DEFAULT_THEME", "get_theme_palette", "build_style"]
