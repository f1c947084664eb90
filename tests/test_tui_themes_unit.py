#!/usr/bin/env python3
"""Unit tests for tui_themes module."""

from prompt_toolkit.styles import Style

from interface.tui_themes import THEMES, DEFAULT_THEME, build_style, get_theme_palette


class TestThemes:
    """Tests for THEMES constant."""

    def test_themes_has_default_theme(self):
        assert DEFAULT_THEME in THEMES

    def test_themes_has_expected_themes(self):
        assert {"dark-olive", "dark-contrast", "light"} <= set(THEMES)

    def test_themes_share_one_key_set(self):
        """Every theme styles the same classes, so switching never loses a style."""
        keys = {name: set(palette) for name, palette in THEMES.items()}
        reference = keys[DEFAULT_THEME]
        for name, theme_keys in keys.items():
            assert theme_keys == reference, name


class TestGetThemePalette:
    def test_returns_copy(self):
        original = THEMES["light"]["text"]
        palette = get_theme_palette("light")
        palette["text"] = "#000000"
        assert THEMES["light"]["text"] == original

    def test_empty_name_falls_back(self):
        assert get_theme_palette("") == THEMES[DEFAULT_THEME]


class TestBuildStyle:
    def test_returns_style(self):
        assert isinstance(build_style("dark-contrast"), Style)

    def test_rules_cover_palette(self):
        style = build_style(DEFAULT_THEME)
        names = {rule[0] for rule in style.style_rules}
        assert "reject" in names
        assert "completing" in names
