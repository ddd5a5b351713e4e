"""Configuration module for contrib-canvas."""

from contrib_canvas.config.defaults import (
    DEFAULT_THEMES,
    DEFAULT_THEME_NAME,
    DEFAULT_FONT_FACE,
    DEFAULT_PREFERENCES,
    THEME_SLOTS,
    get_all_defaults,
)

__all__ = [
    "DEFAULT_THEMES",
    "DEFAULT_THEME_NAME",
    "DEFAULT_FONT_FACE",
    "DEFAULT_PREFERENCES",
    "THEME_SLOTS",
    "get_all_defaults",
]
