"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    FONT_SIZE_DEFAULT,
    FONT_SIZE_MAX,
    FONT_SIZE_MIN,
    OPEN_FILTER,
    PLACEHOLDER_TEXT,
    SETTINGS_THEME_MODE,
    TEXT_ENCODING,
)
from .log import configure_logging

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "FONT_SIZE_DEFAULT",
    "FONT_SIZE_MAX",
    "FONT_SIZE_MIN",
    "OPEN_FILTER",
    "PLACEHOLDER_TEXT",
    "SETTINGS_THEME_MODE",
    "TEXT_ENCODING",
    "configure_logging",
]
