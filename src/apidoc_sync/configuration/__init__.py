"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_SETTINGS_FILENAME,
    build_placeholder_settings,
    write_placeholder_settings,
)
from .loader import ConfigurationError, load_settings
from .runtime_settings import DEFAULT_DEBOUNCE_SECONDS, EditorSettings

__all__ = [
    "DEFAULT_DEBOUNCE_SECONDS",
    "DEFAULT_SETTINGS_FILENAME",
    "ConfigurationError",
    "EditorSettings",
    "build_placeholder_settings",
    "load_settings",
    "write_placeholder_settings",
]
