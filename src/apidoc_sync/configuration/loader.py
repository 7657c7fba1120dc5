"""Settings loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from apidoc_sync.document_codec.format_codec import DEFAULT_INDENT
from apidoc_sync.document_codec.text_formats import DocumentFormat

from .runtime_settings import DEFAULT_DEBOUNCE_SECONDS, EditorSettings


class ConfigurationError(Exception):
    """Raised when the settings file is invalid."""


def load_settings(config_path: Path | str) -> EditorSettings:
    """Load and validate the settings file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse settings file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Settings root must be a mapping.")

    return _parse_editor_section(parsed.get("editor"))


def _parse_editor_section(value: Any) -> EditorSettings:
    if value is None:
        return EditorSettings()
    section = _require_mapping(value, "editor")
    debounce_seconds = _require_positive_number(
        section.get("debounce_seconds", DEFAULT_DEBOUNCE_SECONDS), "editor.debounce_seconds"
    )
    indent = _require_positive_int(section.get("indent", DEFAULT_INDENT), "editor.indent")
    default_format = _require_format(
        section.get("default_format", DocumentFormat.YAML.value), "editor.default_format"
    )
    return EditorSettings(
        debounce_seconds=debounce_seconds,
        indent=indent,
        default_format=default_format,
    )


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Settings section '{section_name}' must be a mapping.")
    return value


def _require_positive_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{field_name} must be a number.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return float(value)


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value


def _require_format(value: Any, field_name: str) -> DocumentFormat:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    try:
        return DocumentFormat(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(item.value for item in DocumentFormat)
        raise ConfigurationError(f"{field_name} must be one of: {choices}.") from exc
