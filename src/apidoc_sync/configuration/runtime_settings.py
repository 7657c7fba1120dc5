"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass

from apidoc_sync.document_codec.format_codec import DEFAULT_INDENT
from apidoc_sync.document_codec.text_formats import DocumentFormat

DEFAULT_DEBOUNCE_SECONDS = 0.5


@dataclass(frozen=True)
class EditorSettings:
    """Tunables of the text/tree synchronization."""

    debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS
    indent: int = DEFAULT_INDENT
    default_format: DocumentFormat = DocumentFormat.YAML
