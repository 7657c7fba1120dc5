"""Document codec entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

DOWNLOAD_STEM = "openapi-spec"


class DocumentFormat(str, Enum):
    """Text syntaxes a document can be read from and written to."""

    JSON = "json"
    YAML = "yaml"

    @property
    def media_type(self) -> str:
        return "application/json" if self is DocumentFormat.JSON else "application/x-yaml"

    @property
    def download_name(self) -> str:
        return f"{DOWNLOAD_STEM}.{self.value}"


@dataclass(frozen=True)
class ParsedDocument:
    """Document tree together with the syntax that produced it."""

    document: Mapping[str, Any]
    document_format: DocumentFormat
