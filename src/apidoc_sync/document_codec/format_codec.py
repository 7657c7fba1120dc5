"""Text parsing and serialization service."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import yaml

from .text_formats import DocumentFormat, ParsedDocument

DEFAULT_INDENT = 2


class DocumentParseError(Exception):
    """Raised when text is neither a JSON nor a YAML mapping document."""


class DocumentSerializationError(Exception):
    """Raised when a document cannot be represented in the requested syntax."""


def parse_document(text: str) -> ParsedDocument:
    """Parse ``text`` as strict JSON first, then as YAML.

    JSON is a subset of YAML, so trying it first tags JSON input as JSON.
    """
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        pass
    else:
        return ParsedDocument(
            document=_require_mapping(parsed), document_format=DocumentFormat.JSON
        )

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentParseError(_describe_yaml_error(exc)) from exc
    return ParsedDocument(document=_require_mapping(parsed), document_format=DocumentFormat.YAML)


def serialize_document(
    document: Any, document_format: DocumentFormat, *, indent: int = DEFAULT_INDENT
) -> str:
    """Render ``document`` in ``document_format`` keeping mapping insertion order."""
    try:
        if document_format is DocumentFormat.JSON:
            return json.dumps(document, indent=indent, ensure_ascii=False)
        return yaml.safe_dump(
            document,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
    except (TypeError, ValueError, yaml.YAMLError) as exc:
        raise DocumentSerializationError(
            f"Cannot serialize document as {document_format.value}: {exc}"
        ) from exc


def _require_mapping(parsed: Any) -> Mapping[str, Any]:
    if not isinstance(parsed, Mapping):
        raise DocumentParseError("Document root must be a mapping.")
    return parsed


def _describe_yaml_error(exc: yaml.YAMLError) -> str:
    message = str(exc).strip()
    return message or "Invalid YAML or JSON format."
