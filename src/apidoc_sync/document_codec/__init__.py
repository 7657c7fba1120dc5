"""Document codec exports."""

from .format_codec import (
    DEFAULT_INDENT,
    DocumentParseError,
    DocumentSerializationError,
    parse_document,
    serialize_document,
)
from .sample_document import SAMPLE_DOCUMENT
from .text_formats import DocumentFormat, ParsedDocument

__all__ = [
    "DEFAULT_INDENT",
    "SAMPLE_DOCUMENT",
    "DocumentFormat",
    "DocumentParseError",
    "DocumentSerializationError",
    "ParsedDocument",
    "parse_document",
    "serialize_document",
]
