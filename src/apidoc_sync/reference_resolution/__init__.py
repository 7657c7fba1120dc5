"""Reference resolution exports."""

from .reference_resolver import (
    REFERENCE_KEY,
    REFERENCE_PREFIX,
    ResolutionPass,
    is_internal_reference,
    is_reference,
    resolve_reference,
    to_edit_path,
)
from .resolution_outcomes import ReferenceResolution, ResolutionStatus

__all__ = [
    "REFERENCE_KEY",
    "REFERENCE_PREFIX",
    "ReferenceResolution",
    "ResolutionPass",
    "ResolutionStatus",
    "is_internal_reference",
    "is_reference",
    "resolve_reference",
    "to_edit_path",
]
