"""Path addressing exports."""

from .document_paths import (
    MISSING,
    ROOT_PATH,
    DocumentPath,
    MappingKey,
    Missing,
    RawStep,
    SequenceIndex,
    Step,
    as_step,
    coerce_path,
)
from .path_access import delete_at, find_mapping_key, get_at, set_at

__all__ = [
    "MISSING",
    "ROOT_PATH",
    "DocumentPath",
    "MappingKey",
    "Missing",
    "RawStep",
    "SequenceIndex",
    "Step",
    "as_step",
    "coerce_path",
    "delete_at",
    "find_mapping_key",
    "get_at",
    "set_at",
]
