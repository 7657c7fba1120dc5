"""API navigation entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from apidoc_sync.path_addressing import DocumentPath
from apidoc_sync.reference_resolution import ReferenceResolution, ResolutionStatus


@dataclass(frozen=True)
class ParameterView:
    """One operation parameter as the form surface edits it."""

    index: int
    resolution: ReferenceResolution
    removal_path: DocumentPath

    @property
    def parameter(self) -> Any:
        return self.resolution.node

    @property
    def edit_path(self) -> DocumentPath:
        """Where edits go: the shared component for ``$ref`` entries, else the inline entry."""
        return self.resolution.edit_path

    @property
    def is_reference(self) -> bool:
        return self.resolution.reference is not None


@dataclass(frozen=True)
class SchemaPropertyView:
    """Flattened schema property with the paths needed to edit it."""

    name: str
    edit_path: DocumentPath
    parent_schema_path: DocumentPath
    required: bool
    status: ResolutionStatus
    reference: str | None = None
