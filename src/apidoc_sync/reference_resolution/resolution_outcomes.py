"""Reference resolution entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from apidoc_sync.path_addressing import ROOT_PATH, DocumentPath


class ResolutionStatus(str, Enum):
    """Outcome kinds of resolving one internal reference."""

    RESOLVED = "resolved"
    NOT_FOUND = "not_found"
    CIRCULAR = "circular"


@dataclass(frozen=True)
class ReferenceResolution:
    """Result of resolving a reference; never raised, always rendered."""

    reference: str | None
    status: ResolutionStatus
    node: Any = None
    edit_path: DocumentPath = ROOT_PATH

    @property
    def is_resolved(self) -> bool:
        """Return True when ``node`` holds the referenced value."""
        return self.status is ResolutionStatus.RESOLVED
