"""Internal reference resolution service."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from apidoc_sync.path_addressing import (
    MISSING,
    ROOT_PATH,
    DocumentPath,
    MappingKey,
    RawStep,
    SequenceIndex,
    Step,
    get_at,
)

from .resolution_outcomes import ReferenceResolution, ResolutionStatus

REFERENCE_KEY = "$ref"
REFERENCE_PREFIX = "#/"

_DECIMAL_PATTERN = re.compile(r"[0-9]+")

logger = logging.getLogger(__name__)


def is_reference(node: Any) -> bool:
    """Return True for a mapping node carrying a string ``$ref``."""
    return isinstance(node, Mapping) and isinstance(node.get(REFERENCE_KEY), str)


def is_internal_reference(reference: Any) -> bool:
    return isinstance(reference, str) and reference.startswith(REFERENCE_PREFIX)


def to_edit_path(reference: str) -> DocumentPath:
    """Return the path of the node ``reference`` names, or the root path if unsupported.

    Edits aimed at a referenced node must use this path rather than the path
    through the ``$ref`` site, otherwise they would overwrite the reference.
    """
    if not is_internal_reference(reference):
        return ROOT_PATH
    remainder = reference[len(REFERENCE_PREFIX) :]
    return DocumentPath(tuple(_parse_step(part) for part in remainder.split("/")))


def resolve_reference(
    document: Any, reference: str, visited: Iterable[str] = ()
) -> ReferenceResolution:
    """Resolve ``reference`` against ``document`` without modifying it.

    Args:
      document: Root of the document tree.
      reference: Internal reference string such as ``#/components/schemas/Pet``.
      visited: References already followed in the current resolution chain.

    Returns:
      A ``CIRCULAR`` outcome when ``reference`` is already in ``visited``,
      ``NOT_FOUND`` for unsupported, dangling or ``null`` targets, otherwise
      ``RESOLVED`` with the node and its edit path.
    """
    if reference in set(visited):
        return ReferenceResolution(reference=reference, status=ResolutionStatus.CIRCULAR)
    if not is_internal_reference(reference):
        logger.warning("Cannot resolve external or invalid reference: %s", reference)
        return ReferenceResolution(reference=reference, status=ResolutionStatus.NOT_FOUND)

    edit_path = to_edit_path(reference)
    node = get_at(document, edit_path)
    if node is MISSING or node is None:
        return ReferenceResolution(
            reference=reference, status=ResolutionStatus.NOT_FOUND, edit_path=edit_path
        )
    return ReferenceResolution(
        reference=reference, status=ResolutionStatus.RESOLVED, node=node, edit_path=edit_path
    )


class ResolutionPass:
    """Visited-reference bookkeeping for one top-to-bottom resolution pass.

    A pass is immutable: ``descend`` returns a new pass, so sibling branches of
    a walk never see each other's references. Discard the pass when the walk
    is complete.
    """

    def __init__(self, document: Any, visited: Iterable[str] = ()) -> None:
        self._document = document
        self._visited = frozenset(visited)

    @property
    def visited(self) -> frozenset[str]:
        return self._visited

    def resolve(self, reference: str) -> ReferenceResolution:
        return resolve_reference(self._document, reference, self._visited)

    def descend(self, reference: str) -> ResolutionPass:
        """Return a pass that treats ``reference`` as already followed."""
        return ResolutionPass(self._document, self._visited | {reference})

    def follow(
        self, node: Any, path: DocumentPath | Iterable[RawStep]
    ) -> tuple[ReferenceResolution, ResolutionPass]:
        """Follow ``$ref`` links from ``node`` until a concrete node or a terminal state.

        Returns the outcome together with the pass to use below the reached
        node. For a plain (non-reference) node the outcome is ``RESOLVED``
        with ``reference`` set to None and ``edit_path`` equal to ``path``.
        """
        current_pass = self
        current_node = node
        current_path = DocumentPath.coerce(path)
        last_reference: str | None = None
        while is_reference(current_node):
            reference = current_node[REFERENCE_KEY]
            resolution = current_pass.resolve(reference)
            if not resolution.is_resolved:
                return resolution, current_pass
            current_pass = current_pass.descend(reference)
            current_node = resolution.node
            current_path = resolution.edit_path
            last_reference = reference
        return (
            ReferenceResolution(
                reference=last_reference,
                status=ResolutionStatus.RESOLVED,
                node=current_node,
                edit_path=current_path,
            ),
            current_pass,
        )


def _parse_step(part: str) -> Step:
    if _DECIMAL_PATTERN.fullmatch(part):
        return SequenceIndex(int(part))
    return MappingKey(part)
