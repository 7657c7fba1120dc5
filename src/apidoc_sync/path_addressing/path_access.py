"""Read and write document nodes by path.

None of these functions raise for absent intermediate nodes or malformed
paths: absence is reported as ``MISSING`` on reads and degrades to a no-op
on writes, so partially written or invalid documents can still be rendered
and edited.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, MutableMapping
from typing import Any

from .document_paths import (
    MISSING,
    DocumentPath,
    MappingKey,
    RawStep,
    SequenceIndex,
    Step,
    coerce_path,
)

_DECIMAL_PATTERN = re.compile(r"[0-9]+")


def get_at(document: Any, path: DocumentPath | Iterable[RawStep]) -> Any:
    """Return the node at ``path`` or ``MISSING`` when any step is absent."""
    resolved = coerce_path(path)
    if resolved is None:
        return MISSING
    node = document
    for step in resolved:
        node = _child(node, step)
        if node is MISSING:
            return MISSING
    return node


def set_at(document: Any, path: DocumentPath | Iterable[RawStep], value: Any) -> Any:
    """Write ``value`` at ``path`` in place and return the (possibly new) root.

    Missing or scalar intermediates are replaced by containers; the kind is
    chosen by the following step (a list for an index, a dict for a key).
    """
    resolved = coerce_path(path)
    if resolved is None:
        return document
    steps = resolved.steps
    if not steps:
        return value

    root = document if _is_container(document) else _new_container(steps[0])
    node = root
    for position, step in enumerate(steps[:-1]):
        child = _child(node, step)
        if not _is_container(child):
            child = _new_container(steps[position + 1])
            if not _write(node, step, child):
                return root
        node = child
    _write(node, steps[-1], value)
    return root


def delete_at(document: Any, path: DocumentPath | Iterable[RawStep]) -> bool:
    """Delete the node at ``path`` in place; return False when nothing was removed."""
    resolved = coerce_path(path)
    if not resolved:
        return False
    parent = get_at(document, resolved.parent)
    step = resolved.last
    if isinstance(parent, list):
        index = _sequence_index(step)
        if index is None or index >= len(parent):
            return False
        del parent[index]
        return True
    if isinstance(parent, MutableMapping):
        key = find_mapping_key(parent, step)
        if key is MISSING:
            return False
        del parent[key]
        return True
    return False


def find_mapping_key(mapping: MutableMapping[Any, Any] | Any, step: RawStep | None) -> Any:
    """Return the actual key ``step`` matches in ``mapping``, or ``MISSING``.

    YAML may load keys such as response codes as integers while references
    and form fields always carry text, so both spellings are tried.
    """
    if step is None or not isinstance(mapping, MutableMapping):
        return MISSING
    for candidate in _mapping_key_candidates(step):
        if candidate in mapping:
            return candidate
    return MISSING


def _child(node: Any, step: Step) -> Any:
    if isinstance(node, MutableMapping):
        key = find_mapping_key(node, step)
        return MISSING if key is MISSING else node[key]
    if isinstance(node, list):
        index = _sequence_index(step)
        if index is None or index >= len(node):
            return MISSING
        return node[index]
    return MISSING


def _write(node: Any, step: Step, value: Any) -> bool:
    if isinstance(node, MutableMapping):
        key = find_mapping_key(node, step)
        if key is MISSING:
            key = step.name if isinstance(step, MappingKey) else str(step.index)
        node[key] = value
        return True
    if isinstance(node, list):
        index = _sequence_index(step)
        if index is None:
            return False
        if index < len(node):
            node[index] = value
        else:
            node.extend([None] * (index - len(node)))
            node.append(value)
        return True
    return False


def _mapping_key_candidates(step: RawStep) -> tuple[Any, ...]:
    if isinstance(step, SequenceIndex):
        return (step.index, str(step.index))
    if isinstance(step, int) and not isinstance(step, bool):
        return (step, str(step))
    name = step.name if isinstance(step, MappingKey) else str(step)
    if _DECIMAL_PATTERN.fullmatch(name):
        return (name, int(name))
    return (name,)


def _sequence_index(step: Step | None) -> int | None:
    if isinstance(step, SequenceIndex):
        return step.index
    if isinstance(step, MappingKey) and _DECIMAL_PATTERN.fullmatch(step.name):
        return int(step.name)
    return None


def _is_container(node: Any) -> bool:
    return isinstance(node, (MutableMapping, list))


def _new_container(next_step: Step) -> dict[str, Any] | list[Any]:
    return [] if isinstance(next_step, SequenceIndex) else {}
