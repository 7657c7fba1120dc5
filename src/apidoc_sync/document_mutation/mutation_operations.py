"""Structural edits on immutable document snapshots.

Every operation deep-copies the incoming snapshot exactly once, edits the
copy and returns it; the incoming snapshot is never written to. When an edit
turns out to be a no-op the incoming snapshot is returned as is.

The operations are deliberately permissive: malformed paths or payloads
degrade to no-ops or partial writes instead of raising, so the editor keeps
working on half-finished documents.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

from apidoc_sync.path_addressing import (
    MISSING,
    DocumentPath,
    RawStep,
    coerce_path,
    delete_at,
    find_mapping_key,
    get_at,
    set_at,
)

REQUIRED_KEY = "required"

PathLike = DocumentPath | Iterable[RawStep]


def update(document: Any, path: PathLike, value: Any) -> Any:
    """Overwrite the value at ``path``, creating intermediate containers as needed."""
    resolved = coerce_path(path)
    if resolved is None:
        return document
    snapshot = copy.deepcopy(document)
    return set_at(snapshot, resolved, copy.deepcopy(value))


def add_item(document: Any, collection_path: PathLike, item: Any) -> Any:
    """Append ``item`` to a sequence or merge a single-entry mapping into a mapping.

    An absent location is created holding just the item (a list payload
    becomes the new list). For a mapping collection only the first entry of
    ``item`` is merged and an existing key of the same name is overwritten.
    """
    resolved = coerce_path(collection_path)
    if resolved is None:
        return document
    current = get_at(document, resolved)
    if current is MISSING:
        created = list(item) if isinstance(item, list) else [item]
        return update(document, resolved, created)
    if isinstance(current, list):
        snapshot = copy.deepcopy(document)
        get_at(snapshot, resolved).append(copy.deepcopy(item))
        return snapshot
    if isinstance(current, MutableMapping):
        if not isinstance(item, Mapping) or not item:
            return document
        key, value = next(iter(item.items()))
        snapshot = copy.deepcopy(document)
        get_at(snapshot, resolved)[key] = copy.deepcopy(value)
        return snapshot
    return document


def remove_item(document: Any, path: PathLike) -> Any:
    """Remove one sequence element or mapping entry.

    Removing a sequence element renumbers the elements after it; paths held
    into that sequence may now address a different element.
    """
    resolved = coerce_path(path)
    if not resolved or get_at(document, resolved) is MISSING:
        return document
    snapshot = copy.deepcopy(document)
    if not delete_at(snapshot, resolved):
        return document
    return snapshot


def rename_key(document: Any, parent_path: PathLike, old_key: str, new_key: str) -> Any:
    """Move the entry ``old_key`` of the mapping at ``parent_path`` to ``new_key``.

    The renamed entry keeps the position of ``old_key``; an existing
    ``new_key`` entry is overwritten.
    """
    if old_key == new_key:
        return document
    resolved = coerce_path(parent_path)
    if resolved is None:
        return document
    existing_key = find_mapping_key(get_at(document, resolved), old_key)
    if existing_key is MISSING:
        return document

    snapshot = copy.deepcopy(document)
    target = get_at(snapshot, resolved)
    overwritten_key = find_mapping_key(target, new_key)
    entries = list(target.items())
    target.clear()
    for key, value in entries:
        if key == existing_key:
            target[new_key] = value
        elif overwritten_key is MISSING or key != overwritten_key:
            target[key] = value
    return snapshot


def toggle_required(
    document: Any, schema_path: PathLike, property_key: str, make_required: bool
) -> Any:
    """Add ``property_key`` to, or drop it from, the schema's required list.

    The required list never holds duplicates and is removed entirely once its
    last member goes, so an absent ``required`` field means "no constraints".
    """
    resolved = coerce_path(schema_path)
    if resolved is None or not isinstance(get_at(document, resolved), MutableMapping):
        return document

    snapshot = copy.deepcopy(document)
    target = get_at(snapshot, resolved)
    current = target.get(REQUIRED_KEY)
    required: list[Any] = []
    for name in current if isinstance(current, list) else ():
        if name not in required:
            required.append(name)

    if make_required and property_key not in required:
        required.append(property_key)
    elif not make_required:
        required = [name for name in required if name != property_key]

    if required:
        target[REQUIRED_KEY] = required
    else:
        target.pop(REQUIRED_KEY, None)
    return snapshot
