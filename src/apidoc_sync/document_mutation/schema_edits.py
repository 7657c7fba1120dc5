"""Schema-level edits composed from the basic mutation operations."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from apidoc_sync.path_addressing import DocumentPath, coerce_path, get_at

from .mutation_operations import PathLike, add_item, update

ENUM_CHOICE = "enum"
_ENUM_BASE_TYPES = ("string", "number", "integer", "boolean")


class PropertyKind(str, Enum):
    """Kinds of property the schema editor can add."""

    PRIMITIVE = "primitive"
    OBJECT = "object"


@dataclass(frozen=True)
class TypeChoice:
    """One entry of the schema type selector; ``value`` is ``type[:format]``."""

    label: str
    value: str


TYPE_CHOICES: tuple[TypeChoice, ...] = (
    TypeChoice("string", "string"),
    TypeChoice("integer (int32)", "integer:int32"),
    TypeChoice("integer (int64)", "integer:int64"),
    TypeChoice("float", "number:float"),
    TypeChoice("double", "number:double"),
    TypeChoice("boolean", "boolean"),
    TypeChoice("date", "string:date"),
    TypeChoice("date-time", "string:date-time"),
    TypeChoice("enum", ENUM_CHOICE),
    TypeChoice("array", "array"),
    TypeChoice("object", "object"),
)

_PROPERTY_TEMPLATES: dict[PropertyKind, tuple[str, dict[str, Any]]] = {
    PropertyKind.PRIMITIVE: ("newParameter", {"type": "string", "description": "A new parameter."}),
    PropertyKind.OBJECT: ("newObject", {"type": "object", "properties": {}}),
}


def unique_key(existing: Iterable[str], base: str) -> str:
    """Return ``base`` or the first free ``base1``, ``base2``, ... name."""
    taken = set(existing)
    candidate = base
    suffix = 1
    while candidate in taken:
        candidate = f"{base}{suffix}"
        suffix += 1
    return candidate


def add_named_entry(
    document: Any, mapping_path: PathLike, base: str, template: Any
) -> tuple[Any, str]:
    """Add ``template`` under a fresh ``base``-derived key of the mapping at ``mapping_path``.

    A missing location is created as a mapping holding just the new entry.
    Returns the new document and the key used.
    """
    resolved = coerce_path(mapping_path)
    if resolved is None:
        return document, base
    current = get_at(document, resolved)
    if isinstance(current, Mapping):
        key = unique_key((str(name) for name in current), base)
        return add_item(document, resolved, {key: template}), key
    return update(document, resolved.child(base), template), base


def add_schema_property(
    document: Any, schema_path: PathLike, kind: PropertyKind
) -> tuple[Any, str]:
    """Add a placeholder property under a fresh key; return the new document and the key."""
    base, template = _PROPERTY_TEMPLATES[kind]
    properties_path = _child_path(schema_path, "properties")
    if properties_path is None:
        return document, base
    return add_named_entry(document, properties_path, base, template)


def current_type_choice(schema: Mapping[str, Any]) -> str:
    """Return the selector value describing ``schema``'s current type."""
    type_name = schema.get("type") or "object"
    if isinstance(schema.get("enum"), list) and type_name != "boolean":
        return ENUM_CHOICE
    format_name = schema.get("format")
    if format_name:
        return f"{type_name}:{format_name}"
    return str(type_name)


def change_schema_type(document: Any, schema_path: PathLike, choice: str) -> Any:
    """Switch the schema at ``schema_path`` to a selector choice, reshaping dependent keys."""
    schema = get_at(document, schema_path)
    if not isinstance(schema, Mapping) or choice not in {item.value for item in TYPE_CHOICES}:
        return document
    reshaped = dict(schema)

    if choice == ENUM_CHOICE:
        if reshaped.get("type") not in _ENUM_BASE_TYPES:
            reshaped["type"] = "string"
        values = reshaped.get("enum")
        values = list(values) if isinstance(values, list) else []
        if reshaped["type"] == "boolean" and not values:
            values = [True, False]
        reshaped["enum"] = values
        return update(document, schema_path, reshaped)

    reshaped.pop("enum", None)
    type_name, _, format_name = choice.partition(":")
    reshaped["type"] = type_name
    if format_name:
        reshaped["format"] = format_name
    else:
        reshaped.pop("format", None)

    if type_name == "object":
        reshaped.pop("items", None)
        if reshaped.get("properties") is None:
            reshaped["properties"] = {}
    elif type_name == "array":
        reshaped.pop("properties", None)
        if reshaped.get("items") is None:
            reshaped["items"] = {"type": "string"}
    else:
        reshaped.pop("items", None)
        reshaped.pop("properties", None)
    return update(document, schema_path, reshaped)


def set_nullable(document: Any, schema_path: PathLike, nullable: bool) -> Any:
    schema = get_at(document, schema_path)
    if not isinstance(schema, Mapping):
        return document
    reshaped = dict(schema)
    if nullable:
        reshaped["nullable"] = True
    else:
        reshaped.pop("nullable", None)
    return update(document, schema_path, reshaped)


def add_enum_value(document: Any, schema_path: PathLike, value: Any) -> Any:
    """Append ``value`` to the schema's enum unless it is blank or already listed."""
    if isinstance(value, str) and not value.strip():
        return document
    enum_path = _child_path(schema_path, "enum")
    if enum_path is None:
        return document
    current = _enum_values(document, enum_path)
    if value in current:
        return document
    return update(document, enum_path, [*current, value])


def remove_enum_value(document: Any, schema_path: PathLike, value: Any) -> Any:
    enum_path = _child_path(schema_path, "enum")
    if enum_path is None:
        return document
    remaining = [item for item in _enum_values(document, enum_path) if item != value]
    return update(document, enum_path, remaining)


def _enum_values(document: Any, enum_path: DocumentPath) -> list[Any]:
    values = get_at(document, enum_path)
    return list(values) if isinstance(values, list) else []


def _child_path(path: PathLike, key: str) -> DocumentPath | None:
    resolved = coerce_path(path)
    return None if resolved is None else resolved.child(key)
