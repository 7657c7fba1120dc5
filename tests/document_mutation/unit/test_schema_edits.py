"""Schema editing helper tests."""

from __future__ import annotations

import pytest
from apidoc_sync.document_mutation import (
    TYPE_CHOICES,
    PropertyKind,
    add_enum_value,
    add_schema_property,
    change_schema_type,
    current_type_choice,
    remove_enum_value,
    set_nullable,
    unique_key,
)

_SCHEMA_PATH = ["components", "schemas", "Pet"]


def _document() -> dict:
    return {
        "components": {
            "schemas": {
                "Pet": {
                    "type": "object",
                    "properties": {"newParameter": {"type": "string"}},
                }
            }
        }
    }


def _schema(document: dict) -> dict:
    return document["components"]["schemas"]["Pet"]


def test_unique_key_appends_the_first_free_suffix() -> None:
    assert unique_key([], "newObject") == "newObject"
    assert unique_key(["newObject", "newObject1"], "newObject") == "newObject2"


def test_add_schema_property_picks_a_fresh_key() -> None:
    document, key = add_schema_property(_document(), _SCHEMA_PATH, PropertyKind.PRIMITIVE)

    assert key == "newParameter1"
    assert _schema(document)["properties"]["newParameter1"] == {
        "type": "string",
        "description": "A new parameter.",
    }


def test_add_schema_property_creates_the_properties_mapping() -> None:
    document, key = add_schema_property(
        {"components": {"schemas": {"Pet": {"type": "object"}}}},
        _SCHEMA_PATH,
        PropertyKind.OBJECT,
    )

    assert key == "newObject"
    assert _schema(document)["properties"] == {"newObject": {"type": "object", "properties": {}}}


@pytest.mark.parametrize(
    ("schema", "expected"),
    [
        ({"type": "integer", "format": "int64"}, "integer:int64"),
        ({"type": "string", "enum": ["a"]}, "enum"),
        ({"type": "boolean", "enum": [True, False]}, "boolean"),
        ({"properties": {}}, "object"),
        ({"type": "array"}, "array"),
    ],
)
def test_current_type_choice(schema: dict, expected: str) -> None:
    assert current_type_choice(schema) == expected
    assert expected in {choice.value for choice in TYPE_CHOICES}


def test_change_to_scalar_type_drops_structure() -> None:
    document = change_schema_type(_document(), _SCHEMA_PATH, "number:double")

    assert _schema(document) == {"type": "number", "format": "double"}
    assert _schema(change_schema_type(document, _SCHEMA_PATH, "boolean")) == {"type": "boolean"}


def test_change_to_array_adds_default_items() -> None:
    document = change_schema_type(_document(), _SCHEMA_PATH, "array")

    assert _schema(document) == {"type": "array", "items": {"type": "string"}}


def test_change_to_object_keeps_existing_properties() -> None:
    document = change_schema_type(_document(), _SCHEMA_PATH, "object")

    assert _schema(document)["properties"] == {"newParameter": {"type": "string"}}


def test_change_to_enum_seeds_an_empty_list() -> None:
    document = change_schema_type(_document(), _SCHEMA_PATH, "enum")

    assert _schema(document)["type"] == "string"
    assert _schema(document)["enum"] == []


def test_change_to_unknown_choice_is_a_no_op() -> None:
    document = _document()

    assert change_schema_type(document, _SCHEMA_PATH, "decimal") is document


def test_set_nullable_adds_and_removes_flag() -> None:
    nullable = set_nullable(_document(), _SCHEMA_PATH, True)
    restored = set_nullable(nullable, _SCHEMA_PATH, False)

    assert _schema(nullable)["nullable"] is True
    assert "nullable" not in _schema(restored)


def test_enum_values_skip_blanks_and_duplicates() -> None:
    document = add_enum_value(_document(), _SCHEMA_PATH, "cat")
    same = add_enum_value(document, _SCHEMA_PATH, "cat")
    blank = add_enum_value(document, _SCHEMA_PATH, "  ")
    extended = add_enum_value(document, _SCHEMA_PATH, "dog")
    trimmed = remove_enum_value(extended, _SCHEMA_PATH, "cat")

    assert _schema(document)["enum"] == ["cat"]
    assert same is document
    assert blank is document
    assert _schema(extended)["enum"] == ["cat", "dog"]
    assert _schema(trimmed)["enum"] == ["dog"]


def test_malformed_schema_paths_are_no_ops() -> None:
    document = {"schema": {"type": "string", "enum": ["a"]}}

    assert add_schema_property(document, ["schema", -1], PropertyKind.OBJECT) == (
        document,
        "newObject",
    )
    assert add_enum_value(document, ["schema", None], "b") is document
    assert remove_enum_value(document, ["schema", 2.0], "a") is document
    assert change_schema_type(document, ["schema", -1], "integer:int32") is document
    assert set_nullable(document, [None], True) is document
