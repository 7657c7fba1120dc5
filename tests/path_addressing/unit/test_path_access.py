"""Path read/write service tests."""

from __future__ import annotations

import pytest
from apidoc_sync.path_addressing import (
    MISSING,
    DocumentPath,
    MappingKey,
    delete_at,
    find_mapping_key,
    get_at,
    set_at,
)


def _document() -> dict:
    return {
        "info": {"title": "Pets", "summary": None},
        "servers": [{"url": "https://eu.example.com"}, {"url": "https://us.example.com"}],
        "responses": {200: {"description": "OK"}},
    }


def test_get_at_distinguishes_absent_from_null() -> None:
    document = _document()

    assert get_at(document, ["info", "title"]) == "Pets"
    assert get_at(document, ["info", "summary"]) is None
    assert get_at(document, ["info", "version"]) is MISSING
    assert get_at(document, ["info", "title", "deeper"]) is MISSING
    assert get_at(document, ["servers", 5]) is MISSING
    assert get_at(document, []) is document


def test_get_at_coerces_steps_between_keys_and_indices() -> None:
    document = _document()

    assert get_at(document, ["servers", "1", "url"]) == "https://us.example.com"
    assert get_at(document, ["responses", "200", "description"]) == "OK"
    assert get_at(document, ["responses", 200, "description"]) == "OK"
    assert get_at(document, ["servers", "first"]) is MISSING


def test_set_at_creates_intermediate_containers_by_next_step() -> None:
    document: dict = {}

    result = set_at(document, ["paths", "/pets", "get", "parameters", 0, "name"], "limit")

    assert result is document
    assert document == {"paths": {"/pets": {"get": {"parameters": [{"name": "limit"}]}}}}


def test_set_at_pads_sequences_and_replaces_scalars() -> None:
    document = {"tags": ["a"], "info": "scalar"}

    set_at(document, ["tags", 3], "d")
    set_at(document, ["info", "title"], "Pets")

    assert document == {"tags": ["a", None, None, "d"], "info": {"title": "Pets"}}


def test_set_at_empty_path_returns_the_value() -> None:
    assert set_at({"a": 1}, DocumentPath(), {"b": 2}) == {"b": 2}


def test_set_at_writes_through_existing_integer_keys() -> None:
    document = _document()

    set_at(document, ["responses", "200", "description"], "Fine")

    assert document["responses"] == {200: {"description": "Fine"}}


def test_set_at_ignores_named_step_on_a_sequence() -> None:
    document = {"tags": ["a"]}

    set_at(document, ["tags", "name", "x"], 1)

    assert document == {"tags": ["a"]}


def test_delete_at_reports_whether_something_was_removed() -> None:
    document = _document()

    assert delete_at(document, ["servers", 0]) is True
    assert document["servers"] == [{"url": "https://us.example.com"}]
    assert delete_at(document, ["servers", 4]) is False
    assert delete_at(document, ["info", "version"]) is False
    assert delete_at(document, ["responses", "200"]) is True
    assert document["responses"] == {}
    assert delete_at(document, []) is False


def test_find_mapping_key_returns_stored_spelling() -> None:
    assert find_mapping_key({200: "x"}, MappingKey("200")) == 200
    assert find_mapping_key({"200": "x"}, 200) == "200"
    assert find_mapping_key({"a": 1}, "b") is MISSING
    assert find_mapping_key(["a"], "a") is MISSING


@pytest.mark.parametrize(
    "path",
    [["servers", -1, "url"], [None], ["servers", 1.5], "servers"],
)
def test_malformed_paths_address_nothing(path) -> None:
    document = _document()

    assert get_at(document, path) is MISSING
    assert set_at(document, path, "x") is document
    assert delete_at(document, path) is False
    assert document == _document()
