"""Internal reference resolution tests."""

from __future__ import annotations

import logging

import pytest
from apidoc_sync.path_addressing import DocumentPath, SequenceIndex
from apidoc_sync.reference_resolution import (
    ResolutionPass,
    ResolutionStatus,
    is_internal_reference,
    is_reference,
    resolve_reference,
    to_edit_path,
)


def _document() -> dict:
    return {
        "components": {
            "schemas": {
                "Pet": {"type": "object", "properties": {"id": {"type": "integer"}}},
                "Alias": {"$ref": "#/components/schemas/Pet"},
                "Loop": {"$ref": "#/components/schemas/Loop"},
                "Empty": None,
            },
            "parameters": [{"name": "limit", "in": "query"}],
        }
    }


def test_resolves_internal_reference_with_edit_path() -> None:
    document = _document()

    resolution = resolve_reference(document, "#/components/schemas/Pet")

    assert resolution.status is ResolutionStatus.RESOLVED
    assert resolution.is_resolved
    assert resolution.node is document["components"]["schemas"]["Pet"]
    assert resolution.edit_path == DocumentPath.of("components", "schemas", "Pet")


def test_decimal_reference_segments_become_indices() -> None:
    path = to_edit_path("#/components/parameters/0")

    assert path.last == SequenceIndex(0)
    assert resolve_reference(_document(), "#/components/parameters/0").node["name"] == "limit"


@pytest.mark.parametrize(
    "reference",
    ["#/components/schemas/Missing", "#/components/schemas/Empty"],
)
def test_dangling_and_null_targets_are_not_found(reference: str) -> None:
    resolution = resolve_reference(_document(), reference)

    assert resolution.status is ResolutionStatus.NOT_FOUND
    assert resolution.node is None
    assert resolution.edit_path == to_edit_path(reference)


def test_external_reference_is_not_found_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        resolution = resolve_reference(_document(), "other.yaml#/Pet")

    assert resolution.status is ResolutionStatus.NOT_FOUND
    assert "other.yaml#/Pet" in caplog.text
    assert not is_internal_reference("other.yaml#/Pet")
    assert to_edit_path("other.yaml#/Pet") == DocumentPath()


def test_already_visited_reference_is_circular() -> None:
    resolution = resolve_reference(
        _document(), "#/components/schemas/Pet", visited={"#/components/schemas/Pet"}
    )

    assert resolution.status is ResolutionStatus.CIRCULAR
    assert resolution.node is None


def test_resolution_never_modifies_the_document() -> None:
    document = _document()
    before = repr(document)

    ResolutionPass(document).follow(document["components"]["schemas"]["Loop"], ["x"])

    assert repr(document) == before


def test_is_reference_requires_string_ref() -> None:
    assert is_reference({"$ref": "#/a"})
    assert not is_reference({"$ref": 3})
    assert not is_reference("#/a")


def test_follow_walks_reference_chains_to_the_shared_node() -> None:
    document = _document()
    alias = document["components"]["schemas"]["Alias"]

    resolution, below = ResolutionPass(document).follow(alias, ["components", "schemas", "Alias"])

    assert resolution.is_resolved
    assert resolution.reference == "#/components/schemas/Pet"
    assert resolution.edit_path == DocumentPath.of("components", "schemas", "Pet")
    assert below.visited == frozenset({"#/components/schemas/Pet"})


def test_follow_reports_self_reference_as_circular() -> None:
    document = _document()
    loop = document["components"]["schemas"]["Loop"]

    resolution, _ = ResolutionPass(document).follow(loop, ["components", "schemas", "Loop"])

    assert resolution.status is ResolutionStatus.CIRCULAR
    assert resolution.reference == "#/components/schemas/Loop"


def test_follow_keeps_plain_nodes_at_their_own_path() -> None:
    node = {"type": "string"}

    resolution, below = ResolutionPass(_document()).follow(node, ["a", "b"])

    assert resolution.is_resolved
    assert resolution.reference is None
    assert resolution.node is node
    assert resolution.edit_path == DocumentPath.of("a", "b")
    assert below.visited == frozenset()


def test_descend_leaves_the_original_pass_untouched() -> None:
    first = ResolutionPass(_document())

    second = first.descend("#/components/schemas/Pet")

    assert first.visited == frozenset()
    assert second.visited == frozenset({"#/components/schemas/Pet"})
