"""Schema property projection service."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from apidoc_sync.document_mutation import REQUIRED_KEY, PathLike
from apidoc_sync.path_addressing import DocumentPath, coerce_path, get_at
from apidoc_sync.reference_resolution import ResolutionPass

from .navigation_models import SchemaPropertyView


def project_schema_properties(document: Any, schema_path: PathLike) -> list[SchemaPropertyView]:
    """Return the schema's properties depth-first with dotted names.

    ``$ref`` links are followed; a reference loop is reported once as
    ``CIRCULAR`` and not descended into. Array schemas are walked through
    their ``items``; nested array members are named ``parent[].child``.
    """
    root_path = coerce_path(schema_path)
    if root_path is None:
        return []
    resolution_pass = ResolutionPass(document, visited={root_path.to_reference()})
    views: list[SchemaPropertyView] = []
    resolution, resolution_pass = resolution_pass.follow(get_at(document, root_path), root_path)
    if resolution.is_resolved:
        _project_schema(
            resolution.node,
            resolution.edit_path,
            prefix="",
            resolution_pass=resolution_pass,
            views=views,
        )
    return views


def _project_schema(
    node: Any,
    path: DocumentPath,
    *,
    prefix: str,
    resolution_pass: ResolutionPass,
    views: list[SchemaPropertyView],
) -> None:
    if not isinstance(node, Mapping):
        return

    properties = node.get("properties")
    if isinstance(properties, Mapping):
        required = node.get(REQUIRED_KEY)
        required_names = required if isinstance(required, list) else []
        for key, child in properties.items():
            child_name = str(key) if not prefix else f"{prefix}.{key}"
            child_path = path + ["properties", str(key)]
            resolution, child_pass = resolution_pass.follow(child, child_path)
            views.append(
                SchemaPropertyView(
                    name=child_name,
                    edit_path=resolution.edit_path if resolution.is_resolved else child_path,
                    parent_schema_path=path,
                    required=key in required_names,
                    status=resolution.status,
                    reference=resolution.reference,
                ),
            )
            if resolution.is_resolved:
                _project_schema(
                    resolution.node,
                    resolution.edit_path,
                    prefix=child_name,
                    resolution_pass=child_pass,
                    views=views,
                )
        return

    items = node.get("items")
    if items is None:
        return
    items_prefix = f"{prefix}[]" if prefix else ""
    items_path = path.child("items")
    resolution, items_pass = resolution_pass.follow(items, items_path)
    if not resolution.is_resolved:
        views.append(
            SchemaPropertyView(
                name=items_prefix or "[]",
                edit_path=items_path,
                parent_schema_path=path,
                required=False,
                status=resolution.status,
                reference=resolution.reference,
            ),
        )
        return
    _project_schema(
        resolution.node,
        resolution.edit_path,
        prefix=items_prefix,
        resolution_pass=items_pass,
        views=views,
    )
