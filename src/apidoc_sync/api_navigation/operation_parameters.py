"""Reference-aware listing of operation parameters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from apidoc_sync.document_mutation import PathLike
from apidoc_sync.path_addressing import coerce_path, get_at
from apidoc_sync.reference_resolution import ResolutionPass

from .navigation_models import ParameterView


def list_operation_parameters(
    document: Any, operation_path: PathLike, location: str | None = None
) -> tuple[ParameterView, ...]:
    """Return the operation's parameters with their edit and removal paths.

    ``location`` filters on the parameter's ``in`` value as seen through any
    ``$ref``; entries that cannot be resolved are then skipped. Without a
    filter, unresolved entries are listed so they can be shown as invalid.
    """
    resolved_operation_path = coerce_path(operation_path)
    if resolved_operation_path is None:
        return ()
    parameters_path = resolved_operation_path.child("parameters")
    parameters = get_at(document, parameters_path)
    if not isinstance(parameters, list):
        return ()

    views: list[ParameterView] = []
    for index, entry in enumerate(parameters):
        if entry is None:
            continue
        inline_path = parameters_path.child(index)
        resolution, _ = ResolutionPass(document).follow(entry, inline_path)
        if location is not None and not _is_located(resolution.node, location):
            continue
        views.append(ParameterView(index=index, resolution=resolution, removal_path=inline_path))
    return tuple(views)


def _is_located(parameter: Any, location: str) -> bool:
    return isinstance(parameter, Mapping) and parameter.get("in") == location
