"""API-level edits: operations, responses, paths, servers and security schemes.

New entries get deterministic placeholder keys (``newVar``, ``newVar1``, ...)
so repeated edits stay reproducible.
"""

from __future__ import annotations

import copy
import json
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any

from apidoc_sync.path_addressing import coerce_path, get_at

from .mutation_operations import PathLike, add_item, remove_item, rename_key, update
from .schema_edits import add_named_entry

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")
JSON_MEDIA_TYPE = "application/json"

_STATUS_CODE = re.compile(r"^\d{3}$")
_DEFAULT_EXAMPLE_KEY = "default_example"


class ResponseDraftError(ValueError):
    """The drafted response cannot be added; the message is meant for the user."""


class SecuritySchemeKind(str, Enum):
    API_KEY = "apiKey"
    HTTP = "http"


_SECURITY_SCHEME_TEMPLATES: dict[SecuritySchemeKind, dict[str, Any]] = {
    SecuritySchemeKind.API_KEY: {
        "type": "apiKey",
        "in": "header",
        "name": "X-API-KEY",
        "description": "API Key authentication",
    },
    SecuritySchemeKind.HTTP: {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
        "description": "HTTP Bearer token",
    },
}

_SERVER_TEMPLATE = {
    "url": "https://{host}/v1",
    "description": "New Server",
    "variables": {"host": {"default": "api.example.com", "description": "Production host"}},
}

_PATH_TEMPLATE = {
    "summary": "A new endpoint",
    "description": "Details about this new endpoint.",
    "get": {
        "summary": "New GET Operation",
        "description": "Retrieve data from this new endpoint.",
        "responses": {"200": {"description": "Successful response"}},
    },
}


def add_parameter(document: Any, operation_path: PathLike, location: str) -> Any:
    """Append a placeholder string parameter located ``in`` ``location``."""
    resolved = coerce_path(operation_path)
    if resolved is None:
        return document
    parameter = {
        "name": f"new{location}Param",
        "in": location,
        "description": f"New {location} parameter",
        "schema": {"type": "string"},
    }
    return add_item(document, resolved.child("parameters"), parameter)


def add_response_example(
    document: Any,
    operation_path: PathLike,
    status_code: str,
    description: str,
    example_text: str,
) -> Any:
    """Add a JSON example for ``status_code``, creating the response when absent.

    An existing response keeps its examples: a lone ``example`` moves into the
    ``examples`` map and the new one is stored under a key derived from
    ``description``. Raises ResponseDraftError when the draft is invalid.
    """
    if not _STATUS_CODE.match(status_code):
        raise ResponseDraftError("Status code must be a 3-digit number.")
    if not description.strip():
        raise ResponseDraftError("Description is required.")
    try:
        example = json.loads(example_text)
    except json.JSONDecodeError as exc:
        raise ResponseDraftError("Example value must be valid JSON.") from exc

    resolved = coerce_path(operation_path)
    if resolved is None:
        return document
    responses_path = resolved.child("responses")
    response_path = responses_path.child(status_code)
    existing = get_at(document, response_path)

    if isinstance(existing, Mapping):
        response = copy.deepcopy(dict(existing))
        content = response.get("content")
        if not isinstance(content, dict):
            content = response["content"] = {}
        media = content.get(JSON_MEDIA_TYPE)
        if not isinstance(media, dict):
            media = content[JSON_MEDIA_TYPE] = {"schema": {"type": "object"}}
        examples = media.get("examples")
        if not isinstance(examples, dict):
            examples = media["examples"] = {}
        if "example" in media:
            examples[_DEFAULT_EXAMPLE_KEY] = {
                "summary": response.get("description") or "Default Example",
                "value": media.pop("example"),
            }
        key = _example_key(description, examples)
        examples[key] = {"summary": description, "value": example}
        return update(document, response_path, response)

    response = {
        "description": description,
        "content": {
            JSON_MEDIA_TYPE: {
                "schema": {"type": "object", "properties": {}},
                "example": example,
            }
        },
    }
    if isinstance(get_at(document, responses_path), Mapping):
        return add_item(document, responses_path, {status_code: response})
    return update(document, response_path, response)


def rename_path(document: Any, old_path: str, new_path: str) -> Any:
    return rename_key(document, ["paths"], old_path, new_path)


def toggle_operation(document: Any, path_name: str, method: str, enable: bool) -> Any:
    """Add a placeholder ``method`` operation to a path item, or remove it."""
    if method not in HTTP_METHODS:
        return document
    operation_path = ["paths", path_name, method]
    if not enable:
        return remove_item(document, operation_path)
    if get_at(document, operation_path):
        return document
    operation = {
        "summary": f"New {method.upper()} operation",
        "responses": {"200": {"description": "Successful operation"}},
    }
    return update(document, operation_path, operation)


def add_server(document: Any) -> Any:
    return add_item(document, ["servers"], _SERVER_TEMPLATE)


def add_server_variable(document: Any, server_index: int) -> tuple[Any, str]:
    return add_named_entry(
        document,
        ["servers", server_index, "variables"],
        "newVar",
        {"default": "value", "description": "New variable"},
    )


def add_path(document: Any) -> tuple[Any, str]:
    return add_named_entry(document, ["paths"], "/new-endpoint", _PATH_TEMPLATE)


def add_security_scheme(document: Any, kind: SecuritySchemeKind) -> tuple[Any, str]:
    """Add a templated security scheme named after ``kind``; return document and name."""
    return add_named_entry(
        document,
        ["components", "securitySchemes"],
        f"{kind.value}Auth",
        _SECURITY_SCHEME_TEMPLATES[kind],
    )


def _example_key(description: str, examples: Mapping[str, Any]) -> str:
    slug = re.sub(r"\s+", "_", description.lower())
    slug = re.sub(r"[^a-z0-9_]", "", slug) or "example"
    key = slug
    suffix = 2
    while key in examples:
        key = f"{slug}_{suffix}"
        suffix += 1
    return key
