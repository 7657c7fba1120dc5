"""Document mutation exports."""

from .api_edits import (
    HTTP_METHODS,
    ResponseDraftError,
    SecuritySchemeKind,
    add_parameter,
    add_path,
    add_response_example,
    add_security_scheme,
    add_server,
    add_server_variable,
    rename_path,
    toggle_operation,
)
from .mutation_operations import (
    REQUIRED_KEY,
    PathLike,
    add_item,
    remove_item,
    rename_key,
    toggle_required,
    update,
)
from .schema_edits import (
    TYPE_CHOICES,
    PropertyKind,
    TypeChoice,
    add_enum_value,
    add_named_entry,
    add_schema_property,
    change_schema_type,
    current_type_choice,
    remove_enum_value,
    set_nullable,
    unique_key,
)

__all__ = [
    "HTTP_METHODS",
    "REQUIRED_KEY",
    "TYPE_CHOICES",
    "PathLike",
    "PropertyKind",
    "ResponseDraftError",
    "SecuritySchemeKind",
    "TypeChoice",
    "add_enum_value",
    "add_item",
    "add_named_entry",
    "add_parameter",
    "add_path",
    "add_response_example",
    "add_schema_property",
    "add_security_scheme",
    "add_server",
    "add_server_variable",
    "change_schema_type",
    "current_type_choice",
    "remove_enum_value",
    "remove_item",
    "rename_key",
    "rename_path",
    "set_nullable",
    "toggle_operation",
    "toggle_required",
    "unique_key",
    "update",
]
