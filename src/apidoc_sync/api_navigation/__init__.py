"""API navigation exports."""

from .navigation_models import ParameterView, SchemaPropertyView
from .operation_parameters import list_operation_parameters
from .schema_properties import project_schema_properties

__all__ = [
    "ParameterView",
    "SchemaPropertyView",
    "list_operation_parameters",
    "project_schema_properties",
]
