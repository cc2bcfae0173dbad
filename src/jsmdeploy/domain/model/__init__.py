"""Change and element model shared by the deploy pipeline."""

from __future__ import annotations

from .changes import (
    AdditionChange,
    Change,
    ChangeAction,
    ModificationChange,
    RemovalChange,
    get_change_data,
    is_instance_change,
    map_change_data,
)
from .elements import ElemID, Element, Field, IdType, InstanceElement, ObjectType, PrimitiveType
from .primitives import canonical_number_string, convert_primitive, is_number
from .results import DeployError, DeployResult, FilterResult, Severity

__all__ = [
    "AdditionChange",
    "Change",
    "ChangeAction",
    "DeployError",
    "DeployResult",
    "ElemID",
    "Element",
    "Field",
    "FilterResult",
    "IdType",
    "InstanceElement",
    "ModificationChange",
    "ObjectType",
    "PrimitiveType",
    "RemovalChange",
    "Severity",
    "canonical_number_string",
    "convert_primitive",
    "get_change_data",
    "is_instance_change",
    "is_number",
    "map_change_data",
]
