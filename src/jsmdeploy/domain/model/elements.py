"""Elements addressed by deploy changes: types, fields and instances."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from jsmdeploy.constants import JIRA

if TYPE_CHECKING:
    from collections.abc import Mapping


class IdType(StrEnum):
    TYPE = "type"
    FIELD = "field"
    INSTANCE = "instance"


class PrimitiveType(StrEnum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    UNKNOWN = "unknown"


@dataclass(slots=True, frozen=True)
class ElemID:
    """Stable identity of an element, e.g. ``jira.Queue.instance.support``."""

    adapter: str
    type_name: str
    id_type: IdType = IdType.TYPE
    name: str | None = None

    def create_nested_id(self, id_type: IdType, name: str) -> ElemID:
        return ElemID(self.adapter, self.type_name, id_type, name)

    def get_full_name(self) -> str:
        if self.id_type is IdType.TYPE:
            return f"{self.adapter}.{self.type_name}"
        return f"{self.adapter}.{self.type_name}.{self.id_type}.{self.name}"

    def __str__(self) -> str:
        return self.get_full_name()


@dataclass(slots=True, frozen=True)
class Field:
    parent_id: ElemID
    name: str
    field_type: PrimitiveType = PrimitiveType.UNKNOWN

    @property
    def elem_id(self) -> ElemID:
        return self.parent_id.create_nested_id(IdType.FIELD, self.name)


@dataclass(slots=True)
class ObjectType:
    elem_id: ElemID
    fields: dict[str, Field] = field(default_factory=dict)

    @classmethod
    def named(
        cls,
        type_name: str,
        *,
        adapter: str = JIRA,
        field_types: Mapping[str, PrimitiveType] | None = None,
    ) -> ObjectType:
        elem_id = ElemID(adapter, type_name)
        fields = {
            name: Field(parent_id=elem_id, name=name, field_type=field_type)
            for name, field_type in (field_types or {}).items()
        }
        return cls(elem_id=elem_id, fields=fields)

    @property
    def name(self) -> str:
        return self.elem_id.type_name


class InstanceElement:
    """A named value of a declared type.

    The elem id is fixed when the instance is created, so re-typing an
    instance for deployment never changes which element it refers to.
    """

    __slots__ = ("elem_id", "type", "value")

    def __init__(
        self,
        name: str,
        type: ObjectType,  # noqa: A002
        value: dict[str, object] | None = None,
        *,
        elem_id: ElemID | None = None,
    ) -> None:
        self.type = type
        self.value: dict[str, object] = value if value is not None else {}
        self.elem_id = elem_id or type.elem_id.create_nested_id(IdType.INSTANCE, name)

    @property
    def name(self) -> str:
        return self.elem_id.name or ""

    def retyped(self, new_type: ObjectType, value: dict[str, object]) -> InstanceElement:
        """Return a new instance of ``new_type`` that keeps this instance's identity."""

        return InstanceElement(self.name, new_type, value, elem_id=self.elem_id)

    def __repr__(self) -> str:
        return f"InstanceElement({self.elem_id.get_full_name()!r}, type={self.type.name!r})"


type Element = ObjectType | Field | InstanceElement
