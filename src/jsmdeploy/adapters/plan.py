"""Load deploy plans (JSON lists of instance changes) from disk."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from jsmdeploy.constants import JIRA
from jsmdeploy.domain.model import (
    AdditionChange,
    Change,
    ChangeAction,
    InstanceElement,
    ModificationChange,
    ObjectType,
    RemovalChange,
)


class PlanError(ValueError):
    """Raised when a plan file cannot be read or does not validate."""


class PlanEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    action: ChangeAction
    type_name: str = Field(alias="typeName", min_length=1)
    name: str = Field(min_length=1)
    before: dict[str, object] | None = None
    after: dict[str, object] | None = None

    @model_validator(mode="after")
    def _check_payloads(self) -> Self:
        needs_before = self.action in {ChangeAction.MODIFY, ChangeAction.REMOVE}
        needs_after = self.action in {ChangeAction.ADD, ChangeAction.MODIFY}
        if needs_before and self.before is None:
            raise ValueError(f"{self.action} change {self.name} requires 'before'")
        if needs_after and self.after is None:
            raise ValueError(f"{self.action} change {self.name} requires 'after'")
        return self

    def to_change(self, *, adapter: str = JIRA) -> Change:
        object_type = ObjectType.named(self.type_name, adapter=adapter)

        def instance(value: dict[str, object] | None) -> InstanceElement:
            return InstanceElement(self.name, object_type, dict(value or {}))

        match self.action:
            case ChangeAction.ADD:
                return AdditionChange(after=instance(self.after))
            case ChangeAction.MODIFY:
                return ModificationChange(before=instance(self.before), after=instance(self.after))
            case ChangeAction.REMOVE:
                return RemovalChange(before=instance(self.before))


class PlanFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    changes: list[PlanEntry] = Field(default_factory=list)


def load_plan(path: Path, *, adapter: str = JIRA) -> list[Change]:
    """Read ``path`` and return its changes in file order."""

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PlanError(f"Cannot read plan {path}: {exc}") from exc
    try:
        plan = PlanFile.model_validate_json(text)
    except ValidationError as exc:
        raise PlanError(f"Invalid plan {path}: {exc}") from exc
    return [entry.to_change(adapter=adapter) for entry in plan.changes]
