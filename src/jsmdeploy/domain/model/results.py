"""Outcome of deploying a batch of changes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .changes import Change
    from .elements import ElemID


class Severity(StrEnum):
    ERROR = "Error"
    WARNING = "Warning"
    INFO = "Info"


@dataclass(slots=True, frozen=True)
class DeployError:
    """A failed change, reported against the identity of the element it targeted."""

    elem_id: ElemID
    message: str
    severity: Severity = Severity.ERROR


@dataclass(slots=True)
class DeployResult:
    applied_changes: list[Change] = field(default_factory=list)
    errors: list[DeployError] = field(default_factory=list)

    def merge(self, other: DeployResult) -> DeployResult:
        return DeployResult(
            applied_changes=[*self.applied_changes, *other.applied_changes],
            errors=[*self.errors, *other.errors],
        )


@dataclass(slots=True)
class FilterResult:
    """What a deploy filter handled, and the changes it leaves to later filters."""

    deploy_result: DeployResult
    leftover_changes: Sequence[Change]
