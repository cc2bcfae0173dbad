"""Add / modify / remove changes over elements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, ClassVar

from .elements import InstanceElement

if TYPE_CHECKING:
    from collections.abc import Callable

    from .elements import Element


class ChangeAction(StrEnum):
    ADD = "add"
    MODIFY = "modify"
    REMOVE = "remove"


@dataclass(slots=True, frozen=True, eq=False)
class AdditionChange:
    after: Element
    action: ClassVar[ChangeAction] = ChangeAction.ADD


@dataclass(slots=True, frozen=True, eq=False)
class ModificationChange:
    before: Element
    after: Element
    action: ClassVar[ChangeAction] = ChangeAction.MODIFY


@dataclass(slots=True, frozen=True, eq=False)
class RemovalChange:
    before: Element
    action: ClassVar[ChangeAction] = ChangeAction.REMOVE


type Change = AdditionChange | ModificationChange | RemovalChange


def get_change_data(change: Change) -> Element:
    """Return the element a change targets: ``after`` when present, else ``before``."""

    match change:
        case AdditionChange(after=after) | ModificationChange(after=after):
            return after
        case RemovalChange(before=before):
            return before


def is_instance_change(change: Change) -> bool:
    return isinstance(get_change_data(change), InstanceElement)


def map_change_data(change: Change, func: Callable[[Element], Element]) -> Change:
    """Return a change of the same action with ``func`` applied to every data slot."""

    match change:
        case AdditionChange(after=after):
            return AdditionChange(after=func(after))
        case ModificationChange(before=before, after=after):
            return ModificationChange(before=func(before), after=func(after))
        case RemovalChange(before=before):
            return RemovalChange(before=func(before))
