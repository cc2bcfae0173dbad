"""Split a change batch into the changes a filter handles and the rest."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jsmdeploy.domain.model import get_change_data, is_instance_change

if TYPE_CHECKING:
    from collections.abc import Collection, Sequence

    from jsmdeploy.domain.model import Change


def partition_changes(
    changes: Sequence[Change],
    supported_types: Collection[str],
) -> tuple[list[Change], list[Change]]:
    """Return ``(in_scope, leftover)``, both in input order.

    A change is in scope when it targets an instance whose type name is one of
    ``supported_types``. Type and field changes are always leftovers.
    """

    in_scope: list[Change] = []
    leftover: list[Change] = []
    for change in changes:
        if (
            get_change_data(change).elem_id.type_name in supported_types
            and is_instance_change(change)
        ):
            in_scope.append(change)
        else:
            leftover.append(change)
    return in_scope, leftover
