from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from jsmdeploy.adapters.plan import PlanError, load_plan
from jsmdeploy.domain.model import (
    AdditionChange,
    InstanceElement,
    ModificationChange,
    RemovalChange,
)

if TYPE_CHECKING:
    from pathlib import Path


def _write(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "plan.json"
    path.write_text(json.dumps(payload))
    return path


def test_load_plan_builds_changes_in_order(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        {
            "changes": [
                {"action": "add", "typeName": "Queue", "name": "q", "after": {"name": "Q"}},
                {
                    "action": "modify",
                    "typeName": "Calendar",
                    "name": "c",
                    "before": {"name": "a"},
                    "after": {"name": "b"},
                },
                {"action": "remove", "typeName": "Project", "name": "p", "before": {"id": 1}},
            ]
        },
    )

    addition, modification, removal = load_plan(path)

    assert isinstance(addition, AdditionChange)
    assert isinstance(addition.after, InstanceElement)
    assert addition.after.elem_id.get_full_name() == "jira.Queue.instance.q"
    assert addition.after.value == {"name": "Q"}
    assert isinstance(modification, ModificationChange)
    assert isinstance(modification.before, InstanceElement)
    assert isinstance(modification.after, InstanceElement)
    assert modification.before is not modification.after
    assert modification.before.elem_id == modification.after.elem_id
    assert isinstance(removal, RemovalChange)


@pytest.mark.parametrize(
    "entry",
    [
        {"action": "add", "typeName": "Queue", "name": "q"},
        {"action": "modify", "typeName": "Queue", "name": "q", "after": {}},
        {"action": "remove", "typeName": "Queue", "name": "q", "after": {}},
        {"action": "rename", "typeName": "Queue", "name": "q", "after": {}},
    ],
)
def test_invalid_entries_are_rejected(tmp_path: Path, entry: dict[str, object]) -> None:
    path = _write(tmp_path, {"changes": [entry]})

    with pytest.raises(PlanError, match="Invalid plan"):
        load_plan(path)


def test_missing_plan_file(tmp_path: Path) -> None:
    with pytest.raises(PlanError, match="Cannot read plan"):
        load_plan(tmp_path / "nope.json")
