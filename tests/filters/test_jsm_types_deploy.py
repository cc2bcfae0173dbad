from __future__ import annotations

import asyncio

import pytest

from jsmdeploy.config import ApiDefinitions, ConfigurationIntegrityError, JsmConfig
from jsmdeploy.domain.deployment import default_service_id_setter, queue_service_id_setter
from jsmdeploy.domain.model import (
    Change,
    FilterResult,
    InstanceElement,
    ModificationChange,
    get_change_data,
)
from jsmdeploy.filters import SUPPORTED_TYPES, JsmTypesDeployFilter, resolve_dispatch_params
from tests.helpers.changes import (
    FakeDeployEngine,
    FakeWorkspaceResolver,
    add_change,
    field_change,
    modify_change,
    remove_change,
)


def _deploy(deploy_filter: JsmTypesDeployFilter, changes: list[Change]) -> FilterResult:
    return asyncio.run(deploy_filter.deploy(changes))


def _instance(change: Change) -> InstanceElement:
    data = get_change_data(change)
    assert isinstance(data, InstanceElement)
    return data


def _make_filter(
    config: JsmConfig,
    engine: FakeDeployEngine,
    resolver: FakeWorkspaceResolver,
) -> JsmTypesDeployFilter:
    return JsmTypesDeployFilter(config=config, engine=engine, resolve_workspace_id=resolver)


def test_supported_types_cover_jsm_and_assets() -> None:
    assert {"Queue", "RequestType", "ObjectSchema", "ObjectSchemaStatus", "ObjectType"} <= (
        SUPPORTED_TYPES
    )
    assert "Project" not in SUPPORTED_TYPES


@pytest.mark.parametrize(
    "config",
    [
        JsmConfig(enable_jsm=False, api_definitions=ApiDefinitions()),
        JsmConfig(enable_jsm=True, api_definitions=None),
    ],
)
def test_disabled_filter_returns_every_change_untouched(
    config: JsmConfig,
    fake_engine: FakeDeployEngine,
    fake_resolver: FakeWorkspaceResolver,
) -> None:
    changes: list[Change] = [add_change("Queue", "q", {"name": "Support"}), add_change("Project")]
    deploy_filter = _make_filter(config, fake_engine, fake_resolver)

    result = _deploy(deploy_filter, changes)

    assert result.deploy_result.applied_changes == []
    assert result.deploy_result.errors == []
    assert result.leftover_changes is changes
    assert _instance(changes[0]).type.name == "Queue"
    assert _instance(changes[0]).value == {"name": "Support"}
    assert fake_engine.calls == []
    assert fake_resolver.calls == 0


def test_applied_errors_and_leftovers_partition_the_batch(
    jsm_config: JsmConfig,
    fake_resolver: FakeWorkspaceResolver,
) -> None:
    engine = FakeDeployEngine(failing_names=frozenset({"broken"}), response={"id": 1})
    changes: list[Change] = [
        add_change("Queue", "ok"),
        add_change("Project", "p"),
        remove_change("RequestType", "broken"),
        field_change("Queue", "name"),
        modify_change("ObjectType", "o", before={"name": "a"}, after={"name": "b"}),
    ]

    result = _deploy(_make_filter(jsm_config, engine, fake_resolver), changes)

    applied = [_instance(c).elem_id for c in result.deploy_result.applied_changes]
    errored = [error.elem_id for error in result.deploy_result.errors]
    leftover = [get_change_data(c).elem_id for c in result.leftover_changes]
    everything = applied + errored + leftover
    assert len(everything) == len(changes)
    assert set(everything) == {get_change_data(c).elem_id for c in changes}
    assert errored == [_instance(changes[2]).elem_id]
    assert set(applied).isdisjoint(errored)


def test_leftovers_keep_order_and_never_reach_engine(
    jsm_config: JsmConfig,
    fake_engine: FakeDeployEngine,
    fake_resolver: FakeWorkspaceResolver,
) -> None:
    project = add_change("Project", "p")
    board = add_change("Board", "b")
    queue_type = field_change("Queue", "jql")
    changes: list[Change] = [project, add_change("Queue", "q"), board, queue_type]

    result = _deploy(_make_filter(jsm_config, fake_engine, fake_resolver), changes)

    assert list(result.leftover_changes) == [project, board, queue_type]
    deployed = {id(call.change) for call in fake_engine.calls}
    assert deployed.isdisjoint({id(project), id(board), id(queue_type)})
    assert _instance(project).type.name == "Project"


def test_in_scope_changes_are_retyped_before_dispatch(
    jsm_config: JsmConfig,
    fake_engine: FakeDeployEngine,
    fake_resolver: FakeWorkspaceResolver,
) -> None:
    change = modify_change(
        "ObjectSchemaStatus",
        "open",
        before={"id": "1", "category": "1"},
        after={"id": "1", "category": "2"},
    )

    _deploy(_make_filter(jsm_config, fake_engine, fake_resolver), [change])

    (call,) = fake_engine.calls
    assert isinstance(call.change, ModificationChange)
    before, after = call.change.before, call.change.after
    assert isinstance(before, InstanceElement)
    assert isinstance(after, InstanceElement)
    assert before.type.name == after.type.name == "StatusType"
    assert after.value["category"] == 2
    assert after.elem_id == _instance(change).elem_id
    assert _instance(change).value["category"] == "2"


def test_each_change_gets_its_own_fields_to_ignore(
    jsm_config: JsmConfig,
    api_definitions: ApiDefinitions,
    fake_engine: FakeDeployEngine,
    fake_resolver: FakeWorkspaceResolver,
) -> None:
    changes: list[Change] = [
        add_change("Queue", "q"),
        add_change("ObjectType", "o"),
        remove_change("Queue", "old"),
    ]

    _deploy(_make_filter(jsm_config, fake_engine, fake_resolver), changes)

    ignored = {_instance(call.change).name: call.fields_to_ignore for call in fake_engine.calls}
    queue_requests = api_definitions.types["Queue"].deploy_requests
    object_type_requests = api_definitions.types["ObjectType"].deploy_requests
    assert queue_requests is not None
    assert object_type_requests is not None
    assert ignored["q"] == queue_requests["add"].fields_to_ignore
    assert ignored["o"] == object_type_requests["add"].fields_to_ignore
    assert ignored["old"] == queue_requests["remove"].fields_to_ignore
    assert ignored["q"] != ignored["o"]


def test_missing_deploy_request_means_nothing_ignored(
    fake_engine: FakeDeployEngine,
    fake_resolver: FakeWorkspaceResolver,
) -> None:
    config = JsmConfig(
        enable_jsm=True,
        api_definitions=ApiDefinitions.model_validate({"types": {"Queue": {}}}),
    )

    _deploy(_make_filter(config, fake_engine, fake_resolver), [add_change("Queue")])

    (call,) = fake_engine.calls
    assert call.fields_to_ignore == ()


def test_queue_identifier_is_reconciled_as_string(
    jsm_config: JsmConfig,
    fake_engine: FakeDeployEngine,
    fake_resolver: FakeWorkspaceResolver,
) -> None:
    changes: list[Change] = [add_change("Queue", "q"), add_change("RequestType", "r")]

    result = _deploy(_make_filter(jsm_config, fake_engine, fake_resolver), changes)

    by_name = {_instance(c).name: _instance(c) for c in result.deploy_result.applied_changes}
    assert by_name["q"].value["id"] == "42"
    assert by_name["r"].value["id"] == 42
    setters = {_instance(call.change).name: call.service_id_setter for call in fake_engine.calls}
    assert setters == {"q": queue_service_id_setter, "r": default_service_id_setter}


def test_workspace_id_is_passed_as_url_variable(
    jsm_config: JsmConfig,
    fake_engine: FakeDeployEngine,
) -> None:
    resolver = FakeWorkspaceResolver(workspace_id="ws-77")

    _deploy(_make_filter(jsm_config, fake_engine, resolver), [add_change("ObjectSchema")])

    assert resolver.calls == 1
    assert fake_engine.calls[0].additional_url_vars == {"workspaceId": "ws-77"}


def test_missing_workspace_id_is_not_fatal(
    jsm_config: JsmConfig,
    fake_engine: FakeDeployEngine,
) -> None:
    resolver = FakeWorkspaceResolver(workspace_id=None)

    result = _deploy(_make_filter(jsm_config, fake_engine, resolver), [add_change("Queue")])

    assert len(result.deploy_result.applied_changes) == 1
    assert fake_engine.calls[0].additional_url_vars is None


def test_supported_type_without_definition_fails_hard(
    fake_engine: FakeDeployEngine,
    fake_resolver: FakeWorkspaceResolver,
) -> None:
    config = JsmConfig(
        enable_jsm=True,
        api_definitions=ApiDefinitions.model_validate({"types": {"Queue": {}}}),
    )
    changes: list[Change] = [add_change("Queue"), add_change("Calendar")]

    with pytest.raises(ConfigurationIntegrityError, match="Calendar"):
        _deploy(_make_filter(config, fake_engine, fake_resolver), changes)

    assert fake_engine.calls == []


def test_resolve_dispatch_params_for_unconfigured_action(api_definitions: ApiDefinitions) -> None:
    params = resolve_dispatch_params(add_change("CustomerPermissions"), api_definitions)

    assert params.fields_to_ignore == ()
    assert params.service_id_setter is default_service_id_setter


def test_filter_name(jsm_config: JsmConfig, fake_engine: FakeDeployEngine) -> None:
    deploy_filter = _make_filter(jsm_config, fake_engine, FakeWorkspaceResolver())

    assert deploy_filter.name == "jsmDeployFilter"
