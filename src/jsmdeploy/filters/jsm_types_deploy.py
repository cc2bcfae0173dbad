"""Deploy filter for Jira Service Management and Assets types.

The filter claims instance changes of JSM and Assets types, re-types them for
the deploy engine, deploys them and hands every other change back as leftover
for the filters that follow.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING

from jsmdeploy.config import JSM_DUCKTYPE_SUPPORTED_TYPES, ConfigurationIntegrityError
from jsmdeploy.constants import (
    OBJECT_SCHEMA_STATUS_TYPE,
    OBJECT_SCHEMA_TYPE,
    OBJECT_TYPE_TYPE,
    WORKSPACE_ID_URL_VAR,
)
from jsmdeploy.domain.deployment import (
    partition_changes,
    replace_element_type_for_deploy,
    select_service_id_setter,
)
from jsmdeploy.domain.model import (
    DeployResult,
    FilterResult,
    get_change_data,
    map_change_data,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from jsmdeploy.config import ApiDefinitions, JsmConfig
    from jsmdeploy.domain.deployment import ServiceIdSetter
    from jsmdeploy.domain.model import Change
    from jsmdeploy.domain.ports import DeployEngine, WorkspaceIdResolver

log = getLogger(__name__)

ASSETS_SUPPORTED_TYPES = frozenset(
    {OBJECT_SCHEMA_TYPE, OBJECT_SCHEMA_STATUS_TYPE, OBJECT_TYPE_TYPE}
)
SUPPORTED_TYPES = frozenset(JSM_DUCKTYPE_SUPPORTED_TYPES) | ASSETS_SUPPORTED_TYPES


@dataclass(slots=True, frozen=True)
class DispatchParams:
    fields_to_ignore: tuple[str, ...]
    service_id_setter: ServiceIdSetter


def resolve_dispatch_params(change: Change, api_definitions: ApiDefinitions) -> DispatchParams:
    """Look up what the engine needs to deploy ``change``.

    Raises ``ConfigurationIntegrityError`` when the change's type has no
    definition: a supported type must always be configured.
    """

    type_name = get_change_data(change).elem_id.type_name
    type_definition = api_definitions.types.get(type_name)
    if type_definition is None:
        raise ConfigurationIntegrityError(
            f"Supported type {type_name} has no API definition"
        )
    deploy_request = type_definition.deploy_request_for(change.action)
    fields_to_ignore = deploy_request.fields_to_ignore if deploy_request is not None else ()
    return DispatchParams(
        fields_to_ignore=fields_to_ignore,
        service_id_setter=select_service_id_setter(type_name),
    )


async def dispatch_changes(
    changes: Sequence[Change],
    *,
    engine: DeployEngine,
    api_definitions: ApiDefinitions,
    additional_url_vars: Mapping[str, str] | None = None,
) -> DeployResult:
    """Deploy ``changes`` through ``engine`` with per-type settings.

    Every change's settings are resolved before the first call goes out, so a
    configuration gap fails the whole batch instead of one change.
    """

    params_by_change = {
        change: resolve_dispatch_params(change, api_definitions) for change in changes
    }

    async def deploy_change(change: Change) -> None:
        params = params_by_change[change]
        await engine.deploy_change(
            change,
            fields_to_ignore=params.fields_to_ignore,
            additional_url_vars=additional_url_vars,
            service_id_setter=params.service_id_setter,
        )

    return await engine.deploy_changes(changes, deploy_change)


@dataclass(slots=True)
class JsmTypesDeployFilter:
    config: JsmConfig
    engine: DeployEngine
    resolve_workspace_id: WorkspaceIdResolver
    supported_types: frozenset[str] = SUPPORTED_TYPES
    name: str = "jsmDeployFilter"

    async def deploy(self, changes: Sequence[Change]) -> FilterResult:
        api_definitions = self.config.api_definitions
        if not self.config.enable_jsm or api_definitions is None:
            return FilterResult(deploy_result=DeployResult(), leftover_changes=changes)

        jsm_changes, leftover_changes = partition_changes(changes, self.supported_types)
        log.info(
            "Deploying %s JSM changes, %s left for other filters",
            len(jsm_changes),
            len(leftover_changes),
        )

        workspace_id = await self.resolve_workspace_id()
        additional_url_vars = {WORKSPACE_ID_URL_VAR: workspace_id} if workspace_id else None

        retype = partial(replace_element_type_for_deploy, config=api_definitions)
        type_fixed_changes = [map_change_data(change, retype) for change in jsm_changes]

        deploy_result = await dispatch_changes(
            type_fixed_changes,
            engine=self.engine,
            api_definitions=api_definitions,
            additional_url_vars=additional_url_vars,
        )
        return FilterResult(deploy_result=deploy_result, leftover_changes=leftover_changes)
