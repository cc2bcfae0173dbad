"""Standard deploy engine: one REST call per change, driven by API definitions."""

from __future__ import annotations

import asyncio
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from jsmdeploy.config import ConfigurationError
from jsmdeploy.domain.deployment import DeploymentError, default_service_id_setter
from jsmdeploy.domain.model import (
    AdditionChange,
    ChangeAction,
    DeployError,
    DeployResult,
    InstanceElement,
    ModificationChange,
    get_change_data,
)

if TYPE_CHECKING:
    from jsmdeploy.config import ApiDefinitions, DeployRequest
    from jsmdeploy.domain.deployment import ServiceIdSetter
    from jsmdeploy.domain.model import Change
    from jsmdeploy.domain.ports import DeployChangeFunc

    from .client import JiraClient, ResponseData

log = getLogger(__name__)

_URL_PARAM = re.compile(r"\{([^{}]+)\}")


def replace_url_params(url: str, params: Mapping[str, object]) -> str:
    """Fill ``{name}`` placeholders in ``url`` from ``params``."""

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        value = params.get(name)
        if value is None:
            raise DeploymentError(f"Missing value for url param {name} in {url}")
        return str(value)

    return _URL_PARAM.sub(substitute, url)


def _lookup_path(value: Mapping[str, object], path: str) -> object:
    """Follow a dotted path such as ``parent.0.key`` through mappings and lists."""

    current: object = value
    for part in path.split("."):
        if isinstance(current, Mapping):
            current = current.get(part)
        elif isinstance(current, list) and part.isdigit() and int(part) < len(current):
            current = current[int(part)]
        else:
            return None
    return current


def _without(value: Mapping[str, object], fields: Sequence[str]) -> dict[str, object]:
    return {key: item for key, item in value.items() if key not in fields}


def _full_name(change: Change) -> str:
    return get_change_data(change).elem_id.get_full_name()


def _as_instance(change: Change) -> InstanceElement:
    instance = get_change_data(change)
    if not isinstance(instance, InstanceElement):
        raise DeploymentError(f"{_full_name(change)} is not an instance and cannot be deployed")
    return instance


def _is_unchanged(change: ModificationChange, fields_to_ignore: Sequence[str]) -> bool:
    before, after = change.before, change.after
    if not isinstance(before, InstanceElement) or not isinstance(after, InstanceElement):
        return False
    return _without(before.value, fields_to_ignore) == _without(after.value, fields_to_ignore)


@dataclass(slots=True)
class StandardDeployEngine:
    client: JiraClient
    api_definitions: ApiDefinitions

    async def deploy_changes(
        self,
        changes: Sequence[Change],
        deploy_change_func: DeployChangeFunc,
    ) -> DeployResult:
        """Deploy ``changes`` concurrently and sort outcomes into applied and errors.

        A configuration error cancels the changes still in flight and is
        raised as is.
        """

        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self._deploy_one(change, deploy_change_func))
                    for change in changes
                ]
        except ExceptionGroup as failure:
            raise failure.exceptions[0] from None

        result = DeployResult()
        for task in tasks:
            outcome = task.result()
            if isinstance(outcome, DeployError):
                result.errors.append(outcome)
            else:
                result.applied_changes.append(outcome)
        return result

    async def _deploy_one(
        self,
        change: Change,
        deploy_change_func: DeployChangeFunc,
    ) -> Change | DeployError:
        try:
            await deploy_change_func(change)
        except ConfigurationError:
            raise
        except Exception as exc:  # noqa: BLE001
            message = f"Deployment of {_full_name(change)} failed: {exc}"
            log.error(message)
            return DeployError(elem_id=get_change_data(change).elem_id, message=message)
        return change

    async def deploy_change(
        self,
        change: Change,
        *,
        fields_to_ignore: Sequence[str] = (),
        additional_url_vars: Mapping[str, str] | None = None,
        service_id_setter: ServiceIdSetter | None = None,
    ) -> None:
        instance = _as_instance(change)
        if isinstance(change, ModificationChange) and _is_unchanged(change, fields_to_ignore):
            log.debug("Skipping %s, nothing to deploy", _full_name(change))
            return

        type_name = instance.elem_id.type_name
        type_definition = self.api_definitions.types.get(type_name)
        if type_definition is None:
            raise DeploymentError(f"No type definition for {type_name}")
        endpoint = type_definition.deploy_request_for(change.action)
        if endpoint is None:
            raise DeploymentError(f"No endpoint of type {change.action} for {type_name}")

        response = await self._send(
            change,
            instance,
            endpoint,
            fields_to_ignore=fields_to_ignore,
            additional_url_vars=additional_url_vars or {},
        )
        if isinstance(change, AdditionChange) and isinstance(response, Mapping):
            setter = service_id_setter or default_service_id_setter
            setter(instance, type_definition.transformation.service_id_field, response)

    async def _send(
        self,
        change: Change,
        instance: InstanceElement,
        endpoint: DeployRequest,
        *,
        fields_to_ignore: Sequence[str],
        additional_url_vars: Mapping[str, str],
    ) -> ResponseData:
        values_to_deploy = _without(
            instance.value, [*fields_to_ignore, *endpoint.fields_to_ignore]
        )
        if not values_to_deploy and change.action is not ChangeAction.REMOVE:
            log.debug("Skipping %s, no deployable values", _full_name(change))
            return None
        data = (
            {endpoint.deploy_as_field: values_to_deploy}
            if endpoint.deploy_as_field
            else values_to_deploy
        )

        url_params: dict[str, object] = dict(instance.value)
        url_params.update(
            {
                param: _lookup_path(instance.value, path)
                for param, path in endpoint.url_params_to_fields.items()
            }
        )
        url_params.update(additional_url_vars)
        url = replace_url_params(endpoint.url, url_params)

        try:
            return await self.client.request(
                endpoint.method,
                url,
                data=None if endpoint.omit_request_body else data,
            )
        except httpx.HTTPStatusError as exc:
            if change.action is ChangeAction.REMOVE and exc.response.status_code == 404:
                log.debug("%s was already removed", _full_name(change))
                return None
            raise
