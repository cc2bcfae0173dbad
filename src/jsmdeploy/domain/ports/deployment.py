"""Ports consumed by deploy filters."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from jsmdeploy.domain.deployment.service_id import ServiceIdSetter
    from jsmdeploy.domain.model import Change, DeployResult, FilterResult

DeployChangeFunc = Callable[["Change"], Awaitable[None]]


@runtime_checkable
class DeployEngine(Protocol):
    """Issues the service calls for changes and aggregates their outcomes."""

    async def deploy_changes(
        self,
        changes: Sequence[Change],
        deploy_change_func: DeployChangeFunc,
    ) -> DeployResult:
        """Run ``deploy_change_func`` for every change; one outcome per change."""
        ...

    async def deploy_change(
        self,
        change: Change,
        *,
        fields_to_ignore: Sequence[str] = (),
        additional_url_vars: Mapping[str, str] | None = None,
        service_id_setter: ServiceIdSetter | None = None,
    ) -> None: ...


@runtime_checkable
class WorkspaceIdResolver(Protocol):
    """Best-effort lookup of the Assets workspace id; ``None`` when unavailable."""

    async def __call__(self) -> str | None: ...


class DeployFilter(Protocol):
    name: str

    async def deploy(self, changes: Sequence[Change]) -> FilterResult: ...


__all__ = ["DeployChangeFunc", "DeployEngine", "DeployFilter", "WorkspaceIdResolver"]
