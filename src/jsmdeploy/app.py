"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from jsmdeploy.adapters.jira import JiraClient, JiraWorkspaceResolver, StandardDeployEngine
from jsmdeploy.adapters.plan import load_plan
from jsmdeploy.config import ApiDefinitions, JiraConfig, JsmConfig
from jsmdeploy.domain.deployment import run_deploy_filters
from jsmdeploy.filters import JsmTypesDeployFilter

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from jsmdeploy.adapters.http_resilience import ResilienceConfig, ResilientClient
    from jsmdeploy.domain.model import Change, FilterResult

    ClientFactory = Callable[[ResilienceConfig], ResilientClient]

log = getLogger(__name__)


def build_jsm_deploy_filter(*, config: JsmConfig, client: JiraClient) -> JsmTypesDeployFilter:
    engine = StandardDeployEngine(
        client=client,
        api_definitions=config.api_definitions or ApiDefinitions(),
    )
    return JsmTypesDeployFilter(
        config=config,
        engine=engine,
        resolve_workspace_id=JiraWorkspaceResolver(client),
    )


async def deploy_jsm_changes(
    changes: Sequence[Change],
    *,
    jsm_config: JsmConfig | None = None,
    jira_config: JiraConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> FilterResult:
    """Deploy ``changes`` to Jira, returning what was applied and what was left."""

    effective_jsm = jsm_config or JsmConfig.from_environment()
    client = JiraClient(config=jira_config or JiraConfig.from_environment())
    if client_factory is not None:
        client.client_factory = client_factory

    log.info(
        "Starting deploy: changes=%s, jsm_enabled=%s",
        len(changes),
        effective_jsm.enable_jsm,
    )
    async with client:
        filters = [build_jsm_deploy_filter(config=effective_jsm, client=client)]
        result = await run_deploy_filters(filters, changes)

    log.info(
        f"Finished deploy: applied={len(result.deploy_result.applied_changes)}, "
        f"errors={len(result.deploy_result.errors)}, leftover={len(result.leftover_changes)}"
    )
    return result


def deploy_plan(
    plan_path: Path,
    *,
    jsm_config: JsmConfig | None = None,
    jira_config: JiraConfig | None = None,
) -> FilterResult:
    """Load ``plan_path`` and deploy its changes."""

    changes = load_plan(plan_path)
    return asyncio.run(
        deploy_jsm_changes(changes, jsm_config=jsm_config, jira_config=jira_config)
    )
