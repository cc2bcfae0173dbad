"""Run deploy filters in sequence, each seeing what the previous ones left."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from jsmdeploy.domain.model import DeployResult, FilterResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from jsmdeploy.domain.model import Change
    from jsmdeploy.domain.ports import DeployFilter

log = getLogger(__name__)


async def run_deploy_filters(
    filters: Sequence[DeployFilter],
    changes: Sequence[Change],
) -> FilterResult:
    deploy_result = DeployResult()
    remaining = changes
    for deploy_filter in filters:
        result = await deploy_filter.deploy(remaining)
        log.debug(
            "Filter %s: applied=%s, errors=%s, leftover=%s",
            deploy_filter.name,
            len(result.deploy_result.applied_changes),
            len(result.deploy_result.errors),
            len(result.leftover_changes),
        )
        deploy_result = deploy_result.merge(result.deploy_result)
        remaining = result.leftover_changes
    return FilterResult(deploy_result=deploy_result, leftover_changes=remaining)
