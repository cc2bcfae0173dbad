"""Resolve the Assets workspace id of a Jira site."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

if TYPE_CHECKING:
    from .client import JiraClient

log = getLogger(__name__)

WORKSPACE_URL = "/rest/servicedeskapi/assets/workspace"


class WorkspaceEntry(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    workspace_id: str = Field(alias="workspaceId")


class WorkspaceResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    values: list[WorkspaceEntry] = Field(default_factory=list)


@dataclass(slots=True)
class JiraWorkspaceResolver:
    """Look up the workspace id; ``None`` when the site has no Assets workspace."""

    client: JiraClient

    async def __call__(self) -> str | None:
        try:
            payload = await self.client.get(WORKSPACE_URL)
        except httpx.HTTPError as exc:
            log.warning("Failed to fetch the Assets workspace id: %s", exc)
            return None

        try:
            response = WorkspaceResponse.model_validate(payload)
        except ValidationError as exc:
            log.warning("Unexpected Assets workspace payload: %s", exc)
            return None

        if not response.values:
            log.debug("Jira site has no Assets workspace")
            return None
        return response.values[0].workspace_id
