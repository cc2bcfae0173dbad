"""Public interface for the Jira adapter."""

from __future__ import annotations

from .client import JiraClient, ResponseData, build_resilience_config
from .deployment import StandardDeployEngine, replace_url_params
from .workspace import WORKSPACE_URL, JiraWorkspaceResolver

__all__ = [
    "WORKSPACE_URL",
    "JiraClient",
    "JiraWorkspaceResolver",
    "ResponseData",
    "StandardDeployEngine",
    "build_resilience_config",
    "replace_url_params",
]
