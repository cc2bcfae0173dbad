"""Domain port definitions for adapters."""

from __future__ import annotations

from .deployment import DeployChangeFunc, DeployEngine, DeployFilter, WorkspaceIdResolver

__all__ = ["DeployChangeFunc", "DeployEngine", "DeployFilter", "WorkspaceIdResolver"]
