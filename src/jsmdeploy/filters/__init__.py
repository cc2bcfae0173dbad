"""Deploy filters; each handles part of a change batch and passes on the rest."""

from __future__ import annotations

from .jsm_types_deploy import (
    ASSETS_SUPPORTED_TYPES,
    SUPPORTED_TYPES,
    DispatchParams,
    JsmTypesDeployFilter,
    dispatch_changes,
    resolve_dispatch_params,
)

__all__ = [
    "ASSETS_SUPPORTED_TYPES",
    "SUPPORTED_TYPES",
    "DispatchParams",
    "JsmTypesDeployFilter",
    "dispatch_changes",
    "resolve_dispatch_params",
]
