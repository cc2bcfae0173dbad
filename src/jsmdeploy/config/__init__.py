"""Application configuration helpers."""

from __future__ import annotations

from .api_definitions import (
    JSM_DUCKTYPE_SUPPORTED_TYPES,
    ApiDefinitions,
    DeployRequest,
    FieldTypeOverride,
    TransformationConfig,
    TypeDefinition,
    default_jsm_api_definitions,
    load_api_definitions,
)
from .env import env_flag, optional_env_var, require_env_vars
from .errors import ConfigurationError, ConfigurationIntegrityError, MissingConfigurationError
from .jira import JiraConfig
from .jsm import JsmConfig

__all__ = [
    "JSM_DUCKTYPE_SUPPORTED_TYPES",
    "ApiDefinitions",
    "ConfigurationError",
    "ConfigurationIntegrityError",
    "DeployRequest",
    "FieldTypeOverride",
    "JiraConfig",
    "JsmConfig",
    "MissingConfigurationError",
    "TransformationConfig",
    "TypeDefinition",
    "default_jsm_api_definitions",
    "env_flag",
    "load_api_definitions",
    "optional_env_var",
    "require_env_vars",
]
