"""Settings for the Jira Service Management deploy subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .api_definitions import ApiDefinitions, default_jsm_api_definitions, load_api_definitions
from .env import env_flag, optional_env_var


@dataclass(frozen=True)
class JsmConfig:
    """Whether JSM types are deployed and the API definitions used to do so.

    ``api_definitions`` set to ``None`` means the subsystem is unconfigured;
    the deploy filter then hands every change on untouched.
    """

    enable_jsm: bool = False
    api_definitions: ApiDefinitions | None = None

    @classmethod
    def from_environment(cls) -> JsmConfig:
        enabled = env_flag("JSM_ENABLED")
        path = optional_env_var("JSM_API_DEFINITIONS_PATH")
        definitions = (
            load_api_definitions(Path(path))
            if path is not None
            else default_jsm_api_definitions()
        )
        return cls(enable_jsm=enabled, api_definitions=definitions)
