"""Jira Cloud connection settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, cast

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError

JIRA_TIMEOUT_SECONDS = 30.0

HttpCacheBackend = Literal["memory", "sqlite"]
_HTTP_CACHE_BACKENDS: frozenset[str] = frozenset({"memory", "sqlite"})


@dataclass(frozen=True)
class JiraConfig:
    """Holds the Jira site URL and API credentials."""

    base_url: str
    user_email: str
    api_token: str
    timeout_seconds: float = JIRA_TIMEOUT_SECONDS
    http_cache: HttpCacheBackend = "memory"

    @classmethod
    def from_environment(cls) -> JiraConfig:
        values = require_env_vars(("JIRA_BASE_URL", "JIRA_USER_EMAIL", "JIRA_API_TOKEN"))
        http_cache = (optional_env_var("JIRA_HTTP_CACHE") or "memory").lower()
        if http_cache not in _HTTP_CACHE_BACKENDS:
            raise ConfigurationError(
                f"JIRA_HTTP_CACHE must be one of {sorted(_HTTP_CACHE_BACKENDS)}, got {http_cache!r}"
            )
        return cls(
            base_url=values["JIRA_BASE_URL"].rstrip("/"),
            user_email=values["JIRA_USER_EMAIL"],
            api_token=values["JIRA_API_TOKEN"],
            http_cache=cast("HttpCacheBackend", http_cache),
        )
