"""Thin async client for the Jira Cloud REST APIs used by deployments."""

from __future__ import annotations

import base64
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from jsmdeploy.adapters.http_resilience import (
    CacheConfig,
    RateLimit,
    ResilienceConfig,
    ResilientClient,
)
from jsmdeploy.config import JiraConfig

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

log = getLogger(__name__)

HttpMethod = Literal["get", "post", "put", "patch", "delete"]
ResponseData = Mapping[str, object] | list[object] | None


def _should_cache_payload(payload: object) -> bool:
    # Only the workspace lookup is a cacheable GET; skip empty answers.
    return isinstance(payload, Mapping) and bool(payload.get("values"))


def _basic_auth_header(user_email: str, api_token: str) -> str:
    token = base64.b64encode(f"{user_email}:{api_token}".encode()).decode("ascii")
    return f"Basic {token}"


def build_resilience_config(config: JiraConfig) -> ResilienceConfig:
    return ResilienceConfig(
        base_url=config.base_url,
        timeout_seconds=config.timeout_seconds,
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        cache=CacheConfig(backend=config.http_cache, should_cache=_should_cache_payload),
        default_headers={
            "Authorization": _basic_auth_header(config.user_email, config.api_token),
            "Accept": "application/json",
        },
    )


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


def _parse_body(response: httpx.Response) -> ResponseData:
    if not response.content:
        return None
    return response.json()


@dataclass(slots=True)
class JiraClient:
    """Issue JSON requests against a Jira site.

    Every call raises ``httpx.HTTPStatusError`` for non-2xx answers; callers
    decide which statuses they tolerate.
    """

    config: JiraConfig = field(default_factory=JiraConfig.from_environment)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    _http: ResilientClient | None = field(default=None, init=False, repr=False)

    async def __aenter__(self) -> JiraClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    def _client(self) -> ResilientClient:
        if self._http is None:
            self._http = self.client_factory(build_resilience_config(self.config))
        return self._http

    async def request(
        self,
        method: HttpMethod,
        url: str,
        *,
        data: object = None,
        params: Mapping[str, str] | None = None,
    ) -> ResponseData:
        log.debug("%s %s", method.upper(), url)
        if data is None:
            response = await self._client().request(method.upper(), url, params=params)
        else:
            response = await self._client().request(method.upper(), url, json=data, params=params)
        response.raise_for_status()
        return _parse_body(response)

    async def get(self, url: str, *, params: Mapping[str, str] | None = None) -> ResponseData:
        return await self.request("get", url, params=params)
