from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from jsmdeploy.config import ApiDefinitions, JsmConfig, default_jsm_api_definitions
from tests.helpers.changes import FakeDeployEngine, FakeWorkspaceResolver

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _clean_jira_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (
        "JSM_ENABLED",
        "JSM_API_DEFINITIONS_PATH",
        "JIRA_BASE_URL",
        "JIRA_USER_EMAIL",
        "JIRA_API_TOKEN",
        "JIRA_HTTP_CACHE",
        "JSMDEPLOY_DATA_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def api_definitions() -> ApiDefinitions:
    return default_jsm_api_definitions()


@pytest.fixture
def jsm_config(api_definitions: ApiDefinitions) -> JsmConfig:
    return JsmConfig(enable_jsm=True, api_definitions=api_definitions)


@pytest.fixture
def fake_engine() -> FakeDeployEngine:
    return FakeDeployEngine(response={"id": 42})


@pytest.fixture
def fake_resolver() -> FakeWorkspaceResolver:
    return FakeWorkspaceResolver()
