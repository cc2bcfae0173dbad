"""Shared fixtures for Jira adapter tests."""

from __future__ import annotations

import pytest

from jsmdeploy.adapters.jira import JiraClient
from tests.helpers.jira import JIRA_TEST_CONFIG, FakeJiraSite, make_client_factory


@pytest.fixture
def jira_site() -> FakeJiraSite:
    return FakeJiraSite()


@pytest.fixture
def jira_client(jira_site: FakeJiraSite) -> JiraClient:
    return JiraClient(config=JIRA_TEST_CONFIG, client_factory=make_client_factory(jira_site.handle))
