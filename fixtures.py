"""
Test Fixtures
Provides reusable fixtures for all tests

ARCHITECTURE NOTE:
- All pytest fixtures are defined HERE (single source of truth)
- Fixtures are imported in conftest.py via "from fixtures import *"
- HTTP is never sent for real: the requests_mock fixture (requests-mock
  plugin) intercepts every requests.Session, including custom ones
"""

import pytest

from webmate.api.base_client import WebmateApiClient
from webmate.api.session import WebmateAPISession, WebmateAuthInfo, WebmateEnvironment
from webmate.clients import ArtifactClient, DeviceClient, TestMgmtClient
from webmate.models.ids import ProjectId


BASE_URL = "https://webmate.test/api/v1"

PROJECT_UUID = "3f1c7a52-8d0e-4c4b-9a57-1d2b6e0f9c11"


# ==================== Session Fixtures ====================

@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def auth_info():
    return WebmateAuthInfo("automation@webmate.test", "secret-api-key")


@pytest.fixture
def environment():
    return WebmateEnvironment(BASE_URL)


@pytest.fixture
def project_id():
    return ProjectId(PROJECT_UUID)


@pytest.fixture
def api_session(auth_info, environment, project_id):
    """Session bound to a current project"""
    return WebmateAPISession(auth_info, environment, project_id)


@pytest.fixture
def session_without_project(auth_info, environment):
    return WebmateAPISession(auth_info, environment)


# ==================== Client Fixtures ====================

@pytest.fixture
def api_client(auth_info, environment):
    """Bare request layer"""
    return WebmateApiClient(auth_info, environment)


@pytest.fixture
def testmgmt_client(api_session):
    return TestMgmtClient(api_session)


@pytest.fixture
def artifact_client(api_session):
    return ArtifactClient(api_session)


@pytest.fixture
def device_client(api_session):
    return DeviceClient(api_session)
