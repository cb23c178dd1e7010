"""
webmate SDK
Python client for the webmate test management platform
"""

from webmate.api import (
    APIConfig,
    WebmateAPISession,
    WebmateAuthInfo,
    WebmateEnvironment,
    WebmateApiClientException,
    Present,
    ABSENT
)
from webmate.clients import TestMgmtClient, TestRun, TestSession, ArtifactClient, DeviceClient

__version__ = '0.1.0'

__all__ = [
    'APIConfig',
    'WebmateAPISession',
    'WebmateAuthInfo',
    'WebmateEnvironment',
    'WebmateApiClientException',
    'Present',
    'ABSENT',
    'TestMgmtClient',
    'TestRun',
    'TestSession',
    'ArtifactClient',
    'DeviceClient',
]
