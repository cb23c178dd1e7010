"""
API Module
Request plumbing and resource API clients for the webmate REST API

This module contains:
- WebmateApiClient: authenticated request layer shared by all resource clients
- UriTemplate: endpoint path templates
- Present / ABSENT: result type for endpoints that may have no data
- Resource API clients for test management, artifacts and devices

The public entry points are the facades in webmate.clients.
"""

from webmate.api.config import APIConfig
from webmate.api.exceptions import (
    WebmateApiClientException,
    UriTemplateError,
    WebmateTransportError,
    WebmateApiHttpError,
    WebmateDeserializationError,
    WebmateNoResponseError,
    WebmatePreconditionError
)
from webmate.api.result import Present, Absent, ABSENT, OptionalResult
from webmate.api.uri_template import UriTemplate
from webmate.api.json_codec import JsonCodec, JSON_CODEC, ApiValue
from webmate.api.session import WebmateAuthInfo, WebmateEnvironment, WebmateAPISession
from webmate.api.base_client import WebmateApiClient, ApiResponse
from webmate.api.testmgmt_api import TestMgmtApiClient
from webmate.api.artifact_api import ArtifactApiClient
from webmate.api.device_api import DeviceApiClient

__all__ = [
    'APIConfig',
    'WebmateApiClientException',
    'UriTemplateError',
    'WebmateTransportError',
    'WebmateApiHttpError',
    'WebmateDeserializationError',
    'WebmateNoResponseError',
    'WebmatePreconditionError',
    'Present',
    'Absent',
    'ABSENT',
    'OptionalResult',
    'UriTemplate',
    'JsonCodec',
    'JSON_CODEC',
    'ApiValue',
    'WebmateAuthInfo',
    'WebmateEnvironment',
    'WebmateAPISession',
    'WebmateApiClient',
    'ApiResponse',
    'TestMgmtApiClient',
    'ArtifactApiClient',
    'DeviceApiClient',
]
