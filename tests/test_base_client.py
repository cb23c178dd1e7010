"""
Base API Client Tests
Request layer: URL building, auth headers, response normalization, error mapping
"""

import json

import pytest
import requests

from webmate.api.base_client import WebmateApiClient
from webmate.api.config import APIConfig
from webmate.api.exceptions import (
    UriTemplateError,
    WebmateApiClientException,
    WebmateApiHttpError,
    WebmateTransportError
)
from webmate.api.result import ABSENT, Absent, Present
from webmate.api.session import WebmateEnvironment
from webmate.api.uri_template import UriTemplate
from webmate.models.testmgmt import TestRunFinishData
from webmate.models.types import TestRunEvaluationStatus

ITEM_TEMPLATE = UriTemplate("/things/${thingId}")


@pytest.mark.unit
class TestResultType:

    def test_present(self):
        result = Present(3)

        assert result.is_present()
        assert result.get() == 3
        assert result.or_else(5) == 3
        assert result.map(lambda v: v * 2) == Present(6)

    def test_absent(self):
        assert not ABSENT.is_present()
        assert ABSENT.or_else(5) == 5
        assert ABSENT.map(lambda v: v * 2) is ABSENT

    def test_absent_get_raises(self):
        with pytest.raises(WebmateApiClientException):
            ABSENT.get()

    def test_absent_is_singleton(self):
        assert Absent() is ABSENT


@pytest.mark.api
class TestWebmateApiClient:

    def test_get_returns_present_response(self, api_client, base_url, requests_mock):
        requests_mock.get(f"{base_url}/things/42", json={'name': 'thing'})

        response = api_client.send_get(ITEM_TEMPLATE, {'thingId': '42'})

        assert response.is_present()
        assert response.has_body()
        assert response.status_code == 200
        assert response.opt_http_response.get().json() == {'name': 'thing'}

    def test_sends_auth_headers(self, api_client, base_url, requests_mock):
        requests_mock.get(f"{base_url}/things/42", json={})

        api_client.send_get(ITEM_TEMPLATE, {'thingId': '42'})

        headers = requests_mock.last_request.headers
        assert headers['webmate.user'] == "automation@webmate.test"
        assert headers['webmate.api-token'] == "secret-api-key"
        assert headers['Accept'] == 'application/json'

    def test_not_found_is_absent(self, api_client, base_url, requests_mock):
        requests_mock.get(f"{base_url}/things/42", status_code=404)

        response = api_client.send_get(ITEM_TEMPLATE, {'thingId': '42'})

        assert not response.is_present()
        assert not response.has_body()
        assert response.status_code is None

    def test_no_content_is_present_without_body(self, api_client, base_url, requests_mock):
        requests_mock.post(f"{base_url}/things/42", status_code=204)

        response = api_client.send_post(ITEM_TEMPLATE, {'thingId': '42'})

        assert response.is_present()
        assert not response.has_body()

    def test_server_error_raises(self, api_client, base_url, requests_mock):
        requests_mock.get(f"{base_url}/things/42", status_code=500, text="boom")

        with pytest.raises(WebmateApiHttpError) as exc_info:
            api_client.send_get(ITEM_TEMPLATE, {'thingId': '42'})

        assert exc_info.value.status_code == 500
        assert exc_info.value.body == "boom"

    def test_connection_failure_raises_transport_error(self, api_client, base_url, requests_mock):
        requests_mock.get(f"{base_url}/things/42", exc=requests.exceptions.ConnectionError("refused"))

        with pytest.raises(WebmateTransportError) as exc_info:
            api_client.send_get(ITEM_TEMPLATE, {'thingId': '42'})

        assert isinstance(exc_info.value.cause, requests.exceptions.ConnectionError)
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_query_parameter_order_is_preserved(self, api_client, base_url, requests_mock):
        requests_mock.get(f"{base_url}/things/42", json=[])

        api_client.send_get(ITEM_TEMPLATE, {'thingId': '42'}, [('zeta', 'Z'), ('alpha', 'A')])

        assert requests_mock.last_request.url == f"{base_url}/things/42?zeta=Z&alpha=A"

    def test_post_encodes_body_with_codec(self, api_client, base_url, requests_mock):
        requests_mock.post(f"{base_url}/things/42", status_code=204)

        api_client.send_post(
            ITEM_TEMPLATE,
            {'thingId': '42'},
            TestRunFinishData(status=TestRunEvaluationStatus.PASSED, msg="all good")
        )

        request = requests_mock.last_request
        assert request.method == 'POST'
        assert request.headers['Content-Type'] == 'application/json'
        assert json.loads(request.body) == {'status': 'PASSED', 'msg': 'all good'}

    def test_post_drops_none_entries_from_dict_body(self, api_client, base_url, requests_mock):
        requests_mock.post(f"{base_url}/things/42", status_code=204)

        api_client.send_post(ITEM_TEMPLATE, {'thingId': '42'}, {'name': 'x', 'msg': None})

        assert json.loads(requests_mock.last_request.body) == {'name': 'x'}

    def test_post_without_body_sends_none(self, api_client, base_url, requests_mock):
        requests_mock.post(f"{base_url}/things/42", status_code=204)

        api_client.send_post(ITEM_TEMPLATE, {'thingId': '42'})

        assert requests_mock.last_request.body is None

    def test_delete(self, api_client, base_url, requests_mock):
        requests_mock.delete(f"{base_url}/things/42", status_code=200)

        response = api_client.send_delete(ITEM_TEMPLATE, {'thingId': '42'})

        assert response.is_present()
        assert requests_mock.last_request.method == 'DELETE'

    def test_missing_path_parameter_sends_nothing(self, api_client, requests_mock):
        with pytest.raises(UriTemplateError):
            api_client.send_get(ITEM_TEMPLATE, {})

        assert requests_mock.call_count == 0

    def test_base_url_trailing_slash(self, auth_info, base_url, requests_mock):
        client = WebmateApiClient(auth_info, WebmateEnvironment(base_url + "/"))
        requests_mock.get(f"{base_url}/things/42", json={})

        client.send_get(ITEM_TEMPLATE, {'thingId': '42'})

        assert requests_mock.last_request.url == f"{base_url}/things/42"

    def test_uses_custom_http_session(self, auth_info, environment, base_url, requests_mock):
        http_session = requests.Session()
        http_session.headers.update({'X-Forwarded-Proxy': 'corporate'})
        client = WebmateApiClient(auth_info, environment, http_session)
        requests_mock.get(f"{base_url}/things/42", json={})

        client.send_get(ITEM_TEMPLATE, {'thingId': '42'})

        assert client.session is http_session
        assert requests_mock.last_request.headers['X-Forwarded-Proxy'] == 'corporate'

    def test_timeout_is_passed_to_transport(self, auth_info, environment, base_url, requests_mock):
        client = WebmateApiClient(auth_info, environment, timeout=7.5)
        requests_mock.get(f"{base_url}/things/42", json={})

        client.send_get(ITEM_TEMPLATE, {'thingId': '42'})

        assert requests_mock.last_request.timeout == 7.5

    def test_timeout_defaults_to_configuration(self, auth_info, environment, base_url, requests_mock):
        client = WebmateApiClient(auth_info, environment)
        requests_mock.get(f"{base_url}/things/42", json={})

        client.send_get(ITEM_TEMPLATE, {'thingId': '42'})

        assert client.timeout == APIConfig.DEFAULT_TIMEOUT
        assert requests_mock.last_request.timeout == APIConfig.DEFAULT_TIMEOUT
