"""
Base API Client
Sends authenticated requests to the webmate API and normalizes the responses
"""

from typing import Any, Mapping, Optional, Sequence, Tuple

import requests

from webmate.api.config import APIConfig
from webmate.api.exceptions import WebmateApiHttpError, WebmateTransportError
from webmate.api.json_codec import JSON_CODEC, JsonCodec
from webmate.api.result import ABSENT, OptionalResult, Present
from webmate.api.session import WebmateAuthInfo, WebmateEnvironment
from webmate.api.uri_template import UriTemplate
from webmate.base.logger import Logger

# Status that means "there is no such resource" rather than "the call failed"
NOT_FOUND_STATUS_CODE = 404


class ApiResponse:
    """Wrapper class for API responses"""

    def __init__(self, opt_http_response: OptionalResult[requests.Response]):
        self.opt_http_response = opt_http_response

    def is_present(self) -> bool:
        return self.opt_http_response.is_present()

    def has_body(self) -> bool:
        """True if there is a response and it carries a non-empty body"""
        return self.opt_http_response.map(lambda r: bool(r.content)).or_else(False)

    @property
    def status_code(self) -> Optional[int]:
        return self.opt_http_response.map(lambda r: r.status_code).or_else(None)

    def __repr__(self):
        if self.is_present():
            return f"ApiResponse(status={self.status_code})"
        return "ApiResponse(absent)"


class WebmateApiClient:
    """
    Request layer shared by the resource API clients

    Resolves a UriTemplate against the environment's base URL, attaches the
    authentication headers, sends the request and wraps the outcome in an
    ApiResponse. A 404 answer becomes an absent response; transport failures
    and other error statuses are raised.
    """

    def __init__(
        self,
        auth_info: WebmateAuthInfo,
        environment: WebmateEnvironment,
        http_session: Optional[requests.Session] = None,
        codec: JsonCodec = JSON_CODEC,
        timeout: Optional[float] = None
    ):
        """
        Initialize the API client

        Args:
            auth_info: Credentials sent with every request
            environment: Target webmate installation
            http_session: Preconfigured requests.Session (proxies, TLS settings, adapters).
                          A plain session is created if omitted
            codec: JSON codec for request and response bodies
            timeout: Request timeout in seconds. Defaults to APIConfig.DEFAULT_TIMEOUT
        """
        self.auth_info = auth_info
        self.environment = environment
        self.codec = codec
        self.timeout = timeout if timeout is not None else APIConfig.DEFAULT_TIMEOUT
        self.session = http_session if http_session is not None else requests.Session()
        self.logger = Logger.get_instance(console_level=APIConfig.LOG_LEVEL)

    def _build_url(self, template: UriTemplate, path_params: Mapping[str, Any]) -> str:
        """Build full URL from template and path parameters"""
        endpoint = template.resolve(path_params)
        if not endpoint.startswith('/'):
            endpoint = f'/{endpoint}'
        return f"{self.environment.base_url.rstrip('/')}{endpoint}"

    def _headers(self, with_body: bool) -> dict:
        headers = {'Accept': 'application/json'}
        if with_body:
            headers['Content-Type'] = 'application/json'
        headers.update(self.auth_info.headers())
        return headers

    def _send(
        self,
        method: str,
        template: UriTemplate,
        path_params: Mapping[str, Any],
        query_params: Optional[Sequence[Tuple[str, str]]] = None,
        body: Any = None
    ) -> ApiResponse:
        url = self._build_url(template, path_params)
        data = self.codec.encode(body) if body is not None else None

        self.logger.info(f"API Request: {method} {url}")
        if query_params:
            self.logger.debug(f"Query Parameters: {list(query_params)}")
        if data is not None:
            self.logger.debug(f"Request Body: {data}")

        try:
            response = self.session.request(
                method,
                url,
                params=list(query_params) if query_params else None,
                data=data,
                headers=self._headers(data is not None),
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            self.logger.error(f"{method} request failed: {str(e)}")
            raise WebmateTransportError(f"{method} {url} failed: {e}", e) from e

        self.logger.info(f"API Response: {response.status_code}")

        if response.status_code == NOT_FOUND_STATUS_CODE:
            self.logger.info(f"Not found: {method} {url}")
            return ApiResponse(ABSENT)

        if not response.ok:
            self.logger.error(f"Error: {method} {url} returned {response.status_code}: {response.text}")
            raise WebmateApiHttpError(
                f"{method} {url} returned HTTP {response.status_code}",
                response.status_code,
                response.text
            )

        if response.text:
            self.logger.debug(f"Response Body: {response.text}")
        return ApiResponse(Present(response))

    def send_get(
        self,
        template: UriTemplate,
        path_params: Mapping[str, Any],
        query_params: Optional[Sequence[Tuple[str, str]]] = None
    ) -> ApiResponse:
        """
        Send GET request

        Args:
            template: Endpoint template
            path_params: Values for the template placeholders
            query_params: Ordered (name, value) pairs appended to the URL

        Returns:
            ApiResponse object
        """
        return self._send('GET', template, path_params, query_params=query_params)

    def send_post(
        self,
        template: UriTemplate,
        path_params: Mapping[str, Any],
        body: Any = None
    ) -> ApiResponse:
        """
        Send POST request

        Args:
            template: Endpoint template
            path_params: Values for the template placeholders
            body: Request body, encoded with the client's JsonCodec. No body is sent if None

        Returns:
            ApiResponse object
        """
        return self._send('POST', template, path_params, body=body)

    def send_delete(self, template: UriTemplate, path_params: Mapping[str, Any]) -> ApiResponse:
        """
        Send DELETE request

        Args:
            template: Endpoint template
            path_params: Values for the template placeholders

        Returns:
            ApiResponse object
        """
        return self._send('DELETE', template, path_params)
