"""
Exceptions raised by the webmate API clients.

Every failure that originates in the SDK is a WebmateApiClientException, so
callers can catch a single type. Subclasses tell apart where it happened.
"""

from typing import Optional


class WebmateApiClientException(Exception):
    """Base class of all webmate client errors"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class UriTemplateError(WebmateApiClientException):
    """A path template could not be resolved with the given parameters"""


class WebmateTransportError(WebmateApiClientException):
    """The request never reached the server or the connection broke"""


class WebmateApiHttpError(WebmateApiClientException):
    """The server answered with an error status other than not found"""

    def __init__(self, message: str, status_code: int, body: str = ''):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class WebmateDeserializationError(WebmateApiClientException):
    """The server answered, but the body did not have the expected shape"""


class WebmateNoResponseError(WebmateApiClientException):
    """An endpoint that always returns a body returned none"""


class WebmatePreconditionError(WebmateApiClientException):
    """The session lacks state the operation needs, e.g. a current project"""
