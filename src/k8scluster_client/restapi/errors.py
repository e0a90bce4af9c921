"""Error types raised by the authenticated REST core.

Every error carries the HTTP response it relates to. When the transport
never produced one, an empty response with status code 0 is attached
instead, so ``err.response`` can always be inspected.
"""

import httpx


def empty_response() -> httpx.Response:
    """Return a zero-value response used when no real response exists."""
    return httpx.Response(0)


class ContainerApiError(Exception):
    """Base class for all errors raised by the REST core."""

    def __init__(self, message: str, response: httpx.Response | None = None):
        super().__init__(message)
        self.response = response if response is not None else empty_response()


class NetworkError(ContainerApiError):
    """Transport-level failure (connection, DNS, timeout)."""

    def __init__(
        self,
        host: str,
        cause: Exception,
        response: httpx.Response | None = None,
    ):
        msg = f"Request failed to reach {host}: {cause}"
        super().__init__(msg, response)
        self.host = host
        self.cause = cause


class RequestFailure(ContainerApiError):
    """The service answered with a non-2xx status.

    Callers should inspect ``status_code``, ``code`` and ``description``
    rather than parse the message text.
    """

    def __init__(
        self,
        code: str,
        description: str,
        status_code: int,
        response: httpx.Response | None = None,
    ):
        msg = f"Request failed with status code: {status_code}, {code}: {description}"
        super().__init__(msg, response)
        self.code = code
        self.description = description
        self.status_code = status_code


class InvalidTokenError(ContainerApiError):
    """The token service rejected the refresh token or API key."""

    def __init__(self, description: str, response: httpx.Response | None = None):
        super().__init__(description, response)
        self.description = description


class TokenRefreshError(ContainerApiError):
    """A token refresh failed for a reason other than an invalid token."""


class BeforeRequestError(ContainerApiError):
    """The ``before`` hook rejected a request before it was sent."""


class ResponseDecodeError(ContainerApiError):
    """A successful response body could not be decoded."""
