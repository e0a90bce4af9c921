"""Authenticated HTTP core for the container service.

Resource APIs build a path and a body and call one of the verb primitives
on :class:`ClusterClient`. The core renders the request with the default
authentication headers, sends it, and on a 401 refreshes the IAM token and
resends the request exactly once.
"""

import functools
import posixpath
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

import httpx
import pydantic
import structlog

from ..config import ServiceName
from ..metrics import ClientMetrics
from ..session import Session
from .auth import IAMTokenRefresher, TokenRefresher
from .errors import (
    BeforeRequestError,
    InvalidTokenError,
    NetworkError,
    RequestFailure,
    ResponseDecodeError,
    TokenRefreshError,
    empty_response,
)
from .headers import USER_AGENT_HEADER, default_cluster_auth_headers, user_agent
from .request import Request

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30.0

BeforeHandler: TypeAlias = Callable[[Request], None]
ErrorHandler: TypeAlias = Callable[[int, bytes], Exception | None]


@dataclass
class ApiResult:
    """Response of a call plus its decoded body."""

    response: httpx.Response
    data: Any = None


@dataclass
class _Attempt:
    response: httpx.Response
    data: Any = None
    error: Exception | None = None


@functools.cache
def _default_http_client() -> httpx.Client:
    return httpx.Client(timeout=DEFAULT_TIMEOUT)


def clean_path(path: str) -> str:
    """Normalize a relative API path.

    An empty path becomes ``/``, a leading slash is added when missing, and
    ``.``/``..`` segments and repeated separators are collapsed.
    """
    if not path:
        return "/"
    if not path.startswith("/"):
        path = "/" + path
    cleaned = posixpath.normpath(path)
    # normpath keeps a leading "//" as-is
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _is_sink(result: Any) -> bool:
    return callable(getattr(result, "write", None))


def _request_failure(response: httpx.Response) -> RequestFailure:
    code = "ServerErrorResponse"
    description = response.text
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        code = str(body.get("code") or code)
        description = str(body.get("description") or description)
    return RequestFailure(code, description, response.status_code, response)


class ClusterClient:
    """Authenticated client core shared by all resource APIs of a service.

    Attributes:
        base_url: Resolved service endpoint; when ``None`` paths are used
            as-is.
        token_refresher: Consulted once per call when a response is 401.
        before: Optional hook called with each :class:`Request` before it is
            first sent. Raising from the hook aborts the call.
        on_error: Optional hook called with the status code and description
            of a :class:`RequestFailure`. The exception it returns replaces
            the failure; returning ``None`` suppresses it.
        http_client: Transport; a process-wide default is used when ``None``.
    """

    def __init__(
        self,
        session: Session,
        service: ServiceName = ServiceName.CONTAINER,
        *,
        http_client: httpx.Client | None = None,
        token_refresher: TokenRefresher | None = None,
        metrics: ClientMetrics | None = None,
    ):
        """Initialize the client core.

        Args:
            session: Session whose configuration is copied.
            service: Service whose endpoint requests are sent to.
            http_client: Optional transport to use instead of a new one.
            token_refresher: Optional refresher to use instead of an
                :class:`IAMTokenRefresher` bound to this client.
            metrics: Optional metrics sink; a private one is created when
                omitted.

        Raises:
            EndpointNotFoundError: If the service endpoint can't be resolved.
            InvalidTokenError: If the configured API key is rejected.
        """
        self.config = session.config.copy_config()
        self.service = service
        self.base_url: str | None = self.config.endpoint_locator.endpoint_for(service)

        self._owns_http_client = http_client is None
        self.http_client: httpx.Client | None = http_client or httpx.Client(
            timeout=self.config.timeout,
            headers={USER_AGENT_HEADER: user_agent()},
        )
        self.metrics = metrics if metrics is not None else ClientMetrics()
        self.before: BeforeHandler | None = None
        self.on_error: ErrorHandler | None = None

        try:
            self.token_refresher: TokenRefresher | None = token_refresher or IAMTokenRefresher(
                self.config,
                self.http_client,
            )
            if (
                self.config.api_key
                and not self.config.iam_access_token
                and isinstance(self.token_refresher, IAMTokenRefresher)
            ):
                self.token_refresher.authenticate_api_key()
        except Exception:
            self.close()
            raise

        logger.debug("Created cluster client", service=service.value, base_url=self.base_url)

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and cleanup resources."""
        self.close()

    def close(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client and self.http_client is not None:
            self.http_client.close()

    def url(self, path: str) -> str:
        if self.base_url is None:
            return path
        return self.base_url + clean_path(path)

    def get(
        self,
        path: str,
        result: Any = None,
        *headers: Any,
        params: dict[str, Any] | None = None,
    ) -> ApiResult:
        request = Request("GET", self.url(path), params=params).apply_headers(*headers)
        return self._send_request(request, result)

    def put(
        self,
        path: str,
        body: Any = None,
        result: Any = None,
        *headers: Any,
        params: dict[str, Any] | None = None,
    ) -> ApiResult:
        request = Request("PUT", self.url(path), body, params).apply_headers(*headers)
        return self._send_request(request, result)

    def patch(
        self,
        path: str,
        body: Any = None,
        result: Any = None,
        *headers: Any,
        params: dict[str, Any] | None = None,
    ) -> ApiResult:
        request = Request("PATCH", self.url(path), body, params).apply_headers(*headers)
        return self._send_request(request, result)

    def post(
        self,
        path: str,
        body: Any = None,
        result: Any = None,
        *headers: Any,
        params: dict[str, Any] | None = None,
    ) -> ApiResult:
        request = Request("POST", self.url(path), body, params).apply_headers(*headers)
        return self._send_request(request, result)

    def delete(
        self,
        path: str,
        *headers: Any,
        params: dict[str, Any] | None = None,
    ) -> ApiResult:
        request = Request("DELETE", self.url(path), params=params).apply_headers(*headers)
        return self._send_request(request, None)

    def _send_request(self, request: Request, result: Any = None) -> ApiResult:
        """Send a request, refreshing the token and retrying once on 401.

        Args:
            request: Request to send.
            result: Type to decode a JSON body into, a binary file-like
                object receiving the raw body, or ``None``.

        Returns:
            The response and decoded body.

        Raises:
            BeforeRequestError: If the ``before`` hook raised.
            NetworkError: If the service couldn't be reached.
            RequestFailure: If the service answered with a non-2xx status,
                or the refresh token was rejected (status 401).
            TokenRefreshError: If refreshing the token failed otherwise.
            ResponseDecodeError: If a successful body couldn't be decoded.
        """
        http_client = self.http_client or _default_http_client()

        if self.before is not None:
            try:
                self.before(request)
            except Exception as exc:
                msg = f"Request rejected before sending: {exc}"
                raise BeforeRequestError(msg, empty_response()) from exc

        attempt = self._execute(http_client, request, result)

        if attempt.response.status_code == 401 and self.token_refresher is not None:  # noqa: PLR2004
            attempt = self._refresh_and_retry(http_client, request, result, attempt)

        error = attempt.error
        if isinstance(error, RequestFailure) and self.on_error is not None:
            error = self.on_error(error.status_code, error.description.encode())

        if error is not None:
            raise error
        return ApiResult(attempt.response, attempt.data)

    def _refresh_and_retry(
        self,
        http_client: httpx.Client,
        request: Request,
        result: Any,
        attempt: _Attempt,
    ) -> _Attempt:
        logger.info("Authentication token probably expired, attempting refresh ...")
        try:
            token = self.token_refresher.refresh_token()
        except InvalidTokenError as exc:
            self.metrics.record_refresh("invalid_token")
            raise RequestFailure("InvalidToken", str(exc), 401, attempt.response) from exc
        except Exception as exc:
            self.metrics.record_refresh("failed")
            logger.exception("Token refresh failed")
            msg = f"Authentication failed, Unable to refresh auth token: {exc}. Try again later"
            raise TokenRefreshError(msg, attempt.response) from exc

        if token:
            self.config.iam_access_token = token
        self.metrics.record_refresh("refreshed")
        return self._execute(http_client, request, result)

    def _execute(
        self,
        http_client: httpx.Client,
        request: Request,
        result: Any,
    ) -> _Attempt:
        """Send one attempt with freshly built default headers."""
        http_request = request.build(http_client, default_cluster_auth_headers(self.config))
        start_time = time.time()
        logger.debug("Making API request", method=request.method, url=request.url)

        try:
            response = http_client.send(http_request, stream=_is_sink(result))
        except httpx.TransportError as exc:
            self.metrics.record_request(request.method, 0)
            logger.exception(
                "API request failed",
                method=request.method,
                url=request.url,
                duration_seconds=round(time.time() - start_time, 3),
            )
            response = empty_response()
            return _Attempt(response, error=NetworkError(http_request.url.host, exc, response))

        try:
            self.metrics.record_request(request.method, response.status_code)
            logger.debug(
                "API request completed",
                status_code=response.status_code,
                duration_seconds=round(time.time() - start_time, 3),
            )
            if not response.is_success:
                response.read()
                return _Attempt(response, error=_request_failure(response))
            return _Attempt(response, data=self._decode(response, result))
        except ResponseDecodeError as exc:
            return _Attempt(response, error=exc)
        except httpx.TransportError as exc:
            # Streamed bodies are read after send() returned
            logger.exception(
                "API response body read failed",
                method=request.method,
                url=request.url,
                status_code=response.status_code,
            )
            return _Attempt(response, error=NetworkError(http_request.url.host, exc, response))
        finally:
            response.close()

    @staticmethod
    def _decode(response: httpx.Response, result: Any) -> Any:
        if result is None:
            return None
        if _is_sink(result):
            for chunk in response.iter_bytes():
                result.write(chunk)
            return result
        if not response.content:
            return None
        try:
            return pydantic.TypeAdapter(result).validate_json(response.content)
        except pydantic.ValidationError as exc:
            msg = f"Invalid response body from {response.request.url}: {exc}"
            raise ResponseDecodeError(msg, response) from exc
