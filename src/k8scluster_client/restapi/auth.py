"""IAM token handling.

Provides the :class:`TokenRefresher` protocol the REST core depends on and
an implementation backed by the IAM token service.
"""

import threading
import time
from typing import Protocol

import httpx
import structlog

from ..config import ClientConfig, ServiceName
from .errors import InvalidTokenError, NetworkError, RequestFailure
from .headers import USER_AGENT_HEADER, user_agent

logger = structlog.get_logger(__name__)

TOKEN_PATH = "/identity/token"

REFRESH_TOKEN_GRANT = "refresh_token"
API_KEY_GRANT = "urn:ibm:params:oauth:grant-type:apikey"

# Client credentials the token service expects from CLI-style clients.
_CLIENT_AUTH = ("bx", "bx")


class TokenRefresher(Protocol):
    """Something that can obtain a fresh bearer token on demand."""

    def refresh_token(self) -> str:
        """Return a new access token.

        The returned value, including its ``Bearer `` prefix, becomes the
        ``Authorization`` header of the retried request and of later calls.

        Raises:
            InvalidTokenError: If the current credentials were rejected.
        """
        ...


class IAMTokenRefresher:
    """Obtains IAM tokens and stores them in a client configuration.

    The tokens are written into ``config`` under a lock, so headers built from
    the same configuration after :meth:`refresh_token` returns carry the new
    token. Concurrent callers are serialized.
    """

    def __init__(self, config: ClientConfig, http_client: httpx.Client):
        """Initialize the refresher.

        Args:
            config: Configuration whose tokens are read and replaced.
            http_client: Transport used to call the token service.

        Raises:
            EndpointNotFoundError: If no IAM endpoint is known for the
                configured region.
        """
        self._config = config
        self._http_client = http_client
        self._token_url = config.endpoint_locator.endpoint_for(ServiceName.IAM) + TOKEN_PATH
        self._lock = threading.Lock()

    @property
    def token_url(self) -> str:
        return self._token_url

    def authenticate_api_key(self, api_key: str | None = None) -> None:
        """Exchange an API key for access and refresh tokens.

        Args:
            api_key: Key to exchange; defaults to the configured API key.

        Raises:
            ValueError: If no API key is available.
            InvalidTokenError: If the token service rejects the key.
        """
        api_key = api_key or self._config.api_key
        if not api_key:
            msg = "An API key is required to authenticate"
            raise ValueError(msg)

        with self._lock:
            self._request_token({"grant_type": API_KEY_GRANT, "apikey": api_key})

    def refresh_token(self) -> str:
        """Refresh the access token using the stored refresh token.

        Returns:
            The new ``Authorization`` header value.

        Raises:
            InvalidTokenError: If no refresh token is stored or the token
                service rejects it.
            RequestFailure: If the token service fails otherwise.
            NetworkError: If the token service can't be reached.
        """
        with self._lock:
            refresh_token = self._config.iam_refresh_token
            if not refresh_token:
                msg = "No refresh token available, log in again"
                raise InvalidTokenError(msg)
            return self._request_token(
                {"grant_type": REFRESH_TOKEN_GRANT, "refresh_token": refresh_token},
            )

    def _request_token(self, form: dict[str, str]) -> str:
        start_time = time.time()
        try:
            response = self._http_client.post(
                self._token_url,
                data={**form, "response_type": "cloud_iam"},
                auth=_CLIENT_AUTH,
                headers={
                    "Accept": "application/json",
                    USER_AGENT_HEADER: user_agent(),
                },
            )
        except httpx.TransportError as exc:
            logger.exception("Token request failed", url=self._token_url)
            raise NetworkError(httpx.URL(self._token_url).host, exc) from exc

        logger.debug(
            "Token request completed",
            grant_type=form["grant_type"],
            status_code=response.status_code,
            duration_seconds=round(time.time() - start_time, 3),
        )

        if response.status_code in (400, 401):  # noqa: PLR2004
            raise InvalidTokenError(_error_message(response), response)
        if not response.is_success:
            raise RequestFailure(
                "IAMError",
                _error_message(response),
                response.status_code,
                response,
            )

        data = response.json()
        access_token = f"{data['token_type']} {data['access_token']}"
        self._config.iam_access_token = access_token
        self._config.iam_refresh_token = data.get("refresh_token", form.get("refresh_token"))
        logger.info("IAM token obtained", expires_in_seconds=data.get("expires_in"))
        return access_token


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return str(body.get("errorMessage") or body.get("message") or body)
    return response.text
