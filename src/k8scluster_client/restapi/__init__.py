"""Authenticated REST core for the container service.

Exports:
    ClusterClient: HTTP core with routing headers and token refresh.
    ApiResult: Response plus decoded body returned by the primitives.
    ClusterTargetHeader, ClusterSoftlayerHeader: Routing header kinds.
    IAMTokenRefresher, TokenRefresher: Token refresh implementation and
        protocol.
    errors: Module containing the error hierarchy.
"""

from . import errors
from .auth import IAMTokenRefresher, TokenRefresher
from .client import ApiResult, ClusterClient, clean_path
from .errors import (
    BeforeRequestError,
    ContainerApiError,
    InvalidTokenError,
    NetworkError,
    RequestFailure,
    ResponseDecodeError,
    TokenRefreshError,
)
from .headers import ClusterSoftlayerHeader, ClusterTargetHeader, RoutingHeader, project_header
from .request import Request

__all__ = [
    "ApiResult",
    "BeforeRequestError",
    "ClusterClient",
    "ClusterSoftlayerHeader",
    "ClusterTargetHeader",
    "ContainerApiError",
    "IAMTokenRefresher",
    "InvalidTokenError",
    "NetworkError",
    "Request",
    "RequestFailure",
    "ResponseDecodeError",
    "RoutingHeader",
    "TokenRefreshError",
    "TokenRefresher",
    "clean_path",
    "errors",
    "project_header",
]
