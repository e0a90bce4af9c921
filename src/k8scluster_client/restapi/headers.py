"""Routing headers and default authentication headers.

Routing headers select the tenant (account, org, space) a call acts on, or
carry credentials for the classic infrastructure provider. They form a
closed union; :func:`project_header` maps each kind onto HTTP headers.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from .. import __version__
from ..config import ClientConfig

AUTHORIZATION_HEADER = "Authorization"
IAM_REFRESH_TOKEN_HEADER = "X-Auth-Refresh-Token"
UAA_ACCESS_TOKEN_HEADER = "X-Auth-Uaa-Token"
USER_AGENT_HEADER = "User-Agent"

ORG_ID_HEADER = "X-Auth-Resource-Org"
SPACE_ID_HEADER = "X-Auth-Resource-Space"
ACCOUNT_ID_HEADER = "X-Auth-Resource-Account"

SL_USERNAME_HEADER = "X-Auth-Softlayer-Username"
SL_API_KEY_HEADER = "X-Auth-Softlayer-APIKey"


@dataclass(frozen=True)
class ClusterTargetHeader:
    """Tenant context a call is routed to."""

    org_id: str = ""
    space_id: str = ""
    account_id: str = ""


@dataclass(frozen=True)
class ClusterSoftlayerHeader:
    """Credentials for the classic infrastructure account."""

    softlayer_username: str = ""
    softlayer_api_key: str = ""


RoutingHeader: TypeAlias = ClusterTargetHeader | ClusterSoftlayerHeader


def project_header(value: Any) -> dict[str, str]:
    """Project a routing header value onto HTTP header names.

    Args:
        value: A :data:`RoutingHeader`. Anything else, ``None`` included,
            projects to no headers.

    Returns:
        Mapping of HTTP header name to value.
    """
    match value:
        case ClusterTargetHeader(org_id=org, space_id=space, account_id=account):
            return {
                ORG_ID_HEADER: org,
                SPACE_ID_HEADER: space,
                ACCOUNT_ID_HEADER: account,
            }
        case ClusterSoftlayerHeader(
            softlayer_username=username,
            softlayer_api_key=api_key,
        ):
            return {
                SL_USERNAME_HEADER: username,
                SL_API_KEY_HEADER: api_key,
            }
        case _:
            return {}


def user_agent() -> str:
    return f"k8scluster-client/{__version__}"


def default_cluster_auth_headers(config: ClientConfig) -> dict[str, str]:
    """Build the headers sent with every container service call.

    Reads the tokens from ``config`` at call time, so headers built after a
    token refresh carry the new token.
    """
    headers = {USER_AGENT_HEADER: user_agent()}
    if config.iam_access_token:
        headers[AUTHORIZATION_HEADER] = config.iam_access_token
    if config.iam_refresh_token:
        headers[IAM_REFRESH_TOKEN_HEADER] = config.iam_refresh_token
    if config.uaa_access_token:
        headers[UAA_ACCESS_TOKEN_HEADER] = config.uaa_access_token
    return headers


def merge_headers(
    defaults: Mapping[str, str],
    overrides: Mapping[str, str],
) -> dict[str, str]:
    """Merge request headers over defaults, matching names case-insensitively."""
    merged = {
        name: value
        for name, value in defaults.items()
        if name.lower() not in {key.lower() for key in overrides}
    }
    merged.update(overrides)
    return merged
