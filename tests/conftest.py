"""Shared fixtures: an in-process fake API server and client wiring."""

import json
from collections.abc import Callable
from unittest.mock import MagicMock

import httpx
import pytest

from k8scluster_client.config import ClientConfig
from k8scluster_client.restapi import ClusterClient
from k8scluster_client.session import Session

CONTAINER_URL = "https://containers.test"
VPC_CONTAINER_URL = "https://vpc-containers.test"
IAM_URL = "https://iam.test"

ACCESS_TOKEN = "Bearer old-token"
REFRESHED_TOKEN = "Bearer new-token"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeServer:
    """Serves queued handlers in order and records every request received.

    Requests arriving after the queue is exhausted get a 500 response.
    """

    def __init__(self):
        self.handlers: list[Handler] = []
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if not self.handlers:
            return httpx.Response(500, text="unhandled request")
        return self.handlers.pop(0)(request)

    def append(self, handler: Handler) -> None:
        self.handlers.append(handler)

    def respond(self, status_code: int, body=None, **kwargs) -> None:
        """Queue a canned response; dicts and lists are sent as JSON."""
        if isinstance(body, (dict, list)):
            kwargs["json"] = body
        elif body is not None:
            kwargs["text"] = body
        self.append(lambda _request: httpx.Response(status_code, **kwargs))

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def http_client(server: FakeServer) -> httpx.Client:
    with httpx.Client(transport=httpx.MockTransport(server)) as client:
        yield client


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(
        iam_access_token=ACCESS_TOKEN,
        iam_refresh_token="refresh-1",
        container_endpoint=CONTAINER_URL,
        vpc_container_endpoint=VPC_CONTAINER_URL,
        iam_endpoint=IAM_URL,
    )


@pytest.fixture
def session(config: ClientConfig) -> Session:
    return Session(config)


@pytest.fixture
def refresher() -> MagicMock:
    """Token refresher mock with no side effects configured."""
    return MagicMock(name="token_refresher")


@pytest.fixture
def core(session: Session, http_client: httpx.Client, refresher: MagicMock) -> ClusterClient:
    """Client core for the container service backed by the fake server."""
    return ClusterClient(session, http_client=http_client, token_refresher=refresher)
