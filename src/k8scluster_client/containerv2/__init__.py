"""v2 API for VPC clusters.

Exports:
    Client: Entry point aggregating the v2 resource APIs.
    WorkerPools, Ingresses: Resource API classes.
    types: Module containing the payload models.
"""

from ..config import ServiceName
from ..restapi import ClusterClient
from ..session import Session
from . import types
from .ingress import Ingresses
from .worker_pools import WorkerPools


class Client:
    """Central entry point for the v2 APIs, bound to the VPC container service."""

    def __init__(self, session: Session, **client_options):
        self.core = ClusterClient(session, ServiceName.VPC_CONTAINER, **client_options)
        self.worker_pools = WorkerPools(self.core)
        self.ingresses = Ingresses(self.core)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self.core.close()


__all__ = [
    "Client",
    "Ingresses",
    "WorkerPools",
    "types",
]
