"""v1 cluster API.

Exports:
    Client: Entry point aggregating the v1 resource APIs.
    Clusters, Workers, Subnets, Webhooks: Resource API classes.
    types: Module containing the payload models.
"""

from ..restapi import ClusterClient
from ..session import Session
from . import types
from .clusters import Clusters
from .subnets import Subnets
from .webhooks import Webhooks
from .workers import Workers


class Client:
    """Central entry point for the v1 cluster APIs.

    All resource APIs share the same :class:`ClusterClient`, and with it the
    transport and the token state.
    """

    def __init__(self, session: Session, **client_options):
        """Create the client core for the container service.

        Args:
            session: Session to derive the configuration from.
            **client_options: Passed on to :class:`ClusterClient`.

        Raises:
            EndpointNotFoundError: If the container endpoint can't be resolved.
        """
        self.core = ClusterClient(session, **client_options)
        self.clusters = Clusters(self.core)
        self.workers = Workers(self.core)
        self.subnets = Subnets(self.core)
        self.webhooks = Webhooks(self.core)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self.core.close()


__all__ = [
    "Client",
    "Clusters",
    "Subnets",
    "Webhooks",
    "Workers",
    "types",
]
