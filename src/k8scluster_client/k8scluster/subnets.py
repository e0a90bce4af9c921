"""Portable subnet calls."""

from ..restapi import ClusterClient, ClusterTargetHeader
from .types import Subnet


class Subnets:
    def __init__(self, client: ClusterClient):
        self.client = client

    def list(self, target: ClusterTargetHeader | None = None) -> list[Subnet]:
        result = self.client.get("/v1/subnets", list[Subnet], target)
        return result.data or []

    def add_subnet(
        self,
        cluster_name: str,
        subnet_id: str,
        target: ClusterTargetHeader | None = None,
    ) -> None:
        self.client.put(f"/v1/clusters/{cluster_name}/subnets/{subnet_id}", None, None, target)
