"""Cluster webhook calls."""

from ..restapi import ClusterClient, ClusterTargetHeader
from .types import WebHook


class Webhooks:
    def __init__(self, client: ClusterClient):
        self.client = client

    def list(
        self,
        cluster_name: str,
        target: ClusterTargetHeader | None = None,
    ) -> list[WebHook]:
        result = self.client.get(f"/v1/clusters/{cluster_name}/webhooks", list[WebHook], target)
        return result.data or []

    def add(
        self,
        cluster_name: str,
        params: WebHook,
        target: ClusterTargetHeader | None = None,
    ) -> None:
        self.client.post(f"/v1/clusters/{cluster_name}/webhooks", params, None, target)
