"""Worker node calls for v1 clusters."""

from ..restapi import ClusterClient, ClusterTargetHeader
from .types import Worker, WorkerParam, WorkerUpdateParam


class Workers:
    def __init__(self, client: ClusterClient):
        self.client = client

    def list(
        self,
        cluster_name: str,
        target: ClusterTargetHeader | None = None,
    ) -> list[Worker]:
        result = self.client.get(f"/v1/clusters/{cluster_name}/workers", list[Worker], target)
        return result.data or []

    def get(self, worker_id: str, target: ClusterTargetHeader | None = None) -> Worker:
        result = self.client.get(f"/v1/workers/{worker_id}", Worker, target)
        return result.data or Worker()

    def add(
        self,
        cluster_name: str,
        params: WorkerParam,
        target: ClusterTargetHeader | None = None,
    ) -> None:
        self.client.post(f"/v1/clusters/{cluster_name}/workers", params, None, target)

    def delete(
        self,
        cluster_name: str,
        worker_id: str,
        target: ClusterTargetHeader | None = None,
    ) -> None:
        self.client.delete(f"/v1/clusters/{cluster_name}/workers/{worker_id}", target)

    def update(
        self,
        cluster_name: str,
        worker_id: str,
        params: WorkerUpdateParam,
        target: ClusterTargetHeader | None = None,
    ) -> None:
        """Apply an action such as ``reboot`` or ``reload`` to a worker."""
        self.client.put(
            f"/v1/clusters/{cluster_name}/workers/{worker_id}",
            params,
            None,
            target,
        )
