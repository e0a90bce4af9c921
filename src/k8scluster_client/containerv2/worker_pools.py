"""Worker pool calls for VPC clusters."""

import structlog

from ..restapi import ClusterClient, ClusterTargetHeader
from .types import GetWorkerPoolResponse, ResizeWorkerPoolReq, WorkerPoolRequest, WorkerPoolResponse

logger = structlog.get_logger(__name__)


class WorkerPools:
    def __init__(self, client: ClusterClient):
        self.client = client

    def create_worker_pool(
        self,
        params: WorkerPoolRequest,
        target: ClusterTargetHeader | None = None,
    ) -> WorkerPoolResponse:
        result = self.client.post("/v2/vpc/createWorkerPool", params, WorkerPoolResponse, target)
        logger.info("Created worker pool", cluster=params.cluster, name=params.name)
        return result.data or WorkerPoolResponse()

    def get_worker_pool(
        self,
        cluster_name_or_id: str,
        worker_pool_name_or_id: str,
        target: ClusterTargetHeader | None = None,
    ) -> GetWorkerPoolResponse:
        result = self.client.get(
            "/v2/vpc/getWorkerPool",
            GetWorkerPoolResponse,
            target,
            params={"cluster": cluster_name_or_id, "workerpool": worker_pool_name_or_id},
        )
        return result.data or GetWorkerPoolResponse()

    def list_worker_pools(
        self,
        cluster_name_or_id: str,
        target: ClusterTargetHeader | None = None,
    ) -> list[GetWorkerPoolResponse]:
        result = self.client.get(
            "/v2/vpc/getWorkerPools",
            list[GetWorkerPoolResponse],
            target,
            params={"cluster": cluster_name_or_id},
        )
        return result.data or []

    def delete_worker_pool(
        self,
        cluster_name_or_id: str,
        worker_pool_name_or_id: str,
        target: ClusterTargetHeader | None = None,
    ) -> None:
        # Deletion is only served by the v1 route.
        self.client.delete(
            f"/v1/clusters/{cluster_name_or_id}/workerpools/{worker_pool_name_or_id}",
            target,
        )

    def resize_worker_pool(
        self,
        params: ResizeWorkerPoolReq,
        target: ClusterTargetHeader | None = None,
    ) -> None:
        self.client.post("/v2/resizeWorkerPool", params, None, target)
