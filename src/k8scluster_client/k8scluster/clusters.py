"""Cluster lifecycle, credentials and service binding calls."""

import shutil
import time
import zipfile
from pathlib import Path

import structlog

from ..restapi import ClusterClient, ClusterSoftlayerHeader, ClusterTargetHeader
from .types import (
    ClusterCreateRequest,
    ClusterCreateResponse,
    ClusterInfo,
    ServiceBindRequest,
    ServiceBindResponse,
)

logger = structlog.get_logger(__name__)

KUBECONFIG_DIR_PREFIX = "kubeConfig"


class Clusters:
    """Calls under ``/v1/clusters`` and ``/v1/credentials``."""

    def __init__(self, client: ClusterClient):
        self.client = client

    def create(
        self,
        params: ClusterCreateRequest,
        target: ClusterTargetHeader | None = None,
    ) -> ClusterCreateResponse:
        result = self.client.post("/v1/clusters", params, ClusterCreateResponse, target)
        return result.data or ClusterCreateResponse()

    def list(self, target: ClusterTargetHeader | None = None) -> list[ClusterInfo]:
        result = self.client.get("/v1/clusters", list[ClusterInfo], target)
        return result.data or []

    def find(self, name: str, target: ClusterTargetHeader | None = None) -> ClusterInfo:
        result = self.client.get(f"/v1/clusters/{name}", ClusterInfo, target)
        return result.data or ClusterInfo()

    def delete(self, name: str, target: ClusterTargetHeader | None = None) -> None:
        self.client.delete(f"/v1/clusters/{name}", target)

    def get_cluster_config(
        self,
        name: str,
        directory: str | Path,
        target: ClusterTargetHeader | None = None,
    ) -> Path:
        """Download and unpack the kubeconfig of a cluster.

        The archive is saved into ``directory``, extracted there, and the
        extracted ``kubeConfig*`` folder is renamed after the cluster so
        several downloads can live side by side.

        Args:
            name: Cluster name or ID.
            directory: Existing directory to download into.
            target: Optional tenant routing header.

        Returns:
            Path of the kubeconfig YAML file.

        Raises:
            FileNotFoundError: If ``directory`` doesn't exist, or the archive
                doesn't contain a ``kubeConfig*`` folder with a ``.yml`` file.
        """
        directory = Path(directory)
        if not directory.exists():
            msg = f"Path: {str(directory)!r}, to download the config doesn't exist"
            raise FileNotFoundError(msg)

        zip_name = f"{name}_kubeconfig-{time.time_ns()}"
        download_path = directory / f"{zip_name}.zip"
        logger.info("Will download the kubeconfig", path=str(download_path))

        try:
            with download_path.open("wb") as out:
                self.client.get(f"/v1/clusters/{name}/config", out, target)
            logger.info("Downloaded the kubeconfig", path=str(download_path))

            with zipfile.ZipFile(download_path) as archive:
                archive.extractall(directory)
        finally:
            download_path.unlink(missing_ok=True)

        unzipped = next(
            (
                entry
                for entry in sorted(directory.iterdir())
                if entry.is_dir() and entry.name.startswith(KUBECONFIG_DIR_PREFIX)
            ),
            None,
        )
        if unzipped is None:
            msg = f"There is no directory with prefix {KUBECONFIG_DIR_PREFIX} in the unzipped file"
            raise FileNotFoundError(msg)

        # Rename so the folder identifies the cluster it belongs to
        target_dir = directory / zip_name
        shutil.move(unzipped, target_dir)

        for entry in sorted(target_dir.iterdir()):
            if entry.name.endswith(".yml"):
                return entry
        msg = "Unable to locate kube config in zip archive"
        raise FileNotFoundError(msg)

    def unset_credentials(self, target: ClusterTargetHeader | None = None) -> None:
        self.client.delete("/v1/credentials", target)

    def set_credentials(
        self,
        softlayer_username: str,
        softlayer_api_key: str,
        target: ClusterTargetHeader | None = None,
    ) -> None:
        """Store classic infrastructure credentials for the account."""
        self.client.post(
            "/v1/credentials",
            None,
            None,
            target,
            ClusterSoftlayerHeader(
                softlayer_username=softlayer_username,
                softlayer_api_key=softlayer_api_key,
            ),
        )

    def bind_service(
        self,
        params: ServiceBindRequest,
        target: ClusterTargetHeader | None = None,
    ) -> ServiceBindResponse:
        result = self.client.post(
            f"/v1/clusters/{params.cluster_name_or_id}/services",
            params,
            ServiceBindResponse,
            target,
        )
        return result.data or ServiceBindResponse()

    def unbind_service(
        self,
        cluster_name_or_id: str,
        namespace_id: str,
        service_instance_guid: str,
        target: ClusterTargetHeader | None = None,
    ) -> None:
        self.client.delete(
            f"/v1/clusters/{cluster_name_or_id}/services/{namespace_id}/{service_instance_guid}",
            target,
        )
