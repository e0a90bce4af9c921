"""Ingress secret and secret manager instance calls."""

from ..restapi import ClusterClient
from .types import (
    IngressInstance,
    InstanceDeleteConfig,
    InstanceRegisterConfig,
    Secret,
    SecretCreateConfig,
    SecretDeleteConfig,
    SecretUpdateConfig,
)

_SECRET_PATH = "/ingress/v2/secret"


class Ingresses:
    """Manage ingress TLS secrets and the instances they are synced from."""

    def __init__(self, client: ClusterClient):
        self.client = client

    def create_ingress_secret(self, params: SecretCreateConfig) -> Secret:
        result = self.client.post(f"{_SECRET_PATH}/createSecret", params, Secret)
        return result.data or Secret()

    def update_ingress_secret(self, params: SecretUpdateConfig) -> Secret:
        result = self.client.post(f"{_SECRET_PATH}/updateSecret", params, Secret)
        return result.data or Secret()

    def delete_ingress_secret(self, params: SecretDeleteConfig) -> None:
        self.client.post(f"{_SECRET_PATH}/deleteSecret", params)

    def get_ingress_secret(self, cluster: str, name: str, namespace: str) -> Secret:
        result = self.client.get(
            f"{_SECRET_PATH}/getSecret",
            Secret,
            params={"cluster": cluster, "name": name, "namespace": namespace},
        )
        return result.data or Secret()

    def get_ingress_secret_list(self, cluster: str, show_deleted: bool = False) -> list[Secret]:
        result = self.client.get(
            f"{_SECRET_PATH}/getSecrets",
            list[Secret],
            params={"cluster": cluster, "showDeleted": str(show_deleted).lower()},
        )
        return result.data or []

    def register_ingress_instance(self, params: InstanceRegisterConfig) -> IngressInstance:
        result = self.client.post(f"{_SECRET_PATH}/registerInstance", params, IngressInstance)
        return result.data or IngressInstance()

    def get_ingress_instance(self, cluster: str, name: str) -> IngressInstance:
        result = self.client.get(
            f"{_SECRET_PATH}/getInstance",
            IngressInstance,
            params={"cluster": cluster, "name": name},
        )
        return result.data or IngressInstance()

    def delete_ingress_instance(self, params: InstanceDeleteConfig) -> None:
        self.client.post(f"{_SECRET_PATH}/unregisterInstance", params)
