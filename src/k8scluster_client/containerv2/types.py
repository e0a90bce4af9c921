"""Payload types for the v2 (VPC) worker pool and ingress APIs.

Optional request fields default to ``None`` and are left out of the request
body when unset.
"""

from pydantic import Field

from ..restapi.types import ApiModel


class Zone(ApiModel):
    id: str | None = None
    subnet_id: str | None = Field(None, alias="subnetID")


class WorkerVolumeEncryption(ApiModel):
    kms_instance_id: str | None = Field(None, alias="kmsInstanceID")
    worker_volume_crk_id: str | None = Field(None, alias="workerVolumeCRKID")
    kms_account_id: str | None = Field(None, alias="kmsAccountID")


class CommonWorkerPoolConfig(ApiModel):
    """Worker pool settings shared by create and get payloads."""

    disk_encryption: bool | None = None
    entitlement: str = ""
    flavor: str = ""
    isolation: str | None = None
    labels: dict[str, str] | None = None
    name: str = ""
    vpc_id: str = Field("", alias="vpcID")
    worker_count: int = 0
    zones: list[Zone] = Field(default_factory=list)
    worker_volume_encryption: WorkerVolumeEncryption | None = None
    operating_system: str | None = None
    secondary_storage_option: str | None = None


class WorkerPoolRequest(CommonWorkerPoolConfig):
    cluster: str = ""
    host_pool_id: str | None = Field(None, alias="hostPool")


class WorkerPoolResponse(ApiModel):
    id: str = Field("", alias="workerPoolID")


class Lifecycle(ApiModel):
    actual_state: str = ""
    desired_state: str = ""


class WorkerPoolSubnet(ApiModel):
    id: str = ""
    primary: bool = False


class ZoneResp(ApiModel):
    id: str = ""
    worker_count: int = 0
    subnets: list[WorkerPoolSubnet] = Field(default_factory=list)


class GetWorkerPoolResponse(ApiModel):
    """A worker pool as returned by the get and list calls."""

    host_pool_id: str | None = Field(None, alias="dedicatedHostPoolId")
    flavor: str = ""
    id: str = ""
    isolation: str = ""
    labels: dict[str, str] | None = None
    lifecycle: Lifecycle = Field(default_factory=Lifecycle)
    vpc_id: str = Field("", alias="vpcID")
    worker_count: int = 0
    pool_name: str = ""
    provider: str = ""
    zones: list[ZoneResp] = Field(default_factory=list)
    worker_volume_encryption: WorkerVolumeEncryption | None = None
    operating_system: str | None = None


class ResizeWorkerPoolReq(ApiModel):
    cluster: str = ""
    workerpool: str = ""
    size: int = 0


class SecretCreateConfig(ApiModel):
    cluster: str = ""
    name: str = ""
    namespace: str | None = None
    crn: str = ""
    persistence: bool = False
    type: str | None = None


class SecretUpdateConfig(ApiModel):
    cluster: str = ""
    name: str = ""
    namespace: str = ""
    crn: str | None = None


class SecretDeleteConfig(ApiModel):
    cluster: str = ""
    name: str = ""
    namespace: str = ""


class Secret(ApiModel):
    """An ingress secret synchronized from a certificate or secret manager."""

    cluster: str = ""
    name: str = ""
    namespace: str = ""
    domain: str = ""
    crn: str = ""
    expires_on: str = ""
    status: str = ""
    user_managed: bool = False
    persistence: bool = False
    type: str = ""


class InstanceRegisterConfig(ApiModel):
    cluster: str = ""
    crn: str = ""
    is_default: bool = False
    secret_group_id: str | None = Field(None, alias="secretGroupID")


class InstanceDeleteConfig(ApiModel):
    cluster: str = ""
    name: str = ""


class IngressInstance(ApiModel):
    cluster: str = ""
    name: str = ""
    crn: str = ""
    secret_group_id: str = Field("", alias="secretGroupID")
    secret_group_name: str = ""
    callback_channel: str = ""
    user_managed: bool = False
    is_default: bool = False
    type: str = ""
    status: str = ""
