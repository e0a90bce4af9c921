"""Payload types for the v1 cluster API."""

from pydantic import ConfigDict, Field

from ..restapi.types import ApiModel


class ClusterInfo(ApiModel):
    """A cluster as returned by the list and find calls."""

    guid: str = Field("", alias="GUID")
    created_date: str = ""
    data_center: str = ""
    id: str = ""
    ingress_hostname: str = ""
    ingress_secret_name: str = ""
    location: str = ""
    master_kube_version: str = ""
    modified_date: str = ""
    name: str = ""
    region: str = ""
    server_url: str = Field("", alias="serverURL")
    state: str = ""
    is_paid: bool = False
    worker_count: int = 0


class ClusterCreateRequest(ApiModel):
    billing: str | None = None
    datacenter: str = ""
    isolation: str | None = None
    machine_type: str = ""
    name: str = ""
    private_vlan: str | None = None
    public_vlan: str | None = None
    worker_num: int = 0
    no_subnet: bool = False


class ClusterCreateResponse(ApiModel):
    id: str = ""


class ServiceBindRequest(ApiModel):
    """Binds a service instance into a cluster namespace.

    ``cluster_name_or_id`` selects the URL and is not part of the body.
    """

    cluster_name_or_id: str = Field("", exclude=True)
    space_guid: str = Field("", alias="spaceGUID")
    service_instance_name_or_id: str = Field("", alias="serviceInstanceGUID")
    namespace_id: str = Field("", alias="namespaceID")


class ServiceBindResponse(ApiModel):
    service_instance_guid: str = Field("", alias="serviceInstanceGUID")
    namespace_id: str = Field("", alias="namespaceID")
    secret_name: str = ""
    binding: str = ""


class SubnetProperties(ApiModel):
    model_config = ConfigDict(alias_generator=None)

    cidr: str = ""
    network_identifier: str = ""
    note: str = ""
    subnet_type: str = ""
    display_label: str = ""
    gateway: str = ""


class Subnet(ApiModel):
    """A portable subnet; these payloads use snake_case on the wire."""

    model_config = ConfigDict(alias_generator=None)

    id: str = ""
    type: str = ""
    vlan_id: str = ""
    ip_addresses: list[str] = Field(default_factory=list)
    properties: SubnetProperties = Field(default_factory=SubnetProperties)


class Worker(ApiModel):
    """A worker node of a v1 cluster."""

    billing: str = ""
    error_message: str = ""
    id: str = ""
    isolation: str = ""
    kube_version: str = ""
    machine_type: str = ""
    private_ip: str = Field("", alias="privateIP")
    private_vlan: str = ""
    public_ip: str = Field("", alias="publicIP")
    public_vlan: str = ""
    state: str = ""
    status: str = ""
    location: str = ""


class WorkerParam(ApiModel):
    action: str | None = None
    count: int = 0


class WorkerUpdateParam(ApiModel):
    action: str = ""


class WebHook(ApiModel):
    level: str = ""
    type: str = ""
    url: str = ""
