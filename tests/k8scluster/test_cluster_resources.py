"""Tests for the v1 Workers, Subnets and Webhooks APIs."""

import pytest

from k8scluster_client import k8scluster
from k8scluster_client.k8scluster.types import WebHook, WorkerParam, WorkerUpdateParam
from k8scluster_client.restapi import ClusterTargetHeader

TARGET = ClusterTargetHeader(account_id="a1")


@pytest.fixture
def client(session, http_client, refresher) -> k8scluster.Client:
    return k8scluster.Client(session, http_client=http_client, token_refresher=refresher)


def test_resource_apis_share_one_core(client):
    assert client.clusters.client is client.core
    assert client.workers.client is client.core
    assert client.subnets.client is client.core
    assert client.webhooks.client is client.core


# ---------------------------------------------------------------------------
# Workers
# ---------------------------------------------------------------------------


def test_list_workers(server, client):
    server.respond(
        200,
        [
            {"id": "kube-dal10-w1", "state": "normal", "privateIP": "10.0.0.1"},
            {"id": "kube-dal10-w2", "state": "provisioning"},
        ],
    )

    workers = client.workers.list("test", TARGET)

    assert [w.id for w in workers] == ["kube-dal10-w1", "kube-dal10-w2"]
    assert workers[0].private_ip == "10.0.0.1"
    assert server.last_request.url.path == "/v1/clusters/test/workers"


def test_get_worker(server, client):
    server.respond(200, {"id": "kube-dal10-w1", "machineType": "b3c.4x16"})

    worker = client.workers.get("kube-dal10-w1", TARGET)

    assert worker.machine_type == "b3c.4x16"
    assert server.last_request.url.path == "/v1/workers/kube-dal10-w1"


def test_add_workers(server, client):
    server.respond(201)

    client.workers.add("test", WorkerParam(count=2), TARGET)

    assert server.last_request.method == "POST"
    assert server.last_request.url.path == "/v1/clusters/test/workers"
    assert server.last_json() == {"count": 2}


def test_delete_worker(server, client):
    server.respond(204)

    client.workers.delete("test", "kube-dal10-w1", TARGET)

    assert server.last_request.method == "DELETE"
    assert server.last_request.url.path == "/v1/clusters/test/workers/kube-dal10-w1"


def test_update_worker(server, client):
    server.respond(204)

    client.workers.update("test", "kube-dal10-w1", WorkerUpdateParam(action="reboot"), TARGET)

    assert server.last_request.method == "PUT"
    assert server.last_json() == {"action": "reboot"}


# ---------------------------------------------------------------------------
# Subnets
# ---------------------------------------------------------------------------


def test_list_subnets_uses_snake_case_fields(server, client):
    server.respond(
        200,
        [
            {
                "id": "1109876",
                "type": "private",
                "vlan_id": "1764905",
                "ip_addresses": ["10.98.25.2", "10.98.25.3"],
                "properties": {"cidr": "26", "subnet_type": "additional_primary"},
            },
        ],
    )

    subnets = client.subnets.list(TARGET)

    assert subnets[0].vlan_id == "1764905"
    assert subnets[0].ip_addresses == ["10.98.25.2", "10.98.25.3"]
    assert subnets[0].properties.subnet_type == "additional_primary"
    assert server.last_request.url.path == "/v1/subnets"


def test_add_subnet(server, client):
    server.respond(201)

    client.subnets.add_subnet("test", "1109876", TARGET)

    assert server.last_request.method == "PUT"
    assert server.last_request.url.path == "/v1/clusters/test/subnets/1109876"


# ---------------------------------------------------------------------------
# Webhooks
# ---------------------------------------------------------------------------


def test_list_webhooks(server, client):
    server.respond(200, [{"level": "Normal", "type": "slack", "url": "https://hooks.test/x"}])

    hooks = client.webhooks.list("test", TARGET)

    assert hooks == [WebHook(level="Normal", type="slack", url="https://hooks.test/x")]
    assert server.last_request.url.path == "/v1/clusters/test/webhooks"


def test_add_webhook(server, client):
    server.respond(200)

    client.webhooks.add("test", WebHook(level="Warning", type="slack", url="https://h"), TARGET)

    assert server.last_request.method == "POST"
    assert server.last_json() == {"level": "Warning", "type": "slack", "url": "https://h"}
