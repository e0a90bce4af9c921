"""Tests for ClientMetrics registry isolation and label handling."""

from prometheus_client import CollectorRegistry

from k8scluster_client import metrics


def test_each_instance_uses_its_own_registry():
    """Two clients in one process don't collide on metric names."""
    first = metrics.ClientMetrics()
    second = metrics.ClientMetrics()

    first.record_request("GET", 200)

    assert first.registry is not second.registry
    assert first.request_count("GET", "200") == 1
    assert second.request_count("GET", "200") == 0


def test_supplied_registry_is_used():
    registry = CollectorRegistry()
    client_metrics = metrics.ClientMetrics(registry)

    client_metrics.record_refresh("invalid_token")

    assert registry.get_sample_value(
        "k8scluster_client_token_refresh_total",
        {"outcome": "invalid_token"},
    ) == 1


def test_zero_status_is_labelled_error():
    client_metrics = metrics.ClientMetrics()

    client_metrics.record_request("POST", 0)

    assert client_metrics.request_count("POST", "error") == 1
    assert client_metrics.request_count("POST", "0") == 0
