"""Prometheus instrumentation for API clients.

Metrics are registered on a dedicated registry per :class:`ClientMetrics`
instead of the global one, so several clients can coexist in one process
and an application decides itself whether to expose them.
"""

from prometheus_client import CollectorRegistry, Counter


class ClientMetrics:
    """Request and token refresh counters for one client."""

    def __init__(self, registry: CollectorRegistry | None = None):
        self.registry = registry if registry is not None else CollectorRegistry()
        self.requests = Counter(
            "k8scluster_client_requests",
            "HTTP requests sent to the container service",
            labelnames=["method", "status"],
            registry=self.registry,
        )
        self.token_refreshes = Counter(
            "k8scluster_client_token_refresh",
            "Token refresh attempts triggered by 401 responses",
            labelnames=["outcome"],
            registry=self.registry,
        )

    def record_request(self, method: str, status_code: int) -> None:
        """Count one executed attempt; status 0 means no response arrived."""
        status = str(status_code) if status_code else "error"
        self.requests.labels(method=method, status=status).inc()

    def record_refresh(self, outcome: str) -> None:
        self.token_refreshes.labels(outcome=outcome).inc()

    def request_count(self, method: str, status: str) -> float:
        """Return the current request count for a label pair."""
        value = self.registry.get_sample_value(
            "k8scluster_client_requests_total",
            {"method": method, "status": status},
        )
        return value or 0.0

    def refresh_count(self, outcome: str) -> float:
        value = self.registry.get_sample_value(
            "k8scluster_client_token_refresh_total",
            {"outcome": outcome},
        )
        return value or 0.0
