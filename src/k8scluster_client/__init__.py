"""Kubernetes cluster management API client.

Typed client for a cloud provider's container service: clusters, workers,
worker pools, subnets, webhooks and ingress secrets, built on an
authenticated HTTP core that refreshes expired tokens transparently.
"""

__version__ = "0.1.0"
