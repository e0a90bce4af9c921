"""Command line example for the cluster API client.

Runs the ingress secret and instance workflow against a cluster and lists
v1 clusters. Configuration comes from ``--config`` or the environment, see
:meth:`Session.new`.
"""

from typing import Annotated

import typer

from . import containerv2, k8scluster
from .config import configure_logging
from .containerv2.types import (
    InstanceDeleteConfig,
    InstanceRegisterConfig,
    SecretCreateConfig,
    SecretDeleteConfig,
)
from .restapi import ContainerApiError
from .session import Session

EXAMPLE_SECRET_NAME = "testabc123"

app = typer.Typer(no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[str | None, typer.Option(help="Path to a JSON config file")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log requests")] = False,
):
    """Work with clusters of the container service."""
    session = Session.new(config)
    configure_logging("DEBUG" if verbose else session.config.log_level)
    ctx.obj = session


@app.command()
def ingress(
    ctx: typer.Context,
    cluster: Annotated[str, typer.Option("--cluster", help="Cluster name or ID")],
    cert_crn: Annotated[str, typer.Option(help="CRN of a certificate")] = "",
    instance_crn: Annotated[str, typer.Option(help="CRN of a secrets manager instance")] = "",
):
    """Create, read back and delete an ingress secret and/or instance."""
    try:
        with containerv2.Client(ctx.obj) as client:
            if instance_crn:
                _instance_round_trip(client.ingresses, cluster, instance_crn)
            if cert_crn:
                _secret_round_trip(client.ingresses, cluster, cert_crn)
    except ContainerApiError as exc:
        typer.echo(f"err= {exc}")
        raise typer.Exit(1) from exc


@app.command()
def clusters(ctx: typer.Context):
    """List v1 clusters."""
    try:
        with k8scluster.Client(ctx.obj) as client:
            infos = client.clusters.list()
    except ContainerApiError as exc:
        typer.echo(f"err= {exc}")
        raise typer.Exit(1) from exc

    typer.echo(f"{'NAME':<32} {'ID':<24} {'STATE':<12} LOCATION")
    for info in infos:
        typer.echo(f"{info.name:<32} {info.id:<24} {info.state:<12} {info.location}")


def _secret_round_trip(ingresses: containerv2.Ingresses, cluster: str, cert_crn: str) -> None:
    secret = ingresses.create_ingress_secret(
        SecretCreateConfig(
            cluster=cluster,
            name=EXAMPLE_SECRET_NAME,
            crn=cert_crn,
            persistence=True,
        ),
    )
    ingresses.get_ingress_secret(cluster, EXAMPLE_SECRET_NAME, secret.namespace)
    ingresses.delete_ingress_secret(
        SecretDeleteConfig(
            cluster=cluster,
            name=EXAMPLE_SECRET_NAME,
            namespace=secret.namespace,
        ),
    )
    typer.echo(f"Ingress secret {EXAMPLE_SECRET_NAME} created and deleted")


def _instance_round_trip(
    ingresses: containerv2.Ingresses,
    cluster: str,
    instance_crn: str,
) -> None:
    instance = ingresses.register_ingress_instance(
        InstanceRegisterConfig(cluster=cluster, crn=instance_crn),
    )
    ingresses.get_ingress_instance(cluster, instance.name)
    ingresses.delete_ingress_instance(InstanceDeleteConfig(cluster=cluster, name=instance.name))
    typer.echo(f"Ingress instance {instance.name} registered and unregistered")


def go():
    app()


if __name__ == "__main__":
    go()
