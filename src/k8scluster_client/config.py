"""Client configuration, endpoint discovery and logging setup."""

import enum
import json
import logging
import os
import pathlib

import pydantic
import structlog

logger = structlog.get_logger(__name__)

DEFAULT_REGION = "us-south"

DEFAULT_TIMEOUT = 60.0

CONFIG_ENV_VAR = "K8SCLUSTER_CONFIG_PATH"

_CONTAINER_ENDPOINT = "https://containers.cloud.ibm.com"
_IAM_ENDPOINT = "https://iam.cloud.ibm.com"

_SUPPORTED_REGIONS = frozenset(
    {
        "us-south",
        "us-east",
        "eu-gb",
        "eu-de",
        "eu-es",
        "jp-tok",
        "jp-osa",
        "au-syd",
        "ca-tor",
        "br-sao",
    },
)


class ServiceName(str, enum.Enum):
    """Logical services an endpoint can be resolved for."""

    CONTAINER = "container"
    VPC_CONTAINER = "vpc-container"
    IAM = "iam"


class EndpointNotFoundError(Exception):
    """Raised when no endpoint is known for a service in a region."""


class ClientConfig(pydantic.BaseModel):
    """Configuration shared by all API clients created from a session."""

    api_key: str | None = pydantic.Field(None, description="IAM API key")
    iam_access_token: str | None = pydantic.Field(
        None,
        description="IAM access token, including the 'Bearer ' prefix",
    )
    iam_refresh_token: str | None = pydantic.Field(
        None,
        description="IAM refresh token",
    )
    uaa_access_token: str | None = pydantic.Field(
        None,
        description="UAA access token forwarded to the container service",
    )
    region: str = pydantic.Field(DEFAULT_REGION, description="Target region")
    container_endpoint: str | None = pydantic.Field(
        None,
        description="Override for the container service base URL",
    )
    vpc_container_endpoint: str | None = pydantic.Field(
        None,
        description="Override for the VPC container service base URL",
    )
    iam_endpoint: str | None = pydantic.Field(
        None,
        description="Override for the IAM token service base URL",
    )
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="HTTP request timeout in seconds",
        gt=0,
    )
    log_level: str = pydantic.Field("INFO", description="Logging level")

    def copy_config(self) -> "ClientConfig":
        """Return an independent deep copy of this configuration."""
        return self.model_copy(deep=True)

    @property
    def endpoint_locator(self) -> "EndpointLocator":
        return EndpointLocator(self)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a configuration from environment variables.

        Unset variables fall back to the model defaults.
        """
        env = {
            "api_key": os.environ.get("IC_API_KEY") or os.environ.get("BM_API_KEY"),
            "iam_access_token": os.environ.get("IC_IAM_TOKEN"),
            "iam_refresh_token": os.environ.get("IC_IAM_REFRESH_TOKEN"),
            "region": os.environ.get("IC_REGION"),
            "timeout": os.environ.get("IC_TIMEOUT"),
            "container_endpoint": os.environ.get("K8SCLUSTER_CONTAINER_ENDPOINT"),
            "vpc_container_endpoint": os.environ.get(
                "K8SCLUSTER_VPC_CONTAINER_ENDPOINT",
            ),
            "iam_endpoint": os.environ.get("K8SCLUSTER_IAM_ENDPOINT"),
            "log_level": os.environ.get("K8SCLUSTER_LOG_LEVEL"),
        }
        return cls(**{key: value for key, value in env.items() if value})


class EndpointLocator:
    """Resolves base URLs for the services used by this library.

    Explicit overrides in the configuration always win over the built-in
    regional table.
    """

    def __init__(self, config: ClientConfig):
        self._config = config

    def endpoint_for(self, service: ServiceName) -> str:
        """Return the base URL for a service.

        Args:
            service: Logical service to resolve.

        Returns:
            Base URL without a trailing slash.

        Raises:
            EndpointNotFoundError: If the region is not supported and no
                override is configured.
        """
        overrides = {
            ServiceName.CONTAINER: self._config.container_endpoint,
            ServiceName.VPC_CONTAINER: self._config.vpc_container_endpoint,
            ServiceName.IAM: self._config.iam_endpoint,
        }
        if override := overrides[service]:
            return override.rstrip("/")

        if self._config.region not in _SUPPORTED_REGIONS:
            msg = (
                f"{service.value} endpoint doesn't exist for region: "
                f"{self._config.region!r}"
            )
            raise EndpointNotFoundError(msg)

        if service is ServiceName.IAM:
            return _IAM_ENDPOINT
        return _CONTAINER_ENDPOINT

    def container_endpoint(self) -> str:
        return self.endpoint_for(ServiceName.CONTAINER)

    def vpc_container_endpoint(self) -> str:
        return self.endpoint_for(ServiceName.VPC_CONTAINER)

    def iam_endpoint(self) -> str:
        return self.endpoint_for(ServiceName.IAM)


def configure_logging(log_level_name: str) -> None:
    """Configure structlog for logfmt output."""
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.LogfmtRenderer(
                key_order=("timestamp", "level", "msg"),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def load_config(config_path: str) -> ClientConfig:
    """Load configuration from JSON file."""
    path = pathlib.Path(config_path)
    if not path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with path.open("r") as f:
        data = json.load(f)

    logger.debug("Loaded configuration file", path=str(path))
    return ClientConfig(**data)
