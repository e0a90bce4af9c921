"""Session holding the base configuration that API clients derive from."""

import os

import structlog

from .config import CONFIG_ENV_VAR, ClientConfig, load_config

logger = structlog.get_logger(__name__)


class Session:
    """Owner of the base configuration.

    API clients never keep a reference to ``config``; they copy it at
    construction, so changing a session later does not affect clients that
    already exist.
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config if config is not None else ClientConfig()

    @classmethod
    def new(cls, config_path: str | None = None) -> "Session":
        """Create a session from a JSON config file or the environment.

        Args:
            config_path: Optional path to a JSON config file. When omitted the
                ``K8SCLUSTER_CONFIG_PATH`` environment variable is consulted,
                and if that is unset too the configuration is read from
                environment variables.

        Raises:
            FileNotFoundError: If a config path is given but doesn't exist.
        """
        resolved_path = config_path or os.environ.get(CONFIG_ENV_VAR)
        if resolved_path:
            config = load_config(resolved_path)
        else:
            config = ClientConfig.from_env()
        logger.debug(
            "Created session",
            region=config.region,
            source=resolved_path or "environment",
        )
        return cls(config)
