"""Tests for configuration loading, endpoint resolution and sessions."""

import json

import pydantic
import pytest

from k8scluster_client import config
from k8scluster_client.session import Session

# ---------------------------------------------------------------------------
# ClientConfig
# ---------------------------------------------------------------------------


def test_defaults():
    cfg = config.ClientConfig()
    assert cfg.region == config.DEFAULT_REGION
    assert cfg.timeout == config.DEFAULT_TIMEOUT
    assert cfg.iam_access_token is None


def test_timeout_must_be_positive():
    with pytest.raises(pydantic.ValidationError):
        config.ClientConfig(timeout=0)


def test_copy_config_is_independent():
    """Changing a copy never changes the original."""
    original = config.ClientConfig(iam_access_token="Bearer a")
    copied = original.copy_config()
    copied.iam_access_token = "Bearer b"

    assert original.iam_access_token == "Bearer a"


def test_from_env_reads_variables(monkeypatch):
    monkeypatch.setenv("IC_API_KEY", "key")
    monkeypatch.setenv("IC_REGION", "eu-de")
    monkeypatch.setenv("IC_TIMEOUT", "12.5")
    monkeypatch.setenv("K8SCLUSTER_CONTAINER_ENDPOINT", "https://override.test")

    cfg = config.ClientConfig.from_env()

    assert cfg.api_key == "key"
    assert cfg.region == "eu-de"
    assert cfg.timeout == 12.5  # noqa: PLR2004
    assert cfg.container_endpoint == "https://override.test"


def test_from_env_falls_back_to_bm_api_key(monkeypatch):
    monkeypatch.delenv("IC_API_KEY", raising=False)
    monkeypatch.setenv("BM_API_KEY", "legacy")

    assert config.ClientConfig.from_env().api_key == "legacy"


def test_load_config_reads_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"region": "jp-tok", "log_level": "DEBUG"}))

    cfg = config.load_config(str(path))

    assert cfg.region == "jp-tok"
    assert cfg.log_level == "DEBUG"


def test_load_config_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.load_config(str(tmp_path / "missing.json"))


# ---------------------------------------------------------------------------
# EndpointLocator
# ---------------------------------------------------------------------------


def test_locator_resolves_supported_region():
    locator = config.ClientConfig(region="us-east").endpoint_locator

    assert locator.container_endpoint() == "https://containers.cloud.ibm.com"
    assert locator.vpc_container_endpoint() == "https://containers.cloud.ibm.com"
    assert locator.iam_endpoint() == "https://iam.cloud.ibm.com"


def test_locator_override_wins_and_is_trimmed():
    cfg = config.ClientConfig(region="nowhere", container_endpoint="https://c.test/")

    assert cfg.endpoint_locator.endpoint_for(config.ServiceName.CONTAINER) == "https://c.test"


def test_locator_unknown_region_raises():
    locator = config.ClientConfig(region="nowhere").endpoint_locator

    with pytest.raises(config.EndpointNotFoundError, match="nowhere"):
        locator.vpc_container_endpoint()


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


def test_session_new_prefers_config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"region": "au-syd"}))
    monkeypatch.setenv("IC_REGION", "eu-gb")

    assert Session.new(str(path)).config.region == "au-syd"


def test_session_new_uses_config_path_env(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"region": "br-sao"}))
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(path))

    assert Session.new().config.region == "br-sao"


def test_session_new_falls_back_to_environment(monkeypatch):
    monkeypatch.delenv(config.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setenv("IC_REGION", "ca-tor")

    assert Session.new().config.region == "ca-tor"
