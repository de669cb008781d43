"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from jupiter_sdk.client import JupiterClient


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's own Jupiter env vars out of the tests."""
    for var in ("JUPITER_API_KEY", "JUPITER_BASE_URL", "JUPITER_WALLET"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def client() -> JupiterClient:
    return JupiterClient()


@pytest.fixture
def pro_client() -> JupiterClient:
    return JupiterClient(base_url="https://api.jup.ag", api_key="test-key-123")


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "client": {"base_url": "https://api.jup.ag", "timeout_seconds": 15},
        "swap": {"slippage_bps": 100, "exclude_routers": ["okx"]},
        "wallet": {"address": "EXBdeRCdiNChKyD7akt64n9HgSXEpUtpPEhmbnm4L6iH"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
