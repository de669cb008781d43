"""YAML config loader with environment overrides and dotted-key lookup."""

import os
from pathlib import Path
from typing import Any

import yaml

from jupiter_sdk.config.defaults import API_KEY_ENV, BASE_URL_ENV, WALLET_ENV
from jupiter_sdk.config.schema import JupiterConfig


def load_config(path: str | Path | None = None) -> JupiterConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields defaults. Environment variables fill
    values the file leaves empty.
    """
    raw: dict = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ValueError(
                f"Config file {path} must contain a mapping, got {type(raw).__name__}"
            )

    for section in ("client", "wallet"):
        raw[section] = raw.get(section) or {}
        if not isinstance(raw[section], dict):
            raise ValueError(f"Config section '{section}' must be a mapping")

    client = raw["client"]
    if not client.get("api_key") and os.environ.get(API_KEY_ENV):
        client["api_key"] = os.environ[API_KEY_ENV]
    if "base_url" not in client and os.environ.get(BASE_URL_ENV):
        client["base_url"] = os.environ[BASE_URL_ENV]

    wallet = raw["wallet"]
    if not wallet.get("address") and os.environ.get(WALLET_ENV):
        wallet["address"] = os.environ[WALLET_ENV]

    return JupiterConfig(**raw)


def get_config_value(config: JupiterConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'client.base_url'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
