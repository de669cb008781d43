"""Typed Python client for the Jupiter aggregator REST APIs."""

from jupiter_sdk.client import LITE_API_BASE, PRO_API_BASE, JupiterClient
from jupiter_sdk.errors import ApiError, DeserializationError, RequestError, TransportError

__all__ = [
    "LITE_API_BASE",
    "PRO_API_BASE",
    "ApiError",
    "DeserializationError",
    "JupiterClient",
    "RequestError",
    "TransportError",
]
