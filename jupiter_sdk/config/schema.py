"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from jupiter_sdk.client import LITE_API_BASE
from jupiter_sdk.models.swap import SwapMode


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = LITE_API_BASE
    api_key: str = ""
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class SwapDefaults(BaseModel):
    """Defaults applied by the CLI when building quote and order requests."""

    model_config = {"extra": "forbid"}

    slippage_bps: int = Field(default=50, ge=0, le=10_000)
    swap_mode: SwapMode = SwapMode.EXACT_IN
    restrict_intermediate_tokens: bool = True
    exclude_routers: list[str] = []


class WalletConfig(BaseModel):
    model_config = {"extra": "forbid"}

    # Public key only; signing keys never go in config
    address: str = ""


class JupiterConfig(BaseModel):
    model_config = {"extra": "forbid"}

    client: ClientConfig = ClientConfig()
    swap: SwapDefaults = SwapDefaults()
    wallet: WalletConfig = WalletConfig()
