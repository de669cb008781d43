"""Token and Price API models."""

from enum import StrEnum
from typing import Any

from pydantic import ConfigDict, Field, field_serializer

from jupiter_sdk.models.common import ApiRequest, ApiResponse, join_comma


class Category(StrEnum):
    TOP_ORGANIC_SCORE = "toporganicscore"
    TOP_TRADED = "toptraded"
    TOP_TRENDING = "toptrending"


class Interval(StrEnum):
    FIVE_MINUTES = "5m"
    ONE_HOUR = "1h"
    SIX_HOURS = "6h"
    TWENTY_FOUR_HOURS = "24h"


class Price(ApiResponse):
    """Entry of the /price/v3 map, keyed by mint."""

    usd_price: float
    block_id: int | None = None
    decimals: int
    price_change_24h: float | None = Field(default=None, alias="priceChange24h")


PriceResponse = dict[str, Price]


class TokenPriceRequest(ApiRequest):
    """Query parameters for the deprecated /price/v2 endpoint."""

    token_mints: list[str] = Field(alias="ids")
    vs_token: str | None = None
    show_extra_info: bool | None = None

    @field_serializer("token_mints")
    def _join_mints(self, value: list[str]) -> str:
        return join_comma(value)

    def with_vs_token(self, vs_token: str) -> "TokenPriceRequest":
        """Denominate prices in vs_token instead of USD."""
        self.vs_token = vs_token
        return self

    def with_show_extra_info(self, show: bool) -> "TokenPriceRequest":
        # The API rejects this together with vsToken
        self.show_extra_info = show
        return self


class TokenPrice(ApiResponse):
    id: str
    data_type: str = Field(alias="type")
    price: str
    extra_info: dict[str, Any] | None = None


class TokenPriceResponse(ApiResponse):
    data: dict[str, TokenPrice | None]
    time_taken: float


class TokenInfoResponse(ApiResponse):
    """Token record from the deprecated v1 token list. Keys are snake_case on the wire."""

    model_config = ConfigDict(alias_generator=None, populate_by_name=True, extra="allow")

    address: str
    name: str
    symbol: str
    decimals: int
    logo_uri: str | None = Field(default=None, alias="logoURI")
    tags: list[str | None] = []
    daily_volume: float | None = None
    created_at: str | None = None
    freeze_authority: str | None = None
    mint_authority: str | None = None
    permanent_delegate: str | None = None
    minted_at: str | None = None
    extensions: dict[str, Any] = {}


class NewToken(ApiResponse):
    model_config = ConfigDict(alias_generator=None, populate_by_name=True, extra="allow")

    mint: str
    created_at: str
    metadata_updated_at: int
    name: str
    symbol: str
    decimals: int
    logo_uri: str | None = None
    known_markets: list[str] = []
    mint_authority: str | None = None
    freeze_authority: str | None = None
