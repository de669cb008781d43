"""Ultra API models: order/execute flow, balances, shield, token search."""

from enum import StrEnum

from pydantic import Field, field_serializer

from jupiter_sdk.models.common import ApiRequest, ApiResponse, join_comma
from jupiter_sdk.models.swap import PlatformFee, RoutePlanItem, SwapMode


class UltraOrderRequest(ApiRequest):
    """Query parameters for GET /ultra/v1/order.

    Without a taker the API still quotes, but the response carries no
    transaction to sign.
    """

    input_mint: str
    output_mint: str
    amount: int = Field(ge=0)
    taker: str | None = None
    referral_account: str | None = None
    referral_fee: int | None = Field(default=None, ge=50, le=255)
    exclude_routers: list[str] | None = None

    @field_serializer("exclude_routers")
    def _join_routers(self, value: list[str] | None) -> str | None:
        return join_comma(value)

    def with_taker(self, taker: str) -> "UltraOrderRequest":
        self.taker = taker
        return self

    def with_referral_account(self, referral_account: str) -> "UltraOrderRequest":
        self.referral_account = referral_account
        return self

    def with_referral_fee(self, fee_bps: int) -> "UltraOrderRequest":
        """Referral fee in bps, 50 to 255 inclusive."""
        self.referral_fee = fee_bps
        return self

    def with_exclude_routers(self, routers: list[str]) -> "UltraOrderRequest":
        """Routers to skip, e.g. ["metis", "jupiterz", "hashflow", "dflow", "pyth", "okx"]."""
        self.exclude_routers = routers
        return self


class UltraOrderResponse(ApiResponse):
    input_mint: str
    output_mint: str
    in_amount: str
    out_amount: str
    other_amount_threshold: str
    swap_mode: SwapMode
    slippage_bps: int
    price_impact_pct: str
    route_plan: list[RoutePlanItem]
    fee_mint: str | None = None
    fee_bps: int
    prioritization_fee_lamports: int
    swap_type: str
    transaction: str | None = None
    gasless: bool
    request_id: str
    total_time: int
    taker: str | None = None
    quote_id: str | None = None
    maker: str | None = None
    platform_fee: PlatformFee | None = None
    expire_at: str | None = None


class UltraExecuteOrderRequest(ApiRequest):
    signed_transaction: str
    request_id: str


class ExecuteStatus(StrEnum):
    SUCCESS = "Success"
    FAILED = "Failed"


class SwapEvent(ApiResponse):
    input_mint: str | None = None
    input_amount: str | None = None
    output_mint: str | None = None
    output_amount: str | None = None


class UltraExecuteOrderResponse(ApiResponse):
    status: ExecuteStatus
    signature: str | None = None
    slot: str | None = None
    error: str | None = None
    code: int
    total_input_amount: str | None = None
    total_output_amount: str | None = None
    input_amount_result: str | None = None
    output_amount_result: str | None = None
    swap_events: list[SwapEvent] | None = None


class TokenBalance(ApiResponse):
    amount: str
    ui_amount: float
    slot: int
    is_frozen: bool


TokenBalancesResponse = dict[str, TokenBalance]


class ShieldWarning(ApiResponse):
    warning_type: str = Field(alias="type")
    message: str
    severity: str


class Shield(ApiResponse):
    warnings: dict[str, list[ShieldWarning]]


class Router(ApiResponse):
    id: str
    name: str
    icon: str | None = None


class TokenStats(ApiResponse):
    price_change: float | None = None
    holder_change: float | None = None
    liquidity_change: float | None = None
    volume_change: float | None = None
    buy_volume: float | None = None
    sell_volume: float | None = None
    buy_organic_volume: float | None = None
    sell_organic_volume: float | None = None
    num_buys: int | None = None
    num_sells: int | None = None
    num_traders: int | None = None
    num_organic_buyers: int | None = None
    num_net_buyers: int | None = None


class FirstPool(ApiResponse):
    id: str
    created_at: str


class Audit(ApiResponse):
    is_sus: bool | None = None
    mint_authority_disabled: bool | None = None
    freeze_authority_disabled: bool | None = None
    top_holders_percentage: float | None = None
    dev_balance_percentage: float | None = None
    dev_migrations: int | None = None


class TokenInfo(ApiResponse):
    """Token metadata returned by the v2 token search/tag/category endpoints."""

    id: str
    name: str
    symbol: str
    icon: str | None = None
    decimals: int
    twitter: str | None = None
    telegram: str | None = None
    website: str | None = None
    dev: str | None = None
    circ_supply: float | None = None
    total_supply: float | None = None
    token_program: str
    launchpad: str | None = None
    partner_config: str | None = None
    graduated_pool: str | None = None
    graduated_at: str | None = None
    mint_authority: str | None = None
    freeze_authority: str | None = None
    first_pool: FirstPool | None = None
    holder_count: int | None = None
    audit: Audit | None = None
    organic_score: float | None = None
    organic_score_label: str | None = None
    is_verified: bool | None = None
    cexes: list[str] = []
    tags: list[str] = []
    fdv: float | None = None
    mcap: float | None = None
    usd_price: float | None = None
    price_block_id: int | None = None
    liquidity: float | None = None
    # to_camel would upper-case the unit letter
    stats5m: TokenStats | None = Field(default=None, alias="stats5m")
    stats1h: TokenStats | None = Field(default=None, alias="stats1h")
    stats6h: TokenStats | None = Field(default=None, alias="stats6h")
    stats24h: TokenStats | None = Field(default=None, alias="stats24h")
    ct_likes: int | None = None
    smart_ct_likes: int | None = None
    updated_at: str | None = None
