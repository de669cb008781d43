"""Swap API models: quote, swap transaction and swap instructions."""

from enum import StrEnum
from typing import Any

from pydantic import Field, field_serializer

from jupiter_sdk.models.common import ApiRequest, ApiResponse, join_comma
from jupiter_sdk.models.dex import DexEnum


class SwapMode(StrEnum):
    EXACT_IN = "ExactIn"
    EXACT_OUT = "ExactOut"


class PriorityLevel(StrEnum):
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "veryHigh"


class QuoteRequest(ApiRequest):
    """Query parameters for GET /swap/v1/quote.

    ``amount`` is raw (before decimals). With ``SwapMode.EXACT_OUT`` it is the
    output amount, otherwise the input amount.
    """

    input_mint: str
    output_mint: str
    amount: int = Field(ge=0)
    slippage_bps: int | None = Field(default=None, ge=0, le=10_000)
    swap_mode: SwapMode | None = None
    dexes: list[DexEnum] | None = None
    exclude_dexes: list[DexEnum] | None = None
    restrict_intermediate_tokens: bool | None = None
    only_direct_routes: bool | None = None
    as_legacy_transaction: bool | None = None
    platform_fee_bps: int | None = Field(default=None, ge=0)
    max_accounts: int | None = Field(default=None, ge=1)
    dynamic_slippage: bool | None = None

    @field_serializer("dexes", "exclude_dexes")
    def _join_dexes(self, value: list[DexEnum] | None) -> str | None:
        return join_comma(value)

    def with_slippage_bps(self, slippage_bps: int) -> "QuoteRequest":
        self.slippage_bps = slippage_bps
        return self

    def with_swap_mode(self, swap_mode: SwapMode) -> "QuoteRequest":
        self.swap_mode = swap_mode
        return self

    def with_dexes(self, dexes: list[DexEnum]) -> "QuoteRequest":
        """Only route through these DEXes."""
        self.dexes = dexes
        return self

    def with_exclude_dexes(self, dexes: list[DexEnum]) -> "QuoteRequest":
        self.exclude_dexes = dexes
        return self

    def with_restrict_intermediate_tokens(self, restrict: bool) -> "QuoteRequest":
        self.restrict_intermediate_tokens = restrict
        return self

    def with_only_direct_routes(self, only_direct: bool) -> "QuoteRequest":
        self.only_direct_routes = only_direct
        return self

    def with_as_legacy_transaction(self, legacy: bool) -> "QuoteRequest":
        self.as_legacy_transaction = legacy
        return self

    def with_platform_fee_bps(self, fee_bps: int) -> "QuoteRequest":
        self.platform_fee_bps = fee_bps
        return self

    def with_max_accounts(self, max_accounts: int) -> "QuoteRequest":
        self.max_accounts = max_accounts
        return self

    def with_dynamic_slippage(self, dynamic: bool) -> "QuoteRequest":
        self.dynamic_slippage = dynamic
        return self


class PlatformFee(ApiResponse):
    amount: str | None = None
    fee_bps: int


class SwapInfo(ApiResponse):
    amm_key: str
    label: str | None = None
    input_mint: str
    output_mint: str
    in_amount: str
    out_amount: str
    fee_amount: str | None = None
    fee_mint: str | None = None


class RoutePlanItem(ApiResponse):
    swap_info: SwapInfo
    percent: int | None = None
    bps: int | None = None


class QuoteResponse(ApiResponse):
    input_mint: str
    in_amount: str
    output_mint: str
    out_amount: str
    other_amount_threshold: str
    swap_mode: SwapMode
    slippage_bps: int
    platform_fee: PlatformFee | None = None
    price_impact_pct: str
    route_plan: list[RoutePlanItem]
    context_slot: int | None = None
    time_taken: float | None = None
    swap_usd_value: str | None = None
    simpler_route_used: bool | None = None


class PriorityLevelWithMaxLamports(ApiRequest):
    max_lamports: int = Field(ge=0)
    priority_level: PriorityLevel
    global_fee_market: bool | None = Field(default=None, alias="global")


class PrioritizationFeeLamports(ApiRequest):
    """Either a priority-level fee capped at max_lamports, or a Jito tip."""

    priority_level_with_max_lamports: PriorityLevelWithMaxLamports | None = None
    jito_tip_lamports: int | None = Field(default=None, ge=0)

    @classmethod
    def priority(
        cls, level: PriorityLevel, max_lamports: int, global_fee_market: bool | None = None
    ) -> "PrioritizationFeeLamports":
        return cls(
            priority_level_with_max_lamports=PriorityLevelWithMaxLamports(
                max_lamports=max_lamports,
                priority_level=level,
                global_fee_market=global_fee_market,
            )
        )

    @classmethod
    def jito_tip(cls, lamports: int) -> "PrioritizationFeeLamports":
        return cls(jito_tip_lamports=lamports)


class SwapRequest(ApiRequest):
    """JSON body for POST /swap/v1/swap and /swap/v1/swap-instructions.

    ``quote_response`` is the unmodified result of ``get_quote``.
    """

    user_public_key: str
    quote_response: QuoteResponse
    payer: str | None = None
    wrap_and_unwrap_sol: bool | None = None
    use_shared_accounts: bool | None = None
    fee_account: str | None = None
    tracking_account: str | None = None
    prioritization_fee_lamports: PrioritizationFeeLamports | None = None
    as_legacy_transaction: bool | None = None
    destination_token_account: str | None = None
    dynamic_compute_unit_limit: bool | None = None
    skip_user_accounts_rpc_calls: bool | None = None
    dynamic_slippage: bool | None = None
    compute_unit_price_micro_lamports: int | None = Field(default=None, ge=0)
    blockhash_slots_to_expiry: int | None = Field(default=None, ge=1)

    @field_serializer("quote_response")
    def _echo_quote(self, value: QuoteResponse) -> dict:
        # Explicit nulls from the API must be sent back too
        return value.to_wire()

    def with_payer(self, payer: str) -> "SwapRequest":
        self.payer = payer
        return self

    def with_wrap_and_unwrap_sol(self, wrap: bool) -> "SwapRequest":
        self.wrap_and_unwrap_sol = wrap
        return self

    def with_use_shared_accounts(self, shared: bool) -> "SwapRequest":
        self.use_shared_accounts = shared
        return self

    def with_fee_account(self, fee_account: str) -> "SwapRequest":
        self.fee_account = fee_account
        return self

    def with_tracking_account(self, tracking_account: str) -> "SwapRequest":
        self.tracking_account = tracking_account
        return self

    def with_prioritization_fee_lamports(
        self, fee: PrioritizationFeeLamports
    ) -> "SwapRequest":
        self.prioritization_fee_lamports = fee
        return self

    def with_as_legacy_transaction(self, legacy: bool) -> "SwapRequest":
        self.as_legacy_transaction = legacy
        return self

    def with_destination_token_account(self, account: str) -> "SwapRequest":
        self.destination_token_account = account
        return self

    def with_dynamic_compute_unit_limit(self, dynamic: bool) -> "SwapRequest":
        self.dynamic_compute_unit_limit = dynamic
        return self

    def with_skip_user_accounts_rpc_calls(self, skip: bool) -> "SwapRequest":
        self.skip_user_accounts_rpc_calls = skip
        return self

    def with_dynamic_slippage(self, dynamic: bool) -> "SwapRequest":
        self.dynamic_slippage = dynamic
        return self

    def with_compute_unit_price_micro_lamports(self, price: int) -> "SwapRequest":
        self.compute_unit_price_micro_lamports = price
        return self

    def with_blockhash_slots_to_expiry(self, slots: int) -> "SwapRequest":
        self.blockhash_slots_to_expiry = slots
        return self


class SwapResponse(ApiResponse):
    swap_transaction: str  # base64 unsigned VersionedTransaction
    last_valid_block_height: int
    prioritization_fee_lamports: int | None = None
    compute_unit_limit: int | None = None
    prioritization_type: dict[str, Any] | None = None
    dynamic_slippage_report: dict[str, Any] | None = None
    simulation_error: dict[str, Any] | None = None


class AccountMeta(ApiResponse):
    pubkey: str
    is_signer: bool
    is_writable: bool


class Instruction(ApiResponse):
    program_id: str
    accounts: list[AccountMeta]
    data: str  # base64


class SwapInstructionsResponse(ApiResponse):
    token_ledger_instruction: Instruction | None = None
    compute_budget_instructions: list[Instruction] = []
    setup_instructions: list[Instruction] = []
    swap_instruction: Instruction
    cleanup_instruction: Instruction | None = None
    other_instructions: list[Instruction] = []
    address_lookup_table_addresses: list[str] = []
