"""Trigger API models: limit-style orders filled once a price is reached."""

from typing import Any

from pydantic import Field

from jupiter_sdk.models.common import ApiRequest, ApiResponse, OrderStatus


class TriggerParams(ApiRequest):
    """Amounts are raw strings, as the API expects."""

    making_amount: str
    taking_amount: str
    expired_at: str | None = None
    slippage_bps: str | None = None
    fee_bps: str | None = None


class CreateTriggerOrder(ApiRequest):
    """JSON body for POST /trigger/v1/createOrder."""

    input_mint: str
    output_mint: str
    maker: str
    payer: str
    params: TriggerParams
    compute_unit_price: str | None = None
    fee_account: str | None = None
    wrap_and_unwrap_sol: bool | None = None

    @classmethod
    def new(
        cls,
        input_mint: str,
        output_mint: str,
        maker: str,
        payer: str,
        making_amount: int,
        taking_amount: int,
    ) -> "CreateTriggerOrder":
        return cls(
            input_mint=input_mint,
            output_mint=output_mint,
            maker=maker,
            payer=payer,
            params=TriggerParams(
                making_amount=str(making_amount),
                taking_amount=str(taking_amount),
            ),
        )

    def with_compute_unit_price(self, price: str) -> "CreateTriggerOrder":
        """Microlamports; the API defaults to "auto"."""
        self.compute_unit_price = price
        return self

    def with_fee_account(self, account: str) -> "CreateTriggerOrder":
        self.fee_account = account
        return self

    def with_wrap_and_unwrap_sol(self, wrap: bool) -> "CreateTriggerOrder":
        self.wrap_and_unwrap_sol = wrap
        return self

    def with_expired_at(self, expired_at: str) -> "CreateTriggerOrder":
        """Unix timestamp after which the order is no longer filled."""
        self.params.expired_at = expired_at
        return self

    def with_slippage_bps(self, slippage_bps: str) -> "CreateTriggerOrder":
        self.params.slippage_bps = slippage_bps
        return self

    def with_fee_bps(self, fee_bps: str) -> "CreateTriggerOrder":
        # Only honoured together with fee_account
        self.params.fee_bps = fee_bps
        return self


class TriggerResponse(ApiResponse):
    """Unsigned transaction(s) returned by create/cancel calls."""

    request_id: str
    transaction: str = ""
    transactions: list[str] | None = None
    order: str | None = None
    code: int | None = None


class ExecuteTriggerOrder(ApiRequest):
    request_id: str
    signed_transaction: str


class ExecuteTriggerOrderResponse(ApiResponse):
    code: int
    signature: str | None = None
    status: str
    order: str | None = None
    error: str | None = None


class CancelTriggerOrder(ApiRequest):
    maker: str
    order: str
    compute_unit_price: str | None = None

    def with_compute_unit_price(self, price: str) -> "CancelTriggerOrder":
        self.compute_unit_price = price
        return self


class CancelTriggerOrders(ApiRequest):
    """Batch cancel. With no orders listed the API cancels every open order of the maker.

    ``orders`` goes out as a JSON array of order keys, not a comma-joined
    string; the endpoint only accepts the array form.
    """

    maker: str
    orders: list[str] = []
    compute_unit_price: str | None = None

    def with_compute_unit_price(self, price: str) -> "CancelTriggerOrders":
        self.compute_unit_price = price
        return self


class GetTriggerOrders(ApiRequest):
    """Query parameters for GET /trigger/v1/getTriggerOrders."""

    user: str
    order_status: OrderStatus
    page: int | None = Field(default=None, ge=1)
    include_failed_tx: bool | None = False
    input_mint: str | None = None
    output_mint: str | None = None

    def with_page(self, page: int) -> "GetTriggerOrders":
        self.page = page
        return self

    def with_include_failed_tx(self, include: bool) -> "GetTriggerOrders":
        self.include_failed_tx = include
        return self

    def with_order_status(self, status: OrderStatus) -> "GetTriggerOrders":
        self.order_status = status
        return self

    def with_input_mint(self, mint: str) -> "GetTriggerOrders":
        self.input_mint = mint
        return self

    def with_output_mint(self, mint: str) -> "GetTriggerOrders":
        self.output_mint = mint
        return self


class TriggerTrade(ApiResponse):
    order_key: str
    keeper: str
    input_mint: str
    output_mint: str
    input_amount: str
    output_amount: str
    raw_input_amount: str
    raw_output_amount: str
    fee_mint: str
    fee_amount: str
    raw_fee_amount: str
    tx_id: str
    confirmed_at: str
    action: str
    product_meta: Any = None


class TriggerOrder(ApiResponse):
    user_pubkey: str
    order_key: str
    input_mint: str
    output_mint: str
    making_amount: str
    taking_amount: str
    remaining_making_amount: str
    remaining_taking_amount: str
    raw_making_amount: str
    raw_taking_amount: str
    raw_remaining_making_amount: str
    raw_remaining_taking_amount: str
    slippage_bps: str
    expired_at: str | None = None
    created_at: str
    updated_at: str
    status: str
    open_tx: str
    close_tx: str
    program_version: str
    trades: list[TriggerTrade] = []


class TriggerOrdersResponse(ApiResponse):
    user: str
    order_status: str
    orders: list[TriggerOrder]
    total_pages: int
    page: int
