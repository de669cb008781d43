"""Recurring API models: time-based (DCA) and price-based orders."""

from enum import StrEnum
from typing import Any

from pydantic import Field, model_validator

from jupiter_sdk.models.common import ApiRequest, ApiResponse, OrderStatus


class RecurringOrderType(StrEnum):
    TIME = "time"
    PRICE = "price"
    ALL = "all"  # only valid when listing orders


class WithdrawSide(StrEnum):
    IN = "In"
    OUT = "Out"


class TimeParams(ApiRequest):
    in_amount: int = Field(ge=0)
    number_of_orders: int = Field(ge=1)
    interval: int = Field(ge=1)  # seconds between orders
    min_price: float | None = None
    max_price: float | None = None
    start_at: int | None = None


class PriceParams(ApiRequest):
    deposit_amount: int = Field(ge=0)
    increment_usdc_value: int = Field(ge=0)
    interval: int = Field(ge=1)
    start_at: int | None = None


class RecurringParams(ApiRequest):
    """Serialized as {"time": {...}} or {"price": {...}}."""

    time: TimeParams | None = None
    price: PriceParams | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "RecurringParams":
        if (self.time is None) == (self.price is None):
            raise ValueError("exactly one of time or price params must be set")
        return self


class CreateRecurringOrderRequest(ApiRequest):
    user: str
    input_mint: str
    output_mint: str
    params: RecurringParams

    @classmethod
    def time_order(
        cls,
        user: str,
        input_mint: str,
        output_mint: str,
        in_amount: int,
        number_of_orders: int,
        interval: int,
    ) -> "CreateRecurringOrderRequest":
        """Split in_amount into number_of_orders buys, interval seconds apart."""
        return cls(
            user=user,
            input_mint=input_mint,
            output_mint=output_mint,
            params=RecurringParams(
                time=TimeParams(
                    in_amount=in_amount,
                    number_of_orders=number_of_orders,
                    interval=interval,
                )
            ),
        )

    @classmethod
    def price_order(
        cls,
        user: str,
        input_mint: str,
        output_mint: str,
        deposit_amount: int,
        increment_usdc_value: int,
        interval: int,
    ) -> "CreateRecurringOrderRequest":
        """Buy increment_usdc_value worth each time the price moves, at most once per interval."""
        return cls(
            user=user,
            input_mint=input_mint,
            output_mint=output_mint,
            params=RecurringParams(
                price=PriceParams(
                    deposit_amount=deposit_amount,
                    increment_usdc_value=increment_usdc_value,
                    interval=interval,
                )
            ),
        )

    @property
    def order_type(self) -> RecurringOrderType:
        if self.params.time is not None:
            return RecurringOrderType.TIME
        return RecurringOrderType.PRICE

    def with_start_at(self, start_at: int) -> "CreateRecurringOrderRequest":
        if self.params.time is not None:
            self.params.time.start_at = start_at
        else:
            self.params.price.start_at = start_at
        return self

    def with_min_price(self, price: float) -> "CreateRecurringOrderRequest":
        """No-op for price-based orders."""
        if self.params.time is not None:
            self.params.time.min_price = price
        return self

    def with_max_price(self, price: float) -> "CreateRecurringOrderRequest":
        """No-op for price-based orders."""
        if self.params.time is not None:
            self.params.time.max_price = price
        return self


class CancelRecurringOrderRequest(ApiRequest):
    order: str
    recurring_type: RecurringOrderType
    user: str


class PriceDeposit(ApiRequest):
    amount: int = Field(ge=0)
    order: str
    user: str


class PriceWithdraw(ApiRequest):
    """Leaving amount unset withdraws everything."""

    order: str
    user: str
    input_or_output: WithdrawSide
    amount: int | None = Field(default=None, ge=0)

    def with_amount(self, amount: int) -> "PriceWithdraw":
        self.amount = amount
        return self


class RecurringResponse(ApiResponse):
    request_id: str
    transaction: str


class ExecuteRecurringRequest(ApiRequest):
    request_id: str
    signed_transaction: str


class ExecuteRecurringResponse(ApiResponse):
    signature: str | None = None
    status: str
    error: str | None = None


class GetRecurringOrders(ApiRequest):
    recurring_type: RecurringOrderType
    order_status: OrderStatus
    user: str
    page: int = Field(default=1, ge=1)
    mint: str | None = None
    include_failed_tx: bool = False

    def with_page(self, page: int) -> "GetRecurringOrders":
        self.page = page
        return self

    def with_mint(self, mint: str) -> "GetRecurringOrders":
        self.mint = mint
        return self

    def with_include_failed_tx(self, include: bool = True) -> "GetRecurringOrders":
        self.include_failed_tx = include
        return self


class RecurringOrders(ApiResponse):
    # The order schema differs per recurring type and is left untyped
    order_status: OrderStatus
    page: int
    total_pages: int
    user: str
    time: list[dict[str, Any]] | None = None
    price: list[dict[str, Any]] | None = None
    all: list[dict[str, Any]] | None = None
