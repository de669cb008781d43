"""Tests for Recurring API models."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from jupiter_sdk.models.common import SOL_MINT, USDC_MINT, OrderStatus
from jupiter_sdk.models.recurring import (
    CancelRecurringOrderRequest,
    CreateRecurringOrderRequest,
    GetRecurringOrders,
    PriceParams,
    PriceWithdraw,
    RecurringOrders,
    RecurringOrderType,
    RecurringParams,
    TimeParams,
    WithdrawSide,
)

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"

USER = "EXBdeRCdiNChKyD7akt64n9HgSXEpUtpPEhmbnm4L6iH"


def _time_order() -> CreateRecurringOrderRequest:
    return CreateRecurringOrderRequest.time_order(
        user=USER,
        input_mint=USDC_MINT,
        output_mint=SOL_MINT,
        in_amount=100_000_000,
        number_of_orders=10,
        interval=86400,
    )


def _price_order() -> CreateRecurringOrderRequest:
    return CreateRecurringOrderRequest.price_order(
        user=USER,
        input_mint=USDC_MINT,
        output_mint=SOL_MINT,
        deposit_amount=100_000_000,
        increment_usdc_value=10_000_000,
        interval=3600,
    )


class TestCreateRecurringOrder:
    def test_time_order_wire_form(self):
        assert _time_order().to_wire() == {
            "user": USER,
            "inputMint": USDC_MINT,
            "outputMint": SOL_MINT,
            "params": {
                "time": {"inAmount": 100_000_000, "numberOfOrders": 10, "interval": 86400}
            },
        }

    def test_price_order_wire_form(self):
        wire = _price_order().to_wire()
        assert wire["params"] == {
            "price": {
                "depositAmount": 100_000_000,
                "incrementUsdcValue": 10_000_000,
                "interval": 3600,
            }
        }

    def test_order_type(self):
        assert _time_order().order_type == RecurringOrderType.TIME
        assert _price_order().order_type == RecurringOrderType.PRICE

    def test_price_bounds_apply_to_time_orders(self):
        wire = _time_order().with_min_price(120.5).with_max_price(200.0).to_wire()
        assert wire["params"]["time"]["minPrice"] == 120.5
        assert wire["params"]["time"]["maxPrice"] == 200.0

    def test_price_bounds_ignored_for_price_orders(self):
        assert _price_order().with_min_price(1.0).to_wire() == _price_order().to_wire()

    def test_start_at(self):
        time_wire = _time_order().with_start_at(1760900000).to_wire()
        price_wire = _price_order().with_start_at(1760900000).to_wire()
        assert time_wire["params"]["time"]["startAt"] == 1760900000
        assert price_wire["params"]["price"]["startAt"] == 1760900000

    def test_builder_order_does_not_matter(self):
        a = _time_order().with_start_at(1).with_min_price(2.0).with_max_price(3.0)
        b = _time_order().with_max_price(3.0).with_min_price(2.0).with_start_at(1)
        assert a.to_wire() == b.to_wire()


class TestRecurringParams:
    def test_neither_rejected(self):
        with pytest.raises(ValidationError, match="exactly one"):
            RecurringParams()

    def test_both_rejected(self):
        with pytest.raises(ValidationError, match="exactly one"):
            RecurringParams(
                time=TimeParams(in_amount=1, number_of_orders=2, interval=60),
                price=PriceParams(deposit_amount=1, increment_usdc_value=1, interval=60),
            )

    def test_zero_orders_rejected(self):
        with pytest.raises(ValidationError):
            TimeParams(in_amount=1, number_of_orders=0, interval=60)


class TestOtherRequests:
    def test_cancel(self):
        wire = CancelRecurringOrderRequest(
            order="ord1", recurring_type=RecurringOrderType.TIME, user=USER
        ).to_wire()
        assert wire == {"order": "ord1", "recurringType": "time", "user": USER}

    def test_withdraw_all_omits_amount(self):
        wire = PriceWithdraw(order="ord1", user=USER, input_or_output=WithdrawSide.IN).to_wire()
        assert wire == {"order": "ord1", "user": USER, "inputOrOutput": "In"}

    def test_withdraw_amount(self):
        wire = (
            PriceWithdraw(order="ord1", user=USER, input_or_output=WithdrawSide.OUT)
            .with_amount(5_000_000)
            .to_wire()
        )
        assert wire["amount"] == 5_000_000

    def test_get_orders_defaults(self):
        wire = GetRecurringOrders(
            recurring_type=RecurringOrderType.ALL,
            order_status=OrderStatus.ACTIVE,
            user=USER,
        ).to_wire()
        assert wire == {
            "recurringType": "all",
            "orderStatus": "active",
            "user": USER,
            "page": 1,
            "includeFailedTx": False,
        }

    def test_get_orders_builders(self):
        wire = (
            GetRecurringOrders(
                recurring_type=RecurringOrderType.TIME,
                order_status=OrderStatus.HISTORY,
                user=USER,
            )
            .with_page(3)
            .with_mint(SOL_MINT)
            .with_include_failed_tx()
            .to_wire()
        )
        assert wire["page"] == 3
        assert wire["mint"] == SOL_MINT
        assert wire["includeFailedTx"] is True


class TestRecurringOrders:
    def test_round_trip(self):
        with open(FIXTURE_DIR / "recurring_orders_response.json") as f:
            data = json.load(f)
        orders = RecurringOrders.model_validate(data)
        assert orders.order_status == OrderStatus.ACTIVE
        assert orders.time[0]["cycleFrequency"] == "86400"
        assert orders.price is None
        assert orders.to_wire() == data
