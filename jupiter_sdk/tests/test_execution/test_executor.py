"""Tests for the sign-and-execute flows."""

import base64
import json
from pathlib import Path

import httpx
import pytest
import respx

from jupiter_sdk.client import LITE_API_BASE, JupiterClient
from jupiter_sdk.execution.executor import Executor
from jupiter_sdk.models.common import JUP_MINT, SOL_MINT, USDC_MINT
from jupiter_sdk.models.execution import ExecutionStatus
from jupiter_sdk.models.recurring import (
    CancelRecurringOrderRequest,
    CreateRecurringOrderRequest,
    RecurringOrderType,
)
from jupiter_sdk.models.trigger import CancelTriggerOrder, CreateTriggerOrder
from jupiter_sdk.models.ultra import UltraOrderRequest

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"

WALLET = "EXBdeRCdiNChKyD7akt64n9HgSXEpUtpPEhmbnm4L6iH"


def fake_signer(transaction: str) -> str:
    return f"signed:{transaction}"


@pytest.fixture
def executor(client: JupiterClient) -> Executor:
    return Executor(client=client, signer=fake_signer)


@pytest.fixture
def order_fixture() -> dict:
    with open(FIXTURE_DIR / "ultra_order_response.json") as f:
        return json.load(f)


@pytest.fixture
def ultra_request() -> UltraOrderRequest:
    return UltraOrderRequest(
        input_mint=SOL_MINT, output_mint=JUP_MINT, amount=10_000_000
    ).with_taker(WALLET)


class TestUltraFlow:
    @respx.mock
    def test_success(self, executor: Executor, ultra_request: UltraOrderRequest, order_fixture: dict):
        respx.get(f"{LITE_API_BASE}/ultra/v1/order").mock(
            return_value=httpx.Response(200, json=order_fixture)
        )
        execute = respx.post(f"{LITE_API_BASE}/ultra/v1/execute").mock(
            return_value=httpx.Response(200, json={"status": "Success", "signature": "sigU", "code": 0})
        )

        result = executor.execute_ultra_order(ultra_request)

        assert result.status == ExecutionStatus.SUCCESS
        assert result.flow == "ultra"
        assert result.signature == "sigU"
        assert result.request_id == order_fixture["requestId"]
        assert result.error_message == ""
        body = json.loads(execute.calls.last.request.content)
        assert body["signedTransaction"] == f"signed:{order_fixture['transaction']}"
        assert body["requestId"] == order_fixture["requestId"]

    @respx.mock
    def test_signer_receives_and_returns_base64(
        self, client: JupiterClient, ultra_request: UltraOrderRequest, order_fixture: dict
    ):
        order_fixture["transaction"] = base64.b64encode(b"unsigned-tx").decode()
        respx.get(f"{LITE_API_BASE}/ultra/v1/order").mock(
            return_value=httpx.Response(200, json=order_fixture)
        )
        execute = respx.post(f"{LITE_API_BASE}/ultra/v1/execute").mock(
            return_value=httpx.Response(200, json={"status": "Success", "signature": "sigB", "code": 0})
        )

        def sign(unsigned_b64: str) -> str:
            raw = base64.b64decode(unsigned_b64)
            return base64.b64encode(raw + b"+signature").decode()

        result = Executor(client, sign).execute_ultra_order(ultra_request)

        assert result.status == ExecutionStatus.SUCCESS
        signed = json.loads(execute.calls.last.request.content)["signedTransaction"]
        assert base64.b64decode(signed) == b"unsigned-tx+signature"

    @respx.mock
    def test_no_transaction_is_rejected(
        self, executor: Executor, ultra_request: UltraOrderRequest, order_fixture: dict
    ):
        del order_fixture["transaction"]
        respx.get(f"{LITE_API_BASE}/ultra/v1/order").mock(
            return_value=httpx.Response(200, json=order_fixture)
        )
        execute = respx.post(f"{LITE_API_BASE}/ultra/v1/execute")

        result = executor.execute_ultra_order(ultra_request)

        assert result.status == ExecutionStatus.REJECTED
        assert result.signature is None
        assert "no transaction" in result.error_message
        assert not execute.called

    @respx.mock
    def test_order_api_error(self, executor: Executor, ultra_request: UltraOrderRequest):
        respx.get(f"{LITE_API_BASE}/ultra/v1/order").mock(
            return_value=httpx.Response(500, text="Internal Server Error")
        )

        result = executor.execute_ultra_order(ultra_request)

        assert result.status == ExecutionStatus.FAILED
        assert result.request_id == ""
        assert "500" in result.error_message

    @respx.mock
    def test_remote_failure(self, executor: Executor, ultra_request: UltraOrderRequest, order_fixture: dict):
        respx.get(f"{LITE_API_BASE}/ultra/v1/order").mock(
            return_value=httpx.Response(200, json=order_fixture)
        )
        respx.post(f"{LITE_API_BASE}/ultra/v1/execute").mock(
            return_value=httpx.Response(200, json={
                "status": "Failed",
                "signature": "sigF",
                "code": -1005,
                "error": "Transaction expired",
            })
        )

        result = executor.execute_ultra_order(ultra_request)

        assert result.status == ExecutionStatus.FAILED
        assert result.signature == "sigF"
        assert result.error_message == "Transaction expired"

    @respx.mock
    def test_signer_error_propagates(
        self, client: JupiterClient, ultra_request: UltraOrderRequest, order_fixture: dict
    ):
        respx.get(f"{LITE_API_BASE}/ultra/v1/order").mock(
            return_value=httpx.Response(200, json=order_fixture)
        )

        def broken_signer(transaction: str) -> str:
            raise RuntimeError("wallet locked")

        with pytest.raises(RuntimeError, match="wallet locked"):
            Executor(client=client, signer=broken_signer).execute_ultra_order(ultra_request)


class TestTriggerFlow:
    @respx.mock
    def test_create_success(self, executor: Executor):
        respx.post(f"{LITE_API_BASE}/trigger/v1/createOrder").mock(
            return_value=httpx.Response(200, json={
                "order": "ord1", "transaction": "dHg=", "requestId": "trig-1",
            })
        )
        execute = respx.post(f"{LITE_API_BASE}/trigger/v1/execute").mock(
            return_value=httpx.Response(200, json={"code": 0, "signature": "sigT", "status": "Success"})
        )
        request = CreateTriggerOrder.new(SOL_MINT, JUP_MINT, WALLET, WALLET, 1_000_000_000, 400_000_000)

        result = executor.execute_trigger_create(request)

        assert result.status == ExecutionStatus.SUCCESS
        assert result.flow == "trigger-create"
        assert json.loads(execute.calls.last.request.content) == {
            "requestId": "trig-1",
            "signedTransaction": "signed:dHg=",
        }

    @respx.mock
    def test_cancel_empty_transaction_rejected(self, executor: Executor):
        respx.post(f"{LITE_API_BASE}/trigger/v1/cancelOrder").mock(
            return_value=httpx.Response(200, json={"requestId": "trig-2", "transaction": ""})
        )

        result = executor.execute_trigger_cancel(CancelTriggerOrder(maker=WALLET, order="ord1"))

        assert result.status == ExecutionStatus.REJECTED
        assert result.request_id == "trig-2"

    @respx.mock
    def test_execute_transport_error(self, executor: Executor):
        respx.post(f"{LITE_API_BASE}/trigger/v1/cancelOrder").mock(
            return_value=httpx.Response(200, json={"requestId": "trig-3", "transaction": "dHg="})
        )
        respx.post(f"{LITE_API_BASE}/trigger/v1/execute").mock(
            side_effect=httpx.ConnectError("connection reset")
        )

        result = executor.execute_trigger_cancel(CancelTriggerOrder(maker=WALLET, order="ord1"))

        assert result.status == ExecutionStatus.FAILED
        assert result.request_id == "trig-3"
        assert "Request failed" in result.error_message


class TestRecurringFlow:
    @respx.mock
    def test_create_success(self, executor: Executor):
        respx.post(f"{LITE_API_BASE}/recurring/v1/createOrder").mock(
            return_value=httpx.Response(200, json={"requestId": "rec-1", "transaction": "dHg="})
        )
        respx.post(f"{LITE_API_BASE}/recurring/v1/execute").mock(
            return_value=httpx.Response(200, json={"signature": "sigR", "status": "Success"})
        )
        request = CreateRecurringOrderRequest.time_order(
            WALLET, USDC_MINT, SOL_MINT, in_amount=100_000_000, number_of_orders=4, interval=3600
        )

        result = executor.execute_recurring_create(request)

        assert result.status == ExecutionStatus.SUCCESS
        assert result.flow == "recurring-create"
        assert result.signature == "sigR"

    @respx.mock
    def test_cancel_remote_failure_without_error_text(self, executor: Executor):
        respx.post(f"{LITE_API_BASE}/recurring/v1/cancelOrder").mock(
            return_value=httpx.Response(200, json={"requestId": "rec-2", "transaction": "dHg="})
        )
        respx.post(f"{LITE_API_BASE}/recurring/v1/execute").mock(
            return_value=httpx.Response(200, json={"status": "Failed"})
        )
        request = CancelRecurringOrderRequest(
            order="ord1", recurring_type=RecurringOrderType.TIME, user=WALLET
        )

        result = executor.execute_recurring_cancel(request)

        assert result.status == ExecutionStatus.FAILED
        assert result.signature is None
        assert result.error_message == "status=Failed"

    @respx.mock
    def test_create_api_error(self, executor: Executor):
        respx.post(f"{LITE_API_BASE}/recurring/v1/createOrder").mock(
            return_value=httpx.Response(400, json={"error": "Minimum 100 USD total"})
        )
        request = CreateRecurringOrderRequest.price_order(
            WALLET, USDC_MINT, SOL_MINT, deposit_amount=1, increment_usdc_value=1, interval=60
        )

        result = executor.execute_recurring_create(request)

        assert result.status == ExecutionStatus.FAILED
        assert "Minimum 100 USD" in result.error_message
