"""Order -> sign -> execute round trips for the Ultra, Trigger and Recurring APIs."""

import logging
from collections.abc import Callable
from typing import Any

from jupiter_sdk.client import JupiterClient
from jupiter_sdk.errors import RequestError
from jupiter_sdk.models.common import utc_now_iso
from jupiter_sdk.models.execution import ExecutionResult, ExecutionStatus
from jupiter_sdk.models.recurring import (
    CancelRecurringOrderRequest,
    CreateRecurringOrderRequest,
    ExecuteRecurringRequest,
)
from jupiter_sdk.models.trigger import (
    CancelTriggerOrder,
    CreateTriggerOrder,
    ExecuteTriggerOrder,
)
from jupiter_sdk.models.ultra import UltraExecuteOrderRequest, UltraOrderRequest

logger = logging.getLogger(__name__)

# Takes a base64 unsigned transaction, returns it signed (base64)
Signer = Callable[[str], str]


class Executor:
    """Run a Jupiter flow end to end with a caller-supplied signer.

    The executor never holds keys: ``signer`` receives the unsigned
    transaction the API returned and must hand back the signed one. API
    failures become ``FAILED`` results; exceptions raised by the signer
    propagate. Nothing is retried.

    Example, with solders doing the signing::

        keypair = Keypair.from_base58_string(os.environ["WALLET_KEY"])

        def sign(unsigned_b64: str) -> str:
            tx = VersionedTransaction.from_bytes(base64.b64decode(unsigned_b64))
            signed = VersionedTransaction(tx.message, [keypair])
            return base64.b64encode(bytes(signed)).decode()

        executor = Executor(JupiterClient(), sign)
        result = executor.execute_ultra_order(
            UltraOrderRequest(input_mint=SOL_MINT, output_mint=USDC_MINT, amount=10_000_000)
            .with_taker(str(keypair.pubkey()))
        )
        if result.status == ExecutionStatus.SUCCESS:
            print(result.signature)
    """

    def __init__(self, client: JupiterClient, signer: Signer):
        self.client = client
        self.signer = signer

    def execute_ultra_order(self, request: UltraOrderRequest) -> ExecutionResult:
        logger.info(
            "ULTRA: %s -> %s amount=%d taker=%s",
            request.input_mint, request.output_mint, request.amount, request.taker,
        )
        try:
            order = self.client.get_ultra_order(request)
        except RequestError as e:
            return self._failed("ultra", "", e)

        return self._sign_and_execute(
            "ultra",
            order.request_id,
            order.transaction,
            lambda signed: self.client.ultra_execute_order(
                UltraExecuteOrderRequest(signed_transaction=signed, request_id=order.request_id)
            ),
        )

    def execute_trigger_create(self, request: CreateTriggerOrder) -> ExecutionResult:
        logger.info(
            "TRIGGER CREATE: %s %s -> %s %s (maker=%s)",
            request.params.making_amount, request.input_mint,
            request.params.taking_amount, request.output_mint, request.maker,
        )
        try:
            created = self.client.create_trigger_order(request)
        except RequestError as e:
            return self._failed("trigger-create", "", e)
        return self._sign_and_execute_trigger("trigger-create", created.request_id, created.transaction)

    def execute_trigger_cancel(self, request: CancelTriggerOrder) -> ExecutionResult:
        logger.info("TRIGGER CANCEL: order=%s (maker=%s)", request.order, request.maker)
        try:
            cancelled = self.client.cancel_trigger_order(request)
        except RequestError as e:
            return self._failed("trigger-cancel", "", e)
        return self._sign_and_execute_trigger(
            "trigger-cancel", cancelled.request_id, cancelled.transaction
        )

    def execute_recurring_create(self, request: CreateRecurringOrderRequest) -> ExecutionResult:
        logger.info(
            "RECURRING CREATE: %s %s -> %s (user=%s)",
            request.order_type, request.input_mint, request.output_mint, request.user,
        )
        try:
            created = self.client.create_recurring_order(request)
        except RequestError as e:
            return self._failed("recurring-create", "", e)
        return self._sign_and_execute_recurring(
            "recurring-create", created.request_id, created.transaction
        )

    def execute_recurring_cancel(self, request: CancelRecurringOrderRequest) -> ExecutionResult:
        logger.info("RECURRING CANCEL: order=%s (user=%s)", request.order, request.user)
        try:
            cancelled = self.client.cancel_recurring_order(request)
        except RequestError as e:
            return self._failed("recurring-cancel", "", e)
        return self._sign_and_execute_recurring(
            "recurring-cancel", cancelled.request_id, cancelled.transaction
        )

    def _sign_and_execute_trigger(
        self, flow: str, request_id: str, transaction: str | None
    ) -> ExecutionResult:
        return self._sign_and_execute(
            flow,
            request_id,
            transaction,
            lambda signed: self.client.execute_trigger_order(
                ExecuteTriggerOrder(request_id=request_id, signed_transaction=signed)
            ),
        )

    def _sign_and_execute_recurring(
        self, flow: str, request_id: str, transaction: str | None
    ) -> ExecutionResult:
        return self._sign_and_execute(
            flow,
            request_id,
            transaction,
            lambda signed: self.client.execute_recurring_order(
                ExecuteRecurringRequest(request_id=request_id, signed_transaction=signed)
            ),
        )

    def _sign_and_execute(
        self,
        flow: str,
        request_id: str,
        transaction: str | None,
        submit: Callable[[str], Any],
    ) -> ExecutionResult:
        if not transaction:
            logger.warning("%s REJECTED: no transaction to sign (request_id=%s)", flow, request_id)
            return ExecutionResult(
                flow=flow,
                request_id=request_id,
                status=ExecutionStatus.REJECTED,
                signature=None,
                error_message="Response carried no transaction to sign",
                executed_at=utc_now_iso(),
            )

        signed = self.signer(transaction)
        try:
            response = submit(signed)
        except RequestError as e:
            return self._failed(flow, request_id, e)

        if str(response.status).lower() == "success":
            logger.info("%s SUCCESS: signature=%s", flow, response.signature)
            return ExecutionResult(
                flow=flow,
                request_id=request_id,
                status=ExecutionStatus.SUCCESS,
                signature=response.signature,
                error_message="",
                executed_at=utc_now_iso(),
            )

        error = response.error or f"status={response.status}"
        logger.warning("%s FAILED: %s (request_id=%s)", flow, error, request_id)
        return ExecutionResult(
            flow=flow,
            request_id=request_id,
            status=ExecutionStatus.FAILED,
            signature=response.signature,
            error_message=str(error),
            executed_at=utc_now_iso(),
        )

    def _failed(self, flow: str, request_id: str, error: RequestError) -> ExecutionResult:
        logger.error("%s FAILED: %s", flow, error)
        return ExecutionResult(
            flow=flow,
            request_id=request_id,
            status=ExecutionStatus.FAILED,
            signature=None,
            error_message=str(error),
            executed_at=utc_now_iso(),
        )
