"""Jupiter aggregator REST client."""

import logging
import warnings
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import TypeAdapter, ValidationError

from jupiter_sdk.errors import ApiError, DeserializationError, TransportError
from jupiter_sdk.models.recurring import (
    CancelRecurringOrderRequest,
    CreateRecurringOrderRequest,
    ExecuteRecurringRequest,
    ExecuteRecurringResponse,
    GetRecurringOrders,
    PriceDeposit,
    PriceWithdraw,
    RecurringOrders,
    RecurringResponse,
)
from jupiter_sdk.models.swap import (
    QuoteRequest,
    QuoteResponse,
    SwapInstructionsResponse,
    SwapRequest,
    SwapResponse,
)
from jupiter_sdk.models.token import (
    Category,
    Interval,
    NewToken,
    PriceResponse,
    TokenInfoResponse,
    TokenPriceRequest,
    TokenPriceResponse,
)
from jupiter_sdk.models.trigger import (
    CancelTriggerOrder,
    CancelTriggerOrders,
    CreateTriggerOrder,
    ExecuteTriggerOrder,
    ExecuteTriggerOrderResponse,
    GetTriggerOrders,
    TriggerOrdersResponse,
    TriggerResponse,
)
from jupiter_sdk.models.ultra import (
    Router,
    Shield,
    TokenBalancesResponse,
    TokenInfo,
    UltraExecuteOrderRequest,
    UltraExecuteOrderResponse,
    UltraOrderRequest,
    UltraOrderResponse,
)

if TYPE_CHECKING:
    from jupiter_sdk.config.schema import JupiterConfig

logger = logging.getLogger(__name__)

LITE_API_BASE = "https://lite-api.jup.ag"
PRO_API_BASE = "https://api.jup.ag"


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class JupiterClient:
    """Stateless wrapper around the Jupiter Swap, Ultra, Trigger, Recurring,
    Token and Price APIs.

    Every method is a single HTTP round trip. Failures raise a subclass of
    ``RequestError``; nothing is retried.
    """

    def __init__(
        self,
        base_url: str = LITE_API_BASE,
        api_key: str | None = None,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key or None
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: "JupiterConfig") -> "JupiterClient":
        return cls(
            base_url=config.client.base_url,
            api_key=config.client.api_key,
            timeout=config.client.timeout_seconds,
        )

    def with_api_key(self, api_key: str) -> "JupiterClient":
        """Return a new client that sends ``api_key`` as x-api-key."""
        return JupiterClient(base_url=self.base_url, api_key=api_key, timeout=self.timeout)

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        params: dict | None = None,
        data: dict | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body."""
        url = f"{self.base_url}{endpoint}"
        try:
            resp = httpx.request(
                method, url, params=params, json=data,
                headers=self._headers(), timeout=self.timeout,
            )
        except httpx.RequestError as e:
            logger.error("Jupiter request failed: %s %s -> %s", method, endpoint, e)
            raise TransportError(f"Request failed: {e}") from e

        if not resp.is_success:
            body = resp.text
            logger.error("Jupiter API %d: %s %s -> %s", resp.status_code, method, endpoint, body)
            raise ApiError(f"HTTP {resp.status_code}: {body}", resp.status_code, body)

        try:
            return resp.json()
        except ValueError as e:
            logger.error("Jupiter API returned invalid JSON: %s %s -> %s", method, endpoint, e)
            raise DeserializationError(f"Invalid JSON from {endpoint}: {e}") from e

    def _parse(self, result_type: Any, payload: Any, endpoint: str) -> Any:
        try:
            return _adapter(result_type).validate_python(payload)
        except ValidationError as e:
            logger.error("Jupiter response schema mismatch for %s: %s", endpoint, e)
            raise DeserializationError(
                f"Failed to deserialize response from {endpoint}: {e}"
            ) from e

    def _get(self, endpoint: str, result_type: Any, params: dict | None = None) -> Any:
        return self._parse(result_type, self._request("GET", endpoint, params=params), endpoint)

    def _post(self, endpoint: str, result_type: Any, data: dict) -> Any:
        return self._parse(result_type, self._request("POST", endpoint, data=data), endpoint)

    # --- Swap API ---

    def get_quote(self, request: QuoteRequest) -> QuoteResponse:
        """Best route for a token pair and amount.

        Pass the result unchanged to ``SwapRequest`` to build the transaction.
        """
        return self._get("/swap/v1/quote", QuoteResponse, request.to_wire())

    def get_swap_transaction(self, request: SwapRequest) -> SwapResponse:
        """Base64 unsigned swap transaction for a previously fetched quote."""
        return self._post("/swap/v1/swap", SwapResponse, request.to_wire())

    def get_swap_instructions(self, request: SwapRequest) -> SwapInstructionsResponse:
        """Individual instructions instead of a full transaction, for composing your own."""
        return self._post("/swap/v1/swap-instructions", SwapInstructionsResponse, request.to_wire())

    def get_program_id_to_label(self) -> dict[str, str]:
        """Map of AMM program id to DEX label."""
        return self._get("/swap/v1/program-id-to-label", dict[str, str])

    # --- Ultra API ---

    def get_ultra_order(self, request: UltraOrderRequest) -> UltraOrderResponse:
        """Fetch an Ultra order.

        Args:
            request: Input/output mint, raw amount, and optionally the taker.

        Returns:
            The quote plus, when a taker was given, a base64 unsigned
            transaction. Its ``request_id`` must accompany the signed
            transaction in ``ultra_execute_order``.
        """
        return self._get("/ultra/v1/order", UltraOrderResponse, request.to_wire())

    def ultra_execute_order(self, request: UltraExecuteOrderRequest) -> UltraExecuteOrderResponse:
        """Submit a signed Ultra transaction. Jupiter lands it and reports the outcome."""
        return self._post("/ultra/v1/execute", UltraExecuteOrderResponse, request.to_wire())

    def get_token_balances(self, address: str) -> TokenBalancesResponse:
        """Balances held by ``address``, keyed by mint ("SOL" for native SOL)."""
        return self._get(f"/ultra/v1/balances/{address}", TokenBalancesResponse)

    def shield(self, mints: list[str]) -> Shield:
        """Safety warnings (freeze authority, low liquidity, ...) per mint."""
        return self._get("/ultra/v1/shield", Shield, {"mints": ",".join(mints)})

    def ultra_token_search(self, query: list[str]) -> list[TokenInfo]:
        """Search by symbol, name or mint. At most 100 mints per query."""
        return self._get("/ultra/v1/search", list[TokenInfo], {"query": ",".join(query)})

    def routers(self) -> list[Router]:
        """Routers available to the Ultra routing engine."""
        return self._get("/ultra/v1/order/routers", list[Router])

    # --- Trigger API ---

    def create_trigger_order(self, request: CreateTriggerOrder) -> TriggerResponse:
        """Unsigned transaction creating a trigger order.

        Sign it and pass it with ``request_id`` to ``execute_trigger_order``.
        """
        return self._post("/trigger/v1/createOrder", TriggerResponse, request.to_wire())

    def execute_trigger_order(self, request: ExecuteTriggerOrder) -> ExecuteTriggerOrderResponse:
        """Submit a signed create or cancel transaction."""
        return self._post("/trigger/v1/execute", ExecuteTriggerOrderResponse, request.to_wire())

    def cancel_trigger_order(self, request: CancelTriggerOrder) -> TriggerResponse:
        return self._post("/trigger/v1/cancelOrder", TriggerResponse, request.to_wire())

    def cancel_trigger_orders(self, request: CancelTriggerOrders) -> TriggerResponse:
        """Batch cancel; the response carries one transaction per batch in ``transactions``."""
        return self._post("/trigger/v1/cancelOrders", TriggerResponse, request.to_wire())

    def get_trigger_orders(self, request: GetTriggerOrders) -> TriggerOrdersResponse:
        """One page of a user's active or historical trigger orders."""
        return self._get("/trigger/v1/getTriggerOrders", TriggerOrdersResponse, request.to_wire())

    # --- Recurring API ---

    def create_recurring_order(self, request: CreateRecurringOrderRequest) -> RecurringResponse:
        return self._post("/recurring/v1/createOrder", RecurringResponse, request.to_wire())

    def cancel_recurring_order(self, request: CancelRecurringOrderRequest) -> RecurringResponse:
        return self._post("/recurring/v1/cancelOrder", RecurringResponse, request.to_wire())

    def price_deposit_recurring(self, request: PriceDeposit) -> RecurringResponse:
        """Top up a price-based recurring order."""
        return self._post("/recurring/v1/priceDeposit", RecurringResponse, request.to_wire())

    def price_withdraw_recurring(self, request: PriceWithdraw) -> RecurringResponse:
        return self._post("/recurring/v1/priceWithdraw", RecurringResponse, request.to_wire())

    def execute_recurring_order(self, request: ExecuteRecurringRequest) -> ExecuteRecurringResponse:
        return self._post("/recurring/v1/execute", ExecuteRecurringResponse, request.to_wire())

    def get_recurring_orders(self, request: GetRecurringOrders) -> RecurringOrders:
        return self._get("/recurring/v1/getRecurringOrders", RecurringOrders, request.to_wire())

    # --- Token API ---

    def token_search(self, query: list[str]) -> list[TokenInfo]:
        """Search by symbol, name or mint. Symbol/name searches return at most 20 tokens."""
        return self._get("/tokens/v2/search", list[TokenInfo], {"query": ",".join(query)})

    def get_mints_by_tags(self, tags: list[str]) -> list[TokenInfo]:
        """Tokens carrying any of ``tags`` (e.g. "verified", "lst")."""
        return self._get("/tokens/v2/tag", list[TokenInfo], {"query": ",".join(tags)})

    def get_tokens_by_category(
        self, category: Category, interval: Interval, limit: int | None = None
    ) -> list[TokenInfo]:
        params = {"limit": limit} if limit is not None else None
        return self._get(f"/tokens/v2/{category}/{interval}", list[TokenInfo], params)

    def get_recent_tokens(self) -> list[TokenInfo]:
        """Tokens that recently had their first pool created."""
        return self._get("/tokens/v2/recent", list[TokenInfo])

    # --- Price API ---

    def get_tokens_price(self, mints: list[str]) -> PriceResponse:
        """USD prices keyed by mint. Mints without a reliable price are absent."""
        return self._get("/price/v3", PriceResponse, {"ids": ",".join(mints)})

    # --- Deprecated v1/v2 endpoints ---

    def get_token_price(self, request: TokenPriceRequest) -> TokenPriceResponse:
        warnings.warn(
            "price/v2 is deprecated, use get_tokens_price", DeprecationWarning, stacklevel=2
        )
        return self._get("/price/v2", TokenPriceResponse, request.to_wire())

    def get_token_info(self, mint: str) -> TokenInfoResponse:
        warnings.warn(
            "tokens/v1 is deprecated, use token_search", DeprecationWarning, stacklevel=2
        )
        return self._get(f"/tokens/v1/token/{mint}", TokenInfoResponse)

    def get_market_mints(self, market_address: str) -> list[str]:
        warnings.warn("tokens/v1 is deprecated", DeprecationWarning, stacklevel=2)
        return self._get(f"/tokens/v1/market/{market_address}/mints", list[str])

    def get_tradable_mints(self) -> list[str]:
        warnings.warn("tokens/v1 is deprecated", DeprecationWarning, stacklevel=2)
        return self._get("/tokens/v1/mints/tradable", list[str])

    def get_new_tokens(self, limit: int | None = None, offset: int | None = None) -> list[NewToken]:
        warnings.warn(
            "tokens/v1 is deprecated, use get_recent_tokens", DeprecationWarning, stacklevel=2
        )
        params = {k: v for k, v in (("limit", limit), ("offset", offset)) if v is not None}
        return self._get("/tokens/v1/new", list[NewToken], params or None)

    def get_all_tokens(self) -> list[TokenInfoResponse]:
        warnings.warn("tokens/v1 is deprecated", DeprecationWarning, stacklevel=2)
        return self._get("/tokens/v1/all", list[TokenInfoResponse])
