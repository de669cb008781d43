"""Request and response models for the Jupiter APIs."""

from jupiter_sdk.models.common import JUP_MINT, SOL_MINT, USDC_MINT, OrderStatus
from jupiter_sdk.models.dex import DexEnum
from jupiter_sdk.models.recurring import (
    CancelRecurringOrderRequest,
    CreateRecurringOrderRequest,
    ExecuteRecurringRequest,
    ExecuteRecurringResponse,
    GetRecurringOrders,
    PriceDeposit,
    PriceWithdraw,
    RecurringOrders,
    RecurringOrderType,
    RecurringResponse,
    WithdrawSide,
)
from jupiter_sdk.models.swap import (
    PrioritizationFeeLamports,
    PriorityLevel,
    QuoteRequest,
    QuoteResponse,
    SwapInstructionsResponse,
    SwapMode,
    SwapRequest,
    SwapResponse,
)
from jupiter_sdk.models.token import (
    Category,
    Interval,
    NewToken,
    Price,
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
    ExecuteStatus,
    Router,
    Shield,
    TokenBalance,
    TokenBalancesResponse,
    TokenInfo,
    UltraExecuteOrderRequest,
    UltraExecuteOrderResponse,
    UltraOrderRequest,
    UltraOrderResponse,
)

__all__ = [
    "JUP_MINT",
    "SOL_MINT",
    "USDC_MINT",
    "CancelRecurringOrderRequest",
    "CancelTriggerOrder",
    "CancelTriggerOrders",
    "Category",
    "CreateRecurringOrderRequest",
    "CreateTriggerOrder",
    "DexEnum",
    "ExecuteRecurringRequest",
    "ExecuteRecurringResponse",
    "ExecuteStatus",
    "ExecuteTriggerOrder",
    "ExecuteTriggerOrderResponse",
    "GetRecurringOrders",
    "GetTriggerOrders",
    "Interval",
    "NewToken",
    "OrderStatus",
    "Price",
    "PriceResponse",
    "PriceDeposit",
    "PriceWithdraw",
    "PrioritizationFeeLamports",
    "PriorityLevel",
    "QuoteRequest",
    "QuoteResponse",
    "RecurringOrderType",
    "RecurringOrders",
    "RecurringResponse",
    "Router",
    "Shield",
    "SwapInstructionsResponse",
    "SwapMode",
    "SwapRequest",
    "SwapResponse",
    "TokenBalance",
    "TokenBalancesResponse",
    "TokenInfo",
    "TokenInfoResponse",
    "TokenPriceRequest",
    "TokenPriceResponse",
    "TriggerOrdersResponse",
    "TriggerResponse",
    "UltraExecuteOrderRequest",
    "UltraExecuteOrderResponse",
    "UltraOrderRequest",
    "UltraOrderResponse",
    "WithdrawSide",
]
