"""Base models and types shared across the Jupiter APIs."""

from datetime import UTC, datetime
from enum import StrEnum
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Mint: TypeAlias = str

SOL_MINT: Mint = "So11111111111111111111111111111111111111112"
USDC_MINT: Mint = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
JUP_MINT: Mint = "JUPyiwrYJFskUPiHa7hkeR8VUtAeFoSYbKedZNsDvCN"


class ApiRequest(BaseModel):
    """Request parameters, camelCased on the wire.

    Builder methods assign fields in place, so assignments are re-validated.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )

    def to_wire(self) -> dict:
        """Query-string or JSON-body form: camelCase keys, unset optionals dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ApiResponse(BaseModel):
    """Response payload.

    Unknown keys are kept so a response can be sent back to the API as-is.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict:
        """Re-serialize to the shape the API sent."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class OrderStatus(StrEnum):
    ACTIVE = "active"
    HISTORY = "history"


def join_comma(values: list[str] | None) -> str | None:
    if values is None:
        return None
    return ",".join(str(v) for v in values)


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()
