"""Outcome records for the sign-and-execute flows."""

from dataclasses import dataclass
from enum import StrEnum


class ExecutionStatus(StrEnum):
    SUCCESS = "SUCCESS"
    REJECTED = "REJECTED"  # nothing to sign, never submitted
    FAILED = "FAILED"


@dataclass(frozen=True)
class ExecutionResult:
    flow: str
    request_id: str
    status: ExecutionStatus
    signature: str | None
    error_message: str
    executed_at: str
