"""
Error taxonomy shared by the aggregator, source providers and the transaction
layer of the surrounding application.

Only NETWORK_ERROR and CONTRACT_ERROR originate in this package; the other
kinds come from transaction submission and are passed through untouched.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AppErrorType(str, Enum):
    """Classification of user-visible failures."""
    WALLET_NOT_FOUND = "WALLET_NOT_FOUND"
    TRANSACTION_REJECTED = "TRANSACTION_REJECTED"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    FUNDS_TIMELOCKED = "FUNDS_TIMELOCKED"
    NETWORK_ERROR = "NETWORK_ERROR"
    CONTRACT_ERROR = "CONTRACT_ERROR"


class AppError(BaseModel):
    """
    Classified error exposed on AggregatedTokenView.error.

    Attributes:
        type: Error kind (AppErrorType)
        message: Human-readable message for the user
        details: Optional extra context (provider code, failed request, ...)
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: AppErrorType
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict] = None
