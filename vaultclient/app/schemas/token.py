"""
Token data schemas.

Value types returned by source providers and the aggregated snapshot exposed
by TokenDataAggregator. All models are frozen: a new snapshot replaces the
old one on every state transition, nothing is mutated in place.

Amounts are integers in atomic units (10^-decimals of a display unit);
formatting happens only at the presentation boundary (token_summary).
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from vaultclient.app.schemas.errors import AppError, AppErrorType


class TokenMetadata(BaseModel):
    """SVT token metadata as read from the token contract."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    symbol: str
    decimals: int = Field(..., ge=0, le=38)
    total_supply: int = Field(..., ge=0, description="Total minted supply in atomic units")


class RewardConfiguration(BaseModel):
    """Reward settings read from the vault contract."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    reward_token: str = Field(..., description="Identifier of the reward token contract")
    reward_rate_bps: int = Field(..., ge=0, description="Reward rate in basis points (10000 = 100%)")


class FetchStatus(str, Enum):
    """Aggregator lifecycle: IDLE -> LOADING -> READY | FAILED, and back to LOADING on refetch."""
    IDLE = "IDLE"
    LOADING = "LOADING"
    READY = "READY"
    FAILED = "FAILED"


class AggregatedTokenView(BaseModel):
    """
    Snapshot of everything the token panel needs.

    State policy:
    - LOADING keeps the previous data with error cleared.
    - READY carries this fetch's metadata and reward configuration. If only the
      balance request failed, balance is None and error is set (READY with error).
    - FAILED keeps the last-good data from the previous snapshot and sets error.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    status: FetchStatus = FetchStatus.IDLE
    identity: Optional[str] = None
    token_info: Optional[TokenMetadata] = None
    reward_info: Optional[RewardConfiguration] = None
    balance: Optional[int] = Field(None, ge=0, description="Balance of `identity` in atomic units")
    loading: bool = False
    error: Optional[AppError] = None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None

    @property
    def error_type(self) -> Optional[AppErrorType]:
        return self.error.type if self.error else None


class TokenSummary(BaseModel):
    """Display-ready strings derived from an AggregatedTokenView."""
    model_config = ConfigDict(frozen=True)

    symbol: str
    name: str
    reward_percent: str
    total_supply: str
    balance: Optional[str] = None
    identity: Optional[str] = None
    reward_token: str
    vault_contract: str
    loading: bool = False
    error_message: Optional[str] = None
    error_type: Optional[AppErrorType] = None
