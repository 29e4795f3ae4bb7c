"""
Pydantic schemas for the vault client.

**Organization by Domain**:
- errors.py: Error taxonomy (AppErrorType, AppError)
- token.py: Token metadata, reward configuration, aggregated view, summary

**Design Notes**:
- All models use Pydantic v2 and are frozen (snapshots are replaced, never mutated)
- Amounts are int atomic units; display strings only appear in TokenSummary
"""
from vaultclient.app.schemas.errors import AppError, AppErrorType
from vaultclient.app.schemas.token import (
    AggregatedTokenView,
    FetchStatus,
    RewardConfiguration,
    TokenMetadata,
    TokenSummary,
    )

__all__ = [
    "AppError",
    "AppErrorType",
    "AggregatedTokenView",
    "FetchStatus",
    "RewardConfiguration",
    "TokenMetadata",
    "TokenSummary",
    ]
