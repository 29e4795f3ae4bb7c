"""
Token data source interface.

This module provides:
- TokenSourceError: Classified exception raised by source providers
- TokenSourceProvider: Abstract base class for token data providers

Providers are the only code that talks to the chain (RPC, indexers, fixtures).
The aggregator only sees the three async reads below and the errors they raise.
"""
from abc import ABC, abstractmethod
from typing import Optional

from vaultclient.app.schemas.errors import AppErrorType
from vaultclient.app.schemas.token import RewardConfiguration, TokenMetadata


# ============================================================================
# EXCEPTIONS
# ============================================================================


class TokenSourceError(Exception):
    """Base exception for token source errors, carrying its classification."""

    def __init__(self, message: str, error_type: AppErrorType, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.error_type = AppErrorType(error_type)
        self.details = details or {}


# ============================================================================
# ABSTRACT BASE CLASS
# ============================================================================


class TokenSourceProvider(ABC):
    """
    Abstract base class for token data providers (plugins).

    PLUGIN (implementations) is responsible for:
    - Reading raw data from the authoritative source (contract calls, fixtures, ...)
    - Returning TokenMetadata / RewardConfiguration / int balances
    - Converting source failures into TokenSourceError with
      CONTRACT_ERROR (contract rejected or not deployed) or
      NETWORK_ERROR (transport failure)

    CORE (TokenDataAggregator) is responsible for:
    - Issuing the reads concurrently and joining them
    - Merging results into an AggregatedTokenView
    - Classifying unexpected exceptions as NETWORK_ERROR

    Providers auto-register via @register_provider(TokenSourceRegistry) and must
    be constructible without arguments (the registry instantiates them to read
    provider_code).
    """

    @property
    @abstractmethod
    def provider_code(self) -> str:
        """
        Unique provider identifier.

        Examples: 'static'
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Human-readable provider name."""
        pass

    @abstractmethod
    async def get_token_metadata(self) -> TokenMetadata:
        """
        Read name, symbol, decimals and total supply of the reward token.

        Raises:
            TokenSourceError: CONTRACT_ERROR or NETWORK_ERROR
        """
        pass

    @abstractmethod
    async def get_reward_configuration(self) -> RewardConfiguration:
        """
        Read the reward token identifier and the reward rate (bps).

        Raises:
            TokenSourceError: CONTRACT_ERROR or NETWORK_ERROR
        """
        pass

    @abstractmethod
    async def get_balance(self, identity: str) -> int:
        """
        Read the reward-token balance of `identity` in atomic units.

        Only called when the consumer supplied an identity (connected wallet).

        Raises:
            TokenSourceError: CONTRACT_ERROR or NETWORK_ERROR
        """
        pass
