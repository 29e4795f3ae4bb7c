"""
Static token source.

Serves token metadata, reward configuration and balances from the injected
NetworkConfig and an in-memory balance table. Used by the CLI for offline
previews and by the tests as a deterministic source; it never touches the network.
"""
import asyncio
from typing import Dict, Optional

import structlog

from vaultclient.app.config import NetworkConfig, get_settings
from vaultclient.app.schemas.errors import AppErrorType
from vaultclient.app.schemas.token import RewardConfiguration, TokenMetadata
from vaultclient.app.services.provider_registry import register_provider, TokenSourceRegistry
from vaultclient.app.services.token_source import TokenSourceError, TokenSourceProvider

logger = structlog.get_logger(__name__)

SVT_NAME = "StellarVault Token"
SVT_SYMBOL = "SVT"
SVT_DECIMALS = 7


@register_provider(TokenSourceRegistry)
class StaticTokenSource(TokenSourceProvider):
    """
    In-memory token source.

    Total supply is the sum of the balance table, matching the token contract
    where supply only grows through mints credited to a balance.
    """

    def __init__(
        self,
        config: Optional[NetworkConfig] = None,
        balances: Optional[Dict[str, int]] = None,
        ):
        self.config = config or get_settings().network_config()
        self._balances: Dict[str, int] = {}
        for identity, amount in (balances or {}).items():
            self.set_balance(identity, amount)

    @property
    def provider_code(self) -> str:
        return "static"

    @property
    def provider_name(self) -> str:
        return "Static Token Source"

    def set_balance(self, identity: str, amount: int) -> None:
        """Set the balance of `identity` (atomic units, must be >= 0)."""
        if amount < 0:
            raise ValueError(f"Balance must be non-negative, got {amount} for {identity}")
        self._balances[identity] = amount

    def _ensure_deployed(self, request: str) -> None:
        if not self.config.contract_deployed:
            raise TokenSourceError(
                f"Contracts are not deployed on {self.config.name}",
                AppErrorType.CONTRACT_ERROR,
                {"provider": self.provider_code, "request": request},
                )

    async def get_token_metadata(self) -> TokenMetadata:
        # Yield to the loop like a real request would
        await asyncio.sleep(0)
        self._ensure_deployed("token_metadata")
        return TokenMetadata(
            name=SVT_NAME,
            symbol=SVT_SYMBOL,
            decimals=SVT_DECIMALS,
            total_supply=sum(self._balances.values()),
            )

    async def get_reward_configuration(self) -> RewardConfiguration:
        await asyncio.sleep(0)
        self._ensure_deployed("reward_configuration")
        return RewardConfiguration(
            reward_token=self.config.svt_token_id,
            reward_rate_bps=self.config.reward_rate_bps,
            )

    async def get_balance(self, identity: str) -> int:
        await asyncio.sleep(0)
        self._ensure_deployed("balance")
        balance = self._balances.get(identity, 0)
        logger.debug("Static balance read", identity=identity, balance=balance)
        return balance
