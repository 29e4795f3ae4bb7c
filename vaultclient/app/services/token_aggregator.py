"""
Token data aggregation service.

TokenDataAggregator is the single stateful component of the client. It reads
token metadata, reward configuration and (optionally) a balance from a
TokenSourceProvider, merges them into an AggregatedTokenView and publishes
every state transition to its subscribers.

State machine:
    IDLE -> LOADING -> READY | FAILED
    READY | FAILED -> LOADING (refetch)

Design principles:
- Snapshots are frozen and replaced wholesale; consumers never see a half-merged view
- Metadata and reward configuration are fetched concurrently (fan-out/fan-in)
- The identity-scoped balance read runs after the join
- Overlapping fetches are not cancelled: whichever finishes last wins
- No timeouts and no retries; a failed fetch is retried by calling refetch()
"""
import asyncio
from typing import Callable, List, Optional

import structlog

from vaultclient.app.schemas.errors import AppError, AppErrorType
from vaultclient.app.schemas.token import (
    AggregatedTokenView,
    FetchStatus,
    RewardConfiguration,
    TokenMetadata,
    )
from vaultclient.app.services.token_source import TokenSourceError, TokenSourceProvider

logger = structlog.get_logger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to load token data"

Subscriber = Callable[[AggregatedTokenView], None]


def classify_error(exc: Exception) -> AppError:
    """
    Turn an exception raised by a source provider into an AppError.

    TokenSourceError keeps its own classification, message and details.
    Anything else becomes NETWORK_ERROR carrying the original message.
    """
    if isinstance(exc, TokenSourceError):
        return AppError(type=exc.error_type, message=exc.message, details=exc.details or None)
    return AppError(
        type=AppErrorType.NETWORK_ERROR,
        message=str(exc) or DEFAULT_ERROR_MESSAGE,
        details={"exception": type(exc).__name__},
        )


class TokenDataAggregator:
    """
    Observable holder of the token panel state.

    Usage:
        aggregator = TokenDataAggregator(source)
        unsubscribe = aggregator.subscribe(lambda view: render(view))
        await aggregator.fetch("GABC...")
        await aggregator.refetch()

    Failure policy:
    - metadata or reward read fails -> FAILED, last-good data kept, error set
    - only the balance read fails   -> READY with balance=None and error set
    """

    def __init__(self, source: TokenSourceProvider, identity: Optional[str] = None):
        self._source = source
        self._identity = identity
        self._view = AggregatedTokenView(identity=identity)
        self._subscribers: List[Subscriber] = []

    @property
    def view(self) -> AggregatedTokenView:
        """Current snapshot."""
        return self._view

    @property
    def identity(self) -> Optional[str]:
        """Identity used by refetch()."""
        return self._identity

    def set_identity(self, identity: Optional[str]) -> None:
        """Track a new identity (wallet connected/disconnected) without fetching."""
        self._identity = identity

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback invoked with every new snapshot.

        Returns:
            A function that removes the callback (safe to call twice)
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, view: AggregatedTokenView) -> None:
        self._view = view
        for callback in list(self._subscribers):
            try:
                callback(view)
            except Exception:
                # One broken subscriber must not starve the others or abort the fetch
                logger.exception("Token view subscriber failed", status=view.status.value)

    def _carried_balance(self, identity: Optional[str]) -> Optional[int]:
        """Previous balance, only if it belongs to the same identity."""
        if self._view.identity == identity:
            return self._view.balance
        return None

    async def fetch(self, identity: Optional[str] = None) -> None:
        """
        Fetch token data and publish LOADING, then READY or FAILED.

        If the fetch is cancelled (or a provider raises CancelledError), the
        snapshot taken before LOADING is republished with loading=False and
        the cancellation propagates.

        Args:
            identity: Wallet address whose balance should be read; None or ""
                skips the balance request. Remembered for refetch().
        """
        self._identity = identity
        provider = self._source.provider_code
        previous = self._view

        self._publish(previous.model_copy(update={
            "status": FetchStatus.LOADING,
            "identity": identity,
            "balance": self._carried_balance(identity),
            "loading": True,
            "error": None,
            }))
        logger.debug("Fetching token data", provider=provider, identity=identity)

        try:
            await self._load(identity, provider)
        except BaseException:
            logger.warning("Token data fetch interrupted", provider=provider, identity=identity)
            status = FetchStatus.IDLE if previous.status is FetchStatus.LOADING else previous.status
            self._publish(previous.model_copy(update={"status": status, "loading": False}))
            raise

    async def _load(self, identity: Optional[str], provider: str) -> None:
        """Read, validate and publish READY or FAILED. Only non-Exception errors escape."""
        # 1. Metadata + reward configuration, concurrently
        results = await asyncio.gather(
            self._source.get_token_metadata(),
            self._source.get_reward_configuration(),
            return_exceptions=True,
            )
        for result in results:
            # Cancellation is not a fetch failure
            if isinstance(result, BaseException) and not isinstance(result, Exception):
                raise result

        try:
            failure = next((r for r in results if isinstance(r, Exception)), None)
            if failure is not None:
                raise failure
            token_info = TokenMetadata.model_validate(results[0])
            reward_info = RewardConfiguration.model_validate(results[1])
        except Exception as exc:
            error = classify_error(exc)
            logger.warning(
                "Token data fetch failed",
                provider=provider,
                identity=identity,
                error_type=error.type.value,
                error=error.message,
                )
            self._publish(AggregatedTokenView(
                status=FetchStatus.FAILED,
                identity=identity,
                token_info=self._view.token_info,
                reward_info=self._view.reward_info,
                balance=self._carried_balance(identity),
                loading=False,
                error=error,
                ))
            return

        # 2. Identity-scoped balance, after the join
        balance = None
        error = None
        if identity:
            try:
                balance = await self._source.get_balance(identity)
                if not isinstance(balance, int) or isinstance(balance, bool) or balance < 0:
                    raise TokenSourceError(
                        f"Invalid balance for {identity}: {balance!r}",
                        AppErrorType.CONTRACT_ERROR,
                        {"provider": provider, "request": "balance"},
                        )
            except Exception as exc:
                balance = None
                error = classify_error(exc)
                logger.warning(
                    "Balance fetch failed",
                    provider=provider,
                    identity=identity,
                    error_type=error.type.value,
                    error=error.message,
                    )

        self._publish(AggregatedTokenView(
            status=FetchStatus.READY,
            identity=identity,
            token_info=token_info,
            reward_info=reward_info,
            balance=balance,
            loading=False,
            error=error,
            ))
        logger.info(
            "Token data fetched",
            provider=provider,
            identity=identity,
            symbol=token_info.symbol,
            reward_rate_bps=reward_info.reward_rate_bps,
            balance=balance,
            )

    async def refetch(self) -> None:
        """Fetch again with the identity passed to the last fetch()."""
        await self.fetch(self._identity)
