"""
Presentation helpers for the token panel.

Turns an AggregatedTokenView into display strings. This is the only place
where amounts are formatted and identifiers truncated; the aggregator itself
deals in atomic units and full identifiers.
"""
from typing import Optional

from vaultclient.app.config import NetworkConfig
from vaultclient.app.schemas.token import AggregatedTokenView, TokenSummary
from vaultclient.app.utils.address_utils import truncate_identifier
from vaultclient.app.utils.amount_utils import (
    DEFAULT_DECIMALS,
    bps_to_percent_string,
    calculate_reward,
    format_amount,
    is_valid_positive_amount,
    parse_amount,
    )

DEFAULT_SYMBOL = "SVT"
DEFAULT_NAME = "StellarVault Token"

# Contract ids are shown with 10 chars on each side
CONTRACT_VISIBLE_CHARS = 10


def effective_reward_rate_bps(view: AggregatedTokenView, config: NetworkConfig) -> int:
    """Reward rate read from the vault, or the configured default until it is known."""
    if view.reward_info is not None:
        return view.reward_info.reward_rate_bps
    return config.reward_rate_bps


def _token_decimals(view: AggregatedTokenView) -> int:
    return view.token_info.decimals if view.token_info is not None else DEFAULT_DECIMALS


def summarize_token_view(view: AggregatedTokenView, config: NetworkConfig) -> TokenSummary:
    """
    Build the display strings for the token panel.

    Falls back to the SVT defaults and the configured reward rate while the
    corresponding data has not been fetched yet.
    """
    decimals = _token_decimals(view)
    token_info = view.token_info
    reward_token = view.reward_info.reward_token if view.reward_info else config.svt_token_id

    return TokenSummary(
        symbol=token_info.symbol if token_info else DEFAULT_SYMBOL,
        name=token_info.name if token_info else DEFAULT_NAME,
        reward_percent=bps_to_percent_string(effective_reward_rate_bps(view, config)),
        total_supply=format_amount(token_info.total_supply, decimals) if token_info else format_amount(0),
        balance=format_amount(view.balance, decimals) if view.balance is not None else None,
        identity=truncate_identifier(view.identity, CONTRACT_VISIBLE_CHARS) if view.identity else None,
        reward_token=truncate_identifier(reward_token, CONTRACT_VISIBLE_CHARS),
        vault_contract=truncate_identifier(config.vault_contract_id, CONTRACT_VISIBLE_CHARS),
        loading=view.loading,
        error_message=view.error_message,
        error_type=view.error_type,
        )


def preview_deposit_reward(amount: str, view: AggregatedTokenView, config: NetworkConfig) -> Optional[str]:
    """
    Reward a user would receive for depositing `amount` (display units).

    Args:
        amount: Deposit amount as typed by the user (e.g. "100")
        view: Current token view (for decimals and reward rate)
        config: Network configuration (default reward rate)

    Returns:
        Formatted reward (e.g. "5.00"), or None when the amount is invalid

    Example:
        >>> preview_deposit_reward("100", AggregatedTokenView(), config)  # 500 bps
        '5.00'
    """
    if not is_valid_positive_amount(amount):
        return None
    # Deposits are native XLM (7 decimals); the reward is minted in SVT atomic units
    deposit = parse_amount(amount, DEFAULT_DECIMALS)
    reward = calculate_reward(deposit, effective_reward_rate_bps(view, config))
    return format_amount(reward, _token_decimals(view))
