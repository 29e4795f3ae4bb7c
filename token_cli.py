#!/usr/bin/env python3
"""
Token Panel CLI

Command-line preview of what the token panel shows: token metadata, reward
rate, total supply, a wallet balance, deposit reward previews and timelock
countdowns. Reads through the configured source provider (see
DEFAULT_SOURCE_PROVIDER in .env).

Usage:
    python token_cli.py summary [--identity G...]
    python token_cli.py reward <amount>
    python token_cli.py countdown <unlock_unix_seconds> [--now <unix_seconds>]
"""
import sys
import argparse
import asyncio
from pathlib import Path

# Add project root to path (file is in root)
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from vaultclient.app.config import get_settings
from vaultclient.app.logging_config import configure_logging
from vaultclient.app.services.provider_registry import TokenSourceRegistry
from vaultclient.app.services.token_aggregator import TokenDataAggregator
from vaultclient.app.services.token_summary import preview_deposit_reward, summarize_token_view
from vaultclient.app.utils.datetime_utils import time_until_unlock, unix_now


def _build_aggregator(settings) -> TokenDataAggregator | None:
    config = settings.network_config()
    source = TokenSourceRegistry.get_provider_instance(settings.DEFAULT_SOURCE_PROVIDER, config=config)
    if source is None:
        print(f"❌ Unknown source provider '{settings.DEFAULT_SOURCE_PROVIDER}'")
        return None
    return TokenDataAggregator(source)


async def cmd_summary(identity: str | None) -> bool:
    """Fetch token data and print the panel summary."""
    settings = get_settings()
    aggregator = _build_aggregator(settings)
    if aggregator is None:
        return False

    await aggregator.fetch(identity)
    summary = summarize_token_view(aggregator.view, settings.network_config())

    print(f"\n{summary.symbol} - {summary.name}")
    print("-" * 50)
    print(f"{'Reward rate:':<20} {summary.reward_percent}%")
    print(f"{'Total minted:':<20} {summary.total_supply} {summary.symbol}")
    if summary.identity:
        balance = summary.balance if summary.balance is not None else "n/a"
        print(f"{'Wallet:':<20} {summary.identity}")
        print(f"{'Balance:':<20} {balance} {summary.symbol}")
    print(f"{'Reward token:':<20} {summary.reward_token}")
    print(f"{'Vault contract:':<20} {summary.vault_contract}")

    if summary.error_message:
        print(f"\n❌ [{summary.error_type.value}] {summary.error_message}")
        return False
    return True


async def cmd_reward(amount: str) -> bool:
    """Preview the reward minted for a deposit."""
    settings = get_settings()
    aggregator = _build_aggregator(settings)
    if aggregator is None:
        return False

    await aggregator.fetch()
    reward = preview_deposit_reward(amount, aggregator.view, settings.network_config())
    if reward is None:
        print(f"❌ Invalid amount: '{amount}'")
        return False

    summary = summarize_token_view(aggregator.view, settings.network_config())
    print(f"✅ Depositing {amount} XLM mints {reward} {summary.symbol} ({summary.reward_percent}%)")
    return True


def cmd_countdown(unlock_at: int, now: int | None) -> bool:
    """Print the time left on a timelock."""
    print(time_until_unlock(unlock_at, now if now is not None else unix_now()))
    return True


def main():
    parser = argparse.ArgumentParser(
        description="Vault Token Panel CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python token_cli.py summary
  python token_cli.py summary --identity GDHQ6TNWZ4V2JVCDWEUVW7YKFBXCOQZRRUCT27LAKES3PGOE6JSZMSMD
  python token_cli.py reward 100
  python token_cli.py countdown 1900000000
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logs")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # summary
    summary_parser = subparsers.add_parser("summary", help="Show token panel summary")
    summary_parser.add_argument("--identity", help="Wallet address to read the balance of")

    # reward
    reward_parser = subparsers.add_parser("reward", help="Preview deposit reward")
    reward_parser.add_argument("amount", help="Deposit amount in XLM (e.g. 100 or 0.5)")

    # countdown
    countdown_parser = subparsers.add_parser("countdown", help="Time left on a timelock")
    countdown_parser.add_argument("unlock_at", type=int, help="Unlock time (UNIX seconds, 0 = no lock)")
    countdown_parser.add_argument("--now", type=int, default=None, help="Override current time (UNIX seconds)")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    configure_logging("DEBUG" if args.verbose else get_settings().LOG_LEVEL, enable_file_logging=False, json_output=False)

    success = False
    if args.command == "summary":
        success = asyncio.run(cmd_summary(args.identity))
    elif args.command == "reward":
        success = asyncio.run(cmd_reward(args.amount))
    elif args.command == "countdown":
        success = cmd_countdown(args.unlock_at, args.now)

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
