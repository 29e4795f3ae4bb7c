"""
Date and time utilities for the vault client.

Provides the clock helpers and the timelock countdown shown next to locked
balances. The countdown functions take "now" as an argument; only utcnow()
and unix_now() read the system clock, and callers inject their result.
"""
from datetime import datetime, timezone

UNLOCKED = "Unlocked"

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3_600
SECONDS_PER_DAY = 86_400


def utcnow() -> datetime:
    """
    Get current UTC datetime with timezone info.

    Returns:
        datetime: Current datetime in UTC with tzinfo set to timezone.utc
    """
    return datetime.now(timezone.utc)


def unix_now() -> int:
    """Current UNIX time in whole seconds (the unit used by vault timelocks)."""
    return int(utcnow().timestamp())


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_unlocked(unlock_unix_seconds: int, now_unix_seconds: int) -> bool:
    """
    Whether funds with the given timelock are withdrawable at `now`.

    A timelock of 0 (or any non-positive value) means "no lock".
    Non-integer input is treated as unlocked.
    """
    if not _is_int(unlock_unix_seconds) or not _is_int(now_unix_seconds):
        return True
    return unlock_unix_seconds <= 0 or unlock_unix_seconds <= now_unix_seconds


def time_until_unlock(unlock_unix_seconds: int, now_unix_seconds: int) -> str:
    """
    Human countdown until a timelock expires.

    Uses the two coarsest units:
    - delta >= 1 day:  "{d}d {h}h"
    - delta >= 1 hour: "{h}h {m}m"
    - otherwise:       "{m}m" (floored, so "0m" under one minute)

    Args:
        unlock_unix_seconds: Timelock expiry (UNIX seconds), 0 = no lock
        now_unix_seconds: Current time (UNIX seconds), injected by the caller

    Returns:
        Countdown string, or "Unlocked" when the lock is absent or expired

    Examples:
        >>> time_until_unlock(0, 1_700_000_000)
        'Unlocked'
        >>> time_until_unlock(1_700_090_000, 1_700_000_000)
        '1d 1h'
        >>> time_until_unlock(1_700_007_200, 1_700_000_000)
        '2h 0m'
        >>> time_until_unlock(1_700_000_600, 1_700_000_000)
        '10m'
    """
    if is_unlocked(unlock_unix_seconds, now_unix_seconds):
        return UNLOCKED

    delta = unlock_unix_seconds - now_unix_seconds
    days, rest = divmod(delta, SECONDS_PER_DAY)
    hours, rest = divmod(rest, SECONDS_PER_HOUR)
    minutes = rest // SECONDS_PER_MINUTE

    if days > 0:
        return f"{days}d {hours}h"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"
