"""
Token amount utilities.

Converts between on-chain atomic units (stroops for XLM-like tokens) and the
2-decimal strings shown to users, validates user-typed amounts and computes
deposit rewards from a basis-point rate.

All functions are pure and total: malformed, negative or non-integer input
never raises, it yields the documented default ("0.00", 0, False, "0.0").

Usage:
    from vaultclient.app.utils.amount_utils import format_amount, calculate_reward

    format_amount(12_345_678)            # "1.23"
    calculate_reward(1_000_000_000, 500)  # 50_000_000
"""
import re
from decimal import Decimal, InvalidOperation, ROUND_DOWN, ROUND_HALF_UP

# 10^7 atomic units = 1 display unit
DEFAULT_DECIMALS = 7

# 10000 bps = 100%
BPS_DENOMINATOR = 10_000

DISPLAY_FRACTION_DIGITS = 2

# Plain decimal literal: optional sign, digits with optional fraction, optional exponent.
# ASCII digits only. Rejects "Infinity", "NaN", hex, "1_000" and non-Latin digits, which Decimal() would accept.
_AMOUNT_PATTERN = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$", re.ASCII)


def _is_int(value) -> bool:
    """True for real integers (bool excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)


def format_amount(atomic_units: int, decimals: int = DEFAULT_DECIMALS) -> str:
    """
    Format an atomic-unit integer as a display string with exactly 2 decimals.

    The integer part comes from integer division and the fractional remainder
    is scaled to hundredths with integer arithmetic, so there is no float
    rounding at any magnitude. The third decimal is truncated, never rounded.

    Args:
        atomic_units: Non-negative amount in atomic units
        decimals: Token decimals (scale = 10 ** decimals), default 7

    Returns:
        Display string, "0.00" for negative or non-integer input

    Examples:
        >>> format_amount(0)
        '0.00'
        >>> format_amount(100_000)
        '0.01'
        >>> format_amount(99_999)
        '0.00'
        >>> format_amount(1_000_000_000_000)
        '100000.00'
    """
    if not _is_int(atomic_units) or not _is_int(decimals):
        return "0.00"
    if atomic_units < 0 or decimals < 0:
        return "0.00"

    scale = 10 ** decimals
    whole, remainder = divmod(atomic_units, scale)
    hundredths = remainder * 10 ** DISPLAY_FRACTION_DIGITS // scale
    return f"{whole}.{hundredths:0{DISPLAY_FRACTION_DIGITS}d}"


def is_valid_positive_amount(value: str) -> bool:
    """
    Check that a user-typed amount is a finite number strictly greater than 0.

    Rejects empty strings, garbage ("abc"), numeric-prefixed garbage ("12abc"),
    non-finite tokens ("Infinity", "-Infinity", "NaN"), zero and negatives.

    Examples:
        >>> is_valid_positive_amount("0.5")
        True
        >>> is_valid_positive_amount("12abc")
        False
        >>> is_valid_positive_amount("0")
        False
    """
    if not isinstance(value, str) or not _AMOUNT_PATTERN.match(value):
        return False
    try:
        number = Decimal(value.strip())
    except InvalidOperation:
        return False
    return number.is_finite() and number > 0


def parse_amount(value: str, decimals: int = DEFAULT_DECIMALS) -> int:
    """
    Convert a user-typed display amount into atomic units.

    Digits beyond the token's precision are truncated toward zero
    ("1.23456789" at 7 decimals -> 12_345_678).

    Args:
        value: Display amount typed by the user (e.g. "1.5")
        decimals: Token decimals, default 7

    Returns:
        Atomic units, 0 when the input is not a valid positive amount
    """
    if not is_valid_positive_amount(value) or not _is_int(decimals) or decimals < 0:
        return 0
    try:
        scaled = Decimal(value.strip()).scaleb(decimals)
        return int(scaled.to_integral_value(rounding=ROUND_DOWN))
    except ArithmeticError:
        # Exponent outside the decimal context (e.g. "1e999999999999")
        return 0


def calculate_reward(deposit_atomic_units: int, rate_bps: int) -> int:
    """
    Reward minted for a deposit: floor(deposit * rate_bps / 10000).

    Multiplication happens before the division so small deposits at low
    rates keep their precision (10_000_000 at 500 bps -> 500_000, not 0).

    Args:
        deposit_atomic_units: Deposit amount in atomic units
        rate_bps: Reward rate in basis points (10000 = 100%)

    Returns:
        Reward in atomic units. 0 when either input is zero, negative or not an int.
        Rates above 10000 bps are not clamped.

    Examples:
        >>> calculate_reward(1_000_000_000, 500)
        50000000
        >>> calculate_reward(-100, 500)
        0
    """
    if not _is_int(deposit_atomic_units) or not _is_int(rate_bps):
        return 0
    if deposit_atomic_units <= 0 or rate_bps <= 0:
        return 0
    return deposit_atomic_units * rate_bps // BPS_DENOMINATOR


def bps_to_percent_string(bps: int) -> str:
    """
    Render a basis-point rate as a percentage with one decimal.

    Out-of-range rates are clamped to [0, 10000]; half-way hundredths round up
    (255 bps -> "2.6"). A float-based toFixed(1) would print "2.5" here,
    since 2.55 has no exact binary representation.

    Examples:
        >>> bps_to_percent_string(500)
        '5.0'
        >>> bps_to_percent_string(250)
        '2.5'
        >>> bps_to_percent_string(10_000)
        '100.0'
    """
    if not _is_int(bps):
        return "0.0"
    clamped = max(0, min(bps, BPS_DENOMINATOR))
    percent = Decimal(clamped) / Decimal(100)
    return str(percent.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
