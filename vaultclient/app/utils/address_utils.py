"""
Identifier display helpers.

Wallet addresses and contract ids are 56-character strkeys; the UI only shows
their head and tail. Truncated identifiers are for display only and must never
be used for comparison or lookup.
"""

ELLIPSIS = "..."

DEFAULT_VISIBLE_CHARS = 6


def truncate_identifier(identifier: str, visible_chars: int = DEFAULT_VISIBLE_CHARS) -> str:
    """
    Shorten an identifier to its first and last `visible_chars` characters.

    Args:
        identifier: Opaque identifier (wallet address, contract id, ...)
        visible_chars: Characters kept on each side, default 6

    Returns:
        The identifier unchanged when it is not longer than 2 * visible_chars
        (or when visible_chars is not positive), otherwise head + "..." + tail.
        Non-string input gives "".

    Examples:
        >>> truncate_identifier("GABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890123456789012345")
        'GABCDE...012345'
        >>> truncate_identifier("GABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890123456789012345", 4)
        'GABC...2345'
        >>> truncate_identifier("ABCDEF")
        'ABCDEF'
    """
    if not isinstance(identifier, str):
        return ""
    if not isinstance(visible_chars, int) or visible_chars <= 0:
        return identifier
    if len(identifier) <= visible_chars * 2:
        return identifier
    return f"{identifier[:visible_chars]}{ELLIPSIS}{identifier[-visible_chars:]}"
