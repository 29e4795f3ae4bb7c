"""
Utility functions for the vault client.

This package contains:
- amount_utils: Atomic unit <-> display conversions, amount validation, rewards
- address_utils: Identifier truncation for display
- datetime_utils: Clock helpers and timelock countdowns
"""
