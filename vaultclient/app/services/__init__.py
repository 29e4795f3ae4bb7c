"""
Services package.
Token data aggregation and the source provider seam.

- TokenSourceProvider / TokenSourceError: interface implemented by data sources
- TokenDataAggregator: observable state holder (fetch / refetch)
- token_summary: display strings for the token panel
"""
from vaultclient.app.services.token_aggregator import TokenDataAggregator, classify_error
from vaultclient.app.services.token_source import TokenSourceError, TokenSourceProvider

__all__ = [
    "TokenDataAggregator",
    "TokenSourceError",
    "TokenSourceProvider",
    "classify_error",
    ]
