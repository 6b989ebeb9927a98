"""
Currency Conversion

Exchange-rate snapshots, the process-wide rate cache and formatting.
"""

from .cache import (
    RateCache,
    default_fetchers,
    get_default_cache,
    get_last_update_date,
    get_rates,
)
from .formatting import format_currency
from .rates import RateSnapshot, fetch_rate_snapshot
from .reference import FALLBACK_RATES, HOME_CURRENCY

__all__ = [
    "RateSnapshot",
    "RateCache",
    "fetch_rate_snapshot",
    "default_fetchers",
    "get_default_cache",
    "get_rates",
    "get_last_update_date",
    "format_currency",
    "FALLBACK_RATES",
    "HOME_CURRENCY",
]
