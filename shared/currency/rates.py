"""
Rate Snapshots

A RateSnapshot maps currency code -> home currency units per 1 unit of that
currency, so that amount_home = amount * rate[currency].
"""

import logging
from dataclasses import dataclass, field
from typing import Mapping

import polars as pl
import requests

from shared.errors import RateSourceUnavailable, ValidationError

from .reference import (
    FALLBACK_RATES,
    HOME_CURRENCY,
    REQUEST_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateSnapshot:
    """Currency -> home currency rates as of one upstream publication date."""

    rates: Mapping[str, float] = field(default_factory=dict)
    date: str | None = None
    source: str = "fallback"

    def rate(self, currency: str) -> float:
        """Home currency units per 1 unit of currency."""
        try:
            return self.rates[currency.upper()]
        except KeyError:
            raise ValidationError(f"Unsupported currency: {currency}") from None

    @property
    def usd_rate(self) -> float:
        return self.rate("USD")

    def to_home(self, amount: float, currency: str) -> float:
        return amount * self.rate(currency)

    def from_home(self, amount: float, currency: str) -> float:
        return amount / self.rate(currency)

    def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
        """Convert between two currencies through the home currency."""
        return self.from_home(self.to_home(amount, from_currency), to_currency)

    @property
    def currencies(self) -> list[str]:
        return sorted(self.rates)

    def to_frame(self) -> pl.DataFrame:
        """Rates as a (currency, rate) frame for joining onto shipments."""
        return pl.DataFrame(
            {"currency": list(self.rates), "rate": list(self.rates.values())},
            schema={"currency": pl.Utf8, "rate": pl.Float64},
        )

    @classmethod
    def fallback(cls) -> "RateSnapshot":
        """Hardcoded snapshot used when no source has ever answered."""
        return cls(rates=dict(FALLBACK_RATES), date=None, source="fallback")

    @classmethod
    def from_payload(cls, payload: dict, source: str) -> "RateSnapshot":
        """
        Build a snapshot from an upstream payload.

        Payload shape: {"date": "2026-10-18", "inr": {"usd": 0.0117, ...}}
        where each value is foreign units per 1 home unit. Entries that are
        not positive numbers are skipped.

        Raises:
            RateSourceUnavailable: If the payload has no home or USD quotes
        """
        base = HOME_CURRENCY.lower()
        quotes = payload.get(base) if isinstance(payload, dict) else None
        if not isinstance(quotes, dict):
            raise RateSourceUnavailable(f"Payload from {source} has no '{base}' quotes")

        rates = {}
        for code, value in quotes.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                continue
            # 1 home = value foreign  ->  1 foreign = 1/value home
            rates[code.upper()] = 1 / value

        rates[HOME_CURRENCY] = 1.0
        if "USD" not in rates:
            raise RateSourceUnavailable(f"Payload from {source} has no USD rate")

        return cls(rates=rates, date=payload.get("date"), source=source)


def fetch_rate_snapshot(
    url: str,
    source: str,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
    session: requests.Session | None = None,
) -> RateSnapshot:
    """
    Fetch and parse one upstream rate publication.

    Args:
        url: Endpoint returning the home currency quote table
        source: Label stored on the snapshot (e.g., "primary")
        timeout: Request timeout in seconds
        session: Optional requests session (module-level get otherwise)

    Returns:
        RateSnapshot with inverted rates

    Raises:
        RateSourceUnavailable: If the request fails or the payload is unusable
    """
    http = session if session is not None else requests
    logger.debug("Fetching exchange rates from %s (%s)", url, source)

    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as e:
        raise RateSourceUnavailable(f"Failed to fetch rates from {source}: {e}") from e

    return RateSnapshot.from_payload(payload, source=source)
