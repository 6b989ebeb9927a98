"""
Unit Tests for Currency Conversion

Rate snapshots, the refresh chain of the rate cache and formatting.
No test touches the network: fetchers and HTTP sessions are stubs.

Run with: pytest shared/tests/test_currency.py -v
"""

from datetime import timedelta

import pytest
import requests

from shared.currency import (
    FALLBACK_RATES,
    RateCache,
    RateSnapshot,
    fetch_rate_snapshot,
    format_currency,
)
from shared.errors import RateSourceUnavailable, ValidationError


# =============================================================================
# FIXTURES
# =============================================================================

PAYLOAD = {
    "date": "2026-10-18",
    "inr": {"usd": 0.0125, "eur": 0.01, "btc": "n/a", "xyz": 0},
}


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now

    def advance(self, hours):
        self.now += hours * 3600


class CountingFetcher:
    """Returns a snapshot (or raises) and counts calls."""

    def __init__(self, usd_rate=None, source="primary"):
        self.usd_rate = usd_rate
        self.source = source
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.usd_rate is None:
            raise RateSourceUnavailable(f"{self.source} is down")
        return RateSnapshot(
            rates={"INR": 1.0, "USD": self.usd_rate},
            date="2026-10-18",
            source=self.source,
        )


class FakeResponse:
    def __init__(self, payload=None, status_error=None):
        self.payload = payload
        self.status_error = status_error

    def raise_for_status(self):
        if self.status_error is not None:
            raise self.status_error

    def json(self):
        if self.payload is None:
            raise ValueError("No JSON object could be decoded")
        return self.payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def get(self, url, timeout=None):
        self.requests.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def clock():
    return FakeClock()


# =============================================================================
# SNAPSHOT TESTS
# =============================================================================

class TestRateSnapshot:

    def test_fallback_table(self):
        rates = RateSnapshot.fallback()
        assert rates.usd_rate == 83.0
        assert rates.rate("INR") == 1.0
        assert rates.source == "fallback"
        assert rates.date is None

    def test_to_home(self):
        rates = RateSnapshot.fallback()
        assert rates.to_home(1000, "USD") == pytest.approx(83000.0)
        assert rates.to_home(1000, "eur") == pytest.approx(90000.0)

    def test_round_trip_through_home(self):
        rates = RateSnapshot.fallback()
        for currency in FALLBACK_RATES:
            home = rates.to_home(1234.56, currency)
            assert rates.from_home(home, currency) == pytest.approx(1234.56)

    def test_convert_between_currencies(self):
        rates = RateSnapshot.fallback()
        # 105 GBP = 11025 INR = 105 * 105 / 90 EUR
        assert rates.convert(105, "GBP", "EUR") == pytest.approx(122.5)

    def test_unknown_currency_rejected(self):
        with pytest.raises(ValidationError, match="XYZ"):
            RateSnapshot.fallback().rate("XYZ")

    def test_to_frame(self):
        df = RateSnapshot.fallback().to_frame()
        assert df.columns == ["currency", "rate"]
        assert len(df) == len(FALLBACK_RATES)
        usd = df.filter(df["currency"] == "USD")
        assert usd["rate"][0] == 83.0


class TestFromPayload:

    def test_rates_are_inverted(self):
        rates = RateSnapshot.from_payload(PAYLOAD, source="primary")
        assert rates.rate("USD") == pytest.approx(80.0)
        assert rates.rate("EUR") == pytest.approx(100.0)
        assert rates.date == "2026-10-18"
        assert rates.source == "primary"

    def test_home_currency_is_one(self):
        rates = RateSnapshot.from_payload(PAYLOAD, source="primary")
        assert rates.rate("INR") == 1.0

    def test_unusable_entries_skipped(self):
        rates = RateSnapshot.from_payload(PAYLOAD, source="primary")
        assert "BTC" not in rates.rates
        assert "XYZ" not in rates.rates

    def test_missing_usd_is_a_failed_fetch(self):
        with pytest.raises(RateSourceUnavailable):
            RateSnapshot.from_payload({"inr": {"eur": 0.01}}, source="primary")

    def test_missing_base_is_a_failed_fetch(self):
        with pytest.raises(RateSourceUnavailable):
            RateSnapshot.from_payload({"usd": {"inr": 83.0}}, source="primary")


# =============================================================================
# FETCH TESTS
# =============================================================================

class TestFetchRateSnapshot:

    def test_fetch_parses_payload(self):
        session = FakeSession(response=FakeResponse(PAYLOAD))
        rates = fetch_rate_snapshot("https://rates.test/inr.json", "primary", session=session)
        assert rates.usd_rate == pytest.approx(80.0)
        assert session.requests == [("https://rates.test/inr.json", 10)]

    def test_connection_error(self):
        session = FakeSession(error=requests.ConnectionError("unreachable"))
        with pytest.raises(RateSourceUnavailable, match="primary"):
            fetch_rate_snapshot("https://rates.test/inr.json", "primary", session=session)

    def test_http_error(self):
        response = FakeResponse(PAYLOAD, status_error=requests.HTTPError("503 Server Error"))
        with pytest.raises(RateSourceUnavailable):
            fetch_rate_snapshot("https://rates.test/inr.json", "secondary", session=FakeSession(response))

    def test_invalid_json(self):
        with pytest.raises(RateSourceUnavailable):
            fetch_rate_snapshot("https://rates.test/inr.json", "primary", session=FakeSession(FakeResponse()))


# =============================================================================
# CACHE TESTS
# =============================================================================

class TestRateCache:

    def test_first_call_fetches_primary(self, clock):
        primary, secondary = CountingFetcher(84.0), CountingFetcher(85.0, "secondary")
        cache = RateCache([primary, secondary], clock=clock)

        rates = cache.get_rates()

        assert rates.usd_rate == 84.0
        assert primary.calls == 1
        assert secondary.calls == 0
        assert cache.last_update_date == "2026-10-18"

    def test_fresh_cache_not_refetched(self, clock):
        primary = CountingFetcher(84.0)
        cache = RateCache([primary], clock=clock)

        cache.get_rates()
        clock.advance(23)
        cache.get_rates()

        assert primary.calls == 1
        assert cache.is_fresh()

    def test_expired_cache_refetched(self, clock):
        primary = CountingFetcher(84.0)
        cache = RateCache([primary], clock=clock)

        cache.get_rates()
        clock.advance(24)

        assert not cache.is_fresh()
        cache.get_rates()
        assert primary.calls == 2

    def test_custom_ttl(self, clock):
        primary = CountingFetcher(84.0)
        cache = RateCache([primary], ttl=timedelta(hours=1), clock=clock)

        cache.get_rates()
        clock.advance(2)
        cache.get_rates()

        assert primary.calls == 2

    def test_secondary_used_when_primary_fails(self, clock):
        primary, secondary = CountingFetcher(None), CountingFetcher(85.0, "secondary")
        cache = RateCache([primary, secondary], clock=clock)

        rates = cache.get_rates()

        assert rates.source == "secondary"
        assert rates.usd_rate == 85.0

    def test_fallback_when_nothing_ever_fetched(self, clock):
        cache = RateCache([CountingFetcher(None), CountingFetcher(None, "secondary")], clock=clock)

        rates = cache.get_rates()

        assert rates.source == "fallback"
        assert rates.usd_rate == 83.0
        assert cache.snapshot is None

    def test_stale_cache_when_sources_fail(self, clock):
        primary = CountingFetcher(84.0)
        cache = RateCache([primary], clock=clock)
        cache.get_rates()

        primary.usd_rate = None
        clock.advance(25)
        rates = cache.get_rates()

        assert rates.usd_rate == 84.0
        assert primary.calls == 2

    def test_refresh_in_progress_does_not_wait(self, clock):
        """A caller that finds a refresh running gets the fallback table."""
        primary = CountingFetcher(84.0)
        cache = RateCache([primary], clock=clock)

        cache._refresh_lock.acquire()
        try:
            rates = cache.get_rates()
        finally:
            cache._refresh_lock.release()

        assert rates.source == "fallback"
        assert primary.calls == 0

    def test_clear(self, clock):
        primary = CountingFetcher(84.0)
        cache = RateCache([primary], clock=clock)
        cache.get_rates()

        cache.clear()
        cache.get_rates()

        assert primary.calls == 2


# =============================================================================
# FORMATTING TESTS
# =============================================================================

class TestFormatCurrency:

    def test_home_currency(self):
        assert format_currency(124500, "INR") == "₹124,500.00"

    def test_symbol_lookup_is_case_insensitive(self):
        assert format_currency(1000.5, "usd") == "$1,000.50"

    def test_multi_letter_symbol(self):
        assert format_currency(12.5, "SGD") == "S$12.50"

    def test_unknown_currency_uses_code(self):
        assert format_currency(10, "xyz") == "XYZ10.00"

    def test_missing_amount(self):
        assert format_currency(None) == "₹0.00"
