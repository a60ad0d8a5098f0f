"""Shared fixtures: an in-memory IStockDataProvider and sample upstream data."""

from datetime import datetime, timezone

import pytest

from src.domain.entities.company import CompanyProfile, FinancialStats, ProfileLookup
from src.domain.entities.stock_price import HistoricalRecord, Quote
from src.domain.ports.stock_data_port import IStockDataProvider

FIXED_NOW = datetime(2024, 3, 8, 15, 30, 0, 250000, tzinfo=timezone.utc)


def utc_day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


class FakeStockDataProvider(IStockDataProvider):
    """Returns canned data and records every call it receives."""

    def __init__(
        self,
        history=None,
        quote=None,
        profile_lookup=None,
        stats=None,
        quote_error=None,
    ):
        self.history = history if history is not None else []
        self.quote = quote
        self.profile_lookup = profile_lookup or ProfileLookup.failed("not configured")
        self.stats = stats or FinancialStats()
        self.quote_error = quote_error
        self.calls = []

    def get_historical_prices(self, symbol, start_date, interval="1d"):
        self.calls.append(("history", symbol, start_date))
        return list(self.history)

    def get_quote(self, symbol):
        self.calls.append(("quote", symbol))
        if self.quote_error is not None:
            raise self.quote_error
        return self.quote

    def get_company_profile(self, symbol):
        self.calls.append(("profile", symbol))
        return self.profile_lookup

    def get_financial_stats(self, symbol):
        self.calls.append(("stats", symbol))
        return self.stats


@pytest.fixture
def sample_history():
    return [
        HistoricalRecord(date=utc_day(2024, 3, 1), adj_close=100.0),
        HistoricalRecord(date=utc_day(2024, 3, 4), adj_close=105.0),
        HistoricalRecord(date=utc_day(2024, 3, 5), adj_close=110.0),
    ]


@pytest.fixture
def sample_quote():
    return Quote(symbol="acme", current_price=120.0, previous_close=50.0, market_cap=60_000_000.0)


@pytest.fixture
def sample_profile():
    return CompanyProfile(
        name="Acme Corporation",
        sector="Industrials",
        industry="Specialty Machinery",
        summary="Acme makes anvils.",
        location="Phoenix, United States",
        exchange="NasdaqGS",
    )


@pytest.fixture
def sample_stats():
    return FinancialStats(
        annual_revenue=1000.0,
        annual_revenue_end_date=utc_day(2023, 12, 31),
        ttm_revenue=1200.0,
        beta=1.234,
        shares_outstanding=1_000_000.0,
    )


@pytest.fixture
def fake_provider(sample_history, sample_quote, sample_profile, sample_stats):
    return FakeStockDataProvider(
        history=sample_history,
        quote=sample_quote,
        profile_lookup=ProfileLookup.found(sample_profile),
        stats=sample_stats,
    )
