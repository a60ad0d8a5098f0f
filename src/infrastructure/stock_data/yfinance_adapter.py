"""
Infrastructure adapter: yfinance → IStockDataProvider.
All yfinance-specific details (ticker.info, history(), income_stmt) are confined here;
the rest of the codebase depends only on IStockDataProvider.

yfinance indexes daily bars at midnight in the exchange's timezone. Each bar is
re-anchored to midnight UTC of the same session date so the date formatter can
rely on UTC components alone.
"""

import logging
import math
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator, Optional

import pandas as pd
import yfinance as yf

from src.domain.entities.company import CompanyProfile, FinancialStats, ProfileLookup
from src.domain.entities.stock_price import HistoricalRecord, Quote
from src.domain.exceptions import TickerNotFoundError
from src.domain.ports.stock_data_port import IStockDataProvider

logger = logging.getLogger(__name__)


def _session_date(moment: datetime) -> datetime:
    """Midnight UTC of the calendar date *moment* carries in its own timezone."""
    return datetime(moment.year, moment.month, moment.day, tzinfo=timezone.utc)


def _number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def _first_number(info: dict, *keys: str) -> Optional[float]:
    """First key holding a number; a reported 0 counts as present."""
    for key in keys:
        number = _number(info.get(key))
        if number is not None:
            return number
    return None


def _is_not_found(exc: Exception) -> bool:
    response = getattr(exc, "response", None)
    if getattr(response, "status_code", None) == 404:
        return True
    message = str(exc)
    return "Not Found" in message or "404" in message


@contextmanager
def _provider_errors(symbol: str) -> Iterator[None]:
    """Translate Yahoo's not-found responses into TickerNotFoundError."""
    try:
        yield
    except Exception as exc:
        if _is_not_found(exc):
            raise TickerNotFoundError(symbol) from exc
        raise


def _location(info: dict) -> Optional[str]:
    parts = [info.get("city"), info.get("country")]
    present = [part for part in parts if part]
    return ", ".join(present) if present else None


def _latest_annual_revenue(
    income_stmt: Optional[pd.DataFrame],
) -> tuple[Optional[float], Optional[datetime]]:
    if income_stmt is None or income_stmt.empty or "Total Revenue" not in income_stmt.index:
        return None, None
    latest = max(income_stmt.columns)
    revenue = _number(income_stmt.at["Total Revenue", latest])
    if revenue is None:
        return None, None
    return revenue, _session_date(pd.Timestamp(latest).to_pydatetime())


class YFinanceStockDataProvider(IStockDataProvider):
    """Fetches stock market data from Yahoo Finance via the yfinance library."""

    def get_historical_prices(
        self,
        symbol: str,
        start_date: str,
        interval: str = "1d",
    ) -> list[HistoricalRecord]:
        with _provider_errors(symbol):
            history = yf.Ticker(symbol).history(
                start=start_date, interval=interval, auto_adjust=False
            )

        if history.empty:
            return []

        adj_column = "Adj Close" if "Adj Close" in history.columns else "Close"
        return [
            HistoricalRecord(
                date=_session_date(timestamp.to_pydatetime()),
                adj_close=float(row[adj_column]),
            )
            for timestamp, row in history.sort_index().iterrows()
            if not pd.isna(row[adj_column])
        ]

    def get_quote(self, symbol: str) -> Quote:
        with _provider_errors(symbol):
            info = yf.Ticker(symbol).info

        current_price = _first_number(info, "regularMarketPrice", "currentPrice")
        if current_price is None:
            raise TickerNotFoundError(symbol)

        return Quote(
            symbol=symbol,
            current_price=current_price,
            previous_close=_first_number(info, "regularMarketPreviousClose", "previousClose"),
            market_cap=_number(info.get("marketCap")),
        )

    def get_company_profile(self, symbol: str) -> ProfileLookup:
        try:
            info = yf.Ticker(symbol).info
        except Exception as exc:
            logger.warning("Error fetching profile data for %s: %s", symbol, exc)
            return ProfileLookup.failed(str(exc))

        return ProfileLookup.found(
            CompanyProfile(
                name=info.get("longName") or info.get("shortName"),
                sector=info.get("sector"),
                industry=info.get("industry"),
                summary=info.get("longBusinessSummary"),
                location=_location(info),
                exchange=info.get("fullExchangeName") or info.get("exchange"),
            )
        )

    def get_financial_stats(self, symbol: str) -> FinancialStats:
        with _provider_errors(symbol):
            ticker = yf.Ticker(symbol)
            info = ticker.info
            income_stmt = ticker.income_stmt

        annual_revenue, annual_end_date = _latest_annual_revenue(income_stmt)
        return FinancialStats(
            annual_revenue=annual_revenue,
            annual_revenue_end_date=annual_end_date,
            ttm_revenue=_number(info.get("totalRevenue")),
            beta=_number(info.get("beta")),
            shares_outstanding=_number(info.get("sharesOutstanding")),
        )
