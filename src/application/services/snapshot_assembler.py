"""
Assembles the InvestmentSnapshot from the four upstream results.
Pure function: no I/O, the request time is passed in.
"""

from datetime import datetime
from typing import Optional

from src.application.services.date_format import format_date_ymd, format_timestamp
from src.application.services.metrics_resolver import resolve_market_cap, resolve_revenue
from src.application.services.performance_calculator import (
    MONEY_DECIMALS,
    InvestmentPerformance,
    calculate_performance,
)
from src.domain.entities.company import CompanyProfile, FinancialStats
from src.domain.entities.investment_snapshot import (
    ChartPoint,
    DatedValue,
    InvestmentSnapshot,
    InvestmentSummary,
    Metrics,
    ProfileBlock,
    RevenueFigure,
)
from src.domain.entities.stock_price import HistoricalRecord, Quote

NOT_AVAILABLE = "N/A"
NO_SUMMARY = "No summary available."


def _round_optional(value: Optional[float]) -> Optional[float]:
    return None if value is None else round(value, MONEY_DECIMALS)


def build_chart_data(
    history: list[HistoricalRecord], shares_purchased: float
) -> list[ChartPoint]:
    """One point per upstream record, in upstream (chronological) order."""
    return [
        ChartPoint(
            date=format_date_ymd(record.date),
            value=round(shares_purchased * record.adj_close, MONEY_DECIMALS),
            price=round(record.adj_close, MONEY_DECIMALS),
        )
        for record in history
    ]


def build_profile_block(ticker: str, profile: Optional[CompanyProfile]) -> ProfileBlock:
    profile = profile or CompanyProfile()
    return ProfileBlock(
        name=profile.name or ticker.upper(),
        sector=profile.sector or NOT_AVAILABLE,
        industry=profile.industry or NOT_AVAILABLE,
        summary=profile.summary or NO_SUMMARY,
        location=profile.location or NOT_AVAILABLE,
        exchange=profile.exchange or NOT_AVAILABLE,
    )


def build_metrics(
    history: list[HistoricalRecord],
    quote: Quote,
    stats: FinancialStats,
) -> Metrics:
    last_record = history[-1]
    last_trading_day = format_date_ymd(last_record.date)
    revenue = resolve_revenue(stats, last_trading_day)
    return Metrics(
        previous_close=DatedValue(
            value=round(last_record.adj_close, MONEY_DECIMALS),
            as_of_date=last_trading_day,
        ),
        market_cap=DatedValue(
            value=_round_optional(resolve_market_cap(quote, stats)),
            as_of_date=last_trading_day,
        ),
        total_revenue=RevenueFigure(
            value=revenue.value,
            as_of_date=revenue.as_of_date,
            label=revenue.label,
        ),
        beta=stats.beta,
    )


def build_summary(
    ticker: str,
    start_date: str,
    performance: InvestmentPerformance,
    requested_at: datetime,
) -> InvestmentSummary:
    return InvestmentSummary(
        initial_investment=performance.initial_investment,
        current_value=performance.current_value,
        total_return_dollars=performance.total_return_dollars,
        total_return_percent=performance.total_return_percent,
        ticker=ticker.upper(),
        start_date=start_date,
        shares_owned=performance.shares_owned,
        request_timestamp=format_timestamp(requested_at),
    )


def assemble_snapshot(
    ticker: str,
    start_date: str,
    initial_investment: float,
    history: list[HistoricalRecord],
    quote: Quote,
    profile: Optional[CompanyProfile],
    stats: FinancialStats,
    requested_at: datetime,
) -> InvestmentSnapshot:
    """Combine upstream data into the client payload.

    *history* must be non-empty and ordered oldest first; the first record's
    adjusted close is the purchase price.
    """
    performance = calculate_performance(
        initial_investment=initial_investment,
        starting_price=history[0].adj_close,
        current_price=quote.current_price,
    )
    return InvestmentSnapshot(
        summary=build_summary(ticker, start_date, performance, requested_at),
        chart_data=build_chart_data(history, performance.shares_purchased),
        profile=build_profile_block(ticker, profile),
        metrics=build_metrics(history, quote, stats),
    )
