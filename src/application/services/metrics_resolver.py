"""
Fallback policies for the metrics block: which revenue figure to report and
how to derive market capitalization.
"""

from dataclasses import dataclass
from typing import Optional

from src.application.services.date_format import format_date_ymd
from src.domain.entities.company import FinancialStats
from src.domain.entities.stock_price import Quote

ANNUAL_LABEL = "Annual"
TTM_LABEL = "TTM"


@dataclass(frozen=True)
class ResolvedRevenue:
    value: Optional[float]
    as_of_date: Optional[str]
    label: str


def resolve_revenue(stats: FinancialStats, last_trading_day: str) -> ResolvedRevenue:
    """Pick the revenue figure to report.

    Priority:
        1. Latest annual statement, when it has both a value and an end date.
        2. Trailing-twelve-month revenue, dated *last_trading_day*.
        3. Nothing: value and date are None, label stays "Annual".
    """
    if stats.annual_revenue is not None and stats.annual_revenue_end_date is not None:
        return ResolvedRevenue(
            value=stats.annual_revenue,
            as_of_date=format_date_ymd(stats.annual_revenue_end_date),
            label=ANNUAL_LABEL,
        )
    if stats.ttm_revenue is not None:
        return ResolvedRevenue(
            value=stats.ttm_revenue,
            as_of_date=last_trading_day,
            label=TTM_LABEL,
        )
    return ResolvedRevenue(value=None, as_of_date=None, label=ANNUAL_LABEL)


def resolve_market_cap(quote: Quote, stats: FinancialStats) -> Optional[float]:
    """Previous close x shares outstanding, or the provider's raw figure.

    The computed form keeps market cap on the same price vintage as the
    previous close reported alongside it.
    """
    if quote.previous_close is not None and stats.shares_outstanding is not None:
        return quote.previous_close * stats.shares_outstanding
    return quote.market_cap
