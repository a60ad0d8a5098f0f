"""
Domain entities for the combined investment snapshot returned to clients.
Built once per request by the snapshot assembler and never mutated.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InvestmentSummary:
    initial_investment: float
    current_value: float
    total_return_dollars: float
    total_return_percent: float
    ticker: str
    start_date: str
    shares_owned: float
    request_timestamp: str


@dataclass(frozen=True)
class ChartPoint:
    date: str
    value: float
    price: float


@dataclass(frozen=True)
class ProfileBlock:
    name: str
    sector: str
    industry: str
    summary: str
    location: str
    exchange: str


@dataclass(frozen=True)
class DatedValue:
    value: Optional[float]
    as_of_date: Optional[str]


@dataclass(frozen=True)
class RevenueFigure:
    value: Optional[float]
    as_of_date: Optional[str]
    label: str


@dataclass(frozen=True)
class Metrics:
    previous_close: DatedValue
    market_cap: DatedValue
    total_revenue: RevenueFigure
    beta: Optional[float]


@dataclass(frozen=True)
class InvestmentSnapshot:
    summary: InvestmentSummary
    chart_data: list[ChartPoint]
    profile: ProfileBlock
    metrics: Metrics
