"""
Pydantic models for the HTTP surface.
Field names stay snake_case in Python and are emitted camelCase on the wire.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.domain.entities.investment_snapshot import InvestmentSnapshot


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SummaryModel(CamelModel):
    initial_investment: float
    current_value: float
    total_return_dollars: float
    total_return_percent: float
    ticker: str
    start_date: str
    shares_owned: float
    request_timestamp: str


class ChartPointModel(CamelModel):
    date: str
    value: float
    price: float


class ProfileModel(CamelModel):
    name: str
    sector: str
    industry: str
    summary: str
    location: str
    exchange: str


class DatedValueModel(CamelModel):
    value: Optional[float] = None
    as_of_date: Optional[str] = None


class RevenueModel(DatedValueModel):
    label: str


class BetaModel(CamelModel):
    value: Optional[float] = None


class MetricsModel(CamelModel):
    previous_close: DatedValueModel
    market_cap: DatedValueModel
    total_revenue: RevenueModel
    beta: BetaModel


class InvestmentDataResponse(CamelModel):
    summary: SummaryModel
    chart_data: list[ChartPointModel]
    profile: ProfileModel
    metrics: MetricsModel

    @classmethod
    def from_snapshot(cls, snapshot: InvestmentSnapshot) -> "InvestmentDataResponse":
        summary = snapshot.summary
        profile = snapshot.profile
        metrics = snapshot.metrics
        return cls(
            summary=SummaryModel(
                initial_investment=summary.initial_investment,
                current_value=summary.current_value,
                total_return_dollars=summary.total_return_dollars,
                total_return_percent=summary.total_return_percent,
                ticker=summary.ticker,
                start_date=summary.start_date,
                shares_owned=summary.shares_owned,
                request_timestamp=summary.request_timestamp,
            ),
            chart_data=[
                ChartPointModel(date=point.date, value=point.value, price=point.price)
                for point in snapshot.chart_data
            ],
            profile=ProfileModel(
                name=profile.name,
                sector=profile.sector,
                industry=profile.industry,
                summary=profile.summary,
                location=profile.location,
                exchange=profile.exchange,
            ),
            metrics=MetricsModel(
                previous_close=DatedValueModel(
                    value=metrics.previous_close.value,
                    as_of_date=metrics.previous_close.as_of_date,
                ),
                market_cap=DatedValueModel(
                    value=metrics.market_cap.value,
                    as_of_date=metrics.market_cap.as_of_date,
                ),
                total_revenue=RevenueModel(
                    value=metrics.total_revenue.value,
                    as_of_date=metrics.total_revenue.as_of_date,
                    label=metrics.total_revenue.label,
                ),
                beta=BetaModel(value=metrics.beta),
            ),
        )


class ErrorResponse(BaseModel):
    error: str
