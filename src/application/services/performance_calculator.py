"""
Hypothetical buy-and-hold performance for a lump-sum investment.
"""

from dataclasses import dataclass

MONEY_DECIMALS = 2
SHARE_DECIMALS = 6


@dataclass(frozen=True)
class InvestmentPerformance:
    initial_investment: float
    shares_purchased: float
    current_value: float
    total_return_dollars: float
    total_return_percent: float

    @property
    def shares_owned(self) -> float:
        return round(self.shares_purchased, SHARE_DECIMALS)


def calculate_performance(
    initial_investment: float,
    starting_price: float,
    current_price: float,
) -> InvestmentPerformance:
    """Buy at *starting_price*, value at *current_price*.

    *shares_purchased* is kept unrounded so per-day chart values can be
    derived from it; every monetary output is rounded to cents.

    Raises:
        ZeroDivisionError: if *initial_investment* or *starting_price* is zero.
    """
    shares_purchased = initial_investment / starting_price
    current_value = shares_purchased * current_price
    gain = current_value - initial_investment
    return InvestmentPerformance(
        initial_investment=round(initial_investment, MONEY_DECIMALS),
        shares_purchased=shares_purchased,
        current_value=round(current_value, MONEY_DECIMALS),
        total_return_dollars=round(gain, MONEY_DECIMALS),
        total_return_percent=round(gain / initial_investment * 100, MONEY_DECIMALS),
    )
