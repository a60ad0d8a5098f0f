"""
Domain entities for stock price data.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Quote:
    symbol: str
    current_price: float
    previous_close: Optional[float]
    market_cap: Optional[float]


@dataclass(frozen=True)
class HistoricalRecord:
    """One daily bar. *date* is the session date anchored at 00:00 UTC."""

    date: datetime
    adj_close: float
