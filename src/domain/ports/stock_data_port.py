"""
Port (interface) for stock data providers.
Infrastructure adapters (e.g. YFinanceStockDataProvider) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.company import FinancialStats, ProfileLookup
from src.domain.entities.stock_price import HistoricalRecord, Quote


class IStockDataProvider(ABC):
    @abstractmethod
    def get_historical_prices(
        self,
        symbol: str,
        start_date: str,
        interval: str = "1d",
    ) -> list[HistoricalRecord]:
        """Return daily bars from *start_date* to the latest session, oldest first.

        An unknown range yields an empty list rather than an error.
        """
        ...

    @abstractmethod
    def get_quote(self, symbol: str) -> Quote:
        """Raises:
            TickerNotFoundError: if the provider does not know *symbol*.
        """
        ...

    @abstractmethod
    def get_company_profile(self, symbol: str) -> ProfileLookup:
        """Never raises for provider failures; reports them via ProfileLookup.failed()."""
        ...

    @abstractmethod
    def get_financial_stats(self, symbol: str) -> FinancialStats: ...
