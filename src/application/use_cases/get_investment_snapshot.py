"""
Use-case: build the investment snapshot for a ticker, start date and amount.
Depends only on Domain ports and entities: no infrastructure imports.
"""

import asyncio
import logging
import math
from datetime import datetime, timezone
from typing import Callable, Optional

from src.application.services.snapshot_assembler import assemble_snapshot
from src.domain.entities.investment_snapshot import InvestmentSnapshot
from src.domain.exceptions import (
    InvalidAmountError,
    MissingParametersError,
    NoHistoricalDataError,
)
from src.domain.ports.stock_data_port import IStockDataProvider

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_amount(amount: str) -> float:
    """Parse the investment amount; it must be a finite number above zero."""
    try:
        value = float(amount)
    except (TypeError, ValueError) as exc:
        raise InvalidAmountError(amount) from exc
    if not math.isfinite(value) or value <= 0:
        raise InvalidAmountError(amount)
    return value


class GetInvestmentSnapshotUseCase:
    def __init__(
        self,
        provider: IStockDataProvider,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """
        Args:
            provider: IStockDataProvider implementation (e.g. YFinanceStockDataProvider).
            clock:    Source of the request timestamp; overridable in tests.
        """
        self._provider = provider
        self._clock = clock

    async def execute(
        self,
        ticker: Optional[str],
        start_date: Optional[str],
        amount: Optional[str],
    ) -> InvestmentSnapshot:
        """Fetch the four upstream datasets concurrently and assemble the snapshot.

        *ticker* is sent upstream exactly as given; only the echoed summary
        ticker is uppercased.

        Raises:
            MissingParametersError: if any argument is absent or empty.
            InvalidAmountError:     if *amount* is not a positive number.
            NoHistoricalDataError:  if the provider returns no bars for the range.
            Any exception propagated from IStockDataProvider (e.g. TickerNotFoundError).
        """
        if not ticker or not start_date or not amount:
            raise MissingParametersError()
        initial_investment = parse_amount(amount)

        history, quote, profile_lookup, stats = await asyncio.gather(
            asyncio.to_thread(self._provider.get_historical_prices, ticker, start_date),
            asyncio.to_thread(self._provider.get_quote, ticker),
            asyncio.to_thread(self._provider.get_company_profile, ticker),
            asyncio.to_thread(self._provider.get_financial_stats, ticker),
        )

        if not history:
            raise NoHistoricalDataError(ticker, start_date)
        if not profile_lookup.ok:
            logger.info("Continuing without profile for %s: %s", ticker, profile_lookup.error)

        return assemble_snapshot(
            ticker=ticker,
            start_date=start_date,
            initial_investment=initial_investment,
            history=history,
            quote=quote,
            profile=profile_lookup.profile,
            stats=stats,
            requested_at=self._clock(),
        )
