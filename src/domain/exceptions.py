"""
Domain error taxonomy for the investment snapshot flow.
Each error carries the client-facing *message*; the HTTP entrypoint maps the
error class to a status code.
"""


class InvestmentDataError(Exception):
    """Base class for all expected failures of an investment-data request."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvestmentDataValidationError(InvestmentDataError):
    """The request is malformed and was rejected before any upstream call."""


class MissingParametersError(InvestmentDataValidationError):
    def __init__(self) -> None:
        super().__init__("Missing required query parameters: ticker, startDate, amount")


class InvalidAmountError(InvestmentDataValidationError):
    def __init__(self, amount: str) -> None:
        super().__init__("Invalid amount: must be a positive number")
        self.amount = amount


class NoHistoricalDataError(InvestmentDataError):
    def __init__(self, ticker: str, start_date: str) -> None:
        super().__init__("No historical data found for the given ticker and date.")
        self.ticker = ticker
        self.start_date = start_date


class TickerNotFoundError(InvestmentDataError):
    """The upstream provider does not know the ticker symbol."""

    def __init__(self, ticker: str) -> None:
        super().__init__(f"Invalid ticker symbol: {ticker}")
        self.ticker = ticker
