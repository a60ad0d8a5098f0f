"""
FastAPI entry point: the investment-data HTTP surface.

This module is the Composition Root for HTTP runs: it wires the yfinance adapter
into the application layer and maps domain errors to status codes. The Lambda
entrypoint (lambda_handler.py) wraps this same app.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import logging
import os

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

load_dotenv()

from src.application.use_cases.get_investment_snapshot import GetInvestmentSnapshotUseCase
from src.domain.exceptions import (
    InvestmentDataValidationError,
    NoHistoricalDataError,
    TickerNotFoundError,
)
from src.infrastructure.entrypoints.schemas import ErrorResponse, InvestmentDataResponse
from src.infrastructure.observability.logging_setup import configure_logging
from src.infrastructure.stock_data.yfinance_adapter import YFinanceStockDataProvider

configure_logging(os.environ.get("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred."

# ---------------------------------------------------------------------------
# Composition Root: wire all dependencies once at startup
# ---------------------------------------------------------------------------
_stock_provider = YFinanceStockDataProvider()
_snapshot_use_case = GetInvestmentSnapshotUseCase(_stock_provider)


def _cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(title=os.environ.get("APP_TITLE", "Investment Snapshot API"))

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_snapshot_use_case() -> GetInvestmentSnapshotUseCase:
    """FastAPI dependency: the process-wide use-case instance."""
    return _snapshot_use_case


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.get(
    "/api/investment-data",
    response_model=InvestmentDataResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_investment_data(
    ticker: str | None = Query(None, description="Ticker symbol, e.g. AAPL"),
    start_date: str | None = Query(None, alias="startDate", description="YYYY-MM-DD"),
    amount: str | None = Query(None, description="Initial investment, e.g. 1000"),
    use_case: GetInvestmentSnapshotUseCase = Depends(get_snapshot_use_case),
):
    """Value a hypothetical investment of *amount* in *ticker* bought on *startDate*."""
    try:
        snapshot = await use_case.execute(ticker, start_date, amount)
    except InvestmentDataValidationError as exc:
        return _error(400, exc.message)
    except (NoHistoricalDataError, TickerNotFoundError) as exc:
        logger.warning("Investment data not found for %s: %s", ticker, exc.message)
        return _error(404, exc.message)
    except Exception:
        logger.exception("Error in investment-data endpoint for %s", ticker)
        return _error(500, INTERNAL_ERROR_MESSAGE)

    return InvestmentDataResponse.from_snapshot(snapshot)


@app.get("/health")
async def health():
    return {"status": "ok"}
