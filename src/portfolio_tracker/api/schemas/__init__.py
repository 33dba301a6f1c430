"""Pydantic schemas for API request/response."""

from portfolio_tracker.api.schemas.quote import (
    QuoteResponse,
    QuoteBatchResponse,
    ErrorResponse,
)
from portfolio_tracker.api.schemas.portfolio import (
    HoldingCreateRequest,
    HoldingResponse,
    HoldingListResponse,
    ImportResponse,
    WatchlistRequest,
    WatchlistResponse,
    FormattedRow,
    PortfolioRowResponse,
    FormattedTotals,
    PortfolioTotalsResponse,
    PortfolioResponse,
)

__all__ = [
    "QuoteResponse",
    "QuoteBatchResponse",
    "ErrorResponse",
    "HoldingCreateRequest",
    "HoldingResponse",
    "HoldingListResponse",
    "ImportResponse",
    "WatchlistRequest",
    "WatchlistResponse",
    "FormattedRow",
    "PortfolioRowResponse",
    "FormattedTotals",
    "PortfolioTotalsResponse",
    "PortfolioResponse",
]
