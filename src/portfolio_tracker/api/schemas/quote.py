"""Pydantic schemas for the quote lookup endpoint."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from portfolio_tracker.domain.views import Quote


class QuoteResponse(BaseModel):
    """Normalized quote for one symbol. Absent fields are null."""

    model_config = ConfigDict(populate_by_name=True)

    symbol: str
    name: str
    price: Optional[float] = None
    previous_close: Optional[float] = Field(default=None, alias="previousClose")
    currency: Optional[str] = None

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteResponse":
        return cls(
            symbol=quote.symbol,
            name=quote.name,
            price=quote.price,
            previous_close=quote.previous_close,
            currency=quote.currency,
        )


class QuoteBatchResponse(BaseModel):
    """Response for GET /api/quote: effective symbols plus one entry per symbol."""

    symbols: list[str]
    data: dict[str, QuoteResponse]


class ErrorResponse(BaseModel):
    """Error body shared by all endpoints."""

    error: str
    code: Optional[str] = None
