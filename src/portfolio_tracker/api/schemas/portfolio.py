"""Pydantic schemas for holdings and portfolio endpoints."""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys, matching the holdings documents."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HoldingCreateRequest(CamelModel):
    """Request schema for adding a holding. Range checks happen in the domain."""

    symbol: str
    shares: float
    cost_per_share: float = 0.0


class HoldingResponse(CamelModel):
    """A single holding."""

    id: str
    symbol: str
    shares: float
    cost_per_share: float


class HoldingListResponse(CamelModel):
    """Response schema for listing holdings."""

    holdings: list[HoldingResponse]
    count: int


class ImportResponse(CamelModel):
    """Result of a holdings import. ``imported`` is false when the document was ignored."""

    imported: bool
    count: int


class WatchlistRequest(CamelModel):
    """Ad-hoc symbols to quote alongside the holdings."""

    symbols: Union[str, list[str]] = ""


class WatchlistResponse(CamelModel):
    symbols: list[str]


class FormattedRow(CamelModel):
    """Display strings for one portfolio row; missing data is the placeholder."""

    cost_per_share: str
    price: str
    market_value: str
    pl: str
    pl_percent: str


class PortfolioRowResponse(CamelModel):
    """One holding with its quote and derived figures (null when unavailable)."""

    id: str
    symbol: str
    name: str
    shares: float
    cost_per_share: float
    currency: str
    price: Optional[float] = None
    previous_close: Optional[float] = None
    market_value: Optional[float] = None
    cost_basis: float
    pl: Optional[float] = None
    pl_percent: Optional[float] = None
    formatted: FormattedRow


class FormattedTotals(CamelModel):
    total_cost: str
    total_value: str
    total_pl: str
    total_pl_percent: str


class PortfolioTotalsResponse(CamelModel):
    """Aggregate figures; always numbers."""

    total_cost: float
    total_value: float
    total_pl: float
    total_pl_percent: float
    formatted: FormattedTotals


class PortfolioResponse(CamelModel):
    """Response for GET /api/portfolio."""

    rows: list[PortfolioRowResponse]
    totals: PortfolioTotalsResponse
    symbols: list[str]
    last_updated: Optional[datetime] = None
    is_loading: bool = False
    last_error: Optional[str] = None
