"""View models for quote and valuation outputs."""

from dataclasses import dataclass, field
from typing import Any, Optional

from portfolio_tracker.domain.models import Holding


@dataclass(frozen=True)
class Quote:
    """Market quote data for a symbol. Re-fetched every refresh cycle."""

    symbol: str
    name: str
    price: Optional[float] = None
    previous_close: Optional[float] = None
    currency: Optional[str] = None

    @classmethod
    def placeholder(cls, symbol: str) -> "Quote":
        """Quote for a symbol the provider did not return."""
        return cls(symbol=symbol, name=symbol)

    def to_document(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "name": self.name,
            "price": self.price,
            "previousClose": self.previous_close,
            "currency": self.currency,
        }


# Uppercase symbol -> Quote
QuoteMapping = dict[str, Quote]


@dataclass(frozen=True)
class QuoteBatch:
    """Normalized quotes plus the effective symbol list they were fetched for."""

    symbols: list[str]
    data: QuoteMapping = field(default_factory=dict)


@dataclass(frozen=True)
class HoldingValuation:
    """Derived numbers for one holding. Absent values stay None, never 0."""

    holding: Holding
    quote: Optional[Quote]
    display_name: str
    display_currency: str
    cost_basis: float
    market_value: Optional[float] = None
    pl: Optional[float] = None
    pl_percent: Optional[float] = None

    @property
    def price(self) -> Optional[float]:
        return self.quote.price if self.quote else None


@dataclass(frozen=True)
class PortfolioTotals:
    """Aggregate figures. Always numbers, even when prices are missing."""

    total_cost: float = 0.0
    total_value: float = 0.0
    total_pl: float = 0.0
    total_pl_percent: float = 0.0


@dataclass(frozen=True)
class PortfolioValuation:
    """Per-holding valuations together with the portfolio totals."""

    rows: list[HoldingValuation] = field(default_factory=list)
    totals: PortfolioTotals = field(default_factory=PortfolioTotals)
