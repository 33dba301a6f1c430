"""View models for service outputs."""

from portfolio_tracker.domain.views.portfolio import (
    Quote,
    QuoteMapping,
    QuoteBatch,
    HoldingValuation,
    PortfolioTotals,
    PortfolioValuation,
)

__all__ = [
    "Quote",
    "QuoteMapping",
    "QuoteBatch",
    "HoldingValuation",
    "PortfolioTotals",
    "PortfolioValuation",
]
