"""Service layer - business logic orchestration."""

from portfolio_tracker.services.quote_normalizer import QuoteNormalizer, normalize_symbols
from portfolio_tracker.services.valuation import PortfolioValuator
from portfolio_tracker.services.holding_store import HoldingStore
from portfolio_tracker.services.quote_poller import QuotePoller
from portfolio_tracker.services.portfolio_state import PortfolioState

__all__ = [
    "QuoteNormalizer",
    "normalize_symbols",
    "PortfolioValuator",
    "HoldingStore",
    "QuotePoller",
    "PortfolioState",
]
