"""API routers package."""

from portfolio_tracker.api.routers.quote import router as quote_router
from portfolio_tracker.api.routers.holdings import router as holdings_router
from portfolio_tracker.api.routers.portfolio import router as portfolio_router

__all__ = [
    "quote_router",
    "holdings_router",
    "portfolio_router",
]
