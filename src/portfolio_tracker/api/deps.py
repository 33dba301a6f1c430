"""Dependency injection for FastAPI."""

from fastapi import Depends

from portfolio_tracker.app_context import AppContext, get_app_context
from portfolio_tracker.services import QuoteNormalizer


def get_context() -> AppContext:
    """Provide the initialized application context."""
    context = get_app_context()
    if not context.is_initialized:
        context.initialize()
    return context


def get_quote_normalizer(
    context: AppContext = Depends(get_context),
) -> QuoteNormalizer:
    """Provide the QuoteNormalizer instance."""
    return context.normalizer
