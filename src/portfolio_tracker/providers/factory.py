"""Quote provider factory."""

import logging
from typing import Callable

from portfolio_tracker.config.settings import Settings
from portfolio_tracker.providers.market_data_provider import QuoteProvider
from portfolio_tracker.providers.stub_provider import StubQuoteProvider
from portfolio_tracker.providers.yahoo_provider import YahooQuoteProvider

logger = logging.getLogger(__name__)


def _create_yahoo(settings: Settings) -> QuoteProvider:
    return YahooQuoteProvider(
        base_url=settings.quote_base_url,
        timeout_seconds=settings.request_timeout_seconds,
    )


def _create_stub(settings: Settings) -> QuoteProvider:
    return StubQuoteProvider()


_REGISTRY: dict[str, Callable[[Settings], QuoteProvider]] = {
    "yahoo": _create_yahoo,
    "stub": _create_stub,
}


def create_quote_provider(settings: Settings) -> QuoteProvider:
    """Build the provider named by ``settings.quote_provider``."""
    try:
        factory = _REGISTRY[settings.quote_provider]
    except KeyError:
        raise ValueError(f"Unknown quote provider: {settings.quote_provider}")
    logger.debug("Using %s quote provider", settings.quote_provider)
    return factory(settings)
