"""Quote providers module."""

from portfolio_tracker.providers.market_data_provider import QuoteProvider, RawQuote
from portfolio_tracker.providers.stub_provider import StubQuoteProvider
from portfolio_tracker.providers.yahoo_provider import YahooQuoteProvider
from portfolio_tracker.providers.factory import create_quote_provider

__all__ = [
    "QuoteProvider",
    "RawQuote",
    "StubQuoteProvider",
    "YahooQuoteProvider",
    "create_quote_provider",
]
