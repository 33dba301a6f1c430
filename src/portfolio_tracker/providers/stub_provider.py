"""Stub quote provider for offline/testing use."""

import random

from portfolio_tracker.providers.market_data_provider import RawQuote


# Deterministic fake quotes for common symbols: (short name, price, previous close)
_STUB_QUOTES: dict[str, tuple[str, float, float]] = {
    "AAPL": ("Apple Inc.", 185.50, 184.25),
    "GOOGL": ("Alphabet Inc.", 142.75, 141.50),
    "MSFT": ("Microsoft Corporation", 378.25, 376.80),
    "AMZN": ("Amazon.com, Inc.", 178.50, 177.25),
    "TSLA": ("Tesla, Inc.", 248.75, 250.10),
    "NVDA": ("NVIDIA Corporation", 485.25, 482.50),
    "META": ("Meta Platforms, Inc.", 505.50, 502.75),
    "SPY": ("SPDR S&P 500 ETF Trust", 485.25, 484.10),
    "QQQ": ("Invesco QQQ Trust", 418.75, 417.50),
    "VTI": ("Vanguard Total Stock Market ETF", 252.30, 251.80),
}


class StubQuoteProvider:
    """
    Stub provider with deterministic fake data for offline operation.

    Uses predefined quotes for common symbols. Unknown symbols get a random
    price when ``quote_unknown`` is set, otherwise they are omitted the way
    the real upstream omits symbols it does not know.
    """

    def __init__(self, seed: int = 42, quote_unknown: bool = False):
        """Initialize with optional random seed for reproducibility."""
        self._rng = random.Random(seed)
        self._quote_unknown = quote_unknown

    async def fetch_quotes(self, symbols: list[str]) -> list[RawQuote]:
        """Return stub records shaped like the upstream ``quoteResponse.result``."""
        result: list[RawQuote] = []

        for symbol in symbols:
            upper_symbol = symbol.upper()
            if upper_symbol in _STUB_QUOTES:
                name, price, prev_close = _STUB_QUOTES[upper_symbol]
            elif self._quote_unknown:
                name = upper_symbol
                price = round(50 + self._rng.random() * 200, 2)
                change_pct = (self._rng.random() - 0.5) * 0.04
                prev_close = round(price / (1 + change_pct), 2)
            else:
                continue

            result.append({
                "symbol": upper_symbol,
                "shortName": name,
                "regularMarketPrice": price,
                "regularMarketPreviousClose": prev_close,
                "currency": "USD",
            })

        return result
