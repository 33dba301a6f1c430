"""Quote normalizer: one upstream batch lookup reshaped into a complete Quote Mapping."""

import logging
import math
from typing import Iterable, Optional, Union

from portfolio_tracker.core.exceptions import InvalidRequestError
from portfolio_tracker.domain.views import Quote, QuoteBatch, QuoteMapping
from portfolio_tracker.providers.market_data_provider import QuoteProvider, RawQuote

logger = logging.getLogger(__name__)

MAX_SYMBOLS = 50


def normalize_symbols(
    raw: Union[str, Iterable[str], None],
    max_symbols: int = MAX_SYMBOLS,
) -> list[str]:
    """
    Turn user input into the effective symbol list.

    Strings are split on commas. Entries are stripped and uppercased, blank
    entries dropped, duplicates removed keeping first-seen order, and the
    result capped at ``max_symbols`` (extra symbols are silently dropped).
    """
    if raw is None:
        return []
    parts = raw.split(",") if isinstance(raw, str) else [p for s in raw for p in (s or "").split(",")]

    result: list[str] = []
    seen: set[str] = set()
    for part in parts:
        symbol = part.strip().upper()
        if not symbol or symbol in seen:
            continue
        seen.add(symbol)
        result.append(symbol)
        if len(result) >= max_symbols:
            break
    return result


def normalize_record(item: RawQuote) -> Optional[Quote]:
    """
    Reduce one upstream record to a Quote.

    Name: shortName, then longName, then the symbol itself. Returns None for
    records without a usable symbol.
    """
    symbol = str(item.get("symbol") or "").strip().upper()
    if not symbol:
        return None
    name = _text(item.get("shortName")) or _text(item.get("longName")) or symbol
    return Quote(
        symbol=symbol,
        name=name,
        price=_number(item.get("regularMarketPrice")),
        previous_close=_number(item.get("regularMarketPreviousClose")),
        currency=_text(item.get("currency")),
    )


class QuoteNormalizer:
    """
    Resolves a symbol set into a Quote Mapping that covers every requested symbol.

    Provider errors (UpstreamUnavailableError, FetchFailedError) propagate to
    the caller unchanged.
    """

    def __init__(self, provider: QuoteProvider, max_symbols: int = MAX_SYMBOLS):
        self._provider = provider
        self._max_symbols = max_symbols

    async def get_quotes(self, symbols: Union[str, Iterable[str], None]) -> QuoteBatch:
        """
        Fetch and normalize quotes for ``symbols``.

        Raises InvalidRequestError without touching the network when no
        usable symbol remains after clean-up.
        """
        effective = normalize_symbols(symbols, self._max_symbols)
        if not effective:
            raise InvalidRequestError("symbols is required")

        raw_records = await self._provider.fetch_quotes(effective)

        fetched: QuoteMapping = {}
        for item in raw_records:
            quote = normalize_record(item)
            if quote is not None:
                fetched[quote.symbol] = quote

        data: QuoteMapping = {}
        missing = 0
        for symbol in effective:
            quote = fetched.get(symbol)
            if quote is None:
                quote = Quote.placeholder(symbol)
                missing += 1
            data[symbol] = quote

        if missing:
            logger.debug("%d of %d symbols missing upstream", missing, len(effective))
        return QuoteBatch(symbols=effective, data=data)


def _number(value: object) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def _text(value: object) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return value.strip() or None
