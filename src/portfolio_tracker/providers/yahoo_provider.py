"""Yahoo Finance batch quote provider over httpx."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from portfolio_tracker.core.exceptions import FetchFailedError, UpstreamUnavailableError
from portfolio_tracker.providers.market_data_provider import RawQuote

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://query1.finance.yahoo.com/v7/finance/quote"
DEFAULT_TIMEOUT_SECONDS = 10.0
UA = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


class YahooQuoteProvider:
    """
    Fetches quotes from the Yahoo Finance v7 quote endpoint.

    One GET per call with the whole comma-separated symbol list. Responses
    are never cached; every refresh cycle goes to the network.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._base_url = base_url
        self._timeout = timeout_seconds
        # Injected clients are borrowed, never closed here
        self._shared_client = client

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._shared_client is not None:
            yield self._shared_client
            return
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout),
            headers={"User-Agent": UA},
        ) as client:
            yield client

    async def fetch_quotes(self, symbols: list[str]) -> list[RawQuote]:
        """Return the upstream ``quoteResponse.result`` records for ``symbols``."""
        if not symbols:
            return []

        params = {"symbols": ",".join(symbols)}
        try:
            async with self._client() as client:
                response = await client.get(self._base_url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Quote fetch for %d symbols failed: %s", len(symbols), exc)
            raise FetchFailedError(str(exc)) from exc

        if not response.is_success:
            logger.warning("Quote upstream returned %s", response.status_code)
            raise UpstreamUnavailableError(response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchFailedError(f"invalid upstream response: {exc}") from exc

        return _extract_results(payload)


def _extract_results(payload: object) -> list[RawQuote]:
    """Pull ``quoteResponse.result`` out of the payload; anything unexpected is empty."""
    if not isinstance(payload, dict):
        return []
    quote_response = payload.get("quoteResponse")
    if not isinstance(quote_response, dict):
        return []
    result = quote_response.get("result")
    if not isinstance(result, list):
        return []
    return [item for item in result if isinstance(item, dict)]
