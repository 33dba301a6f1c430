"""
Unit tests for quote providers.

Tests cover:
- Yahoo provider request shape (single GET, comma-joined symbols)
- Non-success status mapped to UpstreamUnavailableError
- Transport failures and invalid bodies mapped to FetchFailedError
- Defensive extraction of quoteResponse.result
- Stub provider determinism
- Provider factory selection
"""

import httpx
import pytest

from portfolio_tracker.config.settings import Settings
from portfolio_tracker.core.exceptions import FetchFailedError, UpstreamUnavailableError
from portfolio_tracker.providers import (
    StubQuoteProvider,
    YahooQuoteProvider,
    create_quote_provider,
)

BASE_URL = "https://quotes.test/v7/finance/quote"


def _provider(handler) -> YahooQuoteProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return YahooQuoteProvider(base_url=BASE_URL, client=client)


# =============================================================================
# YAHOO PROVIDER TESTS
# =============================================================================


class TestYahooQuoteProvider:
    """Tests for YahooQuoteProvider.fetch_quotes."""

    @pytest.mark.asyncio
    async def test_single_request_with_joined_symbols(self):
        """
        GIVEN a symbol list
        WHEN I fetch quotes
        THEN one GET is sent with the symbols comma-joined
        """
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={
                "quoteResponse": {"result": [
                    {"symbol": "AAPL", "regularMarketPrice": 175.0},
                    {"symbol": "MSFT", "regularMarketPrice": 410.0},
                ]},
            })

        records = await _provider(handler).fetch_quotes(["AAPL", "MSFT"])

        assert len(requests) == 1
        assert requests[0].method == "GET"
        assert requests[0].url.params["symbols"] == "AAPL,MSFT"
        assert [r["symbol"] for r in records] == ["AAPL", "MSFT"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [404, 429, 500, 502])
    async def test_non_success_status(self, status):
        """
        GIVEN the upstream answers with a non-success status
        WHEN I fetch quotes
        THEN UpstreamUnavailableError carries that status
        """
        provider = _provider(lambda request: httpx.Response(status, text="nope"))

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await provider.fetch_quotes(["AAPL"])

        assert exc_info.value.upstream_status == status
        assert exc_info.value.message == f"upstream {status}"
        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_transport_error_is_fetch_failed(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FetchFailedError, match="connection refused"):
            await _provider(handler).fetch_quotes(["AAPL"])

    @pytest.mark.asyncio
    async def test_timeout_is_fetch_failed(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(FetchFailedError) as exc_info:
            await _provider(handler).fetch_quotes(["AAPL"])

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_invalid_url_is_fetch_failed(self):
        """
        GIVEN a misconfigured quote URL that httpx refuses to build
        WHEN I fetch quotes
        THEN FetchFailedError is raised instead of a raw httpx error
        """
        client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        provider = YahooQuoteProvider(base_url="https://quotes.test/" + "q" * 70000, client=client)

        with pytest.raises(FetchFailedError) as exc_info:
            await provider.fetch_quotes(["AAPL"])

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_invalid_json_is_fetch_failed(self):
        provider = _provider(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(FetchFailedError, match="invalid upstream response"):
            await provider.fetch_quotes(["AAPL"])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        [],
        {},
        {"quoteResponse": None},
        {"quoteResponse": {"result": None}},
        {"quoteResponse": {"result": ["AAPL", 1]}},
    ])
    async def test_unexpected_shape_yields_no_records(self, payload):
        provider = _provider(lambda request: httpx.Response(200, json=payload))

        assert await provider.fetch_quotes(["AAPL"]) == []

    @pytest.mark.asyncio
    async def test_empty_symbols_skip_network(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        assert await _provider(handler).fetch_quotes([]) == []


# =============================================================================
# STUB PROVIDER TESTS
# =============================================================================


class TestStubQuoteProvider:
    """Tests for StubQuoteProvider."""

    @pytest.mark.asyncio
    async def test_known_symbols_have_fixed_quotes(self):
        records = await StubQuoteProvider().fetch_quotes(["aapl", "MSFT"])

        assert records[0]["symbol"] == "AAPL"
        assert records[0]["regularMarketPrice"] == 185.50
        assert records[1]["regularMarketPreviousClose"] == 376.80

    @pytest.mark.asyncio
    async def test_unknown_symbols_are_omitted(self):
        records = await StubQuoteProvider().fetch_quotes(["AAPL", "ZZZZ"])

        assert [r["symbol"] for r in records] == ["AAPL"]

    @pytest.mark.asyncio
    async def test_unknown_symbols_quoted_deterministically(self):
        first = await StubQuoteProvider(seed=7, quote_unknown=True).fetch_quotes(["ZZZZ"])
        second = await StubQuoteProvider(seed=7, quote_unknown=True).fetch_quotes(["ZZZZ"])

        assert first == second
        assert 50 <= first[0]["regularMarketPrice"] <= 250


# =============================================================================
# FACTORY TESTS
# =============================================================================


class TestCreateQuoteProvider:
    """Tests for create_quote_provider."""

    def test_yahoo_is_default(self):
        assert isinstance(create_quote_provider(Settings()), YahooQuoteProvider)

    def test_stub_by_name(self):
        provider = create_quote_provider(Settings(quote_provider="stub"))

        assert isinstance(provider, StubQuoteProvider)

    def test_unknown_name_rejected(self):
        settings = Settings.model_construct(quote_provider="bloomberg")

        with pytest.raises(ValueError, match="Unknown quote provider"):
            create_quote_provider(settings)
