"""
Pytest configuration and fixtures for portfolio tracker tests.

This module provides:
- In-memory SQLite database fixtures
- Factory helpers for holdings and upstream quote records
- Scriptable quote providers (recording, failing, fixed-status)
- Time helpers for Eastern timezone
- Service, repository, context and API client fixtures
"""

from datetime import datetime
from typing import Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from portfolio_tracker.main import app
from portfolio_tracker.app_context import AppContext, set_app_context
from portfolio_tracker.config.settings import Settings, reset_settings
from portfolio_tracker.core.exceptions import FetchFailedError, UpstreamUnavailableError
from portfolio_tracker.core.timezone import EASTERN_TZ
from portfolio_tracker.domain.models import Holding
from portfolio_tracker.domain.views import Quote
from portfolio_tracker.providers.market_data_provider import RawQuote
from portfolio_tracker.repositories.sqlalchemy.database import Base
# Import ORM models to register them with Base before creating tables
from portfolio_tracker.repositories.sqlalchemy import orm_models  # noqa: F401
from portfolio_tracker.repositories.sqlalchemy import SqlAlchemyKeyValueRepository
from portfolio_tracker.services import HoldingStore, PortfolioValuator, QuoteNormalizer


# =============================================================================
# TIMEZONE HELPERS
# =============================================================================


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> datetime:
    """Create a localized datetime in US/Eastern timezone."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute, second, microsecond))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return eastern_datetime(2024, 6, 15, 14, 30, 0)


# =============================================================================
# FACTORY HELPERS
# =============================================================================


def make_holding(
    symbol: str = "AAPL",
    shares: float = 10.0,
    cost_per_share: float = 150.0,
    holding_id: Optional[str] = None,
) -> Holding:
    """Build a Holding with a deterministic id."""
    return Holding(
        id=holding_id or f"{symbol}-1700000000000",
        symbol=symbol,
        shares=shares,
        cost_per_share=cost_per_share,
    )


def make_quote(
    symbol: str = "AAPL",
    price: Optional[float] = 175.0,
    name: Optional[str] = None,
    previous_close: Optional[float] = None,
    currency: Optional[str] = "USD",
) -> Quote:
    """Build a normalized Quote."""
    return Quote(
        symbol=symbol,
        name=name or f"{symbol} Inc.",
        price=price,
        previous_close=previous_close,
        currency=currency,
    )


def upstream_record(
    symbol: str,
    price: Optional[float] = None,
    short_name: Optional[str] = None,
    long_name: Optional[str] = None,
    previous_close: Optional[float] = None,
    currency: Optional[str] = "USD",
) -> RawQuote:
    """Build a record shaped like one entry of the upstream quoteResponse.result."""
    record: RawQuote = {"symbol": symbol}
    if price is not None:
        record["regularMarketPrice"] = price
    if short_name is not None:
        record["shortName"] = short_name
    if long_name is not None:
        record["longName"] = long_name
    if previous_close is not None:
        record["regularMarketPreviousClose"] = previous_close
    if currency is not None:
        record["currency"] = currency
    return record


# =============================================================================
# QUOTE PROVIDER FIXTURES
# =============================================================================


class RecordingQuoteProvider:
    """Returns canned records and remembers every symbol list it was asked for."""

    def __init__(self, records: Optional[list[RawQuote]] = None):
        self.records = list(records or [])
        self.calls: list[list[str]] = []

    async def fetch_quotes(self, symbols: list[str]) -> list[RawQuote]:
        self.calls.append(list(symbols))
        return list(self.records)


class FailingQuoteProvider:
    """Raises the configured error on every call."""

    def __init__(self, error: Exception):
        self.error = error
        self.calls: list[list[str]] = []

    async def fetch_quotes(self, symbols: list[str]) -> list[RawQuote]:
        self.calls.append(list(symbols))
        raise self.error


@pytest.fixture
def recording_provider() -> RecordingQuoteProvider:
    """Provider answering AAPL and MSFT."""
    return RecordingQuoteProvider([
        upstream_record("AAPL", 175.0, short_name="Apple Inc.", previous_close=174.0),
        upstream_record("MSFT", 410.0, short_name="Microsoft Corporation", previous_close=405.5),
    ])


@pytest.fixture
def upstream_down_provider() -> FailingQuoteProvider:
    """Provider whose upstream answers 502."""
    return FailingQuoteProvider(UpstreamUnavailableError(502))


@pytest.fixture
def unreachable_provider() -> FailingQuoteProvider:
    """Provider whose upstream cannot be reached."""
    return FailingQuoteProvider(FetchFailedError("connection refused"))


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY AND SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def kv_repo(test_session) -> SqlAlchemyKeyValueRepository:
    """Provide test KeyValueRepository."""
    return SqlAlchemyKeyValueRepository(test_session)


@pytest.fixture
def holding_store(kv_repo) -> HoldingStore:
    """Provide HoldingStore over the test database."""
    return HoldingStore(kv_repo)


@pytest.fixture
def quote_normalizer(recording_provider) -> QuoteNormalizer:
    """Provide QuoteNormalizer backed by the recording provider."""
    return QuoteNormalizer(recording_provider)


@pytest.fixture
def valuator() -> PortfolioValuator:
    """Provide PortfolioValuator with USD as default currency."""
    return PortfolioValuator()


# =============================================================================
# APP CONTEXT AND API CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings for tests: in-memory storage, no background polling."""
    return Settings(
        database_url="sqlite:///:memory:",
        polling_enabled=False,
        quote_provider="stub",
    )


def build_context(settings: Settings, provider, session: Session) -> AppContext:
    """Create and initialize an AppContext over the given provider and session."""
    context = AppContext(settings=settings, provider=provider, session=session)
    context.initialize()
    return context


@pytest.fixture
def app_context(test_settings, recording_provider, test_session) -> AppContext:
    """Provide an initialized AppContext backed by the recording provider."""
    context = build_context(test_settings, recording_provider, test_session)
    yield context
    reset_settings()


@pytest.fixture
def client(app_context) -> TestClient:
    """Provide FastAPI test client wired to the test AppContext."""
    set_app_context(app_context)
    with TestClient(app) as c:
        yield c
    set_app_context(None)
    reset_settings()


@pytest.fixture
def client_for(test_settings, test_session):
    """Factory for a test client whose context uses a specific provider."""
    clients: list[TestClient] = []

    def _make(provider) -> TestClient:
        set_app_context(build_context(test_settings, provider, test_session))
        c = TestClient(app)
        c.__enter__()
        clients.append(c)
        return c

    yield _make
    for c in clients:
        c.__exit__(None, None, None)
    set_app_context(None)
    reset_settings()
