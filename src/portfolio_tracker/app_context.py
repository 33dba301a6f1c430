"""Application context for in-process service management.

Owns the single PortfolioState value and every collaborator that reads or
replaces it: holdings persistence, the quote normalizer, the valuator and
the poller. The HTTP layer and any other host drive the app through here.
"""

import logging
from typing import Optional, Union, Iterable

from sqlalchemy.orm import Session

from portfolio_tracker.config.settings import Settings, set_settings, get_settings
from portfolio_tracker.core.exceptions import AppError, NotFoundError
from portfolio_tracker.core.timezone import now_eastern
from portfolio_tracker.domain.models import Holding, create_holding
from portfolio_tracker.domain.views import PortfolioValuation
from portfolio_tracker.repositories.sqlalchemy.database import init_db_with_url, get_session
from portfolio_tracker.repositories.sqlalchemy import SqlAlchemyKeyValueRepository
from portfolio_tracker.providers import QuoteProvider, create_quote_provider
from portfolio_tracker.services import (
    HoldingStore,
    PortfolioValuator,
    QuoteNormalizer,
    QuotePoller,
)
from portfolio_tracker.services import portfolio_state as reducers
from portfolio_tracker.services.portfolio_state import PortfolioState
from portfolio_tracker.jsonio import JsonImporter, JsonExporter

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context providing in-process access to all services.

    Every state change is a reducer call whose result replaces ``state``;
    refresh results replace the Quote Mapping wholesale, in completion order.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        provider: Optional[QuoteProvider] = None,
        session: Optional[Session] = None,
    ):
        """
        Initialize application context.

        Args:
            settings: Optional settings. If not provided, uses the global ones.
            provider: Optional quote provider. Defaults to the configured one.
            session: Optional database session (tests pass an in-memory one).
        """
        self._settings = settings
        self._provider = provider
        self._session = session
        self._owns_session = session is None
        self._initialized = False
        self._in_flight = 0

        self._state = PortfolioState()
        self._store: Optional[HoldingStore] = None
        self._normalizer: Optional[QuoteNormalizer] = None
        self._valuator: Optional[PortfolioValuator] = None
        self._poller: Optional[QuotePoller] = None
        self._importer: Optional[JsonImporter] = None
        self._exporter = JsonExporter()

    def initialize(self) -> None:
        """Open storage, load persisted holdings and build the quote pipeline."""
        if self._settings is not None:
            set_settings(self._settings)
        settings = self.settings

        if self._session is None:
            init_db_with_url(settings.get_database_url())
            self._session = get_session()

        self._store = HoldingStore(
            SqlAlchemyKeyValueRepository(self._session),
            key=settings.storage_key,
        )
        self._importer = JsonImporter(self._store)
        self._normalizer = QuoteNormalizer(
            self._provider or create_quote_provider(settings),
            max_symbols=settings.max_symbols,
        )
        self._valuator = PortfolioValuator(default_currency=settings.default_currency)
        self._poller = QuotePoller(self.refresh_quotes, settings.poll_interval_seconds)

        self._state = reducers.replace_holdings(PortfolioState(), self._store.load())
        self._initialized = True
        logger.info("Loaded %d holdings", len(self._state.holdings))

    @property
    def is_initialized(self) -> bool:
        """Check if context is initialized."""
        return self._initialized

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @property
    def state(self) -> PortfolioState:
        return self._state

    @property
    def holdings(self) -> tuple[Holding, ...]:
        return self._state.holdings

    @property
    def normalizer(self) -> QuoteNormalizer:
        self._require_initialized()
        return self._normalizer

    @property
    def poller(self) -> QuotePoller:
        self._require_initialized()
        return self._poller

    def effective_symbols(self) -> list[str]:
        return reducers.effective_symbols(self._state)

    # Holdings

    def add_holding(self, symbol: Optional[str], shares, cost_per_share) -> Holding:
        """Validate and add a holding; raises ValidationError on bad input."""
        self._require_initialized()
        holding = create_holding(
            symbol,
            shares,
            cost_per_share,
            existing_ids={h.id for h in self._state.holdings},
        )
        self._apply_holdings(reducers.add_holding(self._state, holding))
        return holding

    def remove_holding(self, holding_id: str) -> None:
        self._require_initialized()
        if not any(h.id == holding_id for h in self._state.holdings):
            raise NotFoundError("Holding", holding_id)
        self._apply_holdings(reducers.remove_holding(self._state, holding_id))

    def import_holdings(self, text: str) -> Optional[list[Holding]]:
        """
        Replace all holdings with the contents of a JSON document.

        Returns None and leaves holdings unchanged when the document is not
        a JSON array.
        """
        self._require_initialized()
        imported = self._importer.import_text(text)
        if imported is None:
            return None
        # Importer already persisted the list
        self._set_state(reducers.replace_holdings(self._state, imported))
        return imported

    def export_holdings(self) -> str:
        return self._exporter.export_json(self._state.holdings)

    def set_watch_symbols(self, raw: Union[str, Iterable[str], None]) -> tuple[str, ...]:
        self._set_state(reducers.set_watch_symbols(self._state, raw))
        return self._state.watch_symbols

    # Quotes

    async def refresh_quotes(self) -> PortfolioState:
        """
        Run one refresh cycle for the current effective symbol set.

        On failure the previous quotes are kept and the error is logged.
        """
        self._require_initialized()
        symbols = self.effective_symbols()
        if not symbols:
            self._state = reducers.replace_quotes(self._state, {}, now_eastern())
            return self._state

        if len(symbols) > self.settings.max_symbols:
            logger.warning(
                "Tracking %d symbols but only the first %d are quoted: %s onwards are dropped",
                len(symbols),
                self.settings.max_symbols,
                symbols[self.settings.max_symbols],
            )

        self._in_flight += 1
        self._state = reducers.set_loading(self._state, True)
        try:
            batch = await self._normalizer.get_quotes(symbols)
        except AppError as exc:
            logger.warning("Quote refresh failed, keeping previous quotes: %s", exc.message)
            self._state = reducers.fail_refresh(self._state, exc.message)
        else:
            self._state = reducers.replace_quotes(self._state, batch.data, now_eastern())
        finally:
            self._in_flight -= 1
            self._state = reducers.set_loading(self._state, self._in_flight > 0)
        return self._state

    def valuation(self) -> PortfolioValuation:
        self._require_initialized()
        return self._valuator.value_portfolio(self._state.holdings, self._state.quotes)

    # Polling

    def start_polling(self) -> None:
        """Start the periodic refresh. Must be called from the event loop."""
        self.poller.start()

    async def stop_polling(self) -> None:
        if self._poller is not None:
            await self._poller.stop()

    async def close(self) -> None:
        """Clean up resources."""
        await self.stop_polling()
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None

    # Internals

    def _apply_holdings(self, new_state: PortfolioState) -> None:
        """Persist holdings after a mutation, then install the new state."""
        self._store.save(list(new_state.holdings))
        self._set_state(new_state)

    def _set_state(self, new_state: PortfolioState) -> None:
        before = reducers.effective_symbols(self._state)
        self._state = new_state
        if self._poller is not None and self._poller.is_running:
            if reducers.effective_symbols(new_state) != before:
                logger.debug("Symbol set changed, restarting quote polling")
                self._poller.restart()

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("AppContext.initialize() has not been called")


# Global application context (singleton)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set the global application context."""
    global _app_context
    _app_context = context
