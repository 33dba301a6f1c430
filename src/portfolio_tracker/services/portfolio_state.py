"""
Portfolio state and reducers.

The presentation layer keeps exactly one PortfolioState value. Every change
goes through a reducer here that returns a new state; nothing mutates a
state in place. Quote results always replace the mapping wholesale, so two
overlapping refreshes can never be merged.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Iterable, Optional, Union

from portfolio_tracker.domain.models import Holding
from portfolio_tracker.domain.views import Quote
from portfolio_tracker.services.quote_normalizer import normalize_symbols


@dataclass(frozen=True)
class PortfolioState:
    """Snapshot of everything the presentation layer renders."""

    holdings: tuple[Holding, ...] = ()
    quotes: dict[str, Quote] = field(default_factory=dict)
    watch_symbols: tuple[str, ...] = ()
    is_loading: bool = False
    last_updated: Optional[datetime] = None
    last_error: Optional[str] = None


def add_holding(state: PortfolioState, holding: Holding) -> PortfolioState:
    """Newest holdings are listed first."""
    return replace(state, holdings=(holding,) + state.holdings)


def remove_holding(state: PortfolioState, holding_id: str) -> PortfolioState:
    return replace(state, holdings=tuple(h for h in state.holdings if h.id != holding_id))


def replace_holdings(state: PortfolioState, holdings: Iterable[Holding]) -> PortfolioState:
    return replace(state, holdings=tuple(holdings))


def set_watch_symbols(
    state: PortfolioState,
    raw: Union[str, Iterable[str], None],
) -> PortfolioState:
    """
    Parse ad-hoc watch symbols (comma-separated) into the state.

    Not capped here; a refresh quotes only the first ``max_symbols`` of the
    sorted effective set.
    """
    return replace(state, watch_symbols=tuple(normalize_symbols(raw, max_symbols=10_000)))


def set_loading(state: PortfolioState, is_loading: bool) -> PortfolioState:
    return replace(state, is_loading=is_loading)


def replace_quotes(
    state: PortfolioState,
    quotes: dict[str, Quote],
    as_of: datetime,
) -> PortfolioState:
    """Install a refresh result. The previous mapping is discarded entirely."""
    return replace(
        state,
        quotes=dict(quotes),
        last_updated=as_of,
        last_error=None,
    )


def fail_refresh(state: PortfolioState, message: str) -> PortfolioState:
    """Record a failed refresh; the previous quotes stay in place."""
    return replace(state, last_error=message)


def effective_symbols(state: PortfolioState) -> list[str]:
    """Sorted distinct uppercase symbols across holdings and the watch list."""
    symbols = {h.symbol.upper() for h in state.holdings if h.symbol}
    symbols.update(state.watch_symbols)
    return sorted(symbols)
