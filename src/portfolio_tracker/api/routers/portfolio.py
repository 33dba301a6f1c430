"""Portfolio view endpoints: valuation table, manual refresh and watch symbols."""

from fastapi import APIRouter, Depends

from portfolio_tracker.api.deps import get_context
from portfolio_tracker.api.schemas import (
    FormattedRow,
    FormattedTotals,
    PortfolioResponse,
    PortfolioRowResponse,
    PortfolioTotalsResponse,
    WatchlistRequest,
    WatchlistResponse,
)
from portfolio_tracker.app_context import AppContext
from portfolio_tracker.domain.views import HoldingValuation, PortfolioTotals
from portfolio_tracker.services.valuation import (
    format_money,
    format_optional,
    format_signed,
)

router = APIRouter(prefix="/api", tags=["portfolio"])


def _percent(value: float) -> str:
    return f"{format_signed(value)}%"


def _row_response(row: HoldingValuation) -> PortfolioRowResponse:
    holding = row.holding
    currency = row.display_currency
    return PortfolioRowResponse(
        id=holding.id,
        symbol=holding.symbol,
        name=row.display_name,
        shares=holding.shares,
        cost_per_share=holding.cost_per_share,
        currency=currency,
        price=row.price,
        previous_close=row.quote.previous_close if row.quote else None,
        market_value=row.market_value,
        cost_basis=row.cost_basis,
        pl=row.pl,
        pl_percent=row.pl_percent,
        formatted=FormattedRow(
            cost_per_share=format_money(holding.cost_per_share, currency),
            price=format_optional(row.price, format_money, currency),
            market_value=format_optional(row.market_value, format_money, currency),
            pl=format_optional(row.pl, format_signed),
            pl_percent=format_optional(row.pl_percent, _percent),
        ),
    )


def _totals_response(totals: PortfolioTotals, currency: str) -> PortfolioTotalsResponse:
    return PortfolioTotalsResponse(
        total_cost=totals.total_cost,
        total_value=totals.total_value,
        total_pl=totals.total_pl,
        total_pl_percent=totals.total_pl_percent,
        formatted=FormattedTotals(
            total_cost=format_money(totals.total_cost, currency),
            total_value=format_money(totals.total_value, currency),
            total_pl=format_signed(totals.total_pl),
            total_pl_percent=_percent(totals.total_pl_percent),
        ),
    )


def _portfolio_response(context: AppContext) -> PortfolioResponse:
    valuation = context.valuation()
    state = context.state
    return PortfolioResponse(
        rows=[_row_response(r) for r in valuation.rows],
        totals=_totals_response(valuation.totals, context.settings.default_currency),
        symbols=context.effective_symbols(),
        last_updated=state.last_updated,
        is_loading=state.is_loading,
        last_error=state.last_error,
    )


@router.get("/portfolio", response_model=PortfolioResponse)
def get_portfolio(context: AppContext = Depends(get_context)) -> PortfolioResponse:
    """Holdings valued against the most recent quotes, with totals."""
    return _portfolio_response(context)


@router.post("/portfolio/refresh", response_model=PortfolioResponse)
async def refresh_portfolio(context: AppContext = Depends(get_context)) -> PortfolioResponse:
    """
    Run one refresh cycle now, then return the portfolio.

    A failed refresh keeps the previous quotes; the error is reported in lastError.
    """
    await context.refresh_quotes()
    return _portfolio_response(context)


@router.get("/watchlist", response_model=WatchlistResponse)
def get_watchlist(context: AppContext = Depends(get_context)) -> WatchlistResponse:
    return WatchlistResponse(symbols=list(context.state.watch_symbols))


@router.put("/watchlist", response_model=WatchlistResponse)
async def set_watchlist(
    data: WatchlistRequest,
    context: AppContext = Depends(get_context),
) -> WatchlistResponse:
    """Replace the ad-hoc symbols quoted alongside the holdings."""
    symbols = context.set_watch_symbols(data.symbols)
    return WatchlistResponse(symbols=list(symbols))
