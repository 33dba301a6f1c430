"""Portfolio valuation: per-holding P/L, aggregate totals and display formatting."""

from typing import Iterable, Mapping, Optional

from portfolio_tracker.domain.models import Holding
from portfolio_tracker.domain.views import (
    HoldingValuation,
    PortfolioTotals,
    PortfolioValuation,
    Quote,
)

DEFAULT_CURRENCY = "USD"
PLACEHOLDER = "–"

_CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CNY": "CN¥",
    "HKD": "HK$",
    "CAD": "CA$",
    "AUD": "A$",
    "INR": "₹",
    "KRW": "₩",
}
_ZERO_DECIMAL_CURRENCIES = {"JPY", "KRW"}


class PortfolioValuator:
    """
    Turns holdings plus a Quote Mapping into display-ready numbers.

    Every path is total: a missing quote or price yields None for the
    derived fields (never 0), and division by a zero cost basis is guarded.
    Holdings are never mutated.
    """

    def __init__(self, default_currency: str = DEFAULT_CURRENCY):
        self._default_currency = default_currency

    def value_holding(
        self,
        holding: Holding,
        quotes: Mapping[str, Quote],
    ) -> HoldingValuation:
        """
        Derive market value, cost basis, P/L and P/L % for one holding.

        market_value = shares * price, P/L = market_value - cost_basis,
        P/L % = P/L / cost_basis * 100 only when cost_basis > 0.
        """
        quote = quotes.get(holding.symbol.upper())
        price = quote.price if quote else None

        cost_basis = holding.shares * holding.cost_per_share
        market_value = holding.shares * price if price is not None else None
        pl = market_value - cost_basis if market_value is not None else None
        pl_percent = (pl / cost_basis) * 100 if pl is not None and cost_basis > 0 else None

        return HoldingValuation(
            holding=holding,
            quote=quote,
            display_name=quote.name if quote and quote.name else PLACEHOLDER,
            display_currency=(quote.currency if quote else None) or self._default_currency,
            cost_basis=cost_basis,
            market_value=market_value,
            pl=pl,
            pl_percent=pl_percent,
        )

    def totals(self, rows: Iterable[HoldingValuation]) -> PortfolioTotals:
        """
        Aggregate valuations into portfolio totals.

        A missing market value counts as 0 here so the summary always shows
        a (lower-bound) number. P/L % is 0 when total cost is 0.
        """
        total_cost = 0.0
        total_value = 0.0
        for row in rows:
            total_cost += row.cost_basis
            total_value += row.market_value if row.market_value is not None else 0.0

        total_pl = total_value - total_cost
        total_pl_percent = (total_pl / total_cost) * 100 if total_cost > 0 else 0.0
        return PortfolioTotals(
            total_cost=total_cost,
            total_value=total_value,
            total_pl=total_pl,
            total_pl_percent=total_pl_percent,
        )

    def value_portfolio(
        self,
        holdings: Iterable[Holding],
        quotes: Mapping[str, Quote],
    ) -> PortfolioValuation:
        """Value every holding and compute the totals in one pass."""
        rows = [self.value_holding(h, quotes) for h in holdings]
        return PortfolioValuation(rows=rows, totals=self.totals(rows))


def format_signed(value: float, fraction_digits: int = 2) -> str:
    """
    Format with an explicit sign: ``+`` for positive, ``-`` for negative,
    nothing for zero. Values that round to zero carry no sign.
    """
    magnitude = f"{abs(value):.{fraction_digits}f}"
    if float(magnitude) == 0:
        return magnitude
    sign = "+" if value > 0 else "-"
    return f"{sign}{magnitude}"


def format_money(value: float, currency: Optional[str] = None) -> str:
    """
    Format an amount in the given currency, e.g. ``$1,500.00``.

    Absent or malformed codes fall back to USD; well-formed codes without a
    known symbol are used as a prefix (``CHF 12.00``).
    """
    code = (currency or "").strip().upper()
    if len(code) != 3 or not code.isalpha():
        code = DEFAULT_CURRENCY

    digits = 0 if code in _ZERO_DECIMAL_CURRENCIES else 2
    amount = f"{abs(value):,.{digits}f}"
    sign = "-" if value < 0 and float(amount.replace(",", "")) != 0 else ""
    prefix = _CURRENCY_SYMBOLS.get(code, f"{code} ")
    return f"{sign}{prefix}{amount}"


def format_optional(value: Optional[float], formatter=format_money, *args) -> str:
    """Apply ``formatter`` to a present value; absent values render as the placeholder."""
    if value is None:
        return PLACEHOLDER
    return formatter(value, *args)
