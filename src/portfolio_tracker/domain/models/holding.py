"""Holding domain model."""

import math
import secrets
from dataclasses import dataclass
from typing import Any, Optional

from portfolio_tracker.core.exceptions import ValidationError
from portfolio_tracker.core.timezone import now_eastern, to_epoch_millis


@dataclass(frozen=True)
class Holding:
    """
    User-recorded position.

    Holdings are never edited in place: they are created, removed, or
    replaced wholesale by an import.
    """

    id: str
    symbol: str
    shares: float
    cost_per_share: float = 0.0

    def to_document(self) -> dict[str, Any]:
        """Return the JSON document form used by storage and export."""
        return {
            "id": self.id,
            "symbol": self.symbol,
            "shares": self.shares,
            "costPerShare": self.cost_per_share,
        }

    @classmethod
    def from_document(
        cls,
        doc: dict[str, Any],
        existing_ids: Optional[set[str]] = None,
    ) -> "Holding":
        """
        Build a Holding from a stored or imported JSON object.

        Coercion is lenient: the shape of individual entries is not validated,
        missing numbers become 0 and a missing id is generated, unique within
        ``existing_ids``. Ids present in the document are kept as-is.
        """
        symbol = str(doc.get("symbol") or "").strip().upper()
        holding_id = doc.get("id")
        return cls(
            id=str(holding_id) if holding_id else new_holding_id(symbol, existing_ids),
            symbol=symbol,
            shares=_coerce_number(doc.get("shares")),
            cost_per_share=_coerce_number(doc.get("costPerShare")),
        )


def new_holding_id(symbol: str, existing: Optional[set[str]] = None) -> str:
    """Return an id of the form ``<SYMBOL>-<epoch millis>``, unique within ``existing``."""
    base = f"{symbol}-{to_epoch_millis(now_eastern())}"
    holding_id = base
    while existing and holding_id in existing:
        holding_id = f"{base}-{secrets.token_hex(3)}"
    return holding_id


def create_holding(
    symbol: Optional[str],
    shares: Any,
    cost_per_share: Any,
    existing_ids: Optional[set[str]] = None,
) -> Holding:
    """
    Validate user input and build a new Holding.

    Raises ValidationError when the symbol is blank, shares are not a
    positive finite number, or the cost is negative or not finite.
    """
    clean_symbol = (symbol or "").strip().upper()
    if not clean_symbol:
        raise ValidationError("symbol is required")

    shares_value = _parse_finite(shares, "shares")
    cost_value = _parse_finite(cost_per_share, "costPerShare")
    if shares_value <= 0:
        raise ValidationError("shares must be greater than 0")
    if cost_value < 0:
        raise ValidationError("costPerShare must not be negative")

    return Holding(
        id=new_holding_id(clean_symbol, existing_ids),
        symbol=clean_symbol,
        shares=shares_value,
        cost_per_share=cost_value,
    )


def _parse_finite(value: Any, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    return number


def _coerce_number(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0
