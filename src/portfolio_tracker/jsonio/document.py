"""JSON document form of the holdings list, shared by storage and import/export."""

import json
import logging
from typing import Iterable, Optional

from portfolio_tracker.core.exceptions import ImportMalformedError
from portfolio_tracker.domain.models import Holding

logger = logging.getLogger(__name__)


def serialize_holdings(holdings: Iterable[Holding], indent: Optional[int] = None) -> str:
    """Serialize holdings to a JSON array of ``{id, symbol, shares, costPerShare}``."""
    return json.dumps([h.to_document() for h in holdings], indent=indent)


def parse_holdings_document(text: str) -> list[Holding]:
    """
    Parse a JSON holdings document.

    Raises ImportMalformedError unless the text is a JSON array. Entries
    are coerced leniently; entries that are not JSON objects are dropped.
    """
    try:
        parsed = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise ImportMalformedError(f"not valid JSON: {exc}") from exc

    if not isinstance(parsed, list):
        raise ImportMalformedError(f"expected a JSON array, got {type(parsed).__name__}")

    # Generated ids must not repeat within the document or shadow a given one
    assigned = {str(e["id"]) for e in parsed if isinstance(e, dict) and e.get("id")}
    holdings: list[Holding] = []
    for index, entry in enumerate(parsed):
        if not isinstance(entry, dict):
            logger.warning("Skipping holdings entry %d: not an object", index)
            continue
        holding = Holding.from_document(entry, existing_ids=assigned)
        assigned.add(holding.id)
        holdings.append(holding)
    return holdings
