"""Holdings persistence on top of the local key-value store."""

import logging

from portfolio_tracker.core.exceptions import ImportMalformedError
from portfolio_tracker.domain.models import Holding
from portfolio_tracker.jsonio.document import parse_holdings_document, serialize_holdings
from portfolio_tracker.repositories.protocols import KeyValueRepository

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "portfolio.holdings.v1"


class HoldingStore:
    """
    Loads and saves the holdings list as a JSON array under a fixed key.

    Loading never fails: a missing, unparsable or non-array payload yields an
    empty list and a logged warning.
    """

    def __init__(self, repo: KeyValueRepository, key: str = DEFAULT_STORAGE_KEY):
        self._repo = repo
        self._key = key

    def load(self) -> list[Holding]:
        raw = self._repo.get(self._key)
        if raw is None:
            return []
        try:
            return parse_holdings_document(raw)
        except ImportMalformedError as exc:
            logger.warning("Ignoring stored holdings under %r: %s", self._key, exc.message)
            return []

    def save(self, holdings: list[Holding]) -> None:
        self._repo.set(self._key, serialize_holdings(holdings))
