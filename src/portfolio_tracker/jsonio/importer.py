"""JSON import functionality."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from portfolio_tracker.core.exceptions import ImportMalformedError, ValidationError
from portfolio_tracker.domain.models import Holding
from portfolio_tracker.jsonio.document import parse_holdings_document

if TYPE_CHECKING:
    from portfolio_tracker.services.holding_store import HoldingStore

logger = logging.getLogger(__name__)


class JsonImporter:
    """
    JSON importer for the holdings list.

    A document that parses to an array replaces the stored holdings
    wholesale. Anything else is ignored: the failure is logged and the
    stored list is left untouched.
    """

    def __init__(self, store: "HoldingStore"):
        self._store = store

    def import_text(self, text: str) -> Optional[list[Holding]]:
        """
        Import holdings from JSON text.

        Returns the imported holdings, or None when the document was ignored.
        """
        try:
            holdings = parse_holdings_document(text)
        except ImportMalformedError as exc:
            logger.warning("Ignoring holdings import: %s", exc.message)
            return None

        self._store.save(holdings)
        logger.info("Imported %d holdings", len(holdings))
        return holdings

    def import_file(self, path: str) -> Optional[list[Holding]]:
        """Import holdings from a JSON file on disk."""
        file_path = Path(path)
        if not file_path.exists():
            raise ValidationError(f"File not found: {path}")

        text = file_path.read_text(encoding="utf-8", errors="replace")
        return self.import_text(text)
