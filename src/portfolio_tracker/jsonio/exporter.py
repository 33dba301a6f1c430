"""JSON export functionality."""

from pathlib import Path
from typing import Iterable

from portfolio_tracker.domain.models import Holding
from portfolio_tracker.jsonio.document import serialize_holdings

EXPORT_FILENAME = "portfolio.json"


class JsonExporter:
    """
    JSON exporter for the holdings list.

    Produces the same document shape the importer accepts, for backup/transfer.
    """

    def export_json(self, holdings: Iterable[Holding]) -> str:
        """Return the holdings as a pretty-printed JSON array."""
        return serialize_holdings(holdings, indent=2)

    def export_file(self, holdings: Iterable[Holding], path: str) -> Path:
        """
        Export holdings to a JSON file.

        Args:
            holdings: Holdings to write
            path: Output file path, or a directory to place ``portfolio.json`` in
        """
        file_path = Path(path)
        if file_path.is_dir():
            file_path = file_path / EXPORT_FILENAME
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(self.export_json(holdings), encoding="utf-8")
        return file_path
