"""JSON import/export utilities."""

from portfolio_tracker.jsonio.document import parse_holdings_document, serialize_holdings
from portfolio_tracker.jsonio.importer import JsonImporter
from portfolio_tracker.jsonio.exporter import JsonExporter, EXPORT_FILENAME

__all__ = [
    "parse_holdings_document",
    "serialize_holdings",
    "JsonImporter",
    "JsonExporter",
    "EXPORT_FILENAME",
]
