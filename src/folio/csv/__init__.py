"""CSV export utilities."""

from folio.csv.exporter import CsvExporter, HOLDINGS_COLUMNS, TRANSACTION_COLUMNS

__all__ = [
    "CsvExporter",
    "HOLDINGS_COLUMNS",
    "TRANSACTION_COLUMNS",
]
