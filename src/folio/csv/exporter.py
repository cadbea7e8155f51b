"""CSV export functionality."""

import csv
import io
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from folio.core.dates import format_date
from folio.core.exceptions import StorageError

if TYPE_CHECKING:
    from folio.services.ledger_service import LedgerService


HOLDINGS_COLUMNS = [
    "Ticker",
    "Name",
    "Type",
    "Currency",
    "Qty",
    "AvgCost",
    "Price",
    "Value",
    "Cost",
    "Unreal",
    "Pct",
    "Realized",
]

TRANSACTION_COLUMNS = [
    "Index",
    "Date",
    "Ticker",
    "Type",
    "Qty",
    "Price",
    "Fees",
    "Note",
]


class CsvExporter:
    """
    CSV exporter for holdings and ledger data.

    Output is a one-way report for spreadsheets; it is not read back.
    """

    def __init__(self, ledger_service: "LedgerService", export_dir: Optional[Path] = None):
        self._ledger = ledger_service
        self._export_dir = export_dir

    def export_holdings(self, path: Union[str, Path]) -> Path:
        """
        Export the holdings summary followed by a cash line.

        Args:
            path: Output file path (relative paths land in the export directory)
        """
        holdings = self._ledger.summarize()
        cash = self._ledger.cash_balance()

        rows: list[list[str]] = [HOLDINGS_COLUMNS]
        for h in holdings:
            rows.append([
                h.ticker,
                h.name,
                h.asset_type.value,
                h.currency,
                f"{h.quantity:.4f}",
                f"{h.avg_cost:.2f}",
                f"{h.market_price:.2f}",
                f"{h.market_value:.2f}",
                f"{h.cost_basis:.2f}",
                f"{h.unrealized:.2f}",
                f"{h.pnl_percent:.2f}",
                f"{h.realized:.2f}",
            ])
        rows.append([])
        rows.append(["Cash", f"{cash:.2f}"])

        return self._write(path, rows)

    def export_transactions(self, path: Union[str, Path], ticker: Optional[str] = None) -> Path:
        """Export ledger entries with their removal positions."""
        rows: list[list[str]] = [TRANSACTION_COLUMNS]
        for index, txn in self._ledger.indexed_transactions(ticker):
            rows.append([
                str(index),
                format_date(txn.txn_date),
                txn.ticker,
                txn.txn_type.value,
                f"{txn.quantity:.4f}",
                f"{txn.price:.2f}",
                f"{txn.fees:.2f}",
                txn.note,
            ])

        return self._write(path, rows)

    def _resolve(self, path: Union[str, Path]) -> Path:
        file_path = Path(path).expanduser()
        if self._export_dir is not None and not file_path.is_absolute():
            return self._export_dir / file_path
        return file_path

    def _write(self, path: Union[str, Path], rows: list[list[str]]) -> Path:
        file_path = self._resolve(path)
        buffer = io.StringIO(newline="")
        csv.writer(buffer).writerows(rows)
        # Encode before opening so a failure never truncates an existing file
        try:
            data = buffer.getvalue().encode("utf-8")
        except UnicodeEncodeError as e:
            raise StorageError(str(file_path), f"text is not encodable as UTF-8 ({e.reason})") from e
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(data)
        except OSError as e:
            raise StorageError(str(file_path), e.strerror or str(e)) from e
        return file_path
