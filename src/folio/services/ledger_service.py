"""Ledger service: the mutating facade over portfolio state."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional, Union

from folio.core.dates import to_serial, validate
from folio.core.exceptions import IndexOutOfRangeError, UnknownTickerError, ValidationError
from folio.csv.exporter import CsvExporter
from folio.domain.models import (
    ASSET_TRANSACTION_TYPES,
    CASH_TICKER,
    CASH_TRANSACTION_TYPES,
    Asset,
    AssetType,
    PortfolioState,
    Transaction,
    TransactionType,
)
from folio.domain.views import HoldingSummary, PortfolioTotals
from folio.repositories.file_repo import StateRepository
from folio.services.portfolio_engine import PortfolioEngine
from folio.services.undo_manager import UndoManager

Number = Union[Decimal, int, float, str]


@dataclass
class TransactionCreate:
    """Input data for adding a transaction."""

    ticker: str
    txn_type: Union[TransactionType, str]
    txn_date: Union[date, str]
    quantity: Number
    price: Number = field(default_factory=lambda: Decimal("0"))
    fees: Number = field(default_factory=lambda: Decimal("0"))
    note: str = ""


class LedgerService:
    """
    Service for managing the transaction ledger and its derived views.

    Owns the live PortfolioState for one session. Transaction additions and
    removals are snapshotted for undo; price and asset updates are not.
    Every operation validates before touching state, so a failure leaves
    the portfolio unchanged.

    The persisted realized map is an incremental ledger: it only moves when
    a transaction is added or removed, by the change that mutation causes in
    the ledger-derived realized P&L.
    """

    def __init__(
        self,
        engine: PortfolioEngine,
        undo_manager: UndoManager,
        repository: StateRepository,
        default_currency: str = "INR",
        default_path: Union[str, Path] = "portfolio.json",
        export_dir: Optional[Path] = None,
        state: Optional[PortfolioState] = None,
    ):
        self._engine = engine
        self._undo = undo_manager
        self._repository = repository
        self._default_currency = default_currency
        self._default_path = default_path
        self._exporter = CsvExporter(ledger_service=self, export_dir=export_dir)
        self._state = state or PortfolioState()

    @property
    def state(self) -> PortfolioState:
        """Return a copy of the live state."""
        return self._state.copy()

    # -------------------------------------------------------------------------
    # Assets and prices
    # -------------------------------------------------------------------------

    def add_asset(
        self,
        ticker: str,
        name: str = "",
        asset_type: Union[AssetType, str] = AssetType.STOCK,
        currency: Optional[str] = None,
    ) -> Asset:
        """
        Register an asset, replacing any existing record for the ticker.

        Blank name defaults to the ticker; blank currency to the configured default.
        """
        symbol = self._normalize_ticker(ticker)
        asset = Asset(
            ticker=symbol,
            name=(name or "").strip() or symbol,
            asset_type=AssetType.parse(asset_type),
            currency=(currency or "").strip() or self._default_currency,
        )
        self._state.assets[symbol] = asset
        return asset

    def get_asset(self, ticker: str) -> Asset:
        """Get asset by ticker."""
        symbol = self._normalize_ticker(ticker)
        asset = self._state.assets.get(symbol)
        if not asset:
            raise UnknownTickerError(symbol)
        return asset

    def list_assets(self) -> list[Asset]:
        """List registered assets in registration order."""
        return list(self._state.assets.values())

    def set_price(self, ticker: str, price: Number) -> None:
        """Set the current unit price of a registered asset."""
        symbol = self._normalize_ticker(ticker)
        if symbol not in self._state.assets:
            raise UnknownTickerError(symbol)
        value = self._to_decimal(price, "price")
        if value < 0:
            raise ValidationError("Price cannot be negative")
        self._state.prices[symbol] = value

    def get_price(self, ticker: str) -> Optional[Decimal]:
        return self._state.prices.get(self._normalize_ticker(ticker))

    # -------------------------------------------------------------------------
    # Transactions
    # -------------------------------------------------------------------------

    def add_transaction(self, data: TransactionCreate) -> Transaction:
        """
        Add a transaction to the ledger.

        Unknown tickers (including CASH) are registered with default details.
        The log is re-sorted by date; same-day entries keep insertion order.
        """
        transaction = self._build_transaction(data)

        self._undo.snapshot(self._state)
        if transaction.ticker not in self._state.assets:
            self._state.assets[transaction.ticker] = Asset(
                ticker=transaction.ticker,
                name=transaction.ticker,
                asset_type=AssetType.STOCK,
                currency=self._default_currency,
            )

        def mutate(txns: list[Transaction]) -> None:
            txns.append(transaction)
            txns.sort(key=lambda t: to_serial(t.txn_date))

        self._apply_ledger_change(mutate)
        return transaction

    def remove_transaction(self, index: int) -> Transaction:
        """Remove the transaction at a 0-based ledger position."""
        size = len(self._state.txns)
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < size:
            raise IndexOutOfRangeError(index, size)

        removed = self._state.txns[index]
        self._undo.snapshot(self._state)
        self._apply_ledger_change(lambda txns: txns.pop(index))
        return removed

    def list_transactions(self, ticker: Optional[str] = None) -> list[Transaction]:
        """List ledger entries in date order, optionally for one ticker."""
        return [txn for _, txn in self.indexed_transactions(ticker)]

    def indexed_transactions(self, ticker: Optional[str] = None) -> list[tuple[int, Transaction]]:
        """List (position, transaction) pairs; positions address remove_transaction."""
        symbol = self._normalize_ticker(ticker) if ticker else None
        return [
            (i, txn)
            for i, txn in enumerate(self._state.txns)
            if symbol is None or txn.ticker == symbol
        ]

    def undo(self) -> bool:
        """Restore the state captured before the last transaction change."""
        previous = self._undo.undo()
        if previous is None:
            return False
        self._state = previous
        return True

    @property
    def can_undo(self) -> bool:
        return self._undo.can_undo

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------

    def summarize(self) -> list[HoldingSummary]:
        """Holdings summary, largest market value first."""
        return self._engine.summarize(self._state)

    def totals(self) -> PortfolioTotals:
        return self._engine.totals(self._state)

    def cash_balance(self) -> Decimal:
        return self._engine.cash_balance(self._state)

    def audit_realized(self) -> dict[str, Decimal]:
        """Realized P&L recomputed from the ledger alone."""
        return self._engine.audit_realized(self._state)

    # -------------------------------------------------------------------------
    # Files
    # -------------------------------------------------------------------------

    def save(self, path: Optional[Union[str, Path]] = None) -> Path:
        """Write the portfolio to disk."""
        return self._repository.save(self._state, path or self._default_path)

    def load(self, path: Optional[Union[str, Path]] = None) -> None:
        """Replace the live portfolio with one read from disk."""
        self._state = self._repository.load(path or self._default_path)

    def export_csv(self, path: Union[str, Path]) -> Path:
        """Export the holdings summary and cash balance as CSV."""
        return self._exporter.export_holdings(path)

    def export_transactions_csv(self, path: Union[str, Path], ticker: Optional[str] = None) -> Path:
        """Export the (optionally filtered) ledger as CSV."""
        return self._exporter.export_transactions(path, ticker=ticker)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _apply_ledger_change(self, mutate) -> None:
        """Run mutate on the log and move the realized map by the resulting change."""
        before = self._engine.audit_realized(self._state)
        mutate(self._state.txns)
        after = self._engine.audit_realized(self._state)

        for ticker in dict.fromkeys([*before, *after]):
            delta = after.get(ticker, Decimal("0")) - before.get(ticker, Decimal("0"))
            if delta != 0:
                self._state.realized[ticker] = self._state.realized.get(ticker, Decimal("0")) + delta

    def _build_transaction(self, data: TransactionCreate) -> Transaction:
        """Validate transaction input."""
        ticker = self._normalize_ticker(data.ticker)
        txn_type = self._parse_type(data.txn_type)
        txn_date = self._to_date(data.txn_date)

        if ticker == CASH_TICKER and txn_type not in CASH_TRANSACTION_TYPES:
            raise ValidationError(f"{txn_type.value} is not allowed on the CASH ledger")
        if ticker != CASH_TICKER and txn_type not in ASSET_TRANSACTION_TYPES:
            raise ValidationError(f"{txn_type.value} is only allowed on the CASH ledger")

        quantity = self._to_decimal(data.quantity, "quantity")
        if quantity <= 0:
            raise ValidationError(f"{txn_type.value} requires quantity > 0")

        price = self._to_decimal(data.price, "price") if txn_type.is_trade else Decimal("0")
        if price < 0:
            raise ValidationError(f"{txn_type.value} requires price >= 0")

        fees = self._to_decimal(data.fees, "fees")
        if fees < 0:
            raise ValidationError("Fees cannot be negative")

        return Transaction(
            ticker=ticker,
            txn_type=txn_type,
            txn_date=txn_date,
            quantity=quantity,
            price=price,
            fees=fees,
            note=data.note or "",
        )

    @staticmethod
    def _to_date(value: Union[date, str]) -> date:
        # datetime is a date subclass but does not order against plain dates
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return validate(value)

    @staticmethod
    def _normalize_ticker(ticker: Optional[str]) -> str:
        symbol = (ticker or "").strip().upper()
        if not symbol:
            raise ValidationError("Ticker is required")
        return symbol

    @staticmethod
    def _parse_type(value: Union[TransactionType, str]) -> TransactionType:
        if isinstance(value, TransactionType):
            return value
        try:
            return TransactionType((value or "").strip().upper())
        except ValueError:
            raise ValidationError(f"Invalid transaction type: {value}")

    @staticmethod
    def _to_decimal(value: Number, label: str) -> Decimal:
        if isinstance(value, bool):
            raise ValidationError(f"Invalid {label}: {value}")
        try:
            result = value if isinstance(value, Decimal) else Decimal(str(value).strip() or "0")
        except InvalidOperation:
            raise ValidationError(f"Invalid {label}: {value}")
        if not result.is_finite():
            raise ValidationError(f"Invalid {label}: {value}")
        return result
