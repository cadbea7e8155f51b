"""
Pytest configuration and fixtures for the portfolio ledger tests.

This module provides:
- Settings bound to a temporary data directory
- Engine, undo, repository and ledger service fixtures
- Builders for transactions and portfolio states
- FastAPI test client wired to an isolated application context
"""

from decimal import Decimal
from pathlib import Path
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from folio.app_context import AppContext, set_app_context
from folio.config.settings import Settings, reset_settings, set_settings
from folio.core.dates import to_serial, validate
from folio.domain.models import (
    Asset,
    AssetType,
    PortfolioState,
    Transaction,
    TransactionType,
)
from folio.main import app
from folio.repositories import FileStateRepository
from folio.services import LedgerService, PortfolioEngine, TransactionCreate, UndoManager


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings with an isolated data directory."""
    test_settings = Settings(data_dir=tmp_path / "data")
    set_settings(test_settings)
    yield test_settings
    reset_settings()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def engine() -> PortfolioEngine:
    """Provide a PortfolioEngine with the default currency."""
    return PortfolioEngine(default_currency="INR")


@pytest.fixture
def undo_manager() -> UndoManager:
    """Provide an UndoManager with the default capacity."""
    return UndoManager(capacity=50)


@pytest.fixture
def repository(settings: Settings) -> FileStateRepository:
    """Provide a file repository rooted at the test data directory."""
    return FileStateRepository(base_dir=settings.get_data_dir())


@pytest.fixture
def ledger_service(
    settings: Settings,
    engine: PortfolioEngine,
    undo_manager: UndoManager,
    repository: FileStateRepository,
) -> LedgerService:
    """Provide a LedgerService over an empty portfolio."""
    return LedgerService(
        engine=engine,
        undo_manager=undo_manager,
        repository=repository,
        default_currency=settings.default_currency,
        default_path=settings.portfolio_file,
        export_dir=settings.get_export_dir(),
    )


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(settings: Settings) -> TestClient:
    """Provide FastAPI test client bound to a fresh application context."""
    context = AppContext(settings=settings)
    context.initialize(load_existing=False)
    set_app_context(context)
    with TestClient(app) as c:
        yield c
    set_app_context(None)


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("1e-9"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(Decimal(actual) - Decimal(expected))
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"


def make_txn(
    ticker: str,
    txn_type: TransactionType,
    quantity: str,
    price: str = "0",
    fees: str = "0",
    on: str = "2024-01-15",
    note: str = "",
) -> Transaction:
    """Build a Transaction from short string arguments."""
    return Transaction(
        ticker=ticker,
        txn_type=txn_type,
        txn_date=validate(on),
        quantity=Decimal(quantity),
        price=Decimal(price),
        fees=Decimal(fees),
        note=note,
    )


def make_state(
    *txns: Transaction,
    prices: Optional[dict[str, str]] = None,
    realized: Optional[dict[str, str]] = None,
    assets: Optional[list[Asset]] = None,
) -> PortfolioState:
    """Build a PortfolioState with its log sorted by date."""
    return PortfolioState(
        assets={a.ticker: a for a in (assets or [])},
        prices={k: Decimal(v) for k, v in (prices or {}).items()},
        txns=sorted(txns, key=lambda t: to_serial(t.txn_date)),
        realized={k: Decimal(v) for k, v in (realized or {}).items()},
    )


def buy(ticker: str, quantity: str, price: str, fees: str = "0", on: str = "2024-01-15") -> Transaction:
    """Helper to create a BUY transaction."""
    return make_txn(ticker, TransactionType.BUY, quantity, price, fees, on)


def sell(ticker: str, quantity: str, price: str, fees: str = "0", on: str = "2024-01-20") -> Transaction:
    """Helper to create a SELL transaction."""
    return make_txn(ticker, TransactionType.SELL, quantity, price, fees, on)


def deposit(amount: str, on: str = "2024-01-01") -> Transaction:
    """Helper to create a CASH DEPOSIT transaction."""
    return make_txn("CASH", TransactionType.DEPOSIT, amount, on=on)


def create_txn_data(
    ticker: str,
    txn_type: str,
    quantity: str,
    price: str = "0",
    fees: str = "0",
    on: str = "2024-01-15",
    note: str = "",
) -> TransactionCreate:
    """Helper to create TransactionCreate input for the ledger service."""
    return TransactionCreate(
        ticker=ticker,
        txn_type=txn_type,
        txn_date=on,
        quantity=Decimal(quantity),
        price=Decimal(price),
        fees=Decimal(fees),
        note=note,
    )


def sample_assets() -> list[Asset]:
    """A registry covering every asset type."""
    return [
        Asset("AAPL", "Apple Inc.", AssetType.STOCK, "USD"),
        Asset("NIFTYBEES", "Nifty ETF", AssetType.ETF, "INR"),
        Asset("PPFAS", "Parag Parikh Flexi Cap", AssetType.MUTUAL_FUND, "INR"),
        Asset("BTC", "Bitcoin", AssetType.CRYPTO, "USD"),
        Asset("GSEC30", "Govt Bond 2030", AssetType.BOND, "INR"),
        Asset("GOLD", "Gold \"spot\" \\ 24k", AssetType.OTHER, "INR"),
    ]
