"""Service layer - accounting engine, undo history and ledger orchestration."""

from folio.services.ledger_service import LedgerService, TransactionCreate
from folio.services.portfolio_engine import PortfolioEngine
from folio.services.undo_manager import UndoManager

__all__ = [
    "LedgerService",
    "TransactionCreate",
    "PortfolioEngine",
    "UndoManager",
]
