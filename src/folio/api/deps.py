"""Dependency injection for FastAPI."""

from fastapi import Depends

from folio.app_context import AppContext, get_app_context
from folio.services import LedgerService


def get_context() -> AppContext:
    """Provide the process-wide AppContext."""
    return get_app_context()


def get_ledger_service(context: AppContext = Depends(get_context)) -> LedgerService:
    """Provide the session LedgerService."""
    return context.ledger
