"""Application context for in-process service management.

Provides a centralized way to access the ledger without HTTP. The API layer
and scripts share one context so a session has exactly one live portfolio.
"""

import logging
from pathlib import Path
from typing import Optional

from folio.config.settings import Settings, get_settings, set_settings
from folio.repositories import FileStateRepository
from folio.services import LedgerService, PortfolioEngine, UndoManager

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context owning the session's LedgerService.

    Services are created lazily from the current settings.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._ledger_service: Optional[LedgerService] = None
        self._initialized = False

    def initialize(self, data_dir: Optional[Path] = None, load_existing: bool = True) -> None:
        """
        Initialize or reinitialize the context with a data directory.

        Args:
            data_dir: Data directory path. Uses settings/default if not provided.
            load_existing: Load the default portfolio file when it exists.
        """
        if data_dir is not None:
            base = self._settings or get_settings()
            self._settings = base.model_copy(update={"data_dir": data_dir})
        if self._settings is not None:
            set_settings(self._settings)

        self._ledger_service = None
        self._initialized = True

        portfolio_path = self.settings.get_portfolio_path()
        if load_existing and portfolio_path.exists():
            self.ledger.load(portfolio_path)
            logger.info("Restored portfolio from %s", portfolio_path)

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @property
    def data_dir(self) -> Path:
        """Get the current data directory."""
        return self.settings.get_data_dir()

    @property
    def ledger(self) -> LedgerService:
        """Get the LedgerService instance."""
        if self._ledger_service is None:
            settings = self.settings
            self._ledger_service = LedgerService(
                engine=PortfolioEngine(default_currency=settings.default_currency),
                undo_manager=UndoManager(capacity=settings.undo_capacity),
                repository=FileStateRepository(base_dir=settings.get_data_dir()),
                default_currency=settings.default_currency,
                default_path=settings.portfolio_file,
                export_dir=settings.get_export_dir(),
            )
        return self._ledger_service


# Global application context (one live portfolio per process)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set (or clear) the global application context."""
    global _app_context
    _app_context = context
