"""API routers package."""

from folio.api.routers.assets import router as assets_router
from folio.api.routers.transactions import router as transactions_router
from folio.api.routers.portfolio import router as portfolio_router

__all__ = [
    "assets_router",
    "transactions_router",
    "portfolio_router",
]
