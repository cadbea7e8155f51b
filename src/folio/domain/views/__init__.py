"""View models for service outputs."""

from folio.domain.views.portfolio import (
    Lot,
    ComputedPortfolio,
    HoldingSummary,
    PortfolioTotals,
)

__all__ = [
    "Lot",
    "ComputedPortfolio",
    "HoldingSummary",
    "PortfolioTotals",
]
