"""Persisted portfolio state."""

from dataclasses import dataclass, field
from decimal import Decimal

from folio.domain.models.asset import Asset
from folio.domain.models.transaction import Transaction


@dataclass
class PortfolioState:
    """
    Everything that is saved to disk and captured by undo snapshots.

    txns is kept sorted by date (ties in insertion order). realized holds the
    persisted realized P&L per ticker.
    """

    assets: dict[str, Asset] = field(default_factory=dict)
    prices: dict[str, Decimal] = field(default_factory=dict)
    txns: list[Transaction] = field(default_factory=list)
    realized: dict[str, Decimal] = field(default_factory=dict)

    def copy(self) -> "PortfolioState":
        """Return an independent copy (entries themselves are immutable)."""
        return PortfolioState(
            assets=dict(self.assets),
            prices=dict(self.prices),
            txns=list(self.txns),
            realized=dict(self.realized),
        )
