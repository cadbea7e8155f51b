"""View models for engine outputs."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from folio.domain.models import AssetType


@dataclass
class Lot:
    """
    FIFO parcel of purchased units.

    cost is the remaining total cost including the purchase fee share.
    """

    quantity: Decimal
    cost: Decimal
    acquired: date

    @property
    def unit_cost(self) -> Decimal:
        if self.quantity > 0:
            return self.cost / self.quantity
        return Decimal("0")


@dataclass
class ComputedPortfolio:
    """Result of replaying the ledger; discarded after use."""

    lots: dict[str, list[Lot]] = field(default_factory=dict)
    realized: dict[str, Decimal] = field(default_factory=dict)
    cash: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass(frozen=True)
class HoldingSummary:
    """Read-only projection of one held ticker."""

    ticker: str
    name: str
    asset_type: AssetType
    currency: str
    quantity: Decimal
    avg_cost: Decimal
    market_price: Decimal
    market_value: Decimal
    cost_basis: Decimal
    unrealized: Decimal
    pnl_percent: Decimal
    realized: Decimal


@dataclass(frozen=True)
class PortfolioTotals:
    """Totals across all holdings plus the cash balance."""

    market_value: Decimal
    cost_basis: Decimal
    unrealized: Decimal
    realized: Decimal
    cash: Decimal
