"""Pydantic schemas for portfolio summary and file endpoints."""

from decimal import Decimal

from pydantic import BaseModel, Field

from folio.domain.models import AssetType
from folio.domain.views import HoldingSummary, PortfolioTotals


class HoldingResponse(BaseModel):
    """A single holding row."""

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

    @classmethod
    def from_summary(cls, h: HoldingSummary) -> "HoldingResponse":
        return cls(
            ticker=h.ticker,
            name=h.name,
            asset_type=h.asset_type,
            currency=h.currency,
            quantity=h.quantity,
            avg_cost=h.avg_cost,
            market_price=h.market_price,
            market_value=h.market_value,
            cost_basis=h.cost_basis,
            unrealized=h.unrealized,
            pnl_percent=h.pnl_percent,
            realized=h.realized,
        )


class TotalsResponse(BaseModel):
    """Totals across holdings plus cash."""

    market_value: Decimal
    cost_basis: Decimal
    unrealized: Decimal
    realized: Decimal
    cash: Decimal

    @classmethod
    def from_totals(cls, t: PortfolioTotals) -> "TotalsResponse":
        return cls(
            market_value=t.market_value,
            cost_basis=t.cost_basis,
            unrealized=t.unrealized,
            realized=t.realized,
            cash=t.cash,
        )


class PortfolioSummaryResponse(BaseModel):
    """Holdings (largest market value first) and totals."""

    holdings: list[HoldingResponse]
    totals: TotalsResponse


class FileRequest(BaseModel):
    """Request schema for save/load/export."""

    path: str = Field(..., min_length=1, description="File path (relative paths use the data directory)")


class FileResponse(BaseModel):
    """Response schema for file operations."""

    path: str
    message: str
