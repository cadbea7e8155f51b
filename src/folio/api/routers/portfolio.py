"""Portfolio summary and file endpoints."""

from fastapi import APIRouter, Depends

from folio.api.deps import get_ledger_service
from folio.api.schemas import (
    FileRequest,
    FileResponse,
    HoldingResponse,
    PortfolioSummaryResponse,
    TotalsResponse,
)
from folio.services import LedgerService

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get("/summary", response_model=PortfolioSummaryResponse)
def get_summary(ledger: LedgerService = Depends(get_ledger_service)) -> PortfolioSummaryResponse:
    """Holdings with cost basis and P&L, plus totals and cash."""
    return PortfolioSummaryResponse(
        holdings=[HoldingResponse.from_summary(h) for h in ledger.summarize()],
        totals=TotalsResponse.from_totals(ledger.totals()),
    )


@router.post("/save", response_model=FileResponse)
def save_portfolio(
    data: FileRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> FileResponse:
    """Save the portfolio to a file."""
    path = ledger.save(data.path)
    return FileResponse(path=str(path), message="Saved.")


@router.post("/load", response_model=FileResponse)
def load_portfolio(
    data: FileRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> FileResponse:
    """Replace the live portfolio with a saved file."""
    ledger.load(data.path)
    return FileResponse(path=data.path, message="Loaded.")


@router.post("/export", response_model=FileResponse)
def export_holdings(
    data: FileRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> FileResponse:
    """Export the holdings summary as CSV."""
    path = ledger.export_csv(data.path)
    return FileResponse(path=str(path), message="Exported CSV.")
