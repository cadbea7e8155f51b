"""Asset registry and price endpoints."""

from fastapi import APIRouter, Depends

from folio.api.deps import get_ledger_service
from folio.api.schemas import AssetCreateRequest, AssetResponse, PriceUpdateRequest
from folio.services import LedgerService

router = APIRouter(tags=["assets"])


@router.get("/assets", response_model=list[AssetResponse])
def list_assets(ledger: LedgerService = Depends(get_ledger_service)) -> list[AssetResponse]:
    """List registered assets with their current prices."""
    return [
        AssetResponse.from_asset(asset, ledger.get_price(asset.ticker))
        for asset in ledger.list_assets()
    ]


@router.post("/assets", response_model=AssetResponse, status_code=201)
def add_asset(
    data: AssetCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> AssetResponse:
    """Register an asset (re-registering a ticker overwrites it)."""
    asset = ledger.add_asset(
        ticker=data.ticker,
        name=data.name,
        asset_type=data.asset_type,
        currency=data.currency,
    )
    return AssetResponse.from_asset(asset, ledger.get_price(asset.ticker))


@router.put("/prices/{ticker}", response_model=AssetResponse)
def set_price(
    ticker: str,
    data: PriceUpdateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> AssetResponse:
    """Set the current price of a registered asset."""
    ledger.set_price(ticker, data.price)
    asset = ledger.get_asset(ticker)
    return AssetResponse.from_asset(asset, ledger.get_price(asset.ticker))
