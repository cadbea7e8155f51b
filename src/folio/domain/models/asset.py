"""Asset domain model."""

from dataclasses import dataclass

from folio.domain.models.enums import AssetType


@dataclass(frozen=True)
class Asset:
    """
    Registered instrument keyed by ticker.

    Re-registering a ticker replaces the previous record.
    """

    ticker: str
    name: str
    asset_type: AssetType = AssetType.STOCK
    currency: str = "INR"

    def __post_init__(self) -> None:
        if not isinstance(self.asset_type, AssetType):
            object.__setattr__(self, "asset_type", AssetType.parse(self.asset_type))
