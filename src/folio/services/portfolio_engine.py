"""Portfolio engine for deriving lots, P&L and cash from the ledger."""

from decimal import Decimal

from folio.domain.models import AssetType, PortfolioState, Transaction, TransactionType
from folio.domain.views import ComputedPortfolio, HoldingSummary, Lot, PortfolioTotals

ZERO = Decimal("0")
HUNDRED = Decimal("100")

# Quantities at or below this are treated as fully consumed
QTY_EPSILON = Decimal("1e-9")


class PortfolioEngine:
    """
    Engine for computing portfolio state from the ledger.

    Replays the transaction log with FIFO lot matching. Results are derived
    fresh on every call and never written back into the state.
    """

    def __init__(self, default_currency: str = "INR"):
        self._default_currency = default_currency

    def compute(self, state: PortfolioState, seed_realized: bool = True) -> ComputedPortfolio:
        """
        Replay the ledger in stored order.

        Realized P&L starts from the persisted map when seed_realized is True
        and from zero otherwise. Cash always starts from zero.
        """
        result = ComputedPortfolio(realized=dict(state.realized) if seed_realized else {})

        for txn in state.txns:
            if txn.is_cash:
                self._apply_cash(result, txn)
                continue

            lots = result.lots.setdefault(txn.ticker, [])

            if txn.txn_type == TransactionType.BUY:
                total_cost = txn.gross_amount + txn.fees
                lots.append(Lot(quantity=txn.quantity, cost=total_cost, acquired=txn.txn_date))
                result.cash -= total_cost

            elif txn.txn_type == TransactionType.SELL:
                result.cash += txn.gross_amount - txn.fees
                realized = self._consume_lots(lots, txn)
                # Fees are netted out of proceeds and charged to realized P&L again
                self._add_realized(result, txn.ticker, realized - txn.fees)

            elif txn.txn_type == TransactionType.DIVIDEND:
                result.cash += txn.quantity
                self._add_realized(result, txn.ticker, txn.quantity)

            elif txn.txn_type == TransactionType.FEES:
                result.cash -= txn.quantity

            # DEPOSIT/WITHDRAW only move money on the CASH ledger

        return result

    def summarize(self, state: PortfolioState) -> list[HoldingSummary]:
        """
        Aggregate open lots into one summary per held ticker.

        Realized P&L is read from the persisted state map. Rows are ordered
        by market value, largest first; ties keep ledger order.
        """
        computed = self.compute(state)
        holdings: list[HoldingSummary] = []

        for ticker, lots in computed.lots.items():
            if not lots:
                continue

            quantity = sum((lot.quantity for lot in lots), ZERO)
            cost_basis = sum((lot.cost for lot in lots), ZERO)
            price = state.prices.get(ticker, ZERO)
            market_value = quantity * price
            unrealized = market_value - cost_basis
            avg_cost = cost_basis / quantity if quantity > 0 else ZERO
            pnl_percent = unrealized / cost_basis * HUNDRED if cost_basis > 0 else ZERO

            asset = state.assets.get(ticker)
            holdings.append(
                HoldingSummary(
                    ticker=ticker,
                    name=asset.name if asset else ticker,
                    asset_type=asset.asset_type if asset else AssetType.STOCK,
                    currency=asset.currency if asset else self._default_currency,
                    quantity=quantity,
                    avg_cost=avg_cost,
                    market_price=price,
                    market_value=market_value,
                    cost_basis=cost_basis,
                    unrealized=unrealized,
                    pnl_percent=pnl_percent,
                    realized=state.realized.get(ticker, ZERO),
                )
            )

        holdings.sort(key=lambda h: h.market_value, reverse=True)
        return holdings

    def totals(self, state: PortfolioState) -> PortfolioTotals:
        """Sum the holdings summary and attach the cash balance."""
        holdings = self.summarize(state)
        return PortfolioTotals(
            market_value=sum((h.market_value for h in holdings), ZERO),
            cost_basis=sum((h.cost_basis for h in holdings), ZERO),
            unrealized=sum((h.unrealized for h in holdings), ZERO),
            realized=sum((h.realized for h in holdings), ZERO),
            cash=self.cash_balance(state),
        )

    def cash_balance(self, state: PortfolioState) -> Decimal:
        """Return the cash balance implied by the ledger."""
        return self.compute(state).cash

    def audit_realized(self, state: PortfolioState) -> dict[str, Decimal]:
        """Return realized P&L derived from the ledger alone, ignoring the persisted map."""
        return self.compute(state, seed_realized=False).realized

    @staticmethod
    def _apply_cash(result: ComputedPortfolio, txn: Transaction) -> None:
        if txn.txn_type == TransactionType.DEPOSIT:
            result.cash += txn.quantity
        elif txn.txn_type in (TransactionType.WITHDRAW, TransactionType.FEES):
            result.cash -= txn.quantity
        # Trades and dividends have no meaning on the cash ledger

    @staticmethod
    def _consume_lots(lots: list[Lot], txn: Transaction) -> Decimal:
        """
        Remove txn.quantity units from the front of the FIFO queue.

        Returns the realized gain before fees. Units sold beyond the open lots
        have no recorded purchase and are booked at zero cost basis.
        """
        remaining = txn.quantity
        realized = ZERO

        while remaining > QTY_EPSILON and lots:
            lot = lots[0]
            taken = min(lot.quantity, remaining)
            unit_cost = lot.unit_cost
            realized += taken * (txn.price - unit_cost)
            lot.quantity -= taken
            lot.cost = max(lot.cost - unit_cost * taken, ZERO)
            remaining -= taken
            if lot.quantity <= QTY_EPSILON:
                lots.pop(0)

        if remaining > QTY_EPSILON:
            realized += remaining * txn.price

        return realized

    @staticmethod
    def _add_realized(result: ComputedPortfolio, ticker: str, amount: Decimal) -> None:
        result.realized[ticker] = result.realized.get(ticker, ZERO) + amount
