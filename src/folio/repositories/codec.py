"""Text codec for persisted portfolio state.

The format is a small JSON-shaped document with four sections::

    {
      "assets": [ {"ticker":..,"name":..,"type":..,"currency":..}, ... ],
      "prices": {"TICKER": number, ...},
      "realized": {"TICKER": number, ...},
      "txs": [ {"ticker":..,"type":..,"date":..,"qty":..,"price":..,"fees":..,"note":..}, ... ]
    }

It is a private exchange format: the parser only promises to read what
serialize() writes. Numbers are written with full Decimal precision.
"""

import json
from decimal import Decimal
from typing import Any, Optional

from folio.core.dates import format_date, to_serial, validate
from folio.core.exceptions import InvalidDateError, ParseError
from folio.domain.models import Asset, AssetType, PortfolioState, Transaction, TransactionType


def serialize(state: PortfolioState) -> str:
    """Render state as text. Map sections keep insertion order; the log keeps its order."""
    asset_rows = [
        "    {"
        f'"ticker":{_quote(a.ticker)},'
        f'"name":{_quote(a.name)},'
        f'"type":{_quote(a.asset_type.value)},'
        f'"currency":{_quote(a.currency)}'
        "}"
        for a in state.assets.values()
    ]
    txn_rows = [
        "    {"
        f'"ticker":{_quote(t.ticker)},'
        f'"type":{_quote(t.txn_type.value)},'
        f'"date":{_quote(format_date(t.txn_date))},'
        f'"qty":{_number(t.quantity)},'
        f'"price":{_number(t.price)},'
        f'"fees":{_number(t.fees)},'
        f'"note":{_quote(t.note)}'
        "}"
        for t in state.txns
    ]

    parts = [
        "{",
        '  "assets": [',
        *_join_rows(asset_rows),
        "  ],",
        f'  "prices": {_number_map(state.prices)},',
        f'  "realized": {_number_map(state.realized)},',
        '  "txs": [',
        *_join_rows(txn_rows),
        "  ]",
        "}",
    ]
    return "\n".join(parts) + "\n"


def parse(text: str) -> PortfolioState:
    """
    Rebuild state from serialized text.

    Raises ParseError if the text is unreadable or has no assets section.
    Missing or malformed prices/realized/txs sections are read as empty.
    """
    try:
        data = json.loads(text, parse_float=Decimal, parse_int=Decimal, strict=False)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Unreadable portfolio data: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("Unreadable portfolio data: top level is not an object")

    raw_assets = data.get("assets")
    if not isinstance(raw_assets, list):
        raise ParseError("Portfolio data has no assets section")

    state = PortfolioState()
    for entry in raw_assets:
        if not isinstance(entry, dict):
            continue
        ticker = _text(entry, "ticker")
        if not ticker:
            continue
        state.assets[ticker] = Asset(
            ticker=ticker,
            name=_text(entry, "name"),
            asset_type=AssetType.parse(_text(entry, "type")),
            currency=_text(entry, "currency"),
        )

    state.prices = _read_number_map(data.get("prices"))
    state.realized = _read_number_map(data.get("realized"))

    raw_txns = data.get("txs")
    if isinstance(raw_txns, list):
        for position, entry in enumerate(raw_txns):
            if not isinstance(entry, dict):
                continue
            txn = _read_transaction(entry, position)
            if txn is not None:
                state.txns.append(txn)
    state.txns.sort(key=lambda t: to_serial(t.txn_date))

    return state


def _read_transaction(entry: dict[str, Any], position: int) -> Optional[Transaction]:
    ticker = _text(entry, "ticker")
    if not ticker:
        return None

    type_text = _text(entry, "type")
    try:
        txn_type = TransactionType(type_text)
    except ValueError as e:
        raise ParseError(f"Transaction {position}: unknown type {type_text!r}") from e

    try:
        txn_date = validate(_text(entry, "date"))
    except InvalidDateError as e:
        raise ParseError(f"Transaction {position}: {e.message}") from e

    return Transaction(
        ticker=ticker,
        txn_type=txn_type,
        txn_date=txn_date,
        quantity=_decimal(entry.get("qty")),
        price=_decimal(entry.get("price")),
        fees=_decimal(entry.get("fees")),
        note=_text(entry, "note"),
    )


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _number(value: Decimal) -> str:
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return str(value)


def _number_map(values: dict[str, Decimal]) -> str:
    items = ",".join(f"{_quote(k)}:{_number(v)}" for k, v in values.items())
    return "{" + items + "}"


def _join_rows(rows: list[str]) -> list[str]:
    return [row + ("," if i < len(rows) - 1 else "") for i, row in enumerate(rows)]


def _text(entry: dict[str, Any], key: str) -> str:
    value = entry.get(key)
    return value if isinstance(value, str) else ""


def _decimal(value: Any) -> Decimal:
    # bool is an int subclass, and JSON true/false is never a valid amount
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float)):
        return Decimal("0")
    result = value if isinstance(value, Decimal) else Decimal(str(value))
    # NaN and Infinity tokens are accepted by json.loads but never valid amounts
    if not result.is_finite():
        raise ParseError(f"Non-finite number in portfolio data: {value!r}")
    return result


def _read_number_map(section: Any) -> dict[str, Decimal]:
    if not isinstance(section, dict):
        return {}
    result: dict[str, Decimal] = {}
    for key, value in section.items():
        if key and isinstance(value, (Decimal, int, float)) and not isinstance(value, bool):
            result[key] = _decimal(value)
    return result
