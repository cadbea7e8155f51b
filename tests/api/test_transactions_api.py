"""
API tests for transaction endpoints.

Tests cover:
- Add transaction (BUY, SELL, DIVIDEND, DEPOSIT)
- Position reporting after date re-sorting
- Remove by position
- Query transactions with a ticker filter
- Undo last change
- Validation errors (400, 404, 422)
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient


def post_txn(client: TestClient, **overrides) -> dict:
    payload = {
        "ticker": "AAPL",
        "txn_type": "BUY",
        "txn_date": "2024-01-15",
        "quantity": "10",
        "price": "100",
    }
    payload.update(overrides)
    response = client.post("/transactions", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


# =============================================================================
# ADD TRANSACTION TESTS
# =============================================================================


class TestAddTransactionAPI:
    """Tests for POST /transactions."""

    def test_add_buy(self, client: TestClient):
        """
        GIVEN an empty ledger
        WHEN I POST /transactions with valid BUY data
        THEN response is 201 with the entry at position 0
        """
        response = client.post("/transactions", json={
            "ticker": "aapl",
            "txn_type": "BUY",
            "txn_date": "2024-01-15",
            "quantity": "10",
            "price": "185.00",
            "fees": "4.95",
            "note": "Initial purchase",
        })

        assert response.status_code == 201
        data = response.json()
        assert data["index"] == 0
        assert data["ticker"] == "AAPL"
        assert data["txn_type"] == "BUY"
        assert data["txn_date"] == "2024-01-15"
        assert Decimal(data["quantity"]) == Decimal("10")
        assert Decimal(data["price"]) == Decimal("185.00")
        assert Decimal(data["fees"]) == Decimal("4.95")
        assert data["note"] == "Initial purchase"

    def test_registers_unknown_ticker(self, client: TestClient):
        post_txn(client, ticker="TCS")

        assets = client.get("/assets").json()
        assert [a["ticker"] for a in assets] == ["TCS"]

    def test_backdated_entry_reports_sorted_position(self, client: TestClient):
        post_txn(client, txn_date="2024-02-01")
        post_txn(client, txn_date="2024-03-01")

        data = post_txn(client, ticker="CASH", txn_type="DEPOSIT", txn_date="2024-01-01", quantity="5000")

        assert data["index"] == 0

    def test_same_day_entry_goes_last(self, client: TestClient):
        post_txn(client)
        post_txn(client, ticker="MSFT")

        data = post_txn(client)

        assert data["index"] == 2

    def test_invalid_date_is_400(self, client: TestClient):
        response = client.post("/transactions", json={
            "ticker": "AAPL",
            "txn_type": "BUY",
            "txn_date": "2023-02-29",
            "quantity": "1",
            "price": "10",
        })

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_DATE"

    def test_buy_on_cash_is_400(self, client: TestClient):
        response = client.post("/transactions", json={
            "ticker": "CASH",
            "txn_type": "BUY",
            "txn_date": "2024-01-01",
            "quantity": "1",
            "price": "10",
        })

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"quantity": "0"},
            {"quantity": "-1"},
            {"price": "-1"},
            {"fees": "-0.01"},
            {"txn_type": "SWAP"},
            {"ticker": ""},
        ],
    )
    def test_invalid_fields_are_422(self, client: TestClient, overrides: dict):
        payload = {
            "ticker": "AAPL",
            "txn_type": "BUY",
            "txn_date": "2024-01-15",
            "quantity": "1",
            "price": "10",
        }
        payload.update(overrides)

        response = client.post("/transactions", json=payload)

        assert response.status_code == 422
        assert client.get("/transactions").json()["count"] == 0


# =============================================================================
# LIST / REMOVE TESTS
# =============================================================================


class TestListTransactionsAPI:
    """Tests for GET /transactions."""

    def test_list_in_date_order(self, client: TestClient):
        post_txn(client, txn_date="2024-03-01", note="later")
        post_txn(client, txn_date="2024-01-01", note="earlier")

        data = client.get("/transactions").json()

        assert data["count"] == 2
        assert [t["note"] for t in data["transactions"]] == ["earlier", "later"]
        assert [t["index"] for t in data["transactions"]] == [0, 1]

    def test_filter_by_ticker(self, client: TestClient):
        post_txn(client, ticker="CASH", txn_type="DEPOSIT", txn_date="2024-01-01", quantity="1000")
        post_txn(client, txn_date="2024-01-02")
        post_txn(client, ticker="MSFT", txn_date="2024-01-03")

        data = client.get("/transactions", params={"ticker": "aapl"}).json()

        assert data["count"] == 1
        assert data["transactions"][0]["index"] == 1


class TestRemoveTransactionAPI:
    """Tests for DELETE /transactions/{index}."""

    def test_remove(self, client: TestClient):
        post_txn(client, txn_date="2024-01-01", note="keep")
        post_txn(client, txn_date="2024-01-02", note="drop")

        response = client.delete("/transactions/1")

        assert response.status_code == 200
        assert response.json()["note"] == "drop"
        remaining = client.get("/transactions").json()["transactions"]
        assert [t["note"] for t in remaining] == ["keep"]

    @pytest.mark.parametrize("index", [-1, 1])
    def test_out_of_range_is_404(self, client: TestClient, index: int):
        """
        GIVEN a ledger with one entry
        WHEN I DELETE an invalid position
        THEN response is 404 and the entry remains
        """
        post_txn(client)

        response = client.delete(f"/transactions/{index}")

        assert response.status_code == 404
        assert response.json()["error"] == "INDEX_OUT_OF_RANGE"
        assert client.get("/transactions").json()["count"] == 1


# =============================================================================
# UNDO TESTS
# =============================================================================


class TestUndoAPI:
    """Tests for POST /transactions/undo."""

    def test_undo_add(self, client: TestClient):
        post_txn(client)

        response = client.post("/transactions/undo")

        assert response.json() == {"undone": True, "message": "Undone."}
        assert client.get("/transactions").json()["count"] == 0
        assert client.get("/assets").json() == []

    def test_undo_remove(self, client: TestClient):
        post_txn(client, note="restored")
        client.delete("/transactions/0")

        client.post("/transactions/undo")

        rows = client.get("/transactions").json()["transactions"]
        assert [t["note"] for t in rows] == ["restored"]

    def test_nothing_to_undo(self, client: TestClient):
        response = client.post("/transactions/undo")

        assert response.status_code == 200
        assert response.json() == {"undone": False, "message": "Nothing to undo."}
