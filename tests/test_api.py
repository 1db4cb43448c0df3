"""Tests for the JSON API using FastAPI's TestClient."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from networth.api import create_app
from networth.config import AppSettings
from networth.service import NetWorthService

CASH_ACCOUNT = {
    "id": "acc-cash",
    "type": "cash",
    "name": "Bank",
    "cash_holdings": [
        {"balance": "1000", "currency": "USD"},
        {"balance": "500", "currency": "EUR"},
    ],
}


@pytest.fixture
def client(service: NetWorthService, app_settings: AppSettings) -> TestClient:
    return TestClient(create_app(service=service, settings=app_settings))


class TestCurrencies:
    def test_lists_supported_currencies(self, client: TestClient) -> None:
        response = client.get("/api/currencies")
        assert response.status_code == 200

        by_code = {c["code"]: c for c in response.json()}
        assert len(by_code) == 10
        assert by_code["USD"] == {"code": "USD", "name": "US Dollar", "symbol": "$", "decimals": 2}
        assert by_code["JPY"]["decimals"] == 0


class TestDashboard:
    def test_summary_and_series(self, client: TestClient) -> None:
        response = client.post(
            "/api/dashboard",
            json={
                "as_of": "2025-03-15",
                "accounts": [CASH_ACCOUNT],
                "snapshots": [
                    {"snapshot_date": "2025-03-10T12:00:00Z", "total_value": "800", "currency": "EUR"}
                ],
            },
        )
        assert response.status_code == 200
        body = response.json()

        summary = body["summary"]
        assert summary["base_currency"] == "USD"
        assert Decimal(summary["cash"]) == Decimal("1625")
        assert Decimal(summary["total_net_worth"]) == Decimal("1625")
        assert summary["display"]["total_net_worth"] == "$1,625.00"

        assert body["as_of"] == "2025-03-15"
        assert body["today_snapshot"]["snapshot_date"] == "2025-03-15"
        assert [Decimal(p["total"]) for p in body["daily"]] == [Decimal("1000")] * 6 + [Decimal("1625")]
        assert body["daily"][0]["date"] == "2025-03-09"
        assert len(body["monthly"]) == 12
        assert body["allocation"][0]["name"] == "Cash"

    def test_base_currency_override(self, client: TestClient) -> None:
        response = client.post(
            "/api/dashboard",
            json={"base_currency": "EUR", "as_of": "2025-03-15", "accounts": [CASH_ACCOUNT]},
        )
        summary = response.json()["summary"]
        # 1000 USD * 0.8 + 500 EUR
        assert Decimal(summary["cash"]) == Decimal("1300")
        assert summary["display"]["cash"] == "€1,300.00"

    def test_unknown_base_currency_is_bad_gateway(self, client: TestClient) -> None:
        response = client.post("/api/dashboard", json={"base_currency": "XYZ", "accounts": []})
        assert response.status_code == 502
        assert "XYZ" in response.json()["error"]

    def test_missing_price_feed_is_bad_gateway(self, app_settings: AppSettings) -> None:
        client = TestClient(create_app(settings=app_settings))
        account = {
            "id": "acc-brokerage",
            "type": "investment",
            "stock_holdings": [{"ticker": "AAPL", "shares": "10"}],
        }
        response = client.post("/api/dashboard", json={"accounts": [account]})

        assert response.status_code == 502
        assert "price feed" in response.json()["error"]

    def test_cash_only_works_without_price_feed(self, app_settings: AppSettings) -> None:
        client = TestClient(create_app(settings=app_settings))
        response = client.post("/api/dashboard", json={"accounts": [CASH_ACCOUNT]})

        assert response.status_code == 200
        assert Decimal(response.json()["summary"]["cash"]) == Decimal("1625")

    def test_numeric_snapshot_date_is_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/dashboard",
            json={"snapshots": [{"snapshot_date": 20250101, "total_value": "1"}]},
        )
        assert response.status_code == 422

    def test_invalid_account_type(self, client: TestClient) -> None:
        account = {**CASH_ACCOUNT, "type": "crypto"}
        response = client.post("/api/dashboard", json={"accounts": [account]})
        assert response.status_code == 422


class TestFire:
    def test_manual_assumptions(self, client: TestClient) -> None:
        response = client.post(
            "/api/fire",
            json={
                "as_of": "2025-03-15",
                "accounts": [CASH_ACCOUNT],
                "assumptions": {"monthly_expenses": "2000", "current_age": 40},
            },
        )
        assert response.status_code == 200
        body = response.json()

        assert Decimal(body["inputs"]["annual_expenses"]) == Decimal("24000")
        assert body["inputs"]["current_age"] == 40
        assert Decimal(body["results"]["fire_number"]) == Decimal("600000")
        assert len(body["projection"]) == 41
        assert body["projection"][0]["age"] == 40

    def test_tracked_expenses(self, client: TestClient) -> None:
        response = client.post(
            "/api/fire",
            json={
                "as_of": "2025-03-15",
                "accounts": [CASH_ACCOUNT],
                "expenses": [
                    {
                        "amount": "1200",
                        "currency": "USD",
                        "category": "recurring",
                        "subcategory": "rent_mortgage",
                        "expense_date": "2025-03-01",
                    }
                ],
            },
        )
        body = response.json()
        assert Decimal(body["average_monthly_expenses"]) == Decimal("1200")
        # 1625 growing at the real return alone needs more than 100 years to reach 360000
        assert body["results"]["years_to_fire"] is None
        assert body["results"]["fire_age"] is None


class TestSort:
    RECORDS = [
        {"name": "b", "value": 2},
        {"name": "a", "value": None},
        {"name": "c", "value": 10},
    ]

    def test_default_descending(self, client: TestClient) -> None:
        response = client.post("/api/sort", json={"records": self.RECORDS, "key": "value"})
        assert response.status_code == 200
        assert [r["name"] for r in response.json()] == ["c", "b", "a"]

    def test_ascending(self, client: TestClient) -> None:
        response = client.post(
            "/api/sort", json={"records": self.RECORDS, "key": "value", "direction": "asc"}
        )
        assert [r["name"] for r in response.json()] == ["a", "b", "c"]

    def test_missing_key_is_rejected(self, client: TestClient) -> None:
        response = client.post("/api/sort", json={"records": self.RECORDS})
        assert response.status_code == 422
