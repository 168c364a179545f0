"""
Integration tests for the Transaction API endpoints.

These tests verify:
1. GET /api/transactions - List transactions, newest first
2. POST /api/transactions - Create a transaction
3. Validation failures answer 400 and leave the store unchanged
"""

import pytest
from httpx import AsyncClient


# =============================================================================
# GET /api/transactions Tests
# =============================================================================

class TestListTransactions:
    """Tests for GET /api/transactions endpoint."""

    @pytest.mark.asyncio
    async def test_lists_seeded_transactions(self, client: AsyncClient):
        response = await client.get("/api/transactions")

        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 5
        assert len(data["transactions"]) == 5

        first = data["transactions"][0]
        assert set(first) == {"id", "date", "customerName", "amount", "currency"}

    @pytest.mark.asyncio
    async def test_ordered_by_date_descending(self, client: AsyncClient, ada_request: dict):
        await client.post("/api/transactions", json=ada_request)

        response = await client.get("/api/transactions")

        dates = [t["date"] for t in response.json()["transactions"]]
        assert dates == sorted(dates, reverse=True)
        assert response.json()["transactions"][0]["customerName"] == "Ada Lovelace"

    @pytest.mark.asyncio
    async def test_empty_store(self, empty_client: AsyncClient):
        response = await empty_client.get("/api/transactions")

        assert response.status_code == 200
        assert response.json() == {"transactions": [], "total": 0}


# =============================================================================
# POST /api/transactions Tests
# =============================================================================

class TestCreateTransaction:
    """Tests for POST /api/transactions endpoint."""

    @pytest.mark.asyncio
    async def test_create_returns_record(self, client: AsyncClient, ada_request: dict):
        response = await client.post("/api/transactions", json=ada_request)

        assert response.status_code == 201

        data = response.json()
        assert data["id"]
        assert data["customerName"] == "Ada Lovelace"
        assert data["amount"] == 150.5
        assert data["currency"] == "USD"
        assert data["date"].endswith("Z")

    @pytest.mark.asyncio
    async def test_trims_name_and_rounds_amount(self, client: AsyncClient):
        response = await client.post(
            "/api/transactions",
            json={"customerName": "  Grace Hopper ", "amount": 19.995, "currency": "EUR"},
        )

        assert response.status_code == 201
        assert response.json()["customerName"] == "Grace Hopper"
        assert response.json()["amount"] == 20.0

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, client: AsyncClient, ada_request: dict):
        existing = await client.get("/api/transactions")
        ids = {t["id"] for t in existing.json()["transactions"]}

        for _ in range(10):
            response = await client.post("/api/transactions", json=ada_request)
            new_id = response.json()["id"]
            assert new_id not in ids
            ids.add(new_id)

    @pytest.mark.asyncio
    async def test_created_record_is_listed(self, client: AsyncClient, ada_request: dict):
        created = (await client.post("/api/transactions", json=ada_request)).json()

        listed = (await client.get("/api/transactions")).json()

        assert listed["total"] == 6
        assert listed["transactions"][0] == created


# =============================================================================
# Validation Tests
# =============================================================================

class TestCreateTransactionValidation:
    """Invalid bodies answer 400 and never mutate the store."""

    @pytest.mark.asyncio
    async def test_empty_name(self, client: AsyncClient, empty_name_request: dict):
        response = await client.post("/api/transactions", json=empty_name_request)

        assert response.status_code == 400

        data = response.json()
        assert data["error"] == "VALIDATION_ERROR"
        assert data["statusCode"] == 400
        assert "customerName" in data["message"]

        listed = await client.get("/api/transactions")
        assert listed.json()["total"] == 5

    @pytest.mark.asyncio
    async def test_unsupported_currency(
        self,
        client: AsyncClient,
        unsupported_currency_request: dict,
    ):
        response = await client.post("/api/transactions", json=unsupported_currency_request)

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

        listed = await client.get("/api/transactions")
        assert listed.json()["total"] == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [0, -1, -0.01, "12"])
    async def test_bad_amount(self, client: AsyncClient, amount):
        response = await client.post(
            "/api/transactions",
            json={"customerName": "Ada", "amount": amount, "currency": "USD"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_non_finite_amount(self, client: AsyncClient):
        response = await client.post(
            "/api/transactions",
            content='{"customerName": "Ada", "amount": Infinity, "currency": "USD"}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [1e30, 9e25, 1_000_000_000.01])
    async def test_amount_above_limit(self, client: AsyncClient, amount):
        response = await client.post(
            "/api/transactions",
            json={"customerName": "Ada", "amount": amount, "currency": "USD"},
        )

        assert response.status_code == 400
        assert "must not exceed" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_huge_amounts_leave_store_and_analytics_usable(self, client: AsyncClient):
        for _ in range(2):
            response = await client.post(
                "/api/transactions",
                json={"customerName": "Ada", "amount": 9e25, "currency": "USD"},
            )
            assert response.status_code == 400

        analytics = await client.get("/api/analytics")
        listed = await client.get("/api/transactions")

        assert analytics.status_code == 200
        assert analytics.json()["analytics"]["totalRevenue"] == 7876.5
        assert listed.json()["total"] == 5

    @pytest.mark.asyncio
    async def test_malformed_json(self, client: AsyncClient):
        response = await client.post(
            "/api/transactions",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "VALIDATION_ERROR",
            "message": "Request body must be a valid JSON object",
            "statusCode": 400,
        }

    @pytest.mark.asyncio
    async def test_array_body(self, client: AsyncClient):
        response = await client.post("/api/transactions", json=[1, 2, 3])

        assert response.status_code == 400
        assert "JSON object" in response.json()["message"]
