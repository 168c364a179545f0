"""
Integration tests for the Analytics API endpoint.

These tests verify:
1. GET /api/analytics - Totals over the seeded store
2. Each creation increments count by 1 and revenue by the amount
3. Rejected creations leave the totals alone
"""

import pytest
from httpx import AsyncClient


class TestGetAnalytics:
    """Tests for GET /api/analytics endpoint."""

    @pytest.mark.asyncio
    async def test_seeded_totals(self, client: AsyncClient):
        response = await client.get("/api/analytics")

        assert response.status_code == 200
        assert response.json() == {
            "analytics": {
                "totalRevenue": 7876.5,
                "transactionCount": 5,
                "currency": "USD",
            }
        }

    @pytest.mark.asyncio
    async def test_empty_store(self, empty_client: AsyncClient):
        response = await empty_client.get("/api/analytics")

        assert response.json()["analytics"] == {
            "totalRevenue": 0.0,
            "transactionCount": 0,
            "currency": "USD",
        }

    @pytest.mark.asyncio
    async def test_reflects_new_transaction(self, client: AsyncClient, ada_request: dict):
        await client.post("/api/transactions", json=ada_request)

        analytics = (await client.get("/api/analytics")).json()["analytics"]

        assert analytics["transactionCount"] == 6
        assert analytics["totalRevenue"] == pytest.approx(8027.0)

    @pytest.mark.asyncio
    async def test_increments_per_creation(self, empty_client: AsyncClient):
        amounts = [0.1, 0.2, 19.99, 1234.56]
        expected_total = 0.0

        for count, amount in enumerate(amounts, start=1):
            await empty_client.post(
                "/api/transactions",
                json={"customerName": "Customer", "amount": amount, "currency": "GBP"},
            )
            expected_total += amount

            analytics = (await empty_client.get("/api/analytics")).json()["analytics"]
            assert analytics["transactionCount"] == count
            assert analytics["totalRevenue"] == pytest.approx(expected_total)

    @pytest.mark.asyncio
    async def test_rejected_creation_leaves_totals(
        self,
        client: AsyncClient,
        unsupported_currency_request: dict,
    ):
        before = (await client.get("/api/analytics")).json()

        await client.post("/api/transactions", json=unsupported_currency_request)

        assert (await client.get("/api/analytics")).json() == before
