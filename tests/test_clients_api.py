"""API tests for client records."""

import pytest
from httpx import AsyncClient

from tests.conftest import create_and_complete


class TestClientsAPI:
    """GET /clients"""

    @pytest.mark.asyncio
    async def test_client_detail_with_assessments(self, client: AsyncClient) -> None:
        await create_and_complete(client, "PHQ-9", "K1", {"1": 1})
        await client.post("/api/v1/assessments", json={"type": "GAD-7", "client_id": "K1"})

        response = await client.get("/api/v1/clients/K1")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Client K1"
        assert data["email"] == "k1@example.com"
        assert data["risk_level"] == "low"
        assert [a["status"] for a in data["assessments"]] == ["completed", "pending"]

    @pytest.mark.asyncio
    async def test_client_not_found(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/clients/nobody")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_list_clients(self, client: AsyncClient, existing_client) -> None:
        await client.post("/api/v1/assessments", json={"type": "BAI", "client_id": "K2"})

        response = await client.get("/api/v1/clients")

        assert response.status_code == 200
        ids = [c["id"] for c in response.json()]
        # Contacted clients come before those never contacted
        assert ids == ["K2", existing_client.id]
