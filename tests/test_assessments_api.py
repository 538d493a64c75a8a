"""API tests for assessment creation and completion."""

import pytest
from httpx import AsyncClient


async def _create(client: AsyncClient, **body) -> dict:
    response = await client.post("/api/v1/assessments", json=body)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateAssessmentAPI:
    """POST /assessments"""

    @pytest.mark.asyncio
    async def test_create(self, client: AsyncClient) -> None:
        data = await _create(client, type="PHQ-9", client_id="C100", notes="first visit")

        assert data["type"] == "PHQ-9"
        assert data["name"] == "PHQ-9"
        assert data["status"] == "pending"
        assert data["client_id"] == "C100"
        assert data["notes"] == "first visit"
        assert data["score"] is None
        assert data["responses"] is None

    @pytest.mark.asyncio
    async def test_unknown_type(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/assessments", json={"type": "XYZ"})

        assert response.status_code == 400
        assert "XYZ" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_missing_type(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/assessments", json={})

        assert response.status_code == 422


class TestCompleteAssessmentAPI:
    """POST /assessments/{id}/complete"""

    @pytest.mark.asyncio
    async def test_complete_flagged(self, client: AsyncClient) -> None:
        created = await _create(client, type="GAD-7", client_id="C200")
        responses = {str(i): 3 for i in range(1, 8)}

        response = await client.post(
            f"/api/v1/assessments/{created['id']}/complete",
            json={"responses": responses},
        )

        assert response.status_code == 200, response.text
        data = response.json()
        assert data["status"] == "flagged"
        assert data["score"] == 21
        assert data["severity"] == "Severe Anxiety"
        assert data["risk_flags"] == ["Severe anxiety symptoms"]
        assert data["completed_at"] is not None
        assert len(data["responses"]) == 7
        assert data["responses"][0] == {
            "question_id": 1,
            "value": 3,
            "label": "Nearly every day",
        }

        client_response = await client.get("/api/v1/clients/C200")
        assert client_response.json()["risk_level"] == "high"

    @pytest.mark.asyncio
    async def test_unknown_option_label(self, client: AsyncClient) -> None:
        created = await _create(client, type="PHQ-9")

        response = await client.post(
            f"/api/v1/assessments/{created['id']}/complete",
            json={"responses": {"1": 5, "42": 0}},
        )

        assert response.status_code == 200
        labels = [r["label"] for r in response.json()["responses"]]
        assert labels == ["Unknown", "Unknown"]

    @pytest.mark.asyncio
    async def test_complete_twice_conflict(self, client: AsyncClient) -> None:
        created = await _create(client, type="PHQ-9")
        url = f"/api/v1/assessments/{created['id']}/complete"

        first = await client.post(url, json={"responses": {"1": 1}})
        second = await client.post(url, json={"responses": {"1": 3, "9": 3}})

        assert first.status_code == 200
        assert second.status_code == 409

        stored = (await client.get(f"/api/v1/assessments/{created['id']}")).json()
        assert stored["score"] == 1
        assert stored["status"] == "completed"

    @pytest.mark.asyncio
    async def test_unknown_assessment(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/assessments/00000000-0000-0000-0000-000000000000/complete",
            json={"responses": {"1": 1}},
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_responses(self, client: AsyncClient) -> None:
        created = await _create(client, type="PHQ-9")

        response = await client.post(
            f"/api/v1/assessments/{created['id']}/complete",
            json={"responses": {"1": "often", "two": 1}},
        )

        assert response.status_code == 400
        assert len(response.json()["detail"]) == 2

        stored = (await client.get(f"/api/v1/assessments/{created['id']}")).json()
        assert stored["status"] == "pending"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "responses",
        [
            {"\u00b2": 1},
            {"1": 2**70},
            {"1": -50, "2": 3},
        ],
    )
    async def test_out_of_range_responses_rejected(
        self, client: AsyncClient, responses: dict
    ) -> None:
        created = await _create(client, type="PHQ-9")

        response = await client.post(
            f"/api/v1/assessments/{created['id']}/complete",
            json={"responses": responses},
        )

        assert response.status_code == 400
        assert len(response.json()["detail"]) == 1

        stored = (await client.get(f"/api/v1/assessments/{created['id']}")).json()
        assert stored["status"] == "pending"
        assert stored["score"] is None


class TestReadAssessmentsAPI:
    """GET /assessments and /assessments/{id}"""

    @pytest.mark.asyncio
    async def test_get_missing(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/assessments/00000000-0000-0000-0000-000000000001")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_list_with_status_filter(self, client: AsyncClient) -> None:
        pending = await _create(client, type="BAI")
        done = await _create(client, type="BAI")
        await client.post(
            f"/api/v1/assessments/{done['id']}/complete",
            json={"responses": {"1": 1}},
        )

        all_items = (await client.get("/api/v1/assessments")).json()
        completed = (await client.get("/api/v1/assessments", params={"status": "completed"})).json()

        assert {a["id"] for a in all_items} == {pending["id"], done["id"]}
        assert [a["id"] for a in completed] == [done["id"]]

    @pytest.mark.asyncio
    async def test_list_invalid_status(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/assessments", params={"status": "archived"})

        assert response.status_code == 422
