"""Route tests for the simpler resources: service companies, timesheets,
managers, project statuses and location types."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.integration

TIMESHEET = {
    "activity": "a1",
    "worker": "w1",
    "manager": "m1",
    "startTime": "2024-03-01T08:00:00Z",
    "endTime": "2024-03-01T16:00:00Z",
    "file": "week-09.pdf",
}


class TestServiceCompanyRoutes:
    async def test_crud(self, client: AsyncClient):
        created = await client.post(
            "/api/service-companies", json={"name": "Towers Srl", "address": "Via A"}
        )
        company_id = created.json()["data"]["id"]

        updated = await client.patch(
            f"/api/service-companies/{company_id}", json={"url": "https://t.example"}
        )
        deleted = await client.delete(f"/api/service-companies/{company_id}")
        gone = await client.get(f"/api/service-companies/{company_id}")

        assert created.status_code == 201
        assert updated.json()["data"]["url"] == "https://t.example"
        assert deleted.json()["message"] == "Service company deleted successfully"
        assert gone.json() == {
            "error": "Service company not found",
            "message": "Service company retrieval failed",
        }

    async def test_create_requires_address(self, client: AsyncClient):
        response = await client.post(
            "/api/service-companies", json={"name": "Towers Srl"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Name and Address must be provided"


class TestTimesheetRoutes:
    async def test_create_defaults(self, client: AsyncClient):
        response = await client.post("/api/timesheets", json=TIMESHEET)

        data = response.json()["data"]
        assert response.status_code == 201
        assert data["isPending"] is True
        assert data["isAccepted"] is False
        assert data["rejectionReason"] == []
        assert data["hoursSpent"] is None

    async def test_reject(self, client: AsyncClient):
        created = (await client.post("/api/timesheets", json=TIMESHEET)).json()

        response = await client.patch(
            f"/api/timesheets/{created['data']['id']}",
            json={
                "isPending": False,
                "isRejected": True,
                "rejectionReason": ["missing signature"],
            },
        )

        data = response.json()["data"]
        assert data["isRejected"] is True
        assert data["rejectionReason"] == ["missing signature"]

    async def test_list_is_paginated_and_searchable(self, client: AsyncClient):
        for week in range(1, 4):
            await client.post(
                "/api/timesheets", json={**TIMESHEET, "file": f"week-0{week}.pdf"}
            )

        page = (await client.get("/api/timesheets", params={"limit": 2})).json()
        found = (
            await client.get("/api/timesheets", params={"search": "WEEK-02"})
        ).json()

        assert len(page["data"]) == 2
        assert page["totalPages"] == 2
        assert [t["file"] for t in found["data"]] == ["week-02.pdf"]

    async def test_missing_times(self, client: AsyncClient):
        payload = {k: v for k, v in TIMESHEET.items() if k != "endTime"}

        response = await client.post("/api/timesheets", json=payload)

        assert response.status_code == 400

    async def test_unknown_manager_stays_an_id(self, client: AsyncClient):
        response = await client.post("/api/timesheets", json=TIMESHEET)

        assert response.json()["data"]["manager"] == "m1"

    async def test_known_manager_is_embedded(
        self, authenticated_client: AsyncClient
    ):
        manager = (
            await authenticated_client.post(
                "/api/managers", json={"name": "Ada", "email": "ada@example.com"}
            )
        ).json()["data"]
        summary = {"id": manager["id"], "name": "Ada", "email": "ada@example.com"}

        created = (
            await authenticated_client.post(
                "/api/timesheets", json={**TIMESHEET, "manager": manager["id"]}
            )
        ).json()["data"]
        fetched = (
            await authenticated_client.get(f"/api/timesheets/{created['id']}")
        ).json()["data"]
        listed = (await authenticated_client.get("/api/timesheets")).json()["data"]

        assert created["manager"] == summary
        assert fetched["manager"] == summary
        assert listed[0]["manager"] == summary

    async def test_reassigning_manager_embeds_new_one(
        self, authenticated_client: AsyncClient
    ):
        manager = (
            await authenticated_client.post(
                "/api/managers", json={"name": "Ada", "email": "ada@example.com"}
            )
        ).json()["data"]
        created = (
            await authenticated_client.post("/api/timesheets", json=TIMESHEET)
        ).json()["data"]

        response = await authenticated_client.patch(
            f"/api/timesheets/{created['id']}", json={"manager": manager["id"]}
        )

        assert response.json()["data"]["manager"]["name"] == "Ada"

    async def test_update_rejects_null_for_required_field(self, client: AsyncClient):
        created = (await client.post("/api/timesheets", json=TIMESHEET)).json()

        response = await client.patch(
            f"/api/timesheets/{created['data']['id']}",
            json={"file": None, "hoursSpent": 8},
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": 'ValidationError: "file" must be a string',
            "message": "Timesheet update failed",
        }


class TestManagerRoutes:
    async def test_soft_delete(self, authenticated_client: AsyncClient):
        created = await authenticated_client.post(
            "/api/managers", json={"name": "Ada", "email": "ada@example.com"}
        )
        manager_id = created.json()["data"]["id"]

        await authenticated_client.delete(f"/api/managers/{manager_id}")
        listing = (await authenticated_client.get("/api/managers")).json()

        assert created.status_code == 201
        assert listing["totalCount"] == 0


class TestProjectStatusRoutes:
    async def test_create_update_delete(self, authenticated_client: AsyncClient):
        created = await authenticated_client.post(
            "/api/project-statuses", json={"name": "Open", "color": "#00ff00"}
        )
        status_id = created.json()["data"]["id"]

        updated = await authenticated_client.patch(
            f"/api/project-statuses/{status_id}", json={"description": "Just opened"}
        )
        deleted = await authenticated_client.delete(
            f"/api/project-statuses/{status_id}"
        )
        missing = await authenticated_client.patch(
            f"/api/project-statuses/{status_id}", json={"name": "Reopened"}
        )

        assert created.status_code == 201
        assert updated.json()["data"]["description"] == "Just opened"
        assert updated.json()["data"]["color"] == "#00ff00"
        assert deleted.status_code == 200
        assert missing.json()["error"] == "Failed to update project status"

    async def test_null_name_rejected(self, authenticated_client: AsyncClient):
        created = await authenticated_client.post(
            "/api/project-statuses", json={"name": "Open"}
        )
        status_id = created.json()["data"]["id"]

        response = await authenticated_client.patch(
            f"/api/project-statuses/{status_id}", json={"name": None}
        )
        fetched = await authenticated_client.get(f"/api/project-statuses/{status_id}")

        assert response.status_code == 400
        assert response.json() == {
            "error": 'ValidationError: "name" must be a string',
            "message": '"name" must be a string',
        }
        assert fetched.json()["data"]["name"] == "Open"


class TestLocationTypeRoutes:
    async def test_list_search(self, authenticated_client: AsyncClient):
        for name in ("Rooftop", "Tower", "Indoor"):
            await authenticated_client.post("/api/location-types", json={"name": name})

        body = (
            await authenticated_client.get(
                "/api/location-types", params={"search": "oo"}
            )
        ).json()

        assert sorted(t["name"] for t in body["data"]) == ["Indoor", "Rooftop"]
        assert body["message"] == "Location types retrieved successfully"
