"""Bearer token enforcement across the protected resources."""

import pytest
from httpx import AsyncClient

from core.auth import create_access_token

pytestmark = pytest.mark.integration

PROTECTED_PREFIXES = [
    "/api/managers",
    "/api/project-statuses",
    "/api/location-types",
    "/api/locations",
    "/api/projects",
]

OPEN_PREFIXES = [
    "/api/customers",
    "/api/service-companies",
    "/api/timesheets",
]


@pytest.mark.parametrize("prefix", PROTECTED_PREFIXES)
async def test_missing_token_is_401(client: AsyncClient, prefix: str):
    response = await client.get(prefix)

    assert response.status_code == 401
    assert response.json() == {
        "error": "Authorization token missing",
        "message": "Unauthorized",
    }


@pytest.mark.parametrize("prefix", PROTECTED_PREFIXES)
async def test_invalid_token_is_401(client: AsyncClient, prefix: str):
    response = await client.get(prefix, headers={"Authorization": "Bearer nope"})

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid token"


async def test_expired_token_is_401(client: AsyncClient):
    token = create_access_token("manager_1", ttl_seconds=-1)

    response = await client.get(
        "/api/projects", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 401
    assert response.json()["error"] == "Token expired"


async def test_auth_runs_before_validation(client: AsyncClient):
    response = await client.post("/api/projects", json={})

    assert response.status_code == 401


@pytest.mark.parametrize("prefix", PROTECTED_PREFIXES)
async def test_valid_token_lists(authenticated_client: AsyncClient, prefix: str):
    response = await authenticated_client.get(prefix)

    assert response.status_code == 200
    assert response.json()["data"] == []


@pytest.mark.parametrize("prefix", OPEN_PREFIXES)
async def test_open_resources_need_no_token(client: AsyncClient, prefix: str):
    response = await client.get(prefix)

    assert response.status_code == 200
