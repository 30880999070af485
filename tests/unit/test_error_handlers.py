"""Unit tests for error handlers."""

import uuid

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from petcare.database import get_async_session
from petcare.errors import StoreError


@pytest.mark.asyncio
async def test_missing_pet_returns_404(client: AsyncClient, auth_headers: dict):
    response = await client.get(f"/api/pets/{uuid.uuid4()}", headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "Pet not found", "error_code": "NOT_FOUND"}


@pytest.mark.asyncio
async def test_unknown_route_uses_error_shape(client: AsyncClient):
    response = await client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found", "error_code": "NOT_FOUND"}


@pytest.mark.asyncio
async def test_missing_token_returns_401(client: AsyncClient):
    response = await client.get("/api/pets")

    assert response.status_code == 401
    assert response.json()["error_code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_method_not_allowed(client: AsyncClient):
    response = await client.patch("/health")

    assert response.status_code == 405
    assert response.json()["error_code"] == "METHOD_NOT_ALLOWED"


@pytest.mark.asyncio
async def test_body_validation_returns_400_with_fields(client: AsyncClient, auth_headers: dict):
    response = await client.post("/api/pets", json={"type": "dog"}, headers=auth_headers)

    assert response.status_code == 400
    data = response.json()
    assert data["error_code"] == "VALIDATION_ERROR"
    assert {"field": "name", "msg": "Field required", "type": "missing"} in data["errors"]


@pytest.mark.asyncio
async def test_malformed_path_id_returns_400(client: AsyncClient, auth_headers: dict):
    response = await client.get("/api/pets/not-a-uuid", headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "pet_id"


@pytest.mark.asyncio
async def test_database_failure_returns_500(client: AsyncClient):
    from petcare.main import app

    async def broken_session():
        raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))
        yield  # pragma: no cover

    app.dependency_overrides[get_async_session] = broken_session

    response = await client.get("/api/pets", headers={"Authorization": "Bearer whatever"})

    assert response.status_code == 500
    data = response.json()
    assert data == {"error": StoreError().message, "error_code": StoreError.error_code}
    assert data["error_code"] == "STORE_ERROR"
    assert "disk I/O error" not in response.text


@pytest.mark.asyncio
async def test_health_and_root(client: AsyncClient):
    health = await client.get("/health")
    root = await client.get("/")

    assert health.json()["status"] == "healthy"
    assert root.json()["status"] == "operational"
    assert root.json()["docs"] == "/api/docs"
