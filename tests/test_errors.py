"""
Error rendering tests - every failure comes back as {"message": ...}.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from app.db.repositories.inventory_repository import InventoryRepository


@pytest.mark.asyncio
async def test_unknown_route(client: AsyncClient):
    response = await client.get("/api/nowhere")
    assert response.status_code == 404
    assert response.json() == {"message": "Route not found"}


@pytest.mark.asyncio
async def test_malformed_json_is_400(client: AsyncClient, auth_headers: dict):
    response = await client.post(
        "/api/inventories",
        headers={**auth_headers, "Content-Type": "application/json"},
        content=b"{not json",
    )
    assert response.status_code == 400
    assert "message" in response.json()


@pytest.mark.asyncio
async def test_store_failure_is_generic_500(client: AsyncClient, auth_headers: dict, monkeypatch):
    async def broken(self, owner_id, search=None):
        raise OperationalError("SELECT", {}, Exception("connection reset"))

    monkeypatch.setattr(InventoryRepository, "list_for_owner", broken)

    response = await client.get("/api/inventories", headers=auth_headers)
    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}


@pytest.mark.asyncio
async def test_metrics_exposed(client: AsyncClient, auth_headers: dict):
    await client.get("/api/inventories/missing", headers=auth_headers)
    response = await client.get("/metrics/")
    assert response.status_code == 200
    assert "inventory_authorization_decisions_total" in response.text
