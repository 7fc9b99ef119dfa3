"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient

from storefront.api.routes import health as health_module
from storefront.core.catalog_store import CatalogError


class TestHealthEndpoints:
    """Tests for health check routes."""

    @pytest.mark.asyncio
    async def test_health_endpoint(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    @pytest.mark.asyncio
    async def test_health_live_endpoint(self, client: AsyncClient):
        response = await client.get("/health/live")
        assert response.status_code == 200

        data = response.json()
        assert data["checks"] == {"alive": True}

    @pytest.mark.asyncio
    async def test_health_ready_with_catalog(self, client: AsyncClient):
        response = await client.get("/health/ready")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"]["catalog"] is True

    @pytest.mark.asyncio
    async def test_health_ready_degraded_without_catalog(self, client: AsyncClient, monkeypatch):
        def broken_store():
            raise CatalogError("Catalog not found: missing.yaml")

        monkeypatch.setattr(health_module, "get_catalog_store", broken_store)

        response = await client.get("/health/ready")

        data = response.json()
        assert data["status"] == "degraded"
        assert data["checks"]["catalog"] is False


@pytest.mark.asyncio
async def test_root_endpoint(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json()["service"] == "HMNS Storefront"
