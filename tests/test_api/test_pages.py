"""Tests for the page initialisation endpoint."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_featured_page(client: AsyncClient):
    response = await client.get("/pages/featured")
    assert response.status_code == 200

    data = response.json()
    assert data["mode"] == "featured"
    assert [c["product_id"] for c in data["grid"]["cards"]] == [1, 2, 3, 4]
    assert data["filters"] is None


@pytest.mark.asyncio
async def test_grid_page_with_initial_filters(client: AsyncClient):
    response = await client.get("/pages/grid", params={"group": "wanita", "family": "floral"})
    assert response.status_code == 200

    data = response.json()
    assert data["grid"]["count_label"] == "4"
    assert [o["value"] for o in data["filters"]["families"] if o["selected"]] == ["floral"]


@pytest.mark.asyncio
async def test_detail_page(client: AsyncClient):
    response = await client.get("/pages/detail", params={"id": "9"})
    assert response.status_code == 200

    data = response.json()
    assert data["detail"]["card"]["name"] == "HMNS O"
    assert data["related"]["count"] == 4


@pytest.mark.asyncio
async def test_detail_page_without_id(client: AsyncClient):
    response = await client.get("/pages/detail")
    assert response.status_code == 404
    assert response.json()["not_found"]["message"] == "Silakan kembali ke halaman koleksi"


@pytest.mark.asyncio
async def test_unknown_mode_is_rejected(client: AsyncClient):
    response = await client.get("/pages/checkout")
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_detail_page_with_oversized_id(client: AsyncClient):
    response = await client.get("/pages/detail", params={"id": "9" * 5000})
    assert response.status_code == 404
    assert response.json()["not_found"] is not None
