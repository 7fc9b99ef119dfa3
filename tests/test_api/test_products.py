"""Tests for product endpoints."""

from urllib.parse import unquote

import pytest
from httpx import AsyncClient


class TestProductGrid:
    """Tests for GET /products."""

    @pytest.mark.asyncio
    async def test_full_catalog(self, client: AsyncClient):
        response = await client.get("/products")
        assert response.status_code == 200

        data = response.json()
        assert data["state"] == "results"
        assert data["count"] == 15
        assert [c["product_id"] for c in data["cards"]] == list(range(1, 16))

    @pytest.mark.asyncio
    async def test_group_filter(self, client: AsyncClient):
        response = await client.get("/products", params={"group": "pria"})

        data = response.json()
        assert data["count_label"] == "7"
        assert {c["group"] for c in data["cards"]} == {"pria"}

    @pytest.mark.asyncio
    async def test_both_filters(self, client: AsyncClient):
        response = await client.get("/products", params={"group": "wanita", "family": "floral"})

        assert [c["product_id"] for c in response.json()["cards"]] == [8, 9, 12, 14]

    @pytest.mark.asyncio
    async def test_no_match_is_empty_state(self, client: AsyncClient):
        response = await client.get("/products", params={"group": "pria", "family": "floral"})
        assert response.status_code == 200

        data = response.json()
        assert data["state"] == "empty"
        assert data["cards"] == []
        assert data["empty_message"]

    @pytest.mark.asyncio
    async def test_card_hooks(self, client: AsyncClient):
        response = await client.get("/products", params={"family": "fresh"})

        card = response.json()["cards"][0]
        assert card["product_id"] == 1
        assert card["price_label"] == "Rp 320.000"
        assert card["hooks"]["purchase"]["stop_propagation"] is True
        assert card["hooks"]["purchase"]["url"] == card["marketplace_url"]


class TestFeaturedAndFilters:
    """Tests for /products/featured and /products/filters."""

    @pytest.mark.asyncio
    async def test_featured(self, client: AsyncClient):
        response = await client.get("/products/featured")
        assert response.status_code == 200

        assert [c["product_id"] for c in response.json()["cards"]] == [1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_filters_mark_selection(self, client: AsyncClient):
        response = await client.get("/products/filters", params={"group": "wanita"})
        assert response.status_code == 200

        data = response.json()
        selected = [o["value"] for o in data["groups"] if o["selected"]]
        assert selected == ["wanita"]
        assert data["families"][0] == {"value": "all", "label": "Semua", "selected": True}


class TestProductDetail:
    """Tests for GET /products/{id}."""

    @pytest.mark.asyncio
    async def test_detail(self, client: AsyncClient):
        response = await client.get("/products/9")
        assert response.status_code == 200

        data = response.json()
        detail = data["detail"]
        assert detail["title"] == "HMNS O - HMNS"
        assert detail["card"]["price_label"] == "Rp 323.000"
        assert data["not_found"] is None

        contact = detail["contact"]["url"]
        assert contact.startswith("https://wa.me/6281413371321?text=")
        assert unquote(contact.split("?text=", 1)[1]) == (
            "Halo, saya tertarik dengan parfum HMNS O (Rp 323.000)"
        )

    @pytest.mark.asyncio
    async def test_detail_gallery_ends_with_video(self, client: AsyncClient):
        response = await client.get("/products/1")

        items = response.json()["detail"]["gallery"]["items"]
        assert items[-1]["kind"] == "video"
        assert all(item["kind"] == "image" for item in items[:-1])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("product_id", ["abc", "999999", "-1"])
    async def test_unknown_id_is_not_found(self, client: AsyncClient, product_id: str):
        response = await client.get(f"/products/{product_id}")
        assert response.status_code == 404

        data = response.json()
        assert data["detail"] is None
        assert data["not_found"]["title"] == "Produk tidak ditemukan"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("product_id", ["9" * 5000, "５"])
    async def test_oversized_or_non_ascii_id_is_not_found(
        self, client: AsyncClient, product_id: str
    ):
        response = await client.get(f"/products/{product_id}")
        assert response.status_code == 404
        assert response.json()["not_found"] is not None

    @pytest.mark.asyncio
    async def test_leading_digits_resolve(self, client: AsyncClient):
        response = await client.get("/products/5abc")
        assert response.status_code == 200
        assert response.json()["detail"]["card"]["product_id"] == 5


class TestRelated:
    """Tests for GET /products/{id}/related."""

    @pytest.mark.asyncio
    async def test_related(self, client: AsyncClient):
        response = await client.get("/products/1/related")
        assert response.status_code == 200

        assert [c["product_id"] for c in response.json()["cards"]] == [2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_related_crosses_groups(self, client: AsyncClient):
        response = await client.get("/products/10/related")

        assert [c["product_id"] for c in response.json()["cards"]] == [1, 8, 9, 11]

    @pytest.mark.asyncio
    async def test_related_limit(self, client: AsyncClient):
        response = await client.get("/products/1/related", params={"limit": 2})

        assert response.json()["count"] == 2

    @pytest.mark.asyncio
    async def test_related_zero_limit_is_empty(self, client: AsyncClient):
        response = await client.get("/products/1/related", params={"limit": 0})

        assert response.json()["state"] == "empty"

    @pytest.mark.asyncio
    async def test_related_unknown_product(self, client: AsyncClient):
        response = await client.get("/products/999/related")
        assert response.status_code == 404
        assert response.json()["not_found"] is not None

    @pytest.mark.asyncio
    async def test_related_not_found_matches_detail_not_found(self, client: AsyncClient):
        related = await client.get("/products/999/related")
        detail = await client.get("/products/999")

        assert related.status_code == detail.status_code == 404
        assert related.json() == detail.json()
