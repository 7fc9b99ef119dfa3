"""Pytest configuration and shared fixtures for the storefront tests."""

from collections.abc import AsyncGenerator, Callable
from pathlib import Path
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from storefront.api.deps import get_store
from storefront.config import Settings
from storefront.core.catalog_store import CatalogLoader, CatalogStore
from storefront.models.product import Product

CATALOG_PATH = Path(__file__).parent.parent / "config" / "catalog.yaml"


# ============================================================================
# Fixtures: Catalog
# ============================================================================


@pytest.fixture(scope="session")
def catalog_store() -> CatalogStore:
    """The shipped 15-product catalog (7 pria, 8 wanita)."""
    return CatalogLoader().load(CATALOG_PATH)


@pytest.fixture
def settings() -> Settings:
    """Settings with the default display values."""
    return Settings(
        store_name="HMNS",
        currency_symbol="Rp",
        featured_limit=4,
        related_limit=4,
        messaging_base_url="https://wa.me/6281413371321",
        messaging_template="Halo, saya tertarik dengan parfum {name} ({price})",
        detail_url_template="detail.html?id={id}",
    )


@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Factory for products with sensible defaults."""

    def _make(**overrides: Any) -> Product:
        product_id = overrides.get("id", 1)
        data: dict[str, Any] = {
            "id": product_id,
            "name": f"Test Perfume {product_id}",
            "category": "Fresh Aromatic",
            "scent_family": "fresh",
            "target_group": "pria",
            "price": 320000,
            "size": "100ml",
            "badge": None,
            "image": f"assets/{product_id}/gambar1.webp",
            "images": [f"assets/{product_id}/gambar1.webp", f"assets/{product_id}/gambar2.webp"],
            "description": "Short description",
            "full_description": "Full description",
            "marketplace_url": f"https://shop.example/{product_id}",
        }
        data.update(overrides)
        return Product(**data)

    return _make


@pytest.fixture
def small_store(make_product: Callable[..., Product]) -> CatalogStore:
    """Five products covering both axes."""
    return CatalogStore(
        [
            make_product(id=1, target_group="pria", scent_family="fresh", badge="Best Seller"),
            make_product(id=2, target_group="pria", scent_family="woody"),
            make_product(id=3, target_group="wanita", scent_family="floral", badge="New"),
            make_product(id=4, target_group="wanita", scent_family="fresh"),
            make_product(id=5, target_group="wanita", scent_family="gourmand", badge="Limited"),
        ]
    )


# ============================================================================
# Fixtures: API
# ============================================================================


@pytest.fixture
def app(catalog_store: CatalogStore):
    """FastAPI app serving the shipped catalog."""
    from storefront.main import app as fastapi_app

    fastapi_app.dependency_overrides[get_store] = lambda: catalog_store
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the app (lifespan not run)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
