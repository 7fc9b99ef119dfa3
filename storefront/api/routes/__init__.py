"""API routes module."""

from storefront.api.routes.health import router as health_router
from storefront.api.routes.pages import router as pages_router
from storefront.api.routes.products import router as products_router

__all__ = ["health_router", "pages_router", "products_router"]
