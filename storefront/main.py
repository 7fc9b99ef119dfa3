"""FastAPI application entry point.

Storefront service: serves catalog grids, featured products and
product detail views as display-ready JSON for the hosting pages.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront import __version__
from storefront.config import settings
from storefront.core.catalog_store import get_catalog_loader
from storefront.infra.logging import (
    bind_request_context,
    bind_service_context,
    clear_request_context,
    get_logger,
    setup_logging,
)
from storefront.schemas.common import ErrorResponse

# Import routers
from storefront.api.routes.health import router as health_router
from storefront.api.routes.pages import router as pages_router
from storefront.api.routes.products import router as products_router

# Setup logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Startup:
    - Load the product catalog

    Shutdown:
    - Drop the cached catalog
    """
    logger.info("Storefront starting", version=__version__)

    store = get_catalog_loader().load()
    bind_service_context(catalog_version=store.version)
    logger.info(
        "Catalog ready",
        version=store.version,
        products=len(store),
    )

    yield

    logger.info("Storefront shutting down")
    get_catalog_loader().clear_cache()
    logger.info("Cleanup complete")


app = FastAPI(
    title="HMNS Storefront",
    description="Perfume catalog grids and product detail views",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.is_dev else None,
    redoc_url=None,
)

# CORS middleware (static pages are served from another origin in development)
if settings.is_dev:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )


# =============================================================================
# Request Context Middleware
# =============================================================================


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Bind request fields to every log line written while serving it."""
    bind_request_context(
        method=request.method,
        path=request.url.path,
        query=str(request.url.query)[:200],
    )
    try:
        response = await call_next(request)
        logger.info("Request served", status_code=response.status_code)
        return response
    finally:
        clear_request_context()


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions with a structured error response."""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal server error",
            error_type=type(exc).__name__,
        ).model_dump(),
    )


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router, tags=["Health"])
app.include_router(products_router, prefix="/products", tags=["Products"])
app.include_router(pages_router, prefix="/pages", tags=["Pages"])


# =============================================================================
# Root Endpoint
# =============================================================================


@app.get("/")
async def root() -> dict:
    """Root endpoint - basic service info."""
    return {
        "service": "HMNS Storefront",
        "version": __version__,
        "environment": settings.environment,
    }
