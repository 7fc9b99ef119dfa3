"""Health check endpoints.

Provides health status for container probes and monitoring.
"""

from fastapi import APIRouter

from storefront import __version__
from storefront.api.deps import AppSettings
from storefront.core.catalog_store import CatalogError, get_catalog_store
from storefront.infra.logging import get_logger
from storefront.schemas.common import HealthResponse

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health(settings: AppSettings) -> HealthResponse:
    """Basic health check.

    Returns 200 if service is running.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={},
    )


@router.get("/health/ready", response_model=HealthResponse)
async def health_ready(settings: AppSettings) -> HealthResponse:
    """Readiness check.

    Verifies the catalog is loaded and not empty.
    """
    checks: dict[str, bool] = {}

    try:
        checks["catalog"] = len(get_catalog_store()) > 0
    except CatalogError as e:
        logger.warning("Catalog health check failed", error=str(e))
        checks["catalog"] = False

    all_healthy = all(checks.values()) if checks else True

    return HealthResponse(
        status="healthy" if all_healthy else "degraded",
        version=__version__,
        environment=settings.environment,
        checks=checks,
    )


@router.get("/health/live", response_model=HealthResponse)
async def health_live(settings: AppSettings) -> HealthResponse:
    """Liveness check.

    Basic check that service is responding.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={"alive": True},
    )
