"""FastAPI dependencies for dependency injection.

Provides:
- Catalog store
- Settings
"""

from typing import Annotated

from fastapi import Depends

from storefront.config import Settings, get_settings
from storefront.core.catalog_store import CatalogStore, get_catalog_store


async def get_store() -> CatalogStore:
    """Get the loaded catalog store."""
    return get_catalog_store()


async def get_app_settings() -> Settings:
    """Get application settings."""
    return get_settings()


# Type aliases for cleaner annotations
Store = Annotated[CatalogStore, Depends(get_store)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]
