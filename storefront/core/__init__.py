"""Core module - catalog store, filtering, relations and view rendering."""

from storefront.core.catalog_store import (
    CatalogError,
    CatalogLoader,
    CatalogStore,
    get_catalog_loader,
    get_catalog_store,
)
from storefront.core.filter_state import ALL, FilterState
from storefront.core.gallery import GalleryState
from storefront.core.query_engine import visible_products
from storefront.core.relation_engine import featured_products, related_to
from storefront.core.selection_controller import SelectionController, ViewMode
from storefront.core.view_renderer import (
    card_view,
    detail_view,
    grid_view,
    not_found_view,
)

__all__ = [
    "ALL",
    "CatalogError",
    "CatalogLoader",
    "CatalogStore",
    "FilterState",
    "GalleryState",
    "SelectionController",
    "ViewMode",
    "card_view",
    "detail_view",
    "featured_products",
    "get_catalog_loader",
    "get_catalog_store",
    "grid_view",
    "not_found_view",
    "related_to",
    "visible_products",
]
