"""Pydantic schemas for views and API responses."""

from storefront.schemas.common import ErrorResponse, HealthResponse
from storefront.schemas.views import (
    ActionLink,
    CardView,
    DetailView,
    FilterOption,
    FilterOptions,
    GalleryItem,
    GalleryView,
    GridView,
    Intent,
    IntentKind,
    NotFoundView,
    PageView,
    SpecItem,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ActionLink",
    "CardView",
    "DetailView",
    "FilterOption",
    "FilterOptions",
    "GalleryItem",
    "GalleryView",
    "GridView",
    "Intent",
    "IntentKind",
    "NotFoundView",
    "PageView",
    "SpecItem",
]
