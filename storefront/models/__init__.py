"""Domain models."""

from storefront.models.product import CatalogDocument, Product

__all__ = ["CatalogDocument", "Product"]
