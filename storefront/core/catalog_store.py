"""Catalog Store - load the product catalog and look products up.

The catalog is loaded once per process from a YAML file:
1. `settings.catalog_path` (absolute, or relative to the working directory)
2. the same relative path under the project root
"""

import re
from collections.abc import Sequence
from pathlib import Path

import yaml
from pydantic import ValidationError

from storefront.config import settings
from storefront.infra.logging import get_logger
from storefront.models.product import CatalogDocument, Product

logger = get_logger(__name__)


class CatalogError(RuntimeError):
    """Raised when the catalog file cannot be read or is invalid."""


_LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")
_MAX_ID_DIGITS = 18


def parse_product_id(raw: int | str | None) -> int | None:
    """Parse an identifier coming from navigation context.

    Text is read like a query parameter: leading whitespace is skipped
    and the leading run of digits is used ("5", " 5", "5abc" -> 5).
    Text without leading ASCII digits ("", "abc", full-width
    digits, None) and digit runs too long to be an id yield None.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw

    match = _LEADING_INT.match(str(raw))
    if match is None:
        return None
    sign, digits = match.groups()
    if len(digits.lstrip("0")) > _MAX_ID_DIGITS:
        return None
    return int(sign + digits)


class CatalogStore:
    """Read-only, ordered product collection."""

    def __init__(
        self,
        products: Sequence[Product],
        version: str = "0.0.0",
        currency: str = "IDR",
    ) -> None:
        self._products: tuple[Product, ...] = tuple(products)
        # First occurrence wins; ids are unique in well-formed catalogs
        self._by_id: dict[int, Product] = {}
        for product in self._products:
            self._by_id.setdefault(product.id, product)
        self.version = version
        self.currency = currency

    @classmethod
    def from_document(cls, document: CatalogDocument) -> "CatalogStore":
        """Create a store from a validated catalog document."""
        return cls(document.products, version=document.version, currency=document.currency)

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "CatalogStore":
        """Parse YAML content into a store.

        Raises:
            CatalogError: If the YAML is malformed or fails validation
        """
        try:
            data = yaml.safe_load(yaml_content) or {}
        except yaml.YAMLError as e:
            raise CatalogError(f"Catalog is not valid YAML: {e}") from e

        if not isinstance(data, dict):
            raise CatalogError("Catalog root must be a mapping")

        try:
            document = CatalogDocument.model_validate(data)
        except ValidationError as e:
            raise CatalogError(f"Catalog failed validation: {e}") from e

        return cls.from_document(document)

    def all(self) -> Sequence[Product]:
        """Return every product in load order."""
        return self._products

    def by_id(self, raw: int | str | None) -> Product | None:
        """Find a product by identifier.

        Args:
            raw: Identifier as int or text (e.g. a query parameter)

        Returns:
            Matching product, or None if malformed or unknown
        """
        product_id = parse_product_id(raw)
        if product_id is None:
            logger.debug("Malformed product id", raw=raw)
            return None

        product = self._by_id.get(product_id)
        if product is None:
            logger.info("Product not found", product_id=product_id)
        return product

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self):
        return iter(self._products)


class CatalogLoader:
    """Loads the catalog from disk and caches the store."""

    def __init__(self) -> None:
        self._store: CatalogStore | None = None

    def load(self, path: str | Path | None = None) -> CatalogStore:
        """Load the catalog, returning the cached store when available.

        Only the default catalog is cached. An explicit path is read fresh
        and leaves the cached store untouched.

        Args:
            path: Catalog file. Defaults to settings.catalog_path.

        Returns:
            Loaded CatalogStore

        Raises:
            CatalogError: If no catalog file is found or it is invalid
        """
        if self._store is not None and path is None:
            logger.debug("Using cached catalog", products=len(self._store))
            return self._store

        catalog_file = self._resolve_path(Path(path or settings.catalog_path))
        logger.info("Loading catalog from local file", path=str(catalog_file))

        store = CatalogStore.from_yaml(catalog_file.read_text(encoding="utf-8"))
        if path is None:
            self._store = store

        logger.info(
            "Catalog loaded",
            version=store.version,
            currency=store.currency,
            products=len(store),
            featured=sum(1 for p in store.all() if p.is_featured),
        )
        return store

    def _resolve_path(self, path: Path) -> Path:
        """Find the catalog file among the search locations."""
        search_paths = [
            path,
            Path(__file__).parent.parent.parent / path,
        ]

        for candidate in search_paths:
            if candidate.is_file():
                return candidate

        logger.error("Catalog not found", searched=[str(p) for p in search_paths])
        raise CatalogError(f"Catalog not found: {path}")

    def clear_cache(self) -> None:
        """Drop the cached store."""
        self._store = None
        logger.info("Catalog cache cleared")


# Singleton loader
_loader: CatalogLoader | None = None


def get_catalog_loader() -> CatalogLoader:
    """Get the singleton catalog loader."""
    global _loader
    if _loader is None:
        _loader = CatalogLoader()
    return _loader


def get_catalog_store() -> CatalogStore:
    """Convenience function returning the loaded catalog."""
    return get_catalog_loader().load()
