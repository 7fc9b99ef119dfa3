"""Product model - one perfume in the catalog."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

OPTIONAL_TEXT_FIELDS = (
    "badge",
    "video",
    "top_notes",
    "middle_notes",
    "base_notes",
    "longevity",
    "sillage",
    "projection",
    "bpom",
)


class Product(BaseModel):
    """Immutable product record.

    `target_group` and `scent_family` are the two filter axes. Optional
    attributes are `None` when absent; blank strings in the source data
    are normalised to `None` so templates only ever check one thing.
    """

    id: int = Field(gt=0, description="Unique product identifier")
    name: str = Field(min_length=1, description="Display name")
    category: str = Field(default="", description="Scent category text")
    scent_family: str = Field(description="Scent family tag (fresh, woody, ...)")
    target_group: str = Field(description="Target group tag (pria, wanita, ...)")
    price: int = Field(ge=0, description="Price without minor units")
    size: str = Field(default="", description="Bottle size")
    badge: str | None = Field(default=None, description="Badge label, marks featured products")

    image: str = Field(description="Main image path")
    images: tuple[str, ...] = Field(default=(), description="Gallery images in display order")
    video: str | None = Field(default=None, description="Optional gallery video path")

    description: str = Field(default="", description="Short card description")
    full_description: str = Field(default="", description="Detail page description")

    top_notes: str | None = None
    middle_notes: str | None = None
    base_notes: str | None = None
    longevity: str | None = None
    sillage: str | None = None
    projection: str | None = None
    bpom: str | None = Field(default=None, description="BPOM registration number")

    marketplace_url: str = Field(description="External marketplace product link")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Treat empty or whitespace-only optional text as absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def is_featured(self) -> bool:
        """A product with a badge is featured."""
        return bool(self.badge)

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}')>"


class CatalogDocument(BaseModel):
    """Top-level layout of the catalog YAML file."""

    version: str = Field(default="0.0.0", description="Catalog data version")
    currency: str = Field(default="IDR", description="Currency of all prices")
    products: list[Product] = Field(default_factory=list)

    model_config = {"extra": "forbid"}
