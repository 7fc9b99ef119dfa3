"""Display structures produced by the view renderer.

Views carry display-ready values plus named interaction hooks. The host
wires each hook to its own listener; no markup or script is embedded.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

# Card regions that accept clicks
REGION_IMAGE = "image"
REGION_NAME = "name"
REGION_PURCHASE = "purchase"


class IntentKind(str, Enum):
    """What the host should do when a hook fires."""

    NAVIGATE_DETAIL = "navigate_detail"
    NAVIGATE_EXTERNAL = "navigate_external"
    SHOW_MEDIA = "show_media"


class Intent(BaseModel):
    """Interaction hook attached to a rendered region."""

    kind: IntentKind
    product_id: int | None = Field(default=None, description="Target of navigate_detail")
    url: str | None = Field(default=None, description="Target of navigation intents")
    media_index: int | None = Field(default=None, description="Gallery item for show_media")
    stop_propagation: bool = Field(
        default=False,
        description="Enclosing regions must not handle the same click",
    )

    model_config = {"frozen": True, "extra": "forbid"}


class CardView(BaseModel):
    """Product card shown in grids."""

    product_id: int
    name: str
    image: str
    image_alt: str
    badge: str | None = None
    group: str
    group_label: str
    category: str
    description: str
    price: int
    price_label: str
    size: str
    marketplace_url: str
    hooks: dict[str, Intent] = Field(default_factory=dict)

    model_config = {"extra": "forbid"}

    def dispatch(self, path: Sequence[str]) -> list[Intent]:
        """Resolve the intents fired by one click.

        Args:
            path: Regions the click passes through, innermost first

        Returns:
            Intents in firing order. An intent with stop_propagation
            ends the walk, so outer regions never see the click.
        """
        fired: list[Intent] = []
        for region in path:
            intent = self.hooks.get(region)
            if intent is None:
                continue
            fired.append(intent)
            if intent.stop_propagation:
                break
        return fired


class GridView(BaseModel):
    """Grid of product cards with a result count.

    An empty result is reported as `state="empty"` with a message
    instead of an empty grid.
    """

    state: Literal["results", "empty"]
    cards: list[CardView] = Field(default_factory=list)
    count: int = 0
    count_label: str = "0"
    empty_message: str | None = None

    model_config = {"extra": "forbid"}


class GalleryItem(BaseModel):
    """One gallery thumbnail (image or video)."""

    index: int
    kind: Literal["image", "video"]
    src: str
    alt: str
    hook: Intent

    model_config = {"extra": "forbid"}


class GalleryView(BaseModel):
    """Ordered gallery: images first, then the optional video."""

    items: list[GalleryItem] = Field(default_factory=list)
    active_index: int | None = None

    model_config = {"extra": "forbid"}

    @property
    def has_video(self) -> bool:
        return any(item.kind == "video" for item in self.items)


class SpecItem(BaseModel):
    """One row of a specification list."""

    key: str
    label: str
    value: str

    model_config = {"frozen": True, "extra": "forbid"}


class ActionLink(BaseModel):
    """External purchase/contact action."""

    label: str
    url: str
    hook: Intent

    model_config = {"extra": "forbid"}


class DetailView(BaseModel):
    """Product detail panel."""

    title: str
    card: CardView
    main_image: str
    full_description: str
    gallery: GalleryView
    specs: list[SpecItem] = Field(default_factory=list)
    notes: list[SpecItem] = Field(default_factory=list)
    purchase: ActionLink
    contact: ActionLink

    model_config = {"extra": "forbid"}


class NotFoundView(BaseModel):
    """Shown when a requested product cannot be resolved."""

    title: str = "Produk tidak ditemukan"
    message: str = "Silakan kembali ke halaman koleksi"

    model_config = {"extra": "forbid"}


class FilterOption(BaseModel):
    """One selectable value of a filter axis."""

    value: str
    label: str
    selected: bool = False

    model_config = {"extra": "forbid"}


class FilterOptions(BaseModel):
    """Selectable values of both filter axes."""

    groups: list[FilterOption] = Field(default_factory=list)
    families: list[FilterOption] = Field(default_factory=list)

    model_config = {"extra": "forbid"}


class PageView(BaseModel):
    """Everything a hosting page needs after initial load."""

    mode: Literal["grid", "detail", "featured"]
    grid: GridView | None = None
    filters: FilterOptions | None = None
    detail: DetailView | None = None
    related: GridView | None = None
    not_found: NotFoundView | None = None

    model_config = {"extra": "forbid"}
