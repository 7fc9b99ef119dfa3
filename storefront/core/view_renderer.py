"""View Renderer - project products into display structures.

All functions are pure: they read only their arguments (and settings
for store-wide display values) and return new view models.
"""

from collections.abc import Callable, Sequence

from storefront.config import Settings, get_settings
from storefront.core.formatting import (
    detail_url,
    format_price,
    group_label,
    messaging_url,
)
from storefront.models.product import Product
from storefront.schemas.views import (
    REGION_IMAGE,
    REGION_NAME,
    REGION_PURCHASE,
    ActionLink,
    CardView,
    DetailView,
    GalleryItem,
    GalleryView,
    GridView,
    Intent,
    IntentKind,
    NotFoundView,
    SpecItem,
)

EMPTY_GRID_MESSAGE = "Tidak ada produk yang sesuai dengan filter"

# (product attribute, label, optional value formatter)
SpecField = tuple[str, str, Callable[[str], str] | None]

SPEC_FIELDS: tuple[SpecField, ...] = (
    ("size", "Ukuran", None),
    ("category", "Kategori", None),
    ("target_group", "Gender", group_label),
    ("longevity", "Ketahanan", None),
    ("sillage", "Sillage", None),
    ("projection", "Projection", None),
    ("bpom", "No. BPOM", None),
)

NOTE_FIELDS: tuple[SpecField, ...] = (
    ("top_notes", "Top Notes", None),
    ("middle_notes", "Middle Notes", None),
    ("base_notes", "Base Notes", None),
)


def assemble_specs(product: Product, fields: Sequence[SpecField] = SPEC_FIELDS) -> list[SpecItem]:
    """Build a specification list from the fields a product has.

    Absent (None or empty) attributes are left out entirely.
    """
    specs: list[SpecItem] = []
    for key, label, formatter in fields:
        value = getattr(product, key, None)
        if not value:
            continue
        text = formatter(value) if formatter else str(value)
        specs.append(SpecItem(key=key, label=label, value=text))
    return specs


def _external_intent(url: str) -> Intent:
    return Intent(kind=IntentKind.NAVIGATE_EXTERNAL, url=url, stop_propagation=True)


def card_view(product: Product, settings: Settings | None = None) -> CardView:
    """Render the card for one product.

    Image and name open the detail page; the purchase link opens the
    marketplace and stops there.
    """
    cfg = settings or get_settings()
    to_detail = Intent(
        kind=IntentKind.NAVIGATE_DETAIL,
        product_id=product.id,
        url=detail_url(product.id, cfg.detail_url_template),
    )

    return CardView(
        product_id=product.id,
        name=product.name,
        image=product.image,
        image_alt=product.name,
        badge=product.badge or None,
        group=product.target_group,
        group_label=group_label(product.target_group),
        category=product.category,
        description=product.description,
        price=product.price,
        price_label=format_price(product.price, cfg.currency_symbol),
        size=product.size,
        marketplace_url=product.marketplace_url,
        hooks={
            REGION_IMAGE: to_detail,
            REGION_NAME: to_detail,
            REGION_PURCHASE: _external_intent(product.marketplace_url),
        },
    )


def grid_view(products: Sequence[Product], settings: Settings | None = None) -> GridView:
    """Render a grid of cards with its count.

    Zero products produce the explicit empty state.
    """
    if not products:
        return GridView(
            state="empty",
            cards=[],
            count=0,
            count_label="0",
            empty_message=EMPTY_GRID_MESSAGE,
        )

    cards = [card_view(p, settings) for p in products]
    return GridView(
        state="results",
        cards=cards,
        count=len(cards),
        count_label=str(len(cards)),
    )


def gallery_view(product: Product) -> GalleryView:
    """Gallery thumbnails: images in order, then the video if any.

    The first image is active initially; without images nothing is.
    """
    items: list[GalleryItem] = []
    for idx, src in enumerate(product.images):
        items.append(
            GalleryItem(
                index=idx,
                kind="image",
                src=src,
                alt=f"{product.name} {idx + 1}",
                hook=Intent(kind=IntentKind.SHOW_MEDIA, media_index=idx),
            )
        )

    if product.video:
        idx = len(items)
        items.append(
            GalleryItem(
                index=idx,
                kind="video",
                src=product.video,
                alt=f"{product.name} video",
                hook=Intent(kind=IntentKind.SHOW_MEDIA, media_index=idx),
            )
        )

    return GalleryView(items=items, active_index=0 if product.images else None)


def detail_view(product: Product, settings: Settings | None = None) -> DetailView:
    """Render the detail panel for one product."""
    cfg = settings or get_settings()
    contact_url = messaging_url(
        product,
        base_url=cfg.messaging_base_url,
        template=cfg.messaging_template,
        currency_symbol=cfg.currency_symbol,
    )

    return DetailView(
        title=f"{product.name} - {cfg.store_name}",
        card=card_view(product, cfg),
        main_image=product.image,
        full_description=product.full_description,
        gallery=gallery_view(product),
        specs=assemble_specs(product, SPEC_FIELDS),
        notes=assemble_specs(product, NOTE_FIELDS),
        purchase=ActionLink(
            label="Beli di Shopee",
            url=product.marketplace_url,
            hook=_external_intent(product.marketplace_url),
        ),
        contact=ActionLink(
            label="Tanya via WhatsApp",
            url=contact_url,
            hook=_external_intent(contact_url),
        ),
    )


def not_found_view() -> NotFoundView:
    """The explicit product-not-found state."""
    return NotFoundView()
