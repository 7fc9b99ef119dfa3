"""Display formatting: labels, prices and outbound links."""

from urllib.parse import quote

from storefront.models.product import Product

GROUP_LABELS: dict[str, str] = {
    "unisex": "Unisex",
    "pria": "Pria",
    "wanita": "Wanita",
}

FAMILY_LABELS: dict[str, str] = {
    "fresh": "Fresh",
    "woody": "Woody",
    "oriental": "Oriental",
    "floral": "Floral",
    "gourmand": "Gourmand",
}

ALL_LABEL = "Semua"


def group_label(tag: str) -> str:
    """Human label for a target group; unknown tags are shown verbatim."""
    return GROUP_LABELS.get(tag) or tag


def family_label(tag: str) -> str:
    """Human label for a scent family; unknown tags are shown verbatim."""
    return FAMILY_LABELS.get(tag) or tag


def format_price(price: int, symbol: str = "Rp") -> str:
    """Format a price with dot thousands separators.

    >>> format_price(320000)
    'Rp 320.000'
    """
    return f"{symbol} {price:,}".replace(",", ".")


def messaging_url(
    product: Product,
    base_url: str,
    template: str,
    currency_symbol: str = "Rp",
) -> str:
    """Build the pre-filled messaging link for a product.

    The whole message is percent-encoded, so names with spaces,
    punctuation or non-ASCII characters survive intact.
    """
    text = template.format(
        name=product.name,
        price=format_price(product.price, currency_symbol),
    )
    return f"{base_url}?text={quote(text, safe='')}"


def detail_url(product_id: int, template: str) -> str:
    """Location of the detail page for a product."""
    return template.format(id=product_id)
