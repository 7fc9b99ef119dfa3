"""Relation Engine - related and featured product subsets."""

from collections.abc import Sequence
from itertools import islice

from storefront.models.product import Product

DEFAULT_RELATED_LIMIT = 4
DEFAULT_FEATURED_LIMIT = 4


def related_to(
    products: Sequence[Product],
    product_id: int,
    target_group: str,
    scent_family: str,
    limit: int = DEFAULT_RELATED_LIMIT,
) -> list[Product]:
    """Products sharing the group OR the family of a subject product.

    Unlike grid filtering this match is inclusive: one shared axis is
    enough. The subject itself is excluded and the first `limit`
    matches in catalog order are returned.

    Args:
        products: Full catalog in display order
        product_id: Subject product id (excluded from the result)
        target_group: Subject target group
        scent_family: Subject scent family
        limit: Maximum number of related products

    Returns:
        Up to `limit` related products, possibly empty
    """
    if limit <= 0:
        return []

    matches = (
        p
        for p in products
        if p.id != product_id
        and (p.target_group == target_group or p.scent_family == scent_family)
    )
    return list(islice(matches, limit))


def related_to_product(
    products: Sequence[Product],
    subject: Product,
    limit: int = DEFAULT_RELATED_LIMIT,
) -> list[Product]:
    """Shorthand for `related_to` using a product's own attributes."""
    return related_to(products, subject.id, subject.target_group, subject.scent_family, limit)


def featured_products(
    products: Sequence[Product],
    limit: int = DEFAULT_FEATURED_LIMIT,
) -> list[Product]:
    """First `limit` products carrying a badge, in catalog order."""
    if limit <= 0:
        return []
    return list(islice((p for p in products if p.is_featured), limit))
