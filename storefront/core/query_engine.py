"""Query Engine - the visible subset of the catalog for a filter state."""

from collections.abc import Sequence

from storefront.core.filter_state import ALL, FilterState
from storefront.models.product import Product


def visible_products(products: Sequence[Product], state: FilterState) -> list[Product]:
    """Filter products by the active selectors.

    Both selectors apply together (AND). Relative catalog order is kept.
    A selector value that no product carries yields an empty result.

    Args:
        products: Full catalog in display order
        state: Current filter state

    Returns:
        New list with the matching products
    """
    filtered = list(products)

    if state.group != ALL:
        filtered = [p for p in filtered if p.target_group == state.group]

    if state.family != ALL:
        filtered = [p for p in filtered if p.scent_family == state.family]

    return filtered
