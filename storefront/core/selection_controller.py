"""Selection Controller - page initialisation and filter events.

The hosting page names its view mode explicitly and forwards user
events here. Each event updates the filter state and re-renders the
grid before returning.
"""

from collections.abc import Callable, Iterable
from enum import Enum

from storefront.config import Settings, get_settings
from storefront.core.catalog_store import CatalogStore
from storefront.core.filter_state import ALL, FilterState
from storefront.core.formatting import (
    ALL_LABEL,
    FAMILY_LABELS,
    GROUP_LABELS,
    family_label,
    group_label,
)
from storefront.core.query_engine import visible_products
from storefront.core.relation_engine import featured_products, related_to
from storefront.core.view_renderer import detail_view, grid_view, not_found_view
from storefront.infra.logging import get_logger
from storefront.schemas.views import FilterOption, FilterOptions, GridView, PageView

logger = get_logger(__name__)

RenderSink = Callable[[GridView], None]


class ViewMode(str, Enum):
    """Which view the hosting page shows."""

    GRID = "grid"
    DETAIL = "detail"
    FEATURED = "featured"


def _axis_values(present: Iterable[str], known: dict[str, str]) -> list[str]:
    """Tags present in the catalog: known ones in table order, then the rest."""
    seen = list(dict.fromkeys(present))
    ordered = [tag for tag in known if tag in seen]
    ordered.extend(tag for tag in seen if tag not in known)
    return ordered


class SelectionController:
    """Owns the filter state of one view and drives re-rendering."""

    def __init__(
        self,
        store: CatalogStore,
        mode: ViewMode | str,
        settings: Settings | None = None,
        render_sink: RenderSink | None = None,
    ) -> None:
        self.store = store
        self.mode = ViewMode(mode)
        self.settings = settings or get_settings()
        self._render_sink = render_sink
        self._state = FilterState()

    @property
    def state(self) -> FilterState:
        """Current filter state."""
        return self._state

    def load(self, navigation_id: int | str | None = None) -> PageView:
        """Build the initial view for the page.

        Args:
            navigation_id: Product id from the navigation context
                (detail mode only; may be missing or malformed)

        Returns:
            PageView for the configured mode
        """
        if self.mode is ViewMode.DETAIL:
            return self._load_detail(navigation_id)

        if self.mode is ViewMode.FEATURED:
            featured = featured_products(self.store.all(), self.settings.featured_limit)
            logger.debug("Featured view rendered", count=len(featured))
            return PageView(mode=self.mode.value, grid=grid_view(featured, self.settings))

        return PageView(
            mode=self.mode.value,
            grid=self.render_grid(),
            filters=self.filter_options(),
        )

    def _load_detail(self, navigation_id: int | str | None) -> PageView:
        product = self.store.by_id(navigation_id)
        if product is None:
            logger.info("Detail view not found", navigation_id=navigation_id)
            return PageView(mode=self.mode.value, not_found=not_found_view())

        related = related_to(
            self.store.all(),
            product.id,
            product.target_group,
            product.scent_family,
            self.settings.related_limit,
        )
        logger.debug("Detail view rendered", product_id=product.id, related=len(related))
        return PageView(
            mode=self.mode.value,
            detail=detail_view(product, self.settings),
            related=grid_view(related, self.settings),
        )

    # =========================================================================
    # Filter events
    # =========================================================================

    def change_group(self, value: str) -> GridView:
        """Group selector changed."""
        self._require_grid("change_group")
        self._state = self._state.with_group(value)
        logger.debug("Group filter changed", group=value, family=self._state.family)
        return self._rerender()

    def change_family(self, value: str) -> GridView:
        """Family selector changed."""
        self._require_grid("change_family")
        self._state = self._state.with_family(value)
        logger.debug("Family filter changed", group=self._state.group, family=value)
        return self._rerender()

    def reset(self) -> GridView:
        """Both selectors back to `all`."""
        self._require_grid("reset")
        self._state = self._state.reset()
        logger.debug("Filters reset")
        return self._rerender()

    def render_grid(self) -> GridView:
        """Grid for the current filter state."""
        return grid_view(visible_products(self.store.all(), self._state), self.settings)

    def filter_options(self) -> FilterOptions:
        """Selectable values of both axes with the current selection marked."""
        products = self.store.all()
        groups = _axis_values((p.target_group for p in products), GROUP_LABELS)
        families = _axis_values((p.scent_family for p in products), FAMILY_LABELS)

        def options(values: list[str], current: str, label: Callable[[str], str]) -> list[FilterOption]:
            result = [FilterOption(value=ALL, label=ALL_LABEL, selected=current == ALL)]
            result.extend(
                FilterOption(value=v, label=label(v), selected=current == v) for v in values
            )
            return result

        return FilterOptions(
            groups=options(groups, self._state.group, group_label),
            families=options(families, self._state.family, family_label),
        )

    def _rerender(self) -> GridView:
        grid = self.render_grid()
        if self._render_sink is not None:
            self._render_sink(grid)
        return grid

    def _require_grid(self, event: str) -> None:
        if self.mode is not ViewMode.GRID:
            raise ValueError(f"{event} is only valid in grid mode, not {self.mode.value}")
