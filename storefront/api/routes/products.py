"""Product endpoints: filtered grid, featured products and detail views."""

from typing import Annotated

from fastapi import APIRouter, Query, Response, status

from storefront.api.deps import AppSettings, Store
from storefront.core.filter_state import ALL
from storefront.core.relation_engine import featured_products, related_to_product
from storefront.core.selection_controller import SelectionController, ViewMode
from storefront.core.view_renderer import grid_view, not_found_view
from storefront.infra.logging import get_logger
from storefront.schemas.views import FilterOptions, GridView, PageView

router = APIRouter()
logger = get_logger(__name__)

GroupQuery = Annotated[str, Query(description="Target group tag, or 'all'")]
FamilyQuery = Annotated[str, Query(description="Scent family tag, or 'all'")]


@router.get("", response_model=GridView, summary="Filtered product grid")
async def list_products(
    store: Store,
    settings: AppSettings,
    group: GroupQuery = ALL,
    family: FamilyQuery = ALL,
) -> GridView:
    """Grid of products matching both selectors.

    An empty match is returned as the grid's empty state, not an error.
    """
    controller = SelectionController(store, ViewMode.GRID, settings)
    grid = controller.render_grid()
    if group != ALL:
        grid = controller.change_group(group)
    if family != ALL:
        grid = controller.change_family(family)

    logger.info("Product grid served", group=group, family=family, count=grid.count)
    return grid


@router.get("/featured", response_model=GridView, summary="Featured products")
async def list_featured(store: Store, settings: AppSettings) -> GridView:
    """First products carrying a badge."""
    return grid_view(featured_products(store.all(), settings.featured_limit), settings)


@router.get("/filters", response_model=FilterOptions, summary="Filter options")
async def list_filters(
    store: Store,
    settings: AppSettings,
    group: GroupQuery = ALL,
    family: FamilyQuery = ALL,
) -> FilterOptions:
    """Selectable values of both filter axes, current selection marked."""
    controller = SelectionController(store, ViewMode.GRID, settings)
    if group != ALL:
        controller.change_group(group)
    if family != ALL:
        controller.change_family(family)
    return controller.filter_options()


@router.get("/{product_id}", response_model=PageView, summary="Product detail")
async def get_product(
    product_id: str,
    store: Store,
    settings: AppSettings,
    response: Response,
) -> PageView:
    """Detail view with related products.

    The id is taken as free text; malformed or unknown ids answer 404
    with the not-found state in the body.
    """
    page = SelectionController(store, ViewMode.DETAIL, settings).load(product_id)
    if page.not_found is not None:
        response.status_code = status.HTTP_404_NOT_FOUND
    return page


@router.get(
    "/{product_id}/related",
    response_model=GridView | PageView,
    responses={404: {"model": PageView}},
    summary="Related products",
)
async def get_related(
    product_id: str,
    store: Store,
    settings: AppSettings,
    response: Response,
    limit: Annotated[int | None, Query(ge=0, le=50, description="Maximum related products")] = None,
) -> GridView | PageView:
    """Products sharing the target group or scent family.

    Unknown ids answer 404 with the same not-found page as the detail view.
    """
    product = store.by_id(product_id)
    if product is None:
        response.status_code = status.HTTP_404_NOT_FOUND
        return PageView(mode=ViewMode.DETAIL.value, not_found=not_found_view())

    related = related_to_product(
        store.all(),
        product,
        settings.related_limit if limit is None else limit,
    )
    return grid_view(related, settings)
