"""Page initialisation endpoint.

A hosting page states its view mode explicitly and receives everything
it needs to render on load.
"""

from typing import Annotated

from fastapi import APIRouter, Query, Response, status

from storefront.api.deps import AppSettings, Store
from storefront.core.filter_state import ALL
from storefront.core.selection_controller import SelectionController, ViewMode
from storefront.infra.logging import get_logger
from storefront.schemas.views import PageView

router = APIRouter()
logger = get_logger(__name__)


@router.get("/{mode}", response_model=PageView, summary="Initial page view")
async def load_page(
    mode: ViewMode,
    store: Store,
    settings: AppSettings,
    response: Response,
    product_id: Annotated[
        str | None, Query(alias="id", description="Product id (detail mode)")
    ] = None,
    group: Annotated[str, Query(description="Initial target group (grid mode)")] = ALL,
    family: Annotated[str, Query(description="Initial scent family (grid mode)")] = ALL,
) -> PageView:
    """Build the page for a view mode."""
    controller = SelectionController(store, mode, settings)

    if mode is ViewMode.GRID:
        if group != ALL:
            controller.change_group(group)
        if family != ALL:
            controller.change_family(family)

    page = controller.load(product_id)
    if page.not_found is not None:
        response.status_code = status.HTTP_404_NOT_FOUND

    logger.info("Page loaded", mode=mode.value, product_id=product_id, not_found=page.not_found is not None)
    return page
