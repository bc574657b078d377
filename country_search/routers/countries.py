import logging

from fastapi import APIRouter, Depends, HTTPException

from country_search.models.country import CountryListResponse, CountryRow, SearchRequest
from country_search.services.country_list_controller import CountryListController, controller
from country_search.services.country_loader import CountryLoader

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/countries", tags=["countries"])


def get_controller() -> CountryListController:
    return controller


def get_loader() -> CountryLoader:
    return CountryLoader()


def _visible_rows(ctrl: CountryListController) -> CountryListResponse:
    count = ctrl.visible_count()
    return CountryListResponse(
        count=count,
        query=ctrl.query,
        search_active=ctrl.search_active,
        items=[CountryRow.from_country(i, ctrl.visible_item(i)) for i in range(count)],
    )


# Handlers stay async so controller mutations run on the event loop.
@router.get("", response_model=CountryListResponse)
async def list_countries(ctrl: CountryListController = Depends(get_controller)):
    return _visible_rows(ctrl)


@router.get("/{index}", response_model=CountryRow)
async def get_country(index: int, ctrl: CountryListController = Depends(get_controller)):
    try:
        country = ctrl.visible_item(index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return CountryRow.from_country(index, country)


@router.put("/search", response_model=CountryListResponse)
async def update_search(req: SearchRequest, ctrl: CountryListController = Depends(get_controller)):
    if req.active is None:
        ctrl.update_search(req.query)
    else:
        ctrl.set_search_active(req.active)
        ctrl.set_query(req.query)
    return _visible_rows(ctrl)


@router.post("/refresh", response_model=CountryListResponse)
async def refresh_countries(
    ctrl: CountryListController = Depends(get_controller),
    loader: CountryLoader = Depends(get_loader),
):
    result = await ctrl.refresh(loader)
    if not result.ok:
        raise HTTPException(
            status_code=502,
            detail=f"Country {result.error.kind} error: {result.error}",
        )
    return _visible_rows(ctrl)
