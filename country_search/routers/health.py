import time
from fastapi import APIRouter, Depends

from country_search.routers.countries import get_controller
from country_search.services.country_list_controller import CountryListController

router = APIRouter()

_start_time = time.time()


@router.get("/health")
async def health_check(ctrl: CountryListController = Depends(get_controller)):
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": "0.1.0",
        "countries_loaded": len(ctrl.all_countries),
        "countries_visible": ctrl.visible_count(),
    }
