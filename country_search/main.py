import asyncio
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from country_search.config import settings
from country_search.routers import countries, health
from country_search.services.country_list_controller import controller
from country_search.services.country_loader import CountryLoader

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Country Search", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(countries.router)

_load_task: asyncio.Task | None = None


@app.get("/")
async def root():
    return {
        "name": "Country Search API",
        "version": "0.1.0",
        "endpoints": ["/health", "/countries", "/countries/search", "/countries/refresh"],
    }


def _log_change():
    logger.debug(
        "Visible countries: %d (search_active=%s, query=%r)",
        controller.visible_count(), controller.search_active, controller.query,
    )


@app.on_event("startup")
async def startup():
    global _load_task
    controller.subscribe(_log_change)
    # Single fire-and-forget load; search requests work on an empty list until it lands.
    _load_task = asyncio.create_task(controller.refresh(CountryLoader()))
    logger.info("Country Search API is running")


@app.on_event("shutdown")
async def shutdown():
    from country_search.utils.http_client import close_client
    if _load_task is not None and not _load_task.done():
        _load_task.cancel()
    await close_client()
