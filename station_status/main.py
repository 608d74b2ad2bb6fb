from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from station_status.core.config import Settings, settings as default_settings
from station_status.core.logging import configure_logging
from station_status.routers.activity import router as activity_router
from station_status.routers.feed import router as feed_router
from station_status.routers.health import router as health_router
from station_status.routers.stations import router as stations_router
from station_status.services.feed_client import FeedClient
from station_status.services.feed_store import FeedStore
from station_status.services.station_views import StationViews


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    This function is executed during the startup and shutdown phases
    of the FastAPI application lifecycle.

    On startup:
    - Fetches the stations feed once and keeps it in memory. A failed
      fetch does not prevent startup; the error is reported by the API.

    On shutdown:
    - Nothing to release; the feed lives in memory only.
    """
    await app.state.feed_store.load()
    yield


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[FeedClient] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    This factory function:
    - Configures logging from `LOG_LEVEL`.
    - Builds the feed client from `STATIONS_URL` (unless one is given) and
      the in-memory feed store and derived views on `app.state`.
    - Registers all API routers.
    - Applies the application lifespan handler.

    Returns:
        Configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)

    if client is None and settings.stations_url:
        client = FeedClient(settings.stations_url, timeout_s=settings.feed_timeout_s)

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        description="Station status API: searchable station metadata and yearly activity",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    store = FeedStore(client)
    app.state.settings = settings
    app.state.feed_store = store
    app.state.station_views = StationViews(
        store,
        display_limit=settings.display_limit,
        series_start_year=settings.series_start_year,
        series_max_years=settings.series_max_years,
        cache_size=settings.view_cache_size,
    )

    # Register API routers
    app.include_router(health_router)
    app.include_router(stations_router)
    app.include_router(activity_router)
    app.include_router(feed_router)

    return app


# Application entry point
app = create_app()
