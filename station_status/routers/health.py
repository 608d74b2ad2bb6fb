from fastapi import APIRouter, Depends, Request

from station_status.core.dependencies import get_feed_store
from station_status.schemas.feed import FeedHealthResponse
from station_status.services.feed_store import FeedStatus, FeedStore

router = APIRouter(tags=["Health"])


def feed_health(store: FeedStore) -> FeedHealthResponse:
    feed = store.feed
    status = FeedStatus.READY if feed is not None else store.status
    return FeedHealthResponse(
        status="ok" if status is FeedStatus.READY else "unavailable",
        feed=status.value,
        detail=store.detail,
        generated_at=feed.generated_at if feed else None,
        stations=len(feed.stations) if feed else 0,
    )


@router.get(
    "/health",
    summary="Service health check",
    description=(
        "Checks whether the API service is running and returns basic service information. "
        "This endpoint **does not** verify that the stations feed is loaded."
    ),
    response_description="Service status",
)
def health(request: Request):
    """
    Basic health check for the API.

    **Returns:**
    - `status`: Always `ok` if the service is running
    - `service`: Service name (configured via `APP_NAME`)
    - `environment`: Current environment (configured via `ENVIRONMENT`, e.g. local/dev/prod)
    """
    settings = request.app.state.settings
    return {
        "status": "ok",
        "service": settings.app_name,
        "environment": settings.environment,
    }


@router.get(
    "/health/feed",
    response_model=FeedHealthResponse,
    summary="Stations feed health check",
    description=(
        "Reports whether the stations feed was fetched successfully. "
        "If the feed is unavailable, `detail` carries the message shown to dashboard users "
        "(missing `STATIONS_URL`, HTTP failure, ...)."
    ),
    response_description="Stations feed status",
)
def health_feed(store: FeedStore = Depends(get_feed_store)) -> FeedHealthResponse:
    """
    Stations feed availability check.

    Always answers HTTP 200; inspect `status` / `feed` for availability.
    """
    return feed_health(store)
