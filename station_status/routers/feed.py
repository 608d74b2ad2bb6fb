from fastapi import APIRouter, Depends, HTTPException

from station_status.core.dependencies import get_feed_store
from station_status.routers.health import feed_health
from station_status.schemas.feed import FeedHealthResponse
from station_status.services.feed_store import FeedStatus, FeedStore

router = APIRouter(prefix="/feed", tags=["Feed"])


@router.post(
    "/reload",
    response_model=FeedHealthResponse,
    summary="Reload the stations feed",
    description=(
        "Fetches the stations feed again from `STATIONS_URL` and replaces the in-memory snapshot.\n\n"
        "- On success, every derived view is recomputed on next access.\n"
        "- On failure, the error message is kept and returned with HTTP 503."
    ),
)
async def reload_feed(store: FeedStore = Depends(get_feed_store)) -> FeedHealthResponse:
    """
    Feed reload endpoint.
    """
    status = await store.load()
    if status is not FeedStatus.READY:
        raise HTTPException(status_code=503, detail=store.detail)
    return feed_health(store)
