from fastapi import HTTPException, Request

from station_status.services.feed_store import FeedNotReadyError, FeedStore
from station_status.services.station_views import StationViews


# ---------------------------------------------------------------------
# Dependency injection
# ---------------------------------------------------------------------

def get_feed_store(request: Request) -> FeedStore:
    """
    FastAPI dependency that provides the application's `FeedStore`.

    The store is created by the app factory and kept on `app.state`.
    """
    return request.app.state.feed_store


def get_station_views(request: Request) -> StationViews:
    """
    FastAPI dependency that provides the memoized derived views.

    Usage example:
    ```python
    @router.get("/stations")
    def list_stations(views: StationViews = Depends(get_station_views)):
        ...
    ```
    """
    return request.app.state.station_views


def feed_unavailable(e: FeedNotReadyError) -> HTTPException:
    # 503: the dataset is expected but not (yet) available.
    return HTTPException(status_code=503, detail=e.detail)
