from fastapi import APIRouter, Depends

from station_status.core.dependencies import feed_unavailable, get_station_views
from station_status.schemas.activity import ActivityResponse, SeriesPointOut
from station_status.services.feed_store import FeedNotReadyError
from station_status.services.station_views import StationViews

router = APIRouter(prefix="/activity", tags=["Activity"])


@router.get(
    "",
    response_model=ActivityResponse,
    summary="Station activity over time",
    description=(
        "Number of active and inactive stations for every year from the series start year "
        "(1900 by default) up to the feed's `default_year`.\n\n"
        "The series always covers the whole feed; search filters do not apply. "
        "If the feed has no `default_year`, the current UTC year is used."
    ),
)
def station_activity(views: StationViews = Depends(get_station_views)) -> ActivityResponse:
    try:
        activity = views.activity()
    except FeedNotReadyError as e:
        raise feed_unavailable(e)

    return ActivityResponse(
        start_year=activity.start_year,
        end_year=activity.end_year,
        total=activity.total,
        series=[SeriesPointOut.model_validate(p) for p in activity.points],
    )
