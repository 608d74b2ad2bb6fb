from typing import Optional

from fastapi import APIRouter, Depends, Query

from station_status.core.dependencies import feed_unavailable, get_station_views
from station_status.schemas.stations import (
    StationOut,
    StationTableResponse,
    StatusCountsOut,
    YearAxisResponse,
)
from station_status.services.feed_store import FeedNotReadyError
from station_status.services.search import SearchScope
from station_status.services.station_views import StationViews

router = APIRouter(prefix="/stations", tags=["Stations"])


@router.get(
    "",
    response_model=StationTableResponse,
    summary="Search stations",
    description=(
        "Returns stations from the loaded feed, filtered by a free-text search, together with "
        "active/inactive counts for the selected year.\n\n"
        "- `search_by` restricts which field is searched (`all`, `station`, `name`, `country`).\n"
        "- Matching is a case-insensitive substring match; an empty `q` returns every station.\n"
        "- If `year` is omitted, the feed's `default_year` is used.\n"
        "- Rows are capped at the configured display limit; counts cover every match."
    ),
)
def list_stations(
    q: str = Query(default="", description="Search text"),
    search_by: SearchScope = Query(default=SearchScope.ALL, description="Field(s) to search"),
    year: Optional[int] = Query(default=None, description="Year used to classify stations"),
    views: StationViews = Depends(get_station_views),
) -> StationTableResponse:
    """
    Station table view.

    This endpoint backs:
    - the KPI cards (active / inactive / total after filter)
    - the station table with its status column
    """
    try:
        table = views.table(query=q, scope=search_by, year=year)
    except FeedNotReadyError as e:
        raise feed_unavailable(e)

    return StationTableResponse(
        generated_at=table.generated_at,
        year=table.year,
        search_by=table.scope,
        query=table.query,
        counts=StatusCountsOut.model_validate(table.counts),
        items=[
            StationOut(
                station_id=row.station.station_id,
                name=row.station.name,
                country=row.station.country,
                begin_year=row.station.begin_year,
                end_year=row.station.end_year,
                status=row.status,
            )
            for row in table.rows
        ],
        total=table.total,
        shown=table.shown,
        limit=table.limit,
    )


@router.get(
    "/years",
    response_model=YearAxisResponse,
    summary="Selectable years",
    description="Distinct begin/end years found in the stations feed, sorted ascending.",
)
def list_years(views: StationViews = Depends(get_station_views)) -> YearAxisResponse:
    try:
        axis = views.years()
    except FeedNotReadyError as e:
        raise feed_unavailable(e)

    return YearAxisResponse(years=list(axis.years), default_year=axis.default_year)
