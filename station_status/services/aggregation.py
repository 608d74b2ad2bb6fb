from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import List, Optional, Sequence

from station_status.models.station import Station
from station_status.services.classifier import is_active

logger = logging.getLogger(__name__)

SERIES_START_YEAR = 1900


@dataclass(frozen=True)
class SeriesPoint:
    year: int
    active: int
    inactive: int
    total: int


def build_series(stations: Sequence[Station], start_year: int, end_year: int) -> List[SeriesPoint]:
    """
    Count active and inactive stations for every year in a range.

    Args:
        stations: Station collection; its size is the `total` of every point.
        start_year: First year of the series (inclusive).
        end_year: Last year of the series (inclusive).

    Returns:
        One point per year in ascending order. An empty collection still
        yields one zero-total point per year; `start_year > end_year`
        yields an empty list.
    """
    total = len(stations)
    series: List[SeriesPoint] = []
    for year in range(start_year, end_year + 1):
        active = sum(1 for s in stations if is_active(s, year))
        series.append(SeriesPoint(year=year, active=active, inactive=total - active, total=total))
    return series


def year_axis(stations: Sequence[Station]) -> List[int]:
    """
    Distinct begin/end years found in the collection, sorted ascending.
    """
    years = set()
    for s in stations:
        if s.begin_year is not None:
            years.add(s.begin_year)
        if s.end_year is not None:
            years.add(s.end_year)
    return sorted(years)


def resolve_series_end_year(default_year: Optional[int], today: Optional[date] = None) -> int:
    """
    Last year of the activity series.

    Uses the feed's `default_year`; when the feed does not provide one the
    current UTC year is used, which makes the series depend on the clock.
    """
    if default_year is not None:
        return default_year

    today = today or datetime.now(timezone.utc).date()
    logger.warning("Feed has no default_year; ending activity series at current year %s", today.year)
    return today.year
