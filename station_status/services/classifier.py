from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from station_status.models.station import Station

ACTIVE = "Active"
INACTIVE = "Inactive"


@dataclass(frozen=True)
class StatusCounts:
    active: int
    inactive: int
    total: int


def is_active(station: Station, year: int) -> bool:
    """
    Return True when `year` falls within the station's operational period.

    Both bounds are inclusive; a missing bound is unbounded on that side.
    A period whose begin is after its end contains no year at all.
    """
    return station.period.contains(year)


def status_label(station: Station, year: Optional[int]) -> str:
    # With no year selected every station reads as inactive.
    if year is None:
        return INACTIVE
    return ACTIVE if is_active(station, year) else INACTIVE


def count_status(stations: Sequence[Station], year: Optional[int]) -> StatusCounts:
    """
    Count active and inactive stations for the selected year.

    Without a selected year no split is made: both counts are zero and
    only the total is reported.
    """
    total = len(stations)
    if year is None or not total:
        return StatusCounts(active=0, inactive=0, total=total)

    active = sum(1 for s in stations if is_active(s, year))
    return StatusCounts(active=active, inactive=total - active, total=total)
