from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from station_status.models.station import Station


class SearchScope(str, Enum):
    """
    Station fields a search query is compared against.
    """

    ALL = "all"
    STATION = "station"
    NAME = "name"
    COUNTRY = "country"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SearchScope":
        """
        Resolve a scope from user input; unknown values search all fields.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.ALL


def _fold(value: Optional[str]) -> str:
    return (value or "").casefold()


_FIELD_GETTERS: Dict[SearchScope, Tuple[Callable[[Station], Optional[str]], ...]] = {
    SearchScope.ALL: (
        lambda s: s.station_id,
        lambda s: s.name,
        lambda s: s.country,
    ),
    SearchScope.STATION: (lambda s: s.station_id,),
    SearchScope.NAME: (lambda s: s.name,),
    SearchScope.COUNTRY: (lambda s: s.country,),
}


def normalize_query(query: Optional[str]) -> str:
    return _fold((query or "").strip())


def filter_stations(
    stations: Sequence[Station],
    query: Optional[str],
    scope: SearchScope = SearchScope.ALL,
) -> List[Station]:
    """
    Return the stations whose scoped fields contain the query.

    The query is trimmed and case-folded; matching is plain substring
    containment against the case-folded field values (missing fields are
    empty strings). An empty query keeps every station. The original
    relative order is preserved.
    """
    needle = normalize_query(query)
    if not needle:
        return list(stations)

    getters = _FIELD_GETTERS[SearchScope.parse(scope)]
    return [s for s in stations if any(needle in _fold(get(s)) for get in getters)]
