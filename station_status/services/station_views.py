from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from station_status.models.station import Station
from station_status.services.aggregation import (
    SERIES_START_YEAR,
    SeriesPoint,
    build_series,
    resolve_series_end_year,
    year_axis,
)
from station_status.services.classifier import StatusCounts, count_status, status_label
from station_status.services.feed_store import FeedSnapshot, FeedStore
from station_status.services.search import SearchScope, filter_stations, normalize_query

logger = logging.getLogger(__name__)

SERIES_MAX_YEARS = 500


@dataclass(frozen=True)
class StationRow:
    station: Station
    status: str


@dataclass(frozen=True)
class StationTable:
    generated_at: Optional[str]
    year: Optional[int]
    query: str
    scope: SearchScope
    counts: StatusCounts
    rows: Tuple[StationRow, ...]
    total: int
    limit: int

    @property
    def shown(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class YearAxis:
    years: Tuple[int, ...]
    default_year: Optional[int]


@dataclass(frozen=True)
class ActivitySeries:
    start_year: int
    end_year: int
    total: int
    points: Tuple[SeriesPoint, ...]


class StationViews:
    """
    Derived views over the feed held by a `FeedStore`.

    Each view is a memoized pure function keyed by the feed snapshot and
    its own inputs, so repeated requests with the same query, scope and
    year are served from memory and a feed reload invalidates everything.
    A request reads the store once; everything it returns comes from that
    single snapshot, even if a reload happens meanwhile.
    """

    def __init__(
        self,
        store: FeedStore,
        display_limit: int = 200,
        series_start_year: int = SERIES_START_YEAR,
        cache_size: int = 256,
        series_max_years: int = SERIES_MAX_YEARS,
    ):
        self.store = store
        self.display_limit = display_limit
        self.series_start_year = series_start_year
        self.series_max_years = series_max_years

        self._filtered = lru_cache(maxsize=cache_size)(self._compute_filtered)
        self._table = lru_cache(maxsize=cache_size)(self._compute_table)
        self._years = lru_cache(maxsize=8)(self._compute_years)
        self._activity = lru_cache(maxsize=8)(self._compute_activity)

    # ------------------------------------------------------------------
    # Public views
    # ------------------------------------------------------------------

    def table(
        self,
        query: Optional[str] = None,
        scope: SearchScope = SearchScope.ALL,
        year: Optional[int] = None,
    ) -> StationTable:
        """
        Filtered station rows with per-year status and KPI counts.

        When `year` is omitted the feed's `default_year` is selected. The
        counts cover the whole filtered subset; only the rows are capped at
        `display_limit`.
        """
        snapshot = self.store.require_snapshot()
        selected = year if year is not None else snapshot.feed.default_year
        return self._table(snapshot, normalize_query(query), SearchScope.parse(scope), selected)

    def years(self) -> YearAxis:
        return self._years(self.store.require_snapshot())

    def activity(self) -> ActivitySeries:
        snapshot = self.store.require_snapshot()
        return self._activity(snapshot, self.series_end_year(snapshot.feed.default_year))

    def series_end_year(self, default_year: Optional[int]) -> int:
        """
        Resolve the series end year, capped at `series_max_years` points.
        """
        end_year = resolve_series_end_year(default_year)
        last_allowed = self.series_start_year + self.series_max_years - 1
        if end_year > last_allowed:
            logger.warning(
                "Activity series end year %s exceeds the %s-year limit; ending at %s",
                end_year,
                self.series_max_years,
                last_allowed,
            )
            return last_allowed
        return end_year

    # ------------------------------------------------------------------
    # Memoized computations
    # ------------------------------------------------------------------

    def _compute_filtered(self, snapshot: FeedSnapshot, query: str, scope: SearchScope) -> Tuple[Station, ...]:
        logger.debug("Filtering stations (version=%s, query=%r, scope=%s)", snapshot.version, query, scope.value)
        return tuple(filter_stations(snapshot.feed.stations, query, scope))

    def _compute_table(
        self,
        snapshot: FeedSnapshot,
        query: str,
        scope: SearchScope,
        year: Optional[int],
    ) -> StationTable:
        filtered = self._filtered(snapshot, query, scope)
        rows = tuple(StationRow(station=s, status=status_label(s, year)) for s in filtered[: self.display_limit])
        return StationTable(
            generated_at=snapshot.feed.generated_at,
            year=year,
            query=query,
            scope=scope,
            counts=count_status(filtered, year),
            rows=rows,
            total=len(filtered),
            limit=self.display_limit,
        )

    def _compute_years(self, snapshot: FeedSnapshot) -> YearAxis:
        return YearAxis(
            years=tuple(year_axis(snapshot.feed.stations)),
            default_year=snapshot.feed.default_year,
        )

    def _compute_activity(self, snapshot: FeedSnapshot, end_year: int) -> ActivitySeries:
        stations = snapshot.feed.stations
        logger.debug(
            "Building activity series %s-%s over %d stations (version=%s)",
            self.series_start_year,
            end_year,
            len(stations),
            snapshot.version,
        )
        points = build_series(stations, self.series_start_year, end_year)
        return ActivitySeries(
            start_year=self.series_start_year,
            end_year=end_year,
            total=len(stations),
            points=tuple(points),
        )
