import httpx
import pytest

from station_status.services.feed_client import FeedClient
from station_status.services.feed_store import FeedNotReadyError, FeedStatus, FeedStore
from station_status.services.search import SearchScope
from station_status.services.station_views import StationViews


@pytest.mark.asyncio
async def test_store_status_transitions(client_factory, feed_payload):
    store = FeedStore(client_factory(feed_payload))

    assert store.status is FeedStatus.LOADING
    assert store.version == 0

    assert await store.load() is FeedStatus.READY
    assert store.version == 1
    assert store.detail is None
    assert len(store.require_feed().stations) == 5


@pytest.mark.asyncio
async def test_store_without_client_reports_missing_url():
    store = FeedStore(None)

    assert await store.load() is FeedStatus.MISSING_URL
    with pytest.raises(FeedNotReadyError) as exc:
        store.require_feed()
    assert exc.value.status is FeedStatus.MISSING_URL
    assert exc.value.detail == "Missing STATIONS_URL"


@pytest.mark.asyncio
async def test_store_failed_load_drops_previous_feed(feed_payload):
    responses = [httpx.Response(200, json=feed_payload), httpx.Response(502)]

    def handler(request: httpx.Request) -> httpx.Response:
        return responses.pop(0)

    store = FeedStore(FeedClient("http://feed.test/s.json", transport=httpx.MockTransport(handler)))
    await store.load()

    assert await store.load() is FeedStatus.ERROR
    assert store.feed is None
    assert store.error == "HTTP 502"
    assert store.detail == "Failed to load stations feed: HTTP 502"
    with pytest.raises(FeedNotReadyError):
        store.require_feed()


def test_views_require_a_loaded_feed():
    views = StationViews(FeedStore(None))

    with pytest.raises(FeedNotReadyError):
        views.table()
    with pytest.raises(FeedNotReadyError):
        views.activity()


def test_table_counts_cover_all_matches(feed):
    store = FeedStore(None)
    store.replace(feed)
    views = StationViews(store, display_limit=2)

    table = views.table(query="", scope=SearchScope.ALL, year=2000)

    assert table.year == 2000
    assert [r.station.station_id for r in table.rows] == ["AAA", "X01"]
    assert [r.status for r in table.rows] == ["Active", "Active"]
    assert table.shown == 2
    assert table.total == 5
    assert (table.counts.active, table.counts.inactive, table.counts.total) == (3, 2, 5)


def test_table_defaults_to_feed_year(feed):
    store = FeedStore(None)
    store.replace(feed)
    views = StationViews(store)

    assert views.table().year == 2000


def test_views_are_memoized_per_version(feed):
    store = FeedStore(None)
    store.replace(feed)
    views = StationViews(store)

    first = views.table(query="Gha", scope=SearchScope.ALL, year=1990)
    second = views.table(query=" gha ", scope="all", year=1990)

    assert second is first
    assert views.activity() is views.activity()

    store.replace(feed.model_copy(update={"stations": feed.stations[:1]}))

    assert views.table(query="gha", scope=SearchScope.ALL, year=1990) is not first
    assert views.activity().total == 1
    assert views.years().years == (1990, 2005)


def test_activity_view(feed):
    store = FeedStore(None)
    store.replace(feed)
    views = StationViews(store, series_start_year=1998)

    activity = views.activity()

    assert (activity.start_year, activity.end_year, activity.total) == (1998, 2000, 5)
    assert [p.year for p in activity.points] == [1998, 1999, 2000]


def test_years_view_carries_default_year(feed):
    store = FeedStore(None)
    store.replace(feed)

    axis = StationViews(store).years()

    assert axis.years == (1950, 1960, 1990, 2001, 2005, 2010)
    assert axis.default_year == 2000


def test_table_comes_from_one_snapshot(feed):
    store = FeedStore(None)
    store.replace(feed)
    views = StationViews(store)

    table = views.table(year=2000)
    store.fail("HTTP 502")

    assert table.generated_at == "2025-06-01T00:00:00Z"
    assert table.total == 5


def test_activity_series_is_capped(feed):
    store = FeedStore(None)
    store.replace(feed.model_copy(update={"default_year": 10**7}))
    views = StationViews(store, series_start_year=1900, series_max_years=150)

    activity = views.activity()

    assert activity.end_year == 2049
    assert len(activity.points) == 150


def test_series_end_year_within_limit_is_kept():
    views = StationViews(FeedStore(None), series_start_year=1900, series_max_years=150)

    assert views.series_end_year(2025) == 2025
    assert views.series_end_year(2049) == 2049
    assert views.series_end_year(2050) == 2049
