import httpx
import pytest
import pytest_asyncio

from station_status.core.config import Settings
from station_status.main import create_app
from station_status.models.feed import Feed
from station_status.services.feed_client import FeedClient

TEST_FEED_URL = "http://feed.test/stations_status.json"


@pytest.fixture
def feed_payload():
    """
    A small stations feed covering bounded, open-ended and malformed entries.
    """
    return {
        "generated_at": "2025-06-01T00:00:00Z",
        "default_year": 2000,
        "stations": [
            {"station_id": "AAA", "name": "Alpha", "country": "Kenya", "begin_year": 1990, "end_year": 2005},
            {"station_id": "X01", "name": "Accra", "country": "Ghana", "begin_year": 1950},
            {"station_id": "B12", "name": "Bamako", "country": "Mali", "end_year": 1960},
            {"station_id": "C07", "name": None, "country": "Ghana"},
            {"station_id": "D99", "name": "Dakar", "country": "Senegal", "begin_year": 2010, "end_year": 2001},
        ],
    }


@pytest.fixture
def feed(feed_payload):
    return Feed.model_validate(feed_payload)


@pytest.fixture
def stations(feed):
    return feed.stations


def make_client(payload=None, status_code=200, calls=None):
    """
    Build a FeedClient backed by `httpx.MockTransport`.

    `calls`, when given, is a list that receives every request made.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        return httpx.Response(status_code, json=payload)

    return FeedClient(TEST_FEED_URL, transport=httpx.MockTransport(handler))


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        stations_url=TEST_FEED_URL,
        display_limit=3,
        series_start_year=1900,
    )


@pytest_asyncio.fixture
async def test_app(test_settings, feed_payload):
    """
    Return a FastAPI app whose feed client is served by a mock transport.

    `ASGITransport` does not run the lifespan, so the feed is loaded here.
    """
    app = create_app(settings=test_settings, client=make_client(feed_payload))
    await app.state.feed_store.load()
    yield app


@pytest_asyncio.fixture
async def api(test_app):
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def client_factory():
    return make_client
