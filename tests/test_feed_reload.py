import httpx
import pytest
from httpx import AsyncClient, ASGITransport

from station_status.core.config import Settings
from station_status.main import create_app
from station_status.services.feed_client import FeedClient


@pytest.mark.asyncio
async def test_reload_replaces_feed_and_invalidates_views(feed_payload):
    """
    POST /feed/reload fetches the document again and derived views follow it.
    """
    payloads = [
        feed_payload,
        {"generated_at": "2025-07-01T00:00:00Z", "default_year": 2001, "stations": [{"station_id": "NEW"}]},
    ]

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payloads.pop(0))

    settings = Settings(_env_file=None, stations_url="http://feed.test/s.json")
    client = FeedClient("http://feed.test/s.json", transport=httpx.MockTransport(handler))
    app = create_app(settings=settings, client=client)
    await app.state.feed_store.load()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        before = await ac.get("/stations")
        reload = await ac.post("/feed/reload")
        after = await ac.get("/stations")

    assert before.json()["total"] == 5
    assert reload.status_code == 200
    assert reload.json()["generated_at"] == "2025-07-01T00:00:00Z"
    assert reload.json()["stations"] == 1
    assert after.json()["year"] == 2001
    assert [x["station_id"] for x in after.json()["items"]] == ["NEW"]


@pytest.mark.asyncio
async def test_reload_failure_returns_503(feed_payload):
    responses = [httpx.Response(200, json=feed_payload), httpx.Response(404)]

    def handler(request: httpx.Request) -> httpx.Response:
        return responses.pop(0)

    settings = Settings(_env_file=None, stations_url="http://feed.test/s.json")
    client = FeedClient("http://feed.test/s.json", transport=httpx.MockTransport(handler))
    app = create_app(settings=settings, client=client)
    await app.state.feed_store.load()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        reload = await ac.post("/feed/reload")
        health = await ac.get("/health/feed")

    assert reload.status_code == 503
    assert reload.json()["detail"] == "Failed to load stations feed: HTTP 404"
    assert health.json()["feed"] == "error"
