from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from station_status.models.feed import Feed
from station_status.services.feed_client import FeedClient, FeedUnavailableError

logger = logging.getLogger(__name__)


class FeedStatus(str, Enum):
    MISSING_URL = "missing_url"
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


class FeedNotReadyError(RuntimeError):
    """
    Raised when a derived view is requested while no feed is available.
    """

    def __init__(self, status: FeedStatus, detail: str):
        super().__init__(detail)
        self.status = status
        self.detail = detail


class FeedSnapshot:
    """
    A loaded feed paired with the store version it was loaded as.

    Snapshots hash and compare by version only, so they can key memoized
    views without hashing the station list.
    """

    __slots__ = ("version", "feed")

    def __init__(self, version: int, feed: Feed):
        self.version = version
        self.feed = feed

    def __hash__(self) -> int:
        return hash(self.version)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FeedSnapshot) and other.version == self.version


class FeedStore:
    """
    In-memory holder of the current stations feed.

    The store owns exactly one snapshot at a time, swapped in a single
    assignment. A successful load replaces it wholesale and bumps
    `version`. A failed load keeps the error message and drops the
    previous snapshot so views are never served from stale data while an
    error is displayed. Readers take the snapshot once per request.
    """

    def __init__(self, client: Optional[FeedClient]):
        self.client = client
        self.error: Optional[str] = None
        self.version = 0
        self._current: Optional[FeedSnapshot] = None

    @property
    def feed(self) -> Optional[Feed]:
        current = self._current
        return current.feed if current is not None else None

    @property
    def status(self) -> FeedStatus:
        if self._current is not None:
            return FeedStatus.READY
        if self.client is None:
            return FeedStatus.MISSING_URL
        if self.error is not None:
            return FeedStatus.ERROR
        return FeedStatus.LOADING

    @property
    def detail(self) -> Optional[str]:
        status = self.status
        if status is FeedStatus.MISSING_URL:
            return "Missing STATIONS_URL"
        if status is FeedStatus.ERROR:
            return f"Failed to load stations feed: {self.error}"
        if status is FeedStatus.LOADING:
            return "Stations feed not loaded yet"
        return None

    def replace(self, feed: Feed) -> None:
        self.version += 1
        self.error = None
        self._current = FeedSnapshot(self.version, feed)

    def fail(self, message: str) -> None:
        self.error = message
        self._current = None

    async def load(self) -> FeedStatus:
        """
        Fetch the feed and swap it in.

        Fetch failures are captured as a message rather than raised.

        Returns:
            The store status after the attempt.
        """
        if self.client is None:
            logger.warning("STATIONS_URL is not configured; stations feed not loaded")
            return self.status

        try:
            feed = await self.client.fetch()
        except FeedUnavailableError as e:
            logger.warning("Stations feed load failed: %s", e)
            self.fail(str(e))
            return self.status

        self.replace(feed)
        return self.status

    def require_snapshot(self) -> FeedSnapshot:
        current = self._current
        if current is None:
            raise FeedNotReadyError(self.status, self.detail or "Stations feed unavailable")
        return current

    def require_feed(self) -> Feed:
        return self.require_snapshot().feed
