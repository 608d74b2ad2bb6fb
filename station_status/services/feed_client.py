from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from station_status.models.feed import Feed

logger = logging.getLogger(__name__)


class FeedUnavailableError(RuntimeError):
    """
    Raised when the stations feed cannot be fetched or decoded.

    The message is meant to be shown to the user as-is (e.g. `HTTP 404`).
    """


class FeedClient:
    """
    Client for the stations status JSON document.

    The feed URL is passed in explicitly at construction time; the client
    never reads configuration on its own.
    """

    def __init__(
        self,
        url: str,
        timeout_s: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not url:
            raise ValueError("Stations feed URL must not be empty")
        self.url = url
        self.timeout = timeout_s
        self._transport = transport

    async def _get_json(self) -> Any:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                r = await client.get(self.url, headers={"accept": "application/json"})
            except httpx.HTTPError as e:
                raise FeedUnavailableError(str(e) or e.__class__.__name__) from e

            if not r.is_success:
                raise FeedUnavailableError(f"HTTP {r.status_code}")

            try:
                return r.json()
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise FeedUnavailableError(f"Invalid JSON: {e}") from e

    async def fetch(self) -> Feed:
        """
        Download and normalize the stations feed.

        Returns:
            The parsed `Feed` snapshot.

        Raises:
            FeedUnavailableError: on transport errors, non-success status
                codes, or a body that is not a JSON object.
        """
        logger.info("Fetching stations feed from %s", self.url)
        data = await self._get_json()
        if not isinstance(data, dict):
            raise FeedUnavailableError("Stations feed is not a JSON object")

        try:
            feed = Feed.model_validate(data)
        except ValidationError as e:
            raise FeedUnavailableError(f"Invalid stations feed: {e.error_count()} errors") from e

        logger.info(
            "Loaded %d stations (generated_at=%s, default_year=%s)",
            len(feed.stations),
            feed.generated_at,
            feed.default_year,
        )
        return feed
