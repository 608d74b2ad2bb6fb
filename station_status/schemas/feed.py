from typing import Optional

from pydantic import BaseModel, Field


class FeedHealthResponse(BaseModel):
    """
    Availability of the stations feed held in memory.
    """

    status: str = Field(..., description="`ok` when the feed is loaded, `unavailable` otherwise")
    feed: str = Field(..., description="Feed store status (missing_url, loading, error, ready)")
    detail: Optional[str] = Field(None, description="Message to display when the feed is unavailable")
    generated_at: Optional[str] = None
    stations: int = 0
