from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SeriesPointOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    active: int
    inactive: int
    total: int


class ActivityResponse(BaseModel):
    """
    Response payload for the yearly active/inactive station series.
    """

    start_year: int
    end_year: int
    total: int = Field(..., description="Number of stations in the feed")
    series: List[SeriesPointOut] = Field(default_factory=list)
