from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from station_status.services.search import SearchScope


class StationOut(BaseModel):
    """
    Public representation of a station row in the dashboard table.
    """

    model_config = ConfigDict(from_attributes=True)

    station_id: str
    name: Optional[str] = None
    country: Optional[str] = None
    begin_year: Optional[int] = None
    end_year: Optional[int] = None
    status: str = Field(..., description="'Active' or 'Inactive' for the selected year")


class StatusCountsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    active: int
    inactive: int
    total: int


class StationTableResponse(BaseModel):
    """
    Response payload for the filtered station table and its KPI counts.
    """

    generated_at: Optional[str] = None
    year: Optional[int] = Field(None, description="Year the status column and counts refer to")
    search_by: SearchScope
    query: str
    counts: StatusCountsOut
    items: List[StationOut] = Field(default_factory=list)
    total: int = Field(..., description="Number of stations matching the search")
    shown: int = Field(..., description="Number of rows returned (capped at `limit`)")
    limit: int


class YearAxisResponse(BaseModel):
    """
    Selectable years derived from station begin/end years.
    """

    years: List[int] = Field(default_factory=list)
    default_year: Optional[int] = None
