import math
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def coerce_year(value: Any) -> Optional[int]:
    """
    Normalize a raw year value from the feed.

    Only real numbers count as a year: integers are kept, integral floats
    are converted to `int`. Booleans, strings, non-integral or non-finite
    floats and anything else are treated as absent.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return None


def _coerce_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    return text or None


@dataclass(frozen=True)
class ActivePeriod:
    """
    Inclusive operational period of a station.

    `None` on either side means the period is unbounded in that direction.
    """

    begin: Optional[int] = None
    end: Optional[int] = None

    def contains(self, year: int) -> bool:
        if self.begin is not None and year < self.begin:
            return False
        if self.end is not None and year > self.end:
            return False
        return True


class Station(BaseModel):
    """
    Station metadata entry as published in the stations feed.

    Instances are frozen: the feed snapshot is never mutated in place.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    station_id: str = Field(default="", description="Stable station identifier within the feed")
    name: Optional[str] = Field(default=None, description="Human-readable station name")
    country: Optional[str] = Field(default=None, description="Country the station reports from")
    begin_year: Optional[int] = Field(default=None, description="First operational year (inclusive)")
    end_year: Optional[int] = Field(default=None, description="Last operational year (inclusive)")

    @field_validator("station_id", mode="before")
    @classmethod
    def _normalize_station_id(cls, v: Any) -> str:
        return _coerce_text(v) or ""

    @field_validator("name", "country", mode="before")
    @classmethod
    def _normalize_text(cls, v: Any) -> Optional[str]:
        return _coerce_text(v)

    @field_validator("begin_year", "end_year", mode="before")
    @classmethod
    def _normalize_year(cls, v: Any) -> Optional[int]:
        return coerce_year(v)

    @property
    def period(self) -> ActivePeriod:
        return ActivePeriod(begin=self.begin_year, end=self.end_year)
