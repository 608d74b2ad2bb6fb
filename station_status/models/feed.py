from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from station_status.models.station import Station, coerce_year


class Feed(BaseModel):
    """
    Snapshot of the stations status document.

    The feed is loaded once and replaced wholesale on reload. Missing or
    unrecognized fields degrade to "unknown" instead of failing validation.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    generated_at: Optional[str] = Field(default=None, description="Timestamp the feed was generated at")
    default_year: Optional[int] = Field(default=None, description="Year selected when the dashboard opens")
    stations: List[Station] = Field(default_factory=list)

    @field_validator("generated_at", mode="before")
    @classmethod
    def _normalize_generated_at(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return v if isinstance(v, str) else str(v)

    @field_validator("default_year", mode="before")
    @classmethod
    def _normalize_default_year(cls, v: Any) -> Optional[int]:
        return coerce_year(v)

    @field_validator("stations", mode="before")
    @classmethod
    def _normalize_stations(cls, v: Any) -> List[Any]:
        if not isinstance(v, (list, tuple)):
            return []
        # Entries that are not objects carry no usable metadata.
        return [item for item in v if isinstance(item, (dict, Station))]
