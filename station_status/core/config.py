from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration settings.

    This class loads configuration values from environment variables
    and optionally from a `.env` file. It uses Pydantic Settings
    to provide type validation and default values.

    Environment variables take precedence over `.env` values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # ---------------------------------------------------------------------
    # Application settings
    # ---------------------------------------------------------------------

    app_name: str = Field(
        default="station-status-api",
        alias="APP_NAME",
        description="Application name displayed in logs and API documentation",
    )

    environment: str = Field(
        default="local",
        alias="ENVIRONMENT",
        description="Runtime environment (local, dev, prod)",
    )

    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    # ---------------------------------------------------------------------
    # Stations feed
    # ---------------------------------------------------------------------

    stations_url: Optional[str] = Field(
        default=None,
        alias="STATIONS_URL",
        description="URL of the stations status JSON document",
    )

    feed_timeout_s: float = Field(
        default=30.0,
        alias="FEED_TIMEOUT_S",
        gt=0,
        description="HTTP timeout in seconds used when fetching the stations feed",
    )

    # ---------------------------------------------------------------------
    # Derived views
    # ---------------------------------------------------------------------

    display_limit: int = Field(
        default=200,
        alias="DISPLAY_LIMIT",
        ge=1,
        description="Maximum number of station rows returned by the table view",
    )

    series_start_year: int = Field(
        default=1900,
        alias="SERIES_START_YEAR",
        description="First year of the station activity series",
    )

    series_max_years: int = Field(
        default=500,
        alias="SERIES_MAX_YEARS",
        ge=1,
        description="Maximum number of years in the station activity series",
    )

    view_cache_size: int = Field(
        default=256,
        alias="VIEW_CACHE_SIZE",
        ge=1,
        description="Number of memoized results kept per derived view",
    )


# Singleton settings instance
settings = Settings()
