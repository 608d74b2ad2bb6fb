from station_status.models.feed import Feed
from station_status.models.station import ActivePeriod, Station

__all__ = ["ActivePeriod", "Feed", "Station"]
