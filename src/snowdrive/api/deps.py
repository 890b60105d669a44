# src/snowdrive/api/deps.py
from functools import lru_cache

from snowdrive.routes_api.compute_routes_service import GoogleRoutesClient
from snowdrive.routes_api.types import RouteProvider
from snowdrive.weather.open_meteo import OpenMeteoForecastProvider
from snowdrive.weather.types import ForecastProvider


@lru_cache
def get_forecast_provider() -> ForecastProvider:
    """Process-wide provider so its hourly payload cache is shared between requests."""
    return OpenMeteoForecastProvider()


def get_route_provider() -> RouteProvider:
    return GoogleRoutesClient()
