# src/snowdrive/weather/open_meteo.py
from __future__ import annotations
import logging
import time
from datetime import datetime
from typing import Any, Dict, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import httpx

from snowdrive.core.settings import (
    FORECAST_CACHE_TTL_SEC,
    FORECAST_DAYS,
    OPEN_METEO_HTTP_TIMEOUT_SEC,
)
from snowdrive.core.urls import open_meteo_url
from snowdrive.weather.types import ForecastProvider, HourlySeries

logger = logging.getLogger(__name__)

HOURLY_VARIABLES = ("temperature_2m", "snowfall", "rain", "windspeed_10m")


class ForecastProviderError(RuntimeError):
    """Raised when the weather provider request or parsing fails."""


def parse_hourly_series(payload: Dict[str, Any]) -> HourlySeries:
    """
    Open-Meteo payload -> HourlySeries.
    With timezone=auto the hourly times are local wall-clock strings in
    payload["timezone"]; that zone is attached to every timestamp.
    """
    try:
        tz_name = payload.get("timezone") or "UTC"
        tzinfo = ZoneInfo(tz_name)
        hourly = payload["hourly"]
        times = [datetime.fromisoformat(t) for t in hourly["time"]]
        times = [t if t.tzinfo else t.replace(tzinfo=tzinfo) for t in times]
        values = {name: list(hourly[name]) for name in HOURLY_VARIABLES}
    except (AttributeError, KeyError, TypeError, ValueError, ZoneInfoNotFoundError) as exc:
        raise ForecastProviderError(f"Open-Meteo response could not be parsed: {exc}") from exc

    # length mismatch is not caught here: HourlySeries rejects it outright
    return HourlySeries(
        time=times,
        temperature=values["temperature_2m"],
        snowfall=values["snowfall"],
        rain=values["rain"],
        wind_speed=values["windspeed_10m"],
        timezone=tz_name,
    )


class OpenMeteoForecastProvider(ForecastProvider):
    """
    Hourly 7-day forecast from Open-Meteo, units delivered as °F / inch / mph.
    Raw payloads are cached per coordinate for `cache_ttl` seconds.
    """

    def __init__(
        self,
        *,
        timeout: float = OPEN_METEO_HTTP_TIMEOUT_SEC,
        cache_ttl: float = FORECAST_CACHE_TTL_SEC,
        forecast_days: int = FORECAST_DAYS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout = timeout
        self.cache_ttl = cache_ttl
        self.forecast_days = forecast_days
        self._transport = transport
        self._cache: Dict[Tuple[float, float], Tuple[float, Dict[str, Any]]] = {}

    def _params(self, lat: float, lon: float) -> Dict[str, Any]:
        return {
            "latitude": lat,
            "longitude": lon,
            "hourly": ",".join(HOURLY_VARIABLES),
            "timezone": "auto",
            "forecast_days": self.forecast_days,
            "temperature_unit": "fahrenheit",
            "windspeed_unit": "mph",
            "precipitation_unit": "inch",
        }

    def _cached(self, key: Tuple[float, float]) -> Optional[Dict[str, Any]]:
        hit = self._cache.get(key)
        if hit is None:
            return None
        stored_at, payload = hit
        if time.monotonic() - stored_at >= self.cache_ttl:
            self._cache.pop(key, None)
            return None
        return payload

    async def _get(self, *, lat: float, lon: float) -> Dict[str, Any]:
        key = (round(lat, 4), round(lon, 4))
        cached = self._cached(key)
        if cached is not None:
            logger.debug("Open-Meteo cache hit for %s", key)
            return cached

        url = open_meteo_url()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.get(url, params=self._params(lat, lon))
        except httpx.RequestError as exc:
            raise ForecastProviderError(f"Open-Meteo connection failed: {exc}") from exc

        if r.status_code != 200:
            raise ForecastProviderError(
                f"Open-Meteo API error: {r.status_code} {r.text[:200]}"
            )

        try:
            payload = r.json()
        except ValueError as exc:
            raise ForecastProviderError("Open-Meteo returned invalid JSON") from exc

        self._cache[key] = (time.monotonic(), payload)
        return payload

    async def hourly_series(self, *, lat: float, lon: float) -> HourlySeries:
        payload = await self._get(lat=lat, lon=lon)
        series = parse_hourly_series(payload)
        logger.info("Open-Meteo returned %d hourly samples for (%s, %s)", len(series.time), lat, lon)
        return series
