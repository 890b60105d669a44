# src/snowdrive/api/forecast.py
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from snowdrive.api.deps import get_forecast_provider
from snowdrive.core.settings import FORECAST_DAYS
from snowdrive.models.schemas import ErrorResponse, ForecastResponse, ForecastWindowOut
from snowdrive.resorts.directory import get_resort_by_id
from snowdrive.weather.aggregate import aggregate
from snowdrive.weather.open_meteo import ForecastProviderError
from snowdrive.weather.types import ForecastProvider

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/forecast/{resort_id}",
    response_model=ForecastResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="12-hour snow/weather windows for the next 7 days",
)
async def get_forecast(
    resort_id: str,
    provider: ForecastProvider = Depends(get_forecast_provider),
):
    resort = get_resort_by_id(resort_id)
    if not resort:
        raise HTTPException(status_code=404, detail="Resort not found")

    try:
        series = await provider.hourly_series(lat=resort.lat, lon=resort.lon)
    except ForecastProviderError as exc:
        logger.error("forecast fetch failed for %s: %s", resort.id, exc)
        raise HTTPException(status_code=500, detail="Failed to fetch forecast") from exc

    now = datetime.now(timezone.utc)
    windows = aggregate(series, resort.tz, now, FORECAST_DAYS)

    return ForecastResponse(
        resort_id=resort.id,
        resort_name=resort.name,
        forecast=[
            ForecastWindowOut(
                window_start=w.start,
                window_end=w.end,
                snow_sum=w.snow_sum,
                rain_sum=w.rain_sum,
                temp_min=w.temp_min,
                temp_max=w.temp_max,
                wind_max=w.wind_max,
            )
            for w in windows
        ],
        fetched_at=now,
    )
