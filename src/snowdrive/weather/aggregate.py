# src/snowdrive/weather/aggregate.py
from __future__ import annotations
import math
from datetime import datetime
from typing import Iterable, List, Optional

from snowdrive.core.settings import FORECAST_DAYS
from snowdrive.utils.timewindow import in_window, twelve_hour_windows
from snowdrive.weather.types import ForecastWindow, HourlySeries


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round .5 upward, the way the forecast UI has always displayed values."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def _sum(values: Iterable[Optional[float]]) -> float:
    return sum(v for v in values if v is not None)


def _min(values: Iterable[Optional[float]]) -> float:
    present = [v for v in values if v is not None]
    return min(present) if present else 0.0


def _max(values: Iterable[Optional[float]]) -> float:
    present = [v for v in values if v is not None]
    return max(present) if present else 0.0


def aggregate(
    series: HourlySeries,
    timezone: str,
    now: datetime,
    horizon_days: int = FORECAST_DAYS,
) -> List[ForecastWindow]:
    """
    Bucket hourly samples into 12-hour AM/PM windows anchored at local
    midnight of `now` in `timezone`.

    Snow and rain are summed (1 decimal); temperature min/max and wind max are
    whole units. Windows without samples report 0 everywhere.
    """
    windows: List[ForecastWindow] = []
    for start, end in twelve_hour_windows(tz=timezone, now=now, days=horizon_days):
        idx = [i for i, ts in enumerate(series.time) if in_window(ts, start, end)]

        snow = [series.snowfall[i] for i in idx]
        rain = [series.rain[i] for i in idx]
        temps = [series.temperature[i] for i in idx]
        wind = [series.wind_speed[i] for i in idx]

        windows.append(
            ForecastWindow(
                start=start,
                end=end,
                snow_sum=round_half_up(_sum(snow), 1),
                rain_sum=round_half_up(_sum(rain), 1),
                temp_min=int(round_half_up(_min(temps))),
                temp_max=int(round_half_up(_max(temps))),
                wind_max=int(round_half_up(_max(wind))),
                samples=len(idx),
            )
        )
    return windows
