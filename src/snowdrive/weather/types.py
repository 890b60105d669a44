# src/snowdrive/weather/types.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol, List, Optional


@dataclass(frozen=True)
class HourlySeries:
    """
    Parallel hourly samples. Index i of every value list describes time[i].
    Values may be None where the provider reported no sample.
    """
    time: List[datetime]
    temperature: List[Optional[float]]   # °F
    snowfall: List[Optional[float]]      # inches
    rain: List[Optional[float]]          # inches
    wind_speed: List[Optional[float]]    # mph
    timezone: Optional[str] = None

    def __post_init__(self) -> None:
        n = len(self.time)
        for name in ("temperature", "snowfall", "rain", "wind_speed"):
            if len(getattr(self, name)) != n:
                raise ValueError(
                    f"hourly series '{name}' has {len(getattr(self, name))} samples, expected {n}"
                )


@dataclass(frozen=True)
class ForecastWindow:
    start: datetime
    end: datetime
    snow_sum: float = 0.0
    rain_sum: float = 0.0
    temp_min: int = 0
    temp_max: int = 0
    wind_max: int = 0
    samples: int = field(default=0, compare=False)


class ForecastProvider(Protocol):
    async def hourly_series(self, *, lat: float, lon: float) -> HourlySeries: ...
