# src/snowdrive/models/schemas.py
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Wire format is camelCase; python side stays snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ===== Shared =====
class CoordinatesModel(CamelModel):
    lat: float = Field(..., description="latitude, degrees")
    lng: float = Field(..., description="longitude, degrees")


class ErrorResponse(CamelModel):
    error: str


# ===== Request =====
class DriveRequest(CamelModel):
    # all optional so missing fields reach the route and get the 400 message
    origin: Optional[CoordinatesModel] = None
    resort_id: Optional[str] = None
    departure_times: Optional[List[str]] = Field(None, description="ISO-8601 instants")


# ===== Response =====
class ForecastWindowOut(CamelModel):
    window_start: datetime
    window_end: datetime
    snow_sum: float   # inches
    rain_sum: float   # inches
    temp_min: int     # °F
    temp_max: int     # °F
    wind_max: int     # mph


class ForecastResponse(CamelModel):
    resort_id: str
    resort_name: str
    forecast: List[ForecastWindowOut]
    fetched_at: datetime
    source: str = "Open-Meteo"


class RouteResultOut(CamelModel):
    duration_seconds: int
    static_duration_seconds: int
    distance_meters: int
    departure_time: datetime


class DriveResponse(CamelModel):
    resort_id: str
    resort_name: str
    origin: CoordinatesModel
    destination: CoordinatesModel
    routes: List[RouteResultOut]
    fetched_at: datetime


class ResortOut(CamelModel):
    id: str
    name: str
    slug: str
    country: str
    region: str
    lat: float
    lon: float
    tz: str
    elevation: int
    gradient: str
    icon: str
