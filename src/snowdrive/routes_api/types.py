# src/snowdrive/routes_api/types.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Protocol


@dataclass(frozen=True)
class Coordinates:
    """Geographic point in degrees. Not range-checked."""
    lat: float
    lng: float


@dataclass(frozen=True)
class RouteRequest:
    origin: Coordinates
    destination: Coordinates
    departure_time: datetime


@dataclass(frozen=True)
class RouteResult:
    duration_seconds: int          # live, traffic-aware
    static_duration_seconds: int   # without traffic
    distance_meters: int
    departure_time: datetime       # effective instant sent to the provider


class RoutingProviderError(RuntimeError):
    """Raised when a routing request fails for good."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, payload: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class DurationFormatError(ValueError):
    """A duration token that is not of the form '<N>s'."""


class RouteProvider(Protocol):
    async def compute_route(self, req: RouteRequest) -> RouteResult: ...
