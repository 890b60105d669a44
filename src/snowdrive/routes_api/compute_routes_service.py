"""
Google Routes API v2 computeRoutes client
-----------------------------------------

Traffic-aware driving route between two points for one departure time.

- POST + JSON body, X-Goog-FieldMask header is mandatory
- departureTime must lie in the future: anything closer than
  MIN_DEPARTURE_BUFFER_SEC is moved to now + buffer before sending
- a 400 whose error payload mentions "future time" is retried once with
  RETRY_DEPARTURE_BUFFER_SEC; every other failure is final

Docs: https://developers.google.com/maps/documentation/routes/compute_route_directions
"""

from __future__ import annotations
import json
import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

import httpx

from config import GOOGLE_MAPS_API_KEY
from snowdrive.core.settings import (
    MIN_DEPARTURE_BUFFER_SEC,
    RETRY_DEPARTURE_BUFFER_SEC,
    ROUTES_HTTP_TIMEOUT_SEC,
)
from snowdrive.core.urls import google_routes_url
from snowdrive.utils.timewindow import ensure_future, to_rfc3339_utc
from .types import (
    DurationFormatError,
    RouteProvider,
    RouteRequest,
    RouteResult,
    RoutingProviderError,
)

logger = logging.getLogger(__name__)

# only the fields RouteResult reads
FIELD_MASK = "routes.duration,routes.staticDuration,routes.distanceMeters"

FUTURE_TIME_MARKER = "future time"

_DURATION_RE = re.compile(r"^\s*(\d+)s\s*$")


def parse_duration(token: str) -> int:
    """'723s' -> 723. Anything else raises DurationFormatError."""
    if not isinstance(token, str):
        raise DurationFormatError(f"duration must be a string like '123s', got {token!r}")
    m = _DURATION_RE.match(token)
    if not m:
        raise DurationFormatError(f"malformed duration token: {token!r}")
    return int(m.group(1))


def is_future_time_error(exc: RoutingProviderError) -> bool:
    # the provider has no structured code for this, so match on the serialized payload
    if exc.status_code != 400:
        return False
    return FUTURE_TIME_MARKER in json.dumps(exc.payload if exc.payload is not None else {})


def _lat_lng(lat: float, lng: float) -> Dict[str, Any]:
    return {"location": {"latLng": {"latitude": float(lat), "longitude": float(lng)}}}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _first_route(data: Any, departure: datetime) -> RouteResult:
    """Best alternative of a computeRoutes body. proto3 JSON leaves zero values out."""
    try:
        routes = data.get("routes") or []
        if not routes:
            raise RoutingProviderError("No routes found")
        route = routes[0]
        return RouteResult(
            duration_seconds=parse_duration(route.get("duration", "0s")),
            static_duration_seconds=parse_duration(route.get("staticDuration", "0s")),
            distance_meters=int(route.get("distanceMeters", 0)),
            departure_time=departure,
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise RoutingProviderError(f"Google Routes API returned an unusable route: {exc}") from exc


class GoogleRoutesClient(RouteProvider):
    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        timeout: float = ROUTES_HTTP_TIMEOUT_SEC,
        min_buffer: timedelta = timedelta(seconds=MIN_DEPARTURE_BUFFER_SEC),
        retry_buffer: timedelta = timedelta(seconds=RETRY_DEPARTURE_BUFFER_SEC),
        clock: Callable[[], datetime] = _utcnow,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else GOOGLE_MAPS_API_KEY
        self.timeout = timeout
        self.min_buffer = min_buffer
        self.retry_buffer = retry_buffer
        self.clock = clock
        self._transport = transport

    def _body(self, req: RouteRequest, departure: datetime) -> Dict[str, Any]:
        return {
            "origin": _lat_lng(req.origin.lat, req.origin.lng),
            "destination": _lat_lng(req.destination.lat, req.destination.lng),
            "travelMode": "DRIVE",
            "routingPreference": "TRAFFIC_AWARE_OPTIMAL",
            "departureTime": to_rfc3339_utc(departure),
        }

    async def _post(self, req: RouteRequest, departure: datetime) -> RouteResult:
        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self.api_key,
            "X-Goog-FieldMask": FIELD_MASK,
        }
        body = self._body(req, departure)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(google_routes_url(), headers=headers, json=body)
        except httpx.RequestError as exc:
            raise RoutingProviderError(f"Google Routes API request failed: {exc}") from exc

        if not resp.is_success:
            try:
                detail = resp.json()
            except ValueError:
                detail = {}
            raise RoutingProviderError(
                f"Google Routes API error: {resp.status_code} {resp.reason_phrase}",
                status_code=resp.status_code,
                payload=detail,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise RoutingProviderError("Google Routes API returned invalid JSON") from exc

        return _first_route(data, departure)

    async def compute_route(self, req: RouteRequest) -> RouteResult:
        if not self.api_key:
            raise RoutingProviderError("GOOGLE_MAPS_API_KEY is not configured")

        now = self.clock()
        departure = ensure_future(req.departure_time, now=now, min_ahead=self.min_buffer)
        if departure != req.departure_time:
            logger.info(
                "departure %s too close to now, sending %s instead",
                req.departure_time.isoformat(), departure.isoformat(),
            )

        try:
            return await self._post(req, departure)
        except RoutingProviderError as exc:
            if not is_future_time_error(exc):
                logger.error("route request failed: %s", exc)
                raise

        retry_departure = self.clock() + self.retry_buffer
        logger.warning(
            "provider rejected departure %s as not in the future, retrying once with %s",
            departure.isoformat(), retry_departure.isoformat(),
        )
        try:
            return await self._post(req, retry_departure)
        except RoutingProviderError as exc:
            logger.error("route retry failed: %s", exc)
            raise
