# src/snowdrive/api/drive.py
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from snowdrive.api.deps import get_route_provider
from snowdrive.core.settings import MAX_DEPARTURE_TIMES
from snowdrive.models.schemas import (
    CoordinatesModel,
    DriveRequest,
    DriveResponse,
    ErrorResponse,
    RouteResultOut,
)
from snowdrive.resorts.directory import get_resort_by_id
from snowdrive.routes_api.planner import plan_routes
from snowdrive.routes_api.types import Coordinates, RouteProvider, RoutingProviderError
from snowdrive.utils.timewindow import parse_instant

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/drive",
    response_model=DriveResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Traffic-aware drive times to a resort for up to 10 departure times",
)
async def plan_drive(
    body: DriveRequest,
    provider: RouteProvider = Depends(get_route_provider),
):
    # 1) input validation, nothing is sent upstream before this passes
    if body.origin is None or not body.resort_id or not body.departure_times:
        raise HTTPException(
            status_code=400,
            detail="Missing required fields: origin, resortId, departureTimes",
        )

    if len(body.departure_times) > MAX_DEPARTURE_TIMES:
        raise HTTPException(
            status_code=400,
            detail=f"Maximum {MAX_DEPARTURE_TIMES} departure times allowed",
        )

    try:
        departures = [parse_instant(t) for t in body.departure_times]
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid departure time: {exc}") from exc

    # 2) resort lookup
    resort = get_resort_by_id(body.resort_id)
    if not resort:
        raise HTTPException(status_code=404, detail="Resort not found")

    origin = Coordinates(lat=body.origin.lat, lng=body.origin.lng)
    destination = Coordinates(lat=resort.lat, lng=resort.lon)

    # 3) routing, fail-fast on the first unrecoverable error
    try:
        routes = await plan_routes(origin, destination, departures, provider=provider)
    except RoutingProviderError as exc:
        logger.error("drive planning to %s failed: %s", resort.id, exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return DriveResponse(
        resort_id=resort.id,
        resort_name=resort.name,
        origin=CoordinatesModel(lat=origin.lat, lng=origin.lng),
        destination=CoordinatesModel(lat=destination.lat, lng=destination.lng),
        routes=[
            RouteResultOut(
                duration_seconds=r.duration_seconds,
                static_duration_seconds=r.static_duration_seconds,
                distance_meters=r.distance_meters,
                departure_time=r.departure_time,
            )
            for r in routes
        ],
        fetched_at=datetime.now(timezone.utc),
    )
