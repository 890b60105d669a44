"""Tests for the Google Routes computeRoutes client."""

import json
from datetime import datetime, timedelta
from typing import List

import httpx
import pytest

from snowdrive.routes_api import compute_routes_service
from snowdrive.routes_api.compute_routes_service import GoogleRoutesClient, parse_duration
from snowdrive.routes_api.types import (
    Coordinates,
    DurationFormatError,
    RouteRequest,
    RoutingProviderError,
)
from snowdrive.tests.test_data import (
    FIXED_NOW,
    FUTURE_TIME_ERROR,
    OTHER_400_ERROR,
    route_payload,
)
from snowdrive.utils.timewindow import parse_instant

ORIGIN = Coordinates(lat=39.7392, lng=-104.9903)
DEST = Coordinates(lat=39.8868, lng=-105.7625)


def _client(responses: List[httpx.Response], seen: List[httpx.Request]) -> GoogleRoutesClient:
    queue = list(responses)

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return queue.pop(0)

    return GoogleRoutesClient(
        api_key="test-key",
        clock=lambda: FIXED_NOW,
        transport=httpx.MockTransport(handler),
    )


def _sent_departure(request: httpx.Request) -> datetime:
    return parse_instant(json.loads(request.content)["departureTime"])


# ===== duration tokens =====
@pytest.mark.parametrize("token,expected", [("723s", 723), ("0s", 0), ("86400s", 86400)])
def test_parse_duration(token: str, expected: int) -> None:
    assert parse_duration(token) == expected


@pytest.mark.parametrize("token", ["723", "12m", "s", "-5s", "7.5s", "", None, 723])
def test_parse_duration_rejects_malformed(token) -> None:
    with pytest.raises(DurationFormatError):
        parse_duration(token)


# ===== request shape =====
@pytest.mark.asyncio
async def test_sends_traffic_aware_request_with_field_mask() -> None:
    seen: List[httpx.Request] = []
    client = _client([httpx.Response(200, json=route_payload())], seen)
    departure = FIXED_NOW + timedelta(hours=20)

    result = await client.compute_route(RouteRequest(ORIGIN, DEST, departure))

    req = seen[0]
    assert req.method == "POST"
    assert req.url.path == "/directions/v2:computeRoutes"
    assert req.headers["X-Goog-Api-Key"] == "test-key"
    assert req.headers["X-Goog-FieldMask"] == "routes.duration,routes.staticDuration,routes.distanceMeters"
    body = json.loads(req.content)
    assert body["travelMode"] == "DRIVE"
    assert body["routingPreference"] == "TRAFFIC_AWARE_OPTIMAL"
    assert body["origin"]["location"]["latLng"] == {"latitude": 39.7392, "longitude": -104.9903}
    assert body["destination"]["location"]["latLng"] == {"latitude": 39.8868, "longitude": -105.7625}
    assert body["departureTime"] == "2025-01-16T08:00:00.000Z"

    # first alternative only
    assert result.duration_seconds == 5400
    assert result.static_duration_seconds == 4800
    assert result.distance_meters == 108000
    assert result.departure_time == departure


# ===== future-time constraint =====
@pytest.mark.asyncio
async def test_departure_one_minute_ahead_is_bumped_to_two() -> None:
    seen: List[httpx.Request] = []
    client = _client([httpx.Response(200, json=route_payload())], seen)
    requested = FIXED_NOW + timedelta(minutes=1)

    result = await client.compute_route(RouteRequest(ORIGIN, DEST, requested))

    sent = _sent_departure(seen[0])
    assert sent >= FIXED_NOW + timedelta(minutes=2)
    assert result.departure_time == sent
    assert result.departure_time != requested


@pytest.mark.asyncio
async def test_future_time_rejection_is_retried_once_with_five_minutes() -> None:
    seen: List[httpx.Request] = []
    client = _client(
        [httpx.Response(400, json=FUTURE_TIME_ERROR), httpx.Response(200, json=route_payload())],
        seen,
    )

    result = await client.compute_route(RouteRequest(ORIGIN, DEST, FIXED_NOW))

    assert len(seen) == 2
    assert _sent_departure(seen[1]) >= FIXED_NOW + timedelta(minutes=5)
    assert result.departure_time == FIXED_NOW + timedelta(minutes=5)


@pytest.mark.asyncio
async def test_second_future_time_rejection_is_fatal() -> None:
    seen: List[httpx.Request] = []
    client = _client(
        [httpx.Response(400, json=FUTURE_TIME_ERROR), httpx.Response(400, json=FUTURE_TIME_ERROR)],
        seen,
    )

    with pytest.raises(RoutingProviderError) as exc_info:
        await client.compute_route(RouteRequest(ORIGIN, DEST, FIXED_NOW))
    assert len(seen) == 2
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(400, json=OTHER_400_ERROR),
        httpx.Response(403, json={"error": {"message": "future time"}}),
        httpx.Response(500, text="future time"),
        httpx.Response(400, text="future time, not json"),
    ],
)
async def test_other_errors_are_not_retried(response: httpx.Response) -> None:
    seen: List[httpx.Request] = []
    client = _client([response, httpx.Response(200, json=route_payload())], seen)

    with pytest.raises(RoutingProviderError):
        await client.compute_route(RouteRequest(ORIGIN, DEST, FIXED_NOW + timedelta(hours=1)))
    assert len(seen) == 1


# ===== result extraction =====
@pytest.mark.asyncio
async def test_empty_routes_is_fatal() -> None:
    client = _client([httpx.Response(200, json={})], [])
    with pytest.raises(RoutingProviderError, match="No routes found"):
        await client.compute_route(RouteRequest(ORIGIN, DEST, FIXED_NOW + timedelta(hours=1)))


@pytest.mark.asyncio
async def test_malformed_duration_is_fatal() -> None:
    client = _client([httpx.Response(200, json=route_payload(duration="about an hour"))], [])
    with pytest.raises(RoutingProviderError) as exc_info:
        await client.compute_route(RouteRequest(ORIGIN, DEST, FIXED_NOW + timedelta(hours=1)))
    assert isinstance(exc_info.value.__cause__, DurationFormatError)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        [{"routes": []}],
        {"routes": ["x"]},
        {"routes": 5},
        {"routes": [{"distanceMeters": "far"}]},
        {"routes": [{"distanceMeters": None}]},
    ],
)
async def test_unusable_success_body_is_a_provider_error(payload) -> None:
    client = _client([httpx.Response(200, json=payload)], [])
    with pytest.raises(RoutingProviderError, match="unusable route"):
        await client.compute_route(RouteRequest(ORIGIN, DEST, FIXED_NOW + timedelta(hours=1)))


@pytest.mark.asyncio
async def test_omitted_zero_fields_read_as_zero() -> None:
    client = _client([httpx.Response(200, json={"routes": [{}]})], [])
    result = await client.compute_route(RouteRequest(ORIGIN, ORIGIN, FIXED_NOW + timedelta(hours=1)))
    assert (result.duration_seconds, result.static_duration_seconds, result.distance_meters) == (0, 0, 0)


# ===== credentials / transport =====
@pytest.mark.asyncio
async def test_missing_api_key_fails_without_calling_provider(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(compute_routes_service, "GOOGLE_MAPS_API_KEY", None)
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=route_payload())

    client = GoogleRoutesClient(transport=httpx.MockTransport(handler))
    with pytest.raises(RoutingProviderError, match="GOOGLE_MAPS_API_KEY is not configured"):
        await client.compute_route(RouteRequest(ORIGIN, DEST, FIXED_NOW))
    assert seen == []


@pytest.mark.asyncio
async def test_timeout_is_fatal() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    client = GoogleRoutesClient(
        api_key="test-key", clock=lambda: FIXED_NOW, transport=httpx.MockTransport(handler)
    )
    with pytest.raises(RoutingProviderError):
        await client.compute_route(RouteRequest(ORIGIN, DEST, FIXED_NOW + timedelta(hours=1)))
