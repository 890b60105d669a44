# src/snowdrive/routes_api/planner.py
from __future__ import annotations
import logging
from datetime import datetime
from typing import List, Sequence

from .types import Coordinates, RouteProvider, RouteRequest, RouteResult

logger = logging.getLogger(__name__)


async def plan_routes(
    origin: Coordinates,
    destination: Coordinates,
    departure_times: Sequence[datetime],
    *,
    provider: RouteProvider,
) -> List[RouteResult]:
    """
    One route per departure time, issued strictly one after another and
    returned in input order.

    Calls are serial to stay under the provider's rate limits, so latency
    grows with len(departure_times). The first RoutingProviderError aborts
    the whole batch: remaining times are not requested and nothing already
    computed is returned.
    """
    results: List[RouteResult] = []
    for idx, departure in enumerate(departure_times):
        logger.debug("route %d/%d departing %s", idx + 1, len(departure_times), departure.isoformat())
        result = await provider.compute_route(
            RouteRequest(origin=origin, destination=destination, departure_time=departure)
        )
        results.append(result)

    logger.info("computed %d routes %s -> %s", len(results), origin, destination)
    return results
