import argparse
import asyncio
import sys
from datetime import datetime, timezone
from typing import List, Optional, Sequence
from zoneinfo import ZoneInfo

from snowdrive.core.logging_setup import configure_logging
from snowdrive.core.settings import FORECAST_DAYS, MAX_DEPARTURE_TIMES
from snowdrive.resorts.directory import Resort, get_resort_by_id, list_resorts
from snowdrive.routes_api.compute_routes_service import GoogleRoutesClient
from snowdrive.routes_api.planner import plan_routes
from snowdrive.routes_api.types import Coordinates, RouteProvider, RouteResult, RoutingProviderError
from snowdrive.utils.formatting import calculate_delay, format_distance, format_duration
from snowdrive.utils.timewindow import departures_now, tomorrow_morning_departures
from snowdrive.weather.aggregate import aggregate
from snowdrive.weather.open_meteo import ForecastProviderError, OpenMeteoForecastProvider
from snowdrive.weather.types import ForecastProvider, ForecastWindow


def parse_origin(text: str) -> Coordinates:
    """'40.76,-111.89' -> Coordinates."""
    try:
        lat, lng = (float(x) for x in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"origin must be LAT,LNG (got {text!r})")
    return Coordinates(lat=lat, lng=lng)


def _require_resort(resort_id: str) -> Resort:
    resort = get_resort_by_id(resort_id)
    if not resort:
        raise SystemExit(f"unknown resort: {resort_id}")
    return resort


# ===============================================================
# Renderers
# ===============================================================
def render_forecast(resort: Resort, windows: Sequence[ForecastWindow]) -> str:
    lines = [
        f"{resort.name} ({resort.region}, {resort.country}) - {resort.elevation:,} ft",
        "",
        "| Window          | Snow (in) | Rain (in) | Temp (°F) | Wind (mph) |",
        "-" * 70,
    ]
    for w in windows:
        label = w.start.strftime("%a %m/%d ") + ("AM" if w.start.hour < 12 else "PM")
        snow = f"{w.snow_sum:.1f}" if w.snow_sum > 0 else "-"
        rain = f"{w.rain_sum:.1f}" if w.rain_sum > 0 else "-"
        lines.append(
            f"| {label:<15} | {snow:>9} | {rain:>9} | {w.temp_min:>4}/{w.temp_max:<4} | {w.wind_max:>10} |"
        )
    return "\n".join(lines)


def render_routes(resort: Resort, routes: Sequence[RouteResult], tz: str) -> str:
    tzinfo = ZoneInfo(tz)
    lines = [
        f"Drive to {resort.name}",
        "",
        "| Leave    | Drive     | Traffic   | Distance |",
        "-" * 47,
    ]
    for r in routes:
        delay = calculate_delay(r.duration_seconds, r.static_duration_seconds)
        traffic = f"+{format_duration(delay)}" if delay > 0 else "none"
        lines.append(
            f"| {r.departure_time.astimezone(tzinfo).strftime('%I:%M %p'):<8} | "
            f"{format_duration(r.duration_seconds):<9} | {traffic:<9} | "
            f"{format_distance(r.distance_meters):<8} |"
        )
    if routes:
        best = min(routes, key=lambda x: x.duration_seconds)
        lines.append("")
        lines.append(
            f"Fastest: leave at {best.departure_time.astimezone(tzinfo).strftime('%I:%M %p')} "
            f"({format_duration(best.duration_seconds)})"
        )
    return "\n".join(lines)


# ===============================================================
# Commands
# ===============================================================
async def run_forecast(resort: Resort, provider: ForecastProvider, now: Optional[datetime] = None) -> List[ForecastWindow]:
    series = await provider.hourly_series(lat=resort.lat, lon=resort.lon)
    return aggregate(series, resort.tz, now or datetime.now(timezone.utc), FORECAST_DAYS)


async def run_drive(
    resort: Resort,
    origin: Coordinates,
    departures: Sequence[datetime],
    provider: RouteProvider,
) -> List[RouteResult]:
    destination = Coordinates(lat=resort.lat, lng=resort.lon)
    return await plan_routes(origin, destination, departures[:MAX_DEPARTURE_TIMES], provider=provider)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="snowdrive-cli", description="Ski resort snow forecasts and drive times")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("resorts", help="list resorts")

    p_fc = sub.add_parser("forecast", help="7-day forecast in 12-hour windows")
    p_fc.add_argument("resort_id")

    p_dr = sub.add_parser("drive", help="traffic-aware drive times")
    p_dr.add_argument("resort_id")
    p_dr.add_argument("--origin", type=parse_origin, required=True, help="LAT,LNG")
    p_dr.add_argument("--mode", choices=["now", "tomorrow"], default="now",
                      help="leave now, or tomorrow at 6/7/8/9 AM")
    p_dr.add_argument("--tz", default=None, help="timezone for 'tomorrow' (default: resort timezone)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    if args.command == "resorts":
        for r in list_resorts():
            print(f"{r.id:<18} {r.name:<26} {r.region}, {r.country}")
        return 0

    resort = _require_resort(args.resort_id)

    if args.command == "forecast":
        try:
            windows = asyncio.run(run_forecast(resort, OpenMeteoForecastProvider()))
        except ForecastProviderError as e:
            print(f"Failed to fetch forecast: {e}", file=sys.stderr)
            return 1
        print(render_forecast(resort, windows))
        return 0

    tz = args.tz or resort.tz
    departures = departures_now() if args.mode == "now" else tomorrow_morning_departures(tz=tz)
    try:
        routes = asyncio.run(run_drive(resort, args.origin, departures, GoogleRoutesClient()))
    except RoutingProviderError as e:
        print(f"Failed to compute drive times: {e}", file=sys.stderr)
        return 1
    print(render_routes(resort, routes, tz))
    return 0


if __name__ == "__main__":
    sys.exit(main())
