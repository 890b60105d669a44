# src/snowdrive/utils/timewindow.py
from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence, Tuple
from zoneinfo import ZoneInfo

HALF_DAY = timedelta(hours=12)
FULL_DAY = timedelta(hours=24)


def _aware_now(now: Optional[datetime] = None) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")
    return now


def start_of_local_day(now: datetime, *, tz: str) -> datetime:
    """Local midnight of the day `now` falls on in `tz`."""
    local = _aware_now(now).astimezone(ZoneInfo(tz))
    return local.replace(hour=0, minute=0, second=0, microsecond=0)


def twelve_hour_windows(*, tz: str, now: Optional[datetime] = None, days: int = 7) -> List[Tuple[datetime, datetime]]:
    """
    AM/PM windows for `days` days starting at local midnight of `now`.
      - AM: [midnight + 24h*day, +12h)
      - PM: [midnight + 24h*day + 12h, +24h)
    Offsets are added as elapsed time in UTC so every window is exactly 12h,
    DST transitions included. Bounds are returned in `tz`.
    """
    tzinfo = ZoneInfo(tz)
    day_zero_utc = start_of_local_day(_aware_now(now), tz=tz).astimezone(timezone.utc)

    windows: List[Tuple[datetime, datetime]] = []
    for day in range(days):
        am_start = day_zero_utc + FULL_DAY * day
        pm_start = am_start + HALF_DAY
        windows.append((am_start.astimezone(tzinfo), pm_start.astimezone(tzinfo)))
        windows.append((pm_start.astimezone(tzinfo), (pm_start + HALF_DAY).astimezone(tzinfo)))
    return windows


def in_window(ts: datetime, start: datetime, end: datetime) -> bool:
    # half-open: a sample on the boundary belongs to the window it starts.
    # compared in UTC, same-zone aware datetimes otherwise compare by wall time
    ts, start, end = (x.astimezone(timezone.utc) for x in (ts, start, end))
    return start <= ts < end


def ensure_future(departure: datetime, *, now: datetime, min_ahead: timedelta) -> datetime:
    """Return `departure` unless it is less than `min_ahead` after `now`, else now + min_ahead."""
    earliest = now + min_ahead
    return departure if departure >= earliest else earliest


def to_rfc3339_utc(dt: datetime) -> str:
    """2025-01-10T14:00:00.000Z, the form the Routes API documents."""
    utc = _aware_now(dt).astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def parse_instant(value: str) -> datetime:
    """
    ISO-8601 instant -> aware datetime. A trailing 'Z' is accepted and naive
    values are read as UTC.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


# ===============================================================
# Departure presets used by the drive planner
# ===============================================================
def departures_now(now: Optional[datetime] = None) -> List[datetime]:
    return [_aware_now(now)]


def tomorrow_morning_departures(
    *, tz: str, hours: Sequence[int] = (6, 7, 8, 9), now: Optional[datetime] = None
) -> List[datetime]:
    """Tomorrow at each of `hours` local time in `tz`."""
    today = start_of_local_day(_aware_now(now), tz=tz)
    tomorrow = (today + timedelta(days=1)).date()
    tzinfo = ZoneInfo(tz)
    return [datetime(tomorrow.year, tomorrow.month, tomorrow.day, h, tzinfo=tzinfo) for h in hours]
