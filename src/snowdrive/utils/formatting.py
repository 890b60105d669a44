# src/snowdrive/utils/formatting.py
from __future__ import annotations

METERS_PER_MILE = 1609.34
FEET_PER_METER = 3.28084


def format_duration(seconds: int) -> str:
    """3900 -> '1h 5m', 2520 -> '42 min'."""
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    if hours == 0:
        return f"{minutes} min"
    return f"{hours}h {minutes}m"


def format_distance(meters: float) -> str:
    miles = meters / METERS_PER_MILE
    if miles < 0.1:
        return f"{round(meters * FEET_PER_METER)} ft"
    return f"{miles:.1f} mi"


def calculate_delay(duration_seconds: int, static_duration_seconds: int) -> int:
    """Extra seconds caused by traffic. Negative when traffic is lighter than usual."""
    return duration_seconds - static_duration_seconds
