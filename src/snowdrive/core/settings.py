# src/snowdrive/core/settings.py
from __future__ import annotations
import os

FORECAST_DAYS = int(os.getenv("FORECAST_DAYS", "7"))
# raw provider payloads are reused for up to an hour
FORECAST_CACHE_TTL_SEC = float(os.getenv("FORECAST_CACHE_TTL_SEC", "3600"))

OPEN_METEO_HTTP_TIMEOUT_SEC = float(os.getenv("OPEN_METEO_HTTP_TIMEOUT_SEC", "7"))
ROUTES_HTTP_TIMEOUT_SEC = float(os.getenv("ROUTES_HTTP_TIMEOUT_SEC", "10"))

# Routes API only accepts departure times strictly in the future
MIN_DEPARTURE_BUFFER_SEC = int(os.getenv("MIN_DEPARTURE_BUFFER_SEC", "120"))
RETRY_DEPARTURE_BUFFER_SEC = int(os.getenv("RETRY_DEPARTURE_BUFFER_SEC", "300"))

MAX_DEPARTURE_TIMES = int(os.getenv("MAX_DEPARTURE_TIMES", "10"))
