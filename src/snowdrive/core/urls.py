# src/snowdrive/core/urls.py
from __future__ import annotations
import os
from typing import Final

# base domains can be overridden from .env
OPEN_METEO_BASE: Final[str] = os.getenv("OPEN_METEO_BASE", "https://api.open-meteo.com")
GOOGLE_ROUTES_BASE: Final[str] = os.getenv("GOOGLE_ROUTES_BASE", "https://routes.googleapis.com")

# path constants, kept apart from the domains
OPEN_METEO_PATHS = {
    "forecast": "/v1/forecast",
}

GOOGLE_ROUTES_PATHS = {
    "compute_routes": "/directions/v2:computeRoutes",
}


def open_meteo_url(path_key: str = "forecast") -> str:
    """
    Open-Meteo endpoint builder.
    ex) open_meteo_url() -> "https://api.open-meteo.com/v1/forecast"
    """
    return f"{OPEN_METEO_BASE}{OPEN_METEO_PATHS[path_key]}"


def google_routes_url(path_key: str = "compute_routes") -> str:
    """
    Google Routes endpoint builder.
    ex) google_routes_url() -> "https://routes.googleapis.com/directions/v2:computeRoutes"
    """
    return f"{GOOGLE_ROUTES_BASE}{GOOGLE_ROUTES_PATHS[path_key]}"
