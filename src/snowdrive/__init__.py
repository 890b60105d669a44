"""SnowDrive: ski resort snow forecasts and traffic-aware drive times."""

__version__ = "0.1.0"
