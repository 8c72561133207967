"""Marine forecast provider clients."""

from .base import ForecastClient
from .models import ForecastPoint, GeoPoint
from .stormglass import (
    STORMGLASS_API_PARAMS,
    STORMGLASS_API_SOURCE,
    StormGlassClient,
    is_valid_point,
    normalize_points,
)

__all__ = [
    "STORMGLASS_API_PARAMS",
    "STORMGLASS_API_SOURCE",
    "ForecastClient",
    "ForecastPoint",
    "GeoPoint",
    "StormGlassClient",
    "is_valid_point",
    "normalize_points",
]
