"""Marine forecast retrieval and beach forecast aggregation."""

from .clients import ForecastPoint, GeoPoint, StormGlassClient
from .exceptions import (
    ClientRequestError,
    ConfigError,
    ForecastProcessingError,
    StormGlassError,
    StormGlassResponseError,
)
from .factory import build_forecast_service
from .services import Beach, BeachPosition, ForecastService, RatedForecastPoint, TimeGroup

__all__ = [
    "Beach",
    "BeachPosition",
    "ClientRequestError",
    "ConfigError",
    "ForecastPoint",
    "ForecastProcessingError",
    "ForecastService",
    "GeoPoint",
    "RatedForecastPoint",
    "StormGlassClient",
    "StormGlassError",
    "StormGlassResponseError",
    "TimeGroup",
    "build_forecast_service",
]
