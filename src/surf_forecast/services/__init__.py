"""Forecast aggregation services."""

from .forecast import ForecastService, Rater
from .models import Beach, BeachPosition, RatedForecastPoint, TimeGroup

__all__ = [
    "Beach",
    "BeachPosition",
    "ForecastService",
    "RatedForecastPoint",
    "Rater",
    "TimeGroup",
]
