"""Beach and aggregated forecast models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from ..clients.models import ForecastPoint, GeoPoint, WireModel


class BeachPosition(StrEnum):
    """Compass direction a beach faces."""

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"


class Beach(WireModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)
    name: str
    position: BeachPosition
    user: str

    @property
    def geo_point(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lng=self.lng)


class RatedForecastPoint(ForecastPoint):
    """Forecast point tagged with its beach and rating."""

    lat: float
    lng: float
    name: str
    position: BeachPosition
    rating: float


class TimeGroup(WireModel):
    """All beaches' rated points sharing one timestamp."""

    time: str
    forecast: list[RatedForecastPoint] = Field(default_factory=list)
