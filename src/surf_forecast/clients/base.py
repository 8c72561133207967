"""Provider-agnostic forecast client interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import ForecastPoint, GeoPoint


class ForecastClient(ABC):
    """Base contract for marine forecast providers used by the forecast service."""

    @abstractmethod
    def fetch_points(self, point: GeoPoint) -> list[ForecastPoint]:
        """Fetch and normalize hourly forecast points for a location."""

    @abstractmethod
    def close(self) -> None:
        """Release client resources."""
