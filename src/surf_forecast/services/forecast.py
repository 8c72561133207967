"""Fetch, rate and group forecasts for a list of beaches."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Protocol

from ..clients.base import ForecastClient
from ..clients.models import ForecastPoint
from ..exceptions import ForecastProcessingError
from .models import Beach, RatedForecastPoint, TimeGroup


class Rater(Protocol):
    """Scores a single forecast point for a beach. Must be side-effect free."""

    def __call__(self, beach: Beach, point: ForecastPoint) -> float: ...


class ForecastService:
    """Builds the time-grouped, rated forecast for a set of beaches.

    Beaches are fetched one at a time in input order. The first client fault
    aborts the whole run and propagates unchanged; nothing partial is returned.
    """

    def __init__(
        self,
        client: ForecastClient,
        rater: Rater,
        logger: logging.Logger | None = None,
    ) -> None:
        self.client = client
        self.rater = rater
        self.logger = logger or logging.getLogger(__name__)

    def __enter__(self) -> ForecastService:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying forecast client."""
        self.client.close()

    def process_forecast_for_beaches(self, beaches: Sequence[Beach]) -> list[TimeGroup]:
        points_by_time: dict[str, list[RatedForecastPoint]] = {}
        for beach in beaches:
            points = self.client.fetch_points(beach.geo_point)
            for point in points:
                rated = self._rate_point(beach, point)
                points_by_time.setdefault(point.time, []).append(rated)
            self.logger.debug(
                "Rated %d forecast points for beach %s",
                len(points),
                beach.name,
                extra={"beach": beach.name, "lat": beach.lat, "lng": beach.lng},
            )

        groups = self._map_forecast_by_time(points_by_time)
        self.logger.info(
            "Processed forecast for %d beaches into %d time groups", len(beaches), len(groups)
        )
        return groups

    def _rate_point(self, beach: Beach, point: ForecastPoint) -> RatedForecastPoint:
        try:
            return RatedForecastPoint(
                **point.model_dump(),
                lat=beach.lat,
                lng=beach.lng,
                name=beach.name,
                position=beach.position,
                rating=self.rater(beach, point),
            )
        except Exception as exc:
            raise ForecastProcessingError(
                "Unexpected error during the forecast processing: "
                f"rating failed for beach {beach.name!r} at {point.time}: {exc}"
            ) from exc

    @staticmethod
    def _map_forecast_by_time(
        points_by_time: dict[str, list[RatedForecastPoint]],
    ) -> list[TimeGroup]:
        # sorted() is stable: equal instants keep first-seen order.
        ordered = sorted(points_by_time.items(), key=lambda item: item[1][0].instant)
        return [TimeGroup(time=time, forecast=forecast) for time, forecast in ordered]
