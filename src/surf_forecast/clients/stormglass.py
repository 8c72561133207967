"""StormGlass (api.stormglass.io) marine forecast client."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from ..config import Settings
from ..exceptions import ClientRequestError, StormGlassResponseError
from ..redaction import sanitize_for_logging, sanitize_text
from ..transport import HTTPTransport, Transport, TransportStatusError
from .base import ForecastClient
from .models import ForecastPoint, GeoPoint, parse_timestamp

STORMGLASS_API_PARAMS: tuple[str, ...] = (
    "waveHeight",
    "windSpeed",
    "windDirection",
    "swellDirection",
    "swellHeight",
    "swellPeriod",
    "waveDirection",
)
STORMGLASS_API_SOURCE = "noaa"


def _format_coordinate(value: float) -> str:
    # Plain decimal notation; str(0.00001) would give "1e-05".
    return format(Decimal(repr(value)), "f")


def is_valid_point(raw: Mapping[str, Any], source: str = STORMGLASS_API_SOURCE) -> bool:
    """Return True when ``raw`` has a usable time and every metric for ``source``."""
    if parse_timestamp(raw.get("time")) is None:
        return False
    for param in STORMGLASS_API_PARAMS:
        values = raw.get(param)
        if not isinstance(values, Mapping):
            return False
        value = values.get(source)
        # bool is an int subclass but never a valid reading.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
    return True


def normalize_points(
    payload: Mapping[str, Any], source: str = STORMGLASS_API_SOURCE
) -> list[ForecastPoint]:
    """Project the ``hours`` entries of a StormGlass payload onto ``source``.

    Entries missing the time or any metric for ``source`` are dropped. Order
    follows the provider response.
    """
    hours = payload.get("hours")
    if not isinstance(hours, list):
        raise ValueError("StormGlass payload missing 'hours' list.")
    return [
        ForecastPoint(
            time=raw["time"],
            wave_height=raw["waveHeight"][source],
            wave_direction=raw["waveDirection"][source],
            swell_direction=raw["swellDirection"][source],
            swell_height=raw["swellHeight"][source],
            swell_period=raw["swellPeriod"][source],
            wind_direction=raw["windDirection"][source],
            wind_speed=raw["windSpeed"][source],
        )
        for raw in hours
        if isinstance(raw, Mapping) and is_valid_point(raw, source)
    ]


class StormGlassClient(ForecastClient):
    """Fetches hourly marine forecast points from StormGlass."""

    provider_name = "stormglass"

    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger,
        transport: Transport | None = None,
    ) -> None:
        self.settings = settings
        self.logger = logger
        self._transport = transport or HTTPTransport(
            timeout_seconds=settings.stormglass_timeout_seconds
        )

    def __enter__(self) -> StormGlassClient:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    def fetch_points(self, point: GeoPoint) -> list[ForecastPoint]:
        """Fetch the forecast for ``point`` and return the valid hours in provider order.

        Raises ``StormGlassResponseError`` when StormGlass answers with an error
        status and ``ClientRequestError`` for every other failure.
        """
        url = self._build_url(point)
        try:
            response = self._transport.get(
                url, headers={"Authorization": self.settings.stormglass_api_token}
            )
            if not isinstance(response.data, Mapping):
                raise ValueError(
                    f"StormGlass returned unexpected payload type {type(response.data).__name__}."
                )
            points = normalize_points(response.data, STORMGLASS_API_SOURCE)
        except TransportStatusError as exc:
            body = json.dumps(sanitize_for_logging(exc.data), default=str)
            raise StormGlassResponseError(
                "Unexpected error returned by the StormGlass service: "
                f"Error: {body} Code: {exc.status_code}",
                status_code=exc.status_code,
                body=exc.data,
            ) from exc
        except Exception as exc:
            raise ClientRequestError(
                "Unexpected error when trying to communicate to StormGlass: "
                f"{sanitize_text(str(exc))}"
            ) from exc

        log_fields = {"provider": self.provider_name, "lat": point.lat, "lng": point.lng}
        dropped = len(response.data["hours"]) - len(points)
        if dropped:
            self.logger.debug(
                "%s dropped %d incomplete hours", self.provider_name, dropped, extra=log_fields
            )
        self.logger.info(
            "%s returned %d forecast points for lat=%s lng=%s",
            self.provider_name,
            len(points),
            log_fields["lat"],
            log_fields["lng"],
            extra=log_fields,
        )
        return points

    def _build_url(self, point: GeoPoint) -> str:
        base_url = str(self.settings.stormglass_api_url).rstrip("/")
        params = ",".join(STORMGLASS_API_PARAMS)
        lat = _format_coordinate(point.lat)
        lng = _format_coordinate(point.lng)
        return (
            f"{base_url}/weather/point?lat={lat}&lng={lng}"
            f"&params={params}&source={STORMGLASS_API_SOURCE}"
        )
