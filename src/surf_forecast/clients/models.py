"""Typed models for normalized marine forecast points."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 provider timestamp into an aware UTC datetime."""
    if not isinstance(value, str):
        return None
    candidate = value.strip()
    if not candidate:
        return None
    if candidate.endswith("Z"):
        candidate = candidate[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        return None
    return parsed.astimezone(UTC) if parsed.tzinfo else parsed.replace(tzinfo=UTC)


class WireModel(BaseModel):
    """Frozen model serialized with camelCase wire names."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class GeoPoint(WireModel):
    """Query location for a forecast request."""

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class ForecastPoint(WireModel):
    """One hour of marine forecast, resolved from a single data source."""

    time: str
    wave_height: float
    wave_direction: float
    swell_direction: float
    swell_height: float
    swell_period: float
    wind_direction: float
    wind_speed: float

    @field_validator("time")
    @classmethod
    def time_must_parse(cls, value: str) -> str:
        if parse_timestamp(value) is None:
            raise ValueError(f"time {value!r} is not a valid ISO-8601 timestamp")
        return value

    @property
    def instant(self) -> datetime:
        """The point's time as an aware UTC datetime."""
        parsed = parse_timestamp(self.time)
        if parsed is None:
            raise ValueError(f"time {self.time!r} is not a valid ISO-8601 timestamp")
        return parsed
