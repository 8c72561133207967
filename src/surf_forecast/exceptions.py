"""Application exception classes."""

from __future__ import annotations

from typing import Any, Literal

FaultKind = Literal["provider_response", "communication"]


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class StormGlassError(Exception):
    """Base class for StormGlass client faults, tagged by ``kind``."""

    kind: FaultKind


class StormGlassResponseError(StormGlassError):
    """Raised when StormGlass was reached but answered with an error status."""

    kind: FaultKind = "provider_response"

    def __init__(self, message: str, *, status_code: int, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ClientRequestError(StormGlassError):
    """Raised when the request to StormGlass could not be completed."""

    kind: FaultKind = "communication"


class ForecastProcessingError(Exception):
    """Raised when rating or grouping beach forecasts fails."""
