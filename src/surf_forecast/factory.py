"""Wire settings, logging and the StormGlass client into a forecast service."""

from __future__ import annotations

import logging

from .clients.stormglass import StormGlassClient
from .config import Settings, load_settings
from .log_setup import setup_logger
from .services.forecast import ForecastService, Rater
from .transport import Transport


def build_forecast_service(
    rater: Rater,
    *,
    settings: Settings | None = None,
    logger: logging.Logger | None = None,
    transport: Transport | None = None,
) -> ForecastService:
    """Build a ``ForecastService`` backed by StormGlass.

    Settings are loaded from the environment when not given; ``ConfigError``
    propagates on invalid configuration.
    """
    settings = settings or load_settings()
    logger = logger or setup_logger(level=settings.log_level)
    logger.info("Forecast service configured: %s", settings.safe_summary())
    client = StormGlassClient(settings=settings, logger=logger, transport=transport)
    return ForecastService(client=client, rater=rater, logger=logger)
