"""Logging configuration for applications embedding cppdoc."""

from __future__ import annotations

import logging

from cppdoc.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging at the level given by settings."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger("cppdoc").setLevel(settings.log_level)
