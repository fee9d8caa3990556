"""Logging setup for entry points. Library modules only call getLogger."""

from __future__ import annotations

import logging

from rollcall.core.config import AppSettings


def configure_logging(settings: AppSettings | None = None) -> None:
    if settings is None:
        settings = AppSettings()
    logging.basicConfig(level=settings.log_level.upper(), format=settings.log_format)
