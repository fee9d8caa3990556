"""Logging-backed IDiagnostics: the default diagnostics channel."""

from __future__ import annotations

import logging

from rollcall.models.diagnostics import Diagnostic

logger = logging.getLogger("rollcall.diagnostics")


class LoggingDiagnostics:
    """Production IDiagnostics that narrates each diagnostic to a logger."""

    def __init__(self, log: logging.Logger | None = None, level: int = logging.WARNING) -> None:
        self._log = log or logger
        self._level = level

    def report(self, diagnostic: Diagnostic) -> None:
        self._log.log(self._level, diagnostic.describe())
