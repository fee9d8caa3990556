"""Pluggable diagnostics channels behind the IDiagnostics protocol."""

from __future__ import annotations

from rollcall.core.config import AppSettings
from rollcall.core.protocols import IDiagnostics
from rollcall.reporting.logging_channel import LoggingDiagnostics
from rollcall.reporting.memory_channel import MemoryDiagnostics

__all__ = ["LoggingDiagnostics", "MemoryDiagnostics", "create_diagnostics", "resolve_diagnostics"]


def create_diagnostics(settings: AppSettings | None = None) -> IDiagnostics:
    """Create the diagnostics channel selected by application settings."""
    if settings is None:
        settings = AppSettings()

    if settings.diagnostics == "memory":
        return MemoryDiagnostics()
    return LoggingDiagnostics()


def resolve_diagnostics(diagnostics: IDiagnostics | None) -> IDiagnostics:
    """Return ``diagnostics`` or the default logging channel."""
    return diagnostics if diagnostics is not None else LoggingDiagnostics()
