"""Shared test doubles: re-export the memory diagnostics channel and stream fakes."""

from __future__ import annotations

import io

from rollcall.reporting.memory_channel import MemoryDiagnostics

__all__ = ["BrokenSink", "BrokenSource", "MemoryDiagnostics", "RecordingSink"]


class RecordingSink(io.StringIO):
    """StringIO that also records each individual write call."""

    def __init__(self) -> None:
        super().__init__()
        self.writes: list[str] = []

    def write(self, text: str) -> int:
        self.writes.append(text)
        return super().write(text)


class BrokenSink:
    """Sink whose writes always fail like a full disk."""

    def write(self, text: str) -> int:
        raise OSError(28, "No space left on device")


class BrokenSource:
    """Source that yields some lines and then fails mid-read."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines

    def __iter__(self):
        yield from self._lines
        raise OSError(5, "Input/output error")
