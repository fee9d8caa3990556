"""Protocol interfaces for the rollcall seams.

The codec talks to streams and the diagnostics channel only through these
Protocols: structural typing, no inheritance required. ``io.StringIO`` and
open text files satisfy the stream protocols as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Protocol, runtime_checkable

if TYPE_CHECKING:
    from rollcall.models.diagnostics import Diagnostic


# ---------------------------------------------------------------------------
# Character streams
# ---------------------------------------------------------------------------

@runtime_checkable
class ITextSink(Protocol):
    """Writable character sink (file or in-memory buffer)."""

    def write(self, text: str) -> int: ...


@runtime_checkable
class ITextSource(Protocol):
    """Readable character source yielding newline-terminated lines."""

    def __iter__(self) -> Iterator[str]: ...


# ---------------------------------------------------------------------------
# Diagnostics channel
# ---------------------------------------------------------------------------

@runtime_checkable
class IDiagnostics(Protocol):
    """Receives per-field and per-line failures, apart from the data path."""

    def report(self, diagnostic: Diagnostic) -> None: ...
