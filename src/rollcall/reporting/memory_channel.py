"""List-backed IDiagnostics for tests and programmatic inspection."""

from __future__ import annotations

from rollcall.models.diagnostics import Diagnostic, DiagnosticKind


class MemoryDiagnostics:
    """Collects diagnostics in report order."""

    def __init__(self) -> None:
        self._items: list[Diagnostic] = []

    @property
    def items(self) -> list[Diagnostic]:
        return list(self._items)

    def report(self, diagnostic: Diagnostic) -> None:
        self._items.append(diagnostic)

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self._items if d.kind == kind]

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)
