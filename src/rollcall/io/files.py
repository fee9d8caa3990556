"""Caller-side file handling for roster files.

These helpers acquire and release the backing file around a single
``write_all``/``read_all`` call; the codec itself never opens anything.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from rollcall.core.exceptions import StreamIOError, StreamOpenError
from rollcall.core.protocols import IDiagnostics
from rollcall.io.collection import read_all, write_all
from rollcall.models.student import Student


@contextmanager
def open_roster(path: str | Path, mode: str = "r", encoding: str = "utf-8") -> Iterator[TextIO]:
    """Open a roster file in text mode, mapping OSError onto StreamError types."""
    try:
        fh = open(path, mode, encoding=encoding)
    except OSError as exc:
        raise StreamOpenError(str(path), mode, exc.strerror or str(exc)) from exc
    try:
        yield fh
    finally:
        try:
            fh.close()
        except OSError as exc:
            raise StreamIOError(f"Close failed for {str(path)!r}: {exc}") from exc


def save_roster(
    path: str | Path,
    students: Iterable[Student],
    *,
    append: bool = False,
    encoding: str = "utf-8",
    diagnostics: IDiagnostics | None = None,
) -> int:
    """Write ``students`` to ``path``. Returns the number of records written."""
    with open_roster(path, "a" if append else "w", encoding=encoding) as fh:
        return write_all(students, fh, diagnostics=diagnostics)


def load_roster(
    path: str | Path,
    *,
    strict_gender: bool = False,
    encoding: str = "utf-8",
    diagnostics: IDiagnostics | None = None,
) -> list[Student]:
    """Read every decodable record from ``path``."""
    with open_roster(path, "r", encoding=encoding) as fh:
        return read_all(fh, strict_gender=strict_gender, diagnostics=diagnostics)
