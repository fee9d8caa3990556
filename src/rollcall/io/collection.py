"""Collection I/O: whole rosters over a caller-owned character stream.

The stream is opened and closed by the caller; these functions only read
from or write to it. Per-record and per-line failures are reported and
skipped. Stream failures are raised as StreamIOError.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from rollcall.codec.record import decode_record, encode_record
from rollcall.core.exceptions import DelimiterInFieldError, StreamIOError
from rollcall.core.protocols import IDiagnostics, ITextSink, ITextSource
from rollcall.models.diagnostics import Diagnostic, DiagnosticKind
from rollcall.models.student import Student
from rollcall.reporting import resolve_diagnostics

logger = logging.getLogger(__name__)


def write_all(
    students: Iterable[Student],
    sink: ITextSink,
    *,
    diagnostics: IDiagnostics | None = None,
) -> int:
    """Write students in order, one line each. Returns the number written."""
    channel = resolve_diagnostics(diagnostics)
    written = 0
    for index, student in enumerate(students, start=1):
        try:
            encode_record(student, sink)
        except DelimiterInFieldError as exc:
            channel.report(Diagnostic(
                kind=DiagnosticKind.DELIMITER_IN_FIELD,
                field=exc.field,
                value=exc.value,
                message=f"record {index}: {exc}",
                action="skipped_record",
            ))
            continue
        except OSError as exc:
            raise StreamIOError(f"Write failed at record {index}: {exc}") from exc
        written += 1
    logger.debug("Wrote %d record(s)", written)
    return written


def iter_records(
    source: ITextSource,
    *,
    strict_gender: bool = False,
    diagnostics: IDiagnostics | None = None,
) -> Iterator[Student]:
    """Lazily decode ``source`` line by line, skipping lines that fail."""
    channel = resolve_diagnostics(diagnostics)
    lines = iter(source)
    line_number = 0
    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise StreamIOError(f"Read failed after line {line_number}: {exc}") from exc
        line_number += 1
        student = decode_record(
            line, strict_gender=strict_gender, diagnostics=channel, line_number=line_number,
        )
        if student is not None:
            yield student


def read_all(
    source: ITextSource,
    *,
    strict_gender: bool = False,
    diagnostics: IDiagnostics | None = None,
) -> list[Student]:
    """Decode every line of ``source`` into a list, in line order."""
    students = list(iter_records(source, strict_gender=strict_gender, diagnostics=diagnostics))
    logger.debug("Read %d record(s)", len(students))
    return students
