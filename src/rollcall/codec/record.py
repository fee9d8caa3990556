"""Record codec: one Student <-> one line.

Line layout::

    <name>,<form>,<gender_tag>,\\n

The trailing delimiter after the gender tag is part of the format and is
kept on write; on read everything after the second delimiter is handed to
the gender decoder.
"""

from __future__ import annotations

import io

from rollcall.codec.fields import (
    DELIMITER,
    decode_gender,
    decode_gender_strict,
    decode_integer,
    decode_text,
    encode_gender,
    encode_integer,
    encode_text,
    validate_text,
)
from rollcall.core.exceptions import DelimiterInFieldError, GenderTagError, MalformedLineError
from rollcall.core.protocols import IDiagnostics, ITextSink
from rollcall.models.diagnostics import Diagnostic, DiagnosticKind
from rollcall.models.student import Student
from rollcall.reporting import resolve_diagnostics

LINE_TERMINATOR = "\n"


def render_record(student: Student) -> str:
    """Render a Student to its full line, terminator included.

    Raises:
        DelimiterInFieldError: if the name contains the delimiter or a line break.
    """
    buf = io.StringIO()
    encode_text(student.name, buf)
    buf.write(DELIMITER)
    encode_integer(student.form, buf)
    buf.write(DELIMITER)
    encode_gender(student.gender, buf)
    buf.write(LINE_TERMINATOR)
    return buf.getvalue()


def encode_record(student: Student, sink: ITextSink) -> None:
    """Write one Student line to ``sink``.

    The line is rendered in full before anything reaches the sink, so a
    field failure leaves the sink untouched.
    """
    sink.write(render_record(student))


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


class _Reject(Exception):
    def __init__(self, diagnostic: Diagnostic) -> None:
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)


class _Numbered:
    """Stamps a line number onto diagnostics raised below the record level."""

    def __init__(self, inner: IDiagnostics, line_number: int | None) -> None:
        self._inner = inner
        self._line_number = line_number

    def report(self, diagnostic: Diagnostic) -> None:
        if diagnostic.line_number is None and self._line_number is not None:
            diagnostic = diagnostic.model_copy(update={"line_number": self._line_number})
        self._inner.report(diagnostic)


def _decode(
    line: str,
    *,
    strict_gender: bool,
    diagnostics: IDiagnostics | None,
    line_number: int | None,
) -> Student:
    raw = _strip_terminator(line)

    first = raw.find(DELIMITER)
    if first == -1:
        raise _Reject(Diagnostic(
            kind=DiagnosticKind.MALFORMED_LINE,
            line_number=line_number,
            value=raw,
            message="no delimiter after name",
            action="skipped_line",
        ))
    name = decode_text(raw[:first])
    try:
        validate_text(name)
    except DelimiterInFieldError as exc:
        raise _Reject(Diagnostic(
            kind=DiagnosticKind.DELIMITER_IN_FIELD,
            line_number=line_number,
            field="name",
            value=name,
            message=str(exc),
            action="skipped_line",
        )) from exc

    second = raw.find(DELIMITER, first + 1)
    if second == -1:
        raise _Reject(Diagnostic(
            kind=DiagnosticKind.MALFORMED_LINE,
            line_number=line_number,
            value=raw,
            message="no delimiter after form",
            action="skipped_line",
        ))

    form_diagnostics = _Numbered(diagnostics, line_number) if diagnostics is not None else None
    form = decode_integer(raw[first + 1:second], diagnostics=form_diagnostics)

    rest = raw[second + 1:]
    if strict_gender:
        try:
            gender = decode_gender_strict(rest)
        except GenderTagError as exc:
            raise _Reject(Diagnostic(
                kind=DiagnosticKind.UNKNOWN_GENDER_TAG,
                line_number=line_number,
                field="gender",
                value=rest,
                message=str(exc),
                action="skipped_line",
            )) from exc
    else:
        gender = decode_gender(rest)

    return Student(name=name, form=form, gender=gender)


def decode_record(
    line: str,
    *,
    strict_gender: bool = False,
    diagnostics: IDiagnostics | None = None,
    line_number: int | None = None,
) -> Student | None:
    """Decode one line, or return None if it cannot be bounded into fields.

    Rejections (missing delimiter, or a bad gender tag under
    ``strict_gender``) are reported to ``diagnostics``; a bad form number is
    reported and replaced by 0 without rejecting the line.
    """
    channel = resolve_diagnostics(diagnostics)
    try:
        return _decode(line, strict_gender=strict_gender, diagnostics=channel, line_number=line_number)
    except _Reject as rej:
        channel.report(rej.diagnostic)
        return None


def parse_record(line: str, *, strict_gender: bool = False) -> Student:
    """Decode one line, raising instead of returning None.

    Raises:
        MalformedLineError: the line cannot be decoded.
    """
    try:
        return _decode(line, strict_gender=strict_gender, diagnostics=None, line_number=None)
    except _Reject as rej:
        raise MalformedLineError(_strip_terminator(line), rej.diagnostic.message) from None
