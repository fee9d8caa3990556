"""Field codecs: encode/decode pairs for each primitive field of a student line.

Encoders write into an ITextSink and never emit the field separator
themselves, except the gender encoder which owns the trailing delimiter of
the line (``Lera,10,G,``). Decoders take the slice of text already cut out
by the record codec.
"""

from __future__ import annotations

import logging
import re

from rollcall.core.exceptions import DelimiterInFieldError, GenderTagError, IntegerParseError
from rollcall.core.protocols import IDiagnostics, ITextSink
from rollcall.models.diagnostics import Diagnostic, DiagnosticKind
from rollcall.models.student import INT_MAX, INT_MIN, Gender

logger = logging.getLogger(__name__)

DELIMITER = ","
# A field holding either of these would split its record across lines.
LINE_BREAKS = ("\n", "\r")

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def validate_text(value: str, field: str = "name") -> str:
    """Raise DelimiterInFieldError if ``value`` contains a field or line delimiter."""
    for delimiter in (DELIMITER, *LINE_BREAKS):
        if delimiter in value:
            raise DelimiterInFieldError(field, value, delimiter)
    return value


def encode_text(value: str, sink: ITextSink, field: str = "name") -> None:
    sink.write(validate_text(value, field))


def decode_text(text: str) -> str:
    return text


# ---------------------------------------------------------------------------
# Integer
# ---------------------------------------------------------------------------

def encode_integer(value: int, sink: ITextSink) -> None:
    sink.write(str(int(value)))


def parse_integer(text: str) -> int:
    """Strict decimal parse.

    Surrounding whitespace and a leading sign are accepted; anything else
    (underscores, decimals, trailing junk, empty text) is rejected.

    Raises:
        IntegerParseError: malformed text or a value outside the 32-bit range.
    """
    stripped = text.strip()
    if not _INTEGER_RE.fullmatch(stripped):
        raise IntegerParseError(text, "not a decimal integer")
    value = int(stripped)
    if not INT_MIN <= value <= INT_MAX:
        raise IntegerParseError(text, f"out of range [{INT_MIN}, {INT_MAX}]")
    return value


def decode_integer(
    text: str,
    *,
    default: int = 0,
    diagnostics: IDiagnostics | None = None,
    field: str = "form",
) -> int:
    """Parse ``text``, substituting ``default`` when it is not a valid integer.

    The failure goes to ``diagnostics`` as an INTEGER_PARSE_FAILURE, or to
    this module's logger when no channel is given. Never raises for bad input.
    """
    try:
        return parse_integer(text)
    except IntegerParseError as exc:
        if diagnostics is None:
            logger.warning("Integer parse failed for %s: %s; using %d", field, exc, default)
        else:
            diagnostics.report(Diagnostic(
                kind=DiagnosticKind.INTEGER_PARSE_FAILURE,
                field=field,
                value=text,
                message=str(exc),
                action=f"substituted_{default}",
            ))
        return default


# ---------------------------------------------------------------------------
# Gender
# ---------------------------------------------------------------------------

def encode_gender(value: Gender, sink: ITextSink) -> None:
    sink.write(Gender(value).value + DELIMITER)


def decode_gender(text: str) -> Gender:
    """Permissive decode: a leading ``B`` is a boy, anything else a girl."""
    if text[:1] == Gender.BOY.value:
        return Gender.BOY
    return Gender.GIRL


def decode_gender_strict(text: str) -> Gender:
    """Decode a tag that must start with ``B`` or ``G``.

    Raises:
        GenderTagError: on empty text or any other leading character.
    """
    try:
        return Gender(text[:1])
    except ValueError:
        raise GenderTagError(text) from None
