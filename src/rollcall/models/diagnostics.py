"""Diagnostic records emitted while encoding or decoding rosters."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel


class DiagnosticKind(StrEnum):
    DELIMITER_IN_FIELD = "DELIMITER_IN_FIELD"
    MALFORMED_LINE = "MALFORMED_LINE"
    INTEGER_PARSE_FAILURE = "INTEGER_PARSE_FAILURE"
    UNKNOWN_GENDER_TAG = "UNKNOWN_GENDER_TAG"


class Diagnostic(BaseModel):
    """A recovered failure: what went wrong and what the codec did about it."""

    kind: DiagnosticKind
    line_number: Optional[int] = None  # 1-based, set by collection I/O
    field: Optional[str] = None
    value: str = ""
    message: str = ""
    action: str = ""  # skipped_line, skipped_record, substituted_0

    def describe(self) -> str:
        where = f"line {self.line_number}: " if self.line_number is not None else ""
        return f"{where}{self.kind}: {self.message} ({self.action})"
