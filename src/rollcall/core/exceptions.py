"""rollcall exception hierarchy."""

from __future__ import annotations


class RollcallError(Exception):
    """Base exception for all rollcall errors."""


class CodecError(RollcallError):
    """A field or record could not be encoded or decoded."""


class DelimiterInFieldError(CodecError):
    """A text field contains the reserved delimiter character."""

    def __init__(self, field: str, value: str, delimiter: str = ",") -> None:
        self.field = field
        self.value = value
        self.delimiter = delimiter
        super().__init__(f"Field {field!r} contains delimiter {delimiter!r}: {value!r}")


class MalformedLineError(CodecError):
    """A line lacks the delimiters needed to bound every field."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed line {line!r}: {reason}")


class IntegerParseError(CodecError):
    """Numeric field text is not a valid integer or is out of range."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse integer from {text!r}: {reason}")


class GenderTagError(CodecError):
    """Gender field does not start with a known tag."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Unknown gender tag in {text!r}")


class StreamError(RollcallError):
    """The backing character stream failed."""


class StreamOpenError(StreamError):
    """The backing file could not be opened."""

    def __init__(self, path: str, mode: str, message: str) -> None:
        self.path = path
        self.mode = mode
        super().__init__(f"Cannot open {path!r} (mode={mode!r}): {message}")


class StreamIOError(StreamError):
    """Reading from or writing to an open stream failed."""
