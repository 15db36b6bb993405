"""
Exceptions raised while loading statements and reference data.

All of them are fatal at load time: malformed rows are never skipped.
"""

from __future__ import annotations

from pathlib import Path


class DataError(Exception):
    """Base class for input and reference data errors."""


class FormatError(DataError):
    """A row does not have the expected number of fields."""

    def __init__(self, line_number: int, field_count: int, expected: int):
        self.line_number = line_number
        self.field_count = field_count
        self.expected = expected
        super().__init__(
            f"Line {line_number}: expected {expected} fields, found {field_count}"
        )


class DecodeError(FormatError):
    """A line cannot be decoded or split into fields."""

    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        self.field_count = None
        self.expected = None
        self.reason = reason
        DataError.__init__(self, f"Line {line_number}: {reason}")


class ParseError(DataError):
    """A field value cannot be parsed into its declared type."""

    def __init__(self, line_number: int, field_name: str, value: str, reason: str):
        self.line_number = line_number
        self.field_name = field_name
        self.value = value
        super().__init__(f"Line {line_number}: field '{field_name}' {reason}: {value!r}")


class MissingReferenceDataError(DataError):
    """A stopword list or lexicon file is absent or unreadable."""

    def __init__(self, kind: str, path: str | Path, reason: str = "not found"):
        self.kind = kind
        self.path = Path(path)
        super().__init__(f"{kind} file {reason}: {path}")
