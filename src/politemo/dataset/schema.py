"""
Statement record schema.

Defines the fixed 14-field layout of the fact-checked statements dataset
and the record type each row is validated into.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from politemo.errors import FormatError, ParseError


class Label(Enum):
    """Truthfulness ratings assigned by fact-checkers."""

    TRUE = "true"
    MOSTLY_TRUE = "mostly-true"
    HALF_TRUE = "half-true"
    BARELY_TRUE = "barely-true"
    FALSE = "false"
    PANTS_FIRE = "pants-fire"

    @classmethod
    def parse(cls, value: str) -> Label:
        """Parse a label case-insensitively.

        Raises:
            ValueError: If the value is not one of the six ratings.
        """
        return cls(value.strip().lower())


# Prior counts, in file order
HISTORY_FIELDS = (
    "barely_true_count",
    "false_count",
    "half_true_count",
    "mostly_true_count",
    "pants_on_fire_count",
)

STATEMENT_FIELDS = (
    "id",
    "label",
    "statement_text",
    "subject",
    "speaker",
    "speaker_title",
    "state",
    "party",
    *HISTORY_FIELDS,
    "venue",
)

NON_NEGATIVE_INT_PATTERN = re.compile(r"^\d+$")


@dataclass(frozen=True)
class StatementRecord:
    """A single fact-checked statement."""

    id: str
    label: str
    statement_text: str
    subject: str
    speaker: str
    speaker_title: str
    state: str
    party: str
    barely_true_count: int
    false_count: int
    half_true_count: int
    mostly_true_count: int
    pants_on_fire_count: int
    venue: str

    @classmethod
    def from_fields(cls, fields: list[str], line_number: int) -> StatementRecord:
        """Build a record from one row of raw fields.

        Args:
            fields: Raw string fields, in file order.
            line_number: 1-based line number, used in error messages.

        Returns:
            Validated StatementRecord.

        Raises:
            FormatError: If the row does not have exactly 14 fields.
            ParseError: If the label or a historical count is invalid.
        """
        if len(fields) != len(STATEMENT_FIELDS):
            raise FormatError(line_number, len(fields), len(STATEMENT_FIELDS))

        values: dict[str, Any] = dict(zip(STATEMENT_FIELDS, fields))

        try:
            values["label"] = Label.parse(values["label"]).value
        except ValueError:
            raise ParseError(
                line_number, "label", values["label"], "is not a known label"
            ) from None

        for name in HISTORY_FIELDS:
            raw = values[name].strip()
            if not NON_NEGATIVE_INT_PATTERN.match(raw):
                raise ParseError(line_number, name, raw, "is not a non-negative integer")
            values[name] = int(raw)

        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for table construction."""
        return asdict(self)
