"""
Grouped counts and frequencies over statement, token, and category tables.

Grouping is restricted to a closed set of keys. Each aggregate row carries
its group values, an exact count, and a frequency normalized within a
parent group and rounded for display.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal
from enum import Enum
from itertools import product
from typing import Any, Iterable, Iterator, Sequence

import pandas as pd

from politemo.dataset.schema import Label
from politemo.lexicon.emotion_lexicon import Category
from politemo.preprocessing.tokenizer import WORD_COLUMN

logger = logging.getLogger(__name__)

ROUNDING_MODES = {
    "half_up": ROUND_HALF_UP,
    "half_even": ROUND_HALF_EVEN,
}

SUBJECT_SEPARATOR_PATTERN = re.compile(r"[,;]")


class GroupKey(Enum):
    """Fields an aggregate can be grouped by."""

    LABEL = "label"
    PARTY = "party"
    SUBJECT = "subject"
    CATEGORY = "category"

    @property
    def levels(self) -> tuple[str, ...] | None:
        """All possible values for closed keys, None for open ones."""
        if self is GroupKey.LABEL:
            return tuple(label.value for label in Label)
        if self is GroupKey.CATEGORY:
            return tuple(category.value for category in Category)
        return None

    def sort_key(self, value: str) -> tuple[int, str]:
        """Order closed keys by schema position, open keys alphabetically."""
        levels = self.levels
        if levels is None:
            return (0, value)
        position = levels.index(value) if value in levels else len(levels)
        return (position, value)


@dataclass(frozen=True)
class AggregateRow:
    """Count and frequency for one group."""

    key: tuple[str, ...]
    count: int
    frequency: float


@dataclass(frozen=True)
class AggregateTable:
    """Ordered, immutable result of an aggregation."""

    group_by: tuple[GroupKey, ...]
    parent: tuple[GroupKey, ...]
    rows: tuple[AggregateRow, ...]

    def __iter__(self) -> Iterator[AggregateRow]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def total(self) -> int:
        """Sum of counts across all groups."""
        return sum(row.count for row in self.rows)

    def get(self, *key: str) -> AggregateRow | None:
        """Find the row for a group key, None if absent."""
        for row in self.rows:
            if row.key == key:
                return row
        return None

    def top(self, n: int) -> AggregateTable:
        """Get the n largest groups by count, ties broken by key order."""
        ranked = sorted(self.rows, key=lambda row: -row.count)
        return AggregateTable(self.group_by, self.parent, tuple(ranked[:n]))

    def to_frame(self) -> pd.DataFrame:
        """Convert to a DataFrame with one column per group key."""
        columns = [key.value for key in self.group_by]
        records = [
            {**dict(zip(columns, row.key)), "count": row.count, "frequency": row.frequency}
            for row in self.rows
        ]
        return pd.DataFrame(records, columns=[*columns, "count", "frequency"])

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "group_by": [key.value for key in self.group_by],
            "parent": [key.value for key in self.parent],
            "rows": [
                {"key": list(row.key), "count": row.count, "frequency": row.frequency}
                for row in self.rows
            ],
        }


def round_frequency(
    count: int,
    total: int,
    decimals: int = 2,
    rounding: str = "half_up",
) -> float:
    """Compute count / total rounded to a fixed number of decimals.

    Division is done in Decimal so that half-way cases round the same way
    regardless of binary float representation.

    Args:
        count: Group count.
        total: Parent total. A zero total gives 0.0.
        decimals: Number of decimal places.
        rounding: Rounding mode, "half_up" or "half_even".

    Returns:
        Rounded frequency in [0, 1].
    """
    if rounding not in ROUNDING_MODES:
        raise ValueError(
            f"Unknown rounding mode: {rounding}. Must be one of {sorted(ROUNDING_MODES)}"
        )
    if total == 0:
        return 0.0

    quantum = Decimal(1).scaleb(-decimals)
    value = (Decimal(count) / Decimal(total)).quantize(quantum, rounding=ROUNDING_MODES[rounding])
    return float(value)


def _as_keys(keys: GroupKey | str | Iterable[GroupKey | str]) -> tuple[GroupKey, ...]:
    """Normalize a key or sequence of keys into a tuple of GroupKey."""
    if isinstance(keys, (GroupKey, str)):
        keys = [keys]
    return tuple(key if isinstance(key, GroupKey) else GroupKey(key) for key in keys)


def aggregate(
    df: pd.DataFrame,
    group_by: GroupKey | str | Sequence[GroupKey | str],
    parent: GroupKey | str | Sequence[GroupKey | str] = (),
    include_empty: bool = False,
    decimals: int = 2,
    rounding: str = "half_up",
) -> AggregateTable:
    """Count rows per group and normalize within a parent group.

    Args:
        df: Table to aggregate (statements, tokens, or lexicon-joined tokens).
        group_by: Keys to group by.
        parent: Subset of ``group_by`` that frequencies are normalized
            within. Empty normalizes over the whole table.
        include_empty: Whether to emit zero-count groups for closed keys
            (label and category).
        decimals: Decimal places for frequency rounding.
        rounding: Rounding mode, "half_up" or "half_even".

    Returns:
        AggregateTable ordered by group key.

    Raises:
        ValueError: If a key column is missing or parent is not a subset
            of group_by.
    """
    group_keys = _as_keys(group_by)
    parent_keys = _as_keys(parent)

    if not group_keys:
        raise ValueError("At least one group key is required")
    if len(set(group_keys)) != len(group_keys):
        raise ValueError("Group keys must be distinct")
    if not set(parent_keys) <= set(group_keys):
        raise ValueError(
            f"Parent keys {[k.value for k in parent_keys]} must be a subset of "
            f"group keys {[k.value for k in group_keys]}"
        )

    columns = [key.value for key in group_keys]
    missing = [column for column in columns if column not in df.columns]
    if missing:
        raise ValueError(f"Columns not found in table: {missing}")

    counts: Counter[tuple[str, ...]] = Counter(
        tuple(str(value) for value in values)
        for values in df[columns].itertuples(index=False, name=None)
    )

    if include_empty:
        axes = []
        for position, key in enumerate(group_keys):
            observed = {k[position] for k in counts}
            axes.append(sorted(observed | set(key.levels or ())))
        for combination in product(*axes):
            counts.setdefault(combination, 0)

    parent_positions = [group_keys.index(key) for key in parent_keys]

    def parent_of(key: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(key[position] for position in parent_positions)

    parent_totals: Counter[tuple[str, ...]] = Counter()
    for key, count in counts.items():
        parent_totals[parent_of(key)] += count

    ordered = sorted(
        counts,
        key=lambda k: tuple(group_keys[i].sort_key(v) for i, v in enumerate(k)),
    )
    rows = tuple(
        AggregateRow(
            key=key,
            count=counts[key],
            frequency=round_frequency(
                counts[key], parent_totals[parent_of(key)], decimals, rounding
            ),
        )
        for key in ordered
    )

    logger.debug(
        f"Aggregated {len(df)} rows by {columns} into {len(rows)} groups"
        + (f" within {[k.value for k in parent_keys]}" if parent_keys else "")
    )
    return AggregateTable(group_by=group_keys, parent=parent_keys, rows=rows)


def explode_subjects(df: pd.DataFrame) -> pd.DataFrame:
    """Split the subject tag list into one row per tag.

    Args:
        df: Table with a ``subject`` column of comma/semicolon separated tags.

    Returns:
        New DataFrame with one row per (row, tag). Rows without tags are dropped.
    """
    column = GroupKey.SUBJECT.value
    tags = df[column].astype(str).map(
        lambda value: [t.strip() for t in SUBJECT_SEPARATOR_PATTERN.split(value) if t.strip()]
    )
    exploded = df.assign(**{column: tags}).explode(column)
    return exploded[exploded[column].notna()].reset_index(drop=True)


def word_frequencies(tokens: pd.DataFrame, top_n: int | None = None) -> dict[str, int]:
    """Count token occurrences, most frequent first.

    Args:
        tokens: Token table with a ``word`` column.
        top_n: Maximum number of words to return. All if None.

    Returns:
        Ordered mapping of word to count.
    """
    counts = Counter(tokens[WORD_COLUMN])
    return dict(counts.most_common(top_n))
