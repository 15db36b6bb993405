"""
Aggregation for politemo.

Provides grouped counts and frequencies for presentation.
"""

from politemo.analysis.aggregator import (
    AggregateRow,
    AggregateTable,
    GroupKey,
    aggregate,
    explode_subjects,
    round_frequency,
    word_frequencies,
)

__all__ = [
    "AggregateRow",
    "AggregateTable",
    "GroupKey",
    "aggregate",
    "explode_subjects",
    "round_frequency",
    "word_frequencies",
]
