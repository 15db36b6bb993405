"""
Statement dataset loading for politemo.

Provides the explicit record schema, file loading, and identifier
normalization.
"""

from politemo.dataset.loader import load_statements, read_records
from politemo.dataset.normalizer import normalize_ids
from politemo.dataset.schema import (
    HISTORY_FIELDS,
    STATEMENT_FIELDS,
    Label,
    StatementRecord,
)

__all__ = [
    "HISTORY_FIELDS",
    "STATEMENT_FIELDS",
    "Label",
    "StatementRecord",
    "load_statements",
    "read_records",
    "normalize_ids",
]
