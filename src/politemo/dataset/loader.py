"""
Statement dataset loading.

Reads the headerless delimited statements file into a pandas DataFrame,
validating every row against the explicit schema before any analysis runs.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path

import pandas as pd

from politemo.dataset.schema import HISTORY_FIELDS, STATEMENT_FIELDS, StatementRecord
from politemo.errors import DecodeError

logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = "\ufeff"


def read_records(
    path: str | Path,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> list[StatementRecord]:
    """Read and validate all statement records from a file.

    Lines that are empty or hold only whitespace are skipped. Any other
    line must be a complete record. A leading byte order mark is dropped.

    Args:
        path: Path to the headerless statements file.
        delimiter: Field delimiter.
        encoding: File encoding.

    Returns:
        List of StatementRecord objects in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        DecodeError: If the file is not valid text in ``encoding`` or a
            line cannot be split into fields.
        FormatError: If a row has the wrong number of fields.
        ParseError: If a label or historical count is invalid.
    """
    path = Path(path)
    raw = path.read_bytes()

    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError as e:
        line_number = raw.count(b"\n", 0, e.start) + 1
        raise DecodeError(line_number, f"not valid {encoding} ({e.reason})") from e

    if text.startswith(BYTE_ORDER_MARK):
        text = text[len(BYTE_ORDER_MARK):]

    records = []
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
    try:
        for fields in reader:
            if not any(field.strip() for field in fields):
                continue
            records.append(StatementRecord.from_fields(fields, reader.line_num))
    except csv.Error as e:
        raise DecodeError(reader.line_num, str(e)) from e

    logger.debug(f"Parsed {len(records)} records from {path}")
    return records


def load_statements(
    path: str | Path,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> pd.DataFrame:
    """Load the statements file into a table with the fixed schema.

    Args:
        path: Path to the headerless statements file.
        delimiter: Field delimiter.
        encoding: File encoding.

    Returns:
        DataFrame with one row per statement and the 14 schema columns.
    """
    records = read_records(path, delimiter=delimiter, encoding=encoding)

    df = pd.DataFrame(
        [record.to_dict() for record in records],
        columns=list(STATEMENT_FIELDS),
    )
    df = df.astype({name: "int64" for name in HISTORY_FIELDS})

    logger.info(f"Loaded {len(df)} statements from {path}")
    return df
