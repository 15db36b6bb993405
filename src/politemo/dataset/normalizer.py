"""Identifier normalization for statement tables."""

from __future__ import annotations

import logging

import pandas as pd

logger = logging.getLogger(__name__)

ID_SUFFIX = ".json"


def normalize_ids(df: pd.DataFrame, suffix: str = ID_SUFFIX) -> pd.DataFrame:
    """Remove every literal occurrence of a suffix from the id column.

    Args:
        df: Statements table.
        suffix: Literal substring to remove.

    Returns:
        New DataFrame with rewritten ids. The input is not modified.
    """
    result = df.copy()
    result["id"] = result["id"].astype(str).str.replace(suffix, "", regex=False)

    duplicated = result["id"].duplicated()
    if duplicated.any():
        logger.warning(
            f"{int(duplicated.sum())} duplicate ids after normalization, "
            f"e.g. {result.loc[duplicated, 'id'].iloc[0]!r}"
        )

    return result
