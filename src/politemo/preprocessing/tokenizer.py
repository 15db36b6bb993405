"""
Tokenization utilities for statement text.

Splits free text into lowercase word tokens and unnests a table into one
row per (statement, token) pair, carrying the other fields along as context.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Any, Iterator, Mapping

import pandas as pd
from tqdm import tqdm

logger = logging.getLogger(__name__)

WORD_COLUMN = "word"

# Letters and digits, with optional internal apostrophes ("don't", "o'rourke")
TOKEN_PATTERN = re.compile(r"[^\W_]+(?:'[^\W_]+)*")
CURLY_APOSTROPHE = "’"


def tokenize(text: object) -> list[str]:
    """Split text into lowercase word tokens.

    Args:
        text: Text to tokenize. None, NaN and other non-string values
            are treated as empty.

    Returns:
        Tokens in left-to-right order.
    """
    if not isinstance(text, str) or not text:
        return []
    text = text.lower().replace(CURLY_APOSTROPHE, "'")
    return TOKEN_PATTERN.findall(text)


class TokenStream:
    """Lazy, restartable sequence of (word, context) pairs over a table.

    Every iteration walks the table from the first row again, so the stream
    can be consumed any number of times. Contexts are read-only views, so
    the pairs of one row cannot alter each other.
    """

    def __init__(self, df: pd.DataFrame, text_field: str, show_progress: bool = False):
        """Initialize token stream.

        Args:
            df: Source table.
            text_field: Name of the free-text column to tokenize.
            show_progress: Whether to display a progress bar while iterating.
        """
        if text_field not in df.columns:
            raise ValueError(f"Text field not found in table: {text_field}")

        self.df = df
        self.text_field = text_field
        self.show_progress = show_progress
        self.context_fields = [c for c in df.columns if c != text_field]

    def __iter__(self) -> Iterator[tuple[str, Mapping[str, Any]]]:
        rows = self.df.to_dict("records")
        for row in tqdm(rows, desc="Tokenizing", disable=not self.show_progress):
            context = MappingProxyType({name: row[name] for name in self.context_fields})
            for word in tokenize(row[self.text_field]):
                yield word, context


def unnest_tokens(
    df: pd.DataFrame,
    text_field: str,
    show_progress: bool = False,
) -> pd.DataFrame:
    """Expand a table into one row per token of its text field.

    Args:
        df: Source table.
        text_field: Name of the free-text column to tokenize.
        show_progress: Whether to display a progress bar.

    Returns:
        New DataFrame with the text column replaced by a ``word`` column,
        ordered by source row and then token position.
    """
    stream = TokenStream(df, text_field, show_progress=show_progress)
    context_fields = stream.context_fields

    records = [{**context, WORD_COLUMN: word} for word, context in stream]
    tokens = pd.DataFrame(records, columns=[*context_fields, WORD_COLUMN])

    logger.info(f"Tokenized {len(df)} rows into {len(tokens)} tokens")
    return tokens
