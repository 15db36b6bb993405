"""
Lexicon join for token tables.

Tags each token occurrence with its lexicon categories. A word with several
categories fans out to one row per category; words absent from the lexicon
are dropped.
"""

from __future__ import annotations

import logging

import pandas as pd

from politemo.lexicon.emotion_lexicon import Category, EmotionLexicon
from politemo.preprocessing.tokenizer import WORD_COLUMN

logger = logging.getLogger(__name__)

CATEGORY_COLUMN = "category"


def join_lexicon(
    tokens: pd.DataFrame,
    lexicon: EmotionLexicon,
    categories: set[Category] | None = None,
) -> pd.DataFrame:
    """Inner-join a token table against the lexicon.

    Args:
        tokens: Token table with a ``word`` column.
        lexicon: Lexicon to join against.
        categories: Optional subset of categories to keep. All if None.

    Returns:
        New DataFrame with a ``category`` column, one row per
        (token occurrence, category) pair. Rows follow token order, then
        category schema order within a token.
    """
    def lookup(word: str) -> list[str]:
        return [
            c.value
            for c in lexicon.categories_for(word)
            if categories is None or c in categories
        ]

    matched = tokens.assign(**{CATEGORY_COLUMN: tokens[WORD_COLUMN].map(lookup)})
    joined = matched.explode(CATEGORY_COLUMN)
    joined = joined[joined[CATEGORY_COLUMN].notna()].reset_index(drop=True)

    logger.info(
        f"Joined {len(tokens)} tokens against lexicon: {len(joined)} category rows"
    )
    return joined
