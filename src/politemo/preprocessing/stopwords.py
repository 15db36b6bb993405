"""
Stopword reference data and filtering.

Stopwords are loaded once into an immutable set and passed into the
filtering stage explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd
from spacy.lang.en.stop_words import STOP_WORDS

from politemo.errors import MissingReferenceDataError
from politemo.preprocessing.tokenizer import WORD_COLUMN

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StopwordSet:
    """Immutable set of lowercase stopwords."""

    words: frozenset[str]
    source: str = "custom"

    @classmethod
    def from_words(cls, words: Iterable[str], source: str = "custom") -> StopwordSet:
        """Build a stopword set, lowercasing and dropping blanks."""
        cleaned = {w.strip().lower() for w in words}
        cleaned.discard("")
        return cls(words=frozenset(cleaned), source=source)

    @classmethod
    def from_spacy(cls) -> StopwordSet:
        """Build the default stopword set from spaCy's English list."""
        return cls.from_words(STOP_WORDS, source="spacy")

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)


def load_stopwords(path: str | Path) -> StopwordSet:
    """Load stopwords from a file.

    Two layouts are accepted: a plain list with one word per line, or a
    CSV file with a header that includes a ``word`` column (other columns,
    such as the source lexicon, are ignored).

    Args:
        path: Path to the stopword file.

    Returns:
        StopwordSet with every word in the file.

    Raises:
        MissingReferenceDataError: If the file is absent or unreadable.
    """
    path = Path(path)
    if not path.is_file():
        raise MissingReferenceDataError("Stopwords", path)

    try:
        if path.suffix.lower() == ".csv":
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
            if WORD_COLUMN not in df.columns:
                raise MissingReferenceDataError(
                    "Stopwords", path, f"has no '{WORD_COLUMN}' column"
                )
            words = df[WORD_COLUMN].tolist()
        else:
            with open(path, encoding="utf-8") as f:
                words = f.read().splitlines()
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise MissingReferenceDataError("Stopwords", path, f"is unreadable ({e})") from e

    stopwords = StopwordSet.from_words(words, source=str(path))
    logger.info(f"Loaded {len(stopwords)} stopwords from {path}")
    return stopwords


def filter_stopwords(tokens: pd.DataFrame, stopwords: StopwordSet) -> pd.DataFrame:
    """Drop token rows whose word is a stopword.

    Args:
        tokens: Token table with a ``word`` column.
        stopwords: Stopword set to exclude.

    Returns:
        New DataFrame with the remaining rows, in their original order.
    """
    keep = ~tokens[WORD_COLUMN].isin(list(stopwords.words))
    filtered = tokens.loc[keep].reset_index(drop=True)

    logger.info(f"Removed {len(tokens) - len(filtered)} stopword tokens, {len(filtered)} remain")
    return filtered
