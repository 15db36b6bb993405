"""
Word-level emotion lexicon.

Maps individual words to the emotion and sentiment categories they are
associated with, in the NRC Emotion Lexicon's category scheme.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

import pandas as pd

from politemo.errors import MissingReferenceDataError

logger = logging.getLogger(__name__)


class Category(Enum):
    """Emotion and sentiment categories, in lexicon schema order."""

    ANGER = "anger"
    ANTICIPATION = "anticipation"
    DISGUST = "disgust"
    FEAR = "fear"
    JOY = "joy"
    NEGATIVE = "negative"
    POSITIVE = "positive"
    SADNESS = "sadness"
    SURPRISE = "surprise"
    TRUST = "trust"

    @property
    def is_sentiment(self) -> bool:
        """Whether this is a polarity category rather than an emotion."""
        return self in (Category.NEGATIVE, Category.POSITIVE)


CATEGORY_ORDER = {category: index for index, category in enumerate(Category)}


@dataclass(frozen=True)
class EmotionLexicon:
    """Immutable mapping from word to its ordered categories."""

    entries: Mapping[str, tuple[Category, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    source: str = "custom"

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[str, str]],
        source: str = "custom",
    ) -> EmotionLexicon:
        """Build a lexicon from (word, category name) pairs.

        Unknown category names are skipped. Categories for each word are
        deduplicated and sorted into schema order.

        Args:
            pairs: Word and category name pairs.
            source: Description of where the pairs came from.

        Returns:
            EmotionLexicon instance.
        """
        collected: dict[str, set[Category]] = defaultdict(set)
        skipped = 0

        for word, name in pairs:
            try:
                category = Category(name.strip().lower())
            except ValueError:
                skipped += 1
                continue
            collected[word.strip().lower()].add(category)

        if skipped:
            logger.debug(f"Skipped {skipped} entries with unknown categories")

        entries = {
            word: tuple(sorted(categories, key=CATEGORY_ORDER.__getitem__))
            for word, categories in collected.items()
            if word
        }
        return cls(entries=MappingProxyType(entries), source=source)

    def categories_for(self, word: str) -> tuple[Category, ...]:
        """Get the categories of a word, empty if the word is not listed."""
        return self.entries.get(word, ())

    def words_in(self, category: Category) -> list[str]:
        """Get all words associated with a category, sorted."""
        return sorted(w for w, cats in self.entries.items() if category in cats)

    def __contains__(self, word: object) -> bool:
        return word in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def get_stats(self) -> dict[str, Any]:
        """Get lexicon statistics.

        Returns:
            Dictionary with stats.
        """
        return {
            "source": self.source,
            "total_words": len(self.entries),
            "total_associations": sum(len(cats) for cats in self.entries.values()),
            "category_counts": {
                category.value: sum(1 for cats in self.entries.values() if category in cats)
                for category in Category
            },
        }


def _read_nrc_wordlevel(path: Path) -> list[tuple[str, str]]:
    """Read the NRC word-level format: word, emotion, association (tab separated)."""
    df = pd.read_csv(
        path,
        sep="\t",
        header=None,
        names=["word", "emotion", "association"],
        dtype=str,
        keep_default_na=False,
    )
    associated = df[pd.to_numeric(df["association"], errors="coerce") == 1]
    return list(zip(associated["word"], associated["emotion"]))


def _read_word_sentiment_csv(path: Path) -> list[tuple[str, str]]:
    """Read a CSV with ``word`` and ``sentiment`` columns."""
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = {"word", "sentiment"} - set(df.columns)
    if missing:
        raise MissingReferenceDataError(
            "Lexicon", path, f"is missing columns {sorted(missing)}"
        )
    return list(zip(df["word"], df["sentiment"]))


def load_lexicon(path: str | Path) -> EmotionLexicon:
    """Load an emotion lexicon from a file.

    Expected formats:
    - ``.csv``: header row with ``word`` and ``sentiment`` columns,
      one row per (word, category) association.
    - anything else: NRC word-level text file, tab-separated
      ``word<TAB>emotion<TAB>association`` with no header; only rows
      whose association is 1 are kept.

    Args:
        path: Path to the lexicon file.

    Returns:
        EmotionLexicon instance.

    Raises:
        MissingReferenceDataError: If the file is absent or unreadable.
    """
    path = Path(path)
    if not path.is_file():
        raise MissingReferenceDataError("Lexicon", path)

    try:
        if path.suffix.lower() == ".csv":
            pairs = _read_word_sentiment_csv(path)
        else:
            pairs = _read_nrc_wordlevel(path)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise MissingReferenceDataError("Lexicon", path, f"is unreadable ({e})") from e

    lexicon = EmotionLexicon.from_pairs(pairs, source=str(path))
    logger.info(f"Loaded lexicon with {len(lexicon)} words from {path}")
    return lexicon
