"""
Emotion lexicon lookup for politemo.

Provides the word-level emotion lexicon and the token join against it.
"""

from politemo.lexicon.emotion_lexicon import Category, EmotionLexicon, load_lexicon
from politemo.lexicon.joiner import CATEGORY_COLUMN, join_lexicon

__all__ = [
    "CATEGORY_COLUMN",
    "Category",
    "EmotionLexicon",
    "join_lexicon",
    "load_lexicon",
]
