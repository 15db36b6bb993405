"""
politemo - Emotion Lexicon Analysis of Fact-Checked Political Statements

A small Python package for loading labeled political statements,
tokenizing them, tagging tokens with lexicon emotions, and summarizing
the result by label, party, subject, and category.
"""

__version__ = "0.1.0"

from politemo.config import Config, load_config

__all__ = [
    "__version__",
    "Config",
    "load_config",
]
