"""
Text preprocessing for politemo.

Provides tokenization and stopword filtering for statement text.
"""

from politemo.preprocessing.stopwords import StopwordSet, filter_stopwords, load_stopwords
from politemo.preprocessing.tokenizer import TokenStream, tokenize, unnest_tokens

__all__ = [
    "StopwordSet",
    "TokenStream",
    "filter_stopwords",
    "load_stopwords",
    "tokenize",
    "unnest_tokens",
]
