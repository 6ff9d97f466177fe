"""
keywords.py

Does: Derive the ordered set of meaningful words of a phrase by stripping
      punctuation, short tokens and stop words.
Returns: extract_keywords() → tuple[str, ...] in first-occurrence order.
Used by: Phrase scoring (keyword overlap) and cheat flag results.
"""

from __future__ import annotations

from promptify_scoring.engine.constants import MIN_KEYWORD_LENGTH
from promptify_scoring.engine.general.vocab.stop_words import STOP_WORDS

from .normalize import split_words

__all__ = ["extract_keywords"]

__docformat__ = "google"


def extract_keywords(phrase: str) -> tuple[str, ...]:
    """
    Does: Normalize, drop punctuation, split, remove tokens shorter than
          MIN_KEYWORD_LENGTH and stop words, then dedupe keeping first occurrence.
    Returns: Tuple of keywords; empty when nothing meaningful survives.
    """
    words = (
        w
        for w in split_words(phrase, drop_punctuation=True)
        if len(w) >= MIN_KEYWORD_LENGTH and w not in STOP_WORDS
    )
    return tuple(dict.fromkeys(words))
