# engine/general/token/__init__.py
"""
token.
=====

Does: Provide base token utilities for normalization, splitting and keyword extraction.
Exports: normalize_text, strip_punctuation, split_words, extract_keywords
Used by: Fuzzy matching, cheat detection and both scoring paths.
"""

from __future__ import annotations

from .keywords import extract_keywords
from .normalize import (
    normalize_text,
    split_words,
    strip_punctuation,
)

__all__ = [
    # normalize
    "normalize_text",
    "strip_punctuation",
    "split_words",
    # keywords
    "extract_keywords",
]
