# engine/general/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Shared utilities for text normalization and word splitting
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Provide deterministic text normalization (lowercasing, trimming,
      whitespace collapsing), punctuation stripping and word splitting.
Returns: normalize_text(), strip_punctuation(), split_words().
Used by: Keyword extraction, fuzzy similarity, cheat detection and scorers.
"""

from __future__ import annotations

import re

__all__ = [
    "normalize_text",
    "strip_punctuation",
    "split_words",
]

_WHITESPACE_RE = re.compile(r"\s+")
_PUNCT_RE = re.compile(r"[^\w\s]")


# ──────────────────────────────────────────────────────────────
# 1) TEXT NORMALIZATION
# ──────────────────────────────────────────────────────────────


def normalize_text(text: str) -> str:
    """
    Does: Lowercase, trim, and collapse any whitespace run to one space.
          Idempotent: normalize_text(normalize_text(x)) == normalize_text(x).
    Returns: Normalized string ("" for empty or non-str input).
    """
    if not isinstance(text, str):
        return ""
    return _WHITESPACE_RE.sub(" ", text.lower().strip())


def strip_punctuation(text: str) -> str:
    """
    Does: Remove every character that is neither a word character nor whitespace.
    Returns: String with punctuation removed (spacing untouched).
    """
    if not isinstance(text, str):
        return ""
    return _PUNCT_RE.sub("", text)


# ──────────────────────────────────────────────────────────────
# 2) WORD SPLITTING
# ──────────────────────────────────────────────────────────────


def split_words(text: str, *, drop_punctuation: bool = False) -> list[str]:
    """
    Does: Normalize, optionally strip punctuation, then split on whitespace.
    Returns: List of words in order (empty list for blank input).
    """
    s = normalize_text(text)
    if drop_punctuation:
        s = strip_punctuation(s)
    return s.split()
