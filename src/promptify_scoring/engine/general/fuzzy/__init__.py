# src/promptify_scoring/engine/general/fuzzy/__init__.py
"""
fuzzy.

Does: Facade exposing stable fuzzy utilities: edit distance, bounded
similarity and threshold matching.

Returns: Public API for distance/similarity scoring and best-word lookup.
Used by: Phrase scoring and cheat detection.
"""

from __future__ import annotations

from .fuzzy_core import (
    best_fuzzy_word,
    fuzzy_similarity,
    is_fuzzy_match,
    levenshtein_distance,
)

__all__ = [
    "levenshtein_distance",
    "fuzzy_similarity",
    "is_fuzzy_match",
    "best_fuzzy_word",
]

__docformat__ = "google"
