# src/promptify_scoring/engine/general/fuzzy/fuzzy_core.py
from __future__ import annotations

"""
fuzzy_core.py

Does: Core fuzzy engine for string comparison: unit-cost edit distance,
      bounded similarity on normalized text, and threshold/best-word helpers.
Returns: levenshtein_distance, fuzzy_similarity, is_fuzzy_match, best_fuzzy_word.
Used by: Keyword overlap scoring and cheat detection.
"""

import logging
from typing import Iterable, Optional

from rapidfuzz.distance import Levenshtein

from promptify_scoring.engine.general.token.normalize import normalize_text

__all__ = [
    "levenshtein_distance",
    "fuzzy_similarity",
    "is_fuzzy_match",
    "best_fuzzy_word",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
# insertion, deletion, substitution
UNIT_WEIGHTS = (1, 1, 1)


# ─────────────────────────────────────────────────────────────────────────────
# 1) EDIT DISTANCE
# ─────────────────────────────────────────────────────────────────────────────

def levenshtein_distance(a: str, b: str) -> int:
    """
    Does: Classic Levenshtein distance (insert/delete/substitute, cost 1 each),
          compared character by character without any normalization.
    Returns: Non-negative int; 0 for two empty strings.
    """
    return Levenshtein.distance(a or "", b or "", weights=UNIT_WEIGHTS)


# ─────────────────────────────────────────────────────────────────────────────
# 2) BOUNDED SIMILARITY
# ─────────────────────────────────────────────────────────────────────────────

def fuzzy_similarity(a: str, b: str) -> float:
    """
    Does: Normalize both strings, then 1 - distance / longest length.
          Identical (including both empty) → 1.0; exactly one empty → 0.0.
    Returns: Float in [0, 1].
    """
    s1 = normalize_text(a)
    s2 = normalize_text(b)

    if s1 == s2:
        return 1.0
    if not s1 or not s2:
        return 0.0

    distance = levenshtein_distance(s1, s2)
    return 1.0 - distance / max(len(s1), len(s2))


def is_fuzzy_match(a: str, b: str, threshold: float) -> bool:
    """
    Does: Strict threshold test on fuzzy_similarity.
    Returns: True iff similarity > threshold.
    """
    return fuzzy_similarity(a, b) > threshold


def best_fuzzy_word(
    keyword: str,
    words: Iterable[str],
    threshold: float,
    debug: bool = False,
) -> Optional[str]:
    """
    Does: Scan words in order and stop at the first one similar enough to keyword.
    Returns: The matching word or None.
    """
    for word in words:
        if not word:
            continue
        sim = fuzzy_similarity(keyword, word)
        if sim > threshold:
            if debug:
                log.debug("[FUZZY>%.2f] %r ~ %r = %.3f", threshold, keyword, word, sim)
            return word
    return None
