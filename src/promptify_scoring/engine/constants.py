# constants.py
# ============

"""
constants.
=========

Does: Define the immutable scoring policy: tier tables, fuzzy thresholds,
      cheat-detection cutoffs and symbol-art weights.
Used By: Cheat detection, phrase scoring, symbol-art scoring and their tests.
Returns: Pure data structures only (no side effects).

Tier tables are ordered from the highest threshold down; the first entry whose
threshold is reached gives the score. Anything below the last entry scores 0.
"""

from __future__ import annotations

MIN_SCORE = 0
MAX_SCORE = 5


# ── 1) Phrase scoring ────────────────────────────────────────────────────────

EXACT_PHRASE_SCORE = 5

# (min match ratio, score)
KEYWORD_TIERS: tuple[tuple[float, int], ...] = (
    (1.0, 4),
    (0.75, 3),
    (0.5, 2),
    (0.25, 1),
)

# Keyword ↔ generated word similarity must be strictly above this
KEYWORD_FUZZY_THRESHOLD = 0.75

# Keywords shorter than this are dropped during extraction
MIN_KEYWORD_LENGTH = 2


# ── 2) Cheat detection ───────────────────────────────────────────────────────

# Fraction of target words copied in order that flags a prompt
ORDERED_SUBSET_RATIO = 0.5

# Whole-prompt similarity must be strictly above this to flag
PROMPT_SIMILARITY_THRESHOLD = 0.85


# ── 3) Symbol-art scoring ────────────────────────────────────────────────────

EXACT_ART_SCORE = 5

ART_SYMBOL_WEIGHT = 0.5
ART_LINE_WEIGHT = 0.25
ART_CHAR_WEIGHT = 0.25

# (min overall similarity, score)
ART_TIERS: tuple[tuple[float, int], ...] = (
    (0.9, 4),
    (0.7, 3),
    (0.5, 2),
    (0.3, 1),
)


def tier_score(value: float, tiers: tuple[tuple[float, int], ...]) -> int:
    """
    Does: Map a ratio to a score using a descending (threshold, score) table.
    Returns: The first score whose threshold is reached, else MIN_SCORE.
    """
    for threshold, tier in tiers:
        if value >= threshold:
            return tier
    return MIN_SCORE
