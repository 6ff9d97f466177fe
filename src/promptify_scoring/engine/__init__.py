# promptify_scoring/engine/__init__.py

"""
engine
======

Does: Public facade of the scoring and anti-cheat engine.
Returns: The two pure entry points `score` (text rounds) and `score_art`
         (symbol-art rounds), the ScoringResult type and the building blocks
         callers commonly reuse.
Used by: Game servers, the demo CLI and tests.
"""

from __future__ import annotations

from .art import score_art
from .general.fuzzy import fuzzy_similarity, levenshtein_distance
from .general.token import extract_keywords, normalize_text
from .phrase import is_cheating, score
from .types import ScoringResult

__all__ = [
    "ScoringResult",
    "score",
    "score_art",
    "is_cheating",
    "normalize_text",
    "extract_keywords",
    "levenshtein_distance",
    "fuzzy_similarity",
]

__docformat__ = "google"
