"""
phrase
======

Does: Expose the text-round scorer and its anti-cheat and keyword helpers.
Used by: The engine facade, the play loop and the demo CLI.
"""

from __future__ import annotations

from .cheat import (
    LEAK_REASONS,
    contains_ordered_subset,
    detect_leak,
    is_cheating,
)
from .keyword_match import (
    KeywordMatch,
    contains_exact_phrase,
    match_keywords,
)
from .phrase_scorer import score

__all__ = [
    # cheat
    "LEAK_REASONS",
    "contains_ordered_subset",
    "detect_leak",
    "is_cheating",
    # keywords
    "KeywordMatch",
    "contains_exact_phrase",
    "match_keywords",
    # scorer
    "score",
]
