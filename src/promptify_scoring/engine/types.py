# promptify_scoring/engine/types.py
from __future__ import annotations

"""
types.py.

Does: Define the immutable ScoringResult returned by both scoring paths.
"""

from dataclasses import dataclass
from typing import Any, Optional

from promptify_scoring.engine.constants import MAX_SCORE, MIN_SCORE

__all__ = ["ScoringResult"]

__docformat__ = "google"


@dataclass(frozen=True)
class ScoringResult:
    """
    Outcome of one scoring call.

    `keywords_matched` and `fuzzy_matched` are disjoint and follow extraction
    order. For symbol art they carry distinct symbols instead of words.
    `flag_reason` is set iff `flagged`.
    """

    score: int
    reasoning: str
    exact_match: bool = False
    keywords_matched: tuple[str, ...] = ()
    keywords_total: tuple[str, ...] = ()
    fuzzy_matched: tuple[str, ...] = ()
    flagged: bool = False
    flag_reason: Optional[str] = None

    def __post_init__(self) -> None:
        if not MIN_SCORE <= self.score <= MAX_SCORE:
            raise ValueError(f"score out of range: {self.score}")
        if not self.reasoning:
            raise ValueError("reasoning must not be empty")
        if self.flagged != (self.flag_reason is not None):
            raise ValueError("flag_reason must be set iff flagged")

    def as_dict(self) -> dict[str, Any]:
        """Does: JSON-ready mapping (lists instead of tuples) for storage or display."""
        return {
            "score": self.score,
            "reasoning": self.reasoning,
            "exact_match": self.exact_match,
            "keywords_matched": list(self.keywords_matched),
            "keywords_total": list(self.keywords_total),
            "fuzzy_matched": list(self.fuzzy_matched),
            "flagged": self.flagged,
            "flag_reason": self.flag_reason,
        }
