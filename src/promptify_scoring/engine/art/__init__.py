from __future__ import annotations

from .art_scorer import (
    ArtSimilarity,
    art_similarity,
    distinct_symbols,
    score_art,
)

__all__ = [
    "ArtSimilarity",
    "art_similarity",
    "distinct_symbols",
    "score_art",
]
