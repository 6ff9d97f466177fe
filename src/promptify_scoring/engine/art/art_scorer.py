# src/promptify_scoring/engine/art/art_scorer.py
from __future__ import annotations

"""
art_scorer.py

Does: Score ASCII-art style targets by structure instead of words: distinct
      symbol overlap, non-blank line count and non-whitespace char count,
      combined into a weighted similarity mapped onto 0–5.
Returns: score_art() → ScoringResult, art_similarity() → ArtSimilarity.
Used by: Art rounds in the play loop and the demo CLI.
"""

import logging
import math
import re
from typing import NamedTuple

from promptify_scoring.engine.constants import (
    ART_CHAR_WEIGHT,
    ART_LINE_WEIGHT,
    ART_SYMBOL_WEIGHT,
    ART_TIERS,
    EXACT_ART_SCORE,
    MIN_SCORE,
    tier_score,
)
from promptify_scoring.engine.general.utils.log import debug as topic_debug
from promptify_scoring.engine.types import ScoringResult

__all__ = ["ArtSimilarity", "art_similarity", "distinct_symbols", "score_art"]

__docformat__ = "google"

log = logging.getLogger(__name__)

_WS_RE = re.compile(r"\s")

CHEAT_REASONING = "⚠️ Your prompt contained the target ASCII art. This is not allowed!"
CHEAT_FLAG_REASON = "Prompt contained target ASCII art"
EXACT_REASONING = "🎉 Perfect! The ASCII art matches exactly!"
EMPTY_TARGET_REASONING = "Target art has no symbols to compare."


class ArtSimilarity(NamedTuple):
    symbol: float
    line: float
    char: float
    matched_symbols: tuple[str, ...]
    target_symbols: tuple[str, ...]

    @property
    def overall(self) -> float:
        return (
            ART_SYMBOL_WEIGHT * self.symbol
            + ART_LINE_WEIGHT * self.line
            + ART_CHAR_WEIGHT * self.char
        )


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def distinct_symbols(art: str) -> tuple[str, ...]:
    """Does: Distinct non-whitespace characters in first-occurrence order."""
    return tuple(dict.fromkeys(_WS_RE.sub("", art or "")))


def _count_similarity(a: int, b: int) -> float:
    """1 - |a-b| / max(a, b); a zero denominator counts as no similarity."""
    denom = max(a, b)
    if denom == 0:
        return 0.0
    return 1.0 - abs(a - b) / denom


def _line_count(art: str) -> int:
    return sum(1 for line in art.split("\n") if line.strip())


def _char_count(art: str) -> int:
    return len(_WS_RE.sub("", art))


def _percent(value: float) -> int:
    # half-up, as displayed to players
    return int(math.floor(value * 100 + 0.5))


def art_similarity(target_art: str, generated_art: str) -> ArtSimilarity:
    """
    Does: Compute the three structural components over trimmed art.
    Returns: ArtSimilarity (each component in [0, 1]).
    """
    target = (target_art or "").strip()
    generated = (generated_art or "").strip()

    target_symbols = distinct_symbols(target)
    generated_symbols = set(distinct_symbols(generated))
    matched = tuple(s for s in target_symbols if s in generated_symbols)
    symbol = len(matched) / len(target_symbols) if target_symbols else 0.0

    return ArtSimilarity(
        symbol=symbol,
        line=_count_similarity(_line_count(target), _line_count(generated)),
        char=_count_similarity(_char_count(target), _char_count(generated)),
        matched_symbols=matched,
        target_symbols=target_symbols,
    )


def _art_reasoning(tier: int, sim: ArtSimilarity) -> str:
    pct = _percent(sim.overall)
    counts = f"{len(sim.matched_symbols)}/{len(sim.target_symbols)} symbols matched."
    if tier == 4:
        return f"✨ Almost perfect! {pct}% similarity. {counts}"
    if tier == 3:
        return f"👍 Good attempt! {pct}% similarity. {counts}"
    if tier == 2:
        return f"👌 Decent effort! {pct}% similarity. {counts}"
    if tier == 1:
        return f"🤔 Some similarity detected ({pct}%). Try matching more symbols and structure."
    return f"❌ Low similarity ({pct}%). Make sure to create ASCII art!"


# ─────────────────────────────────────────────────────────────────────────────
# Entry point
# ─────────────────────────────────────────────────────────────────────────────

def score_art(target_art: str, generated_art: str, user_prompt: str) -> ScoringResult:
    """
    Does: Cheat check (verbatim target in prompt) → exact match → weighted tiers.
    Returns: ScoringResult whose keyword fields carry distinct symbols.
    """
    target = (target_art or "").strip()
    generated = (generated_art or "").strip()
    symbols = distinct_symbols(target)

    if target and target in (user_prompt or ""):
        topic_debug("art flagged: target pasted into prompt", topic="scoring")
        return ScoringResult(
            score=MIN_SCORE,
            reasoning=CHEAT_REASONING,
            keywords_total=symbols,
            flagged=True,
            flag_reason=CHEAT_FLAG_REASON,
        )

    if not target:
        return ScoringResult(score=MIN_SCORE, reasoning=EMPTY_TARGET_REASONING)

    if target == generated:
        return ScoringResult(
            score=EXACT_ART_SCORE,
            reasoning=EXACT_REASONING,
            exact_match=True,
            keywords_matched=symbols,
            keywords_total=symbols,
        )

    sim = art_similarity(target, generated)
    tier = tier_score(sim.overall, ART_TIERS)
    log.debug(
        "[ART] symbol=%.3f line=%.3f char=%.3f overall=%.3f tier=%d",
        sim.symbol, sim.line, sim.char, sim.overall, tier,
    )

    return ScoringResult(
        score=tier,
        reasoning=_art_reasoning(tier, sim),
        keywords_matched=sim.matched_symbols,
        keywords_total=sim.target_symbols,
    )
