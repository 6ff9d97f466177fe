# src/promptify_scoring/engine/phrase/phrase_scorer.py
from __future__ import annotations

"""
phrase_scorer.py

Does: Main phrase entry point. Single-pass decision: cheat check → exact
      phrase → keyword-overlap tiers, first match wins.
Returns: score(target_phrase, generated_text, user_prompt) → ScoringResult (0–5).
Used by: The play loop, the demo CLI and any caller judging text rounds.

Scoring criteria:
  5: exact phrase found in the output
  4: all keywords matched (exact or fuzzy)
  3: ≥75% keywords    2: ≥50%    1: ≥25%
  0: fewer keywords, no extractable keywords, or flagged for cheating
"""

import logging

from promptify_scoring.engine.constants import (
    EXACT_PHRASE_SCORE,
    KEYWORD_TIERS,
    MIN_SCORE,
    tier_score,
)
from promptify_scoring.engine.general.token import extract_keywords
from promptify_scoring.engine.general.utils.log import debug as topic_debug
from promptify_scoring.engine.phrase.cheat import LEAK_REASONS, detect_leak
from promptify_scoring.engine.phrase.keyword_match import (
    KeywordMatch,
    contains_exact_phrase,
    match_keywords,
)
from promptify_scoring.engine.types import ScoringResult

__all__ = ["score", "keyword_reasoning"]

__docformat__ = "google"

log = logging.getLogger(__name__)

CHEAT_REASONING = (
    "⚠️ Your prompt contained the target phrase or was too similar to it. "
    "This is not allowed!"
)
EXACT_REASONING = "🎉 Perfect! The exact target phrase was found in the AI's output!"
NO_KEYWORDS_REASONING = "Could not extract meaningful keywords from target phrase."


def keyword_reasoning(tier: int, match: KeywordMatch) -> str:
    """
    Does: Build the player-facing explanation for a keyword tier.
    Returns: Non-empty string listing keywords in extraction order.
    """
    found = ", ".join(match.found)
    total = len(match.total)

    if tier == 4:
        return (
            f"✨ Excellent! All {total} keywords matched "
            f"({len(match.matched)} exact, {len(match.fuzzy)} fuzzy). "
            "Just missing the exact phrase!"
        )
    if tier == 3:
        return f"👍 Great job! {len(match.found)}/{total} keywords matched. Keywords found: {found}"
    if tier == 2:
        return f"👌 Good effort! {len(match.found)}/{total} keywords matched. Keywords found: {found}"
    if tier == 1:
        return f"🤔 Some keywords matched: {found}. Missing: {', '.join(match.missing)}"
    return f"❌ Few keywords matched. Looking for: {', '.join(match.total)}"


def score(target_phrase: str, generated_text: str, user_prompt: str) -> ScoringResult:
    """
    Does: Judge generated text against the target phrase, penalizing leaky prompts.
    Returns: ScoringResult; never raises for str inputs.
    """
    # 1) cheat check
    leak = detect_leak(user_prompt, target_phrase)
    if leak is not None:
        topic_debug(f"flagged ({leak}) target={target_phrase!r}", topic="scoring")
        return ScoringResult(
            score=MIN_SCORE,
            reasoning=CHEAT_REASONING,
            keywords_total=extract_keywords(target_phrase),
            flagged=True,
            flag_reason=LEAK_REASONS[leak],
        )

    # 2) exact phrase in output
    if contains_exact_phrase(target_phrase, generated_text):
        keywords = extract_keywords(target_phrase)
        topic_debug(f"exact phrase target={target_phrase!r}", topic="scoring")
        return ScoringResult(
            score=EXACT_PHRASE_SCORE,
            reasoning=EXACT_REASONING,
            exact_match=True,
            keywords_matched=keywords,
            keywords_total=keywords,
        )

    # 3) keyword overlap
    match = match_keywords(target_phrase, generated_text)
    if not match.total:
        return ScoringResult(score=MIN_SCORE, reasoning=NO_KEYWORDS_REASONING)

    tier = tier_score(match.ratio, KEYWORD_TIERS)
    log.debug(
        "[KEYWORDS] ratio=%.3f tier=%d exact=%s fuzzy=%s",
        match.ratio, tier, match.matched, match.fuzzy,
    )
    topic_debug(
        f"keywords {len(match.found)}/{len(match.total)} → {tier}", topic="scoring"
    )

    return ScoringResult(
        score=tier,
        reasoning=keyword_reasoning(tier, match),
        keywords_matched=match.matched,
        keywords_total=match.total,
        fuzzy_matched=match.fuzzy,
    )
