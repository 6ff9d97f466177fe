# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level play loop around the pure scorers: send the player's
      instruction to a generator, score the reply with the scorer matching the
      target kind, and summarize attempts.
Returns:
  - play(target, user_prompt, generator) -> PlayResult(generated, result)
  - score_for(kind, target_text, generated, user_prompt) -> ScoringResult
  - best_attempt(results) -> int | None
  - average_score(results) -> int
Used by: The demo CLI and any game server wiring a real model to the engine.
"""

import logging
import math
from typing import NamedTuple, Sequence

from promptify_scoring.engine.art import score_art
from promptify_scoring.engine.llm.types import GeneratorProtocol
from promptify_scoring.engine.phrase import score
from promptify_scoring.engine.rounds import Kind, Target
from promptify_scoring.engine.types import ScoringResult

logger = logging.getLogger(__name__)

__all__ = [
    "GenerationError",
    "PlayResult",
    "average_score",
    "best_attempt",
    "play",
    "score_for",
]


class GenerationError(RuntimeError):
    """Raise when the generator produced no text for an instruction."""


class PlayResult(NamedTuple):
    generated: str
    result: ScoringResult


def score_for(kind: Kind, target_text: str, generated: str, user_prompt: str) -> ScoringResult:
    """Does: Dispatch to the phrase or symbol-art scorer."""
    if kind == "art":
        return score_art(target_text, generated, user_prompt)
    if kind == "phrase":
        return score(target_text, generated, user_prompt)
    raise ValueError(f"Unknown target kind '{kind}'")


def play(
    target: Target,
    user_prompt: str,
    generator: GeneratorProtocol,
) -> PlayResult:
    """
    Does: One attempt: generate from the player's instruction, then score it.
          Retrying a failed generation is the generator's job, not ours.
    Raises: GenerationError when the generator returns nothing.
    """
    generated = generator.generate(user_prompt)
    if not generated:
        raise GenerationError(f"No text generated for target {target.id!r}")

    result = score_for(target.kind, target.text, generated, user_prompt)
    logger.info(
        "[PLAY] target=%s score=%d flagged=%s", target.id, result.score, result.flagged
    )
    return PlayResult(generated=generated, result=result)


def best_attempt(results: Sequence[ScoringResult]) -> int | None:
    """
    Does: Pick the highest-scoring attempt; unflagged attempts beat flagged ones
          and the earliest attempt wins ties.
    Returns: Index into results, or None when empty.
    """
    if not results:
        return None
    return max(
        range(len(results)),
        key=lambda i: (not results[i].flagged, results[i].score, -i),
    )


def average_score(results: Sequence[ScoringResult]) -> int:
    """Does: Round-half-up mean of the scores (0 for no results)."""
    if not results:
        return 0
    mean = sum(r.score for r in results) / len(results)
    return int(math.floor(mean + 0.5))
