# src/promptify_scoring/engine/phrase/cheat.py
from __future__ import annotations

"""
cheat.py

Does: Decide whether a player's instruction leaks the target phrase, using a
      union of independent heuristics (equality, containment, in-order word
      copying, whole-prompt similarity).
Returns: detect_leak() → heuristic name or None; is_cheating() → bool;
         contains_ordered_subset() → bool; LEAK_REASONS for display.
Used by: Phrase scoring (first decision step).
"""

import logging
from typing import Optional

from promptify_scoring.engine.constants import (
    ORDERED_SUBSET_RATIO,
    PROMPT_SIMILARITY_THRESHOLD,
)
from promptify_scoring.engine.general.fuzzy import fuzzy_similarity
from promptify_scoring.engine.general.token import normalize_text

__all__ = [
    "LEAK_REASONS",
    "contains_ordered_subset",
    "detect_leak",
    "is_cheating",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# heuristic name → flag reason shown to the player
LEAK_REASONS: dict[str, str] = {
    "identical": "Prompt was the target phrase",
    "contains": "Prompt contained target phrase",
    "ordered_subset": "Prompt copied the target's words in order",
    "similar": "Prompt was too similar to the target phrase",
}


def contains_ordered_subset(
    prompt: str,
    target: str,
    min_ratio: float = ORDERED_SUBSET_RATIO,
) -> bool:
    """
    Does: Walk the prompt's words once, greedily consuming the target's words
          in order on exact equality (e.g. "the cage is" vs "the cage is out of the lion").
    Returns: True iff consumed / target word count ≥ min_ratio.
    """
    target_words = normalize_text(target).split()
    if not target_words:
        return False

    idx = 0
    for word in normalize_text(prompt).split():
        if idx < len(target_words) and word == target_words[idx]:
            idx += 1

    return idx / len(target_words) >= min_ratio


def detect_leak(user_prompt: str, target_phrase: str) -> Optional[str]:
    """
    Does: Run the leak heuristics in a fixed order and report the first hit.
          An empty target has nothing to leak.
    Returns: Key of LEAK_REASONS or None.
    """
    prompt = normalize_text(user_prompt)
    target = normalize_text(target_phrase)
    if not target:
        return None

    if prompt == target:
        reason = "identical"
    elif target in prompt:
        reason = "contains"
    elif contains_ordered_subset(prompt, target):
        reason = "ordered_subset"
    elif fuzzy_similarity(prompt, target) > PROMPT_SIMILARITY_THRESHOLD:
        reason = "similar"
    else:
        return None

    log.debug("[LEAK] %s: prompt=%r target=%r", reason, prompt, target)
    return reason


def is_cheating(user_prompt: str, target_phrase: str) -> bool:
    """
    Does: True if any leak heuristic fires.
    Returns: Boolean.
    """
    return detect_leak(user_prompt, target_phrase) is not None
