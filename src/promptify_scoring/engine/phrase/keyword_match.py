"""
keyword_match.py

Does: Locate the target phrase or its keywords inside generated text.
      A keyword matches exactly when it occurs literally in the normalized
      text, otherwise fuzzily when some generated word is similar enough.
Returns: contains_exact_phrase() → bool, match_keywords() → KeywordMatch.
Used by: Phrase scoring.
"""

from __future__ import annotations

from typing import NamedTuple

from promptify_scoring.engine.constants import KEYWORD_FUZZY_THRESHOLD
from promptify_scoring.engine.general.fuzzy import best_fuzzy_word
from promptify_scoring.engine.general.token import (
    extract_keywords,
    normalize_text,
    split_words,
)

__all__ = ["KeywordMatch", "contains_exact_phrase", "match_keywords"]


class KeywordMatch(NamedTuple):
    matched: tuple[str, ...]
    fuzzy: tuple[str, ...]
    total: tuple[str, ...]

    @property
    def found(self) -> tuple[str, ...]:
        """Exact matches then fuzzy matches."""
        return self.matched + self.fuzzy

    @property
    def missing(self) -> tuple[str, ...]:
        hits = set(self.found)
        return tuple(k for k in self.total if k not in hits)

    @property
    def ratio(self) -> float:
        if not self.total:
            return 0.0
        return len(self.found) / len(self.total)


def contains_exact_phrase(target_phrase: str, generated_text: str) -> bool:
    """Does: True iff the (non-empty) normalized target occurs in the normalized text."""
    target = normalize_text(target_phrase)
    return bool(target) and target in normalize_text(generated_text)


def match_keywords(
    target_phrase: str,
    generated_text: str,
    *,
    threshold: float = KEYWORD_FUZZY_THRESHOLD,
    debug: bool = False,
) -> KeywordMatch:
    """
    Does: Classify each target keyword as exact, fuzzy or unmatched.
    Returns: KeywordMatch with all three sequences in extraction order.
    """
    keywords = extract_keywords(target_phrase)
    text = normalize_text(generated_text)
    words = split_words(text, drop_punctuation=True)

    matched: list[str] = []
    fuzzy: list[str] = []
    for keyword in keywords:
        if keyword in text:
            matched.append(keyword)
        elif best_fuzzy_word(keyword, words, threshold, debug=debug) is not None:
            fuzzy.append(keyword)

    return KeywordMatch(tuple(matched), tuple(fuzzy), keywords)
