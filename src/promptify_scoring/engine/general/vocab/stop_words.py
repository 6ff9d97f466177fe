"""
stop_words.py.
=============

Does: Defines the closed English stop-word list removed before keyword matching.
Returns: STOP_WORDS → frozenset[str] for quick lookup and filtering.
"""

from __future__ import annotations

STOP_WORDS: frozenset[str] = frozenset(
    {
        # articles & auxiliaries
        "a", "an", "the", "is", "are", "was", "were", "be", "been", "being",
        "have", "has", "had", "do", "does", "did", "will", "would", "could",
        "should", "may", "might", "must", "shall", "can", "need", "dare",
        "ought", "used",
        # prepositions
        "to", "of", "in", "for", "on", "with", "at", "by", "from", "as",
        "into", "through", "during", "before", "after", "above", "below",
        "between", "under",
        # adverbs & determiners
        "again", "further", "then", "once", "here", "there", "when", "where",
        "why", "how", "all", "each", "few", "more", "most", "other", "some",
        "such", "no", "nor", "not", "only", "own", "same", "so", "than",
        "too", "very", "just",
        # conjunctions
        "and", "but", "if", "or", "because", "until", "while",
        # pronouns
        "it", "its", "i", "me", "my", "you", "your", "he", "she", "they",
        "them", "this", "that",
    }
)
