from __future__ import annotations

import pytest

from promptify_scoring.engine import score_art
from promptify_scoring.engine.art import art_scorer as A
from promptify_scoring.engine.constants import ART_TIERS, tier_score

"""
Tests: art/art_scorer.py (cheat check, exact match, weighted structural tiers).
"""

CAT = " /\\_/\\\n( o.o )\n > ^ <"
CAT_SYMBOLS = ("/", "\\", "_", "(", "o", ".", ")", ">", "^", "<")


def test_identical_art_scores_five():
    res = score_art(CAT, CAT, "anything")
    assert res.score == 5
    assert res.exact_match is True
    assert res.keywords_total == CAT_SYMBOLS
    assert res.keywords_matched == CAT_SYMBOLS


def test_surrounding_whitespace_is_ignored_for_exact_match():
    res = score_art("  ab\ncd\n\n", "ab\ncd", "draw letters")
    assert res.score == 5 and res.exact_match is True


def test_pasting_target_into_prompt_is_flagged():
    res = score_art(CAT, CAT, f"please copy this:\n{CAT.strip()}")
    assert res.flagged is True
    assert res.score == 0
    assert res.flag_reason == A.CHEAT_FLAG_REASON
    assert res.keywords_total == CAT_SYMBOLS
    assert res.keywords_matched == ()


def test_empty_target_scores_zero_without_flag():
    for target in ("", "   \n "):
        res = score_art(target, "x", "draw something")
        assert res.score == 0
        assert res.flagged is False
        assert res.reasoning == A.EMPTY_TARGET_REASONING


@pytest.mark.parametrize(
    "target, generated, expected_score, expected_overall",
    [
        # symbol 1, line 1, char 1 (same symbols rearranged)
        ("ab\ncd", "ab\ndc", 4, 1.0),
        # symbol 1, line 0.5, char 0.75
        ("##\n##", "###", 3, 0.8125),
        # symbol 0.5, line 1, char 0.5
        ("abcd", "ab", 2, 0.625),
        # symbol 0, line 0.5, char 0.75
        ("##\n##", "abc", 1, 0.3125),
        # nothing generated
        ("#", "", 0, 0.0),
    ],
)
def test_weighted_tiers(target, generated, expected_score, expected_overall):
    sim = A.art_similarity(target, generated)
    assert sim.overall == pytest.approx(expected_overall)
    res = score_art(target, generated, "draw it")
    assert res.score == expected_score
    assert res.exact_match is False
    assert res.flagged is False


def test_symbol_lists_carry_matched_and_total_symbols():
    res = score_art("abcd", "ab", "draw it")
    assert res.keywords_matched == ("a", "b")
    assert res.keywords_total == ("a", "b", "c", "d")
    assert res.fuzzy_matched == ()


def test_reasoning_reports_rounded_percentages():
    assert score_art("##\n##", "###", "p").reasoning == (
        "👍 Good attempt! 81% similarity. 1/1 symbols matched."
    )
    assert score_art("ab\ncd", "ab\ndc", "p").reasoning == (
        "✨ Almost perfect! 100% similarity. 4/4 symbols matched."
    )
    assert score_art("##\n##", "abc", "p").reasoning.startswith("🤔 Some similarity detected (31%)")


def test_zero_denominators_do_not_raise():
    sim = A.art_similarity("", "")
    assert (sim.symbol, sim.line, sim.char) == (0.0, 0.0, 0.0)
    assert sim.overall == 0.0


def test_blank_lines_are_not_counted():
    sim = A.art_similarity("a\n\n\nb", "a\nb")
    assert sim.line == 1.0


def test_distinct_symbols_order_and_whitespace():
    assert A.distinct_symbols(" a b\ta\nc ") == ("a", "b", "c")


@pytest.mark.parametrize(
    "similarity, expected",
    [
        (1.0, 4),
        (0.9, 4),
        (0.89, 3),
        (0.7, 3),
        (0.69, 2),
        (0.5, 2),
        (0.49, 1),
        (0.3, 1),
        (0.29, 0),
        (0.0, 0),
    ],
)
def test_art_tier_boundaries(similarity, expected):
    assert tier_score(similarity, ART_TIERS) == expected
