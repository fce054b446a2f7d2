"""Tests for the lecture/page matching helpers in utils.fuzzy."""

import itertools
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from utils.fuzzy import (
    Candidate,
    best_match,
    find_similar,
    levenshtein_distance,
    rank_candidates,
    select_by_title,
    similarity_score,
)


WORDS = ["", "a", "kitten", "sitting", "flaw", "lawn", "intro to recursion", "recursion intro"]


# ---------------------------------------------------------------------------
# Edit distance
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("abc", "abc", 0),
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("Abc", "abc", 1),
    ],
)
def test_levenshtein_known_values(a, b, expected):
    assert levenshtein_distance(a, b) == expected


def test_levenshtein_is_symmetric():
    for a, b in itertools.product(WORDS, repeat=2):
        assert levenshtein_distance(a, b) == levenshtein_distance(b, a)


def test_levenshtein_identity_and_empty():
    for s in WORDS:
        assert levenshtein_distance(s, s) == 0
        assert levenshtein_distance("", s) == len(s)


def test_levenshtein_triangle_inequality():
    for a, b, c in itertools.product(WORDS, repeat=3):
        assert levenshtein_distance(a, c) <= levenshtein_distance(a, b) + levenshtein_distance(b, c)


# ---------------------------------------------------------------------------
# Similarity score
# ---------------------------------------------------------------------------


def test_score_exact_match_ignores_case_and_whitespace():
    assert similarity_score("Turing Machines", "  turing machines ") == 1.0


def test_score_substring_bonus():
    # edit: 1 - 9/16, overlap: 1/3 ({"lecture"} vs {"lecture", "1:", "intro"}), bonus: 0.3
    expected = (1 - 9 / 16) * 0.4 + (1 / 3) * 0.3 + 0.3
    assert similarity_score("lecture", "lecture 1: intro") == pytest.approx(expected)
    assert similarity_score("lecture", "lecture 1: intro") == pytest.approx(0.575)


def test_score_without_substring_or_overlap():
    # kitten -> sitting: distance 3 over length 7, no shared words
    assert similarity_score("kitten", "sitting") == pytest.approx((1 - 3 / 7) * 0.4)


def test_score_word_overlap_counts_distinct_words():
    # tokens {"alpha", "beta"} vs {"alpha"}: overlap 1/2; "alpha" is not a
    # superstring of "alpha beta" so no bonus
    expected = (1 - 5 / 10) * 0.4 + 0.5 * 0.3
    assert similarity_score("alpha beta", "alpha") == pytest.approx(expected)
    # repeated words collapse: still {"alpha", "beta"} vs {"alpha"}
    expected = (1 - 11 / 16) * 0.4 + 0.5 * 0.3
    assert similarity_score("alpha beta alpha", "alpha") == pytest.approx(expected)


def test_score_empty_inputs_do_not_raise():
    assert similarity_score("", "") == 1.0
    assert similarity_score("   ", "") == 1.0
    # empty query is a substring of anything
    assert similarity_score("", "abc") == pytest.approx(0.3)
    assert similarity_score("abc", "") == pytest.approx(0.0)


def test_score_higher_for_closer_strings():
    assert similarity_score("recursion", "intro to recursion") > similarity_score("recursion", "week3 notes")


# ---------------------------------------------------------------------------
# Best-score selection
# ---------------------------------------------------------------------------


def test_best_match_tie_goes_to_first_candidate():
    assert similarity_score("xyz", "alpha") == similarity_score("xyz", "beta")
    result = best_match("xyz", ["alpha", "beta"])
    assert result is not None
    assert result.candidate.name == "alpha"

    result = best_match("xyz", ["beta", "alpha"])
    assert result.candidate.name == "beta"


def test_best_match_empty_candidates():
    assert best_match("anything", []) is None
    assert rank_candidates("anything", []) == []


def test_best_match_end_to_end_lecture_files():
    files = ["midterm_review.txt", "intro_to_recursion.txt", "week3_notes.txt"]
    candidates = [
        Candidate(name=f[: -len(".txt")].replace("_", " "), ref=f)
        for f in files
    ]
    result = best_match("recursion intro", candidates)
    assert result.candidate.ref == "intro_to_recursion.txt"
    assert result.score == pytest.approx(0.4 * (1 - 15 / 18) + 0.3 * (2 / 3))


def test_best_match_exact_name_wins():
    result = best_match("Week3 Notes", ["midterm review", "week3 notes"])
    assert result.candidate.name == "week3 notes"
    assert result.score == 1.0


def test_rank_candidates_is_sorted_and_stable():
    ranked = rank_candidates("xyz", ["alpha", "beta", "xyz q"])
    assert [s.candidate.name for s in ranked] == ["xyz q", "alpha", "beta"]
    scores = [s.score for s in ranked]
    assert scores == sorted(scores, reverse=True)


def test_find_similar_filters_low_scores():
    assert find_similar("csc255", ["csc160", "csc254"]) == ["csc254"]
    assert find_similar("zzz", ["csc160", "csc254"]) == []
    assert find_similar("csc", []) == []


# ---------------------------------------------------------------------------
# Title selection (exact preferred, else first)
# ---------------------------------------------------------------------------


def test_select_by_title_prefers_first_exact_match():
    candidates = [
        Candidate(name="Week 1 Notes", ref="page-1"),
        Candidate(name="week 1 notes", ref="page-2"),
    ]
    match = select_by_title("Week 1 Notes", candidates, prefer_exact=True)
    assert match.id == "page-1"
    assert match.candidates == candidates


def test_select_by_title_exact_match_skips_earlier_non_matches():
    candidates = [
        Candidate(name="Week 1 Notes (old)", ref="page-1"),
        Candidate(name="  WEEK 1 NOTES ", ref="page-2"),
    ]
    assert select_by_title("week 1 notes", candidates, prefer_exact=True).id == "page-2"


def test_select_by_title_falls_back_to_first_not_best_score():
    candidates = [
        Candidate(name="Grocery List", ref="page-1"),
        Candidate(name="Week 1 Notes", ref="page-2"),
    ]
    # without prefer_exact the first result wins even though the second is identical
    assert select_by_title("Week 1 Notes", candidates, prefer_exact=False).id == "page-1"
    # with prefer_exact but no exact hit, same fallback
    assert select_by_title("Week 1", candidates, prefer_exact=True).id == "page-1"


def test_select_by_title_empty_candidates():
    match = select_by_title("Week 1 Notes", [], prefer_exact=True)
    assert match.id is None
    assert match.candidates == []
