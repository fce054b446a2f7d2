"""Fuzzy matching for lecture and page lookups."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union


@dataclass(frozen=True)
class Candidate:
    """A named resource. Only ``name`` is scored; ``ref`` is resolved by the caller."""
    name: str
    ref: str


@dataclass(frozen=True)
class ScoredCandidate:
    candidate: Candidate
    score: float


@dataclass
class TitleMatch:
    """Result of a title lookup. ``id`` is None when nothing could be picked."""
    id: Optional[str]
    candidates: List[Candidate] = field(default_factory=list)


CandidateLike = Union[str, Candidate]


def levenshtein_distance(a: str, b: str) -> int:
    """
    Compute the edit distance between two strings.

    Counts the minimum number of single-character insertions, deletions
    or substitutions needed to turn ``a`` into ``b``. Comparison is exact,
    so callers that want case-insensitive matching must fold case first.

    Args:
        a: Source string
        b: Target string

    Returns:
        The edit distance (0 for identical strings, len(b) when a is empty)
    """
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(dp[i - 1][j], dp[i][j - 1], dp[i - 1][j - 1])

    return dp[m][n]


def normalize(text: str) -> str:
    return text.lower().strip()


def similarity_score(query: str, target: str) -> float:
    """
    Score how closely a target string matches a query.

    Both strings are lowercased and trimmed. An exact match scores 1.0.
    Otherwise the score is::

        edit_similarity * 0.4 + word_overlap * 0.3 + substring_bonus

    where edit_similarity is ``1 - distance / max_len``, word_overlap is the
    Jaccard similarity of the whitespace-separated word sets, and
    substring_bonus is 0.3 when the target contains the query.

    The result is NOT clamped: higher means more similar, but a non-exact
    match is not guaranteed to stay below 1.0.

    Args:
        query: The search query
        target: The string to compare against

    Returns:
        Similarity score (higher is better)
    """
    query_norm = normalize(query)
    target_norm = normalize(target)

    if query_norm == target_norm:
        return 1.0

    substring_bonus = 0.3 if query_norm in target_norm else 0.0

    max_len = max(len(query_norm), len(target_norm))
    if max_len == 0:
        edit_similarity = 1.0
    else:
        edit_similarity = 1 - levenshtein_distance(query_norm, target_norm) / max_len

    query_words = set(query_norm.split())
    target_words = set(target_norm.split())
    union = query_words | target_words
    word_overlap = len(query_words & target_words) / len(union) if union else 0.0

    return edit_similarity * 0.4 + word_overlap * 0.3 + substring_bonus


def _as_candidate(item: CandidateLike) -> Candidate:
    if isinstance(item, Candidate):
        return item
    return Candidate(name=item, ref=item)


def rank_candidates(query: str, candidates: Sequence[CandidateLike]) -> List[ScoredCandidate]:
    """
    Score every candidate and sort them best first.

    The sort is stable, so candidates with equal scores keep their
    original relative order.

    Args:
        query: The search query
        candidates: Names (or Candidate objects) to score

    Returns:
        List of ScoredCandidate, highest score first
    """
    scored = [
        ScoredCandidate(candidate, similarity_score(query, candidate.name))
        for candidate in map(_as_candidate, candidates)
    ]
    scored.sort(key=lambda s: s.score, reverse=True)
    return scored


def best_match(query: str, candidates: Sequence[CandidateLike]) -> Optional[ScoredCandidate]:
    """
    Pick the candidate that best matches the query.

    Ties go to whichever candidate appears first in ``candidates``.

    Returns:
        The winning ScoredCandidate, or None if there are no candidates
    """
    ranked = rank_candidates(query, candidates)
    if not ranked:
        return None
    return ranked[0]


def find_similar(
    query: str,
    candidates: Sequence[str],
    max_results: int = 3,
    min_score: float = 0.25,
) -> List[str]:
    """
    Suggest names similar to a query that did not match anything.

    Args:
        query: The search query
        candidates: List of possible matches
        max_results: Maximum number of suggestions to return
        min_score: Suggestions scoring at or below this are dropped

    Returns:
        List of similar names, most similar first
    """
    return [
        s.candidate.name
        for s in rank_candidates(query, candidates)[:max_results]
        if s.score > min_score
    ]


def select_by_title(query: str, candidates: Sequence[Candidate], prefer_exact: bool = True) -> TitleMatch:
    """
    Resolve a title to one of the candidates without fuzzy scoring.

    With ``prefer_exact`` the first candidate whose title equals the query
    (case-insensitive, trimmed) is returned. Otherwise, or when there is no
    exact hit, the first candidate wins: callers pass candidates already
    ordered by relevance (e.g. most recently edited first).

    Args:
        query: The title to look for
        candidates: Candidates with ``name`` as title and ``ref`` as id
        prefer_exact: Whether an exact title match takes precedence

    Returns:
        TitleMatch with the chosen id (None for an empty list) and all candidates
    """
    candidates = list(candidates)
    if not candidates:
        return TitleMatch(id=None, candidates=[])

    if prefer_exact:
        wanted = normalize(query)
        for candidate in candidates:
            if normalize(candidate.name or "") == wanted:
                return TitleMatch(id=candidate.ref, candidates=candidates)

    return TitleMatch(id=candidates[0].ref, candidates=candidates)
