"""Closest-match lookup over an ordered candidate collection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from closestmatch.infrastructure.text import to_text
from closestmatch.modules.matching.metric import levenshtein_distance

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

__all__ = [
    "ScoredCandidate",
    "closest_match",
    "iter_scores",
    "score_candidates",
    "select_closest",
]


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate and its edit distance to the query.

    Attributes:
        index: Position of the candidate in the original collection.
        candidate: Candidate text (as normalized, never the comparison key).
        distance: Edit distance to the query.
    """

    index: int
    candidate: str
    distance: int


def iter_scores(
    query: Any,
    candidates: Iterable[Any] | None,
    *,
    key: Callable[[str], str] | None = None,
) -> Iterator[ScoredCandidate]:
    """Yield the distance of every candidate to the query, in order.

    Args:
        query: Text to compare against.
        candidates: Ordered candidates. ``None`` counts as empty.
        key: Optional function applied to the query and each candidate
            before comparing, e.g. ``fold_text``.

    Yields:
        One ScoredCandidate per candidate.
    """
    target = to_text(query)
    if key is not None:
        target = key(target)

    for index, value in enumerate(candidates or ()):
        text = to_text(value)
        compared = key(text) if key is not None else text
        yield ScoredCandidate(
            index=index,
            candidate=text,
            distance=levenshtein_distance(target, compared),
        )


def score_candidates(
    query: Any,
    candidates: Iterable[Any] | None,
    *,
    key: Callable[[str], str] | None = None,
) -> list[ScoredCandidate]:
    """Score every candidate against the query.

    Returns:
        ScoredCandidates in original candidate order.
    """
    return list(iter_scores(query, candidates, key=key))


def closest_match(
    query: Any,
    candidates: Iterable[Any] | None,
    show_all: bool = False,
    *,
    key: Callable[[str], str] | None = None,
) -> str | list[str] | None:
    """Find the candidate(s) closest to the query by edit distance.

    Ties are resolved by original position only: single-match mode returns
    the earliest candidate at the minimum distance, all-matches mode returns
    every candidate at the minimum in their original order.

    Args:
        query: Text to match.
        candidates: Ordered candidates. ``None`` counts as empty.
        show_all: Return every tied candidate instead of the first one.
        key: Optional function applied to the query and each candidate
            before comparing. Returned values are never keyed.

    Returns:
        In single-match mode the closest candidate, or None when there are
        no candidates. In all-matches mode a list of the closest candidates,
        empty when there are no candidates.
    """
    return select_closest(iter_scores(query, candidates, key=key), show_all)


def select_closest(
    scores: Iterable[ScoredCandidate],
    show_all: bool = False,
) -> str | list[str] | None:
    """Pick the closest candidate(s) from already computed scores.

    Scores are consumed once, in order; an equal distance never displaces
    an earlier candidate.

    Args:
        scores: Scored candidates in original order.
        show_all: Return every tied candidate instead of the first one.

    Returns:
        Same shape as closest_match.
    """
    best_distance: float = math.inf
    matches: list[str] = []

    for scored in scores:
        if scored.distance < best_distance:
            best_distance = scored.distance
            matches = [scored.candidate]
        elif scored.distance == best_distance and show_all:
            matches.append(scored.candidate)

    if show_all:
        return matches
    return matches[0] if matches else None
