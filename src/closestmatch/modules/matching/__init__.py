"""String matching module."""

from closestmatch.modules.matching.finder import (
    ScoredCandidate,
    closest_match,
    iter_scores,
    score_candidates,
    select_closest,
)
from closestmatch.modules.matching.metric import (
    distance,
    distance_matrix,
    levenshtein_distance,
)

__all__ = [
    "ScoredCandidate",
    "closest_match",
    "distance",
    "distance_matrix",
    "iter_scores",
    "levenshtein_distance",
    "score_candidates",
    "select_closest",
]
