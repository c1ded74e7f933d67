"""closestmatch: edit distance and closest-match lookup for strings."""

from closestmatch.modules.matching import (
    ScoredCandidate,
    closest_match,
    distance,
    distance_matrix,
    iter_scores,
    score_candidates,
    select_closest,
)

__version__ = "0.1.0"

__all__ = [
    "ScoredCandidate",
    "__version__",
    "closest_match",
    "distance",
    "distance_matrix",
    "iter_scores",
    "score_candidates",
    "select_closest",
]
