"""Sketch similarity and evolutionary distance estimation."""

from .errors import DistanceError, IncompatibleSketchError, InvalidSimilarityError, UndefinedDistanceError
from .metrics import (
    METRICS,
    Metric,
    available_metrics,
    compare,
    distance,
    jaccard,
    mash,
    register_metric,
    similarity,
)
from .minhash import check_compatible, count_matches, jaccard_similarity, mash_distance

__all__ = [
    "DistanceError",
    "IncompatibleSketchError",
    "InvalidSimilarityError",
    "UndefinedDistanceError",
    "METRICS",
    "Metric",
    "available_metrics",
    "compare",
    "distance",
    "jaccard",
    "mash",
    "register_metric",
    "similarity",
    "check_compatible",
    "count_matches",
    "jaccard_similarity",
    "mash_distance",
]
