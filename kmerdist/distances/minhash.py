"""Distance measures for MinHash sketches.

A MinHash sketch keeps the ``s`` smallest hash values over the k-mers of a
sequence. Two sketches of the same size are compared by walking both in
order, and the shared fraction is turned into an evolutionary distance with
the MASH model (Ondov et al. 2016, doi:10.1186/s13059-016-0997-x).
"""
from __future__ import annotations

import math
from numbers import Real
from typing import Sequence

from kmerdist.sketch.model import MinHashSketch

from .errors import IncompatibleSketchError, InvalidSimilarityError, UndefinedDistanceError

__all__ = ["check_compatible", "count_matches", "jaccard_similarity", "mash_distance"]


def check_compatible(sketch_a: MinHashSketch, sketch_b: MinHashSketch) -> None:
    """Raise :class:`IncompatibleSketchError` unless ``k`` and ``s`` agree."""

    if sketch_a.kmersize != sketch_b.kmersize:
        raise IncompatibleSketchError("kmersize", sketch_a.kmersize, sketch_b.kmersize)
    if len(sketch_a) != len(sketch_b):
        raise IncompatibleSketchError("size", len(sketch_a), len(sketch_b))


def _merge_count(values_a: Sequence[int], values_b: Sequence[int], length: int) -> int:
    matches = 0
    i = 0
    j = 0
    while i < length and j < length:
        if values_a[i] == values_b[j]:
            matches += 1
            i += 1
            j += 1
        elif values_a[i] < values_b[j]:
            while i < length and values_a[i] < values_b[j]:
                i += 1
        else:
            while j < length and values_b[j] < values_a[i]:
                j += 1
    return matches


def count_matches(sketch_a: MinHashSketch, sketch_b: MinHashSketch) -> int:
    """Return the number of hash values shared by two compatible sketches."""

    check_compatible(sketch_a, sketch_b)
    return _merge_count(sketch_a.sketch, sketch_b.sketch, len(sketch_a))


def jaccard_similarity(sketch_a: MinHashSketch, sketch_b: MinHashSketch) -> float:
    """Estimate the Jaccard index of the sequences behind two sketches.

    The union of two bottom-``s`` sketches holds ``2s - matches`` distinct
    values, so the estimate is ``matches / (2s - matches)``. A full match
    returns exactly ``1.0``.
    """

    check_compatible(sketch_a, sketch_b)
    length = len(sketch_a)
    matches = _merge_count(sketch_a.sketch, sketch_b.sketch, length)
    if matches == length:
        return 1.0
    return matches / (2 * length - matches)


def mash_distance(similarity: float, kmersize: int) -> float:
    """Convert a Jaccard estimate into a MASH mutation distance.

    ``D = -(1/k) * ln(2j / (1 + j))``. A similarity of zero has no finite
    distance and raises :class:`UndefinedDistanceError`.
    """

    if isinstance(similarity, bool) or not isinstance(similarity, Real):
        raise InvalidSimilarityError(similarity)
    j = float(similarity)
    if math.isnan(j) or j < 0.0 or j > 1.0:
        raise InvalidSimilarityError(similarity)
    if isinstance(kmersize, bool) or not isinstance(kmersize, int) or kmersize < 1:
        raise ValueError(f"kmersize must be a positive integer, got {kmersize!r}")
    if j == 0.0:
        raise UndefinedDistanceError(j, kmersize)
    value = math.log((1.0 + j) / (2.0 * j)) / kmersize
    if not math.isfinite(value):
        raise UndefinedDistanceError(j, kmersize)
    return value
