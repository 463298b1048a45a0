"""Exceptions raised by sketch comparisons and distance transforms."""
from __future__ import annotations

from typing import Any

__all__ = [
    "DistanceError",
    "IncompatibleSketchError",
    "UndefinedDistanceError",
    "InvalidSimilarityError",
]


class DistanceError(ValueError):
    """Base class for comparison failures."""


class IncompatibleSketchError(DistanceError):
    """Raised when two sketches differ in k-mer size or sketch size."""

    def __init__(self, attribute: str, left: Any, right: Any) -> None:
        super().__init__(f"sketches must have the same {attribute} (got {left} and {right})")
        self.attribute = attribute
        self.left = left
        self.right = right


class UndefinedDistanceError(DistanceError):
    """Raised when a distance is requested for a similarity of zero.

    No shared k-mers were observed, so the MASH model has no finite estimate
    at this sketch size.
    """

    def __init__(self, similarity: float, kmersize: int) -> None:
        super().__init__(
            f"MASH distance is undefined for similarity {similarity} (k={kmersize}); "
            "no shared hashes observed"
        )
        self.similarity = similarity
        self.kmersize = kmersize


class InvalidSimilarityError(DistanceError):
    """Raised when a similarity outside ``[0, 1]`` is passed to a transform."""

    def __init__(self, similarity: Any) -> None:
        super().__init__(f"similarity must be a number in [0, 1], got {similarity!r}")
        self.similarity = similarity
