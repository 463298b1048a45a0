"""Immutable MinHash sketch value type."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple

__all__ = ["MinHashSketch"]


@dataclass(frozen=True)
class MinHashSketch:
    """The ``s`` smallest k-mer hash values of a sequence, in ascending order.

    Ordering is not checked here. Comparisons over an unordered sketch return
    wrong answers rather than failing; use :func:`kmerdist.utils.validate.validate_sketch_document`
    when loading untrusted data.
    """

    kmersize: int
    sketch: Tuple[int, ...] = field(default_factory=tuple)
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.kmersize, bool) or not isinstance(self.kmersize, int) or self.kmersize < 1:
            raise ValueError(f"kmersize must be a positive integer, got {self.kmersize!r}")
        if not isinstance(self.sketch, tuple):
            object.__setattr__(self, "sketch", tuple(self.sketch))

    @classmethod
    def from_hashes(cls, kmersize: int, hashes: Iterable[int], name: Optional[str] = None) -> "MinHashSketch":
        return cls(kmersize=kmersize, sketch=tuple(int(value) for value in hashes), name=name)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "MinHashSketch":
        """Build a sketch from a ``{"kmersize", "sketch", "name"}`` document."""

        return cls.from_hashes(
            int(payload["kmersize"]),
            payload.get("sketch", []),
            name=payload.get("name"),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"kmersize": self.kmersize, "sketch": list(self.sketch)}
        if self.name is not None:
            payload["name"] = self.name
        return payload

    def size(self) -> int:
        return len(self.sketch)

    def __len__(self) -> int:
        return len(self.sketch)

    def __iter__(self) -> Iterator[int]:
        return iter(self.sketch)
