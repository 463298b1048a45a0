"""Pairwise mutation counting between aligned nucleotide sequences."""
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

__all__ = ["CERTAIN_BASES", "count_mutations", "count_pairwise", "gene_frequencies"]

CERTAIN_BASES = frozenset("ACGT")

MutationCount = Tuple[int, int]


def _normalise_base(base: str) -> str:
    base = base.upper()
    return "T" if base == "U" else base


def count_mutations(seq_a: str, seq_b: str) -> MutationCount:
    """Return ``(mutated, sites)`` for two equal-length sequences.

    Only sites where both bases are certain (A, C, G, T) are counted; gaps and
    ambiguity codes are skipped.
    """

    if len(seq_a) != len(seq_b):
        raise ValueError(f"Sequences must share the same length ({len(seq_a)} != {len(seq_b)})")
    mutated = 0
    sites = 0
    for raw_a, raw_b in zip(seq_a, seq_b):
        base_a = _normalise_base(raw_a)
        base_b = _normalise_base(raw_b)
        if base_a not in CERTAIN_BASES or base_b not in CERTAIN_BASES:
            continue
        sites += 1
        if base_a != base_b:
            mutated += 1
    return mutated, sites


def count_pairwise(sequences: Sequence[str]) -> List[List[MutationCount]]:
    """Return the symmetric matrix of :func:`count_mutations` results."""

    n = len(sequences)
    matrix: List[List[MutationCount]] = [[(0, 0)] * n for _ in range(n)]
    for i in range(n):
        matrix[i][i] = count_mutations(sequences[i], sequences[i])
        for j in range(i + 1, n):
            counts = count_mutations(sequences[i], sequences[j])
            matrix[i][j] = counts
            matrix[j][i] = counts
    return matrix


def gene_frequencies(sequences: Iterable[str]) -> Dict[str, float]:
    """Relative frequency of each distinct sequence, in first-seen order."""

    counts: Dict[str, int] = {}
    total = 0
    for sequence in sequences:
        counts[sequence] = counts.get(sequence, 0) + 1
        total += 1
    if total == 0:
        return {}
    return {sequence: count / total for sequence, count in counts.items()}
