"""Population-level diversity statistics built on pairwise mutation counts."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from .mutations import count_mutations, count_pairwise, gene_frequencies

__all__ = ["pdist", "nl79_from_matrix", "nl79", "avg_mut"]


def pdist(matrix: Sequence[Sequence[Tuple[int, int]]]) -> List[List[float]]:
    """Convert ``(mutated, sites)`` pairs into per-site mutation proportions."""

    return [
        [mutated / sites if sites else 0.0 for mutated, sites in row]
        for row in matrix
    ]


def nl79_from_matrix(m: Sequence[Sequence[float]], f: Sequence[float]) -> float:
    """Nucleotide diversity from a proportion matrix ``m`` and frequencies ``f``."""

    n = len(f)
    if len(m) != n or any(len(row) != n for row in m):
        raise ValueError(f"Mutation matrix must be {n}x{n} to match the frequency vector")
    pi = 0.0
    for i in range(n):
        for j in range(i + 1, n):
            pi += m[i][j] * f[i] * f[j]
    return 2 * pi


def nl79(sequences: Sequence[str]) -> float:
    """Nucleotide diversity (pi) as described by Nei and Li (1979).

    The average number of nucleotide differences per site between two
    sequences drawn from the sample, weighted by the frequency of each
    distinct sequence. Samples with fewer than two distinct sequences have no
    diversity and return ``0.0``.

    >>> round(nl79(["AAAACTTTTACCCCCGGGGG"] * 4 + ["AAAAATTTTACCCCCGTGGG"] * 2
    ...            + ["AAAACTTTTTCCCCCGTAGG"] * 2 + ["AAAAATTTTTCCCCCGGAGG"] * 2), 6)
    0.096
    """

    frequencies = gene_frequencies(sequences)
    unique_sequences = list(frequencies)
    if len(unique_sequences) < 2:
        return 0.0
    proportions = pdist(count_pairwise(unique_sequences))
    return nl79_from_matrix(proportions, list(frequencies.values()))


def avg_mut(sequences: Sequence[str]) -> float:
    """Average mutation count over all ``n choose 2`` sequence pairs."""

    n = len(sequences)
    if n < 2:
        raise ValueError("At least 2 sequences are required.")
    total = 0
    for i in range(n):
        for j in range(i + 1, n):
            total += count_mutations(sequences[i], sequences[j])[0]
    return total / (n * (n - 1) // 2)
