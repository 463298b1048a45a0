"""Genetic diversity measures over sets of aligned sequences."""

from .measures import avg_mut, nl79, nl79_from_matrix, pdist
from .mutations import count_mutations, count_pairwise, gene_frequencies

__all__ = [
    "avg_mut",
    "nl79",
    "nl79_from_matrix",
    "pdist",
    "count_mutations",
    "count_pairwise",
    "gene_frequencies",
]
