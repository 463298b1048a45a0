from __future__ import annotations

import pytest

from kmerdist.diversity import (
    avg_mut,
    count_mutations,
    count_pairwise,
    gene_frequencies,
    nl79,
    nl79_from_matrix,
    pdist,
)

from helpers import NL79_SEQUENCES


def test_count_mutations_skips_uncertain_sites() -> None:
    assert count_mutations("ACGT", "ACGA") == (1, 4)
    assert count_mutations("ACGTN", "acg-A") == (0, 3)
    assert count_mutations("ACGU", "ACGT") == (0, 4)


def test_count_mutations_requires_equal_length() -> None:
    with pytest.raises(ValueError):
        count_mutations("ACGT", "ACG")


def test_pairwise_matrix_is_symmetric() -> None:
    matrix = count_pairwise(["ACGT", "ACGA", "TCGA"])

    assert matrix[0][1] == matrix[1][0] == (1, 4)
    assert matrix[0][2] == (2, 4)
    assert matrix[1][1] == (0, 4)
    assert pdist(matrix)[0][2] == pytest.approx(0.5)
    assert pdist([[(0, 0)]]) == [[0.0]]


def test_gene_frequencies_are_relative() -> None:
    frequencies = gene_frequencies(NL79_SEQUENCES)

    assert list(frequencies.values()) == pytest.approx([0.4, 0.2, 0.2, 0.2])
    assert gene_frequencies([]) == {}


def test_nl79_reference_example() -> None:
    assert nl79(NL79_SEQUENCES) == pytest.approx(0.096)


def test_nl79_without_variation_is_zero() -> None:
    assert nl79(["ACGT"] * 5) == 0.0
    assert nl79([]) == 0.0


def test_nl79_from_matrix_checks_shape() -> None:
    assert nl79_from_matrix([[0.0, 0.5], [0.5, 0.0]], [0.5, 0.5]) == pytest.approx(0.25)
    with pytest.raises(ValueError):
        nl79_from_matrix([[0.0, 0.5]], [0.5, 0.5])


def test_avg_mut() -> None:
    assert avg_mut(["ACGT", "ACGA", "TCGA"]) == pytest.approx(4 / 3)
    with pytest.raises(ValueError, match="At least 2"):
        avg_mut(["ACGT"])
