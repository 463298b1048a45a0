from __future__ import annotations

from pathlib import Path

import pytest

from kmerdist.sketch import MinHashSketch
from kmerdist.utils import (
    SchemaValidationError,
    load_sketch,
    read_sequences,
    save_sketch,
    validate_sketch_document,
)
from kmerdist.utils.io import write_json

from helpers import write_sketch_file


def test_save_then_load_preserves_sketch(tmp_path: Path) -> None:
    sketch = MinHashSketch(kmersize=21, sketch=(2, 4, 8), name="sample")
    path = tmp_path / "nested" / "sample.json"

    save_sketch(path, sketch)

    assert load_sketch(path) == sketch


def test_load_defaults_name_to_file_stem(tmp_path: Path) -> None:
    path = write_sketch_file(tmp_path / "genome_a.json", [1, 5, 9])

    assert load_sketch(path).name == "genome_a"


def test_unsorted_sketch_is_rejected() -> None:
    with pytest.raises(SchemaValidationError, match="strictly ascending"):
        validate_sketch_document({"kmersize": 21, "sketch": [1, 9, 5]})


@pytest.mark.parametrize(
    "document",
    [
        {"sketch": [1, 2]},
        {"kmersize": 0, "sketch": [1, 2]},
        {"kmersize": 21, "sketch": [-1, 2]},
        {"kmersize": 21, "sketch": [1, 2], "extra": True},
        {"kmersize": 21, "sketch": ["a"]},
    ],
)
def test_schema_rejects_malformed_documents(document: dict) -> None:
    with pytest.raises(SchemaValidationError):
        validate_sketch_document(document)


def test_load_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid JSON"):
        load_sketch(path)


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        load_sketch(tmp_path / "absent.json")


def test_load_rejects_unsorted_file(tmp_path: Path) -> None:
    path = tmp_path / "unsorted.json"
    write_json(path, {"kmersize": 21, "sketch": [3, 2, 1]})

    with pytest.raises(SchemaValidationError):
        load_sketch(path)


def test_read_sequences_fasta_and_plain(tmp_path: Path) -> None:
    fasta = tmp_path / "seqs.fa"
    fasta.write_text(">one\nACGT\nACGT\n\n>two\nTTTT\nGGGG\n", encoding="utf-8")
    plain = tmp_path / "seqs.txt"
    plain.write_text("; comment\nACGT\n\nTGCA\n", encoding="utf-8")

    assert read_sequences(fasta) == ["ACGTACGT", "TTTTGGGG"]
    assert read_sequences(plain) == ["ACGT", "TGCA"]
