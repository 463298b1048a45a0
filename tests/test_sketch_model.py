from __future__ import annotations

import dataclasses

import pytest

from kmerdist.sketch import MinHashSketch


def test_sketch_exposes_size_and_values() -> None:
    sketch = MinHashSketch(kmersize=21, sketch=[3, 7, 11])

    assert sketch.size() == 3
    assert len(sketch) == 3
    assert sketch.sketch == (3, 7, 11)
    assert list(sketch) == [3, 7, 11]


def test_sketch_is_immutable() -> None:
    sketch = MinHashSketch(kmersize=21, sketch=(1, 2))
    with pytest.raises(dataclasses.FrozenInstanceError):
        sketch.kmersize = 15  # type: ignore[misc]


@pytest.mark.parametrize("kmersize", [0, -3, 2.5, True])
def test_sketch_rejects_bad_kmersize(kmersize: object) -> None:
    with pytest.raises(ValueError):
        MinHashSketch(kmersize=kmersize, sketch=(1, 2))  # type: ignore[arg-type]


def test_dict_conversion_keeps_name() -> None:
    document = {"kmersize": 15, "sketch": [5, 9], "name": "ecoli"}
    sketch = MinHashSketch.from_dict(document)

    assert sketch == MinHashSketch(kmersize=15, sketch=(5, 9), name="ecoli")
    assert sketch.to_dict() == document
    assert "name" not in MinHashSketch(kmersize=15, sketch=(5,)).to_dict()
