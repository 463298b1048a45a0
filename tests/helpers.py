from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from kmerdist.sketch import MinHashSketch
from kmerdist.utils.io import write_json

NL79_SEQUENCES: List[str] = (
    ["AAAACTTTTACCCCCGGGGG"] * 4
    + ["AAAAATTTTACCCCCGTGGG"] * 2
    + ["AAAACTTTTTCCCCCGTAGG"] * 2
    + ["AAAAATTTTTCCCCCGGAGG"] * 2
)


def make_sketch(values: Iterable[int], kmersize: int = 21, name: Optional[str] = None) -> MinHashSketch:
    return MinHashSketch.from_hashes(kmersize, sorted(values), name=name)


def write_sketch_file(path: Path, values: Iterable[int], kmersize: int = 21) -> Path:
    write_json(path, {"kmersize": kmersize, "sketch": list(values)})
    return path
