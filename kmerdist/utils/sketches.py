"""Load and persist sketch documents."""
from __future__ import annotations

from pathlib import Path

from kmerdist.sketch.model import MinHashSketch

from .io import read_json, write_json
from .validate import validate_sketch_document

__all__ = ["load_sketch", "save_sketch"]


def load_sketch(path: str | Path) -> MinHashSketch:
    """Read, validate and return the sketch stored at ``path``."""

    document = read_json(path)
    validate_sketch_document(document)
    sketch = MinHashSketch.from_dict(document)
    if sketch.name is None:
        sketch = MinHashSketch(kmersize=sketch.kmersize, sketch=sketch.sketch, name=Path(path).stem)
    return sketch


def save_sketch(path: str | Path, sketch: MinHashSketch) -> None:
    payload = sketch.to_dict()
    validate_sketch_document(payload)
    write_json(path, payload)
