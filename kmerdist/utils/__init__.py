"""Utility helpers for kmerdist."""

from .io import ensure_parent_dir, read_json, read_sequences, write_json
from .sketches import load_sketch, save_sketch
from .validate import SchemaValidationError, validate_sketch_document

__all__ = [
    "ensure_parent_dir",
    "read_json",
    "read_sequences",
    "write_json",
    "load_sketch",
    "save_sketch",
    "SchemaValidationError",
    "validate_sketch_document",
]
