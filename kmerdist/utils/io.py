"""JSON and sequence IO helpers for kmerdist."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

__all__ = ["read_json", "write_json", "ensure_parent_dir", "read_sequences"]


def read_json(path: str | Path) -> Dict[str, Any]:
    """Decode the JSON document at ``path``.

    A missing file raises ``FileNotFoundError``; other read failures surface
    as ``RuntimeError`` and undecodable content as ``ValueError``.
    """

    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"JSON file not found: {file_path}")
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read JSON file '{file_path}': {exc}") from exc

    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in '{file_path}': {exc}") from exc


def ensure_parent_dir(path: str | Path) -> Path:
    """Create the parent directory of ``path`` if needed and return it as a ``Path``."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    return file_path


def write_json(path: str | Path, obj: Dict[str, Any]) -> None:
    """Write ``obj`` to ``path`` as sorted, indented JSON with a trailing newline."""

    file_path = ensure_parent_dir(path)
    file_path.write_text(json.dumps(obj, ensure_ascii=False, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def read_sequences(path: str | Path) -> List[str]:
    """Read sequences from a FASTA file or a plain one-per-line text file.

    FASTA records may span several lines. Blank lines and ``;`` comments are
    ignored in both formats.
    """

    file_path = Path(path)
    sequences: List[str] = []
    current: List[str] | None = None
    with file_path.open("r", encoding="utf-8") as handle:
        for raw_line in handle:
            line = raw_line.strip()
            if not line or line.startswith(";"):
                continue
            if line.startswith(">"):
                if current is not None:
                    sequences.append("".join(current))
                current = []
                continue
            if current is None:
                sequences.append(line)
            else:
                current.append(line)
    if current is not None:
        sequences.append("".join(current))
    return sequences
