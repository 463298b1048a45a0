"""Schema validation helpers for sketch documents."""
from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from jsonschema import Draft7Validator

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schema" / "sketch.schema.json"


class SchemaValidationError(RuntimeError):
    """Raised when a sketch document fails validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@lru_cache(maxsize=1)
def _load_schema() -> Dict[str, Any]:
    with SCHEMA_PATH.open("r", encoding="utf-8") as handle:
        return json.load(handle)


@lru_cache(maxsize=1)
def _build_validator() -> Draft7Validator:
    return Draft7Validator(_load_schema())


def validate_sketch_document(document: Dict[str, Any]) -> None:
    """Validate ``document`` or raise :class:`SchemaValidationError`."""

    errors = sorted(_build_validator().iter_errors(document), key=lambda err: list(err.path))
    if errors:
        formatted = "\n".join(
            f"{'/'.join(str(x) for x in error.path)}: {error.message}".strip() or error.message
            for error in errors
        )
        raise SchemaValidationError(formatted)

    values = document["sketch"]
    for index in range(1, len(values)):
        if values[index] <= values[index - 1]:
            raise SchemaValidationError(
                f"sketch/{index}: hash values must be strictly ascending "
                f"({values[index - 1]} then {values[index]})"
            )
