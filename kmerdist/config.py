"""Settings loaded from an optional YAML file and environment overrides."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from kmerdist.distances.metrics import available_metrics

__all__ = ["Settings", "load_settings", "CONFIG_ENV", "METRIC_ENV", "PRECISION_ENV"]

CONFIG_ENV = "KMERDIST_CONFIG"
METRIC_ENV = "KMERDIST_METRIC"
PRECISION_ENV = "KMERDIST_PRECISION"


@dataclass(frozen=True)
class Settings:
    metric: str = "mash"
    precision: int = 6


def _coerce(raw: Mapping[str, Any], source: str) -> Dict[str, Any]:
    known = {item.name for item in fields(Settings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown settings in {source}: {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    if "metric" in raw:
        metric = str(raw["metric"]).lower()
        if metric not in available_metrics():
            raise ValueError(
                f"Unsupported metric '{metric}' in {source}. Choose from: {', '.join(available_metrics())}"
            )
        values["metric"] = metric
    if "precision" in raw:
        raw_precision = raw["precision"]
        if isinstance(raw_precision, bool) or (isinstance(raw_precision, float) and not raw_precision.is_integer()):
            raise ValueError(f"Invalid precision in {source}: {raw_precision!r}")
        try:
            precision = int(raw_precision)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid precision in {source}: {raw_precision!r}") from exc
        if precision < 0:
            raise ValueError(f"Precision must be non-negative in {source}, got {precision}")
        values["precision"] = precision
    return values


def load_settings(path: str | Path | None = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Return :class:`Settings` from ``path`` (or ``$KMERDIST_CONFIG``) plus env overrides."""

    env = os.environ if environ is None else environ
    settings = Settings()

    config_path = path or env.get(CONFIG_ENV)
    if config_path:
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        with config_file.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        if not isinstance(data, Mapping):
            raise ValueError(f"Config file {config_file} must contain a mapping")
        settings = replace(settings, **_coerce(data, str(config_file)))

    overrides: Dict[str, Any] = {}
    if env.get(METRIC_ENV):
        overrides["metric"] = env[METRIC_ENV]
    if env.get(PRECISION_ENV):
        overrides["precision"] = env[PRECISION_ENV]
    if overrides:
        settings = replace(settings, **_coerce(overrides, "environment"))
    return settings
