"""CLI for comparing two MinHash sketches."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional

import typer

from kmerdist.config import Settings, load_settings
from kmerdist.distances import DistanceError, available_metrics, compare as compare_sketches
from kmerdist.sketch import MinHashSketch
from kmerdist.utils.sketches import load_sketch
from kmerdist.utils.validate import SchemaValidationError

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Compare two sketches and report similarity or MASH distance.",
)

_LABELS = {"jaccard": "Jaccard", "mash": "MASH distance"}


def _load(path: Path) -> MinHashSketch:
    try:
        return load_sketch(path)
    except SchemaValidationError as exc:
        typer.secho(f"[ERROR] Sketch '{path}' failed validation:", fg=typer.colors.RED)
        typer.echo(exc.message)
        raise typer.Exit(code=1) from exc
    except Exception as exc:
        typer.secho(f"[ERROR] Failed to load sketch '{path}': {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc


def _settings(config: Optional[Path]) -> Settings:
    try:
        return load_settings(config)
    except (OSError, ValueError) as exc:
        typer.secho(f"[ERROR] Failed to load settings: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc


@app.callback()
def compare(
    a: Path = typer.Option(..., "--a", exists=True, readable=True, path_type=Path, help="First sketch JSON"),
    b: Path = typer.Option(..., "--b", exists=True, readable=True, path_type=Path, help="Second sketch JSON"),
    metric: Optional[str] = typer.Option(None, "--metric", help="Metric name (jaccard or mash)"),
    all_metrics: bool = typer.Option(False, "--all", help="Report every registered metric"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of text"),
    config: Optional[Path] = typer.Option(None, "--config", path_type=Path, help="YAML settings file"),
) -> None:
    """Compare sketches ``a`` and ``b``."""

    settings = _settings(config)
    if all_metrics:
        metrics: List[str] = available_metrics()
    else:
        chosen = (metric or settings.metric).lower()
        if chosen not in available_metrics():
            raise typer.BadParameter(
                f"Unsupported metric '{chosen}'. Choose from: {', '.join(available_metrics())}",
                param_hint="--metric",
            )
        metrics = [chosen]

    sketch_a = _load(a)
    sketch_b = _load(b)

    results: Dict[str, float] = {}
    try:
        for name in metrics:
            results[name] = compare_sketches(name, sketch_a, sketch_b)
    except DistanceError as exc:
        typer.secho(f"[ERROR] {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    if json_output:
        payload = {"a": sketch_a.name, "b": sketch_b.name, "kmersize": sketch_a.kmersize, **results}
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    typer.echo(f"Sketches: {sketch_a.name} vs {sketch_b.name} (k={sketch_a.kmersize}, s={len(sketch_a)})")
    for name, value in results.items():
        typer.echo(f"{_LABELS.get(name, name)}: {value:.{settings.precision}f}")


def run() -> None:
    """Entrypoint for ``python -m kmerdist.cli.compare`` usage."""

    app()


__all__ = ["app", "compare", "run"]
