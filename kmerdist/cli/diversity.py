"""CLI for population diversity statistics over aligned sequences."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from kmerdist.config import load_settings
from kmerdist.diversity import avg_mut, nl79
from kmerdist.utils.io import read_sequences

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Compute nucleotide diversity for a set of aligned sequences.",
)


@app.callback()
def diversity(
    sequences: Path = typer.Option(
        ..., "--sequences", exists=True, readable=True, path_type=Path, help="FASTA or one-per-line file"
    ),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of text"),
    config: Optional[Path] = typer.Option(None, "--config", path_type=Path, help="YAML settings file"),
) -> None:
    """Report NL79 nucleotide diversity and mean pairwise mutations."""

    try:
        settings = load_settings(config)
        records = read_sequences(sequences)
    except (OSError, ValueError) as exc:
        typer.secho(f"[ERROR] {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    if len(records) < 2:
        typer.secho("[ERROR] At least 2 sequences are required.", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    try:
        pi = nl79(records)
        mean_mutations = avg_mut(records)
    except ValueError as exc:
        typer.secho(f"[ERROR] {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    if json_output:
        payload = {"sequences": len(records), "nl79": pi, "avg_mut": mean_mutations}
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    typer.echo(f"Sequences: {len(records)}")
    typer.echo(f"NL79 (pi): {pi:.{settings.precision}f}")
    typer.echo(f"Average pairwise mutations: {mean_mutations:.{settings.precision}f}")


def run() -> None:
    """Entrypoint for ``python -m kmerdist.cli.diversity`` usage."""

    app()


__all__ = ["app", "diversity", "run"]
