"""Root CLI entry point for kmerdist."""
from __future__ import annotations

import logging

import typer

from . import compare as compare_cli
from . import diversity as diversity_cli

app = typer.Typer(add_completion=False, help="kmerdist command line interface")
app.add_typer(compare_cli.app, name="compare", help="Compare two MinHash sketches")
app.add_typer(diversity_cli.app, name="diversity", help="Nucleotide diversity of aligned sequences")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run() -> None:
    """Execute the root CLI."""

    app()


__all__ = ["app", "run"]
