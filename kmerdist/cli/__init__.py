"""Command-line interfaces for kmerdist."""

from .main import app, run

__all__ = ["app", "run"]
