"""Sketch value types consumed by the comparison engine."""

from .model import MinHashSketch

__all__ = ["MinHashSketch"]
