"""Metric registry and named comparison entry points."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List, Union

from kmerdist.sketch.model import MinHashSketch

from .minhash import jaccard_similarity, mash_distance

__all__ = [
    "Metric",
    "MetricFunction",
    "METRICS",
    "register_metric",
    "available_metrics",
    "compare",
    "jaccard",
    "mash",
    "similarity",
    "distance",
]

logger = logging.getLogger(__name__)

MetricFunction = Callable[[MinHashSketch, MinHashSketch], float]


class Metric(str, Enum):
    JACCARD = "jaccard"
    MASH = "mash"


METRICS: Dict[str, MetricFunction] = {}


def register_metric(name: Union[str, Metric]) -> Callable[[MetricFunction], MetricFunction]:
    """Decorator registering ``func`` as the comparison for ``name``."""

    key = name.value if isinstance(name, Metric) else str(name)

    def decorator(func: MetricFunction) -> MetricFunction:
        METRICS[key] = func
        return func

    return decorator


def available_metrics() -> List[str]:
    return sorted(METRICS)


def compare(metric: Union[str, Metric], sketch_a: MinHashSketch, sketch_b: MinHashSketch) -> float:
    """Compare two sketches with the registered ``metric``."""

    key = metric.value if isinstance(metric, Metric) else str(metric)
    if key not in METRICS:
        raise KeyError(f"Unknown metric '{key}'. Registered: {', '.join(available_metrics())}")
    logger.debug("Comparing %s vs %s with %s", sketch_a.name, sketch_b.name, key)
    return METRICS[key](sketch_a, sketch_b)


@register_metric(Metric.JACCARD)
def jaccard(sketch_a: MinHashSketch, sketch_b: MinHashSketch) -> float:
    """Bias-corrected Jaccard similarity in ``[0, 1]``."""

    return jaccard_similarity(sketch_a, sketch_b)


@register_metric(Metric.MASH)
def mash(sketch_a: MinHashSketch, sketch_b: MinHashSketch) -> float:
    """MASH distance between the sequences behind two sketches."""

    return mash_distance(jaccard_similarity(sketch_a, sketch_b), sketch_a.kmersize)


def similarity(sketch_a: MinHashSketch, sketch_b: MinHashSketch) -> float:
    return compare(Metric.JACCARD, sketch_a, sketch_b)


def distance(sketch_a: MinHashSketch, sketch_b: MinHashSketch) -> float:
    return compare(Metric.MASH, sketch_a, sketch_b)
