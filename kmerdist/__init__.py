"""MinHash sketch comparison and MASH distance estimation."""

__version__ = "0.1.0"
