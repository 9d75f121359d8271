"""Simulated sensor sampling, median filtering, ring buffering, statistics and a producer-consumer queue demo."""

__version__ = "0.1.0"
__all__ = ["__version__"]