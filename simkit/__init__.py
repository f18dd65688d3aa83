"""Similarity, distance and spectral entropy measures, with a demo command."""

__version__ = "0.2.0"

__all__ = ["metrics", "spectral", "measures", "entropy_measures", "demo"]