"""Similarity and distance measures as interchangeable objects.

Each measure is a :class:`Similarity` whose ``similarity`` method compares its
inputs and returns the metric's value. Measures hold no state, so one instance
can be shared freely and used wherever a :class:`Similarity` is expected.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Any, Optional

from simkit.metrics import (
    cosine_distance,
    cosine_similarity,
    cross_correlate,
    cross_correlate_fft,
    euclidean_distance,
    find_time_shift,
    find_time_shift_fft,
    hit_rate,
    jaccard_index,
    overshoot_rate,
    pearson_correlation_distance,
    squared_euclidean_distance,
)
from simkit.spectral import Spectrum, calculate_entropy_similarity

__all__ = [
    "Similarity",
    "CosineSimilarity",
    "CosineDistance",
    "EuclideanDistance",
    "SquaredEuclideanDistance",
    "PearsonCorrelationDistance",
    "JaccardIndex",
    "HitRate",
    "OvershootRate",
    "CrossCorrelation",
    "CrossCorrelationFFT",
    "TimeShiftFinder",
    "TimeShiftFinderFFT",
    "EntropySimilarity",
]


class Similarity(ABC):
    """A measure of similarity or distance between two entities."""

    @abstractmethod
    def similarity(self, *args: Any) -> Any:
        """Compare the inputs and return the measure's value."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CosineSimilarity(Similarity):
    """Cosine of the angle between two vectors."""

    def similarity(self, a: Sequence[float], b: Sequence[float]) -> Optional[float]:
        return cosine_similarity(a, b)


class CosineDistance(Similarity):
    """One minus the cosine similarity."""

    def similarity(self, a: Sequence[float], b: Sequence[float]) -> Optional[float]:
        return cosine_distance(a, b)


class EuclideanDistance(Similarity):
    """Euclidean (L2) distance."""

    def similarity(self, a: Sequence[float], b: Sequence[float]) -> float:
        return euclidean_distance(a, b)


class SquaredEuclideanDistance(Similarity):
    """Squared Euclidean distance."""

    def similarity(self, a: Sequence[float], b: Sequence[float]):
        return squared_euclidean_distance(a, b)


class PearsonCorrelationDistance(Similarity):
    """Negative Pearson correlation coefficient."""

    def similarity(self, a: Sequence[float], b: Sequence[float]) -> Optional[float]:
        return pearson_correlation_distance(a, b)


class JaccardIndex(Similarity):
    """Intersection over union of two sets."""

    def similarity(self, a: Iterable, b: Iterable) -> float:
        return jaccard_index(a, b)


class HitRate(Similarity):
    """Fraction of predictions within a tolerance of the actual values."""

    def similarity(
        self, actual: Sequence[float], predicted: Sequence[float], tolerance: float
    ) -> float:
        return hit_rate(actual, predicted, tolerance)


class OvershootRate(Similarity):
    """Fraction of actual values exceeding the prediction by more than a tolerance."""

    def similarity(
        self, actual: Sequence[float], predicted: Sequence[float], tolerance: float
    ) -> float:
        return overshoot_rate(actual, predicted, tolerance)


class CrossCorrelation(Similarity):
    """Full cross-correlation computed directly."""

    def similarity(self, x: Sequence[float], y: Sequence[float]) -> list[float]:
        return cross_correlate(x, y)


class CrossCorrelationFFT(Similarity):
    """Full cross-correlation computed through the FFT."""

    def similarity(self, x: Sequence[float], y: Sequence[float]) -> list[float]:
        return cross_correlate_fft(x, y)


class TimeShiftFinder(Similarity):
    """Index of the cross-correlation peak."""

    def similarity(self, x: Sequence[float], y: Sequence[float]) -> Optional[int]:
        return find_time_shift(x, y)


class TimeShiftFinderFFT(Similarity):
    """Index of the cross-correlation peak, using the FFT."""

    def similarity(self, x: Sequence[float], y: Sequence[float]) -> Optional[int]:
        return find_time_shift_fft(x, y)


class EntropySimilarity(Similarity):
    """Spectral entropy similarity between two spectra."""

    def similarity(self, spectrum1: Spectrum, spectrum2: Spectrum) -> float:
        return calculate_entropy_similarity(spectrum1, spectrum2)