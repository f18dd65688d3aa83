"""Pairwise similarity and distance metrics for numeric sequences and sets.

Functions that compare two sequences require them to have the same length and
raise ``ValueError`` otherwise. Where a metric is mathematically undefined for
the given input (for example a zero-length vector in cosine similarity),
``None`` is returned instead of a number.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Optional

import numpy as np

__all__ = [
    "cosine_similarity",
    "cosine_distance",
    "euclidean_distance",
    "squared_euclidean_distance",
    "hit_rate",
    "overshoot_rate",
    "jaccard_index",
    "cross_correlate",
    "cross_correlate_fft",
    "find_time_shift",
    "find_time_shift_fft",
    "pearson_correlation_distance",
]


def _require_same_length(a: Sequence, b: Sequence) -> None:
    if len(a) != len(b):
        raise ValueError(
            f"sequences must have the same length (got {len(a)} and {len(b)})"
        )


def cosine_similarity(slice_a: Sequence[float], slice_b: Sequence[float]) -> Optional[float]:
    """Cosine of the angle between two vectors, or None if either has zero norm."""
    _require_same_length(slice_a, slice_b)
    dot = sum(a * b for a, b in zip(slice_a, slice_b))
    norm_a_sq = sum(a * a for a in slice_a)
    norm_b_sq = sum(b * b for b in slice_b)
    norm_product = math.sqrt(norm_a_sq) * math.sqrt(norm_b_sq)
    if norm_product == 0.0:
        return None
    return float(dot) / norm_product


def cosine_distance(slice_a: Sequence[float], slice_b: Sequence[float]) -> Optional[float]:
    """One minus the cosine similarity, or None if the similarity is undefined."""
    similarity = cosine_similarity(slice_a, slice_b)
    if similarity is None:
        return None
    return 1.0 - similarity


def squared_euclidean_distance(slice_a: Sequence[float], slice_b: Sequence[float]):
    """Sum of squared element-wise differences."""
    _require_same_length(slice_a, slice_b)
    return sum((a - b) * (a - b) for a, b in zip(slice_a, slice_b))


def euclidean_distance(slice_a: Sequence[float], slice_b: Sequence[float]) -> float:
    """Euclidean (L2) distance between two vectors."""
    return math.sqrt(squared_euclidean_distance(slice_a, slice_b))


def hit_rate(actual: Sequence[float], predicted: Sequence[float], tolerance: float) -> float:
    """Fraction of predictions within ``tolerance`` (inclusive) of the actual value.

    Empty input yields NaN.
    """
    _require_same_length(actual, predicted)
    if not actual:
        return math.nan
    hits = sum(1 for a, p in zip(actual, predicted) if abs(a - p) <= tolerance)
    return hits / len(actual)


def overshoot_rate(actual: Sequence[float], predicted: Sequence[float], tolerance: float) -> float:
    """Fraction of cases where the actual value exceeds the prediction by more than ``tolerance``.

    Empty input yields NaN.
    """
    _require_same_length(actual, predicted)
    if not actual:
        return math.nan
    overshoots = sum(1 for a, p in zip(actual, predicted) if a > p + tolerance)
    return overshoots / len(actual)


def jaccard_index(set1: Iterable, set2: Iterable) -> float:
    """Size of the intersection divided by size of the union; 0.0 for two empty sets."""
    first, second = set(set1), set(set2)
    union = len(first | second)
    if union == 0:
        return 0.0
    return len(first & second) / union


def _check_correlation_inputs(x: Sequence[float], y: Sequence[float]) -> bool:
    """Validate inputs; return True when the result is trivially all zeros."""
    if len(y) == 0:
        raise ValueError("the second sequence must not be empty")
    return len(x) == 0


def cross_correlate(x: Sequence[float], y: Sequence[float]) -> list[float]:
    """Full discrete cross-correlation of ``x`` with ``y``.

    The result has ``len(x) + len(y) - 1`` entries; entry ``k`` corresponds to a
    lag of ``k - (len(y) - 1)``.
    """
    if _check_correlation_inputs(x, y):
        return [0.0] * (len(y) - 1)
    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    return np.convolve(xs, ys[::-1], mode="full").tolist()


def cross_correlate_fft(x: Sequence[float], y: Sequence[float]) -> list[float]:
    """Full cross-correlation computed via the FFT; same layout as ``cross_correlate``."""
    if _check_correlation_inputs(x, y):
        return [0.0] * (len(y) - 1)
    x_len, y_len = len(x), len(y)
    total_len = x_len + y_len - 1
    fft_size = 1 << (total_len - 1).bit_length()

    x_padded = np.zeros(fft_size)
    y_padded = np.zeros(fft_size)
    x_padded[:x_len] = np.asarray(x, dtype=float)
    y_padded[:y_len] = np.asarray(y, dtype=float)

    circular = np.fft.ifft(np.fft.fft(x_padded) * np.conj(np.fft.fft(y_padded))).real
    start = fft_size - y_len + 1
    indices = (start + np.arange(total_len)) % fft_size
    return circular[indices].tolist()


def _last_argmax(values: Sequence[float]) -> Optional[int]:
    if not values:
        return None
    return max(range(len(values)), key=lambda i: (values[i], i))


def find_time_shift(x: Sequence[float], y: Sequence[float]) -> Optional[int]:
    """Index of the peak of the cross-correlation; the last one on ties."""
    return _last_argmax(cross_correlate(x, y))


def find_time_shift_fft(x: Sequence[float], y: Sequence[float]) -> Optional[int]:
    """Like ``find_time_shift`` but using the FFT-based cross-correlation."""
    return _last_argmax(cross_correlate_fft(x, y))


def pearson_correlation_distance(
    slice_a: Sequence[float], slice_b: Sequence[float]
) -> Optional[float]:
    """Negative Pearson correlation coefficient.

    Returns 0.0 when both the covariance and the variance product are zero, and
    None when only the variance product is zero.
    """
    _require_same_length(slice_a, slice_b)
    n = len(slice_a)
    if n == 0:
        return 0.0
    values_a = [float(a) for a in slice_a]
    values_b = [float(b) for b in slice_b]
    mean_a = sum(values_a) / n
    mean_b = sum(values_b) / n

    numerator = 0.0
    sum_sq_a = 0.0
    sum_sq_b = 0.0
    for a, b in zip(values_a, values_b):
        diff_a = a - mean_a
        diff_b = b - mean_b
        numerator += diff_a * diff_b
        sum_sq_a += diff_a * diff_a
        sum_sq_b += diff_b * diff_b

    denominator = math.sqrt(sum_sq_a * sum_sq_b)
    if denominator == 0.0:
        return 0.0 if numerator == 0.0 else None
    return -numerator / denominator