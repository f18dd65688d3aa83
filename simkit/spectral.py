"""Spectra, spectral entropy measures and spectral entropy similarity.

A spectrum is a list of peaks, each with a mass-to-charge ratio (``mz``)
and an intensity. Entropies are computed from the intensities after they
are normalised to sum to one, the same way ``scipy.stats.entropy`` does.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace

__all__ = [
    "Peak",
    "Spectrum",
    "entropy_from_intensities",
    "calculate_relative_entropy",
    "calculate_entropy",
    "calculate_tsallis_entropy",
    "calculate_entropy_similarity",
    "weight_factor_transformation",
]

WEIGHT_START = 0.25
ENTROPY_CUTOFF = 3.0
WEIGHT_SLOPE = (1.0 - WEIGHT_START) / ENTROPY_CUTOFF


def _ln(x: float) -> float:
    """Natural logarithm that yields NaN or -inf instead of raising."""
    if x > 0.0:
        return math.log(x)
    if x == 0.0:
        return -math.inf
    return math.nan


def _powf(base: float, exponent: float) -> float:
    """Floating-point power that yields inf or NaN instead of raising."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.inf if base == 0.0 else math.nan


@dataclass(frozen=True)
class Peak:
    """A single spectral peak."""

    mz: float
    intensity: float


@dataclass
class Spectrum:
    """A spectrum as an ordered list of peaks."""

    peaks: list[Peak] = field(default_factory=list)

    @classmethod
    def from_peaks(cls, peaks: Iterable[Peak]) -> "Spectrum":
        """Build a spectrum from peaks."""
        return cls(list(peaks))

    @classmethod
    def from_arrays(cls, mzs: Sequence[float], intensities: Sequence[float]) -> "Spectrum":
        """Build a spectrum from parallel m/z and intensity sequences."""
        if len(mzs) != len(intensities):
            raise ValueError(
                f"m/z and intensity sequences differ in length "
                f"({len(mzs)} and {len(intensities)})"
            )
        return cls([Peak(mz, intensity) for mz, intensity in zip(mzs, intensities)])

    @property
    def _intensities(self) -> list[float]:
        return [peak.intensity for peak in self.peaks]

    def normalize(self) -> None:
        """Divide every intensity by the total intensity, unless the total is zero."""
        total = sum(self._intensities)
        if total != 0:
            self.peaks = [replace(p, intensity=p.intensity / total) for p in self.peaks]

    def remove_noise(self, threshold: float) -> None:
        """Drop peaks whose intensity is below ``threshold``."""
        self.peaks = [p for p in self.peaks if p.intensity >= threshold]

    def centroid(self, tolerance: float) -> None:
        """Merge peaks within ``tolerance`` of a group's first peak into one.

        Peaks are sorted by m/z; each merged peak carries the summed
        intensity at the intensity-weighted mean m/z. Groups of zero total
        intensity are dropped.
        """
        if not self.peaks:
            return
        ordered = sorted(self.peaks, key=lambda p: p.mz)
        merged: list[Peak] = []

        def flush(total: float, weighted: float) -> None:
            if total != 0:
                merged.append(Peak(weighted / total, total))

        anchor = ordered[0]
        total = anchor.intensity
        weighted = anchor.mz * anchor.intensity
        for peak in ordered[1:]:
            if abs(peak.mz - anchor.mz) <= tolerance:
                total += peak.intensity
                weighted += peak.mz * peak.intensity
            else:
                flush(total, weighted)
                anchor = peak
                total = peak.intensity
                weighted = peak.mz * peak.intensity
        flush(total, weighted)
        self.peaks = merged

    def apply_weight_factor(self, wf_mz: float, wf_int: float) -> None:
        """Replace each intensity by ``mz**wf_mz * intensity**wf_int``."""
        self.peaks = [
            replace(p, intensity=_powf(p.mz, wf_mz) * _powf(p.intensity, wf_int))
            for p in self.peaks
        ]

    def entropy_and_weighted_intensity(self) -> tuple[float, list[float]]:
        """Return the spectral entropy and the (possibly reweighted) intensities.

        Spectra with entropy below the cutoff have their intensities raised to
        an entropy-dependent power and renormalised; the entropy returned is
        then that of the reweighted intensities.
        """
        entropy = calculate_entropy(self)
        intensities = self._intensities
        if sum(intensities) == 0 or not entropy < ENTROPY_CUTOFF:
            return entropy, intensities

        weight = WEIGHT_START + WEIGHT_SLOPE * entropy
        weighted = [_powf(i, weight) for i in intensities]
        weighted_sum = sum(weighted)
        normalized = [w / weighted_sum for w in weighted]
        return entropy_from_intensities(normalized), normalized


def entropy_from_intensities(intensities: Iterable[float]) -> float:
    """Shannon entropy (natural log) of intensities normalised to sum to one."""
    values = list(intensities)
    total = sum(values)
    if total == 0:
        return 0.0
    entropy = 0.0
    for value in values:
        p = value / total
        if p != 0:
            entropy -= p * _ln(p)
    return entropy


def calculate_relative_entropy(p: Sequence[float], q: Sequence[float]) -> float:
    """Kullback-Leibler divergence of ``p`` from ``q`` after normalising both.

    Terms where either normalised value is zero are skipped; the result is
    zero if either distribution sums to zero.
    """
    p_sum = sum(p)
    q_sum = sum(q)
    if p_sum == 0 or q_sum == 0:
        return 0.0
    entropy = 0.0
    for pi, qi in zip(p, q):
        p_norm = pi / p_sum
        q_norm = qi / q_sum
        if p_norm != 0 and q_norm != 0:
            entropy += p_norm * _ln(p_norm / q_norm)
    return entropy


def calculate_entropy(spectrum: Spectrum) -> float:
    """Shannon entropy of a spectrum's intensities."""
    return entropy_from_intensities(peak.intensity for peak in spectrum.peaks)


def calculate_tsallis_entropy(spectrum: Spectrum, q: float) -> float:
    """Tsallis entropy with parameter ``q``; equals Shannon entropy when ``q == 1``."""
    if q == 1:
        return calculate_entropy(spectrum)
    total = sum(peak.intensity for peak in spectrum.peaks)
    if total == 0:
        return 0.0
    power_sum = 0.0
    for peak in spectrum.peaks:
        p = peak.intensity / total
        if p != 0:
            power_sum += _powf(p, q)
    return (power_sum - 1.0) / (1.0 - q)


def calculate_entropy_similarity(spectrum1: Spectrum, spectrum2: Spectrum) -> float:
    """Entropy similarity of two spectra whose peaks are aligned by position.

    Weighted intensities are merged pairwise (up to the shorter spectrum), and
    the similarity is ``1 - (2*S_merged - S1 - S2) / ln(4)``.
    """
    entropy1, weighted1 = spectrum1.entropy_and_weighted_intensity()
    entropy2, weighted2 = spectrum2.entropy_and_weighted_intensity()
    merged = [a + b for a, b in zip(weighted1, weighted2)]
    entropy_merged = entropy_from_intensities(merged)
    return 1.0 - (2.0 * entropy_merged - entropy1 - entropy2) / math.log(4.0)


def weight_factor_transformation(
    mzs: Sequence[float], ints: Sequence[float], wf_mz: float, wf_int: float
) -> list[float]:
    """Return ``mz**wf_mz * intensity**wf_int`` for each pair."""
    return [_powf(mz, wf_mz) * _powf(intensity, wf_int) for mz, intensity in zip(mzs, ints)]