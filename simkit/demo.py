"""Command that walks through the package's measures on small examples."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional

from simkit.entropy_measures import ShannonEntropy, TsallisEntropy, WeightFactorTransformation
from simkit.measures import (
    CosineDistance,
    CosineSimilarity,
    CrossCorrelation,
    CrossCorrelationFFT,
    EntropySimilarity,
    EuclideanDistance,
    HitRate,
    JaccardIndex,
    OvershootRate,
    PearsonCorrelationDistance,
    TimeShiftFinder,
    TimeShiftFinderFFT,
)
from simkit.spectral import Peak, Spectrum


def _heading(title: str) -> None:
    print(title)
    print("-" * len(title))


def _rounded(values: Sequence[float], digits: int = 3) -> list[float]:
    return [round(value, digits) for value in values]


def _similarity_section() -> None:
    _heading("SIMILARITY AND DISTANCE METRICS")

    vec_a = [1.0, 2.0, 3.0, 4.0]
    vec_b = [2.0, 4.0, 6.0, 8.0]
    print(f"Cosine similarity: {CosineSimilarity().similarity(vec_a, vec_b)}")
    print(f"Cosine distance: {CosineDistance().similarity(vec_a, vec_b)}")
    print(f"Euclidean distance: {EuclideanDistance().similarity(vec_a, vec_b)}")
    print(
        "Pearson correlation distance: "
        f"{PearsonCorrelationDistance().similarity(vec_a, vec_b)}"
    )

    print(f"Jaccard index: {JaccardIndex().similarity({1, 2, 3}, {2, 3, 4})}")

    actual = [1.0, 2.0, 3.0]
    predicted = [1.1, 1.9, 3.2]
    tolerance = 0.3
    print(f"Hit rate: {HitRate().similarity(actual, predicted, tolerance)}")
    print(f"Overshoot rate: {OvershootRate().similarity(actual, predicted, tolerance)}")

    signal1 = [1.0, 2.0, 3.0, 2.0, 1.0]
    signal2 = [0.0, 1.0, 2.0, 3.0, 2.0, 1.0]
    xcorr = CrossCorrelation().similarity(signal1, signal2)
    print(f"Cross-correlation (first 5 values): {xcorr[:5]}")
    print(f"Time shift: {TimeShiftFinder().similarity(signal1, signal2)}")
    print()


def _entropy_section() -> None:
    _heading("ENTROPY MEASURES")

    spectrum1 = Spectrum.from_peaks(
        [Peak(100.0, 0.4), Peak(200.0, 0.3), Peak(300.0, 0.3)]
    )
    spectrum2 = Spectrum.from_peaks([Peak(150.0, 0.5), Peak(250.0, 0.5)])

    shannon = ShannonEntropy()
    print(f"Shannon entropy spectrum 1: {shannon.entropy(spectrum1):.4f}")
    print(f"Shannon entropy spectrum 2: {shannon.entropy(spectrum2):.4f}")

    tsallis = TsallisEntropy()
    for q in (0.5, 1.0, 2.0, 3.0):
        print(f"Tsallis entropy (q={q}): {tsallis.entropy(spectrum1, q):.4f}")

    similarity = EntropySimilarity().similarity(spectrum1, spectrum2)
    print(f"Entropy similarity between spectra: {similarity:.4f}")
    print()


def _transform_section() -> None:
    _heading("DATA TRANSFORMATIONS")

    mzs = [100.0, 200.0, 300.0, 400.0]
    intensities = [0.4, 0.3, 0.2, 0.1]
    transformed = WeightFactorTransformation().transform(mzs, intensities, 0.5, 2.0)
    print(f"Original intensities: {intensities}")
    print(f"Transformed weights: {_rounded(transformed)}")
    print()


def _fft_section() -> None:
    _heading("FFT-BASED OPERATIONS")

    signal_x = [1.0, 2.0, 3.0, 4.0, 3.0, 2.0, 1.0, 0.0]
    signal_y = [0.0, 1.0, 2.0, 3.0, 4.0, 3.0, 2.0, 1.0]
    xcorr = CrossCorrelationFFT().similarity(signal_x, signal_y)
    print(f"FFT cross-correlation (first 5): {_rounded(xcorr[:5])}")
    print(f"FFT time shift: {TimeShiftFinderFFT().similarity(signal_x, signal_y)}")
    print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print every measure applied to small example inputs."""
    parser = argparse.ArgumentParser(
        prog="simkit-demo",
        description="Show the similarity, entropy and transformation measures at work.",
    )
    parser.parse_args(argv)

    print("=== simkit demo ===")
    print()
    _similarity_section()
    _entropy_section()
    _transform_section()
    _fft_section()
    print("All measures demonstrated.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())