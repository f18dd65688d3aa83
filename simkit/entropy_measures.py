"""Entropy measures and data transformations as interchangeable objects.

An :class:`EntropyMeasure` describes a single entity, such as a spectrum, with
one number. A :class:`DataTransform` turns data into a new form, for example
before it is compared. Neither holds any state, so one instance can be shared
freely.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from simkit.spectral import (
    Spectrum,
    calculate_entropy,
    calculate_tsallis_entropy,
    weight_factor_transformation,
)

__all__ = [
    "EntropyMeasure",
    "DataTransform",
    "ShannonEntropy",
    "TsallisEntropy",
    "WeightFactorTransformation",
]


class EntropyMeasure(ABC):
    """An information-theoretic measure of a single entity."""

    @abstractmethod
    def entropy(self, *args: Any) -> Any:
        """Return the entropy of the input."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DataTransform(ABC):
    """A transformation of data from one form to another."""

    @abstractmethod
    def transform(self, *args: Any) -> Any:
        """Return the transformed input."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ShannonEntropy(EntropyMeasure):
    """Shannon entropy of a spectrum's intensities."""

    def entropy(self, spectrum: Spectrum) -> float:
        return calculate_entropy(spectrum)


class TsallisEntropy(EntropyMeasure):
    """Tsallis entropy of a spectrum with parameter ``q``."""

    def entropy(self, spectrum: Spectrum, q: float) -> float:
        return calculate_tsallis_entropy(spectrum, q)


class WeightFactorTransformation(DataTransform):
    """Weight each intensity by ``mz**wf_mz * intensity**wf_int``."""

    def transform(
        self,
        mzs: Sequence[float],
        intensities: Sequence[float],
        wf_mz: float,
        wf_int: float,
    ) -> list[float]:
        return weight_factor_transformation(mzs, intensities, wf_mz, wf_int)