import math

import pytest

from simkit.entropy_measures import (
    DataTransform,
    EntropyMeasure,
    ShannonEntropy,
    TsallisEntropy,
    WeightFactorTransformation,
)
from simkit.spectral import (
    Peak,
    Spectrum,
    calculate_entropy,
    calculate_tsallis_entropy,
    weight_factor_transformation,
)


def test_shannon_entropy_two_equal_peaks_is_positive():
    spectrum = Spectrum.from_peaks([Peak(100.0, 0.5), Peak(200.0, 0.5)])
    assert ShannonEntropy().entropy(spectrum) > 0.0


def test_shannon_entropy_matches_function():
    spectrum = Spectrum.from_peaks(
        [Peak(100.0, 0.4), Peak(200.0, 0.3), Peak(300.0, 0.3)]
    )
    assert ShannonEntropy().entropy(spectrum) == calculate_entropy(spectrum)


def test_shannon_entropy_from_unnormalised_intensities():
    spectrum = Spectrum.from_arrays([1.0, 2.0, 3.0, 4.0], [1.0, 2.0, 3.0, 4.0])
    assert ShannonEntropy().entropy(spectrum) == pytest.approx(
        1.2798542258336676, abs=1e-10
    )


def test_tsallis_entropy_single_peak_is_non_negative():
    spectrum = Spectrum.from_peaks([Peak(100.0, 1.0)])
    assert TsallisEntropy().entropy(spectrum, 2.0) >= 0.0


def test_tsallis_entropy_q_one_equals_shannon():
    spectrum = Spectrum.from_arrays([100.0, 200.0, 300.0], [0.25, 0.25, 0.5])
    assert TsallisEntropy().entropy(spectrum, 1.0) == ShannonEntropy().entropy(spectrum)


def test_tsallis_entropy_q_two_differs_from_shannon():
    spectrum = Spectrum.from_arrays([100.0, 200.0, 300.0], [0.25, 0.25, 0.5])
    assert TsallisEntropy().entropy(spectrum, 2.0) != ShannonEntropy().entropy(spectrum)


@pytest.mark.parametrize("q", [0.5, 2.0, 3.0])
def test_tsallis_entropy_matches_function(q):
    spectrum = Spectrum.from_arrays([100.0, 200.0, 300.0], [0.4, 0.3, 0.3])
    assert TsallisEntropy().entropy(spectrum, q) == calculate_tsallis_entropy(spectrum, q)


def test_entropies_of_empty_spectrum_are_zero():
    spectrum = Spectrum()
    assert ShannonEntropy().entropy(spectrum) == 0.0
    assert TsallisEntropy().entropy(spectrum, 2.0) == 0.0


def test_weight_factor_transformation_length_and_positivity():
    result = WeightFactorTransformation().transform(
        [100.0, 200.0, 300.0], [0.5, 0.3, 0.2], 0.5, 0.5
    )
    assert len(result) == 3
    assert all(value > 0.0 for value in result)


def test_weight_factor_transformation_matches_function():
    mzs = [69.071, 86.066, 86.0969]
    ints = [7.917962, 1.021589, 100.0]
    result = WeightFactorTransformation().transform(mzs, ints, 0.5, 1.5)
    assert result == weight_factor_transformation(mzs, ints, 0.5, 1.5)


def test_weight_factor_transformation_identity_exponents():
    mzs = [100.0, 200.0]
    ints = [0.4, 0.6]
    result = WeightFactorTransformation().transform(mzs, ints, 0.0, 1.0)
    assert result == pytest.approx(ints)


def test_abstract_bases_cannot_be_instantiated():
    with pytest.raises(TypeError):
        EntropyMeasure()
    with pytest.raises(TypeError):
        DataTransform()


def test_measures_work_through_their_bases():
    spectrum = Spectrum.from_arrays([100.0, 200.0], [0.5, 0.5])
    measures: list[tuple[EntropyMeasure, tuple]] = [
        (ShannonEntropy(), (spectrum,)),
        (TsallisEntropy(), (spectrum, 2.0)),
    ]
    values = [measure.entropy(*args) for measure, args in measures]
    assert values == pytest.approx([math.log(2.0), 0.5])

    transform: DataTransform = WeightFactorTransformation()
    assert transform.transform([4.0, 9.0], [2.0, 3.0], 0.5, 1.0) == pytest.approx(
        [4.0, 9.0]
    )


def test_repr_names_the_class():
    assert repr(ShannonEntropy()) == "ShannonEntropy()"
    assert repr(WeightFactorTransformation()) == "WeightFactorTransformation()"