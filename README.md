# simkit

Similarity and distance metrics for numeric sequences and sets, together with
Shannon and Tsallis entropy and entropy similarity for mass spectra.

## Installation

```
pip install simkit
```

For running the tests:

```
pip install "simkit[test]"
pytest
```

## Metrics on sequences and sets

`simkit.metrics` works on plain sequences of numbers:

```python
from simkit.metrics import euclidean_distance, jaccard_index, find_time_shift

euclidean_distance([0.0, 0.0], [3.0, 4.0])            # 5.0
jaccard_index({1, 2, 3}, {2, 3, 4})                   # 0.5
find_time_shift([1.0, 2.0, 3.0, 4.0, 5.0], [2.0, 1.0, 0.0, 1.0, 2.0])  # 4
```

The module provides:

- `cosine_similarity`, `cosine_distance`: return `None` when either vector has
  zero norm.
- `euclidean_distance`, `squared_euclidean_distance`.
- `pearson_correlation_distance`: the negative Pearson correlation
  coefficient; `0.0` when covariance and variance are both zero, `None` when
  only the variance is zero.
- `hit_rate`, `overshoot_rate`: fraction of predictions within a tolerance of
  the actual value, and fraction where the actual value exceeds the prediction
  by more than the tolerance; NaN for empty input.
- `jaccard_index`: intersection over union of any two iterables, `0.0` for two
  empty ones.
- `cross_correlate`, `cross_correlate_fft`: the full cross-correlation, with
  `len(x) + len(y) - 1` entries; the second computes it through the FFT.
- `find_time_shift`, `find_time_shift_fft`: index of the cross-correlation
  peak (the last one on ties).

Functions that compare two sequences raise `ValueError` when their lengths
differ. The cross-correlation functions raise `ValueError` when the second
sequence is empty.

## Spectra

`simkit.spectral` models a spectrum as a list of `Peak(mz, intensity)`
objects:

```python
from simkit.spectral import Spectrum, calculate_entropy, calculate_entropy_similarity

query = Spectrum.from_arrays([100.0, 200.0, 300.0], [0.0, 80.0, 20.0])
reference = Spectrum.from_arrays([100.0, 200.0, 300.0], [30.0, 0.0, 70.0])

calculate_entropy(query)
calculate_entropy_similarity(query, reference)
```

`Spectrum.from_arrays` raises `ValueError` when the two sequences differ in
length. A `Spectrum` can be changed in place with `normalize`,
`remove_noise(threshold)`, `centroid(tolerance)` and
`apply_weight_factor(wf_mz, wf_int)`; `entropy_and_weighted_intensity()`
returns the entropy together with the intensities reweighted for low-entropy
spectra.

The module also offers `entropy_from_intensities`,
`calculate_relative_entropy` (Kullback-Leibler divergence),
`calculate_tsallis_entropy` and `weight_factor_transformation`.
`calculate_entropy_similarity` pairs peaks by position, up to the shorter
spectrum; it does not match peaks by m/z.

## Measure objects

The same calculations are offered as stateless objects with a common
interface, so they can be chosen and passed around at run time.
`simkit.measures` holds subclasses of `Similarity` (`CosineSimilarity`,
`CosineDistance`, `EuclideanDistance`, `SquaredEuclideanDistance`,
`PearsonCorrelationDistance`, `JaccardIndex`, `HitRate`, `OvershootRate`,
`CrossCorrelation`, `CrossCorrelationFFT`, `TimeShiftFinder`,
`TimeShiftFinderFFT`, `EntropySimilarity`). `simkit.entropy_measures` holds
`EntropyMeasure` with `ShannonEntropy` and `TsallisEntropy`, and
`DataTransform` with `WeightFactorTransformation`.

```python
from simkit.measures import CosineSimilarity, JaccardIndex
from simkit.entropy_measures import TsallisEntropy, WeightFactorTransformation

CosineSimilarity().similarity([1.0, 2.0], [1.0, 2.0])
JaccardIndex().similarity({1, 2}, {2, 3})
TsallisEntropy().entropy(query, 2.0)
WeightFactorTransformation().transform([100.0, 200.0], [0.5, 0.5], 0.5, 2.0)
```

## Demo

To see every measure run on small sample data:

```
simkit-demo
```

## Limitations

All calculations run in a single thread; there are no parallel variants.