"""Descriptive statistics over a fixed collection of numeric samples."""

from __future__ import annotations

import math
from typing import Iterable, Union

import numpy as np

from .stats.density import gaussian_kde, kde_bandwidth, normal_pdf
from .stats.moments import (
    central_moment,
    pearson_median_skewness,
    population_variance,
    raw_moment,
    standardized_moment,
    z_score,
)
from .stats.order import ecdf_fraction, median_of_sorted, quartiles_of_sorted


def _as_float(value) -> float:
    """Convert one sample to float, rejecting booleans and text.

    Raises:
        TypeError: If ``value`` is a bool, a string or not convertible.
        ValueError: If ``value`` is itself a sequence (nested input).
    """
    if isinstance(value, (bool, np.bool_, str, bytes)):
        raise TypeError(f"samples must be numeric, got {type(value).__name__} {value!r}")
    if np.ndim(value) > 0:
        raise ValueError("samples must be one-dimensional, got a nested sequence")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"samples must be numeric, got {type(value).__name__} {value!r}"
        ) from exc


def _coerce_samples(samples: Iterable[float]) -> np.ndarray:
    """Convert input samples to a private, finite, one-dimensional float array.

    Raises:
        TypeError: If ``samples`` is not iterable or holds non-numeric values.
        ValueError: If ``samples`` is not one-dimensional or holds NaN/inf.
    """
    if isinstance(samples, (str, bytes)):
        raise TypeError("samples must be a sequence of numbers, got a string")

    if hasattr(samples, "dtype"):
        arr = np.asarray(samples)
        if arr.ndim != 1:
            raise ValueError(f"samples must be one-dimensional, got shape {arr.shape}")
        kind = arr.dtype.kind
        if kind == "O":
            values = np.array([_as_float(v) for v in arr], dtype=float)
        elif kind in "iuf":
            values = np.array(arr, dtype=float)
        else:
            raise TypeError(f"samples must be numeric, got dtype {arr.dtype}")
    else:
        values = np.array([_as_float(v) for v in samples], dtype=float)

    if not np.all(np.isfinite(values)):
        raise ValueError("samples must be finite (NaN or infinite value found).")
    return values


class SampleStatistics:
    """Immutable summary of a finite sample of real numbers.

    The input order is kept in :attr:`samples`; an ascending copy is sorted
    once into :attr:`sorted_samples` and used by every order statistic.
    Location and spread statistics are computed at construction.

    Args:
        samples: Iterable of values convertible to float (lists, tuples,
            numpy arrays, pandas Series; ``Decimal`` and ``Fraction`` elements
            are accepted). May be empty.

    Raises:
        TypeError: If any element cannot be converted to float (strings,
            ``None``, booleans and complex values are rejected).
        ValueError: If the input is multi-dimensional or nested, or contains
            NaN/inf.

    Note:
        An empty instance can be constructed and reports ``total() == 0.0``;
        every other accessor raises ``ValueError`` on it.

    Examples:
        >>> s = SampleStatistics([7, 4, 1, 5, 3, 10, 6, 2, 8, 9])
        >>> s.mean(), s.q1(), s.q3(), s.cdf(5.5)
        (5.5, 3.0, 8.0, 0.4)
    """

    def __init__(self, samples: Iterable[float]):
        values = _coerce_samples(samples)
        ordered = np.sort(values, kind="stable")
        values.flags.writeable = False
        ordered.flags.writeable = False
        self._samples = values
        self._sorted = ordered
        self._n = int(values.size)

        # sum is exactly rounded so results do not depend on input order
        self._total = math.fsum(values)
        if self._n == 0:
            return

        # a rounded quotient can step just outside [min, max] for constant samples
        lo, hi = float(ordered[0]), float(ordered[-1])
        self._mean = min(max(self._total / self._n, lo), hi)
        self._median = median_of_sorted(ordered)
        self._q1, self._q3 = quartiles_of_sorted(ordered)
        self._variance = population_variance(values, self._mean)
        self._std = math.sqrt(self._variance)

    @property
    def samples(self) -> np.ndarray:
        """Samples in input order (read-only array)."""
        return self._samples

    @property
    def sorted_samples(self) -> np.ndarray:
        """Samples in ascending order (read-only array)."""
        return self._sorted

    @property
    def count(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        if self._n == 0:
            return "SampleStatistics(n=0)"
        return f"SampleStatistics(n={self._n}, mean={self._mean:.6g}, std={self._std:.6g})"

    def _require_samples(self, what: str) -> None:
        if self._n == 0:
            raise ValueError(f"{what} requires at least one sample.")

    def total(self) -> float:
        return self._total

    def mean(self) -> float:
        self._require_samples("mean")
        return self._mean

    average = mean

    def min(self) -> float:
        self._require_samples("min")
        return float(self._sorted[0])

    def max(self) -> float:
        self._require_samples("max")
        return float(self._sorted[-1])

    def q1(self) -> float:
        """First quartile: median of the lower half of the sorted samples."""
        self._require_samples("q1")
        return self._q1

    def q3(self) -> float:
        """Third quartile: median of the upper half of the sorted samples."""
        self._require_samples("q3")
        return self._q3

    def median(self) -> float:
        self._require_samples("median")
        return self._median

    def iqr(self) -> float:
        self._require_samples("iqr")
        return self._q3 - self._q1

    def variance(self) -> float:
        """Population variance (divisor ``n``)."""
        self._require_samples("variance")
        return self._variance

    def std(self) -> float:
        """Population standard deviation (divisor ``n``, not ``n - 1``)."""
        self._require_samples("std")
        return self._std

    sigma = std

    def cdf(self, x: float) -> float:
        """Empirical CDF at ``x``.

        At a sample value ``v`` this is the fraction of samples strictly
        below ``v``; a sample equal to ``x`` is not counted, so
        ``cdf(min()) == 0.0``. Between two sample values the result stays at
        the level of the lower one (``cdf(5.5) == cdf(5.0)`` for the samples
        ``1..10``). Below the minimum it is ``0.0`` and above the maximum
        ``1.0``.

        Raises:
            TypeError: If ``x`` is not a real number.
            ValueError: If ``x`` is NaN or the instance is empty.
        """
        if isinstance(x, (bool, np.bool_, str, bytes)):
            raise TypeError(f"x must be numeric, got {type(x).__name__}")
        try:
            x = float(x)
        except (TypeError, ValueError) as exc:
            raise TypeError(f"x must be numeric, got {type(x).__name__}") from exc
        if math.isnan(x):
            raise ValueError("x must not be NaN.")
        self._require_samples("cdf")
        return ecdf_fraction(self._sorted, x)

    def moment(self, k: float) -> float:
        """Raw moment of order ``k``."""
        self._require_samples("moment")
        return raw_moment(self._samples, k)

    def central_moment(self, k: float) -> float:
        """Central moment of order ``k`` about the mean."""
        self._require_samples("central_moment")
        return central_moment(self._samples, k, self._mean)

    def std_moment(self, k: float) -> float:
        """Central moment of order ``k`` divided by ``std() ** k``."""
        self._require_samples("std_moment")
        return standardized_moment(self._samples, k, self._mean, self._std)

    def skewness(self) -> float:
        self._require_samples("skewness")
        return standardized_moment(self._samples, 3.0, self._mean, self._std)

    def pearson_skewness(self) -> float:
        """Pearson median skewness ``3 (mean - median) / std``."""
        self._require_samples("pearson_skewness")
        return pearson_median_skewness(self._mean, self._median, self._std)

    def z_score(self, value: float) -> float:
        self._require_samples("z_score")
        return z_score(value, self._mean, self._std)

    def normal_pdf(self, x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Density of the normal distribution fitted by mean and std."""
        self._require_samples("normal_pdf")
        return normal_pdf(x, self._mean, self._std)

    def kde_bandwidth(self) -> float:
        self._require_samples("kde_bandwidth")
        return kde_bandwidth(self._n, self._std, self._q3 - self._q1)

    def estimated_pdf(self, x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Gaussian kernel density estimate at ``x``.

        Raises:
            ValueError: If the instance is empty or the bandwidth is zero
                (for instance when at least half the samples coincide).
        """
        return gaussian_kde(x, self._sorted, self.kde_bandwidth())
