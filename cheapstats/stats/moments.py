"""Moment-based shape statistics.

All functions take the raw sample array and use the population (``n``)
divisor throughout.
"""

from __future__ import annotations

import math

import numpy as np

PEARSON_EPSILON = 1e-15


def _require_values(values: np.ndarray, what: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        raise ValueError(f"{what} requires at least one sample.")
    return arr


def population_variance(values: np.ndarray, mean: float) -> float:
    """Return ``sum((x - mean)^2) / n``."""
    arr = _require_values(values, "Variance")
    d = arr - float(mean)
    return math.fsum(d * d) / arr.size


def raw_moment(values: np.ndarray, k: float) -> float:
    """Return the ``k``-th raw moment ``mean(x^k)``."""
    arr = _require_values(values, "Raw moment")
    return float(np.mean(np.power(arr, float(k))))


def central_moment(values: np.ndarray, k: float, mean: float) -> float:
    """Return the ``k``-th central moment ``mean((x - mean)^k)``."""
    arr = _require_values(values, "Central moment")
    return float(np.mean(np.power(arr - float(mean), float(k))))


def standardized_moment(values: np.ndarray, k: float, mean: float, std: float) -> float:
    """Return the ``k``-th central moment scaled by ``std^k``.

    Args:
        values (numpy.ndarray): Sample values.
        k (float): Moment order.
        mean (float): Population mean of ``values``.
        std (float): Population standard deviation of ``values``.

    Returns:
        float: Standardized moment. ``k=3`` is the skewness, ``k=4`` the
        (non-excess) kurtosis.

    Raises:
        ValueError: If ``values`` is empty or ``std`` is zero.
    """
    if not std > 0:
        raise ValueError("Standardized moment is undefined for zero standard deviation.")
    return central_moment(values, k, mean) / math.pow(float(std), float(k))


def pearson_median_skewness(mean: float, median: float, std: float) -> float:
    """Pearson's second skewness coefficient ``3 (mean - median) / std``.

    ``PEARSON_EPSILON`` is added to the denominator so constant samples give
    ``0.0`` rather than dividing by zero.
    """
    return 3.0 * (float(mean) - float(median)) / (float(std) + PEARSON_EPSILON)


def z_score(value: float, mean: float, std: float) -> float:
    """Return ``(value - mean) / std``.

    Raises:
        ValueError: If ``std`` is zero.
    """
    if not std > 0:
        raise ValueError("Z-score is undefined for zero standard deviation.")
    return (float(value) - float(mean)) / float(std)
