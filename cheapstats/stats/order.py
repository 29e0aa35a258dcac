"""Order statistics on pre-sorted sample arrays.

Every function here expects a one-dimensional, ascending-sorted float array
and performs no sorting of its own.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np


def median_of_sorted(sorted_values: np.ndarray) -> float:
    """Return the median of an ascending-sorted array.

    Args:
        sorted_values (numpy.ndarray): Sorted one-dimensional sample values.

    Returns:
        float: Middle element for odd length, otherwise the mean of the two
        middle elements.

    Raises:
        ValueError: If the array is empty.
    """
    n = int(len(sorted_values))
    if n == 0:
        raise ValueError("Median requires at least one value.")
    mid = n // 2
    if n % 2:
        return float(sorted_values[mid])
    return float((sorted_values[mid - 1] + sorted_values[mid]) / 2.0)


def exclusive_halves(sorted_values: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Split a sorted array into lower and upper halves.

    The middle element is excluded from both halves when the length is odd.
    A single-element array yields itself as both halves.
    """
    n = int(len(sorted_values))
    if n == 1:
        return sorted_values, sorted_values
    half = n // 2
    return sorted_values[:half], sorted_values[n - half :]


def quartiles_of_sorted(sorted_values: np.ndarray) -> Tuple[float, float]:
    """Return ``(q1, q3)`` using the exclusive-median method.

    Args:
        sorted_values (numpy.ndarray): Sorted one-dimensional sample values.

    Returns:
        tuple[float, float]: Median of the lower half and median of the upper
        half.

    Raises:
        ValueError: If the array is empty.

    Note:
        For ``[1, 2, ..., 10]`` the halves are ``[1..5]`` and ``[6..10]``,
        giving ``(3.0, 8.0)``. Interpolating conventions (e.g. numpy's default
        percentile) give different values and must not be substituted.
    """
    if len(sorted_values) == 0:
        raise ValueError("Quartiles require at least one value.")
    lower, upper = exclusive_halves(sorted_values)
    return median_of_sorted(lower), median_of_sorted(upper)


def ecdf_fraction(sorted_values: np.ndarray, x: float) -> float:
    """Empirical CDF of a sorted array, snapped to the sample at or below ``x``.

    Args:
        sorted_values (numpy.ndarray): Sorted one-dimensional sample values.
        x (float): Evaluation point.

    Returns:
        float: ``0.0`` below the minimum and ``1.0`` above the maximum.
        Otherwise, with ``v`` the largest sample not exceeding ``x``, the
        fraction of samples strictly less than ``v``.

    Raises:
        ValueError: If the array is empty.

    Note:
        At sample values this is the strictly-less count, so a sample equal
        to ``x`` never contributes. Between samples the value is held at the
        lower neighbour: for ``[1, 2, ..., 10]``, ``x=5.5`` gives ``0.4``.
    """
    n = int(len(sorted_values))
    if n == 0:
        raise ValueError("Empirical CDF requires at least one value.")
    if x > sorted_values[-1]:
        return 1.0
    at_or_below = int(np.searchsorted(sorted_values, x, side="right"))
    if at_or_below == 0:
        return 0.0
    floor_value = sorted_values[at_or_below - 1]
    # side="left" stops before the first copy of floor_value
    idx = int(np.searchsorted(sorted_values, floor_value, side="left"))
    return idx / n
