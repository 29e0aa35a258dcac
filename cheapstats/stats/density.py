"""Probability density estimates built from sample summaries."""

from __future__ import annotations

import math
from typing import Union

import numpy as np

SQRT_2PI = math.sqrt(2.0 * math.pi)
KDE_SCALE = 0.9

ArrayOrFloat = Union[float, np.ndarray]


def normal_pdf(x: ArrayOrFloat, mean: float, std: float) -> ArrayOrFloat:
    """Evaluate the normal density with the given mean and deviation.

    Raises:
        ValueError: If ``std`` is not positive.
    """
    if not std > 0:
        raise ValueError("Normal density requires a positive standard deviation.")
    t = (np.asarray(x, dtype=float) - float(mean)) / float(std)
    out = np.exp(-0.5 * t * t) / (float(std) * SQRT_2PI)
    return float(out) if out.ndim == 0 else out


def gaussian_kernel(u: np.ndarray) -> np.ndarray:
    """Standard normal kernel ``exp(-u^2 / 2) / sqrt(2 pi)``."""
    u = np.asarray(u, dtype=float)
    return np.exp(-0.5 * u * u) / SQRT_2PI


def kde_bandwidth(n: int, std: float, iqr: float) -> float:
    """Rule-of-thumb bandwidth ``0.9 * min(std, iqr) / n^(1/5)``.

    Args:
        n (int): Number of samples.
        std (float): Population standard deviation.
        iqr (float): Interquartile range ``q3 - q1``.

    Returns:
        float: Kernel bandwidth in the units of the samples.

    Note:
        The spread term is the smaller of the deviation and the raw IQR. This
        differs from Silverman's rule, which rescales the IQR by 1.34.
    """
    if n < 1:
        raise ValueError("Bandwidth requires at least one sample.")
    sig = min(float(std), float(iqr))
    return KDE_SCALE * sig / math.pow(n, 1.0 / 5.0)


def gaussian_kde(x: ArrayOrFloat, samples: np.ndarray, bandwidth: float) -> ArrayOrFloat:
    """Evaluate a Gaussian kernel density estimate.

    Args:
        x (float or numpy.ndarray): Evaluation point(s).
        samples (numpy.ndarray): Sample values the estimate is built from.
        bandwidth (float): Kernel bandwidth, see :func:`kde_bandwidth`.

    Returns:
        float or numpy.ndarray: Estimated density, same shape as ``x``.

    Raises:
        ValueError: If ``samples`` is empty or ``bandwidth`` is not positive.
    """
    arr = np.asarray(samples, dtype=float)
    if arr.size == 0:
        raise ValueError("Kernel density estimate requires at least one sample.")
    if not bandwidth > 0:
        raise ValueError(
            "Kernel density estimate requires a positive bandwidth "
            "(samples have no spread)."
        )
    xs = np.asarray(x, dtype=float)
    u = (xs[..., np.newaxis] - arr) / bandwidth
    out = gaussian_kernel(u).sum(axis=-1) / (arr.size * bandwidth)
    return float(out) if out.ndim == 0 else out
