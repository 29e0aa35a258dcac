"""
Numerical helpers behind :class:`cheapstats.SampleStatistics`.

All functions operate on numpy arrays and primitive types.

Modules:
    order:
        Median, exclusive-median quartiles and the empirical CDF on sorted
        arrays.

    moments:
        Population variance, raw/central/standardized moments, Pearson
        median skewness and z-scores.

    density:
        Normal density and Gaussian kernel density estimation.

Design Principle:
    This subpackage has no dependencies on the reporting module or pandas.
"""

from .density import gaussian_kde, gaussian_kernel, kde_bandwidth, normal_pdf
from .moments import (
    central_moment,
    pearson_median_skewness,
    population_variance,
    raw_moment,
    standardized_moment,
    z_score,
)
from .order import ecdf_fraction, exclusive_halves, median_of_sorted, quartiles_of_sorted

__all__ = [
    "gaussian_kde",
    "gaussian_kernel",
    "kde_bandwidth",
    "normal_pdf",
    "central_moment",
    "pearson_median_skewness",
    "population_variance",
    "raw_moment",
    "standardized_moment",
    "z_score",
    "ecdf_fraction",
    "exclusive_halves",
    "median_of_sorted",
    "quartiles_of_sorted",
]
