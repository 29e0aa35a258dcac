"""
A small descriptive-statistics package for fixed numeric samples.

Computes totals, means, extrema, exclusive-median quartiles, population
standard deviation, the empirical CDF and moment/density shape statistics.

Modules:
    - sample_statistics: The immutable SampleStatistics summary object.
    - stats: Pure numerical helpers (order statistics, moments, densities).
    - reporting: Summary dictionaries, grouped pandas summaries, ECDF tables.
    - schema: Standardized summary column labels.
"""

__version__ = "1.0.0"

from .reporting import (
    ecdf_table,
    format_summary,
    summarize,
    summarize_groups,
    summary_frame,
)
from .sample_statistics import SampleStatistics
from .schema import COLUMNS, MIN_RELIABLE_SAMPLES, SummaryColumns

__all__ = [
    "SampleStatistics",
    # Reporting
    "summarize",
    "summary_frame",
    "summarize_groups",
    "format_summary",
    "ecdf_table",
    "COLUMNS",
    "MIN_RELIABLE_SAMPLES",
    "SummaryColumns",
]
