"""Define standardized column names for summary DataFrames."""

from __future__ import annotations

from dataclasses import dataclass

# Fewer samples than this still produce a summary, but grouped reports warn.
MIN_RELIABLE_SAMPLES: int = 10


@dataclass(frozen=True)
class SummaryColumns:
    """Container for standardized summary column labels.

    These labels key the dictionaries returned by
    :func:`cheapstats.reporting.summarize` and name the columns of every
    summary DataFrame, so callers of the reporting helpers see one
    vocabulary.

    Attributes:
        std: Population standard deviation (divisor ``n``).
        variance: Population variance (divisor ``n``).
        q1: Median of the lower half of the sorted samples (exclusive-median
            quartile convention).
        q3: Median of the upper half of the sorted samples.
        skewness: Third standardized moment; NaN for constant samples.
    """

    count: str = "Count"
    total: str = "Total"
    mean: str = "Mean"
    min: str = "Min"
    q1: str = "Q1"
    median: str = "Median"
    q3: str = "Q3"
    max: str = "Max"
    std: str = "Std"
    variance: str = "Variance"
    iqr: str = "IQR"
    skewness: str = "Skewness"

    def ordered(self) -> list[str]:
        return [
            self.count,
            self.total,
            self.mean,
            self.min,
            self.q1,
            self.median,
            self.q3,
            self.max,
            self.std,
            self.variance,
            self.iqr,
            self.skewness,
        ]


COLUMNS = SummaryColumns()
