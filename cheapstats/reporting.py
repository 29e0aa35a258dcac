"""Build tabular summaries from :class:`SampleStatistics` instances.

Everything here stays in process: results are dictionaries, strings and pandas
DataFrames for the caller to display or persist.
"""

from __future__ import annotations

import math
import warnings
from typing import Dict, Iterable, Optional, Union

import numpy as np
import pandas as pd

from .sample_statistics import SampleStatistics
from .schema import COLUMNS, MIN_RELIABLE_SAMPLES

SamplesLike = Union[SampleStatistics, Iterable[float]]


def _as_statistics(data: SamplesLike) -> SampleStatistics:
    if isinstance(data, SampleStatistics):
        return data
    return SampleStatistics(data)


def summarize(data: SamplesLike) -> Dict[str, float]:
    """Return the summary row for a sample.

    Args:
        data: A :class:`SampleStatistics` instance or raw sample values.

    Returns:
        dict[str, float]: Statistics keyed by :class:`SummaryColumns` labels,
        in :meth:`SummaryColumns.ordered` order. ``Skewness`` is NaN when the
        samples have no spread.

    Raises:
        ValueError: If the sample is empty.
    """
    stats = _as_statistics(data)
    if len(stats) == 0:
        raise ValueError("Cannot summarize an empty sample.")

    skew = stats.skewness() if stats.std() > 0 else math.nan
    return {
        COLUMNS.count: len(stats),
        COLUMNS.total: stats.total(),
        COLUMNS.mean: stats.mean(),
        COLUMNS.min: stats.min(),
        COLUMNS.q1: stats.q1(),
        COLUMNS.median: stats.median(),
        COLUMNS.q3: stats.q3(),
        COLUMNS.max: stats.max(),
        COLUMNS.std: stats.std(),
        COLUMNS.variance: stats.variance(),
        COLUMNS.iqr: stats.iqr(),
        COLUMNS.skewness: skew,
    }


def summary_frame(data: SamplesLike) -> pd.DataFrame:
    """Return :func:`summarize` as a one-row DataFrame."""
    return pd.DataFrame([summarize(data)], columns=COLUMNS.ordered())


def summarize_groups(
    df: pd.DataFrame, value_col: str, group_col: Optional[str] = None
) -> pd.DataFrame:
    """Summarize a value column, optionally per group.

    Args:
        df (pandas.DataFrame): Long-form input table.
        value_col (str): Column holding the sample values. Entries that are
            missing or not numeric are dropped.
        group_col (str, optional): Column to group by. When omitted the whole
            column is summarized as a single row.

    Returns:
        pandas.DataFrame: One summary row per group, sorted by group value,
        with the group column first when grouping.

    Raises:
        KeyError: If ``value_col`` or ``group_col`` is missing.
        ValueError: If a group has no usable numeric values.

    Note:
        Groups with fewer than ``MIN_RELIABLE_SAMPLES`` values are still
        summarized; a single ``UserWarning`` names them.
    """
    missing = [c for c in (value_col, group_col) if c is not None and c not in df.columns]
    if missing:
        raise KeyError(f"Input data is missing required columns: {missing}")

    values = pd.to_numeric(df[value_col], errors="coerce")

    if group_col is None:
        clean = values.dropna()
        if clean.empty:
            raise ValueError(f"Column '{value_col}' has no numeric values.")
        if len(clean) < MIN_RELIABLE_SAMPLES:
            warnings.warn(
                f"Only {len(clean)} samples in '{value_col}' "
                f"(< {MIN_RELIABLE_SAMPLES}); statistics may be unreliable.",
                UserWarning,
                stacklevel=2,
            )
        return summary_frame(clean.to_numpy())

    rows = []
    small_groups = []
    frame = pd.DataFrame({group_col: df[group_col], value_col: values})
    for group, sub in frame.groupby(group_col, sort=True):
        clean = sub[value_col].dropna()
        if clean.empty:
            raise ValueError(f"Group {group!r} has no numeric values in '{value_col}'.")
        if len(clean) < MIN_RELIABLE_SAMPLES:
            small_groups.append(group)
        row = {group_col: group}
        row.update(summarize(clean.to_numpy()))
        rows.append(row)

    if small_groups:
        warnings.warn(
            f"Groups with fewer than {MIN_RELIABLE_SAMPLES} samples: {small_groups}",
            UserWarning,
            stacklevel=2,
        )

    out = pd.DataFrame(rows, columns=[group_col] + COLUMNS.ordered())
    out[COLUMNS.count] = out[COLUMNS.count].astype(int)
    return out.reset_index(drop=True)


def format_summary(summary: Dict[str, float], digits: int = 4) -> str:
    """Render a summary dictionary as aligned ``label: value`` lines."""
    if not summary:
        return ""
    width = max(len(str(k)) for k in summary)
    lines = []
    for key, value in summary.items():
        if isinstance(value, float):
            text = f"{value:.{digits}g}" if math.isfinite(value) else "nan"
        else:
            text = str(value)
        lines.append(f"{str(key).ljust(width)} : {text}")
    return "\n".join(lines)


def ecdf_table(data: SamplesLike) -> pd.DataFrame:
    """Tabulate the empirical distribution at each distinct sample value.

    Args:
        data: A non-empty :class:`SampleStatistics` instance or raw values.

    Returns:
        pandas.DataFrame: Columns ``Value``, ``Frequency``, ``CDF`` (equal to
        ``SampleStatistics.cdf`` at the value, i.e. the fraction strictly
        below it) and ``Fraction At Or Below``.

    Raises:
        ValueError: If the sample is empty.
    """
    stats = _as_statistics(data)
    if len(stats) == 0:
        raise ValueError("Cannot tabulate the distribution of an empty sample.")
    values, counts = np.unique(stats.sorted_samples, return_counts=True)
    at_or_below = np.cumsum(counts)
    return pd.DataFrame(
        {
            "Value": values,
            "Frequency": counts.astype(int),
            "CDF": [stats.cdf(float(v)) for v in values],
            "Fraction At Or Below": at_or_below / len(stats),
        }
    )
