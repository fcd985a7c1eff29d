# -*- coding: utf-8 -*-
"""
Descriptive statistics and Pearson correlation for reporting.

Neither function feeds the ranking; both are total: an empty series gives
all-zero statistics and a constant column correlates 0 with everything,
itself included.
"""

import numpy as np
import pandas as pd
from typing import Dict, Optional, Sequence

from config import QUANTITATIVE_COLUMNS
from data_loader import numeric_column


STAT_NAMES = ('min', 'max', 'mean', 'median', 'std')


def calculate_stats(values: Sequence[float]) -> Dict[str, float]:
    """
    Min, max, mean, median and population standard deviation.

    The median of an even-length series is the mean of its two middle
    values.  ``std`` divides by n.
    """
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return {name: 0.0 for name in STAT_NAMES}
    return {
        'min': float(arr.min()),
        'max': float(arr.max()),
        'mean': float(arr.mean()),
        'median': float(np.median(arr)),
        'std': float(arr.std(ddof=0)),
    }


def describe_columns(items: pd.DataFrame,
                     columns: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """One row of :func:`calculate_stats` per column (quantities by default)."""
    columns = list(columns) if columns is not None else list(QUANTITATIVE_COLUMNS)
    return pd.DataFrame(
        [calculate_stats(numeric_column(items, c)) for c in columns],
        index=columns,
        columns=list(STAT_NAMES),
    )


def calculate_correlation_matrix(items: pd.DataFrame,
                                 columns: Sequence[str]) -> pd.DataFrame:
    """
    Pearson correlation between every pair of *columns*.

    Population moments (divide by n).  A pair involving a zero-variance
    column is 0.  Missing columns read as zeros.

    Returns
    -------
    pd.DataFrame
        Symmetric k × k matrix labelled by *columns* on both axes.
    """
    columns = list(columns)
    k = len(columns)
    n = len(items)
    if n == 0 or k == 0:
        return pd.DataFrame(np.zeros((k, k)), index=columns, columns=columns)

    X = np.column_stack([numeric_column(items, c) for c in columns])
    centered = X - X.mean(axis=0)
    std = np.sqrt((centered ** 2).sum(axis=0) / n)
    cov = centered.T @ centered / n

    valid = std > 0
    denom = np.outer(std, std)
    corr = np.zeros((k, k))
    mask = np.outer(valid, valid)
    corr[mask] = cov[mask] / denom[mask]
    corr = np.clip(corr, -1.0, 1.0)
    return pd.DataFrame(corr, index=columns, columns=columns)
