# -*- coding: utf-8 -*-
"""
Normalization helpers shared by weighting, aggregation and ranking.

- ``min_max_normalize``: scales a series into [0, 1]; a constant series
  maps to 0.5 everywhere.
- ``vector_normalize``: divides each column of a decision matrix by its
  Euclidean norm; a zero-norm column stays all zeros.
"""

import numpy as np
import pandas as pd
from typing import Sequence, Union


def min_max_normalize(values: Union[Sequence[float], np.ndarray, pd.Series]) -> np.ndarray:
    """
    Min-max scale *values* to [0, 1].

    Parameters
    ----------
    values : sequence of float
        Any numeric series. May be empty.

    Returns
    -------
    np.ndarray
        Same length as *values*. When max == min (including a single
        element) every output is exactly 0.5.

    Examples
    --------
    >>> min_max_normalize([1, 2, 3, 4]).round(3).tolist()
    [0.0, 0.333, 0.667, 1.0]
    >>> min_max_normalize([5, 5, 5]).tolist()
    [0.5, 0.5, 0.5]
    """
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return arr.copy()
    lo = arr.min()
    hi = arr.max()
    if hi == lo:
        return np.full(arr.shape, 0.5)
    return (arr - lo) / (hi - lo)


def vector_normalize(matrix: pd.DataFrame) -> pd.DataFrame:
    """
    Column-wise vector normalization r_ij = x_ij / sqrt(sum_i x_ij^2).

    Columns whose norm is 0 are returned as zeros rather than NaN.
    """
    norms = np.sqrt((matrix.astype(float) ** 2).sum(axis=0))
    # A zero norm means the column is all zeros already
    safe = norms.where(norms > 0, 1.0)
    return matrix.astype(float).div(safe, axis=1)
