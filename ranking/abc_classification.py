# -*- coding: utf-8 -*-
"""
ABC Classification
===================

Items are sorted by a score column, descending, and cut into tiers by
cumulative population percentage:

    idx_A = floor(n · A / 100)
    idx_B = floor(n · (A + B) / 100)

    rank position [0, idx_A)     -> A
                  [idx_A, idx_B) -> B
                  [idx_B, n)     -> C

The sort is stable: items with equal scores keep their input order.
Thresholds are not validated; C is whatever remains after A and B.
"""

import numpy as np
import pandas as pd
from typing import Dict, Mapping, Union

from config import (CLASS_COLUMN, CLASS_LABELS, FUZZY_CLASS_COLUMN,
                    TOPSIS_SCORE, ABCThresholds, ScoreField)
from data_loader import numeric_column
from loggers import get_module_logger


logger = get_module_logger('ranking.abc')

ThresholdsLike = Union[ABCThresholds, Mapping[str, float]]


def _as_thresholds(thresholds: ThresholdsLike) -> ABCThresholds:
    if isinstance(thresholds, ABCThresholds):
        return thresholds
    return ABCThresholds.from_mapping(thresholds)


def class_column_for(score_field: Union[str, ScoreField]) -> str:
    """``Class`` for the crisp TOPSIS score, ``Fuzzy_Class`` otherwise."""
    field = score_field.value if isinstance(score_field, ScoreField) else score_field
    return CLASS_COLUMN if field == TOPSIS_SCORE else FUZZY_CLASS_COLUMN


def classify_abc(items: pd.DataFrame,
                 thresholds: ThresholdsLike = ABCThresholds(),
                 score_field: Union[str, ScoreField] = TOPSIS_SCORE) -> pd.DataFrame:
    """
    Assign A/B/C tiers by rank position.

    Parameters
    ----------
    items : pd.DataFrame
        Scored item frame.  A missing score column ranks every item as 0.
    thresholds : ABCThresholds or mapping
        Percentages ``A`` and ``B`` (``C`` is implied).
    score_field : str or ScoreField
        ``TOPSIS_Score`` writes ``Class``; ``Fuzzy_TOPSIS_Score`` writes
        ``Fuzzy_Class``.

    Returns
    -------
    pd.DataFrame
        Copy of *items* sorted by *score_field* descending, original index
        labels kept, with the class column set.
    """
    thr = _as_thresholds(thresholds)
    field = score_field.value if isinstance(score_field, ScoreField) else score_field

    scores = numeric_column(items, field)
    order = np.argsort(-scores, kind='stable')

    n = len(items)
    idx_a = int(np.floor(n * thr.a / 100))
    idx_b = int(np.floor(n * (thr.a + thr.b) / 100))
    position = np.arange(n)
    labels = np.where(position < idx_a, CLASS_LABELS[0],
                      np.where(position < idx_b, CLASS_LABELS[1], CLASS_LABELS[2]))

    out = items.iloc[order].copy()
    out[class_column_for(field)] = labels
    logger.debug("ABC on %s: n=%d, idx_A=%d, idx_B=%d", field, n, idx_a, idx_b)
    return out


def class_distribution(items: pd.DataFrame,
                       class_field: str = CLASS_COLUMN) -> Dict[str, int]:
    """Number of items per tier; every label A, B, C is always present."""
    counts = {label: 0 for label in CLASS_LABELS}
    if class_field not in items.columns:
        return counts
    for label, count in items[class_field].value_counts().items():
        if label in counts:
            counts[label] = int(count)
    return counts
