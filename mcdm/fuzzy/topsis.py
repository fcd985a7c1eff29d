# -*- coding: utf-8 -*-
"""
Fuzzy TOPSIS (vertex method)
============================

Eight criteria per item: the four qualitative attributes as TFNs from the
fuzzy number table, and the four quantities (Average stock, Daily usage,
Unit cost, Lead time) min-max scaled across the dataset and carried as
degenerate TFNs (x, x, x).

Every criterion gets the same weight 1/8.  The ideal points are fixed:
FPIS = (1, 1, 1) and FNIS = (0, 0, 0), weighted like the cells.

    d²_j(i, *) = [(wl_ij - wl*)² + (wm_ij - wm*)² + (wu_ij - wu*)²] / 3
    d+_i = √Σ_j d²_j(i, FPIS),   d-_i = √Σ_j d²_j(i, FNIS)
    CC_i = d-_i / (d+_i + d-_i)
"""

import numpy as np
import pandas as pd
from dataclasses import dataclass
from typing import Dict, Optional

from config import (FUZZY_CRITERIA, FUZZY_TOPSIS_SCORE, QUALITATIVE_COLUMNS,
                    QUANTITATIVE_COLUMNS, FuzzyNumberTable, FuzzyTOPSISConfig)
from data_loader import numeric_column
from loggers import get_module_logger
from transformation.mapping import apply_fuzzy_mappings
from weighting.normalization import min_max_normalize

from .base import FuzzyDecisionMatrix, TriangularFuzzyNumber


logger = get_module_logger('mcdm.fuzzy_topsis')


@dataclass
class FuzzyTOPSISResult:
    """Result of a fuzzy TOPSIS run, every series indexed by alternative."""
    scores: pd.Series       # closeness coefficient CC in [0, 1]
    ranks: pd.Series        # 1 = best, ties broken by input order
    d_positive: pd.Series   # distance to FPIS
    d_negative: pd.Series   # distance to FNIS
    weights: Dict[str, float]


def build_fuzzy_decision_matrix(items: pd.DataFrame,
                                table: Optional[FuzzyNumberTable] = None
                                ) -> FuzzyDecisionMatrix:
    """Eight-criterion TFN matrix of *items*, in ``FUZZY_CRITERIA`` order.

    Alternatives are the row positions 0..n-1 of *items*.
    """
    fuzzy_labels = apply_fuzzy_mappings(items, table)
    columns = {}
    for criterion in FUZZY_CRITERIA:
        if criterion in QUALITATIVE_COLUMNS:
            columns[criterion] = fuzzy_labels[criterion].tolist()
        elif criterion in QUANTITATIVE_COLUMNS:
            scaled = min_max_normalize(numeric_column(items, criterion))
            columns[criterion] = [TriangularFuzzyNumber.from_crisp(v) for v in scaled]
    # Positional alternatives keep duplicate index labels apart
    return FuzzyDecisionMatrix.from_columns(columns, list(range(len(items))))


class FuzzyTOPSIS:
    """
    Fuzzy TOPSIS against fixed fuzzy ideal points.

    Parameters
    ----------
    positive_ideal, negative_ideal : tuple of float
        Unweighted FPIS / FNIS, applied to every criterion.
    """

    def __init__(self, positive_ideal=(1.0, 1.0, 1.0), negative_ideal=(0.0, 0.0, 0.0)):
        self.positive_ideal = TriangularFuzzyNumber.from_tuple(positive_ideal)
        self.negative_ideal = TriangularFuzzyNumber.from_tuple(negative_ideal)

    def calculate(self, matrix: FuzzyDecisionMatrix,
                  weights: Optional[Dict[str, float]] = None) -> FuzzyTOPSISResult:
        """
        Parameters
        ----------
        matrix : FuzzyDecisionMatrix
            Alternatives × criteria TFNs.
        weights : dict, optional
            Crisp weight per criterion; equal weights 1/k when omitted.

        Returns
        -------
        FuzzyTOPSISResult
        """
        criteria = matrix.criteria
        if weights is None:
            weights = {c: 1.0 / len(criteria) for c in criteria} if criteria else {}

        fpis = {c: self.positive_ideal * weights[c] for c in criteria}
        fnis = {c: self.negative_ideal * weights[c] for c in criteria}
        weighted = matrix.weighted(weights)

        d_pos, d_neg = [], []
        for alt in weighted.alternatives:
            cells = [weighted.get(alt, c) for c in criteria]
            d_pos.append(np.sqrt(sum(v.squared_distance(fpis[c]) for v, c in zip(cells, criteria))))
            d_neg.append(np.sqrt(sum(v.squared_distance(fnis[c]) for v, c in zip(cells, criteria))))

        index = pd.Index(matrix.alternatives)
        d_pos = pd.Series(d_pos, index=index, dtype=float)
        d_neg = pd.Series(d_neg, index=index, dtype=float)

        denom = d_pos + d_neg
        degenerate = denom == 0
        if degenerate.any():
            logger.warning(
                "%d alternative(s) at zero distance from both fuzzy ideals; "
                "closeness set to 0.5", int(degenerate.sum()))
        scores = (d_neg / denom.where(~degenerate, 1.0)).where(~degenerate, 0.5)
        ranks = scores.rank(ascending=False, method='first').astype(int)

        return FuzzyTOPSISResult(
            scores=scores,
            ranks=ranks,
            d_positive=d_pos,
            d_negative=d_neg,
            weights=dict(weights),
        )


def fuzzy_topsis_details(items: pd.DataFrame,
                         table: Optional[FuzzyNumberTable] = None,
                         config: Optional[FuzzyTOPSISConfig] = None) -> FuzzyTOPSISResult:
    """Full :class:`FuzzyTOPSISResult` for *items*, indexed like *items*."""
    config = config or FuzzyTOPSISConfig()
    matrix = build_fuzzy_decision_matrix(items, table)
    result = FuzzyTOPSIS(config.positive_ideal, config.negative_ideal).calculate(matrix)
    for series in (result.scores, result.ranks, result.d_positive, result.d_negative):
        series.index = items.index
    return result


def calculate_fuzzy_topsis(items: pd.DataFrame,
                           table: Optional[FuzzyNumberTable] = None,
                           config: Optional[FuzzyTOPSISConfig] = None) -> pd.DataFrame:
    """Copy of *items* with ``Fuzzy_TOPSIS_Score``."""
    result = fuzzy_topsis_details(items, table, config)
    out = items.copy()
    out[FUZZY_TOPSIS_SCORE] = result.scores.to_numpy(dtype=float)
    logger.debug("Fuzzy TOPSIS scored %d items over %d criteria",
                 len(out), len(result.weights))
    return out
