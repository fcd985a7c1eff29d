# -*- coding: utf-8 -*-
"""
TOPSIS: Technique for Order Preference by Similarity to Ideal Solution

Ranks alternatives by their relative closeness to the ideal-best point
and distance from the ideal-worst point.

Steps:
    1. r_ij = x_ij / sqrt(Σ_i x_ij²)          (vector normalization)
    2. v_ij = w_j · r_ij                        (weighting)
    3. A+ = best of each column, A- = worst     (max/min by direction)
    4. d+_i = ||v_i - A+||, d-_i = ||v_i - A-||  (Euclidean)
    5. CC_i = d-_i / (d+_i + d-_i)               (closeness, higher = better)
"""

import numpy as np
import pandas as pd
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Union

from config import DECISION_CRITERIA, TOPSIS_SCORE, TOPSISConfig
from data_loader import decision_matrix
from loggers import get_module_logger
from weighting.base import WeightResult
from weighting.normalization import vector_normalize


logger = get_module_logger('mcdm.topsis')


@dataclass
class TOPSISResult:
    """Result of a TOPSIS run, every series indexed by alternative."""
    scores: pd.Series            # closeness coefficient CC in [0, 1]
    ranks: pd.Series             # 1 = best, ties broken by input order
    d_positive: pd.Series        # distance to ideal-best
    d_negative: pd.Series        # distance to ideal-worst
    ideal_best: pd.Series        # per criterion
    ideal_worst: pd.Series       # per criterion
    weighted_matrix: pd.DataFrame

    @property
    def best_alternative(self):
        return self.ranks.idxmin()

    def top_n(self, n: int = 10) -> pd.Series:
        return self.scores.loc[self.ranks.sort_values(kind='stable').index[:n]]


class TOPSISCalculator:
    """
    Crisp TOPSIS over a decision matrix.

    Parameters
    ----------
    cost_criteria : sequence of str, optional
        Criteria where lower is better.  Every other column is a benefit
        criterion.
    benefit_criteria : sequence of str, optional
        Informational; columns not listed in *cost_criteria* are treated
        as benefit regardless.

    Notes
    -----
    A zero-norm column normalizes to zeros.  An alternative whose
    distances to both ideals are zero (both ideals coincide with it) gets
    a closeness of 0.5.
    """

    def __init__(self, cost_criteria: Optional[Sequence[str]] = None,
                 benefit_criteria: Optional[Sequence[str]] = None):
        self.cost_criteria: List[str] = list(cost_criteria or [])
        self.benefit_criteria: List[str] = list(benefit_criteria or [])

    def calculate(self, data: pd.DataFrame,
                  weights: Union[Mapping[str, float], WeightResult]) -> TOPSISResult:
        """
        Parameters
        ----------
        data : pd.DataFrame
            Decision matrix (alternatives × criteria).
        weights : mapping or WeightResult
            Weight per criterion; a criterion without a weight counts 0.

        Returns
        -------
        TOPSISResult
        """
        if isinstance(weights, WeightResult):
            weights = weights.weights
        criteria = data.columns.tolist()
        w = pd.Series([float(weights.get(c, 0.0)) for c in criteria], index=criteria)

        normalized = vector_normalize(data)
        weighted = normalized * w

        is_cost = pd.Series([c in self.cost_criteria for c in criteria], index=criteria)
        col_max = weighted.max(axis=0)
        col_min = weighted.min(axis=0)
        ideal_best = col_max.where(~is_cost, col_min)
        ideal_worst = col_min.where(~is_cost, col_max)

        d_pos = np.sqrt(((weighted - ideal_best) ** 2).sum(axis=1))
        d_neg = np.sqrt(((weighted - ideal_worst) ** 2).sum(axis=1))

        denom = d_pos + d_neg
        degenerate = denom == 0
        if degenerate.any():
            logger.warning(
                "%d alternative(s) coincide with both ideal points; "
                "closeness set to 0.5", int(degenerate.sum()))
        scores = (d_neg / denom.where(~degenerate, 1.0)).where(~degenerate, 0.5)

        ranks = scores.rank(ascending=False, method='first').astype(int)

        return TOPSISResult(
            scores=scores,
            ranks=ranks,
            d_positive=d_pos,
            d_negative=d_neg,
            ideal_best=ideal_best,
            ideal_worst=ideal_worst,
            weighted_matrix=weighted,
        )


def topsis_details(items: pd.DataFrame,
                   weights: Union[Mapping[str, float], WeightResult],
                   config: Optional[TOPSISConfig] = None) -> TOPSISResult:
    """Full :class:`TOPSISResult` for *items* (distances, ideal points)."""
    config = config or TOPSISConfig()
    calc = TOPSISCalculator(cost_criteria=config.cost_criteria,
                            benefit_criteria=config.benefit_criteria)
    return calc.calculate(decision_matrix(items, DECISION_CRITERIA), weights)


def calculate_topsis(items: pd.DataFrame,
                     weights: Union[Mapping[str, float], WeightResult],
                     config: Optional[TOPSISConfig] = None) -> pd.DataFrame:
    """Score every item with crisp TOPSIS over the five decision criteria.

    Benefit: Criticality_Agg, Demand_Agg, Size_Score.
    Cost: Supply_Agg, Unit cost.

    Returns a copy of *items* with ``TOPSIS_Score``.
    """
    result = topsis_details(items, weights, config)
    out = items.copy()
    out[TOPSIS_SCORE] = result.scores.to_numpy(dtype=float)
    logger.debug("TOPSIS scored %d items (d+ mean=%.4f, d- mean=%.4f)",
                 len(out),
                 float(result.d_positive.mean()) if len(out) else 0.0,
                 float(result.d_negative.mean()) if len(out) else 0.0)
    return out
