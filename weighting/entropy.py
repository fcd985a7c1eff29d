# -*- coding: utf-8 -*-
"""
Entropy Weight Calculator

Shannon entropy-based objective weight calculation method.
Assigns higher weights to criteria with more variation (information content).

Mathematical Formula:
    w_j = (1 - E_j) / Σ(1 - E_k)

where:
    x'_ij = minmax(x_j)_i + ε          [shifted min-max scaling]
    p_ij = x'_ij / Σ_i x'_ij           [proportion of value]
    E_j = -k × Σ_i(p_ij × ln(p_ij))    [entropy of criterion j]
    k = 1 / ln(n)                      [normalization constant]
"""

import numpy as np
import pandas as pd
from typing import Optional

from .base import WeightResult, equal_weights
from .normalization import min_max_normalize

from config import DECISION_CRITERIA, EntropyConfig
from data_loader import decision_matrix
from loggers import get_module_logger


logger = get_module_logger('weighting.entropy')


class EntropyWeightCalculator:
    """
    Shannon entropy-based objective weight calculation.

    Every column is min-max scaled first, so the weight reflects how the
    alternatives are spread inside the column's own range rather than its
    units.  A fixed epsilon is then added so that ln() never sees zero.

    Parameters
    ----------
    epsilon : float
        Shift added to every scaled value.

    Examples
    --------
    >>> import pandas as pd
    >>> from weighting import EntropyWeightCalculator
    >>>
    >>> data = pd.DataFrame({
    ...     'C1': [0.8, 0.6, 0.9, 0.7],
    ...     'C2': [0.1, 0.1, 0.1, 0.9],  # one outlier - high weight
    ...     'C3': [0.3, 0.4, 0.5, 0.6],  # evenly spread - low weight
    ... })
    >>> result = EntropyWeightCalculator().calculate(data)
    >>> print(result.weights)

    References
    ----------
    Shannon, C.E. (1948). A Mathematical Theory of Communication.
    Bell System Technical Journal.
    """

    def __init__(self, epsilon: float = 1e-4):
        self.epsilon = epsilon

    def calculate(self, data: pd.DataFrame) -> WeightResult:
        """
        Calculate entropy weights.

        Parameters
        ----------
        data : pd.DataFrame
            Decision matrix (alternatives × criteria).

        Returns
        -------
        WeightResult
            Weights with entropy and diversity details.  With fewer than
            two alternatives (k = 1/ln(n) undefined) or when no criterion
            carries any diversity, every criterion gets 1/k.

        Raises
        ------
        TypeError
            If data contains non-numeric columns
        """
        non_numeric = data.select_dtypes(exclude=[np.number]).columns.tolist()
        if non_numeric:
            raise TypeError(f"Non-numeric columns found: {non_numeric}")

        columns = data.columns.tolist()
        n = len(data)

        if n < 2:
            logger.warning(
                "Entropy weighting needs at least 2 items (got %d); "
                "falling back to equal weights", n)
            return equal_weights(columns, method="entropy",
                                 fallback="insufficient_items", n_samples=n)

        X = np.column_stack([
            min_max_normalize(data[c].to_numpy(dtype=float)) + self.epsilon
            for c in columns
        ]) if columns else np.empty((n, 0))

        P = X / X.sum(axis=0)
        k = 1.0 / np.log(n)
        E = -k * (P * np.log(P)).sum(axis=0)

        # Diversity is not clamped; a slightly negative value stays as is
        D = 1.0 - E
        total = D.sum()
        if abs(total) < 1e-12:
            logger.warning(
                "No criterion carries diversity (all columns constant); "
                "falling back to equal weights")
            return equal_weights(columns, method="entropy",
                                 fallback="zero_diversity", n_samples=n,
                                 entropy_values=dict(zip(columns, E.tolist())))

        weights_arr = D / total

        weights_dict = {col: float(weights_arr[j]) for j, col in enumerate(columns)}
        E_dict = {col: float(E[j]) for j, col in enumerate(columns)}
        D_dict = {col: float(D[j]) for j, col in enumerate(columns)}

        logger.debug(
            "Entropy weights over %d items: %s", n,
            ', '.join(f"{c}={w:.4f}" for c, w in weights_dict.items()))

        return WeightResult(
            weights=weights_dict,
            method="entropy",
            details={
                "entropy_values": E_dict,
                "diversity_values": D_dict,
                "n_samples": n,
                "epsilon": self.epsilon,
            }
        )


def calculate_entropy_weights(items: pd.DataFrame,
                              config: Optional[EntropyConfig] = None) -> WeightResult:
    """Entropy weights of the five-criterion crisp decision matrix.

    Criteria: ``Criticality_Agg``, ``Demand_Agg``, ``Supply_Agg``,
    ``Unit cost`` and ``Size_Score``; columns not yet computed read as 0.
    """
    config = config or EntropyConfig()
    matrix = decision_matrix(items, DECISION_CRITERIA)
    return EntropyWeightCalculator(epsilon=config.epsilon).calculate(matrix)
