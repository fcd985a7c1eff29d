# -*- coding: utf-8 -*-
"""
Weight result container shared by the weighting methods.
"""

import numpy as np
import pandas as pd
from dataclasses import dataclass, field
from typing import Any, Dict, Sequence


@dataclass
class WeightResult:
    """
    Criterion weights produced by a weighting method.

    Attributes
    ----------
    weights : Dict[str, float]
        Weight per criterion, in decision-matrix column order.
    method : str
        Name of the method that produced the weights.
    details : Dict[str, Any]
        Method-specific intermediate values (entropies, diversities, ...).
    """
    weights: Dict[str, float]
    method: str
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def as_array(self) -> np.ndarray:
        """Weights as an array, preserving insertion order."""
        return np.array(list(self.weights.values()), dtype=float)

    @property
    def as_series(self) -> pd.Series:
        return pd.Series(self.weights, dtype=float)

    @property
    def criteria(self):
        return list(self.weights.keys())

    def get(self, criterion: str, default: float = 0.0) -> float:
        return float(self.weights.get(criterion, default))


def equal_weights(criteria: Sequence[str], method: str = "equal",
                  **details: Any) -> WeightResult:
    """1/k for each of the k *criteria*."""
    k = len(criteria)
    w = 1.0 / k if k else 0.0
    return WeightResult(
        weights={c: w for c in criteria},
        method=method,
        details=dict(details),
    )
