# -*- coding: utf-8 -*-
"""
Fuzzy Number Base Classes
=========================

This module provides foundational classes for the fuzzy MCDM track:
- TriangularFuzzyNumber (TFN): Core fuzzy number representation
- FuzzyDecisionMatrix: Container for alternatives × criteria TFNs

Mathematical Foundation:
    A Triangular Fuzzy Number (TFN) is denoted as Ã = (l, m, u) where:
    - l: lower bound (minimum possible value)
    - m: modal value (most likely value)
    - u: upper bound (maximum possible value)

    Vertex distance between Ã and B̃:
        d(Ã, B̃) = √[((a_l - b_l)² + (a_m - b_m)² + (a_u - b_u)²) / 3]
"""

import numpy as np
import pandas as pd
from typing import Dict, Hashable, Iterable, List, Tuple, Union
from dataclasses import dataclass


@dataclass(frozen=True)
class TriangularFuzzyNumber:
    """
    Triangular Fuzzy Number (TFN) representation.

    Attributes:
        l: Lower bound (minimum)
        m: Modal value (most likely)
        u: Upper bound (maximum)

    Example:
        >>> tfn = TriangularFuzzyNumber(0.2, 0.5, 0.8)
        >>> tfn * 0.5
        TFN(0.1000, 0.2500, 0.4000)
        >>> tfn.distance(TriangularFuzzyNumber.from_crisp(0.5))
    """
    l: float  # Lower bound
    m: float  # Modal value (most likely)
    u: float  # Upper bound

    def __post_init__(self):
        """Ensure l ≤ m ≤ u by sorting if necessary."""
        if not (self.l <= self.m <= self.u):
            l, m, u = sorted([self.l, self.m, self.u])
            object.__setattr__(self, 'l', l)
            object.__setattr__(self, 'm', m)
            object.__setattr__(self, 'u', u)

    def defuzzify(self) -> float:
        """Centroid (l + m + u) / 3."""
        return (self.l + self.m + self.u) / 3

    def __mul__(self, scalar: float) -> 'TriangularFuzzyNumber':
        """Scale all bounds; a negative scalar swaps l and u."""
        scalar = float(scalar)
        if scalar >= 0:
            return TriangularFuzzyNumber(
                self.l * scalar, self.m * scalar, self.u * scalar
            )
        return TriangularFuzzyNumber(
            self.u * scalar, self.m * scalar, self.l * scalar
        )

    def __rmul__(self, scalar: float) -> 'TriangularFuzzyNumber':
        return self.__mul__(scalar)

    def squared_distance(self, other: 'TriangularFuzzyNumber') -> float:
        """Squared vertex distance: mean of the squared vertex differences."""
        return ((self.l - other.l) ** 2 +
                (self.m - other.m) ** 2 +
                (self.u - other.u) ** 2) / 3

    def distance(self, other: 'TriangularFuzzyNumber') -> float:
        """Vertex distance between two fuzzy numbers."""
        return float(np.sqrt(self.squared_distance(other)))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.l, self.m, self.u)

    @staticmethod
    def from_crisp(value: float) -> 'TriangularFuzzyNumber':
        """Degenerate TFN (value, value, value)."""
        value = float(value)
        return TriangularFuzzyNumber(value, value, value)

    @staticmethod
    def from_tuple(values: Iterable[float]) -> 'TriangularFuzzyNumber':
        l, m, u = (float(v) for v in values)
        return TriangularFuzzyNumber(l, m, u)

    def __repr__(self) -> str:
        return f"TFN({self.l:.4f}, {self.m:.4f}, {self.u:.4f})"


TFNLike = Union[TriangularFuzzyNumber, Tuple[float, float, float]]


def as_tfn(value: TFNLike) -> TriangularFuzzyNumber:
    if isinstance(value, TriangularFuzzyNumber):
        return value
    return TriangularFuzzyNumber.from_tuple(value)


class FuzzyDecisionMatrix:
    """
    Container for a fuzzy decision matrix.

    Stores an alternatives × criteria matrix of Triangular Fuzzy Numbers.

    Attributes:
        matrix: Dictionary mapping alternative -> criterion -> TFN
        alternatives: Alternative labels, in row order
        criteria: Criterion names, in column order
    """

    def __init__(self,
                 matrix: Dict[Hashable, Dict[str, TriangularFuzzyNumber]],
                 alternatives: List[Hashable],
                 criteria: List[str]):
        self.matrix = matrix
        self.alternatives = alternatives
        self.criteria = criteria

    def __len__(self) -> int:
        return len(self.alternatives)

    def get(self, alternative: Hashable, criterion: str) -> TriangularFuzzyNumber:
        return self.matrix[alternative][criterion]

    def weighted(self, weights: Dict[str, float]) -> 'FuzzyDecisionMatrix':
        """New matrix with every cell of criterion j scaled by w_j."""
        return FuzzyDecisionMatrix(
            {alt: {c: self.matrix[alt][c] * weights[c] for c in self.criteria}
             for alt in self.alternatives},
            list(self.alternatives),
            list(self.criteria),
        )

    def to_crisp(self) -> pd.DataFrame:
        """Centroid-defuzzified matrix (alternatives × criteria)."""
        return pd.DataFrame(
            [[self.matrix[alt][c].defuzzify() for c in self.criteria]
             for alt in self.alternatives],
            index=self.alternatives,
            columns=self.criteria,
        )

    @staticmethod
    def from_columns(columns: Dict[str, Iterable[TFNLike]],
                     alternatives: List[Hashable]) -> 'FuzzyDecisionMatrix':
        """Build from ``{criterion: [TFN per alternative]}`` in row order."""
        criteria = list(columns)
        cells = {c: [as_tfn(v) for v in values] for c, values in columns.items()}
        matrix = {
            alt: {c: cells[c][i] for c in criteria}
            for i, alt in enumerate(alternatives)
        }
        return FuzzyDecisionMatrix(matrix, list(alternatives), criteria)
