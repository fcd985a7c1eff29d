# -*- coding: utf-8 -*-
"""
Fuzzy MCDM Methods Module
=========================

Fuzzy TOPSIS over Triangular Fuzzy Numbers (TFN), using the vertex
distance to fixed fuzzy ideal points.

Core Components:
    - TriangularFuzzyNumber: Fuzzy number representation (l, m, u)
    - FuzzyDecisionMatrix: Container for fuzzy decision matrices
    - FuzzyTOPSIS: Closeness to FPIS / FNIS

Example Usage:
    >>> from mcdm.fuzzy import build_fuzzy_decision_matrix, FuzzyTOPSIS
    >>> matrix = build_fuzzy_decision_matrix(items)
    >>> result = FuzzyTOPSIS().calculate(matrix)
    >>> result.scores
"""

from .base import TriangularFuzzyNumber, FuzzyDecisionMatrix, as_tfn
from .topsis import (
    FuzzyTOPSIS,
    FuzzyTOPSISResult,
    build_fuzzy_decision_matrix,
    calculate_fuzzy_topsis,
    fuzzy_topsis_details,
)

__all__ = [
    # Core types
    'TriangularFuzzyNumber',
    'FuzzyDecisionMatrix',
    'as_tfn',
    # Methods
    'FuzzyTOPSIS',
    'FuzzyTOPSISResult',
    'build_fuzzy_decision_matrix',
    'calculate_fuzzy_topsis',
    'fuzzy_topsis_details',
]
