# -*- coding: utf-8 -*-
"""
Multi-Criteria Decision Making Module
=====================================

Submodules
----------
traditional
    Crisp TOPSIS over the entropy-weighted five-criterion matrix
fuzzy
    Fuzzy TOPSIS (vertex method) over the eight-criterion TFN matrix

Usage
-----
>>> from mcdm.traditional import TOPSISCalculator
>>> from mcdm.fuzzy import FuzzyTOPSIS
>>> from weighting import EntropyWeightCalculator
"""

from .traditional import (
    TOPSISCalculator, TOPSISResult, calculate_topsis,
)
from .fuzzy import (
    FuzzyTOPSIS, FuzzyTOPSISResult, calculate_fuzzy_topsis,
    TriangularFuzzyNumber, FuzzyDecisionMatrix,
)

# Import weighting methods from weighting module
from weighting import EntropyWeightCalculator, WeightResult


__all__ = [
    # Weights
    'EntropyWeightCalculator',
    'WeightResult',

    # Crisp
    'TOPSISCalculator', 'TOPSISResult', 'calculate_topsis',

    # Fuzzy
    'FuzzyTOPSIS', 'FuzzyTOPSISResult', 'calculate_fuzzy_topsis',
    'TriangularFuzzyNumber', 'FuzzyDecisionMatrix',
]

