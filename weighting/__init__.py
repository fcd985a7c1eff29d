# -*- coding: utf-8 -*-
"""
Weighting Methods Module

Objective weight calculation for the crisp decision matrix:

**Method:**
- EntropyWeightCalculator: Information theory-based weighting
- calculate_entropy_weights: Entropy weights of an item frame's
  five-criterion decision matrix

**Utilities:**
- min_max_normalize: [0, 1] scaling with 0.5 for constant series
- vector_normalize: Euclidean column normalization (TOPSIS)
- WeightResult / equal_weights: Result container and 1/k fallback
"""

from .base import WeightResult, equal_weights
from .normalization import min_max_normalize, vector_normalize
from .entropy import EntropyWeightCalculator, calculate_entropy_weights

__all__ = [
    # Core result types
    'WeightResult',
    'equal_weights',

    # Normalization
    'min_max_normalize',
    'vector_normalize',

    # Entropy
    'EntropyWeightCalculator',
    'calculate_entropy_weights',
]
