# -*- coding: utf-8 -*-
"""
Traditional (crisp) MCDM methods.

- TOPSISCalculator: closeness to the ideal solution
"""

from .topsis import TOPSISCalculator, TOPSISResult, calculate_topsis, topsis_details

__all__ = [
    'TOPSISCalculator',
    'TOPSISResult',
    'calculate_topsis',
    'topsis_details',
]
