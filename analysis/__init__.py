# -*- coding: utf-8 -*-
"""
Analysis Module
===============

Reporting helpers that sit beside the ranking (they never change scores).

Components
----------
Statistics
    - calculate_stats: min / max / mean / median / population std
    - describe_columns: one stats row per column
    - calculate_correlation_matrix: Pearson, 0 for constant columns

Comparison
    - compare_classifications: crisp vs fuzzy tier agreement

Example
-------
>>> from analysis import calculate_correlation_matrix, compare_classifications
>>> corr = calculate_correlation_matrix(items, ['Average stock', 'Daily usage'])
>>> cmp = compare_classifications(result.items)
>>> print(f"Agreement: {cmp.agreement_rate:.1%}")
"""

from .statistics import (
    calculate_stats,
    describe_columns,
    calculate_correlation_matrix,
)
from .comparison import ClassificationComparison, compare_classifications

__all__ = [
    # Statistics
    'calculate_stats',
    'describe_columns',
    'calculate_correlation_matrix',

    # Comparison
    'ClassificationComparison',
    'compare_classifications',
]
