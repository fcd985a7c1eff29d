# -*- coding: utf-8 -*-
"""
Transformation Module
=====================

Turns raw inventory attributes into comparable criterion values.

Components
----------
mapping
    Qualitative labels -> crisp scores (``apply_mappings``) or
    triangular fuzzy numbers (``apply_fuzzy_mappings``).
aggregation
    Second-level criteria Criticality / Demand / Supply as pairwise
    weighted sums of scores and min-max scaled quantities.
"""

from .mapping import apply_mappings, apply_fuzzy_mappings, map_labels
from .aggregation import calculate_aggregations

__all__ = [
    'apply_mappings',
    'apply_fuzzy_mappings',
    'map_labels',
    'calculate_aggregations',
]
