# -*- coding: utf-8 -*-
"""
ABC Ranking
===========

Tiering of scored items into classes A / B / C.
"""

from .abc_classification import classify_abc, class_distribution, class_column_for

__all__ = [
    'classify_abc',
    'class_distribution',
    'class_column_for',
]
