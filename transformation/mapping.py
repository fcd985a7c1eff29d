# -*- coding: utf-8 -*-
"""
Qualitative-to-quantitative mapping.

Each of the four qualitative columns (Risk, Demand fluctuation,
Consignment stock, Unit size) is looked up in its own sub-table.  A label
missing from the sub-table silently maps to 0.0 (crisp) or (0, 0, 0)
(fuzzy).
"""

import pandas as pd
from typing import Any, Dict, Optional

from config import (FuzzyNumberTable, MappingTable, QUALITATIVE_COLUMNS,
                    SCORE_COLUMNS, TFN)
from loggers import get_module_logger


logger = get_module_logger('transformation.mapping')

_ZERO_TFN: TFN = (0.0, 0.0, 0.0)


def map_labels(items: pd.DataFrame, column: str, lookup: Dict[str, Any],
               default: Any) -> pd.Series:
    """Look every label of *column* up in *lookup*, *default* when unknown."""
    if column not in items.columns:
        return pd.Series([default] * len(items), index=items.index, dtype=object)
    return items[column].map(lambda label: lookup.get(label, default))


def apply_mappings(items: pd.DataFrame,
                   table: Optional[MappingTable] = None) -> pd.DataFrame:
    """
    Add the crisp score columns.

    Parameters
    ----------
    items : pd.DataFrame
        Item frame with the qualitative raw columns.
    table : MappingTable, optional
        Label -> score sub-tables; defaults to ``MappingTable()``.

    Returns
    -------
    pd.DataFrame
        Copy of *items* with ``Risk_Score``, ``Fluctuation_Score``,
        ``Consignment_Score`` and ``Size_Score``.
    """
    table = table or MappingTable()
    out = items.copy()
    for column, score_column in SCORE_COLUMNS.items():
        lookup = table.table_for(column)
        out[score_column] = map_labels(items, column, lookup, 0.0).astype(float)
        n_unknown = int((~items[column].isin(list(lookup))).sum()) \
            if column in items.columns else len(items)
        if n_unknown:
            logger.debug("%s: %d item(s) with unmapped label scored 0", column, n_unknown)
    return out


def apply_fuzzy_mappings(items: pd.DataFrame,
                         table: Optional[FuzzyNumberTable] = None) -> pd.DataFrame:
    """
    Map the qualitative columns to triangular fuzzy numbers.

    Returns a frame indexed like *items* with one column per qualitative
    attribute, each cell an ``(l, m, u)`` tuple of floats.  *items* is not
    modified.
    """
    table = table or FuzzyNumberTable()
    fuzzy = pd.DataFrame(index=items.index)
    for column in QUALITATIVE_COLUMNS:
        lookup = table.table_for(column)
        fuzzy[column] = map_labels(items, column, lookup, _ZERO_TFN).map(
            lambda tfn: tuple(float(v) for v in tfn))
    return fuzzy
