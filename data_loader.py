# -*- coding: utf-8 -*-
"""Inventory data loading and item-frame helpers.

This module handles:
1. Reading a tabular inventory file (CSV with a header row) into an item
   frame, one row per stock-keeping unit.
2. Enforcing the input contract: the eight named columns must be present.
3. Dropping records whose every field is empty, then assigning a stable
   1-based ``id`` in file order.
4. Lenient numeric parsing: a quantity is read from its leading number
   ("12 kg" is 12), anything without one becomes 0, and ``Lead time``
   keeps only its leading integer digits ("7.9" is 7, "1e3" is 1).

It also hosts the column accessors every calculation stage shares, so that
a derived column which has not been computed yet reads as zeros.

Notes
-----
The item frame is never mutated in place by any stage of the pipeline;
each stage returns a copy with its derived columns added.
"""

import numpy as np
import pandas as pd
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

try:
    from .config import (Config, get_default_config, ID_COLUMN, LEAD_TIME,
                         QUALITATIVE_COLUMNS,
                         REQUIRED_COLUMNS, DECISION_CRITERIA)
    from .loggers import get_module_logger
except ImportError:
    from config import (Config, get_default_config, ID_COLUMN, LEAD_TIME,
                        QUALITATIVE_COLUMNS,
                        REQUIRED_COLUMNS, DECISION_CRITERIA)
    from loggers import get_module_logger


logger = get_module_logger('data_loader')

# Leading numeric prefix of a cell, as a lenient float or integer reader sees it
_FLOAT_PREFIX = r'^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)'
_INT_PREFIX = r'^\s*([-+]?\d+)'


# =========================================================================
# Item-frame accessors
# =========================================================================

def numeric_column(items: pd.DataFrame, column: str) -> np.ndarray:
    """Return *column* as a float array.

    A column that is absent from the frame (a derived field that has not
    been computed yet) and any missing or non-numeric cell read as 0.
    """
    if column not in items.columns:
        return np.zeros(len(items), dtype=float)
    values = pd.to_numeric(items[column], errors='coerce')
    return values.fillna(0.0).to_numpy(dtype=float)


def decision_matrix(items: pd.DataFrame,
                    criteria: Sequence[str] = tuple(DECISION_CRITERIA)) -> pd.DataFrame:
    """Alternatives x criteria matrix over *criteria*, indexed like *items*."""
    return pd.DataFrame(
        {c: numeric_column(items, c) for c in criteria},
        index=items.index,
    )


# =========================================================================
# Record parsing
# =========================================================================

def _is_blank(value: Any) -> bool:
    """None, NaN or the empty string; whitespace counts as a value."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ''
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _leading_number(source: pd.Series, pattern: str) -> pd.Series:
    """Number at the start of each cell, 0 where there is none."""
    text = pd.Series(['' if _is_blank(v) else str(v) for v in source],
                     index=source.index, dtype=object)
    matched = text.str.extract(pattern, expand=False)
    return pd.to_numeric(matched, errors='coerce').fillna(0)


def items_from_records(
    records: Union[pd.DataFrame, Iterable[Mapping[str, Any]]],
) -> pd.DataFrame:
    """Build an item frame from raw records.

    Records whose every field is blank are dropped, then ``id`` is
    assigned 1..n in the surviving order.  Columns that a record lacks
    are read as blank.
    """
    if isinstance(records, pd.DataFrame):
        raw = records.copy()
    else:
        raw = pd.DataFrame(list(records))

    if len(raw):
        blank = raw.apply(lambda row: all(_is_blank(v) for v in row), axis=1)
        raw = raw.loc[~blank.astype(bool)]
    raw = raw.reset_index(drop=True)

    items = pd.DataFrame(index=raw.index)
    items[ID_COLUMN] = np.arange(1, len(raw) + 1, dtype=int)
    for column in REQUIRED_COLUMNS:
        source = raw[column] if column in raw.columns else pd.Series(
            [None] * len(raw), index=raw.index, dtype=object)
        if column in QUALITATIVE_COLUMNS:
            items[column] = source.map(lambda v: '' if _is_blank(v) else str(v).strip())
        elif column == LEAD_TIME:
            items[column] = _leading_number(source, _INT_PREFIX).astype(int)
        else:
            items[column] = _leading_number(source, _FLOAT_PREFIX).astype(float)
    return items


# =========================================================================
# Loader
# =========================================================================

class InventoryDataLoader:
    """Load an inventory file into an item frame.

    Parameters
    ----------
    config : Config, optional
        Pipeline configuration; only used for logging context today.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or get_default_config()
        self.logger = logger

    def load(self, path: Union[str, Path]) -> pd.DataFrame:
        """Read *path* and return the item frame.

        Raises
        ------
        FileNotFoundError
            If *path* does not exist.
        ValueError
            If one or more required columns are missing from the header.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Inventory file not found: {path}")

        self.logger.info(f"Loading inventory from {path}")
        raw = pd.read_csv(path, dtype=str, keep_default_na=False)
        raw.columns = [str(c).strip() for c in raw.columns]

        missing = self.missing_columns(raw.columns)
        if missing:
            raise ValueError(f"Missing required columns: {', '.join(missing)}")

        items = items_from_records(raw[REQUIRED_COLUMNS])
        n_dropped = len(raw) - len(items)
        if n_dropped:
            self.logger.info(f"  Dropped {n_dropped} empty row(s)")
        self.logger.info(f"[OK] Loaded {len(items)} items")
        return items

    @staticmethod
    def missing_columns(columns: Iterable[str]) -> List[str]:
        """Required columns absent from *columns*, in contract order."""
        present = set(columns)
        return [c for c in REQUIRED_COLUMNS if c not in present]


def load_data(path: Union[str, Path]) -> pd.DataFrame:
    """Convenience wrapper around :class:`InventoryDataLoader`."""
    return InventoryDataLoader().load(path)


__all__ = [
    'InventoryDataLoader',
    'items_from_records',
    'numeric_column',
    'decision_matrix',
    'load_data',
]
