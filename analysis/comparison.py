# -*- coding: utf-8 -*-
"""
Crisp vs fuzzy track comparison.

Both tracks score and tier the same items; this module measures how far
they agree: a class transition matrix, the share of items given the same
tier, and the Spearman rank correlation of the two scores.
"""

import numpy as np
import pandas as pd
from dataclasses import dataclass
from typing import Any, Dict

from config import (CLASS_COLUMN, CLASS_LABELS, FUZZY_CLASS_COLUMN,
                    FUZZY_TOPSIS_SCORE, TOPSIS_SCORE)
from loggers import get_module_logger


logger = get_module_logger('analysis.comparison')


@dataclass
class ClassificationComparison:
    """Agreement between the crisp and fuzzy tiers."""
    transition_matrix: pd.DataFrame   # rows: Class, columns: Fuzzy_Class
    agreement_rate: float             # share of items with Class == Fuzzy_Class
    spearman_rho: float               # rank correlation of the two scores
    n_items: int

    def summary(self) -> Dict[str, Any]:
        return {
            'n_items': self.n_items,
            'agreement_rate': self.agreement_rate,
            'spearman_rho': self.spearman_rho,
            'transition_matrix': self.transition_matrix.to_dict(),
        }


def compare_classifications(items: pd.DataFrame) -> ClassificationComparison:
    """
    Compare ``Class`` / ``TOPSIS_Score`` with ``Fuzzy_Class`` /
    ``Fuzzy_TOPSIS_Score``.

    Only items carrying both scores are counted.  The rank correlation is
    0 when fewer than two such items exist or either score is constant.
    """
    from scipy.stats import spearmanr

    labels = list(CLASS_LABELS)
    empty = pd.DataFrame(0, index=pd.Index(labels, name=CLASS_COLUMN),
                         columns=pd.Index(labels, name=FUZZY_CLASS_COLUMN))

    needed = [TOPSIS_SCORE, FUZZY_TOPSIS_SCORE]
    if not all(c in items.columns for c in needed):
        return ClassificationComparison(empty, 0.0, 0.0, 0)

    both = items.dropna(subset=needed)
    n = len(both)

    if n and CLASS_COLUMN in both.columns and FUZZY_CLASS_COLUMN in both.columns:
        crisp_cls = both[CLASS_COLUMN]
        fuzzy_cls = both[FUZZY_CLASS_COLUMN]
        # Positional arrays: index labels of the item frame may repeat
        transitions = pd.crosstab(
            crisp_cls.to_numpy(), fuzzy_cls.to_numpy(),
            rownames=[CLASS_COLUMN], colnames=[FUZZY_CLASS_COLUMN],
        ).reindex(index=labels, columns=labels, fill_value=0).astype(int)
        transitions.index.name = CLASS_COLUMN
        transitions.columns.name = FUZZY_CLASS_COLUMN
        agreement = float(np.mean(crisp_cls.to_numpy() == fuzzy_cls.to_numpy()))
    else:
        transitions = empty
        agreement = 0.0

    crisp = both[TOPSIS_SCORE].to_numpy(dtype=float)
    fuzzy = both[FUZZY_TOPSIS_SCORE].to_numpy(dtype=float)
    if n >= 2 and np.ptp(crisp) > 0 and np.ptp(fuzzy) > 0:
        rho, _ = spearmanr(crisp, fuzzy)
        rho = float(rho)
    else:
        rho = 0.0

    logger.debug("Crisp vs fuzzy: n=%d, agreement=%.3f, rho=%.3f", n, agreement, rho)
    return ClassificationComparison(
        transition_matrix=transitions,
        agreement_rate=agreement,
        spearman_rho=rho,
        n_items=n,
    )
