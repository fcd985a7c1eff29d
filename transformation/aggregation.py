# -*- coding: utf-8 -*-
"""
Second-level criteria aggregation.

    Criticality_Agg = w_risk · Risk_Score + w_fluct · Fluctuation_Score
    Demand_Agg      = w_usage · norm(Daily usage) + w_stock · norm(Average stock)
    Supply_Agg      = w_lead · norm(Lead time) + w_consign · Consignment_Score

``norm`` is min-max scaling across the whole dataset.  ``Unit cost`` is
left raw here.  The results are not clamped: group weights that do not
sum to one can push an aggregate outside [0, 1].
"""

import pandas as pd
from typing import Optional

from config import (AVERAGE_STOCK, CONSIGNMENT_STOCK, CRITICALITY_AGG,
                    DAILY_USAGE, DEMAND_AGG, DEMAND_FLUCTUATION, LEAD_TIME,
                    RISK, SCORE_COLUMNS, SUPPLY_AGG, AggregationWeights)
from data_loader import numeric_column
from loggers import get_module_logger
from weighting.normalization import min_max_normalize


logger = get_module_logger('transformation.aggregation')


def calculate_aggregations(items: pd.DataFrame,
                           weights: Optional[AggregationWeights] = None) -> pd.DataFrame:
    """
    Add ``Criticality_Agg``, ``Demand_Agg`` and ``Supply_Agg``.

    Score columns that have not been computed read as 0.

    Parameters
    ----------
    items : pd.DataFrame
        Item frame, normally the output of ``apply_mappings``.
    weights : AggregationWeights, optional
        Pairwise group weights; defaults to ``AggregationWeights()``.

    Returns
    -------
    pd.DataFrame
        Copy of *items* with the three aggregate columns.
    """
    w = weights or AggregationWeights()

    norm_usage = min_max_normalize(numeric_column(items, DAILY_USAGE))
    norm_stock = min_max_normalize(numeric_column(items, AVERAGE_STOCK))
    norm_lead = min_max_normalize(numeric_column(items, LEAD_TIME))

    risk = numeric_column(items, SCORE_COLUMNS[RISK])
    fluctuation = numeric_column(items, SCORE_COLUMNS[DEMAND_FLUCTUATION])
    consignment = numeric_column(items, SCORE_COLUMNS[CONSIGNMENT_STOCK])

    out = items.copy()
    out[CRITICALITY_AGG] = w.criticality.risk * risk + w.criticality.fluctuation * fluctuation
    out[DEMAND_AGG] = w.demand.daily_usage * norm_usage + w.demand.average_stock * norm_stock
    out[SUPPLY_AGG] = w.supply.lead_time * norm_lead + w.supply.consignment * consignment

    logger.debug(
        "Aggregated %d items (mean Criticality=%.4f, Demand=%.4f, Supply=%.4f)",
        len(out),
        out[CRITICALITY_AGG].mean() if len(out) else 0.0,
        out[DEMAND_AGG].mean() if len(out) else 0.0,
        out[SUPPLY_AGG].mean() if len(out) else 0.0,
    )
    return out
