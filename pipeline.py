# -*- coding: utf-8 -*-
"""
Inventory ABC-MCDM Pipeline Orchestrator
=========================================

Six-phase pipeline:

  Phase 1  Data Loading             (import contract, descriptive stats)
  Phase 2  Transformation           (qualitative mapping + aggregation)
  Phase 3  Entropy Weighting        (objective criterion weights)
  Phase 4  TOPSIS Ranking           (crisp, entropy-weighted)
  Phase 5  Fuzzy TOPSIS Ranking     (vertex method, equal weights)
  Phase 6  ABC Classification       (both tracks + crisp/fuzzy comparison)

``recompute`` runs the same stages without any console output; it is the
entry point for callers that hold the current raw items and configuration
and want a fresh result whenever either changes.  ``reclassify`` re-tiers
an existing result against new thresholds without rescoring.
"""

import dataclasses
import logging
import time
import numpy as np
import pandas as pd
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union

# Internal imports (support both package and direct execution)
try:
    from .config import (Config, get_default_config, ABCThresholds, ID_COLUMN,
                         CLASS_COLUMN, FUZZY_CLASS_COLUMN, TOPSIS_SCORE,
                         FUZZY_TOPSIS_SCORE, QUANTITATIVE_COLUMNS, ScoreField)
    from .loggers import setup_logging, log_execution, log_exceptions, timed_operation
    from .data_loader import InventoryDataLoader, items_from_records, numeric_column
    from .transformation import apply_mappings, calculate_aggregations
    from .weighting import WeightResult, calculate_entropy_weights
    from .mcdm.traditional import TOPSISResult, topsis_details
    from .mcdm.fuzzy import FuzzyTOPSISResult, fuzzy_topsis_details
    from .ranking import classify_abc, class_distribution
    from .analysis import (ClassificationComparison, compare_classifications,
                           describe_columns, calculate_correlation_matrix)
except ImportError:
    from config import (Config, get_default_config, ABCThresholds, ID_COLUMN,
                        CLASS_COLUMN, FUZZY_CLASS_COLUMN, TOPSIS_SCORE,
                        FUZZY_TOPSIS_SCORE, QUANTITATIVE_COLUMNS, ScoreField)
    from loggers import setup_logging, log_execution, log_exceptions, timed_operation
    from data_loader import InventoryDataLoader, items_from_records, numeric_column
    from transformation import apply_mappings, calculate_aggregations
    from weighting import WeightResult, calculate_entropy_weights
    from mcdm.traditional import TOPSISResult, topsis_details
    from mcdm.fuzzy import FuzzyTOPSISResult, fuzzy_topsis_details
    from ranking import classify_abc, class_distribution
    from analysis import (ClassificationComparison, compare_classifications,
                          describe_columns, calculate_correlation_matrix)


logger = logging.getLogger('abc_mcdm.pipeline')

_N_PHASES = 6


# =========================================================================
# Result container
# =========================================================================

@dataclass(frozen=True)
class PipelineResult:
    """Immutable snapshot of one pipeline run.

    ``items`` holds every raw and derived column, one row per item, in
    import (``id``) order.
    """
    items: pd.DataFrame
    entropy_weights: WeightResult
    config: Config

    topsis_result: Optional[TOPSISResult] = None
    fuzzy_result: Optional[FuzzyTOPSISResult] = None
    comparison: Optional[ClassificationComparison] = None
    descriptive_stats: Optional[pd.DataFrame] = None

    execution_time: float = 0.0

    # ---- convenience accessors ----

    def get_ranking_df(self) -> pd.DataFrame:
        """Items by crisp score (best first) with 1-based rank and both tiers."""
        cols = [c for c in (ID_COLUMN, TOPSIS_SCORE, CLASS_COLUMN,
                            FUZZY_TOPSIS_SCORE, FUZZY_CLASS_COLUMN)
                if c in self.items.columns]
        order = np.argsort(-numeric_column(self.items, TOPSIS_SCORE), kind='stable')
        df = self.items.iloc[order][cols].reset_index(drop=True)
        df.insert(0, 'Rank', np.arange(1, len(df) + 1))
        return df

    def class_distribution(self, fuzzy: bool = False) -> Dict[str, int]:
        return class_distribution(
            self.items, FUZZY_CLASS_COLUMN if fuzzy else CLASS_COLUMN)

    def correlation_matrix(self, columns: Optional[Sequence[str]] = None) -> pd.DataFrame:
        """Pearson matrix over *columns* (quantities + both scores by default)."""
        if columns is None:
            columns = list(QUANTITATIVE_COLUMNS) + [TOPSIS_SCORE, FUZZY_TOPSIS_SCORE]
        return calculate_correlation_matrix(self.items, columns)


# =========================================================================
# Stages
# =========================================================================

@log_execution(logger)
def transform_items(raw_items: pd.DataFrame, config: Config) -> pd.DataFrame:
    """Mapping then aggregation."""
    mapped = apply_mappings(raw_items, config.mappings)
    return calculate_aggregations(mapped, config.aggregation)


@log_execution(logger)
def score_crisp(items: pd.DataFrame, config: Config
                ) -> Tuple[pd.DataFrame, WeightResult, TOPSISResult]:
    """Entropy weights, then crisp TOPSIS scores."""
    weights = calculate_entropy_weights(items, config.entropy)
    result = topsis_details(items, weights, config.topsis)
    out = items.copy()
    out[TOPSIS_SCORE] = result.scores.to_numpy(dtype=float)
    return out, weights, result


@log_execution(logger)
def score_fuzzy(items: pd.DataFrame, config: Config
                ) -> Tuple[pd.DataFrame, FuzzyTOPSISResult]:
    """Fuzzy TOPSIS scores; reads only the raw columns of *items*."""
    result = fuzzy_topsis_details(items, config.fuzzy_numbers, config.fuzzy_topsis)
    out = items.copy()
    out[FUZZY_TOPSIS_SCORE] = result.scores.to_numpy(dtype=float)
    return out, result


@log_execution(logger)
def classify_both(items: pd.DataFrame, thresholds: ABCThresholds) -> pd.DataFrame:
    """``Class`` and ``Fuzzy_Class``, returned in ``id`` order."""
    out = classify_abc(items, thresholds, ScoreField.TOPSIS)
    out = classify_abc(out, thresholds, ScoreField.FUZZY_TOPSIS)
    if ID_COLUMN in out.columns:
        return out.sort_values(ID_COLUMN, kind='stable')
    return out.sort_index(kind='stable')


# =========================================================================
# Pure entry points
# =========================================================================

def recompute(raw_items: pd.DataFrame, config: Optional[Config] = None) -> PipelineResult:
    """Run every stage on *raw_items* under *config* and return a new result.

    Nothing is cached: calling twice with the same inputs yields the same
    scores and tiers.
    """
    config = config or get_default_config()
    start = time.time()
    with timed_operation(logger, f'recompute ({len(raw_items)} items)', level=logging.DEBUG):
        items = transform_items(raw_items, config)
        items, weights, topsis = score_crisp(items, config)
        items, fuzzy = score_fuzzy(items, config)
        items = classify_both(items, config.thresholds)
        comparison = compare_classifications(items)

    return PipelineResult(
        items=items,
        entropy_weights=weights,
        config=config,
        topsis_result=topsis,
        fuzzy_result=fuzzy,
        comparison=comparison,
        descriptive_stats=describe_columns(raw_items),
        execution_time=time.time() - start,
    )


def reclassify(result: PipelineResult,
               thresholds: Union[ABCThresholds, Mapping[str, float]]) -> PipelineResult:
    """Re-tier *result* under new *thresholds*; scores and weights are kept."""
    if not isinstance(thresholds, ABCThresholds):
        thresholds = ABCThresholds.from_mapping(thresholds)
    items = classify_both(result.items, thresholds)
    return dataclasses.replace(
        result,
        items=items,
        config=dataclasses.replace(result.config, thresholds=thresholds),
        comparison=compare_classifications(items),
    )


# =========================================================================
# Pipeline
# =========================================================================

class InventoryABCPipeline:
    """
    Inventory ABC classification with MCDM, with console monitoring.

    Integrates
    ----------
    * Qualitative mapping and Criticality / Demand / Supply aggregation
    * Entropy-weighted crisp TOPSIS
    * Fuzzy TOPSIS (vertex method) on the raw attributes
    * ABC tiers for both tracks and their agreement
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or get_default_config()
        self.console, _ = setup_logging(
            self.config.output_dir,
            use_color=self.config.logging.use_color,
            debug_json=False,
            quiet=not self.config.logging.console,
        )
        self.debug_log = None
        self.logger = logging.getLogger('abc_mcdm')

    # -----------------------------------------------------------------
    # Main entry point
    # -----------------------------------------------------------------

    def run(self, data_path: Optional[Union[str, Path]] = None,
            items: Optional[Union[pd.DataFrame, Iterable[Mapping[str, Any]]]] = None
            ) -> PipelineResult:
        """Execute every phase on a file or on in-memory records."""
        if data_path is None and items is None:
            raise ValueError("Either data_path or items must be given")

        start_time = time.time()
        if self.config.logging.debug_json:
            _, self.debug_log = setup_logging(self.config.output_dir, debug_json=True,
                                              quiet=True)
        try:
            self.console.banner('Inventory ABC Classification',
                                subtitle='Entropy TOPSIS + Fuzzy TOPSIS')

            # Phase 1: Data Loading
            with self.console.phase('Data Loading', total_phases=_N_PHASES) as ph:
                raw_items = self._load_items(data_path, items)
                stats = describe_columns(raw_items)
                ph.metric('Items', len(raw_items))
                self.console.table(
                    ['Column', 'Min', 'Max', 'Mean', 'Median', 'Std'],
                    [[col] + [f'{v:.2f}' for v in row]
                     for col, row in stats.iterrows()],
                    [14, 9, 9, 9, 9, 9])

            # Phase 2: Transformation
            with self.console.phase('Qualitative Mapping & Aggregation',
                                    total_phases=_N_PHASES) as ph:
                transformed = transform_items(raw_items, self.config)
                ph.detail('Criticality_Agg, Demand_Agg, Supply_Agg computed')

            # Phase 3 + 4: Entropy weights and crisp TOPSIS
            with self.console.phase('Entropy Weighting', total_phases=_N_PHASES) as ph:
                weights = calculate_entropy_weights(transformed, self.config.entropy)
                if weights.details.get('fallback'):
                    ph.warning(f"Equal weights used ({weights.details['fallback']})")
                self.console.table(
                    ['Criterion', 'Weight'],
                    [[c, f'{w:.4f}'] for c, w in weights.weights.items()],
                    [18, 10])

            with self.console.phase('TOPSIS Ranking', total_phases=_N_PHASES) as ph:
                topsis = topsis_details(transformed, weights, self.config.topsis)
                scored = transformed.copy()
                scored[TOPSIS_SCORE] = topsis.scores.to_numpy(dtype=float)
                if len(scored):
                    ph.metrics({'best_id': self._best_id(scored, TOPSIS_SCORE),
                                'max_score': float(topsis.scores.max())})

            # Phase 5: Fuzzy TOPSIS
            with self.console.phase('Fuzzy TOPSIS Ranking', total_phases=_N_PHASES) as ph:
                scored, fuzzy = score_fuzzy(scored, self.config)
                if len(scored):
                    ph.metrics({'best_id': self._best_id(scored, FUZZY_TOPSIS_SCORE),
                                'max_score': float(fuzzy.scores.max())})

            # Phase 6: ABC Classification
            with self.console.phase('ABC Classification', total_phases=_N_PHASES) as ph:
                classified = classify_both(scored, self.config.thresholds)
                comparison = compare_classifications(classified)
                crisp_dist = class_distribution(classified, CLASS_COLUMN)
                fuzzy_dist = class_distribution(classified, FUZZY_CLASS_COLUMN)
                ph.metric('TOPSIS A/B/C', '/'.join(str(v) for v in crisp_dist.values()))
                ph.metric('Fuzzy  A/B/C', '/'.join(str(v) for v in fuzzy_dist.values()))
                ph.metric('Agreement', comparison.agreement_rate)

            execution_time = time.time() - start_time
            result = PipelineResult(
                items=classified,
                entropy_weights=weights,
                config=self.config,
                topsis_result=topsis,
                fuzzy_result=fuzzy,
                comparison=comparison,
                descriptive_stats=stats,
                execution_time=execution_time,
            )

            if self.debug_log is not None:
                self.debug_log.log_data('entropy_weights', weights.weights)
                self.debug_log.log_data('entropy_details', weights.details)
                self.debug_log.log_data('class_distribution',
                                        {'topsis': crisp_dist, 'fuzzy': fuzzy_dist})
                self.debug_log.log_data('comparison', comparison.summary())

            self.console.separator()
            self.console.info(f'Pipeline completed in {execution_time:.2f}s')
            self.console.separator()
            return result
        finally:
            # Always flush & close the debug log, even if a phase raises
            if self.debug_log is not None:
                self.debug_log.close()

    # -----------------------------------------------------------------
    # Helpers
    # -----------------------------------------------------------------

    @log_exceptions(logger)
    def _load_items(self, data_path, items) -> pd.DataFrame:
        if items is not None:
            if isinstance(items, pd.DataFrame) and ID_COLUMN in items.columns:
                return items.copy()
            return items_from_records(items)
        loader = InventoryDataLoader(self.config)
        return loader.load(data_path)

    @staticmethod
    def _best_id(items: pd.DataFrame, score_column: str):
        pos = int(np.argmax(numeric_column(items, score_column)))
        if ID_COLUMN in items.columns:
            return int(items[ID_COLUMN].iloc[pos])
        return items.index[pos]
