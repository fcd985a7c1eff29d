# -*- coding: utf-8 -*-
"""
Centralised Configuration for the Inventory ABC-MCDM Pipeline
==============================================================

All configurable parameters are defined here as typed dataclasses.
The master ``Config`` class composes every sub-config and provides
serialisation and summary printing.

Configuration Groups
--------------------
- MappingTable             - crisp scores for qualitative labels
- FuzzyNumberTable         - triangular fuzzy numbers for qualitative labels
- AggregationWeights       - convex weights of the three second-level criteria
- ABCThresholds            - cumulative population percentages for A/B/C
- EntropyConfig            - entropy weighting numerics
- TOPSISConfig             - benefit / cost direction of each criterion
- FuzzyTOPSISConfig        - fuzzy positive / negative ideal points
- PathConfig               - output directory structure
- LoggingConfig            - console / debug JSON channels

Configuration objects are frozen; derive a modified copy with
``dataclasses.replace`` and hand the new snapshot to the pipeline.
Nothing here is validated: weights that do not sum to one or thresholds
that do not sum to 100 flow through the calculations unchanged.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple
from enum import Enum


# =========================================================================
# Column Naming
# =========================================================================

RISK = "Risk"
DEMAND_FLUCTUATION = "Demand fluctuation"
AVERAGE_STOCK = "Average stock"
DAILY_USAGE = "Daily usage"
UNIT_COST = "Unit cost"
LEAD_TIME = "Lead time"
CONSIGNMENT_STOCK = "Consignment stock"
UNIT_SIZE = "Unit size"
ID_COLUMN = "id"

# Input contract, in file order.
REQUIRED_COLUMNS: List[str] = [
    RISK, DEMAND_FLUCTUATION, AVERAGE_STOCK, DAILY_USAGE,
    UNIT_COST, LEAD_TIME, CONSIGNMENT_STOCK, UNIT_SIZE,
]
QUALITATIVE_COLUMNS: List[str] = [RISK, DEMAND_FLUCTUATION, CONSIGNMENT_STOCK, UNIT_SIZE]
QUANTITATIVE_COLUMNS: List[str] = [AVERAGE_STOCK, DAILY_USAGE, UNIT_COST, LEAD_TIME]

# Qualitative column -> derived crisp score column
SCORE_COLUMNS: Dict[str, str] = {
    RISK: "Risk_Score",
    DEMAND_FLUCTUATION: "Fluctuation_Score",
    CONSIGNMENT_STOCK: "Consignment_Score",
    UNIT_SIZE: "Size_Score",
}

CRITICALITY_AGG = "Criticality_Agg"
DEMAND_AGG = "Demand_Agg"
SUPPLY_AGG = "Supply_Agg"

# Crisp decision matrix (entropy weighting + TOPSIS)
DECISION_CRITERIA: List[str] = [
    CRITICALITY_AGG, DEMAND_AGG, SUPPLY_AGG, UNIT_COST, SCORE_COLUMNS[UNIT_SIZE],
]

# Fuzzy decision matrix, in criterion order
FUZZY_CRITERIA: List[str] = [
    RISK, DEMAND_FLUCTUATION, AVERAGE_STOCK, DAILY_USAGE,
    UNIT_COST, LEAD_TIME, CONSIGNMENT_STOCK, UNIT_SIZE,
]

TOPSIS_SCORE = "TOPSIS_Score"
FUZZY_TOPSIS_SCORE = "Fuzzy_TOPSIS_Score"
CLASS_COLUMN = "Class"
FUZZY_CLASS_COLUMN = "Fuzzy_Class"
CLASS_LABELS: Tuple[str, str, str] = ("A", "B", "C")


class ScoreField(Enum):
    """Score columns the ABC classifier can rank by."""
    TOPSIS = TOPSIS_SCORE
    FUZZY_TOPSIS = FUZZY_TOPSIS_SCORE


TFN = Tuple[float, float, float]


# =========================================================================
# Qualitative Mappings
# =========================================================================

@dataclass(frozen=True)
class MappingTable:
    """Crisp score in [0, 1] for every known label of each qualitative column.

    Labels missing from a sub-table score 0.0.
    """
    risk: Dict[str, float] = field(default_factory=lambda: {
        "High": 0.47, "Normal": 0.35, "Low": 0.18,
    })
    demand_fluctuation: Dict[str, float] = field(default_factory=lambda: {
        "Increasing": 0.36, "Stable": 0.28, "Unknown": 0.20,
        "Decreasing": 0.16, "Ending": 0.00,
    })
    consignment_stock: Dict[str, float] = field(default_factory=lambda: {
        "No": 0.80, "Yes": 0.20,
    })
    unit_size: Dict[str, float] = field(default_factory=lambda: {
        "Large": 0.53, "Medium": 0.31, "Small": 0.13,
    })

    def table_for(self, column: str) -> Dict[str, float]:
        """Return the sub-table of a qualitative column."""
        return {
            RISK: self.risk,
            DEMAND_FLUCTUATION: self.demand_fluctuation,
            CONSIGNMENT_STOCK: self.consignment_stock,
            UNIT_SIZE: self.unit_size,
        }[column]


@dataclass(frozen=True)
class FuzzyNumberTable:
    """Triangular fuzzy number (l, m, u) for every known label.

    Labels missing from a sub-table map to (0, 0, 0). A triple given out of
    order is sorted when it becomes a fuzzy number, so (0.9, 0.1, 0.5) is used
    as (0.1, 0.5, 0.9) in every distance.
    """
    risk: Dict[str, TFN] = field(default_factory=lambda: {
        "High": (0.7, 0.9, 1.0),
        "Normal": (0.3, 0.5, 0.7),
        "Low": (0.0, 0.1, 0.3),
    })
    demand_fluctuation: Dict[str, TFN] = field(default_factory=lambda: {
        "Increasing": (0.7, 0.9, 1.0),
        "Stable": (0.4, 0.6, 0.8),
        "Unknown": (0.2, 0.4, 0.6),
        "Decreasing": (0.1, 0.2, 0.4),
        "Ending": (0.0, 0.0, 0.1),
    })
    consignment_stock: Dict[str, TFN] = field(default_factory=lambda: {
        "No": (0.6, 0.8, 1.0),
        "Yes": (0.0, 0.2, 0.4),
    })
    unit_size: Dict[str, TFN] = field(default_factory=lambda: {
        "Large": (0.6, 0.8, 1.0),
        "Medium": (0.3, 0.5, 0.7),
        "Small": (0.0, 0.2, 0.4),
    })

    def table_for(self, column: str) -> Dict[str, TFN]:
        """Return the sub-table of a qualitative column."""
        return {
            RISK: self.risk,
            DEMAND_FLUCTUATION: self.demand_fluctuation,
            CONSIGNMENT_STOCK: self.consignment_stock,
            UNIT_SIZE: self.unit_size,
        }[column]


# =========================================================================
# Aggregation Weights
# =========================================================================

@dataclass(frozen=True)
class CriticalityWeights:
    risk: float = 0.78
    fluctuation: float = 0.22


@dataclass(frozen=True)
class DemandWeights:
    daily_usage: float = 0.71
    average_stock: float = 0.29


@dataclass(frozen=True)
class SupplyWeights:
    lead_time: float = 0.75
    consignment: float = 0.25


@dataclass(frozen=True)
class AggregationWeights:
    """Pairwise weights of the Criticality / Demand / Supply aggregates.

    Each pair conventionally sums to 1; this is the caller's responsibility.
    """
    criticality: CriticalityWeights = field(default_factory=CriticalityWeights)
    demand: DemandWeights = field(default_factory=DemandWeights)
    supply: SupplyWeights = field(default_factory=SupplyWeights)


# =========================================================================
# ABC Classification
# =========================================================================

@dataclass(frozen=True)
class ABCThresholds:
    """Cumulative population percentages for tiers A, B and C."""
    a: float = 20.0
    b: float = 30.0
    c: float = 50.0

    @classmethod
    def from_mapping(cls, values: Mapping[str, float]) -> 'ABCThresholds':
        """Build from ``{'A': .., 'B': .., 'C': ..}`` (keys case-insensitive)."""
        lowered = {str(k).lower(): float(v) for k, v in values.items()}
        return cls(a=lowered.get("a", 0.0), b=lowered.get("b", 0.0),
                   c=lowered.get("c", 0.0))


# =========================================================================
# MCDM Method Parameters
# =========================================================================

@dataclass(frozen=True)
class EntropyConfig:
    """Entropy weighting numerics."""
    epsilon: float = 1e-4   # shift added after min-max scaling, keeps ln() finite


@dataclass(frozen=True)
class TOPSISConfig:
    """Direction of each crisp decision criterion."""
    benefit_criteria: Tuple[str, ...] = (CRITICALITY_AGG, DEMAND_AGG, SCORE_COLUMNS[UNIT_SIZE])
    cost_criteria: Tuple[str, ...] = (SUPPLY_AGG, UNIT_COST)


@dataclass(frozen=True)
class FuzzyTOPSISConfig:
    """Fixed fuzzy ideal points (before weighting)."""
    positive_ideal: TFN = (1.0, 1.0, 1.0)
    negative_ideal: TFN = (0.0, 0.0, 0.0)


# =========================================================================
# Paths & Logging
# =========================================================================

@dataclass(frozen=True)
class PathConfig:
    """File and directory paths, all derived from *base_dir*."""
    base_dir: Path = field(default_factory=lambda: Path.cwd())

    @property
    def output_dir(self) -> Path:
        return self.base_dir / "result"

    @property
    def logs_dir(self) -> Path:
        return self.output_dir / "logs"

    def ensure_directories(self) -> None:
        """Create every output directory if missing."""
        for d in [self.output_dir, self.logs_dir]:
            d.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class LoggingConfig:
    """Console / debug JSON channel switches."""
    console: bool = True
    debug_json: bool = False
    use_color: Optional[bool] = None   # None → detect from the terminal


# =========================================================================
# Master Configuration
# =========================================================================

@dataclass(frozen=True)
class Config:
    """Master configuration composing every sub-config."""
    mappings: MappingTable = field(default_factory=MappingTable)
    fuzzy_numbers: FuzzyNumberTable = field(default_factory=FuzzyNumberTable)
    aggregation: AggregationWeights = field(default_factory=AggregationWeights)
    thresholds: ABCThresholds = field(default_factory=ABCThresholds)

    # MCDM
    entropy: EntropyConfig = field(default_factory=EntropyConfig)
    topsis: TOPSISConfig = field(default_factory=TOPSISConfig)
    fuzzy_topsis: FuzzyTOPSISConfig = field(default_factory=FuzzyTOPSISConfig)

    # Runtime
    paths: PathConfig = field(default_factory=PathConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # --- convenience properties ---

    @property
    def output_dir(self) -> str:
        return str(self.paths.output_dir)

    # --- serialisation ---

    def to_dict(self) -> Dict:
        def _cvt(obj):
            if hasattr(obj, '__dataclass_fields__'):
                return {k: _cvt(v) for k, v in obj.__dict__.items()}
            if isinstance(obj, Enum):
                return obj.value
            if isinstance(obj, Path):
                return str(obj)
            if isinstance(obj, (list, tuple)):
                return [_cvt(i) for i in obj]
            if isinstance(obj, dict):
                return {k: _cvt(v) for k, v in obj.items()}
            return obj
        return _cvt(self)

    def summary(self) -> str:
        agg = self.aggregation
        thr = self.thresholds
        return (
            f"\n{'='*72}\n"
            f"  Inventory ABC-MCDM Configuration Summary\n"
            f"{'='*72}\n\n"
            f"  AGGREGATION WEIGHTS\n"
            f"    Criticality     : Risk={agg.criticality.risk}"
            f"  Fluctuation={agg.criticality.fluctuation}\n"
            f"    Demand          : DailyUsage={agg.demand.daily_usage}"
            f"  AverageStock={agg.demand.average_stock}\n"
            f"    Supply          : LeadTime={agg.supply.lead_time}"
            f"  Consignment={agg.supply.consignment}\n\n"
            f"  TOPSIS\n"
            f"    Benefit         : {', '.join(self.topsis.benefit_criteria)}\n"
            f"    Cost            : {', '.join(self.topsis.cost_criteria)}\n"
            f"    Entropy eps     : {self.entropy.epsilon}\n\n"
            f"  FUZZY TOPSIS\n"
            f"    FPIS / FNIS     : {self.fuzzy_topsis.positive_ideal}"
            f" / {self.fuzzy_topsis.negative_ideal}\n\n"
            f"  ABC THRESHOLDS\n"
            f"    A / B / C       : {thr.a:g}% / {thr.b:g}% / {thr.c:g}%\n"
            f"{'='*72}\n"
        )


def get_default_config() -> Config:
    """Return a *fresh* default Config instance."""
    return Config()
