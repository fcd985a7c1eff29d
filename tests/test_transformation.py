# -*- coding: utf-8 -*-
"""
Unit tests for qualitative mapping and second-level aggregation.
"""

import numpy as np
import pandas as pd
import pytest

from config import (CRITICALITY_AGG, DEMAND_AGG, SUPPLY_AGG, SCORE_COLUMNS,
                    AggregationWeights, CriticalityWeights, DemandWeights,
                    FuzzyNumberTable, MappingTable)
from transformation import (apply_fuzzy_mappings, apply_mappings,
                            calculate_aggregations, map_labels)


@pytest.fixture()
def mapped(raw_items):
    return apply_mappings(raw_items)


class TestApplyMappings:
    def test_adds_four_score_columns(self, mapped):
        for column in SCORE_COLUMNS.values():
            assert column in mapped.columns

    def test_default_scores(self, mapped):
        first = mapped.iloc[0]   # High / Increasing / No / Large
        assert abs(first["Risk_Score"] - 0.47) < 1e-12
        assert abs(first["Fluctuation_Score"] - 0.36) < 1e-12
        assert abs(first["Consignment_Score"] - 0.80) < 1e-12
        assert abs(first["Size_Score"] - 0.53) < 1e-12

    def test_ending_maps_to_zero(self, mapped):
        assert mapped.iloc[5]["Fluctuation_Score"] == 0.0

    def test_unknown_label_scores_zero(self, raw_items):
        raw_items.loc[0, "Risk"] = "Catastrophic"
        raw_items.loc[1, "Unit size"] = ""
        out = apply_mappings(raw_items)
        assert out.loc[0, "Risk_Score"] == 0.0
        assert out.loc[1, "Size_Score"] == 0.0

    def test_labels_are_case_sensitive(self, raw_items):
        raw_items.loc[0, "Risk"] = "high"
        assert apply_mappings(raw_items).loc[0, "Risk_Score"] == 0.0

    def test_custom_table(self, raw_items):
        table = MappingTable(risk={"High": 1.0, "Normal": 0.5, "Low": 0.0})
        out = apply_mappings(raw_items, table)
        assert out.loc[0, "Risk_Score"] == 1.0
        assert out.loc[2, "Risk_Score"] == 0.0

    def test_input_not_mutated(self, raw_items):
        before = raw_items.copy()
        apply_mappings(raw_items)
        pd.testing.assert_frame_equal(raw_items, before)

    def test_raw_columns_preserved(self, raw_items, mapped):
        pd.testing.assert_frame_equal(mapped[raw_items.columns], raw_items)


class TestApplyFuzzyMappings:
    def test_default_tfns(self, raw_items):
        fuzzy = apply_fuzzy_mappings(raw_items)
        assert fuzzy.loc[0, "Risk"] == (0.7, 0.9, 1.0)
        assert fuzzy.loc[5, "Demand fluctuation"] == (0.0, 0.0, 0.1)
        assert fuzzy.loc[1, "Consignment stock"] == (0.0, 0.2, 0.4)
        assert fuzzy.loc[2, "Unit size"] == (0.0, 0.2, 0.4)

    def test_unknown_label_is_zero_tfn(self, raw_items):
        raw_items.loc[3, "Unit size"] = "Huge"
        fuzzy = apply_fuzzy_mappings(raw_items)
        assert fuzzy.loc[3, "Unit size"] == (0.0, 0.0, 0.0)

    def test_custom_table(self, raw_items):
        table = FuzzyNumberTable(consignment_stock={"No": (1.0, 1.0, 1.0)})
        fuzzy = apply_fuzzy_mappings(raw_items, table)
        assert fuzzy.loc[0, "Consignment stock"] == (1.0, 1.0, 1.0)
        assert fuzzy.loc[1, "Consignment stock"] == (0.0, 0.0, 0.0)

    def test_indexed_like_items(self, raw_items):
        fuzzy = apply_fuzzy_mappings(raw_items)
        assert fuzzy.index.equals(raw_items.index)
        assert list(fuzzy.columns) == ["Risk", "Demand fluctuation",
                                       "Consignment stock", "Unit size"]


class TestMapLabels:
    def test_missing_column_gives_default(self, raw_items):
        out = map_labels(raw_items.drop(columns=["Risk"]), "Risk", {"High": 1.0}, -1.0)
        assert (out == -1.0).all()
        assert len(out) == len(raw_items)


class TestCalculateAggregations:
    def test_criticality_formula(self, mapped):
        out = calculate_aggregations(mapped)
        expected = 0.78 * mapped["Risk_Score"] + 0.22 * mapped["Fluctuation_Score"]
        assert np.allclose(out[CRITICALITY_AGG], expected)

    def test_demand_extremes(self, mapped):
        out = calculate_aggregations(mapped)
        # item 4 has the largest usage and stock, item 6 the smallest
        assert abs(out.loc[3, DEMAND_AGG] - 1.0) < 1e-12
        assert abs(out.loc[5, DEMAND_AGG]) < 1e-12

    def test_supply_formula(self, mapped):
        out = calculate_aggregations(mapped)
        # item 7: longest lead time, consignment Yes
        assert abs(out.loc[6, SUPPLY_AGG] - (0.75 * 1.0 + 0.25 * 0.20)) < 1e-12
        # item 6: shortest lead time, consignment Yes
        assert abs(out.loc[5, SUPPLY_AGG] - 0.25 * 0.20) < 1e-12

    def test_aggregates_in_unit_interval_with_default_weights(self, mapped):
        out = calculate_aggregations(mapped)
        for col in (CRITICALITY_AGG, DEMAND_AGG, SUPPLY_AGG):
            assert out[col].between(0.0, 1.0).all()

    def test_weights_not_summing_to_one_are_not_clamped(self, mapped):
        weights = AggregationWeights(demand=DemandWeights(daily_usage=1.0,
                                                          average_stock=1.0))
        out = calculate_aggregations(mapped, weights)
        assert abs(out.loc[3, DEMAND_AGG] - 2.0) < 1e-12

    def test_custom_criticality_weights(self, mapped):
        weights = AggregationWeights(criticality=CriticalityWeights(risk=1.0,
                                                                    fluctuation=0.0))
        out = calculate_aggregations(mapped, weights)
        assert np.allclose(out[CRITICALITY_AGG], mapped["Risk_Score"])

    def test_constant_quantity_scales_to_half(self, mapped):
        mapped["Lead time"] = 10
        mapped["Consignment_Score"] = 0.0
        out = calculate_aggregations(mapped)
        assert np.allclose(out[SUPPLY_AGG], 0.75 * 0.5)

    def test_missing_score_columns_read_as_zero(self, raw_items):
        out = calculate_aggregations(raw_items)
        assert (out[CRITICALITY_AGG] == 0.0).all()

    def test_input_not_mutated(self, mapped):
        before = mapped.copy()
        calculate_aggregations(mapped)
        pd.testing.assert_frame_equal(mapped, before)
