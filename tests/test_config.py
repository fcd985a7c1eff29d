# -*- coding: utf-8 -*-
"""
Tests for the configuration dataclasses and their defaults.
"""

import dataclasses

import pytest

from config import (CLASS_LABELS, DECISION_CRITERIA, FUZZY_CRITERIA, QUALITATIVE_COLUMNS,
                    REQUIRED_COLUMNS, ABCThresholds, Config, FuzzyNumberTable,
                    MappingTable, PathConfig, get_default_config)


class TestDefaults:
    def test_mapping_scores_in_unit_interval(self):
        table = MappingTable()
        for column in QUALITATIVE_COLUMNS:
            assert all(0.0 <= v <= 1.0 for v in table.table_for(column).values())

    def test_fuzzy_numbers_ordered(self):
        table = FuzzyNumberTable()
        for column in QUALITATIVE_COLUMNS:
            for l, m, u in table.table_for(column).values():
                assert 0.0 <= l <= m <= u <= 1.0

    def test_mapping_and_fuzzy_share_labels(self):
        crisp, fuzzy = MappingTable(), FuzzyNumberTable()
        for column in QUALITATIVE_COLUMNS:
            assert set(crisp.table_for(column)) == set(fuzzy.table_for(column))

    def test_aggregation_pairs_sum_to_one(self):
        agg = get_default_config().aggregation
        assert abs(agg.criticality.risk + agg.criticality.fluctuation - 1.0) < 1e-12
        assert abs(agg.demand.daily_usage + agg.demand.average_stock - 1.0) < 1e-12
        assert abs(agg.supply.lead_time + agg.supply.consignment - 1.0) < 1e-12

    def test_thresholds(self):
        thr = ABCThresholds()
        assert (thr.a, thr.b, thr.c) == (20.0, 30.0, 50.0)

    def test_topsis_directions_cover_criteria(self):
        topsis = get_default_config().topsis
        assert sorted(topsis.benefit_criteria + topsis.cost_criteria) == sorted(DECISION_CRITERIA)

    def test_criteria_lists(self):
        assert len(REQUIRED_COLUMNS) == 8
        assert sorted(FUZZY_CRITERIA) == sorted(REQUIRED_COLUMNS)
        assert CLASS_LABELS == ("A", "B", "C")


class TestConfig:
    def test_fresh_instances(self):
        assert get_default_config() is not get_default_config()

    def test_frozen(self):
        config = Config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.thresholds = ABCThresholds(a=1)

    def test_replace(self):
        config = dataclasses.replace(Config(), thresholds=ABCThresholds(a=10, b=20, c=70))
        assert config.thresholds.a == 10
        assert Config().thresholds.a == 20

    def test_thresholds_from_mapping(self):
        thr = ABCThresholds.from_mapping({"A": 15, "b": 35, "C": 50})
        assert (thr.a, thr.b, thr.c) == (15.0, 35.0, 50.0)

    def test_to_dict(self):
        d = get_default_config().to_dict()
        assert d["thresholds"] == {"a": 20.0, "b": 30.0, "c": 50.0}
        assert d["fuzzy_topsis"]["positive_ideal"] == [1.0, 1.0, 1.0]
        assert isinstance(d["paths"]["base_dir"], str)

    def test_summary(self):
        text = get_default_config().summary()
        assert "Inventory ABC-MCDM Configuration Summary" in text
        assert "20% / 30% / 50%" in text

    def test_output_dir(self, tmp_path):
        config = dataclasses.replace(Config(), paths=PathConfig(base_dir=tmp_path))
        assert config.output_dir == str(tmp_path / "result")
        config.paths.ensure_directories()
        assert (tmp_path / "result" / "logs").is_dir()
