# -*- coding: utf-8 -*-
"""
Tests for descriptive statistics, Pearson correlation and the crisp vs
fuzzy comparison.
"""

import math

import numpy as np
import pandas as pd
import pytest

from analysis import (ClassificationComparison, calculate_correlation_matrix,
                      calculate_stats, compare_classifications, describe_columns)
from config import (CLASS_COLUMN, FUZZY_CLASS_COLUMN, FUZZY_TOPSIS_SCORE,
                    QUANTITATIVE_COLUMNS, TOPSIS_SCORE)


class TestCalculateStats:
    def test_even_length(self):
        stats = calculate_stats([4, 1, 3, 2])
        assert stats["min"] == 1.0
        assert stats["max"] == 4.0
        assert stats["mean"] == 2.5
        assert stats["median"] == 2.5
        assert abs(stats["std"] - math.sqrt(1.25)) < 1e-12

    def test_odd_length_median(self):
        assert calculate_stats([7, 1, 5])["median"] == 5.0

    def test_population_std(self):
        stats = calculate_stats([2, 4, 4, 4, 5, 5, 7, 9])
        assert abs(stats["std"] - 2.0) < 1e-12

    def test_empty_is_all_zero(self):
        assert calculate_stats([]) == {"min": 0.0, "max": 0.0, "mean": 0.0,
                                       "median": 0.0, "std": 0.0}

    def test_single_value(self):
        stats = calculate_stats([3.5])
        assert stats["median"] == 3.5
        assert stats["std"] == 0.0


class TestDescribeColumns:
    def test_defaults_to_quantities(self, raw_items):
        desc = describe_columns(raw_items)
        assert desc.index.tolist() == QUANTITATIVE_COLUMNS
        assert desc.columns.tolist() == ["min", "max", "mean", "median", "std"]
        assert desc.loc["Lead time", "max"] == 60.0

    def test_missing_column_reads_zero(self, raw_items):
        desc = describe_columns(raw_items, ["Nope"])
        assert (desc.loc["Nope"] == 0.0).all()


class TestCorrelationMatrix:
    @pytest.fixture
    def frame(self):
        return pd.DataFrame({
            "x": [1.0, 2.0, 3.0, 4.0, 5.0],
            "neg": [10.0, 8.0, 6.0, 4.0, 2.0],
            "flat": [3.0, 3.0, 3.0, 3.0, 3.0],
            "noise": [0.2, 0.9, 0.1, 0.5, 0.4],
        })

    def test_symmetric(self, frame):
        corr = calculate_correlation_matrix(frame, frame.columns)
        assert np.allclose(corr.to_numpy(), corr.to_numpy().T)

    def test_diagonal_is_one_for_varying_columns(self, frame):
        corr = calculate_correlation_matrix(frame, ["x", "neg", "noise"])
        assert np.allclose(np.diag(corr.to_numpy()), 1.0)

    def test_perfect_negative(self, frame):
        corr = calculate_correlation_matrix(frame, ["x", "neg"])
        assert abs(corr.loc["x", "neg"] + 1.0) < 1e-12

    def test_constant_column_is_zero(self, frame):
        corr = calculate_correlation_matrix(frame, frame.columns)
        assert (corr.loc["flat"] == 0.0).all()
        assert (corr["flat"] == 0.0).all()

    def test_bounded(self, frame):
        corr = calculate_correlation_matrix(frame, frame.columns)
        assert (corr.abs() <= 1.0).all().all()

    def test_matches_pandas_pearson(self, frame):
        corr = calculate_correlation_matrix(frame, ["x", "noise"])
        assert abs(corr.loc["x", "noise"] - frame["x"].corr(frame["noise"])) < 1e-12

    def test_labels(self, frame):
        corr = calculate_correlation_matrix(frame, ["noise", "x"])
        assert corr.index.tolist() == ["noise", "x"]
        assert corr.columns.tolist() == ["noise", "x"]

    def test_empty_items(self):
        corr = calculate_correlation_matrix(pd.DataFrame({"a": []}), ["a"])
        assert corr.shape == (1, 1)
        assert corr.iloc[0, 0] == 0.0


class TestCompareClassifications:
    def test_identical_tracks(self):
        items = pd.DataFrame({
            TOPSIS_SCORE: [0.9, 0.5, 0.1], FUZZY_TOPSIS_SCORE: [0.8, 0.4, 0.2],
            CLASS_COLUMN: ["A", "B", "C"], FUZZY_CLASS_COLUMN: ["A", "B", "C"],
        })
        cmp = compare_classifications(items)
        assert isinstance(cmp, ClassificationComparison)
        assert cmp.agreement_rate == 1.0
        assert abs(cmp.spearman_rho - 1.0) < 1e-12
        assert cmp.n_items == 3
        assert np.array_equal(np.diag(cmp.transition_matrix.to_numpy()), [1, 1, 1])

    def test_reversed_tracks(self):
        items = pd.DataFrame({
            TOPSIS_SCORE: [0.9, 0.5, 0.1], FUZZY_TOPSIS_SCORE: [0.1, 0.5, 0.9],
            CLASS_COLUMN: ["A", "B", "C"], FUZZY_CLASS_COLUMN: ["C", "B", "A"],
        })
        cmp = compare_classifications(items)
        assert abs(cmp.agreement_rate - 1 / 3) < 1e-12
        assert abs(cmp.spearman_rho + 1.0) < 1e-12
        assert cmp.transition_matrix.loc["A", "C"] == 1

    def test_transition_matrix_is_three_by_three(self):
        items = pd.DataFrame({
            TOPSIS_SCORE: [0.9, 0.1], FUZZY_TOPSIS_SCORE: [0.2, 0.3],
            CLASS_COLUMN: ["C", "C"], FUZZY_CLASS_COLUMN: ["C", "C"],
        })
        cmp = compare_classifications(items)
        assert cmp.transition_matrix.shape == (3, 3)
        assert int(cmp.transition_matrix.to_numpy().sum()) == 2

    def test_duplicate_index_labels(self):
        items = pd.DataFrame({
            TOPSIS_SCORE: [0.9, 0.5, 0.1, 0.3], FUZZY_TOPSIS_SCORE: [0.8, 0.4, 0.2, 0.1],
            CLASS_COLUMN: ["A", "B", "C", "C"], FUZZY_CLASS_COLUMN: ["A", "C", "C", "C"],
        }, index=[7, 7, 8, 8])
        cmp = compare_classifications(items)
        assert cmp.n_items == 4
        assert abs(cmp.agreement_rate - 0.75) < 1e-12
        assert cmp.transition_matrix.loc["B", "C"] == 1
        assert cmp.transition_matrix.loc["C", "C"] == 2

    def test_constant_score_gives_zero_rho(self):
        items = pd.DataFrame({
            TOPSIS_SCORE: [0.5, 0.5, 0.5], FUZZY_TOPSIS_SCORE: [0.1, 0.2, 0.3],
            CLASS_COLUMN: ["A", "B", "C"], FUZZY_CLASS_COLUMN: ["A", "B", "C"],
        })
        assert compare_classifications(items).spearman_rho == 0.0

    def test_missing_scores(self):
        cmp = compare_classifications(pd.DataFrame({"id": [1, 2]}))
        assert cmp.n_items == 0
        assert cmp.agreement_rate == 0.0

    def test_summary_keys(self):
        items = pd.DataFrame({
            TOPSIS_SCORE: [0.9, 0.1], FUZZY_TOPSIS_SCORE: [0.8, 0.2],
            CLASS_COLUMN: ["A", "C"], FUZZY_CLASS_COLUMN: ["A", "C"],
        })
        summary = compare_classifications(items).summary()
        assert set(summary) == {"n_items", "agreement_rate", "spearman_rho",
                                "transition_matrix"}
