# -*- coding: utf-8 -*-
"""
Tests for triangular fuzzy numbers and fuzzy TOPSIS (vertex method).
"""

import math

import numpy as np
import pandas as pd
import pytest

from config import FUZZY_CRITERIA, FUZZY_TOPSIS_SCORE, FuzzyNumberTable, FuzzyTOPSISConfig
from mcdm.fuzzy import (FuzzyDecisionMatrix, FuzzyTOPSIS, FuzzyTOPSISResult,
                        TriangularFuzzyNumber, build_fuzzy_decision_matrix,
                        calculate_fuzzy_topsis, fuzzy_topsis_details)


TFN = TriangularFuzzyNumber


# ---------------------------------------------------------------------------
# TriangularFuzzyNumber
# ---------------------------------------------------------------------------

class TestTriangularFuzzyNumber:
    def test_bounds_are_sorted(self):
        tfn = TFN(0.9, 0.1, 0.5)
        assert (tfn.l, tfn.m, tfn.u) == (0.1, 0.5, 0.9)

    def test_scalar_multiplication(self):
        tfn = TFN(0.2, 0.4, 0.8) * 0.5
        assert tfn.as_tuple() == (0.1, 0.2, 0.4)
        assert (0.5 * TFN(0.2, 0.4, 0.8)) == tfn

    def test_defuzzify_centroid(self):
        assert abs(TFN(0.0, 0.5, 1.0).defuzzify() - 0.5) < 1e-12

    def test_vertex_distance(self):
        assert abs(TFN(0, 0, 0).distance(TFN(1, 1, 1)) - 1.0) < 1e-12
        d = TFN(0.0, 0.5, 1.0).distance(TFN(1.0, 1.0, 1.0))
        assert abs(d - math.sqrt((1.0 + 0.25 + 0.0) / 3)) < 1e-12

    def test_distance_symmetric(self):
        a, b = TFN(0.1, 0.3, 0.6), TFN(0.4, 0.5, 0.9)
        assert abs(a.distance(b) - b.distance(a)) < 1e-12

    def test_crisp_degenerate(self):
        tfn = TFN.from_crisp(0.3)
        assert tfn.as_tuple() == (0.3, 0.3, 0.3)
        assert abs(tfn.distance(TFN.from_crisp(0.7)) - 0.4) < 1e-12

    def test_frozen(self):
        with pytest.raises(Exception):
            TFN(0, 0, 0).l = 1.0


# ---------------------------------------------------------------------------
# FuzzyDecisionMatrix
# ---------------------------------------------------------------------------

class TestFuzzyDecisionMatrix:
    def test_from_columns(self):
        m = FuzzyDecisionMatrix.from_columns(
            {"C1": [(0, 0.5, 1), (0.2, 0.2, 0.2)], "C2": [(1, 1, 1), (0, 0, 0)]},
            ["a", "b"])
        assert len(m) == 2
        assert m.criteria == ["C1", "C2"]
        assert m.get("b", "C1") == TFN(0.2, 0.2, 0.2)

    def test_weighted(self):
        m = FuzzyDecisionMatrix.from_columns({"C": [(0.2, 0.4, 0.8)]}, [0])
        w = m.weighted({"C": 0.5})
        assert np.allclose(w.get(0, "C").as_tuple(), (0.1, 0.2, 0.4))
        assert m.get(0, "C").as_tuple() == (0.2, 0.4, 0.8)

    def test_to_crisp(self):
        m = FuzzyDecisionMatrix.from_columns({"C": [(0, 0.5, 1), (0.3, 0.3, 0.3)]}, [0, 1])
        crisp = m.to_crisp()
        assert np.allclose(crisp["C"].to_numpy(), [0.5, 0.3])


# ---------------------------------------------------------------------------
# FuzzyTOPSIS
# ---------------------------------------------------------------------------

class TestFuzzyTOPSIS:
    def test_ideal_alternatives(self):
        m = FuzzyDecisionMatrix.from_columns(
            {"C1": [(1, 1, 1), (0, 0, 0)], "C2": [(1, 1, 1), (0, 0, 0)]}, ["best", "worst"])
        result = FuzzyTOPSIS().calculate(m)
        assert isinstance(result, FuzzyTOPSISResult)
        assert abs(result.scores["best"] - 1.0) < 1e-12
        assert abs(result.scores["worst"]) < 1e-12

    def test_symmetric_tfn_scores_half(self):
        m = FuzzyDecisionMatrix.from_columns({"C": [(0.0, 0.5, 1.0)]}, ["x"])
        result = FuzzyTOPSIS().calculate(m, {"C": 1.0})
        assert abs(result.scores["x"] - 0.5) < 1e-12
        assert abs(result.d_positive["x"] - math.sqrt(1.25 / 3)) < 1e-12

    def test_equal_weights_by_default(self):
        m = FuzzyDecisionMatrix.from_columns(
            {c: [(0.5, 0.5, 0.5)] for c in ["a", "b", "c", "d"]}, [0])
        result = FuzzyTOPSIS().calculate(m)
        assert all(abs(w - 0.25) < 1e-12 for w in result.weights.values())

    def test_dominance_preserved_with_crisp_numbers(self):
        m = FuzzyDecisionMatrix.from_columns(
            {"C1": [(0.9,) * 3, (0.4,) * 3], "C2": [(0.6,) * 3, (0.6,) * 3]}, ["hi", "lo"])
        result = FuzzyTOPSIS().calculate(m)
        assert result.scores["hi"] > result.scores["lo"]
        assert result.ranks["hi"] == 1

    def test_coincident_ideals_score_half(self):
        m = FuzzyDecisionMatrix.from_columns({"C": [(0.3, 0.3, 0.3)]}, ["x"])
        result = FuzzyTOPSIS((0.3, 0.3, 0.3), (0.3, 0.3, 0.3)).calculate(m)
        assert result.scores["x"] == 0.5


# ---------------------------------------------------------------------------
# Inventory entry points
# ---------------------------------------------------------------------------

class TestInventoryFuzzyTopsis:
    def test_matrix_has_eight_criteria(self, raw_items):
        m = build_fuzzy_decision_matrix(raw_items)
        assert m.criteria == FUZZY_CRITERIA
        assert len(m) == len(raw_items)

    def test_quantities_are_degenerate_and_scaled(self, raw_items):
        m = build_fuzzy_decision_matrix(raw_items)
        # item 4 carries the largest average stock, item 6 the smallest
        assert m.get(3, "Average stock") == TFN(1.0, 1.0, 1.0)
        assert m.get(5, "Average stock") == TFN(0.0, 0.0, 0.0)

    def test_qualitative_from_table(self, raw_items):
        m = build_fuzzy_decision_matrix(raw_items)
        assert m.get(0, "Risk") == TFN(0.7, 0.9, 1.0)

    def test_unordered_table_triple_sorted(self, raw_items):
        table = FuzzyNumberTable(risk={"High": (1.0, 0.7, 0.9)})
        m = build_fuzzy_decision_matrix(raw_items, table)
        cell = m.get(0, "Risk")
        assert cell == TFN(0.7, 0.9, 1.0)
        assert cell.distance(TFN(1.0, 1.0, 1.0)) == pytest.approx(math.sqrt(0.1 / 3))

    def test_scores_in_unit_interval(self, raw_items):
        out = calculate_fuzzy_topsis(raw_items)
        assert out[FUZZY_TOPSIS_SCORE].between(0.0, 1.0).all()
        assert FUZZY_TOPSIS_SCORE not in raw_items.columns

    def test_hand_computed_score(self, raw_items):
        """Rebuild item 1's closeness directly from the vertex formulas."""
        w = 1.0 / 8
        cells = [
            (0.7, 0.9, 1.0),            # Risk High
            (0.7, 0.9, 1.0),            # Increasing
            ((120 - 10) / 190,) * 3,    # Average stock
            ((40 - 1) / 59,) * 3,       # Daily usage
            ((15 - 1) / 29,) * 3,       # Unit cost
            ((30 - 3) / 57,) * 3,       # Lead time
            (0.6, 0.8, 1.0),            # Consignment No
            (0.6, 0.8, 1.0),            # Large
        ]
        d_pos = math.sqrt(sum(sum((w * v - w) ** 2 for v in c) / 3 for c in cells))
        d_neg = math.sqrt(sum(sum((w * v) ** 2 for v in c) / 3 for c in cells))
        expected = d_neg / (d_pos + d_neg)

        result = fuzzy_topsis_details(raw_items)
        assert abs(result.scores.iloc[0] - expected) < 1e-12

    def test_unknown_labels_give_zero_tfn(self, raw_items):
        raw_items.loc[0, "Risk"] = "Unheard of"
        m = build_fuzzy_decision_matrix(raw_items)
        assert m.get(0, "Risk") == TFN(0.0, 0.0, 0.0)

    def test_result_indexed_like_items(self, raw_items):
        items = raw_items.set_index(pd.Index(list("abcdefghij")))
        result = fuzzy_topsis_details(items)
        assert result.scores.index.tolist() == list("abcdefghij")

    def test_duplicate_index_labels(self, raw_items):
        items = raw_items.set_index(pd.Index([0] * len(raw_items)))
        out = calculate_fuzzy_topsis(items)
        assert len(out) == len(raw_items)
        assert not out[FUZZY_TOPSIS_SCORE].isna().any()

    def test_config_ideals(self, raw_items):
        config = FuzzyTOPSISConfig(positive_ideal=(0.0, 0.0, 0.0),
                                   negative_ideal=(1.0, 1.0, 1.0))
        default = fuzzy_topsis_details(raw_items).scores
        flipped = fuzzy_topsis_details(raw_items, config=config).scores
        assert default.idxmax() == flipped.idxmin()
