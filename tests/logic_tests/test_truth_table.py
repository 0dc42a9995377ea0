# tests/logic_tests/test_truth_table.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Test suite for assignment enumeration and truth-table columns

import pytest
from expression import MissingAssignment, parse
from logic.truth_table import (
    enumerate_assignments,
    expression_truths,
    true_rows,
    truth_table,
    truth_value,
)
from utils.logger import get_logger

T, F = True, False


class TestAssignmentOrder:
    """Test cases for the fixed row order of a truth table."""

    def test_truth_value_bit_zero_is_true(self):
        assert truth_value(0, 0) is True
        assert truth_value(1, 0) is False
        assert truth_value(2, 1) is False
        assert truth_value(5, 1) is True

    def test_two_variable_rows(self):
        """Test the first variable is the most significant bit."""
        rows = [dict(row) for row in enumerate_assignments(["a", "b"])]

        assert rows == [
            {"a": T, "b": T},
            {"a": T, "b": F},
            {"a": F, "b": T},
            {"a": F, "b": F},
        ]

    def test_row_count(self, sample_variables):
        assert len(enumerate_assignments(sample_variables)) == 8
        assert len(enumerate_assignments([])) == 1

    def test_row_five_of_three(self, sample_variables):
        """Test row 5 (binary 101) has only b true."""
        assert dict(enumerate_assignments(sample_variables)[5]) == {
            "a": F,
            "b": T,
            "c": F,
        }


class TestTruthTable:
    """Test cases for labeled truth-table columns."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def _labels(self, table):
        return [label for label, _ in table]

    def test_left_fold_of_conjunctions(self):
        """Test (a ^ b) ^ c gives one column per variable plus the root."""
        table = truth_table(parse("(a ^ b) ^ c"))

        assert self._labels(table) == ["a", "b", "c", "a ^ b ^ c"]
        assert all(len(values) == 8 for _, values in table)
        assert dict(table)["a ^ b ^ c"] == [T, F, F, F, F, F, F, F]

    def test_variable_columns_follow_row_order(self):
        table = dict(truth_table(parse("a v b")))

        assert table["a"] == [T, T, F, F]
        assert table["b"] == [T, F, T, F]
        assert table["a v b"] == [T, T, T, F]

    def test_negated_subexpressions_get_columns(self):
        """Test columns are ordered by label length, then alphabetically."""
        table = truth_table(parse("~(a v b) ^ ~c"))
        self.logger.debug(f"Columns: {self._labels(table)}")

        assert self._labels(table) == ["a", "b", "c", "~c", "~(a v b)", "~(a v b) ^ ~c"]

    def test_intermediate_columns(self):
        table = truth_table(parse("~(a v b)"), intermediate=True)

        assert self._labels(table) == ["a", "b", "a v b", "~(a v b)"]
        assert dict(table)["a v b"] == [T, T, T, F]
        assert dict(table)["~(a v b)"] == [F, F, F, T]

    def test_single_variable(self):
        assert truth_table(parse("a")) == [("a", [T, F])]

    def test_single_negated_variable(self):
        assert truth_table(parse("~a")) == [("a", [T, F]), ("~a", [F, T])]

    def test_labels_in_expression_dialect(self):
        table = truth_table(parse("not a or b"))
        assert self._labels(table) == ["a", "b", "not a", "not a or b"]

    def test_bare_tree_with_variables(self):
        """Test a bare tree needs an explicit variable list."""
        root = parse("a -> b").root
        assert dict(truth_table(root, ["a", "b"]))["a -> b"] == [T, F, T, T]

    def test_extra_variables_widen_the_table(self):
        table = truth_table(parse("a"), ["a", "b"])

        assert self._labels(table) == ["a", "b"]
        assert dict(table)["a"] == [T, T, F, F]

    def test_missing_variable(self):
        with pytest.raises(MissingAssignment):
            truth_table(parse("a ^ b"), ["a"])


class TestExpressionTruths:
    """Test cases for whole-expression values and true rows."""

    TRUTH_CASES = [
        ("a -> b", [T, F, T, T]),
        ("a <-> b", [T, F, F, T]),
        ("a | b", [F, T, T, T]),
        ("a ↓ b", [F, F, F, T]),
        ("a ^ ~a", [F, F]),
        ("a v ~a", [T, T]),
    ]

    @pytest.mark.parametrize("text, expected", TRUTH_CASES)
    def test_expression_truths(self, text, expected):
        assert expression_truths(parse(text)) == expected

    def test_true_rows(self):
        assert true_rows(parse("a or (a and b)")) == [0, 1]
        assert true_rows(parse("~(a v b)")) == [3]
        assert true_rows(parse("a ^ ~a")) == []
