# tests/utils_tests/test_table_formatter.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Test suite for truth-table text rendering

from expression import parse
from logic import truth_table
from utils.table_formatter import center, format_table, format_table_as_string

T, F = True, False


class TestCenter:
    """Test cases for cell centering."""

    def test_odd_padding(self):
        assert center("T", 5) == "  T  "

    def test_even_padding_goes_right(self):
        assert center("T", 4) == " T  "

    def test_text_wider_than_cell(self):
        assert center("long", 2) == "long"

    def test_custom_fill(self):
        assert center("x", 3, "-") == "-x-"


class TestFormatTable:
    """Test cases for bordered table lines."""

    def test_layout(self):
        columns = [("a", [T, F]), ("b", [T, T]), ("a ^ b", [T, F])]

        assert format_table(columns) == [
            "| a | b | a ^ b |",
            "+---+---+-------+",
            "| T | T |   T   |",
            "| F | T |   F   |",
        ]

    def test_empty_table(self):
        assert format_table([]) == []
        assert format_table_as_string([]) == ""

    def test_table_of_parsed_expression(self):
        lines = format_table(truth_table(parse("~(a v b)")))

        assert lines[0] == "| a | b | ~(a v b) |"
        assert len(lines) == 2 + 4
        assert lines[-1] == "| F | F |    T     |"

    def test_as_string(self):
        text = format_table_as_string([("a", [T, F])])
        assert text == "| a |\n+---+\n| T |\n| F |\n"
