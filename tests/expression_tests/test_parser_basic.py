# tests/expression_tests/test_parser_basic.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Test suite for basic parser functionality and round-trip integrity

"""Test suite for basic parser functionality and tree integrity.

This module tests that valid expressions in every dialect parse, and that
printing a tree and parsing the text again gives back the same tree.
"""

import pytest
from expression import parse, to_text
from expression.ast_nodes import BinaryOp, Variable
from expression.dialects import Dialect
from utils.logger import get_logger


class TestParserBasic:
    """Test cases for basic parser functionality and round-trip integrity."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    VALID_EXPRESSIONS = [
        # Single variables
        "a",
        "~a",
        "(a)",
        "((a))",
        # Every operator
        "a ^ b",
        "a v b",
        "a -> b",
        "a <-> b",
        "a | b",
        "a ↓ b",
        # Chains fold to the left
        "a ^ b ^ c",
        "a ^ b v c",
        "a -> b -> c",
        # Grouping and negation
        "a ^ (b v c)",
        "~(a v b)",
        "~(a v b) ^ ~c",
        "~((a ^ b) v c)",
        "(a ^ b) v (c ^ d)",
        # Other dialects
        "not a and (b or c)",
        "a implies b iff c",
        "(a || b) && (!d || c)",
        "(p && q && r) || (p && q && !r) || (p && !q && !r)",
        "(a*b*c) + (a*-b*-d) + (a*b*-c) + (a*b*d)",
        "(a+b+c)*(a+-b+-d)*(a+b+-c)*(a+b+d)",
        "a -* b -+ c",
        # Whitespace handling
        "  a\n^ \tb ",
    ]

    @pytest.mark.parametrize("text", VALID_EXPRESSIONS)
    def test_round_trip_tree_integrity(self, text):
        """Test that parse -> print -> parse preserves the tree.

        Args:
            text: Valid expression text
        """
        self.logger.debug(f"Testing round-trip integrity for: {text}")

        original = parse(text)
        stringified = str(original)
        reparsed = parse(stringified)

        self.logger.debug(f"Stringified: {stringified!r}")

        assert original.root == reparsed.root, (
            f"Tree changed during round-trip:\n"
            f"Original: {text!r}\n"
            f"Stringified: {stringified!r}\n"
            f"Original tree: {original.root}\n"
            f"Reparsed tree: {reparsed.root}"
        )

    @pytest.mark.parametrize("text", VALID_EXPRESSIONS)
    @pytest.mark.parametrize("dialect", list(Dialect))
    def test_round_trip_through_every_dialect(self, text, dialect):
        """Test a tree printed in any dialect parses back to the same tree."""
        original = parse(text)
        reparsed = parse(to_text(original.root, dialect))
        assert original.root == reparsed.root

    PRINTING_CASES = [
        ("(a v b)", "a v b"),
        ("((a))", "a"),
        ("~(a v b)", "~(a v b)"),
        ("a v b v c", "a v b v c"),
        ("(a ^ b) ^ c", "a ^ b ^ c"),
        ("a ^ (b ^ c)", "a ^ (b ^ c)"),
        ("(a -> b) -> c", "(a -> b) -> c"),
        ("a ^ b v c", "(a ^ b) v c"),
        ("a -> b -> c", "(a -> b) -> c"),
        ("a ^ (b v c)", "a ^ (b v c)"),
        ("not (a or b)", "not (a or b)"),
        ("not a and b", "not a and b"),
        ("!a && !(b || c)", "!a && !(b || c)"),
        ("-a*b", "-a * b"),
        ("a nand b", "a nand b"),
        ("a -+ b", "a -+ b"),
    ]

    @pytest.mark.parametrize("text, printed", PRINTING_CASES)
    def test_printed_form(self, text, printed):
        """Test the printed form in the expression's own dialect."""
        assert str(parse(text)) == printed

    def test_variables_are_sorted_and_distinct(self):
        """Test the variable list of a parse result."""
        assert parse("c ^ a v b ^ a").variables == ("a", "b", "c")
        assert parse("~a").variables == ("a",)

    SINGLE_CASES = [
        ("a", True),
        ("~a", True),
        ("(a)", True),
        ("!!a", True),
        ("a ^ b", False),
        ("(a ^ b)", False),
        ("~(a ^ b)", False),
    ]

    @pytest.mark.parametrize("text, is_single", SINGLE_CASES)
    def test_single_variable_flag(self, text, is_single):
        """Test the single-variable flag of a parse result."""
        assert parse(text).is_single is is_single

    def test_dialect_stamped_on_every_binary_node(self):
        """Test binary nodes carry the dialect of the whole expression."""
        result = parse("a and (b or c)")

        assert result.dialect is Dialect.PSEUDO
        assert result.root.dialect is Dialect.PSEUDO
        assert result.root.right.dialect is Dialect.PSEUDO

    def test_dialect_does_not_affect_equality(self):
        """Test trees from different dialects compare equal."""
        assert parse("a and b").root == parse("a ^ b").root == parse("a * b").root

    def test_duplicate_variables_are_separate_leaves(self):
        """Test repeated variables appear as distinct leaves."""
        root = parse("a ^ a").root
        assert isinstance(root, BinaryOp)
        assert root.left == root.right == Variable("a")
