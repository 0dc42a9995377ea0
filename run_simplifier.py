#!/usr/bin/env python3
# run_simplifier.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Command-line interface for simplifying expressions and printing truth tables

import sys
import argparse
from typing import List

from expression import parse
from expression.exceptions import LogicError
from logic import simplify, truth_table
from utils.logger import LogLevel, get_logger
from utils.table_formatter import format_table

EXAMPLE_EXPRESSIONS = [
    # Pseudo examples
    "a or (a and b)",
    "(not a and not b) or (not c or not b)",
    # Logic examples
    "~(a v b)",
    "(a ^ b) ^ c",
    # Code examples
    "(a || b) && (!d || c)",
    "(p && q && r) || (p && q && !r) || (p && !q && !r)",
    # Boolean algebra examples
    "(a*b*c) + (a*-b*-d) + (a*b*-c) + (a*b*d)",
    "(a+b+c)*(a+-b+-d)*(a+b+-c)*(a+b+d)",
]


def configure_logging_for_simplifier(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging levels for the simplifier.

    Results are reported at INFO, so INFO stays on without ``--verbose``.

    Args:
        verbose: Enable INFO level logging
        debug: Enable DEBUG level logging (overrides verbose)
    """
    logger = get_logger()

    if debug:
        logger.set_level(LogLevel.DEBUG)
    else:
        logger.set_level(LogLevel.INFO)


def process_expression(text: str, steps: bool, show_table: bool) -> None:
    """Parse, simplify and tabulate one expression.

    Args:
        text: Expression in any supported dialect
        steps: Add a truth-table column for every binary step
        show_table: Print the truth table

    Raises:
        LogicError: The expression is malformed
    """
    logger = get_logger()

    expression = parse(text)
    logger.expression_header(text, expression.dialect.value)
    logger.simplified(simplify(expression))

    if show_table:
        for line in format_table(truth_table(expression, intermediate=steps)):
            logger.info(line)

    logger.info("")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Proplogic propositional expression simplifier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_simplifier.py "a or (a and b)"
  python run_simplifier.py "~(a v b)" "(a || b) && !c" --steps
  python run_simplifier.py --debug "(a*b) + (a*-b)"

Dialects:
  pseudo-English   not a and (b or c)
  logic-symbol     ~a ^ (b v c)
  code-symbol      !a && (b || c)
  Boolean-algebra  -a * (b + c)

Without expressions the built-in examples are processed.
        """,
    )

    parser.add_argument(
        "expressions", nargs="*", help="Expressions to simplify (default: built-in examples)"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--steps",
        action="store_true",
        help="Show a truth-table column for every intermediate step",
    )

    parser.add_argument(
        "--no-table", action="store_true", help="Only print the simplified expressions"
    )

    return parser


def main(argv: List[str] = None) -> int:
    """Main entry point for the simplifier.

    Returns:
        Exit code (0 for success, 2 if any expression failed to parse)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging_for_simplifier(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    failures = 0
    for text in args.expressions or EXAMPLE_EXPRESSIONS:
        try:
            process_expression(text, steps=args.steps, show_table=not args.no_table)
        except LogicError as e:
            failures += 1
            logger.error(f"Expression error in '{text}': {e}")

    return 2 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
