# expression/__init__.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Expression parsing components for multi-dialect propositional logic

"""Propositional expression parsing.

This package turns expression text into syntax trees. Four notations are
accepted and can be told apart by their operator spellings:

    pseudo-English:  not a and (b or c)
    logic-symbol:    ~a ^ (b v c)
    code-symbol:     !a && (b || c)
    Boolean-algebra: -a * (b + c)

The pipeline lexes the text into canonical tokens (fixing the dialect from
the first operator), checks parenthesis balance and operator placement, then
builds the tree with an LALR(1) grammar.

Core Functions:
    parse: Converts expression text into an Expression (root, variables,
        single-variable flag, dialect)
    normalize: Canonical one-character-token form of an expression
    detect_dialect: Dialect fixed by the first operator of an expression

Example:
    >>> from expression import parse
    >>> expression = parse("~(a v b)")
    >>> expression.variables
    ('a', 'b')
"""

from .ast_nodes import BinaryOp, SyntaxNode, Variable
from .dialects import Dialect, Operator
from .exceptions import (
    InvalidExpression,
    LogicError,
    MissingAssignment,
    UnbalancedParentheses,
)
from .grammar import _ExpressionParser
from .lexer import detect_dialect, normalize
from .parsed import Expression
from .renderer import render, to_text
from utils.logger import get_logger


def parse(source: str) -> Expression:
    """Parse expression text into an :class:`Expression`.

    Uses a fresh parser instance for each call so parsing keeps no state
    between expressions.

    Args:
        source: Expression in any supported dialect

    Returns:
        Expression holding the tree root, the sorted variable names, whether
        the expression is a single variable, and its dialect

    Raises:
        InvalidExpression: Expression is malformed
        UnbalancedParentheses: Parentheses do not pair up

    Example:
        >>> str(parse("(a || b) && !c"))
        '(a || b) && !c'
    """
    logger = get_logger()
    logger.debug(f"Parsing expression: {source}")

    parser = _ExpressionParser()

    try:
        result = parser.parse(source)
        logger.debug(
            f"Expression parsed with variables {list(result.variables)}, "
            f"single={result.is_single}"
        )
        return result

    except LogicError:
        logger.debug("Error encountered during expression parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise InvalidExpression(str(exc)) from exc


__all__ = [
    "parse",
    "normalize",
    "detect_dialect",
    "render",
    "to_text",
    "Expression",
    "SyntaxNode",
    "Variable",
    "BinaryOp",
    "Dialect",
    "Operator",
    "LogicError",
    "InvalidExpression",
    "UnbalancedParentheses",
    "MissingAssignment",
]

__version__ = "1.0.0"
__description__ = "Multi-dialect propositional expression parsing"
