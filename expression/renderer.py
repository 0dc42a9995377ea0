# expression/renderer.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Printing of syntax trees and canonical strings in a chosen dialect

"""Dialect renderer.

Two entry points turn internal forms back into text a user would write:

    to_text: prints a syntax tree with the operator spellings of a dialect
    render: rewrites the minimizer's canonical AND/OR/NOT string

Printed trees always re-parse to the same tree. Binary operators share one
precedence level and fold left to right, so a binary child is parenthesized
unless it is negated (its NOT already brings parentheses) or it is the left
operand of the same associative operator, as in ``a v b v c``. Labels
follow the same rule, so the tree of ``(a ^ b) ^ c`` is labeled
``a ^ b ^ c`` while ``a ^ (b ^ c)`` keeps its parentheses.
"""

from .ast_nodes import BinaryOp, SyntaxNode, Variable
from .dialects import (
    CANONICAL_AND,
    CANONICAL_NOT,
    CANONICAL_OR,
    Dialect,
    Operator,
    spelling,
)


def to_text(node: SyntaxNode, dialect: Dialect) -> str:
    """Print ``node`` using the spellings of ``dialect``.

    Example:
        >>> to_text(parse("~(a v b) ^ c").root, Dialect.CODE)
        '!(a || b) && c'
    """
    if isinstance(node, Variable):
        if node.negated:
            return spelling(Operator.NOT, dialect) + node.name
        return node.name

    if isinstance(node, BinaryOp):
        left = to_text(node.left, dialect)
        right = to_text(node.right, dialect)

        if _needs_parentheses(node.left, node, is_left=True):
            left = f"({left})"
        if _needs_parentheses(node.right, node, is_left=False):
            right = f"({right})"

        body = f"{left} {spelling(node.operator, dialect)} {right}"
        if node.negated:
            return f"{spelling(Operator.NOT, dialect)}({body})"
        return body

    raise TypeError(f"Unsupported syntax node: {type(node).__name__}")


def _needs_parentheses(child: SyntaxNode, parent: BinaryOp, is_left: bool) -> bool:
    if not isinstance(child, BinaryOp) or child.negated:
        return False
    if is_left and child.operator is parent.operator and parent.operator.is_associative:
        return False
    return True


def render(canonical: str, dialect: Dialect) -> str:
    """Rewrite a canonical ``AND``/``OR``/``NOT`` string into ``dialect``.

    Example:
        >>> render("(a AND NOT b) OR c", Dialect.BOOLEAN)
        '(a * -b) + c'
    """
    return (
        canonical.replace(CANONICAL_AND, spelling(Operator.AND, dialect))
        .replace(CANONICAL_OR, spelling(Operator.OR, dialect))
        .replace(CANONICAL_NOT, spelling(Operator.NOT, dialect))
    )
