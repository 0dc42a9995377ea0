# expression/ast_nodes.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Syntax tree node classes for propositional expressions

"""Syntax tree nodes for parsed propositional expressions.

A tree is built from exactly two node kinds:

    Variable: a single-letter propositional variable
    BinaryOp: two child nodes joined by a binary operator

Negation is not a node of its own: both kinds carry a ``negated`` flag that
inverts the value of the node it sits on. Nodes are frozen and hashable, so a
tree is never modified after the parser builds it; transformations produce
new trees instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator, List, Union

from .dialects import DEFAULT_DIALECT, Dialect, Operator


@dataclass(frozen=True, slots=True)
class Variable:
    """Leaf node naming a propositional variable.

    Attributes:
        name: Single-letter variable name
        negated: Whether a NOT is attached to the variable
    """

    name: str
    negated: bool = False


@dataclass(frozen=True, slots=True)
class BinaryOp:
    """Binary operator applied to two sub-expressions.

    The dialect does not take part in equality: two trees that mean the same
    thing compare equal whatever notation they were written in.

    Attributes:
        left: Left operand
        operator: Binary operator (anything but NOT)
        right: Right operand
        negated: Whether a NOT is attached to the whole sub-expression
        dialect: Notation the expression was parsed in
    """

    left: SyntaxNode
    operator: Operator
    right: SyntaxNode
    negated: bool = False
    dialect: Dialect = field(default=DEFAULT_DIALECT, compare=False)

    def __post_init__(self):
        if self.operator is Operator.NOT:
            raise ValueError("NOT is a node flag, not a binary operator")


SyntaxNode = Union[Variable, BinaryOp]


def negate(node: SyntaxNode) -> SyntaxNode:
    """Return a copy of ``node`` with its negation flag toggled."""
    return replace(node, negated=not node.negated)


def iter_postorder(node: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield every node of the tree, children before their parent."""
    if isinstance(node, BinaryOp):
        yield from iter_postorder(node.left)
        yield from iter_postorder(node.right)
    yield node


def variables_of(node: SyntaxNode) -> List[str]:
    """Return the sorted distinct variable names used in the tree."""
    return sorted(
        {n.name for n in iter_postorder(node) if isinstance(n, Variable)}
    )
