# logic/evaluator.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Evaluation of syntax trees under variable assignments

"""Evaluation of propositional syntax trees.

An :class:`Assignment` gives every variable of a query a truth value.
:func:`evaluate` computes the value of a tree under one assignment, and
:func:`collect_labeled_evaluations` produces the labeled values that become
the columns of a truth table: the root, every sub-expression that carries
its own NOT, and optionally every other binary step as well.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from expression.ast_nodes import BinaryOp, SyntaxNode, Variable, iter_postorder, negate
from expression.dialects import DEFAULT_DIALECT, Dialect, Operator
from expression.exceptions import MissingAssignment
from expression.renderer import to_text


@dataclass(frozen=True)
class Assignment(Mapping):
    """Immutable mapping from variable name to truth value.

    Hashable so assignments can take part in de-duplication of labeled
    evaluations.

    Attributes:
        pairs: ``(name, value)`` pairs in variable order
    """

    pairs: Tuple[Tuple[str, bool], ...]

    @classmethod
    def of(cls, names: Iterable[str], values: Iterable[bool]) -> Assignment:
        return cls(tuple(zip(names, values)))

    def __getitem__(self, name: str) -> bool:
        for variable, value in self.pairs:
            if variable == name:
                return value
        raise KeyError(name)

    def __iter__(self) -> Iterator[str]:
        return (variable for variable, _ in self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __str__(self) -> str:
        return ", ".join(f"{n}={'T' if v else 'F'}" for n, v in self.pairs)


@dataclass(frozen=True)
class LabeledEvaluation:
    """Value of one labeled sub-expression under one assignment."""

    label: str
    assignment: Assignment
    value: bool


def evaluate(node: SyntaxNode, assignment: Mapping) -> bool:
    """Compute the truth value of ``node`` under ``assignment``.

    Args:
        node: Root of the tree to evaluate
        assignment: Truth value for every variable of the tree

    Returns:
        Value of the tree, with node-level negation applied

    Raises:
        MissingAssignment: A variable of the tree has no truth value
    """
    if isinstance(node, Variable):
        if node.name not in assignment:
            raise MissingAssignment(node.name)
        value = assignment[node.name]

    elif isinstance(node, BinaryOp):
        left = evaluate(node.left, assignment)
        right = evaluate(node.right, assignment)
        value = _apply(node.operator, left, right)

    else:
        raise TypeError(f"Unsupported syntax node: {type(node).__name__}")

    return not value if node.negated else value


def _apply(operator: Operator, left: bool, right: bool) -> bool:
    if operator is Operator.AND:
        return left and right
    if operator is Operator.OR:
        return left or right
    if operator is Operator.IMPLIES:
        return (not left) or right
    if operator is Operator.BICONDITIONAL:
        return left == right
    if operator is Operator.NAND:
        return not (left and right)
    if operator is Operator.NOR:
        return not (left or right)
    raise ValueError(f"{operator.name} is not a binary operator")


def collect_labeled_evaluations(
    node: SyntaxNode,
    assignments: Iterable[Assignment],
    dialect: Optional[Dialect] = None,
    intermediate: bool = False,
) -> List[LabeledEvaluation]:
    """Evaluate every labeled sub-expression of ``node`` on every row.

    Sub-expressions are visited children first, so inner columns come before
    the columns that contain them. A label appears once per assignment even
    when the same text occurs several times in the tree.

    Args:
        node: Root of the tree
        assignments: Rows to evaluate, in order
        dialect: Dialect used for labels; defaults to the root's dialect
        intermediate: Also label binary sub-expressions that carry no NOT,
            including the body of every negated group

    Returns:
        Labeled evaluations, free of duplicate ``(label, assignment)`` pairs
    """
    if dialect is None:
        dialect = node.dialect if isinstance(node, BinaryOp) else DEFAULT_DIALECT

    rows = list(assignments)
    labeled: Dict[str, SyntaxNode] = {}
    for sub in iter_postorder(node):
        if intermediate and isinstance(sub, BinaryOp) and sub.negated:
            body = negate(sub)
            labeled.setdefault(to_text(body, dialect), body)
        if sub is node or sub.negated or (intermediate and isinstance(sub, BinaryOp)):
            labeled.setdefault(to_text(sub, dialect), sub)

    evaluations: List[LabeledEvaluation] = []
    seen: Set[Tuple[str, Assignment]] = set()
    for label, sub in labeled.items():
        for assignment in rows:
            if (label, assignment) in seen:
                continue
            seen.add((label, assignment))
            evaluations.append(
                LabeledEvaluation(label, assignment, evaluate(sub, assignment))
            )

    return evaluations
