# logic/truth_table.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Exhaustive enumeration of assignments and truth-table construction

"""Truth table engine.

Rows follow a fixed order so tables and minimizer input are reproducible:
variables are taken alphabetically, the first one is the most significant
bit of the row index, and a bit value of 0 means *true*. For ``[a, b]``::

    row 0: a=T b=T
    row 1: a=T b=F
    row 2: a=F b=T
    row 3: a=F b=F

A table is a list of ``(label, values)`` columns, one per variable plus one
per labeled sub-expression, ordered by label length and then alphabetically.
"""

from typing import Dict, List, Optional, Sequence, Tuple, Union

from expression.ast_nodes import SyntaxNode
from expression.dialects import Dialect
from expression.parsed import Expression
from utils.logger import get_logger

from .evaluator import Assignment, collect_labeled_evaluations, evaluate

Column = Tuple[str, List[bool]]


def truth_value(row: int, power: int) -> bool:
    """Return the value of the variable weighted ``2**power`` in ``row``."""
    return ((row // 2**power) % 2) == 0


def enumerate_assignments(variables: Sequence[str]) -> List[Assignment]:
    """Build all ``2**n`` assignments over ``variables`` in row order."""
    n = len(variables)
    return [
        Assignment.of(variables, (truth_value(row, n - j - 1) for j in range(n)))
        for row in range(2**n)
    ]


def _unwrap(tree: Union[Expression, SyntaxNode], dialect: Optional[Dialect]):
    if isinstance(tree, Expression):
        return tree.root, dialect or tree.dialect
    return tree, dialect


def truth_table(
    tree: Union[Expression, SyntaxNode],
    variables: Optional[Sequence[str]] = None,
    intermediate: bool = False,
    dialect: Optional[Dialect] = None,
) -> List[Column]:
    """Build the labeled columns of a truth table.

    Args:
        tree: Parsed expression or bare syntax tree
        variables: Variables to enumerate; defaults to the expression's own
        intermediate: Add a column for every binary step, not only for
            negated sub-expressions and the root
        dialect: Dialect of the labels; defaults to the expression's

    Returns:
        Columns ordered by label length, ties broken alphabetically, each
        holding ``2**len(variables)`` values

    Raises:
        MissingAssignment: ``variables`` misses a variable of the tree
    """
    root, dialect = _unwrap(tree, dialect)
    if variables is None:
        variables = tree.variables if isinstance(tree, Expression) else []
    variables = list(variables)

    assignments = enumerate_assignments(variables)
    columns: Dict[str, List[bool]] = {}

    for evaluation in collect_labeled_evaluations(
        root, assignments, dialect=dialect, intermediate=intermediate
    ):
        columns.setdefault(evaluation.label, []).append(evaluation.value)

    for variable in variables:
        if variable not in columns:
            columns[variable] = [assignment[variable] for assignment in assignments]

    get_logger().debug(
        f"Truth table built: {len(columns)} columns x {len(assignments)} rows"
    )
    return [
        (label, columns[label])
        for label in sorted(columns, key=lambda label: (len(label), label))
    ]


def expression_truths(
    tree: Union[Expression, SyntaxNode], variables: Optional[Sequence[str]] = None
) -> List[bool]:
    """Return the value of the whole expression on every row."""
    root, _ = _unwrap(tree, None)
    if variables is None:
        variables = tree.variables if isinstance(tree, Expression) else []
    return [evaluate(root, assignment) for assignment in enumerate_assignments(variables)]


def true_rows(
    tree: Union[Expression, SyntaxNode], variables: Optional[Sequence[str]] = None
) -> List[int]:
    """Return the indices of the rows on which the expression is true."""
    return [row for row, value in enumerate(expression_truths(tree, variables)) if value]
