# logic/simplifier.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# End-to-end simplification of a parsed expression

"""Simplification of parsed expressions.

Chains the truth table, the minimizer and the renderer: the rows on which
the expression is true are minimized into a canonical sum of products,
which is rewritten in the expression's dialect and parsed once more so the
result is printed with the same parenthesization rules as any other tree.
"""

from typing import Optional, Sequence, Union

from expression import parse
from expression.ast_nodes import SyntaxNode
from expression.dialects import DEFAULT_DIALECT, Dialect
from expression.parsed import Expression
from expression.renderer import render, to_text
from utils.logger import get_logger

from .minimizer import ALWAYS_FALSE, ALWAYS_TRUE, minimize
from .truth_table import true_rows

ALWAYS_TRUE_TEXT = "Always True"
ALWAYS_FALSE_TEXT = "Always False"


def simplify(
    tree: Union[Expression, SyntaxNode],
    variables: Optional[Sequence[str]] = None,
    dialect: Optional[Dialect] = None,
) -> str:
    """Return the minimal sum-of-products form of an expression.

    Args:
        tree: Parsed expression or bare syntax tree
        variables: Variables of the function; defaults to the expression's own
        dialect: Output dialect; defaults to the expression's dialect

    Returns:
        ``"Always True"``, ``"Always False"`` or the minimized expression
        written in ``dialect``

    Example:
        >>> simplify(parse("a or (a and b)"))
        'a'
    """
    logger = get_logger()

    if isinstance(tree, Expression):
        if variables is None:
            variables = tree.variables
        dialect = dialect or tree.dialect
    elif variables is None:
        raise ValueError("variables are required when simplifying a bare syntax tree")

    dialect = dialect or DEFAULT_DIALECT
    variables = list(variables)

    function = minimize(variables, true_rows(tree, variables))

    if function == ALWAYS_TRUE:
        return ALWAYS_TRUE_TEXT
    if function == ALWAYS_FALSE:
        return ALWAYS_FALSE_TEXT

    rendered = render(function, dialect)
    logger.debug(f"Rendered minimized function in {dialect.value}: {rendered}")

    # The reparse fixes the dialect from the rendered text; print it in the
    # requested one so a lone negated variable keeps its spelling
    return to_text(parse(rendered).root, dialect)
