# expression/validation.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Structural checks run on the token stream before grammar parsing

"""Token-level validation of propositional expressions.

The grammar alone would reject malformed input with a generic syntax error.
These checks run first so the caller learns what is actually wrong: a
missing parenthesis, an operator without an operand, or several letters run
together where a single-letter variable was expected.
"""

from typing import List

from .exceptions import InvalidExpression, UnbalancedParentheses

BINARY_TOKENS = {"AND", "OR", "IMPLIES", "IFF", "NAND", "NOR"}


def check_balance(tokens: List) -> None:
    """Verify that parentheses pair up.

    Raises:
        UnbalancedParentheses: A closing parenthesis has no opening partner,
            or the expression ends with groups still open
    """
    depth = 0
    for token in tokens:
        if token.type == "LPAREN":
            depth += 1
        elif token.type == "RPAREN":
            depth -= 1
            if depth < 0:
                raise UnbalancedParentheses(
                    f"Closing parenthesis at position {token.index} has no opening partner."
                )

    if depth != 0:
        raise UnbalancedParentheses("You have a missing parenthesis somewhere.")


def validate(tokens: List) -> None:
    """Check operator and operand placement, recursing into every group.

    Expects balanced parentheses (see :func:`check_balance`).

    Raises:
        InvalidExpression: The token sequence cannot form an expression
    """
    if not tokens:
        raise InvalidExpression("That is an invalid expression: an operand is empty.")

    previous = None
    previous_token = None
    i = 0

    while i < len(tokens):
        token = tokens[i]

        if token.type == "LPAREN":
            close = _matching_parenthesis(tokens, i)
            validate(tokens[i + 1 : close])
            kind = "operand"
            i = close + 1
        elif token.type == "VAR":
            kind = "operand"
            i += 1
        elif token.type == "NOT":
            kind = "not"
            i += 1
        elif token.type in BINARY_TOKENS:
            kind = "binary"
            i += 1
        else:
            raise InvalidExpression(
                f"Unexpected '{token.value}' at position {token.index}."
            )

        if kind == "binary" and previous in (None, "binary", "not"):
            raise InvalidExpression(
                f"Operator {token.value.name} at position {token.index} has no left operand."
            )

        if kind in ("operand", "not") and previous == "operand":
            if token.type == "VAR" and previous_token.type == "VAR":
                raise InvalidExpression(
                    f"'{previous_token.value}{token.value}' is not a valid variable; "
                    "variables are single letters."
                )
            raise InvalidExpression(f"Missing operator before position {token.index}.")

        previous = kind
        previous_token = token

    if previous in ("binary", "not"):
        raise InvalidExpression(
            f"Operator {previous_token.value.name} at position "
            f"{previous_token.index} has no right operand."
        )


def _matching_parenthesis(tokens: List, start: int) -> int:
    depth = 0
    for i in range(start, len(tokens)):
        if tokens[i].type == "LPAREN":
            depth += 1
        elif tokens[i].type == "RPAREN":
            depth -= 1
            if depth == 0:
                return i
    raise UnbalancedParentheses("You have a missing parenthesis somewhere.")
