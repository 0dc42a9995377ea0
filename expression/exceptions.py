# expression/exceptions.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Custom exceptions for expression parsing and evaluation

"""Domain-specific exceptions for propositional expression processing.

All exceptions are terminal for the call that raised them: they signal bad
input rather than transient faults, so callers are expected to report them
and move on to the next expression instead of retrying.
"""


class LogicError(RuntimeError):
    """Base class for every error raised by the parser and evaluator."""

    pass


class InvalidExpression(LogicError):
    """Exception raised when an expression is malformed.

    Covers digits used as variables, unknown characters, operators with a
    missing operand, and runs of several variables with no operator between
    them.
    """

    pass


class UnbalancedParentheses(LogicError):
    """Exception raised when opening and closing parentheses do not pair up."""

    pass


class MissingAssignment(LogicError, KeyError):
    """Exception raised when evaluation needs a variable the assignment lacks.

    Attributes:
        variable: Name of the variable that had no truth value
    """

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f'Required truth value for the variable "{variable}".')

    def __str__(self) -> str:
        return self.args[0]
