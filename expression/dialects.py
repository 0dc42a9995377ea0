# expression/dialects.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Operator and dialect tables shared by the lexer, parser and renderer

"""Operators, dialects and their surface spellings.

An expression may be written in one of four interchangeable notations. The
notation never changes what an expression means; it only decides how
operators are spelled when the expression is printed back.

Dialects:
    PSEUDO: ``not a and b``, ``a or b``, ``a implies b``
    LOGIC: ``~a ^ b``, ``a v b``, ``a -> b``
    CODE: ``!a && b``, ``a || b``
    BOOLEAN: ``-a * b``, ``a + b``

Internally every operator is reduced to a one-character canonical token so
the parser only ever sees a single spelling per operator.
"""

from enum import Enum
from typing import Dict, Tuple


class Operator(Enum):
    """Logical operators with their canonical one-character tokens."""

    NOT = "~"
    AND = "^"
    OR = "v"
    IMPLIES = ">"
    BICONDITIONAL = "="
    NAND = "|"
    NOR = ":"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_associative(self) -> bool:
        return self in (Operator.AND, Operator.OR)


class Dialect(Enum):
    """Surface notations an expression can be written in."""

    PSEUDO = "pseudo-English"
    LOGIC = "logic-symbol"
    CODE = "code-symbol"
    BOOLEAN = "Boolean-algebra"


# Spellings used when printing an expression back in its dialect
OUTPUT_SPELLINGS: Dict[Dialect, Dict[Operator, str]] = {
    Dialect.PSEUDO: {
        Operator.NOT: "not ",
        Operator.AND: "and",
        Operator.OR: "or",
        Operator.IMPLIES: "implies",
        Operator.BICONDITIONAL: "iff",
        Operator.NAND: "nand",
        Operator.NOR: "nor",
    },
    Dialect.LOGIC: {
        Operator.NOT: "~",
        Operator.AND: "^",
        Operator.OR: "v",
        Operator.IMPLIES: "->",
        Operator.BICONDITIONAL: "<->",
        Operator.NAND: "|",
        Operator.NOR: "↓",
    },
    Dialect.CODE: {
        Operator.NOT: "!",
        Operator.AND: "&&",
        Operator.OR: "||",
        Operator.IMPLIES: "->",
        Operator.BICONDITIONAL: "<->",
        Operator.NAND: "|",
        Operator.NOR: "↓",
    },
    Dialect.BOOLEAN: {
        Operator.NOT: "-",
        Operator.AND: "*",
        Operator.OR: "+",
        Operator.IMPLIES: "->",
        Operator.BICONDITIONAL: "<->",
        Operator.NAND: "-*",
        Operator.NOR: "-+",
    },
}

# Every accepted input spelling, with the operator it denotes and the
# dialect it fixes when it is the first operator of an expression
INPUT_SPELLINGS: Dict[str, Tuple[Operator, Dialect]] = {
    "NOT": (Operator.NOT, Dialect.PSEUDO),
    "not": (Operator.NOT, Dialect.PSEUDO),
    "~": (Operator.NOT, Dialect.LOGIC),
    "!": (Operator.NOT, Dialect.CODE),
    "-": (Operator.NOT, Dialect.BOOLEAN),
    "AND": (Operator.AND, Dialect.PSEUDO),
    "and": (Operator.AND, Dialect.PSEUDO),
    "^": (Operator.AND, Dialect.LOGIC),
    "&&": (Operator.AND, Dialect.CODE),
    "*": (Operator.AND, Dialect.BOOLEAN),
    "OR": (Operator.OR, Dialect.PSEUDO),
    "or": (Operator.OR, Dialect.PSEUDO),
    "v": (Operator.OR, Dialect.LOGIC),
    "||": (Operator.OR, Dialect.CODE),
    "+": (Operator.OR, Dialect.BOOLEAN),
    "IMPLIES": (Operator.IMPLIES, Dialect.PSEUDO),
    "implies": (Operator.IMPLIES, Dialect.PSEUDO),
    "->": (Operator.IMPLIES, Dialect.LOGIC),
    "IFF": (Operator.BICONDITIONAL, Dialect.PSEUDO),
    "iff": (Operator.BICONDITIONAL, Dialect.PSEUDO),
    "<->": (Operator.BICONDITIONAL, Dialect.LOGIC),
    "NAND": (Operator.NAND, Dialect.PSEUDO),
    "nand": (Operator.NAND, Dialect.PSEUDO),
    "|": (Operator.NAND, Dialect.LOGIC),
    "↑": (Operator.NAND, Dialect.LOGIC),
    "-*": (Operator.NAND, Dialect.BOOLEAN),
    "NOR": (Operator.NOR, Dialect.PSEUDO),
    "nor": (Operator.NOR, Dialect.PSEUDO),
    "↓": (Operator.NOR, Dialect.LOGIC),
    "⬇": (Operator.NOR, Dialect.LOGIC),
    "-+": (Operator.NOR, Dialect.BOOLEAN),
}

# Letter 'v' spells OR, so it can never name a variable
VALID_VARIABLES = "abcdefghijklmnopqrstuwxyz"

# Canonical tokens produced by the minimizer before rendering
CANONICAL_AND = "AND"
CANONICAL_OR = "OR"
CANONICAL_NOT = "NOT "

DEFAULT_DIALECT = Dialect.LOGIC


def spelling(operator: Operator, dialect: Dialect) -> str:
    """Return how ``operator`` is written in ``dialect``."""
    return OUTPUT_SPELLINGS[dialect][operator]


def classify(token: str) -> Tuple[Operator, Dialect]:
    """Look up the operator and dialect of an input spelling.

    Raises:
        KeyError: ``token`` is not a recognized operator spelling
    """
    return INPUT_SPELLINGS[token]
