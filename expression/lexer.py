# expression/lexer.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Lexical analyzer turning any dialect's spellings into canonical tokens using SLY

"""Lexical analyzer for propositional expressions.

The lexer recognizes every spelling of every operator across the four
dialects and reduces each one to a single token type carrying an
:class:`Operator` value. Longer spellings are listed ahead of shorter ones
that share a prefix (``<->`` before ``->`` before ``-``, ``||`` before ``|``,
``nand`` before the variable ``n``), so the scan is longest-match.

The first operator spelling met fixes the expression's dialect; spellings
from other dialects later in the same expression are still accepted.

Supported Tokens:
- Operators: NOT, AND, OR, IMPLIES, IFF, NAND, NOR (all dialect spellings)
- Punctuation: ( )
- Variables: single lowercase letters except ``v``
- Whitespace: skipped between tokens
"""

from typing import List, Optional, Tuple

from sly import Lexer

from .dialects import DEFAULT_DIALECT, VALID_VARIABLES, Dialect, classify
from .exceptions import InvalidExpression
from utils.logger import get_logger

# SLY reads bare uppercase names in a lexer body as token names
variable_pattern = "[" + VALID_VARIABLES + "]"


class ExpressionLexer(Lexer):
    """SLY-based lexer for multi-dialect propositional expressions.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters skipped between tokens
        dialect: Dialect fixed by the first operator seen, ``None`` until then
    """

    tokens = {
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "IFF",
        "NAND",
        "NOR",
        "VAR",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    LPAREN = r"\("
    RPAREN = r"\)"

    def __init__(self):
        self.dialect: Optional[Dialect] = None

    @_(r"<->|IFF|iff")
    def IFF(self, t):
        return self._operator(t)

    @_(r"->|IMPLIES|implies")
    def IMPLIES(self, t):
        return self._operator(t)

    @_(r"\|\||\+|OR|or|v")
    def OR(self, t):
        return self._operator(t)

    @_(r"-\+|↓|⬇|NOR|nor")
    def NOR(self, t):
        return self._operator(t)

    @_(r"-\*|\||↑|NAND|nand")
    def NAND(self, t):
        return self._operator(t)

    @_(r"&&|\*|\^|AND|and")
    def AND(self, t):
        return self._operator(t)

    @_(r"~|!|-|NOT|not")
    def NOT(self, t):
        return self._operator(t)

    # Variables last so operator words such as "nand" win over the letter n
    VAR = variable_pattern

    def _operator(self, t):
        """Replace a spelling with its operator, fixing the dialect on first use."""
        operator, dialect = classify(t.value)
        if self.dialect is None:
            self.dialect = dialect
            get_logger().debug(f"Dialect {dialect.value} fixed by '{t.value}'")
        t.value = operator
        return t

    def error(self, t):
        """Reject characters that no token pattern accepts.

        Raises:
            InvalidExpression: Always; digits get a dedicated message
        """
        illegal_char = t.value[0]
        error_pos = self.index

        get_logger().debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        if illegal_char.isdigit():
            raise InvalidExpression("numbers are not valid variables")

        raise InvalidExpression(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )


def tokenize(text: str) -> Tuple[List, Dialect]:
    """Tokenize ``text`` completely.

    Returns:
        The token list and the dialect of the expression (LOGIC when the
        expression contains no operator)

    Raises:
        InvalidExpression: A digit or an unknown character was found
    """
    lexer = ExpressionLexer()
    tokens = list(lexer.tokenize(text))
    return tokens, lexer.dialect or DEFAULT_DIALECT


def canonical_text(tokens) -> str:
    """Join tokens back into a string using canonical one-character tokens."""
    pieces = []
    for token in tokens:
        if token.type == "LPAREN":
            pieces.append("(")
        elif token.type == "RPAREN":
            pieces.append(")")
        elif token.type == "VAR":
            pieces.append(token.value)
        else:
            pieces.append(token.value.symbol)
    return "".join(pieces)


def normalize(text: str) -> Tuple[str, Dialect]:
    """Reduce ``text`` to its canonical form and detect its dialect.

    Example:
        >>> normalize("not a and (b || c)")
        ('~a^(bvc)', <Dialect.PSEUDO: 'pseudo-English'>)
    """
    tokens, dialect = tokenize(text)
    return canonical_text(tokens), dialect


def detect_dialect(text: str) -> Dialect:
    """Return the dialect fixed by the first operator spelling in ``text``."""
    return tokenize(text)[1]
