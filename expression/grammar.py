# expression/grammar.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# LALR(1) grammar and parser for propositional expressions using SLY

"""Propositional expression grammar implemented with the SLY parser generator.

The grammar mirrors how the expressions are read left to right:

- All binary operators (AND, OR, IMPLIES, IFF, NAND, NOR) share a single
  precedence level and fold to the left, so ``a ^ b v c`` is
  ``(a ^ b) v c``.
- NOT binds only to the variable or parenthesized group right after it:
  ``~a v b`` negates ``a`` alone, ``~(a v b)`` negates the whole OR.
- Repeated NOTs toggle the negation flag.
- Parentheses only group; ``(a v b)`` and ``a v b`` give the same tree.

Grammar:
    start   : expr
    expr    : expr BINOP operand | operand
    operand : NOT operand | LPAREN expr RPAREN | VAR
"""

from sly import Parser

from .ast_nodes import BinaryOp, SyntaxNode, Variable, negate, variables_of
from .dialects import DEFAULT_DIALECT, Dialect
from .exceptions import InvalidExpression, LogicError
from .lexer import ExpressionLexer, tokenize
from .parsed import Expression
from .validation import check_balance, validate
from utils.logger import get_logger


class _ExpressionParser(Parser):
    """SLY-based LALR(1) parser building syntax trees.

    Attributes:
        tokens: Token types from ExpressionLexer
        dialect: Dialect stamped on every binary node built
    """

    tokens = ExpressionLexer.tokens

    def __init__(self):
        self.dialect: Dialect = DEFAULT_DIALECT

    @_("expr")
    def start(self, p) -> SyntaxNode:
        """Start rule: the whole input is one expression."""
        return p.expr

    @_(
        "expr AND operand",
        "expr OR operand",
        "expr IMPLIES operand",
        "expr IFF operand",
        "expr NAND operand",
        "expr NOR operand",
    )
    def expr(self, p) -> SyntaxNode:
        """Binary operator folding the expression so far into its left side."""
        return BinaryOp(p.expr, p[1], p.operand, dialect=self.dialect)

    @_("operand")
    def expr(self, p) -> SyntaxNode:
        return p.operand

    @_("NOT operand")
    def operand(self, p) -> SyntaxNode:
        """Negation attached to the following operand."""
        return negate(p.operand)

    @_("LPAREN expr RPAREN")
    def operand(self, p) -> SyntaxNode:
        """Parenthesized group."""
        return p.expr

    @_("VAR")
    def operand(self, p) -> SyntaxNode:
        return Variable(p.VAR)

    def parse(self, text: str) -> Expression:
        """Parse expression text into an :class:`Expression`.

        Args:
            text: Expression in any supported dialect

        Returns:
            Parsed expression with root, variables and dialect

        Raises:
            InvalidExpression: Malformed expression, digits or unknown characters
            UnbalancedParentheses: Parentheses do not pair up
        """
        logger = get_logger()
        logger.debug(f"Parsing expression: {text}")

        try:
            tokens, self.dialect = tokenize(text)
            check_balance(tokens)
            validate(tokens)

            root = super().parse(iter(tokens))

            if root is None:
                raise InvalidExpression("Failed to parse expression (syntax error).")

            logger.debug(
                f"Successfully parsed expression into {type(root).__name__} "
                f"({self.dialect.value})"
            )
            return Expression.from_root(root, variables_of(root), self.dialect)

        except LogicError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise InvalidExpression(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Raises:
            InvalidExpression: Always raises with the offending token
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of expression"

        raise InvalidExpression(error_msg)
