# expression/parsed.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Result object returned by the parser

"""Parsed expression wrapper.

After parsing, the tree root travels together with the facts every later
stage needs: which variables occur, whether the whole expression is just one
variable, and which dialect it was written in.
"""

from dataclasses import dataclass
from typing import Tuple

from .ast_nodes import SyntaxNode, Variable
from .dialects import Dialect
from .renderer import to_text


@dataclass(frozen=True)
class Expression:
    """Wraps the root of a parsed expression.

    Attributes:
        root: Top-level node of the syntax tree
        variables: Sorted distinct variable names
        is_single: Whether the root is a bare variable
        dialect: Notation fixed by the first operator of the input
    """

    root: SyntaxNode
    variables: Tuple[str, ...]
    is_single: bool
    dialect: Dialect

    @classmethod
    def from_root(cls, root: SyntaxNode, variables, dialect: Dialect) -> "Expression":
        return cls(
            root=root,
            variables=tuple(variables),
            is_single=isinstance(root, Variable),
            dialect=dialect,
        )

    def __str__(self) -> str:
        return to_text(self.root, self.dialect)
