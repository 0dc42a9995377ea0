# logic/__init__.py

"""Evaluation and minimization of propositional expressions.

This package provides:
  • evaluate / Assignment: truth value of a tree under one assignment
  • truth_table: labeled boolean columns over all 2^n assignments
  • minimize: Quine-McCluskey minimization to a canonical sum of products
  • simplify: minimized form of an expression in its own dialect
"""

from .evaluator import Assignment, LabeledEvaluation, collect_labeled_evaluations, evaluate
from .minimizer import Implicant, minimize
from .simplifier import ALWAYS_FALSE_TEXT, ALWAYS_TRUE_TEXT, simplify
from .truth_table import enumerate_assignments, expression_truths, truth_table

__all__ = [
    "Assignment",
    "LabeledEvaluation",
    "evaluate",
    "collect_labeled_evaluations",
    "enumerate_assignments",
    "expression_truths",
    "truth_table",
    "Implicant",
    "minimize",
    "simplify",
    "ALWAYS_TRUE_TEXT",
    "ALWAYS_FALSE_TEXT",
]
