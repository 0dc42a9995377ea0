# utils/table_formatter.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Text rendering of truth-table columns

"""Printable truth tables.

Turns the ``(label, values)`` columns produced by :func:`logic.truth_table`
into bordered lines, one column per label, ``T``/``F`` centered under each
label::

    | a | b | a ^ b |
    +---+---+-------+
    | T | T |   T   |
"""

from typing import List, Sequence, Tuple


def center(text: str, length: int, fill: str = " ") -> str:
    """Center ``text`` in ``length`` characters, extra fill going right."""
    if len(text) >= length:
        return text
    left = (length - len(text)) // 2
    right = length - len(text) - left
    return fill * left + text + fill * right


def format_table(columns: Sequence[Tuple[str, Sequence[bool]]]) -> List[str]:
    """Render truth-table columns as lines of text.

    Args:
        columns: ``(label, values)`` pairs, all value lists of equal length

    Returns:
        Header line, separator line, then one line per row
    """
    if not columns:
        return []

    labels = [label for label, _ in columns]
    widths = [len(label) for label in labels]
    rows = len(columns[0][1])

    lines = [
        "| " + " | ".join(center(label, width) for label, width in zip(labels, widths)) + " |",
        "+" + "+".join("-" * (width + 2) for width in widths) + "+",
    ]

    for row in range(rows):
        cells = (
            center("T" if values[row] else "F", width)
            for (_, values), width in zip(columns, widths)
        )
        lines.append("| " + " | ".join(cells) + " |")

    return lines


def format_table_as_string(columns: Sequence[Tuple[str, Sequence[bool]]]) -> str:
    """Render truth-table columns as one newline-terminated string."""
    return "".join(line + "\n" for line in format_table(columns))
