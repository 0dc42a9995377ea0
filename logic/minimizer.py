# logic/minimizer.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Quine-McCluskey minimization of truth-table functions

"""Quine-McCluskey Boolean function minimization.

Input is the list of variables and the set of truth-table rows on which the
function is true, using the row order of :mod:`logic.truth_table` (row 0 has
every variable true). Output is a sum of products in canonical tokens::

    (a AND NOT b) OR c

The algorithm runs in three stages:

1. Prime implicants: rows become patterns over ``'1'``/``'0'``, grouped by
   the number of ``'1'`` positions. Patterns from adjacent groups that
   differ in exactly one position merge into a pattern with ``'-'`` there.
   Rounds repeat until nothing merges; every pattern that never merged is
   prime.
2. Essential implicants: a row covered by a single prime makes that prime
   part of every cover.
3. Remaining rows are covered greedily by the prime covering the most of
   them, preferring fewer don't-cares and then the earlier prime.

Stage 3 is the classical heuristic rather than an exact set-cover solver,
which keeps results deterministic.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Set

from expression.dialects import CANONICAL_AND, CANONICAL_NOT, CANONICAL_OR
from utils.logger import get_logger

ALWAYS_TRUE = "1"
ALWAYS_FALSE = "0"

DONT_CARE = "-"


@dataclass(frozen=True)
class Implicant:
    """Product term over the variables of a function.

    Attributes:
        pattern: One character per variable: ``'1'`` variable true, ``'0'``
            variable false, ``'-'`` don't care
        minterms: Truth-table rows covered by the term
    """

    pattern: str
    minterms: FrozenSet[int]

    @property
    def ones(self) -> int:
        return self.pattern.count("1")

    @property
    def dont_cares(self) -> int:
        return self.pattern.count(DONT_CARE)

    def merge(self, other: "Implicant") -> Optional["Implicant"]:
        """Combine with ``other`` if the patterns differ in exactly one position.

        Positions holding ``'-'`` must match in both patterns.
        """
        difference = None
        for position, (mine, theirs) in enumerate(zip(self.pattern, other.pattern)):
            if mine == theirs:
                continue
            if difference is not None or DONT_CARE in (mine, theirs):
                return None
            difference = position

        if difference is None:
            return None

        pattern = self.pattern[:difference] + DONT_CARE + self.pattern[difference + 1 :]
        return Implicant(pattern, self.minterms | other.minterms)

    def to_term(self, variables: Sequence[str]) -> str:
        """Render as an AND of literals in variable order."""
        literals = []
        for name, bit in zip(variables, self.pattern):
            if bit == "1":
                literals.append(name)
            elif bit == "0":
                literals.append(CANONICAL_NOT + name)
        return f" {CANONICAL_AND} ".join(literals)


def row_pattern(row: int, width: int) -> str:
    """Pattern of a truth-table row; bit 0 of the row index means true."""
    return "".join(
        "1" if (row >> (width - j - 1)) & 1 == 0 else "0" for j in range(width)
    )


def prime_implicants(width: int, minterms: Iterable[int]) -> List[Implicant]:
    """Find all prime implicants covering ``minterms``.

    Args:
        width: Number of variables
        minterms: Rows on which the function is true

    Returns:
        Prime implicants in the order they were found
    """
    logger = get_logger()

    terms = [Implicant(row_pattern(row, width), frozenset({row})) for row in sorted(set(minterms))]
    primes: List[Implicant] = []
    known: Set[str] = set()
    round_number = 0

    while terms:
        round_number += 1
        groups: Dict[int, List[Implicant]] = {}
        for term in terms:
            groups.setdefault(term.ones, []).append(term)

        merged: List[Implicant] = []
        merged_patterns: Set[str] = set()
        used: Set[str] = set()

        for ones in sorted(groups):
            for lower in groups[ones]:
                for upper in groups.get(ones + 1, []):
                    combined = lower.merge(upper)
                    if combined is None:
                        continue
                    used.add(lower.pattern)
                    used.add(upper.pattern)
                    if combined.pattern not in merged_patterns:
                        merged_patterns.add(combined.pattern)
                        merged.append(combined)

        for term in terms:
            if term.pattern not in used and term.pattern not in known:
                known.add(term.pattern)
                primes.append(term)

        logger.merge_round(round_number, len(merged), len(primes))
        terms = merged

    logger.prime_implicants(p.pattern for p in primes)
    return primes


def select_cover(primes: Sequence[Implicant], minterms: Iterable[int]) -> List[Implicant]:
    """Choose prime implicants covering every minterm.

    Essential implicants come first, in the order of the lowest minterm that
    makes them essential; the rest are added greedily.
    """
    logger = get_logger()
    targets = sorted(set(minterms))
    selected: List[Implicant] = []

    for minterm in targets:
        covering = [prime for prime in primes if minterm in prime.minterms]
        if len(covering) == 1 and covering[0] not in selected:
            selected.append(covering[0])
            logger.implicant_selected("Essential", covering[0].pattern, covering[0].minterms)

    uncovered = set(targets)
    for prime in selected:
        uncovered -= prime.minterms

    while uncovered:
        best = None
        best_key = None
        for prime in primes:
            if prime in selected:
                continue
            key = (len(prime.minterms & uncovered), -prime.dont_cares)
            if best is None or key > best_key:
                best, best_key = prime, key

        if best is None or best_key[0] == 0:
            raise ValueError(f"Minterms {sorted(uncovered)} are not covered by any implicant")

        selected.append(best)
        uncovered -= best.minterms
        logger.implicant_selected("Greedy", best.pattern, best.minterms)

    return selected


def minimize(variables: Sequence[str], true_minterms: Iterable[int]) -> str:
    """Minimize a Boolean function to a canonical sum of products.

    Args:
        variables: Variable names in truth-table order
        true_minterms: Truth-table rows on which the function is true

    Returns:
        ``"0"`` for a function that is never true, ``"1"`` for one that is
        always true, otherwise an OR of AND-terms such as
        ``"(a AND NOT b) OR c"``

    Raises:
        ValueError: A minterm lies outside ``[0, 2**len(variables))``
    """
    width = len(variables)
    domain = 2**width
    minterms = set(true_minterms)

    out_of_range = [m for m in minterms if not 0 <= m < domain]
    if out_of_range:
        raise ValueError(f"Minterms {sorted(out_of_range)} outside 0..{domain - 1}")

    if not minterms:
        return ALWAYS_FALSE
    if len(minterms) == domain:
        return ALWAYS_TRUE

    primes = prime_implicants(width, minterms)
    cover = select_cover(primes, minterms)

    terms = [implicant.to_term(variables) for implicant in cover]
    if len(terms) > 1:
        terms = [
            f"({term})" if f" {CANONICAL_AND} " in term else term for term in terms
        ]

    function = f" {CANONICAL_OR} ".join(terms)
    get_logger().debug(f"Minimized function: {function}")
    return function
