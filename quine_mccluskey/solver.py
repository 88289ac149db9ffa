"""
Quine-McCluskey minimization entry points.

solve() returns the selected loops; minimize() returns them together with
coverage information. Selection order is essential implicants first, then
the greedy residual picks. The residual step is a heuristic, so the cover
is small but not guaranteed to be the global minimum.
"""

from __future__ import annotations
import dataclasses
from typing import Iterable, List, Optional, Tuple

from quine_mccluskey.config import SolverConfig
from quine_mccluskey.coverage import CoverageTable
from quine_mccluskey.errors import (
    IncompleteCoverError,
    InvalidTermError,
    InvalidVariableCountError,
)
from quine_mccluskey.implicants import find_prime_implicants
from quine_mccluskey.log import get_logger
from quine_mccluskey.loop import Loop

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class Solution:
    """Result of one minimization.

    Attributes:
        loops: Selected loops in selection order
        minterms: Requested minterms, sorted
        dontcares: Don't-care terms, sorted
        variable_count: Bit width used for the solve
        essential_count: How many leading loops are essential implicants
    """
    loops: Tuple[Loop, ...]
    minterms: Tuple[int, ...]
    dontcares: Tuple[int, ...]
    variable_count: int
    essential_count: int = 0

    @property
    def covered(self) -> Tuple[int, ...]:
        """Requested minterms covered by at least one loop."""
        union = set()
        for loop in self.loops:
            union.update(loop.minterms)
        return tuple(m for m in self.minterms if m in union)

    @property
    def uncovered(self) -> Tuple[int, ...]:
        covered = set(self.covered)
        return tuple(m for m in self.minterms if m not in covered)

    @property
    def is_complete(self) -> bool:
        return not self.uncovered


def detect_variable_count(terms: Iterable[int]) -> int:
    """Smallest width able to hold every term (at least 1).

    Negative terms are ignored here and rejected by validate_terms.
    """
    highest = max((t for t in terms if t >= 0), default=0)
    return max(1, highest.bit_length())


def validate_terms(terms: Iterable[int], variable_count: int):
    """Raise InvalidTermError for the first term outside 0..2^n - 1."""
    capacity = (1 << variable_count) - 1
    for term in terms:
        if term < 0 or term > capacity:
            raise InvalidTermError(term, variable_count)


def minimize(
    minterms: Iterable[int],
    dontcares: Iterable[int] = (),
    variable_count: Optional[int] = None,
    *,
    config: Optional[SolverConfig] = None,
) -> Solution:
    """Minimize a Boolean function given as minterms and don't-cares.

    Args:
        minterms: Indices where the output is 1
        dontcares: Indices whose output is unconstrained
        variable_count: Number of input variables; detected from the
            largest term when omitted
        config: Solver options; defaults when omitted

    Returns:
        Solution with the selected loops and coverage information

    Raises:
        InvalidVariableCountError: variable_count is negative
        InvalidTermError: a term does not fit the variable count
        IncompleteCoverError: strict coverage is on and minterms remain
            uncovered
    """
    config = config or SolverConfig()
    on_set = sorted(set(minterms))
    dc_set = sorted(set(dontcares) - set(on_set))

    if variable_count is not None and variable_count < 0:
        raise InvalidVariableCountError(f"variable_count must be >= 0, got {variable_count}")

    if not on_set:
        return Solution((), (), tuple(dc_set), variable_count or 0)

    all_terms = on_set + dc_set
    vars_ = variable_count if variable_count is not None else detect_variable_count(all_terms)
    validate_terms(all_terms, vars_)

    if vars_ > config.comfort_variables:
        logger.warning(
            "%d variables exceeds the comfort limit of %d; minimization may be slow",
            vars_, config.comfort_variables,
        )

    primes = find_prime_implicants(all_terms, vars_)
    if not primes:
        return Solution((), tuple(on_set), tuple(dc_set), vars_)

    table = CoverageTable(primes, on_set)
    essential = table.select_essentials()
    if not table.is_fully_covered():
        table.cover_residual()

    loops = tuple(Loop(row.record.minterms, row.record.bits) for row in table.selected_rows)
    solution = Solution(loops, tuple(on_set), tuple(dc_set), vars_, len(essential))
    logger.debug(
        "selected %d loops (%d essential) for %d minterms",
        len(loops), len(essential), len(on_set),
    )

    if not solution.is_complete:
        if config.strict_coverage:
            raise IncompleteCoverError(solution.uncovered, loops)
        logger.warning("partial cover, uncovered minterms: %s", list(solution.uncovered))

    return solution


def solve(
    minterms: Iterable[int],
    dontcares: Iterable[int] = (),
    variable_count: Optional[int] = None,
    *,
    config: Optional[SolverConfig] = None,
) -> List[Loop]:
    """Return the loops of a sum-of-products cover of the function.

    An empty minterm set yields an empty list. See minimize() for the
    arguments and the errors raised.
    """
    return list(minimize(minterms, dontcares, variable_count, config=config).loops)


def solve_complement(
    minterms: Iterable[int],
    dontcares: Iterable[int] = (),
    variable_count: Optional[int] = None,
    *,
    config: Optional[SolverConfig] = None,
) -> List[Loop]:
    """Solve for the zero cells: every index that is neither a minterm
    nor a don't-care.

    The variable count is detected from the given terms when omitted.
    """
    on_set = set(minterms)
    dc_set = set(dontcares)
    all_terms = on_set | dc_set

    if variable_count is None:
        variable_count = detect_variable_count(all_terms)
    elif variable_count < 0:
        raise InvalidVariableCountError(f"variable_count must be >= 0, got {variable_count}")
    validate_terms(all_terms, variable_count)

    zeros = [i for i in range(1 << variable_count) if i not in all_terms]
    return solve(zeros, dc_set, variable_count, config=config)
