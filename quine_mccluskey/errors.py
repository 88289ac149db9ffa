from __future__ import annotations
from typing import Sequence, Tuple


class QuineMcCluskeyError(Exception):
    """Base exception for all minimizer errors."""
    pass


class InvalidTermError(QuineMcCluskeyError, ValueError):
    """Raised when a minterm or don't-care does not fit the variable count."""

    def __init__(self, term: int, variable_count: int):
        self.term = term
        self.variable_count = variable_count
        self.capacity = (1 << variable_count) - 1
        super().__init__(
            f"Term {term} is outside the range 0..{self.capacity} "
            f"for {variable_count} variables"
        )


class InvalidVariableCountError(QuineMcCluskeyError, ValueError):
    """Raised when an explicit variable count is negative."""
    pass


class IncompleteCoverError(QuineMcCluskeyError):
    """Raised in strict mode when the selected loops leave minterms uncovered."""

    def __init__(self, uncovered: Sequence[int], loops: Sequence = ()):
        self.uncovered: Tuple[int, ...] = tuple(sorted(uncovered))
        self.loops = tuple(loops)
        super().__init__(f"Minterms left uncovered: {list(self.uncovered)}")


class InvariantError(QuineMcCluskeyError, AssertionError):
    """Raised when an internal invariant of the algorithm is broken."""
    pass


class ConfigError(QuineMcCluskeyError):
    """Raised when solver configuration cannot be read."""
    pass


class TruthTableFormatError(QuineMcCluskeyError, ValueError):
    """Raised when a sum-of-minterms description is malformed."""
    pass
