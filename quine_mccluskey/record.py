"""
Term records: candidate implicants handled while searching for primes.

A record pairs the sorted minterms it covers with a bit pattern over the
variables of one solve. Position 0 of the pattern is the most significant
variable. Records are never modified after construction; whether a record
was merged during a generation is tracked by the generation that owns it
(see grouping.Column).
"""

from __future__ import annotations
from typing import Iterable, Optional, Sequence, Tuple

from quine_mccluskey.errors import InvalidTermError
from quine_mccluskey.logic_state import LogicState

RecordKey = Tuple[int, ...]


class TermRecord:
    """One row of the combination table: a minterm set and its bit pattern."""

    def __init__(self, minterms: Iterable[int], bits: Sequence[LogicState]):
        """Initialize a record.

        Args:
            minterms: Minterm indices covered; sorted and de-duplicated here
            bits: Bit pattern, one LogicState per variable
        """
        self.minterms: Tuple[int, ...] = tuple(sorted(set(minterms)))
        self.bits: Tuple[LogicState, ...] = tuple(bits)

    @classmethod
    def from_minterm(cls, value: int, variable_count: int) -> 'TermRecord':
        """Build a single-minterm record.

        Args:
            value: Minterm index
            variable_count: Width of the bit pattern

        Returns:
            Record whose bits[i] is bit (variable_count - 1 - i) of value

        Raises:
            InvalidTermError: value is negative or needs more bits
        """
        if value < 0 or value > (1 << variable_count) - 1:
            raise InvalidTermError(value, variable_count)
        bits = [LogicState.from_bit((value >> i) & 1)
                for i in range(variable_count - 1, -1, -1)]
        return cls([value], bits)

    @property
    def width(self) -> int:
        return len(self.bits)

    def count_true_bits(self) -> int:
        """Hamming weight, used to pick the record's group."""
        return sum(1 for b in self.bits if b is LogicState.TRUE)

    def literal_count(self) -> int:
        """Number of positions that are not DontCare."""
        return sum(1 for b in self.bits if b is not LogicState.DONT_CARE)

    def can_combine_with(self, other: 'TermRecord') -> Optional[int]:
        """Find the single position where two records can be merged.

        Returns:
            The differing bit index, or None when the widths differ, the
            patterns are equal, they differ in more than one place, or a
            DontCare sits at the differing place.
        """
        if len(self.bits) != len(other.bits):
            return None

        position = None
        for i, (a, b) in enumerate(zip(self.bits, other.bits)):
            if a is b:
                continue
            if a is LogicState.DONT_CARE or b is LogicState.DONT_CARE:
                return None
            if position is not None:
                return None
            position = i
        return position

    def combine_with(self, other: 'TermRecord', position: int) -> 'TermRecord':
        """Merge with a record that differs only at position.

        The caller is responsible for checking can_combine_with first and
        for marking both parents as used.
        """
        bits = list(self.bits)
        bits[position] = LogicState.DONT_CARE
        return TermRecord(self.minterms + other.minterms, bits)

    def key(self) -> RecordKey:
        """Canonical identity: the sorted minterm tuple."""
        return self.minterms

    def cube(self) -> str:
        return ''.join(b.symbol for b in self.bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TermRecord):
            return NotImplemented
        return self.minterms == other.minterms and self.bits == other.bits

    def __hash__(self) -> int:
        return hash((self.minterms, self.bits))

    def __repr__(self) -> str:
        return f"TermRecord(minterms={list(self.minterms)}, bits={self.cube()})"
