"""
Loops: the immutable terms returned by a solve.
"""

from __future__ import annotations
from typing import Iterable, Sequence, Tuple

from quine_mccluskey.logic_state import LogicState


class Loop:
    """A selected prime implicant, frozen at selection time.

    Attributes:
        minterms: Sorted indices covered, don't-cares included
        bits: Bit pattern, position 0 is the most significant variable
    """

    def __init__(self, minterms: Iterable[int], bits: Iterable[LogicState]):
        self._minterms: Tuple[int, ...] = tuple(sorted(set(minterms)))
        self._bits: Tuple[LogicState, ...] = tuple(bits)

    @property
    def minterms(self) -> Tuple[int, ...]:
        return self._minterms

    @property
    def bits(self) -> Tuple[LogicState, ...]:
        return self._bits

    @property
    def literal_count(self) -> int:
        return sum(1 for b in self._bits if b is not LogicState.DONT_CARE)

    @property
    def cube(self) -> str:
        """Pattern in cube notation, e.g. '1-0'."""
        return ''.join(b.symbol for b in self._bits)

    def covers(self, index: int) -> bool:
        """Check whether an input combination satisfies this product term."""
        width = len(self._bits)
        for i, b in enumerate(self._bits):
            if b is LogicState.DONT_CARE:
                continue
            bit = (index >> (width - 1 - i)) & 1
            if bit != b.value:
                return False
        return True

    def render(self, variable_names: Sequence[str]) -> str:
        """Render the product term, e.g. "A'BC".

        Args:
            variable_names: Names aligned with bit positions; missing names
                become x0, x1, ...

        Returns:
            Concatenated literals with ' marking complement, or "1" when no
            variable survives
        """
        literals = []
        for i, b in enumerate(self._bits):
            if b is LogicState.DONT_CARE:
                continue
            name = variable_names[i] if i < len(variable_names) and variable_names[i] else f"x{i}"
            literals.append(name if b is LogicState.TRUE else name + "'")
        return ''.join(literals) if literals else "1"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Loop):
            return NotImplemented
        return self._minterms == other._minterms and self._bits == other._bits

    def __hash__(self) -> int:
        return hash((self._minterms, self._bits))

    def __repr__(self) -> str:
        return f"Loop(minterms={list(self._minterms)}, cube='{self.cube}')"
