"""
Tri-state bit values used in implicant bit patterns.
"""

from __future__ import annotations
from enum import Enum


class LogicState(Enum):
    """Value of one variable position in a term."""
    FALSE = 0
    TRUE = 1
    DONT_CARE = 2  # variable eliminated by combining

    @property
    def symbol(self) -> str:
        """Cube notation character: '0', '1' or '-'."""
        return '-' if self is LogicState.DONT_CARE else str(self.value)

    @classmethod
    def from_bit(cls, bit: int) -> 'LogicState':
        return cls.TRUE if bit else cls.FALSE
