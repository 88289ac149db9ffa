"""
Exhaustive check of a cover against the function it was solved for.
"""

from __future__ import annotations
import dataclasses
from typing import Iterable, Sequence, Set, Tuple

from quine_mccluskey.loop import Loop


@dataclasses.dataclass(frozen=True)
class CoverReport:
    uncovered: Tuple[int, ...]   # minterms no loop covers
    false_hits: Tuple[int, ...]  # zero-cells some loop covers

    @property
    def ok(self) -> bool:
        return not self.uncovered and not self.false_hits


def evaluate(loops: Sequence[Loop], index: int) -> bool:
    """Value of the sum of products for one input combination."""
    return any(loop.covers(index) for loop in loops)


def check_cover(
    loops: Sequence[Loop],
    minterms: Iterable[int],
    dontcares: Iterable[int],
    variable_count: int,
) -> CoverReport:
    """Evaluate the cover on all 2^n inputs.

    Don't-care inputs may take either value. Every minterm must evaluate to
    1 and every other input to 0.
    """
    on_set: Set[int] = set(minterms)
    dc_set: Set[int] = set(dontcares) - on_set

    uncovered = []
    false_hits = []
    for index in range(1 << variable_count):
        value = evaluate(loops, index)
        if index in on_set and not value:
            uncovered.append(index)
        elif index not in on_set and index not in dc_set and value:
            false_hits.append(index)
    return CoverReport(tuple(uncovered), tuple(false_hits))
