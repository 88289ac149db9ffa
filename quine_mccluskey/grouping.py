"""
Generations of term records grouped by Hamming weight, and the combination
pass that turns one generation into the next.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Set

from quine_mccluskey.errors import InvariantError
from quine_mccluskey.record import RecordKey, TermRecord


class Group:
    """Records of one generation sharing the same Hamming weight."""

    def __init__(self, weight: int):
        self.weight = weight
        self._records: Dict[RecordKey, TermRecord] = {}

    @property
    def records(self) -> List[TermRecord]:
        """Records in insertion order."""
        return list(self._records.values())

    def add(self, record: TermRecord) -> bool:
        """Insert a record unless one with the same key exists.

        Returns:
            True if the record was inserted
        """
        key = record.key()
        if key in self._records:
            return False
        self._records[key] = record
        return True

    def __contains__(self, record: TermRecord) -> bool:
        return record.key() in self._records

    def __len__(self) -> int:
        return len(self._records)


class Column:
    """One generation of the combination table.

    The column owns its records and the set of keys that were merged
    during its combination sweep.
    """

    def __init__(self, width: Optional[int] = None):
        """Initialize an empty generation.

        Args:
            width: Bit width every record must have; taken from the first
                record when omitted
        """
        self.width = width
        self.groups: Dict[int, Group] = {}
        self._used: Set[RecordKey] = set()

    def add_record(self, record: TermRecord) -> bool:
        """Insert a record into the group matching its weight (deduplicated)."""
        if self.width is None:
            self.width = record.width
        elif record.width != self.width:
            raise InvariantError(
                f"Record {record!r} has width {record.width}, generation expects {self.width}"
            )

        weight = record.count_true_bits()
        group = self.groups.get(weight)
        if group is None:
            group = Group(weight)
            self.groups[weight] = group
        return group.add(record)

    def sorted_groups(self) -> List[Group]:
        return [self.groups[w] for w in sorted(self.groups)]

    def records(self) -> List[TermRecord]:
        """All records, lightest group first."""
        out: List[TermRecord] = []
        for group in self.sorted_groups():
            out.extend(group.records)
        return out

    def mark_used(self, record: TermRecord):
        self._used.add(record.key())

    def is_used(self, record: TermRecord) -> bool:
        return record.key() in self._used

    def unused_records(self) -> List[TermRecord]:
        """Records never merged in this generation's sweep."""
        return [r for r in self.records() if not self.is_used(r)]

    def is_empty(self) -> bool:
        return not self.groups

    def __len__(self) -> int:
        return sum(len(g) for g in self.groups.values())


def combine_column(column: Column) -> Column:
    """Run one combination sweep and build the next generation.

    Every record of weight w is compared with every record of weight w+1.
    Each successful merge marks both parents as used in column and adds
    the merged record to the returned column.

    Args:
        column: Current generation (its used set is updated in place)

    Returns:
        Next generation, possibly empty
    """
    next_column = Column(column.width)

    for weight in sorted(column.groups):
        upper = column.groups.get(weight + 1)
        if upper is None:
            continue
        lower = column.groups[weight]

        for a in lower.records:
            for b in upper.records:
                position = a.can_combine_with(b)
                if position is None:
                    continue
                column.mark_used(a)
                column.mark_used(b)
                next_column.add_record(a.combine_with(b, position))

    return next_column
