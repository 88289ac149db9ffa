"""
Prime implicant chart: rows are prime implicants, columns are the required
minterms. Don't-cares never get a column even when an implicant contains
them.

Selection happens in two steps:
- essential implicants, the only unselected row covering some column
- a greedy residual cover for whatever the essentials leave open

The residual step is a heuristic. It picks the row covering the most open
columns, preferring fewer literals on ties. It does not enumerate every
minimal cover the way Petrick's method does, so the result is not
guaranteed to be globally minimal.
"""

from __future__ import annotations
from typing import Dict, FrozenSet, Iterable, List, Set

from quine_mccluskey.log import get_logger
from quine_mccluskey.record import TermRecord

logger = get_logger(__name__)


class CoverageRow:
    """A prime implicant in the chart."""

    def __init__(self, record: TermRecord):
        self.record = record
        self.minterms: FrozenSet[int] = frozenset(record.minterms)
        self.selected = False

    def covers(self, minterm: int) -> bool:
        return minterm in self.minterms

    def count_coverage(self, open_minterms: Set[int]) -> int:
        """Number of the given minterms this row covers."""
        return len(self.minterms & open_minterms)

    def literal_count(self) -> int:
        return self.record.literal_count()

    def __repr__(self) -> str:
        flag = "*" if self.selected else ""
        return f"CoverageRow({self.record.cube()}{flag})"


class CoverageColumn:
    """A required minterm in the chart."""

    def __init__(self, minterm: int):
        self.minterm = minterm
        self.covered = False

    def __repr__(self) -> str:
        return f"CoverageColumn({self.minterm}, covered={self.covered})"


class CoverageTable:
    """Prime implicant chart with essential and residual selection."""

    def __init__(self, prime_implicants: Iterable[TermRecord], minterms: Iterable[int]):
        """Initialize the chart.

        Args:
            prime_implicants: Rows, in the order they were discovered
            minterms: Required minterms (no don't-cares); columns are kept
                in ascending order
        """
        self.rows: List[CoverageRow] = [CoverageRow(r) for r in prime_implicants]
        self.columns: List[CoverageColumn] = [CoverageColumn(m) for m in sorted(set(minterms))]
        self._column_by_minterm: Dict[int, CoverageColumn] = {c.minterm: c for c in self.columns}
        self._selection: List[CoverageRow] = []

    # ---- queries ----

    def covering_rows(self, minterm: int) -> List[CoverageRow]:
        """Unselected rows covering a minterm."""
        return [row for row in self.rows if not row.selected and row.covers(minterm)]

    def uncovered_minterms(self) -> Set[int]:
        return {c.minterm for c in self.columns if not c.covered}

    def unselected_rows(self) -> List[CoverageRow]:
        return [row for row in self.rows if not row.selected]

    def is_fully_covered(self) -> bool:
        return all(c.covered for c in self.columns)

    @property
    def selected_rows(self) -> List[CoverageRow]:
        """Selected rows in selection order."""
        return list(self._selection)

    # ---- selection ----

    def select_row(self, row: CoverageRow):
        """Select a row and mark every column it covers."""
        if row.selected:
            return
        row.selected = True
        self._selection.append(row)
        for minterm in row.minterms:
            column = self._column_by_minterm.get(minterm)
            if column is not None:
                column.covered = True

    def select_essentials(self) -> List[CoverageRow]:
        """Select every row that is the sole coverer of an open column.

        Sweeps the columns until a sweep selects nothing.

        Returns:
            Essential rows in the order they were found
        """
        essential: List[CoverageRow] = []
        changed = True
        while changed:
            changed = False
            for column in self.columns:
                if column.covered:
                    continue
                candidates = self.covering_rows(column.minterm)
                if len(candidates) != 1:
                    continue
                row = candidates[0]
                self.select_row(row)
                essential.append(row)
                changed = True
                logger.debug("essential %s for minterm %d", row.record.cube(), column.minterm)
        return essential

    def cover_residual(self) -> List[CoverageRow]:
        """Greedily cover the columns the essentials left open.

        Each round picks the unselected row covering the most open columns,
        breaking ties by fewer literals and then by row order. Stops when
        everything is covered or no row covers any open column; in the
        latter case the cover stays partial.

        Returns:
            Rows selected by this step, in selection order
        """
        picked: List[CoverageRow] = []
        while True:
            open_minterms = self.uncovered_minterms()
            if not open_minterms:
                break

            best = None
            best_score = None
            for row in self.unselected_rows():
                gain = row.count_coverage(open_minterms)
                if gain == 0:
                    continue
                score = (gain, -row.literal_count())
                if best_score is None or score > best_score:
                    best, best_score = row, score

            if best is None:
                logger.warning("no implicant covers minterms %s", sorted(open_minterms))
                break

            self.select_row(best)
            picked.append(best)
            logger.debug("residual %s covers %d open minterms", best.record.cube(), best_score[0])
        return picked
