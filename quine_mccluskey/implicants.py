"""
Prime implicant generation.

Generation 0 holds one record per distinct minterm or don't-care. Each
combination sweep builds the next generation; the records of a generation
that were never merged are prime. The loop stops at the first empty
generation, which happens after at most variable_count + 1 generations
because every generation has one more DontCare position than the last.
"""

from __future__ import annotations
from typing import Iterable, List, Set

from quine_mccluskey.errors import InvariantError
from quine_mccluskey.grouping import Column, combine_column
from quine_mccluskey.log import get_logger
from quine_mccluskey.record import RecordKey, TermRecord

logger = get_logger(__name__)


def build_initial_column(terms: Iterable[int], variable_count: int) -> Column:
    """Generation 0: one single-minterm record per distinct term."""
    column = Column(variable_count)
    for term in sorted(set(terms)):
        column.add_record(TermRecord.from_minterm(term, variable_count))
    return column


def deduplicate(records: Iterable[TermRecord]) -> List[TermRecord]:
    """Keep the first record for each minterm set, preserving order."""
    seen: Set[RecordKey] = set()
    unique: List[TermRecord] = []
    for record in records:
        key = record.key()
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)
    return unique


def find_prime_implicants(terms: Iterable[int], variable_count: int) -> List[TermRecord]:
    """Return all prime implicants of the given minterms and don't-cares.

    Args:
        terms: Union of minterms and don't-cares
        variable_count: Bit width of every record

    Returns:
        Prime implicants in discovery order (earlier generations first),
        without duplicate minterm sets
    """
    column = build_initial_column(terms, variable_count)
    primes: List[TermRecord] = []

    generation = 0
    while not column.is_empty():
        if generation > variable_count:
            raise InvariantError(
                f"Combination did not terminate after {variable_count + 1} generations"
            )

        next_column = combine_column(column)
        unused = column.unused_records()
        logger.debug(
            "generation %d: %d records, %d prime, %d merged",
            generation, len(column), len(unused), len(next_column),
        )
        primes.extend(unused)

        column = next_column
        generation += 1

    primes = deduplicate(primes)
    logger.debug("found %d prime implicants", len(primes))
    return primes
