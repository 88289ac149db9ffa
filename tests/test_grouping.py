import pytest

from quine_mccluskey.errors import InvariantError
from quine_mccluskey.grouping import Column, Group, combine_column
from quine_mccluskey.record import TermRecord


def column_of(terms, width):
    column = Column(width)
    for t in terms:
        column.add_record(TermRecord.from_minterm(t, width))
    return column


def test_group_ignores_duplicate_keys():
    group = Group(1)
    assert group.add(TermRecord.from_minterm(1, 2))
    assert not group.add(TermRecord.from_minterm(1, 2))
    assert len(group) == 1


def test_column_groups_by_weight():
    column = column_of([0, 1, 2, 3], 2)
    assert sorted(column.groups) == [0, 1, 2]
    assert [r.minterms for r in column.groups[1].records] == [(1,), (2,)]
    assert len(column) == 4


def test_column_rejects_width_mismatch():
    column = column_of([0], 3)
    with pytest.raises(InvariantError):
        column.add_record(TermRecord.from_minterm(1, 2))


def test_combine_column_two_variables():
    column = column_of([0, 1, 2, 3], 2)
    nxt = combine_column(column)

    assert sorted(r.cube() for r in nxt.records()) == ["-0", "-1", "0-", "1-"]
    assert column.unused_records() == []


def test_combine_column_dedupes_rediscovered_terms():
    nxt = combine_column(combine_column(column_of([0, 1, 2, 3], 2)))
    assert [r.cube() for r in nxt.records()] == ["--"]
    assert nxt.records()[0].minterms == (0, 1, 2, 3)


def test_unmerged_records_stay_unused():
    column = column_of([0, 1, 6], 3)
    nxt = combine_column(column)
    assert [r.minterms for r in nxt.records()] == [(0, 1)]
    assert [r.minterms for r in column.unused_records()] == [(6,)]


def test_empty_column():
    column = Column(3)
    assert column.is_empty()
    assert combine_column(column).is_empty()
