import pytest

from quine_mccluskey.logic_state import LogicState
from quine_mccluskey.loop import Loop

F, T, X = LogicState.FALSE, LogicState.TRUE, LogicState.DONT_CARE


def test_render_literals():
    loop = Loop([4, 5], [T, F, X])
    assert loop.render(["A", "B", "C"]) == "AB'"


def test_render_empty_pattern_is_one():
    assert Loop([0], []).render(["A"]) == "1"


def test_render_all_dont_care_is_one():
    assert Loop([0, 1, 2, 3], [X, X]).render(["A", "B"]) == "1"


def test_render_missing_names_use_placeholders():
    assert Loop([2], [T, F]).render(["A"]) == "Ax1'"
    assert Loop([2], [T, F]).render([]) == "x0x1'"


def test_minterms_sorted_and_unique():
    loop = Loop([7, 5, 5], [T, X, T])
    assert loop.minterms == (5, 7)


def test_loop_is_read_only():
    loop = Loop([1], [T])
    with pytest.raises(AttributeError):
        loop.minterms = (2,)
    with pytest.raises(AttributeError):
        loop.bits = ()


def test_cube_and_literal_count():
    loop = Loop([0, 2, 8, 10], [X, F, X, F])
    assert loop.cube == "-0-0"
    assert loop.literal_count == 2


def test_covers():
    loop = Loop([0, 2, 8, 10], [X, F, X, F])
    assert [i for i in range(16) if loop.covers(i)] == [0, 2, 8, 10]


def test_equality_and_hash():
    a = Loop([1, 3], [X, T])
    b = Loop([3, 1], [X, T])
    assert a == b
    assert len({a, b}) == 1
    assert a != Loop([1, 3], [F, T])
