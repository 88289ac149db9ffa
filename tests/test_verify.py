from quine_mccluskey.logic_state import LogicState
from quine_mccluskey.loop import Loop
from quine_mccluskey.verify import check_cover, evaluate

F, T, X = LogicState.FALSE, LogicState.TRUE, LogicState.DONT_CARE


def test_evaluate():
    loops = [Loop([1, 3], [X, T])]
    assert [evaluate(loops, i) for i in range(4)] == [False, True, False, True]


def test_check_cover_ok():
    report = check_cover([Loop([1, 3], [X, T])], [1], [3], 2)
    assert report.ok


def test_check_cover_reports_uncovered_minterm():
    report = check_cover([Loop([1], [F, T])], [1, 2], [], 2)
    assert report.uncovered == (2,)
    assert report.false_hits == ()
    assert not report.ok


def test_check_cover_reports_zero_cell_hit():
    report = check_cover([Loop([0, 1, 2, 3], [X, X])], [1], [], 2)
    assert report.uncovered == ()
    assert report.false_hits == (0, 2, 3)
