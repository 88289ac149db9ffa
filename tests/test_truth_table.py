import pytest

from quine_mccluskey.errors import TruthTableFormatError
from quine_mccluskey.truth_table import (
    build_truth_table,
    format_sum_of_minterms,
    parse_sum_of_minterms,
    parse_sum_of_minterms_file,
    random_functions,
    write_sum_of_minterms_file,
)


def test_parse_lines():
    functions = parse_sum_of_minterms([
        "# comment",
        "f = sum{0,2,3,4} d{5,7}",
        "",
        "g = sum{1,6} + d{0,3}",
        "h = sum{}",
    ])
    assert functions == {
        "f": ({0, 2, 3, 4}, {5, 7}),
        "g": ({1, 6}, {0, 3}),
        "h": (set(), set()),
    }


@pytest.mark.parametrize("lines", [
    ["f = product{1}"],
    ["f = sum{1} d{1}"],
    ["f = sum{1}", "f = sum{2}"],
    ["# nothing here"],
])
def test_parse_rejects_bad_input(lines):
    with pytest.raises(TruthTableFormatError):
        parse_sum_of_minterms(lines)


def test_file_roundtrip(tmp_path):
    path = tmp_path / "functions.txt"
    functions = {"f": ({1, 3}, {0}), "g": ({2}, set())}
    write_sum_of_minterms_file(str(path), functions)
    assert path.read_text(encoding="utf-8") == "f = sum{1,3} d{0}\ng = sum{2}"
    assert parse_sum_of_minterms_file(str(path)) == functions


def test_format_is_sorted_by_name():
    text = format_sum_of_minterms({"b": ({1}, set()), "a": ({0}, set())})
    assert text.splitlines() == ["a = sum{0}", "b = sum{1}"]


def test_random_functions_are_seeded():
    a = random_functions(4, 2, seed=7)
    b = random_functions(4, 2, seed=7)
    assert a == b
    assert sorted(a) == ["f1", "f2"]
    for on_set, dc_set in a.values():
        assert not on_set & dc_set
        assert len(on_set) <= 8
        assert on_set


def test_build_truth_table():
    inputs, outputs, names = build_truth_table(2, {"f": ({1}, {3})})
    assert inputs == ["00", "01", "10", "11"]
    assert outputs == ["0", "1", "0", "-"]
    assert names == ["f"]


def test_build_truth_table_rejects_out_of_range():
    with pytest.raises(TruthTableFormatError):
        build_truth_table(2, {"f": ({4}, set())})
