import pytest
from hypothesis import given, strategies as st

from lcsbench.sequential import (
    InputError,
    Problem,
    format_matrix,
    lcs_full,
    lcs_matrix,
    lcs_two_rows,
    main,
    parse_problem,
    read_problem,
)

small_text = st.text(alphabet="ACGT", max_size=25)


def test_parse_two_length_format():
    problem = parse_problem("3 4\nABC\nABCD\n")
    assert problem == Problem("ABC", "ABCD")
    assert problem.alphabet is None


def test_parse_extended_format_keeps_alphabet():
    problem = parse_problem("4 3 2\nABBA BAB AB\n")
    assert problem == Problem("ABBA", "BAB", "AB")


def test_parse_truncates_to_declared_length():
    problem = parse_problem("2 2 ABCD XYZ")
    assert (problem.a, problem.b) == ("AB", "XY")


@pytest.mark.parametrize("text", ["0 3 A ABC", "3 -1 ABC A", "0 0 A B"])
def test_parse_rejects_invalid_lengths(text):
    with pytest.raises(InputError):
        parse_problem(text)


@pytest.mark.parametrize("text", ["", "3", "x 3 ABC ABC"])
def test_parse_rejects_unreadable_lengths(text):
    with pytest.raises(InputError):
        parse_problem(text)


def test_parse_rejects_missing_string():
    with pytest.raises(InputError):
        parse_problem("3 3 ABC")


def test_parse_rejects_short_string():
    with pytest.raises(InputError):
        parse_problem("5 3 ABC ABC")


def test_read_problem(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("2 3\nGA\nTGA\n")
    assert read_problem(path) == Problem("GA", "TGA")


def test_classic_example():
    assert lcs_full("ABCBDAB", "BDCABA") == 4
    assert lcs_two_rows("ABCBDAB", "BDCABA") == 4


def test_disjoint_sequences():
    assert lcs_full("AAAA", "CCC") == 0
    assert lcs_two_rows("AAAA", "CCC") == 0


def test_repeated_characters_use_copy_path():
    a, b = "AAAB", "BAAA"
    assert lcs_two_rows(a, b) == lcs_full(a, b)


def test_matrix_shape_and_borders():
    matrix = lcs_matrix("ACG", "TACGA")
    assert len(matrix) == 4
    assert all(len(row) == 6 for row in matrix)
    assert matrix[0] == [0] * 6
    assert [row[0] for row in matrix] == [0] * 4


def test_format_matrix():
    assert format_matrix([[0, 0], [0, 1]]) == "0 0 \n0 1 \n"


@given(small_text, small_text)
def test_two_rows_matches_full(a, b):
    assert lcs_two_rows(a, b) == lcs_full(a, b)


@given(small_text, small_text)
def test_lcs_symmetric_and_bounded(a, b):
    length = lcs_full(a, b)
    assert length == lcs_full(b, a)
    assert 0 <= length <= min(len(a), len(b))


@given(small_text)
def test_lcs_with_itself(a):
    assert lcs_two_rows(a, a) == len(a)


@given(small_text, small_text)
def test_matrix_is_monotone(a, b):
    matrix = lcs_matrix(a, b)
    for upper, lower in zip(matrix, matrix[1:]):
        assert all(x <= y for x, y in zip(upper, lower))
    for row in matrix:
        assert all(x <= y for x, y in zip(row, row[1:]))


@pytest.mark.parametrize("algorithm", ["full", "two-rows"])
def test_main_reports_length(tmp_path, capsys, algorithm):
    path = tmp_path / "in.txt"
    path.write_text("7 6\nABCBDAB\nBDCABA\n")
    assert main([str(path), "--algorithm", algorithm]) == 0
    out = capsys.readouterr().out
    assert "String A length: 7" in out
    assert "Length of LCS is: 4" in out


def test_main_prints_matrix(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("1 1\nA\nA\n")
    assert main([str(path), "--print-matrix"]) == 0
    assert capsys.readouterr().out.endswith("0 0 \n0 1 \n")


def test_main_without_input(capsys):
    assert main([]) == 1
    assert "No input file specified" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Error opening file" in capsys.readouterr().err


def test_main_invalid_lengths(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("0 2\nA\nAB\n")
    assert main([str(path)]) == 1
    assert "Invalid string lengths" in capsys.readouterr().out