import math

import pytest

from csvtools.corr import correlations, pearson, remove_nans

TABLE = [
    ["a", "b", "c"],
    ["1", "2", "9"],
    ["2", "4", "7"],
    ["3", "6", "8"],
    ["4", "8", "1"],
]


def test_pearson_perfect_positive():
    assert pearson([1, 2, 3, 4], [2, 4, 6, 8]) == pytest.approx(1.0)


def test_pearson_perfect_negative():
    assert pearson([1, 2, 3], [3, 2, 1]) == pytest.approx(-1.0)


def test_pearson_symmetric_and_bounded():
    xs, ys = [1, 5, 2, 8, 3], [4, 1, 7, 2, 9]
    r = pearson(xs, ys)
    assert r == pytest.approx(pearson(ys, xs))
    assert -1 <= r <= 1


def test_pearson_invariant_under_scaling():
    xs, ys = [1, 5, 2, 8], [4, 1, 7, 2]
    assert pearson(xs, ys) == pytest.approx(pearson([3 * x + 7 for x in xs], ys))


def test_pearson_constant_is_nan():
    result = pearson([1, 1, 1], [1, 2, 3])
    assert str(result) == "nan"


def test_pearson_too_short_is_nan():
    result = pearson([1], [2])
    assert str(result) == "nan"


def test_pearson_length_mismatch():
    with pytest.raises(ValueError):
        pearson([1, 2], [1, 2, 3])


def test_remove_nans():
    xs, ys = remove_nans([1.0, math.nan, 3.0, 4.0], [5.0, 6.0, math.nan, 8.0])
    assert (xs, ys) == ([1.0, 4.0], [5.0, 8.0])


def test_correlations_all_pairs_once():
    result = correlations(TABLE)
    assert [(a, b) for a, b, _ in result] == [("a", "b"), ("a", "c"), ("b", "c")]
    assert result[0][2] == pytest.approx(1.0)


def test_correlations_matches_pearson():
    (name1, name2, r), = correlations(TABLE, fields="a,c")
    assert (name1, name2) == ("a", "c")
    assert r == pytest.approx(pearson([1, 2, 3, 4], [9, 7, 8, 1]))


def test_correlations_no_header_numbers():
    result = correlations(TABLE[1:], fields="1,3", no_header_row=True)
    expected = correlations(TABLE, fields="a,c")[0][2]
    assert [(a, b) for a, b, _ in result] == [("1", "3")]
    assert result[0][2] == pytest.approx(expected)


def test_correlations_non_numeric_gives_nan_unless_ignored():
    table = TABLE + [["x", "10", "0"]]
    assert math.isnan(correlations(table, fields="a,b")[0][2])
    ignored = correlations(table, fields="a,b", ignore_nan=True)[0][2]
    assert ignored == pytest.approx(correlations(TABLE, fields="a,b")[0][2])


def test_correlations_log_transform_of_identical_columns():
    table = [["x", "y"], ["1", "1"], ["10", "10"], ["100", "100"]]
    r = correlations(table, log_transform=True)[0][2]
    assert r == pytest.approx(pearson([1, 10, 100], [1, 10, 100]))


def test_correlations_unknown_column():
    with pytest.raises(ValueError):
        correlations(TABLE, fields="a,z")


def test_correlations_illegal_field_number():
    with pytest.raises(ValueError):
        correlations(TABLE[1:], fields="0,1", no_header_row=True)


def test_correlations_empty_input():
    assert correlations([]) == []