import pytest

from csvtools.concat import concat

FIRST = [["id", "name"], ["1", "a"], ["2", "b"]]


def test_same_columns_any_order():
    second = [["name", "id"], ["c", "3"]]
    result = concat([FIRST, second])
    assert result == FIRST + [["3", "c"]]


def test_single_table_round_trip():
    assert concat([FIRST]) == FIRST


def test_missing_column_filled_with_replacement():
    second = [["id", "other"], ["3", "x"]]
    result = concat([FIRST, second], unmatched_repl="NA")
    assert result[-1] == ["3", "NA"]
    assert len(result) == len(FIRST) + 1


def test_extra_columns_dropped():
    second = [["id", "name", "extra"], ["3", "c", "z"]]
    result = concat([FIRST, second])
    assert result[-1] == ["3", "c"]
    assert all(len(row) == 2 for row in result)


def test_unmatched_table_skipped_unless_kept():
    second = [["foo", "bar"], ["x", "y"]]
    assert concat([FIRST, second]) == FIRST
    kept = concat([FIRST, second], keep_unmatched=True, unmatched_repl="-")
    assert kept == FIRST + [["-", "-"]]


def test_ignore_case_keeps_first_header():
    second = [["ID", "NAME"], ["3", "c"]]
    result = concat([FIRST, second], ignore_case=True)
    assert result[0] == FIRST[0]
    assert result[-1] == ["3", "c"]
    assert concat([FIRST, second]) == FIRST


def test_no_header_row_aligns_by_position():
    a = [["1", "a"], ["2", "b"]]
    b = [["3", "c"]]
    assert concat([a, b], no_header_row=True) == a + b


def test_header_only_table_adds_nothing():
    assert concat([FIRST, [["id", "name"]]]) == FIRST


def test_no_tables_raises():
    with pytest.raises(ValueError):
        concat([])


def test_empty_first_table_raises():
    with pytest.raises(ValueError):
        concat([[], FIRST])


def test_short_row_raises():
    with pytest.raises(ValueError):
        concat([FIRST, [["id", "name"], ["3"]]])