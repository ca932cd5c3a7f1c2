import pytest

from csvtools.fields import FieldError
from csvtools.rowfilter import Condition, filter_rows, is_numeric, parse_condition

TABLE = [
    ["id", "age", "score"],
    ["a", "10", "5"],
    ["b", "20", "30"],
    ["c", "x", "40"],
    ["d", "1,000", "2"],
]


def test_parse_condition_simple():
    assert parse_condition("age>12") == Condition("age", ">", 12.0)


def test_parse_condition_two_char_operator():
    cond = parse_condition("1,3<=2")
    assert (cond.fields, cond.operator, cond.threshold) == ("1,3", "<=", 2.0)


def test_parse_condition_invalid():
    with pytest.raises(ValueError):
        parse_condition("age")


def test_parse_condition_bad_operator():
    with pytest.raises(ValueError):
        parse_condition("age>>3")


def test_parse_condition_empty():
    with pytest.raises(ValueError):
        parse_condition("")


def test_condition_rejects_unknown_operator():
    with pytest.raises(ValueError):
        Condition("a", "~", 1.0)


@pytest.mark.parametrize("op", ["!=", "<>"])
def test_not_equal_operators(op):
    cond = parse_condition(f"a{op}3")
    assert cond.test(4.0) and not cond.test(3.0)


@pytest.mark.parametrize("text", ["12", "-1.5", "1,000", "3e5", ".5"])
def test_is_numeric_true(text):
    assert is_numeric(text) is True


@pytest.mark.parametrize("text", ["", "abc", "1a", "e5", "-"])
def test_is_numeric_false(text):
    assert is_numeric(text) is False


def test_filter_by_column_name():
    rows = list(filter_rows(TABLE, "age>12"))
    assert rows == [["id", "age", "score"], ["b", "20", "30"], ["d", "1,000", "2"]]


def test_filter_line_number():
    rows = list(filter_rows(TABLE, "age>12", line_number=True))
    assert rows[0] == ["n", "id", "age", "score"]
    assert [r[0] for r in rows[1:]] == ["2", "4"]


def test_filter_all_fields_must_pass():
    rows = list(filter_rows(TABLE, "age,score>4"))
    assert rows[1:] == [["a", "10", "5"], ["b", "20", "30"]]


def test_filter_any_field():
    rows = list(filter_rows(TABLE, "age,score>25", any_field=True))
    assert [r[0] for r in rows[1:]] == ["b"]


def test_filter_negative_fields():
    rows = list(filter_rows(TABLE, "-id,-age>3"))
    assert [r[0] for r in rows[1:]] == ["a", "b", "c"]


def test_filter_fuzzy_fields():
    rows = list(filter_rows(TABLE, "sc*>=30", fuzzy=True))
    assert [r[0] for r in rows[1:]] == ["b", "c"]


def test_filter_no_header_numeric_fields():
    data = [row for row in TABLE[1:]]
    rows = list(filter_rows(data, "3<5", no_header_row=True))
    assert rows == [["d", "1,000", "2"]]


def test_filter_output_is_subset_and_preserves_order():
    rows = list(filter_rows(TABLE, "score!=0"))
    data = rows[1:]
    assert all(row in TABLE[1:] for row in data)
    assert data == [r for r in TABLE[1:] if r in data]


def test_filter_missing_column():
    with pytest.raises(FieldError):
        list(filter_rows(TABLE, "weight>1"))


def test_filter_field_out_of_range():
    with pytest.raises(FieldError):
        list(filter_rows(TABLE[1:], "7>1", no_header_row=True))