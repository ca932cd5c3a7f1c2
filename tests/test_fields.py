import pytest

from csvtools.fields import FieldError, FieldSpec, fuzzy_to_regex, parse_fields


def test_parse_single_and_range():
    spec = parse_fields("1,3-5")
    assert spec.fields == [1, 3, 4, 5]
    assert spec.negative is False
    assert spec.colnames == []


def test_parse_replicates_kept_in_order():
    spec = parse_fields("1,3,2,1")
    assert spec.fields == [1, 3, 2, 1]


def test_parse_negative_range():
    spec = parse_fields("-1--3")
    assert spec.negative is True
    assert spec.fields == [1, 2, 3]


def test_parse_column_names():
    spec = parse_fields("colA,colB,colA")
    assert spec.colnames == ["colA", "colB", "colA"]
    assert spec.fields == []


def test_parse_negative_column_names():
    spec = parse_fields("-colA,-colB")
    assert spec.negative is True
    assert spec.colnames == ["colA", "colB"]


def test_parse_custom_separator():
    spec = parse_fields("a__sep__b", sep="__sep__")
    assert spec.colnames == ["a", "b"]


@pytest.mark.parametrize("text", ["1,-2", "-colA,colB", "0", "5-3", "1--3", "1,,2", ""])
def test_parse_invalid(text):
    with pytest.raises(FieldError):
        parse_fields(text)


def test_names_rejected_without_header():
    with pytest.raises(FieldError):
        parse_fields("colA", no_header_row=True)


def test_need_header_follows_flag():
    assert parse_fields("1").need_header is True
    assert parse_fields("1", no_header_row=True).need_header is False


def test_resolve_open_ended():
    assert parse_fields("3,5-").resolve(width=6) == [3, 5, 6]
    assert parse_fields("2-,1").resolve(width=3) == [2, 3, 1]
    assert parse_fields("1-").resolve(width=4) == [1, 2, 3, 4]


def test_resolve_negative_numbers():
    assert parse_fields("-1,-3").resolve(width=4) == [2, 4]
    assert parse_fields("-2-").resolve(width=4) == [1]


def test_resolve_out_of_range():
    with pytest.raises(FieldError):
        parse_fields("5").resolve(width=3)


def test_resolve_width_from_header():
    assert parse_fields("2-").resolve(header=["a", "b", "c"]) == [2, 3]


def test_resolve_names():
    header = ["id", "name", "age"]
    assert parse_fields("age,id").resolve(header) == [3, 1]
    assert parse_fields("-name").resolve(header) == [1, 3]


def test_resolve_missing_name():
    with pytest.raises(FieldError):
        parse_fields("height").resolve(["id", "name"])


def test_resolve_names_need_header():
    with pytest.raises(FieldError):
        parse_fields("id").resolve(None, width=2)


def test_resolve_ignore_case():
    assert parse_fields("NAME").resolve(["id", "Name"], ignore_case=True) == [2]


def test_resolve_fuzzy():
    header = ["id", "first_name", "last_name", "age"]
    assert parse_fields("*name").resolve(header, fuzzy=True) == [2, 3]
    assert parse_fields("-*name").resolve(header, fuzzy=True) == [1, 4]


def test_fuzzy_to_regex():
    pattern = fuzzy_to_regex("id123*")
    assert pattern.match("id123abc")
    assert pattern.match("id123")
    assert not pattern.match("xid123")


def test_fuzzy_to_regex_escapes_specials():
    pattern = fuzzy_to_regex("a.b")
    assert pattern.match("a.b")
    assert not pattern.match("axb")


def test_spec_dataclass_fields():
    spec = FieldSpec(fields=[2], negative=True)
    assert spec.resolve(width=3) == [1, 3]