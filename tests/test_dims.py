import io

from csvtools.dims import Dimensions, dimensions, format_dimensions
from csvtools.reader import CSVReader

TABLE = [["a", "b", "c"], ["1", "2", "3"], ["4", "5", "6"]]


def test_dimensions_with_header():
    assert dimensions("t.csv", TABLE) == Dimensions("t.csv", 3, len(TABLE) - 1)


def test_dimensions_without_header():
    assert dimensions("t.csv", TABLE, no_header_row=True) == Dimensions("t.csv", 3, len(TABLE))


def test_dimensions_empty():
    assert dimensions("e.csv", []) == Dimensions("e.csv", 0, 0)


def test_dimensions_from_reader():
    text = "x,y\n1,2\n3,4\n5,6\n"
    dims = dimensions("s", CSVReader(io.StringIO(text)))
    assert (dims.num_cols, dims.num_rows) == (2, 3)


def test_tabular_output():
    out = format_dimensions([dimensions("t.csv", TABLE)], tabular=True)
    lines = out.splitlines()
    assert out.startswith("file\tnum_cols\tnum_rows\n")
    assert lines[1].split("\t") == ["t.csv", "3", "2"]


def test_tabular_no_files():
    out = format_dimensions([dimensions("t.csv", TABLE)], tabular=True, no_files=True)
    assert out.splitlines()[1].split("\t") == ["3", "2"]


def test_pretty_output_aligned_and_comma_grouped():
    dims = [Dimensions("short", 3, 1234), Dimensions("a-longer-name.csv", 12, 5)]
    out = format_dimensions(dims)
    lines = out.splitlines()
    assert len(lines) == len(dims) + 1
    assert len({len(line) for line in lines}) == 1
    assert lines[0].startswith("file")
    assert lines[1].endswith("1,234")
    assert lines[2].startswith("a-longer-name.csv")