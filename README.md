# csvtools

A library of small operations on CSV and TSV data: reading records in
chunks, selecting and rearranging columns, reshaping, counting, filtering,
and rendering tables as JSON, Markdown and reStructuredText.

Records are plain lists of strings, so the functions accept the output of
`csv.reader` as well as that of `csvtools.reader.CSVReader`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | What it provides |
| --- | --- |
| `csvtools.reader` | `CSVReader`, `RecordsChunk`, `CSVError` |
| `csvtools.headers` | `add_header`, `del_header`, `write_records`, `csv_to_tab` |
| `csvtools.dims` | `Dimensions`, `dimensions`, `format_dimensions` |
| `csvtools.fields` | `parse_fields`, `FieldSpec`, `fuzzy_to_regex`, `FieldError` |
| `csvtools.cut` | `cut` |
| `csvtools.concat` | `concat` |
| `csvtools.tojson` | `csv_to_json`, `json_value`, `escape_json_field` |
| `csvtools.markdown` | `csv_to_markdown` |
| `csvtools.rst` | `csv_to_rst` |
| `csvtools.comb` | `row_combinations`, `combinations`, `natural_key` |
| `csvtools.gather` | `gather` |
| `csvtools.rowfilter` | `filter_rows`, `parse_condition`, `Condition`, `is_numeric` |
| `csvtools.corr` | `correlations`, `pearson`, `remove_nans` |
| `csvtools.freq` | `frequencies` |
| `csvtools.fold` | `fold` |

### Reading

`CSVReader(source, delimiter=",", comment=None, chunk_size=50,
ignore_empty_row=False, ignore_illegal_row=False)` takes a path, `"-"` for
standard input, or an open text stream. Paths ending in `.gz`, `.bz2` or `.xz`
are decompressed. Iterating over the reader yields records; `chunks()` yields
`RecordsChunk` objects of at most `chunk_size` records. Lines starting with
the comment character are skipped. Malformed rows raise `CSVError` unless
`ignore_illegal_row` is set, in which case their record numbers are kept in
`illegal_rows`; with `ignore_empty_row`, rows of empty cells are dropped and
listed in `empty_rows`. An empty input raises `CSVError`.

### Field selections

`parse_fields(spec, sep, no_header_row)` understands:

- column numbers and ranges: `1,3-5`, `3,5-` (column 5 to the last), `2-,1`
- unselected columns: `-1,-3`, `-1--3`, `-2-`
- column names, selected or unselected: `colA,colB`, `-colA,-colB`

Column names need a header row. `FieldSpec.resolve(header, width, fuzzy,
ignore_case)` turns a selection into 1-based column numbers; with `fuzzy`,
`*` in a name matches any run of characters.

### Operations

- `cut` selects columns in the given order, optionally skipping or blanking
  missing ones (`allow_missing`, `blank_missing`) and deduplicating columns
  matched by several fuzzy names (`uniq_column`).
- `concat` appends later tables to the first, keeping only the first table's
  columns and filling absent ones with `unmatched_repl`.
- `gather` turns the selected columns into key/value rows.
- `filter_rows` keeps rows whose selected numeric fields satisfy a condition
  such as `age>12`, `1,3<=2` or `c*!=0` (`>`, `<`, `=`, `>=`, `<=`, `!=`,
  `<>`); `any_field` accepts a row when one field passes, `line_number`
  prepends the row number.
- `frequencies` counts distinct value combinations of the selected fields,
  ordered by last occurrence, by count (`sort_by_freq`) or by key
  (`sort_by_key`).
- `fold` joins the values of one field per group of key fields.
- `row_combinations` yields combinations of the non-empty items of each line
  of text, optionally sorted plainly or naturally.
- `correlations` returns `(field1, field2, r)` Pearson correlations for every
  pair of selected columns, with optional NaN removal and `log10(x + 1)`
  transform.
- `dimensions` counts columns and data rows; `format_dimensions` renders a
  list of them as tab-separated text or an aligned table.
- `add_header` and `del_header` add or drop the header row; `write_records`
  writes records with minimal quoting and `csv_to_tab` writes them as TSV.

### Rendering

- `csv_to_json` returns a JSON array of objects (or arrays without a header),
  or an object keyed by one field with `key`. `true`/`false` become booleans,
  empty and NA-like cells become `null` (or `""` with `blanks`), and numbers
  are left unquoted in the columns listed in `parse_num` (`"all"` for all).
- `csv_to_markdown` returns a Markdown table with per-column alignment
  (`l`, `c`, `r`).
- `csv_to_rst` returns a reStructuredText grid table; widths follow terminal
  display width.

## Example

```python
import io
from csvtools.reader import CSVReader
from csvtools.cut import cut
from csvtools.fields import parse_fields
from csvtools.headers import write_records

source = io.StringIO("id,name,age\n1,ann,30\n2,bob,25\n")
records = list(CSVReader(source))
spec = parse_fields("name,id", ",", False)

out = io.StringIO()
write_records(cut(records, spec), out, ",")
print(out.getvalue())
# name,id
# ann,1
# bob,2
```

Errors in the data or in a field selection are raised as exceptions
(`CSVError`, `FieldError` or `ValueError`).

## What it does not do

This is a library only: there is no command-line program. It does not draw
plots, write spreadsheet files, parse or reformat dates, or filter rows by
general arithmetic or string expressions.