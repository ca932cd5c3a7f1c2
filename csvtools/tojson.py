"""Converting CSV records to JSON text."""

from __future__ import annotations

import logging
import re
from typing import Iterable, Sequence

from .fields import FieldError, FieldSpec, parse_fields

log = logging.getLogger(__name__)

_INTEGER = re.compile(r"^[-+]?\d+$")
_NUMBER = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$")
_NULLS = frozenset({"", "na", "n/a", "none", "null", "."})


def escape_json_field(text: str) -> str:
    """Put a backslash before every double quote."""
    return text.replace('"', '\\"')


def json_value(value: str, blanks: bool = False, parse_num: bool = False) -> str:
    """Render one cell as a JSON literal.

    ``true``/``false`` become booleans and empty or NA-like cells become
    ``null`` (or ``""`` with ``blanks``). Numbers stay unquoted with ``parse_num``.
    """
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered
    if lowered in _NULLS:
        return '""' if blanks else "null"
    if parse_num and _NUMBER.match(value):
        return value
    return '"' + value + '"'


def _numeric_columns(parse_num: Iterable[str | int] | None) -> tuple[bool, set[int]]:
    columns: set[int] = set()
    for item in parse_num or ():
        text = str(item).lower()
        if text in ("a", "all"):
            return True, set()
        if not _INTEGER.match(text) or int(text) < 1:
            raise ValueError(f"positive column index needed: {text}")
        columns.add(int(text))
    return False, columns


def _key_spec(key: str, no_header_row: bool) -> FieldSpec:
    spec = parse_fields(key, ",", no_header_row)
    if len(spec.fields) > 1 or len(spec.colnames) > 1:
        raise FieldError("invalid value of key: only ONE field allowed")
    if spec.negative:
        raise FieldError("invalid value of key: negative field not allowed")
    return spec


def csv_to_json(
    records: Iterable[Sequence[str]],
    no_header_row: bool = False,
    key: str | None = None,
    indent: str = "  ",
    blanks: bool = False,
    parse_num: Iterable[str | int] | None = None,
) -> str:
    """Return the records as JSON text.

    With a header row each record becomes an object, otherwise an array of
    strings. With ``key`` the output is an object keyed by that field; later
    records with a duplicated key are skipped. An empty ``indent`` gives one line.
    """
    all_numeric, numeric_cols = _numeric_columns(parse_num)
    spec = _key_spec(key, no_header_row) if key else None
    lf, sep = ("\n", " ") if indent else ("", "")
    inner = indent + indent

    out: list[str] = ["{" if spec else "[", lf]
    header: list[str] | None = None
    parse_header = not no_header_row
    key_index: int | None = None
    seen: set[str] = set()
    first = True

    for line, record in enumerate(records, start=1):
        if parse_header:
            header = list(record)
            if spec is not None and spec.colnames:
                name = spec.colnames[0]
                if name not in header:
                    raise FieldError(f'column "{name}" not existed')
                key_index = len(header) - 1 - header[::-1].index(name)
            parse_header = False
            continue

        key_value = ""
        if spec is not None:
            if key_index is None:
                number = spec.fields[0]
                if number > len(record):
                    raise FieldError(f"field ({number}) out of range ({len(record)})")
                key_index = number - 1
            if key_index >= len(record):
                raise FieldError(f"field ({key_index + 1}) out of range ({len(record)})")
            key_value = record[key_index]
            if key_value in seen:
                log.warning("ignore record with duplicated key (%s) at line %d", key_value, line)
                continue
            seen.add(key_value)

        if first:
            first = False
        else:
            out.append("," + lf)

        if header is not None:
            if spec is not None:
                out.append(indent + '"' + key_value + '":' + sep + "{" + lf)
            else:
                out.append(indent + "{" + lf)
            for i, col in enumerate(header):
                if i >= len(record):
                    raise ValueError(
                        f"record at line {line} has {len(record)} fields, fewer than the header"
                    )
                numeric = all_numeric or (i + 1) in numeric_cols
                comma = "," if i < len(record) - 1 else ""
                out.append(
                    inner + '"' + escape_json_field(col) + '":' + sep
                    + json_value(record[i], blanks, numeric) + comma + lf
                )
            out.append(indent + "}")
        else:
            if spec is not None:
                out.append(indent + '"' + key_value + '":' + sep + "[" + lf)
            else:
                out.append(indent + "[" + lf)
            for i, col in enumerate(record):
                comma = "," if i < len(record) - 1 else ""
                out.append(inner + '"' + escape_json_field(col) + '"' + comma + lf)
            out.append(indent + "]")

    out.append(lf)
    out.append("}\n" if spec else "]\n")
    return "".join(out)