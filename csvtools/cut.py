"""Selecting and rearranging columns."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from .fields import FieldError, FieldSpec, parse_fields


def _select(
    spec: FieldSpec,
    record: Sequence[str],
    no_header_row: bool,
    fuzzy: bool,
    ignore_case: bool,
    uniq_column: bool,
    allow_missing: bool,
) -> list[int]:
    header = None if no_header_row else record
    if spec.colnames:
        if header is None:
            raise FieldError("column names can only be used with a header row")
        fields = spec._resolve_names(header, fuzzy, ignore_case, allow_missing)
        if fuzzy and uniq_column and not spec.negative:
            fields = list(dict.fromkeys(fields))
        return fields

    width = len(record)
    if allow_missing:
        expanded = spec._expand(width)
        if spec.negative:
            dropped = set(expanded)
            return [i for i in range(1, width + 1) if i not in dropped]
        return expanded
    return spec.resolve(header, width)


def cut(
    records: Iterable[Sequence[str]],
    spec: str | FieldSpec,
    no_header_row: bool = False,
    fuzzy: bool = False,
    ignore_case: bool = False,
    uniq_column: bool = False,
    allow_missing: bool = False,
    blank_missing: bool = False,
) -> Iterator[list[str]]:
    """Yield each record reduced to the selected fields, in the selected order.

    Fields are resolved against the first record (the header row unless
    ``no_header_row``). With ``allow_missing`` absent columns are skipped, or
    left blank with ``blank_missing`` (the header then gets the requested name).
    """
    if isinstance(spec, str):
        if not spec:
            raise FieldError("fields needed")
        spec = parse_fields(spec, ",", no_header_row)

    label_missing = bool(spec.colnames) and not spec.negative and not fuzzy
    fields: list[int] | None = None
    first = True
    for record in records:
        if fields is None:
            fields = _select(
                spec, record, no_header_row, fuzzy, ignore_case, uniq_column, allow_missing
            )
            if not fields:
                return
        row: list[str] = []
        for position, number in enumerate(fields):
            if 0 < number <= len(record):
                row.append(record[number - 1])
                continue
            if not allow_missing:
                raise FieldError(f"field ({number}) out of range ({len(record)})")
            if blank_missing:
                if first and label_missing:
                    row.append(spec.colnames[position])
                else:
                    row.append("")
        first = False
        yield row