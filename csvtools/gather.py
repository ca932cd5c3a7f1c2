"""Gathering columns into key-value pairs."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from .fields import FieldError, FieldSpec, parse_fields


def gather(
    records: Iterable[Sequence[str]],
    spec: str | FieldSpec,
    key: str,
    value: str,
    fuzzy: bool = False,
) -> Iterator[list[str]]:
    """Yield a long table: the other columns, then the column name and its value.

    The first record is the header row. The header of the output ends with
    ``key`` and ``value``; each data row yields one row per gathered column.
    """
    if not key:
        raise ValueError("name of key column needed")
    if not value:
        raise ValueError("name of value column needed")
    if isinstance(spec, str):
        if not spec:
            raise FieldError("fields needed")
        spec = parse_fields(spec, ",", False)

    header: list[str] | None = None
    fields: list[int] = []
    left: list[int] = []
    for record in records:
        if header is None:
            header = list(record)
            selected = set(spec.resolve(header, len(header), fuzzy=fuzzy))
            fields = [i for i in range(1, len(header) + 1) if i in selected]
            if not fields:
                raise FieldError("no fields matched")
            left = [i for i in range(1, len(header) + 1) if i not in selected]
            yield [header[i - 1] for i in left] + [key, value]
            continue

        needed = max(fields + left)
        if len(record) < needed:
            raise FieldError(f"field ({needed}) out of range ({len(record)})")
        base = [record[i - 1] for i in left]
        for f in fields:
            yield base + [header[f - 1], record[f - 1]]