"""Folding the values of a field into one cell per group."""

from __future__ import annotations

from typing import Iterable, Sequence

from .fields import FieldError, FieldSpec, parse_fields
from .freq import _pick, _resolve_fields


def fold(
    records: Iterable[Sequence[str]],
    spec: str = "1",
    vfield: str = "",
    separator: str = "; ",
    no_header_row: bool = False,
    fuzzy: bool = False,
) -> list[list[str]]:
    """Group records by the key fields and join their ``vfield`` values.

    Only the key fields and the value field are kept. Groups are ordered by
    their last occurrence; values keep their input order.
    """
    if not spec:
        raise FieldError("key fields needed")
    if not vfield:
        raise FieldError("value field needed")
    if spec == vfield:
        raise ValueError("value field and key fields should be different")
    if not separator:
        raise ValueError("separator needed")

    selection: FieldSpec = parse_fields(f"{spec},{vfield}", ",", no_header_row)

    groups: dict[tuple[str, ...], list[str]] = {}
    last_seen: dict[tuple[str, ...], int] = {}
    header: list[str] | None = None
    fields: list[int] | None = None
    expect_header = not no_header_row

    for line, record in enumerate(records, start=1):
        if fields is None:
            fields = _resolve_fields(selection, record, no_header_row, fuzzy)
            if len(fields) == 1:
                raise FieldError("key field and value field refer to a same field?")
        items = _pick(record, fields)
        if expect_header:
            header = list(items)
            expect_header = False
            continue
        key = items[:-1]
        groups.setdefault(key, []).append(items[-1])
        last_seen[key] = line

    result: list[list[str]] = [header] if header is not None else []
    for key in sorted(groups, key=last_seen.__getitem__):
        result.append([*key, separator.join(groups[key])])
    return result