"""Counting how often combinations of field values occur."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from .fields import FieldError, FieldSpec, parse_fields


def _resolve_fields(
    spec: FieldSpec, record: Sequence[str], no_header_row: bool, fuzzy: bool
) -> list[int]:
    """Resolve a selection against the first record, without duplicates."""
    header = None if no_header_row else list(record)
    if spec.colnames:
        fields = spec.resolve(header, fuzzy=fuzzy)
    else:
        fields = spec.resolve(header, width=len(record))
    fields = list(dict.fromkeys(fields))
    if not fields:
        raise FieldError("no fields matched")
    return fields


def _pick(record: Sequence[str], fields: Sequence[int]) -> tuple[str, ...]:
    needed = max(fields)
    if len(record) < needed:
        raise FieldError(f"field ({needed}) out of range ({len(record)})")
    return tuple(record[f - 1] for f in fields)


def _as_spec(spec: str | FieldSpec, no_header_row: bool) -> FieldSpec:
    if isinstance(spec, FieldSpec):
        return spec
    if not spec:
        raise FieldError("fields needed")
    return parse_fields(spec, ",", no_header_row)


def frequencies(
    records: Iterable[Sequence[str]],
    spec: str | FieldSpec = "1",
    no_header_row: bool = False,
    fuzzy: bool = False,
    sort_by_freq: bool = False,
    sort_by_key: bool = False,
    reverse: bool = False,
) -> list[list[str]]:
    """Return rows of the selected values followed by how often they occur.

    Unless ``no_header_row`` the first row is the selected column names plus
    ``frequency``. By default keys are ordered by their last occurrence;
    ``sort_by_freq`` orders by count (ties by key), ``sort_by_key`` by key,
    and ``reverse`` turns either of these around.
    """
    spec = _as_spec(spec, no_header_row)

    counter: Counter[tuple[str, ...]] = Counter()
    last_seen: dict[tuple[str, ...], int] = {}
    header: list[str] | None = None
    fields: list[int] | None = None
    expect_header = not no_header_row

    for line, record in enumerate(records, start=1):
        if fields is None:
            fields = _resolve_fields(spec, record, no_header_row, fuzzy)
        items = _pick(record, fields)
        if expect_header:
            header = [*items, "frequency"]
            expect_header = False
            continue
        counter[items] += 1
        last_seen[items] = line

    if sort_by_freq:
        keys = sorted(counter, key=lambda k: (counter[k], k))
        if reverse:
            keys = sorted(counter, key=lambda k: (-counter[k], k))
    elif sort_by_key:
        keys = sorted(counter, reverse=reverse)
    else:
        keys = sorted(counter, key=last_seen.__getitem__)

    result: list[list[str]] = [header] if header is not None else []
    result.extend([*key, str(counter[key])] for key in keys)
    return result