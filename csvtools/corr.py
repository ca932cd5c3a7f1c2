"""Pearson correlation between columns."""

from __future__ import annotations

import math
from typing import Iterable, Sequence


def pearson(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Return the Pearson correlation of two equally long samples (NaN if undefined)."""
    xs, ys = list(xs), list(ys)
    if len(xs) != len(ys):
        raise ValueError(f"samples differ in length: {len(xs)} and {len(ys)}")
    n = len(xs)
    if n < 2:
        return math.nan
    mean_x = sum(xs) / n
    mean_y = sum(ys) / n
    sxy = sum((x - mean_x) * (y - mean_y) for x, y in zip(xs, ys))
    sxx = sum((x - mean_x) ** 2 for x in xs)
    syy = sum((y - mean_y) ** 2 for y in ys)
    denom = math.sqrt(sxx * syy)
    if denom == 0:
        return math.nan
    return sxy / denom


def remove_nans(xs: Sequence[float], ys: Sequence[float]) -> tuple[list[float], list[float]]:
    """Drop the positions where either value is NaN."""
    pairs = [(x, y) for x, y in zip(xs, ys) if not (math.isnan(x) or math.isnan(y))]
    return [x for x, _ in pairs], [y for _, y in pairs]


def _to_float(text: str) -> float:
    if text != text.strip() or "_" in text:
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


def _log10p1(x: float) -> float:
    shifted = x + 1
    if shifted == 0:
        return -math.inf
    if shifted < 0 or math.isnan(shifted):
        return math.nan
    return math.log10(shifted)


def correlations(
    records: Iterable[Sequence[str]],
    fields: str = "",
    no_header_row: bool = False,
    ignore_nan: bool = False,
    log_transform: bool = False,
) -> list[tuple[str, str, float]]:
    """Return ``(field1, field2, r)`` for every pair of selected columns.

    ``fields`` is a comma separated list of column names, or of 1-based column
    numbers without a header row; empty selects all columns. Non-numeric
    values count as NaN; ``ignore_nan`` drops them pairwise. With
    ``log_transform`` values are replaced by ``log10(x + 1)``.
    """
    rows = [list(record) for record in records]
    header: list[str] | None = None
    if not no_header_row:
        if not rows:
            return []
        header, rows = rows[0], rows[1:]

    tokens = [tok.strip() for tok in fields.split(",")] if fields else []
    tokens = [tok for tok in tokens if tok]

    targets: dict[int, str] = {}
    if tokens:
        positions = {name: i for i, name in enumerate(header)} if header is not None else {}
        for tok in tokens:
            if header is None:
                try:
                    number = int(tok)
                except ValueError as err:
                    raise ValueError(f"illegal field number: {tok}") from err
                if number < 1:
                    raise ValueError(f"illegal field number: {number}")
                index = number - 1
            else:
                if tok not in positions:
                    raise ValueError(f"invalid field specified: {tok}")
                index = positions[tok]
            targets.setdefault(index, tok)
    elif header is not None:
        for i, name in enumerate(header):
            targets.setdefault(i, name)
    elif rows:
        targets = {i: str(i + 1) for i in range(len(rows[0]))}

    transform = _log10p1 if log_transform else (lambda x: x)
    columns: dict[int, list[float]] = {index: [] for index in targets}
    for number, row in enumerate(rows, start=1):
        for index, values in columns.items():
            if index >= len(row):
                raise ValueError(f"row {number} has no field {index + 1}")
            values.append(transform(_to_float(row[index])))

    result: list[tuple[str, str, float]] = []
    items = list(targets.items())
    for i, (index1, name1) in enumerate(items):
        for index2, name2 in items[i + 1:]:
            d1, d2 = columns[index1], columns[index2]
            if ignore_nan:
                d1, d2 = remove_nans(d1, d2)
            result.append((name1, name2, pearson(d1, d2)))
    return result