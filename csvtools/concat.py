"""Concatenating tables by rows, aligning columns by name."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

log = logging.getLogger(__name__)


def _frame(
    records: Iterable[Sequence[str]], no_header_row: bool, ignore_case: bool
) -> tuple[list[str], dict[str, str], dict[str, list[str]], int]:
    rows = [list(record) for record in records]
    if not rows:
        return [], {}, {}, 0
    if no_header_row:
        header = [str(i) for i in range(1, len(rows[0]) + 1)]
        data = rows
    else:
        header, data = rows[0], rows[1:]
    for number, row in enumerate(data, start=1):
        if len(row) < len(header):
            raise ValueError(
                f"row {number} has {len(row)} fields, fewer than the {len(header)} columns"
            )

    names: list[str] = []
    original: dict[str, str] = {}
    columns: dict[str, list[str]] = {}
    for i, col in enumerate(header):
        key = col.lower() if ignore_case else col
        if key in columns:
            continue
        names.append(key)
        original[key] = col
        columns[key] = [row[i] for row in data]
    return names, original, columns, len(data)


def concat(
    tables: Iterable[Iterable[Sequence[str]]],
    no_header_row: bool = False,
    ignore_case: bool = False,
    keep_unmatched: bool = False,
    unmatched_repl: str = "",
) -> list[list[str]]:
    """Append the rows of later tables to the first, keeping only its columns.

    Columns a later table lacks are filled with ``unmatched_repl``. A later
    table sharing no column with the first is dropped unless ``keep_unmatched``.
    The header of the first table is returned first unless ``no_header_row``.
    """
    base_names: list[str] | None = None
    base_original: dict[str, str] = {}
    base_columns: dict[str, list[str]] = {}
    base_rows = 0

    for number, table in enumerate(tables, start=1):
        names, original, columns, nrows = _frame(table, no_header_row, ignore_case)
        if nrows == 0:
            log.warning("no data in table %d", number)

        if base_names is None:
            if not names:
                raise ValueError("no columns in the first table")
            base_names, base_original, base_columns, base_rows = names, original, columns, nrows
            continue

        if not keep_unmatched and not any(name in columns for name in base_names):
            continue

        for name in base_names:
            base_columns[name].extend(columns.get(name, [unmatched_repl] * nrows))
        base_rows += nrows

    if base_names is None:
        raise ValueError("no tables given")

    result: list[list[str]] = []
    if not no_header_row:
        result.append([base_original[name] for name in base_names])
    result.extend(
        [base_columns[name][i] for name in base_names] for i in range(base_rows)
    )
    return result