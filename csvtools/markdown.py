"""Rendering tables as markdown."""

from __future__ import annotations

from typing import Iterable, Sequence

from wcwidth import wcswidth

_SEPARATOR = "|"
_ALIGNMENTS = {
    "c": (":", ":"),
    "center": (":", ":"),
    "l": (":", "-"),
    "left": (":", "-"),
    "r": ("-", ":"),
    "right": ("-", ":"),
}


def _width(text: str) -> int:
    width = wcswidth(text)
    return len(text) if width < 0 else width


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _decorate(cells: Sequence[str], last: int, widths: Sequence[int], pad_last: bool) -> list[str]:
    result = []
    for i, cell in enumerate(cells):
        if i == 0:
            cell = _SEPARATOR + cell
        elif i == last:
            if pad_last:
                cell = cell + " " * max(0, widths[i] - _width(cell))
            cell = cell + _SEPARATOR
        result.append(cell)
    return result


def csv_to_markdown(
    header: Sequence[str] | None,
    rows: Iterable[Sequence[str]],
    alignments: str | Sequence[str] = "l",
    min_width: int = 3,
) -> str:
    """Return the table in markdown syntax.

    Without a header the first row is used as one. ``alignments`` holds one
    of l/left, c/center, r/right for every column, or a single one for all.
    """
    if min_width < 3:
        raise ValueError("value of min_width should not be less than 3")
    if isinstance(alignments, str):
        aligns = [a.strip() for a in alignments.split(",") if a.strip()]
    else:
        aligns = list(alignments)
    if not aligns:
        raise ValueError("alignments needed")
    for align in aligns:
        if align not in _ALIGNMENTS:
            raise ValueError(f"invalid alignment: {align}")

    data = [list(row) for row in rows]
    if header:
        head = list(header)
    else:
        if not data:
            raise ValueError("no data found")
        head, data = data[0], data[1:]

    if len(aligns) == 1:
        aligns = aligns * len(head)
    elif len(aligns) != len(head):
        raise ValueError(
            f"number of alignment symbols ({len(aligns)}) should be equal to 1 "
            f"or number of fields ({len(head)})"
        )

    widths = [max(min_width, _byte_len(c)) for c in head]
    for number, row in enumerate(data, start=1):
        if len(row) > len(head):
            raise ValueError(f"row {number} has more fields than the header ({len(head)})")
        for j, cell in enumerate(row):
            widths[j] = max(widths[j], _byte_len(cell))

    align_row = []
    for width, align in zip(widths, aligns):
        left, right = _ALIGNMENTS[align]
        align_row.append(left + "-" * (width - 2) + right)

    last = len(head) - 1
    table = [_decorate(head, last, widths, True), _decorate(align_row, last, widths, False)]
    table.extend(_decorate(row, last, widths, True) for row in data)

    column_widths = [min_width] * len(head)
    for cells in table:
        for i, cell in enumerate(cells):
            column_widths[i] = max(column_widths[i], _width(cell))

    lines = [
        _SEPARATOR.join(
            cell + " " * (column_widths[i] - _width(cell)) for i, cell in enumerate(cells)
        )
        for cells in table
    ]
    return "\n".join(lines) + "\n"