"""Rendering tables as reStructuredText grid tables."""

from __future__ import annotations

from typing import Iterable, Sequence

from wcwidth import wcswidth


def _width(text: str) -> int:
    width = wcswidth(text)
    return len(text) if width < 0 else width


def csv_to_rst(
    header: Sequence[str] | None,
    rows: Iterable[Sequence[str]],
    cross: str = "+",
    padding: str = " ",
    horizontal: str = "-",
    vertical: str = "|",
    header_char: str = "=",
) -> str:
    """Return the table as a reStructuredText grid table.

    Column widths follow the widest cell as rendered on a terminal. Every
    data row is followed by a border line; the header row, if any, by a
    line of ``header_char``. Row spans are not supported.
    """
    data = [list(row) for row in rows]
    head = list(header) if header else []

    if head:
        max_lens = [_width(cell) for cell in head]
    elif not data:
        raise ValueError("no data found")
    else:
        max_lens = [0] * len(data[0])

    for number, row in enumerate(data, start=1):
        if len(row) > len(max_lens):
            raise ValueError(
                f"row {number} has {len(row)} fields, more than the {len(max_lens)} columns"
            )
        for i, cell in enumerate(row):
            max_lens[i] = max(max_lens[i], _width(cell))

    pad = len(padding.encode("utf-8"))

    def border(char: str) -> str:
        return cross + "".join(char * (width + 2 * pad) + cross for width in max_lens) + "\n"

    def line(cells: Sequence[str]) -> str:
        parts = [
            padding + cell + padding + " " * (max_lens[i] - _width(cell)) + vertical
            for i, cell in enumerate(cells)
        ]
        return vertical + "".join(parts) + "\n"

    out = [border(horizontal)]
    if head:
        out.append(line(head))
        out.append(border(header_char))
    for row in data:
        out.append(line(row))
        out.append(border(horizontal))
    return "".join(out)