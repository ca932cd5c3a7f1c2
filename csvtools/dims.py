"""Counting columns and rows of tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from wcwidth import wcswidth


@dataclass(frozen=True)
class Dimensions:
    """Number of columns and data rows of one input."""

    file: str
    num_cols: int
    num_rows: int


def dimensions(name: str, records: Iterable[Sequence[str]], no_header_row: bool = False) -> Dimensions:
    """Count columns (from the first record) and rows, excluding any header row."""
    num_cols = 0
    num_rows = 0
    for record in records:
        if num_rows == 0:
            num_cols = len(record)
        num_rows += 1
    if num_rows > 0 and not no_header_row:
        num_rows -= 1
    return Dimensions(name, num_cols, num_rows)


def _width(text: str) -> int:
    width = wcswidth(text)
    return len(text) if width < 0 else width


def format_dimensions(dims: Iterable[Dimensions], tabular: bool = False, no_files: bool = False) -> str:
    """Render dimensions as tab-separated text or as an aligned table."""
    dims = list(dims)
    if tabular:
        lines = ["file\tnum_cols\tnum_rows"]
        for d in dims:
            cells = [str(d.num_cols), str(d.num_rows)]
            if not no_files:
                cells.insert(0, d.file)
            lines.append("\t".join(cells))
        return "\n".join(lines) + "\n"

    rows = [("file", "num_cols", "num_rows")]
    rows.extend((d.file, f"{d.num_cols:,}", f"{d.num_rows:,}") for d in dims)
    widths = [max(_width(row[i]) for row in rows) for i in range(3)]
    lines = []
    for name, cols, nrows in rows:
        lines.append(
            "   ".join(
                [
                    name + " " * (widths[0] - _width(name)),
                    " " * (widths[1] - _width(cols)) + cols,
                    " " * (widths[2] - _width(nrows)) + nrows,
                ]
            )
        )
    return "\n".join(lines) + "\n"