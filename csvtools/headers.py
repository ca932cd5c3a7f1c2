"""Adding and removing header rows, and writing records as CSV/TSV."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence, TextIO

log = logging.getLogger(__name__)


def add_header(records: Iterable[list[str]], names: Sequence[str] | None = None) -> Iterator[list[str]]:
    """Yield a header row followed by the records.

    Without names, ``c1, c2, ...`` are generated from the first record's width.
    """
    names = list(names or [])
    if not names:
        log.warning("colnames not given, c1, c2, c3... will be used")
    first = True
    for record in records:
        if first:
            header = names or [f"c{i}" for i in range(1, len(record) + 1)]
            if len(header) != len(record):
                raise ValueError(
                    f"number of fields ({len(record)}) and new colnames ({len(header)}) do not match"
                )
            yield header
            first = False
        yield record


def del_header(records: Iterable[list[str]], no_header_row: bool = False) -> Iterator[list[str]]:
    """Yield the records without the first one, unless there is no header row."""
    skip = not no_header_row
    for record in records:
        if skip:
            skip = False
            continue
        yield record


def _needs_quotes(cell: str, delimiter: str) -> bool:
    if cell == "":
        return False
    if cell == "\\.":
        return True
    if delimiter in cell or any(c in cell for c in '"\r\n'):
        return True
    return cell[0].isspace()


def _format_cell(cell: str, delimiter: str) -> str:
    if _needs_quotes(cell, delimiter):
        return '"' + cell.replace('"', '""') + '"'
    return cell


def write_records(records: Iterable[Sequence[str]], stream: TextIO, delimiter: str = ",") -> int:
    """Write records to ``stream``, quoting cells only where needed; return the count."""
    if len(delimiter) != 1 or delimiter in '"\r\n':
        raise ValueError(f"invalid delimiter: {delimiter!r}")
    count = 0
    for record in records:
        stream.write(delimiter.join(_format_cell(cell, delimiter) for cell in record))
        stream.write("\n")
        count += 1
    return count


def csv_to_tab(records: Iterable[Sequence[str]], stream: TextIO) -> int:
    """Write records as tab-separated values; return the count."""
    return write_records(records, stream, "\t")