"""Combinations of the items found on every row."""

from __future__ import annotations

import csv
import logging
import re
from typing import Iterable, Iterator, Sequence

log = logging.getLogger(__name__)

_DIGITS = re.compile(r"(\d+)")


def natural_key(text: str) -> tuple:
    """Sort key that orders embedded numbers by value, e.g. ``a2`` before ``a10``."""
    key = []
    for chunk in _DIGITS.split(text):
        if not chunk:
            continue
        if chunk.isdigit():
            key.append((0, int(chunk), chunk))
        else:
            key.append((1, 0, chunk))
    return tuple(key)


def combinations(items: Sequence[str], number: int = 2) -> list[list[str]]:
    """Return the subsets of ``items`` with ``number`` elements, or all of them for 0.

    Subsets keep the items' order and are listed by their bit pattern, the
    first item being the lowest bit.
    """
    if number < 0:
        raise ValueError(f"number should be non-negative: {number}")
    items = list(items)
    number = min(number, len(items))
    result = []
    for mask in range(1, 1 << len(items)):
        if number > 0 and bin(mask).count("1") != number:
            continue
        result.append([item for bit, item in enumerate(items) if mask >> bit & 1])
    return result


def _parse(text: str, delimiter: str, line: int) -> list[str]:
    try:
        return next(csv.reader([text], delimiter=delimiter, strict=True))
    except (csv.Error, StopIteration) as err:
        raise ValueError(f"[line {line}] failed parsing: {text}") from err


def row_combinations(
    lines: Iterable[str],
    delimiter: str = ",",
    number: int = 2,
    sort_items: bool = False,
    nat_sort: bool = False,
    ignore_case: bool = False,
    no_header_row: bool = False,
) -> Iterator[list[str]]:
    """Yield the combinations of the non-empty items of every line.

    The first line is skipped unless ``no_header_row``. Items of each
    combination are sorted with ``sort_items``, or naturally with ``nat_sort``.
    """
    rows = 0
    for line, raw in enumerate(lines, start=1):
        if line == 1 and not no_header_row:
            continue
        rows += 1
        text = raw.strip()
        if ignore_case:
            text = text.lower()
        items = [item for item in _parse(text, delimiter, line) if item]
        if not items:
            continue
        for comb in combinations(items, number):
            if sort_items:
                comb.sort()
            elif nat_sort:
                comb.sort(key=natural_key)
            yield comb
    if rows == 0:
        log.warning("no input? or only one row? you may need no_header_row for single-line input")