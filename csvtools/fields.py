"""Parsing of field selections such as ``1,3-5``, ``-2-`` or ``colA,colB``."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Sequence

_SINGLE = re.compile(r"^(-?)(\d+)$")
_OPEN = re.compile(r"^(-?)(\d+)-$")
_RANGE = re.compile(r"^(-?)(\d+)-(-?)(\d+)$")


class FieldError(ValueError):
    """Raised for invalid field selections or fields that do not fit the data."""


def fuzzy_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a column-name pattern where ``*`` matches any run of characters."""
    parts = (re.escape(part) for part in pattern.split("*"))
    return re.compile("^" + ".*".join(parts) + "$")


@dataclass
class FieldSpec:
    """A parsed field selection.

    ``fields`` holds 1-based column numbers (always positive) and ``colnames``
    holds column names (without a leading ``-``); exactly one of them is used.
    ``negative`` means the selection lists columns to drop. Positions listed in
    ``open_ended`` stand for "from this column to the last one".
    """

    fields: list[int] = field(default_factory=list)
    colnames: list[str] = field(default_factory=list)
    negative: bool = False
    need_header: bool = True
    open_ended: frozenset[int] = frozenset()

    def _expand(self, width: int) -> list[int]:
        expanded: list[int] = []
        for position, number in enumerate(self.fields):
            if position in self.open_ended:
                expanded.extend(range(number, width + 1))
            else:
                expanded.append(number)
        return expanded

    def _resolve_names(
        self,
        header: Sequence[str],
        fuzzy: bool = False,
        ignore_case: bool = False,
        allow_missing: bool = False,
    ) -> list[int]:
        def fold(text: str) -> str:
            return text.lower() if ignore_case else text

        columns = [fold(col) for col in header]
        names = [fold(name) for name in self.colnames]
        index = {col: i for i, col in enumerate(columns, start=1)}

        if fuzzy:
            patterns = [fuzzy_to_regex(name) for name in names]
            if self.negative:
                return [
                    i
                    for i, col in enumerate(columns, start=1)
                    if not any(p.match(col) for p in patterns)
                ]
            return [
                i
                for p in patterns
                for i, col in enumerate(columns, start=1)
                if p.match(col)
            ]

        if not allow_missing:
            for name in names:
                if name not in index:
                    raise FieldError(f'column "{name}" not existed')

        if self.negative:
            dropped = set(names)
            return [i for i, col in enumerate(columns, start=1) if col not in dropped]
        return [index.get(name, 0) for name in names]

    def resolve(
        self,
        header: Sequence[str] | None = None,
        width: int | None = None,
        fuzzy: bool = False,
        ignore_case: bool = False,
    ) -> list[int]:
        """Return the selected 1-based column numbers for a table.

        ``width`` defaults to the length of ``header``. The result may be empty
        when nothing matches (for fuzzy or negative selections).
        """
        if self.colnames:
            if header is None:
                raise FieldError("column names can only be used with a header row")
            return self._resolve_names(header, fuzzy, ignore_case)

        if width is None:
            if header is None:
                raise FieldError("width or header row needed to resolve fields")
            width = len(header)
        expanded = self._expand(width)
        for number in expanded:
            if number > width:
                raise FieldError(f"field ({number}) out of range ({width})")
        if self.negative:
            dropped = set(expanded)
            return [i for i in range(1, width + 1) if i not in dropped]
        return expanded


def _parse_numeric(item: str) -> tuple[bool, list[int], bool] | None:
    match = _SINGLE.match(item)
    if match:
        number = int(match[2])
        if number == 0:
            raise FieldError(f"field should be positive: {item}")
        return bool(match[1]), [number], False

    match = _OPEN.match(item)
    if match:
        number = int(match[2])
        if number == 0:
            raise FieldError(f"field should be positive: {item}")
        return bool(match[1]), [number], True

    match = _RANGE.match(item)
    if match:
        if match[1] != match[3]:
            raise FieldError(f"invalid field range: {item}")
        start, end = int(match[2]), int(match[4])
        if start == 0 or end == 0:
            raise FieldError(f"field should be positive: {item}")
        if start > end:
            raise FieldError(f"invalid field range: {item}")
        return bool(match[1]), list(range(start, end + 1)), False

    return None


def parse_fields(spec: str, sep: str = ",", no_header_row: bool = False) -> FieldSpec:
    """Parse a field selection string into a :class:`FieldSpec`."""
    if not spec:
        raise FieldError("no fields given")
    items = spec.split(sep)
    if any(item == "" for item in items):
        raise FieldError(f"invalid fields: {spec}")

    parsed = [_parse_numeric(item) for item in items]
    if all(p is not None for p in parsed):
        fields: list[int] = []
        open_ended: set[int] = set()
        signs: set[bool] = set()
        for negative, numbers, is_open in parsed:  # type: ignore[misc]
            signs.add(negative)
            if is_open:
                open_ended.add(len(fields))
            fields.extend(numbers)
        if len(signs) > 1:
            raise FieldError(f"positive and negative fields can not be mixed: {spec}")
        return FieldSpec(
            fields=fields,
            negative=signs.pop(),
            need_header=not no_header_row,
            open_ended=frozenset(open_ended),
        )

    if no_header_row:
        raise FieldError(f"column names are not allowed without a header row: {spec}")

    signs = {item.startswith("-") for item in items}
    if len(signs) > 1:
        raise FieldError(f"selected and unselected columns can not be mixed: {spec}")
    negative = signs.pop()
    names = [item[1:] if negative else item for item in items]
    if any(name == "" for name in names):
        raise FieldError(f"invalid fields: {spec}")
    return FieldSpec(colnames=names, negative=negative, need_header=True)