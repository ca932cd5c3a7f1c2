"""Filtering rows by comparing numeric fields with a threshold."""

from __future__ import annotations

import operator
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Sequence

from .fields import FieldError, FieldSpec, parse_fields

_CONDITION = re.compile(r"^(.+?)([!<=>]+)([\-\d.eE,+]+)$")
_NUMERIC = re.compile(r"^[-+]?(?:\d[\d,]*\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$")

_OPERATORS: dict[str, Callable[[float, float], bool]] = {
    ">": operator.gt,
    "<": operator.lt,
    "=": operator.eq,
    ">=": operator.ge,
    "<=": operator.le,
    "!=": operator.ne,
    "<>": operator.ne,
}


@dataclass(frozen=True)
class Condition:
    """A comparison of selected fields with a numeric threshold."""

    fields: str
    operator: str
    threshold: float

    def __post_init__(self) -> None:
        if self.operator not in _OPERATORS:
            raise ValueError(f"invalid expression: {self.operator}")

    def test(self, value: float) -> bool:
        """Return whether ``value`` satisfies the comparison."""
        return _OPERATORS[self.operator](value, self.threshold)


def parse_condition(text: str) -> Condition:
    """Parse a condition such as ``age>12``, ``1,3<=2`` or ``c*!=0``."""
    if not text:
        raise ValueError("filter condition needed")
    match = _CONDITION.match(text)
    if not match:
        raise ValueError(f"invalid filter: {text}")
    fields, expression, number = match.groups()
    if expression not in _OPERATORS:
        raise ValueError(f"invalid expression: {expression}")
    try:
        threshold = float(number)
    except ValueError as err:
        raise ValueError(f"invalid threshold: {number}") from err
    return Condition(fields, expression, threshold)


def is_numeric(text: str) -> bool:
    """Return whether ``text`` is a number, thousands separators allowed."""
    if not _NUMERIC.match(text):
        return False
    try:
        float(text.replace(",", ""))
    except ValueError:
        return False
    return True


def _passes(record: Sequence[str], fields: Sequence[int], condition: Condition, any_field: bool) -> bool:
    satisfied = 0
    for number in fields:
        cell = record[number - 1]
        if not is_numeric(cell):
            return False
        if condition.test(float(cell.replace(",", ""))):
            satisfied += 1
            if any_field:
                return True
    return satisfied == len(fields)


def filter_rows(
    records: Iterable[Sequence[str]],
    condition: str | Condition,
    no_header_row: bool = False,
    fuzzy: bool = False,
    any_field: bool = False,
    line_number: bool = False,
) -> Iterator[list[str]]:
    """Yield the header row and the records whose selected fields all satisfy the condition.

    With ``any_field`` one satisfied field is enough. A non-numeric value met
    before that rejects the record. ``line_number`` prepends the data row number
    (``n`` in the header).
    """
    if isinstance(condition, str):
        condition = parse_condition(condition)
    spec: FieldSpec = parse_fields(condition.fields, ",", no_header_row)

    expect_header = not no_header_row
    fields: list[int] | None = None
    count = 0
    for record in records:
        if expect_header:
            expect_header = False
            header = list(record)
            if spec.colnames:
                fields = sorted(set(spec.resolve(header, fuzzy=fuzzy)))
                if not fields:
                    raise FieldError("no fields matched")
            yield ["n", *header] if line_number else header
            continue

        count += 1
        if fields is None:
            fields = sorted(set(spec.resolve(width=len(record))))
            if not fields:
                raise FieldError("no fields matched")
        if fields[-1] > len(record):
            raise FieldError(f"field ({fields[-1]}) out of range ({len(record)})")

        if _passes(record, fields, condition, any_field):
            yield [str(count), *record] if line_number else list(record)