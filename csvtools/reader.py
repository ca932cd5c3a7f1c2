"""Chunked reading of CSV/TSV records from files, streams or standard input."""

from __future__ import annotations

import bz2
import csv
import gzip
import lzma
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Iterable, Iterator

_OPENERS = {".gz": gzip.open, ".bz2": bz2.open, ".xz": lzma.open}


class CSVError(Exception):
    """Raised when the input cannot be read as CSV."""


@dataclass
class RecordsChunk:
    """A numbered batch of parsed records."""

    id: int
    data: list[list[str]] = field(default_factory=list)


class CSVReader:
    """Reads records in chunks from a path, ``"-"`` (stdin) or an open text stream.

    Blank lines are skipped. Rows that fail to parse raise :class:`CSVError`
    unless ``ignore_illegal_row`` is set; their record numbers are then kept in
    ``illegal_rows``. With ``ignore_empty_row`` rows whose cells are all empty
    are dropped and their record numbers kept in ``empty_rows``.
    """

    def __init__(
        self,
        source: str | os.PathLike | IO[str] | Iterable[str],
        delimiter: str = ",",
        comment: str | None = None,
        chunk_size: int = 50,
        ignore_empty_row: bool = False,
        ignore_illegal_row: bool = False,
    ) -> None:
        if chunk_size < 1:
            raise ValueError("value of chunk_size should be greater than 0")
        if len(delimiter) != 1:
            raise ValueError(f"delimiter must be a single character: {delimiter!r}")
        if comment is not None and len(comment) != 1:
            raise ValueError(f"comment must be a single character: {comment!r}")
        self.source = source
        self.delimiter = delimiter
        self.comment = comment
        self.chunk_size = chunk_size
        self.ignore_empty_row = ignore_empty_row
        self.ignore_illegal_row = ignore_illegal_row
        self.empty_rows: list[int] = []
        self.illegal_rows: list[int] = []

    @property
    def name(self) -> str:
        if isinstance(self.source, (str, os.PathLike)):
            return os.fspath(self.source)
        return getattr(self.source, "name", "<stream>")

    @contextmanager
    def _open(self) -> Iterator[Iterable[str]]:
        if isinstance(self.source, (str, os.PathLike)):
            path = os.fspath(self.source)
            if path == "-":
                yield sys.stdin
                return
            opener = _OPENERS.get(Path(path).suffix.lower(), open)
            with opener(path, "rt", newline="", encoding="utf-8") as fh:
                yield fh
        else:
            yield self.source

    def _lines(self, stream: Iterable[str]) -> Iterator[str]:
        empty = True
        for line in stream:
            if line:
                empty = False
            if self.comment is not None and line.startswith(self.comment):
                continue
            yield line
        if empty:
            raise CSVError(f"empty file: {self.name}")

    def chunks(self) -> Iterator[RecordsChunk]:
        """Yield chunks of at most ``chunk_size`` records; the last may be short or empty."""
        self.empty_rows = []
        self.illegal_rows = []
        with self._open() as stream:
            reader = csv.reader(self._lines(stream), delimiter=self.delimiter, strict=True)
            chunk: list[list[str]] = []
            chunk_id = 0
            line = 0
            while True:
                try:
                    record = next(reader)
                except StopIteration:
                    break
                except csv.Error as err:
                    line += 1
                    if self.ignore_illegal_row:
                        self.illegal_rows.append(line)
                        continue
                    raise CSVError(f"{self.name}: record {line}: {err}") from err
                if not record:
                    continue
                line += 1
                if self.ignore_empty_row and not any(record):
                    self.empty_rows.append(line)
                    continue
                chunk.append(record)
                if len(chunk) == self.chunk_size:
                    chunk_id += 1
                    yield RecordsChunk(chunk_id, chunk)
                    chunk = []
            chunk_id += 1
            yield RecordsChunk(chunk_id, chunk)

    def __iter__(self) -> Iterator[list[str]]:
        for chunk in self.chunks():
            yield from chunk.data