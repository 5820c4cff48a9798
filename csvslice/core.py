"""Extract row ranges or named columns from CSV files, streaming the input."""

from __future__ import annotations

import csv
import os
from collections.abc import Iterator, Sequence
from contextlib import closing
from typing import Union

from .errors import ColumnNotFoundError, CsvFormatError, CsvIOError

PathLike = Union[str, "os.PathLike[str]"]


def _read_records(path: PathLike) -> Iterator[list[str]]:
    """Yield every non-blank record of the file, header included.

    All records must have the same number of fields as the first one.
    """
    try:
        handle = open(path, encoding="utf-8-sig", newline="")
    except OSError as exc:
        raise CsvIOError(exc) from exc

    with handle:
        reader = csv.reader(handle)
        expected: int | None = None
        try:
            for record in reader:
                if not record:
                    continue
                if expected is None:
                    expected = len(record)
                elif len(record) != expected:
                    raise CsvFormatError(
                        f"found record with {len(record)} fields, but the "
                        f"previous record has {expected} fields "
                        f"(line {reader.line_num})"
                    )
                yield record
        except csv.Error as exc:
            raise CsvFormatError(exc) from exc
        except UnicodeDecodeError as exc:
            raise CsvFormatError(f"invalid UTF-8: {exc}") from exc
        except OSError as exc:
            raise CsvIOError(exc) from exc


def extract_rows(path: PathLike, start: int, end: int) -> list[list[str]]:
    """Return data rows ``start`` (inclusive) to ``end`` (exclusive).

    Indices count data rows only; the header row is skipped. Reading stops
    once the row at index ``end`` has been parsed.
    """
    if start < 0 or end < 0:
        raise ValueError("start and end must not be negative")

    rows: list[list[str]] = []
    with closing(_read_records(path)) as records:
        next(records, None)  # header
        for index, record in enumerate(records):
            if index >= end:
                break
            if index >= start:
                rows.append(record)
    return rows


def extract_columns(path: PathLike, columns: Sequence[str]) -> list[list[str]]:
    """Return, for every data row, the values of the named columns in order.

    Raises ColumnNotFoundError for the first name missing from the header.
    """
    with closing(_read_records(path)) as records:
        headers = next(records, [])
        indices: list[int] = []
        for name in columns:
            try:
                indices.append(headers.index(name))
            except ValueError:
                raise ColumnNotFoundError(name) from None

        return [
            [record[i] if i < len(record) else "" for i in indices]
            for record in records
        ]