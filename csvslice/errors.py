"""Exceptions raised while slicing CSV files."""

from __future__ import annotations


class CsvSliceError(Exception):
    """Base class for every error raised by csvslice."""


class CsvFormatError(CsvSliceError):
    """The file could not be parsed as CSV."""

    def __init__(self, detail: object) -> None:
        super().__init__(f"CSV error: {detail}")
        self.detail = detail


class CsvIOError(CsvSliceError):
    """The file could not be opened or read."""

    def __init__(self, detail: object) -> None:
        super().__init__(f"IO error: {detail}")
        self.detail = detail


class ColumnNotFoundError(CsvSliceError):
    """A requested column name is not among the CSV headers."""

    def __init__(self, column: str) -> None:
        super().__init__(f"Column not found: {column}")
        self.column = column