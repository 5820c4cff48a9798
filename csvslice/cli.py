"""Command-line entry points for slicing CSV files."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .core import extract_columns, extract_rows
from .errors import CsvSliceError


def _index(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid value '{text}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid value '{text}'")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csv-slice",
        description="Extract rows or columns from CSV files",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    rows = commands.add_parser("rows", help="extract a range of data rows")
    rows.add_argument("-i", "--input", required=True)
    rows.add_argument("-s", "--start", required=True, type=_index)
    rows.add_argument("-e", "--end", required=True, type=_index)

    columns = commands.add_parser("columns", help="extract columns by name")
    columns.add_argument("-i", "--input", required=True)
    columns.add_argument("-c", "--columns", action="append", default=[])
    return parser


def _print_rows(rows: list[list[str]]) -> None:
    for row in rows:
        print(",".join(row))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the csv-slice command and return its exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "rows":
            _print_rows(extract_rows(args.input, args.start, args.end))
        else:
            _print_rows(extract_columns(args.input, args.columns))
    except CsvSliceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def rows_example(argv: Sequence[str] | None = None) -> int:
    """Print rows ``start`` to ``end`` of a CSV file given as positional arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("Usage: rows <csv_file> <start> <end>", file=sys.stderr)
        return 1
    path, start_text, end_text = args
    try:
        start, end = _index(start_text), _index(end_text)
    except argparse.ArgumentTypeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    try:
        _print_rows(extract_rows(path, start, end))
    except CsvSliceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return 0


def columns_example(argv: Sequence[str] | None = None) -> int:
    """Print the named columns of a CSV file given as positional arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Usage: columns <csv_file> <column1> [<column2> ...]", file=sys.stderr)
        return 1
    path, *names = args
    try:
        _print_rows(extract_columns(path, names))
    except CsvSliceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())