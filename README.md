# csvslice

csvslice pulls a range of rows, or a set of named columns, out of a CSV file.
It reads the file one record at a time rather than loading all of it. When you
ask for a row range, it stops reading as soon as it has read the row just past
the end of the range.

## Installation

```
pip install .
```

To install it with the test dependencies:

```
pip install .[test]
```

## Command line

To print data rows from `start` up to but not including `end`, run:

```
csv-slice rows --input data.csv --start 0 --end 2
```

Rows are numbered from 0, and the header row is not counted. The short forms
are `-i`, `-s` and `-e`. `--start` and `--end` must be whole numbers that are
not negative.

To print the named columns in the order you give them, run:

```
csv-slice columns --input data.csv --columns Name --columns Email
```

The short forms are `-i` and `-c`. Repeat `--columns` once for each column you
want.

Each selected row goes to standard output with its fields joined by plain
commas. The fields are not quoted again, so a value that contains a comma
comes out unquoted.

If the file cannot be read, is not valid CSV, or does not have a requested
column, the command writes `Error: <message>` to standard error and exits with
status 1.

## Library

```python
from csvslice.core import extract_rows, extract_columns
from csvslice.errors import ColumnNotFoundError

rows = extract_rows("data.csv", 0, 2)             # list of rows, each a list of fields
data = extract_columns("data.csv", ["Name", "Email"])

try:
    extract_columns("data.csv", ["Missing"])
except ColumnNotFoundError as exc:
    print(exc)                                    # Column not found: Missing
    print(exc.column)                             # Missing
```

- `extract_rows(path, start, end)` returns the data rows whose indices fall in
  `[start, end)`. It raises `ValueError` if `start` or `end` is negative.
- `extract_columns(path, columns)` returns one list per data row, holding the
  values of the requested columns in the order they were asked for. If a
  column is missing from the header, it raises `ColumnNotFoundError` for the
  first missing name.

How files are read:

- Files are read as UTF-8, and a leading byte-order mark is ignored.
- The first record that is not blank is the header.
- Blank lines are skipped.
- Every record must have the same number of fields as the header. A record
  with a different number of fields raises `CsvFormatError`.

### Errors

Every error derives from `csvslice.errors.CsvSliceError`:

- `CsvFormatError` means the input is malformed CSV or is not valid UTF-8. Its
  message starts with `CSV error:` and the cause is in `.detail`.
- `CsvIOError` means the file could not be opened or read. Its message starts
  with `IO error:` and the cause is in `.detail`.
- `ColumnNotFoundError` means a requested column is not in the header. The
  missing name is in `.column`.

### Positional-argument helpers

`csvslice.cli` also provides two small entry functions. Each takes an argument
list and returns an exit status. Neither is installed as a command.

- `rows_example(["data.csv", "0", "2"])` prints rows 0 and 1.
- `columns_example(["data.csv", "Name", "Email"])` prints the two columns.

Both return 1 and print a usage line when they get the wrong number of
arguments. When the CSV file causes an error, they print `Error: <message>`
to standard error and still return 0.