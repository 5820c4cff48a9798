import pytest

from csvslice.errors import (
    ColumnNotFoundError,
    CsvFormatError,
    CsvIOError,
    CsvSliceError,
)


def test_column_not_found_message():
    err = ColumnNotFoundError("Email")
    assert str(err) == "Column not found: Email"


def test_column_not_found_keeps_column():
    err = ColumnNotFoundError("Email")
    assert err.column == "Email"


def test_format_error_message_prefix():
    err = CsvFormatError("bad record")
    assert str(err) == "CSV error: bad record"
    assert err.detail == "bad record"


def test_io_error_message_prefix():
    cause = FileNotFoundError("missing")
    err = CsvIOError(cause)
    assert str(err) == "IO error: missing"
    assert err.detail is cause


@pytest.mark.parametrize(
    "error",
    [ColumnNotFoundError("x"), CsvFormatError("x"), CsvIOError("x")],
)
def test_all_errors_caught_by_base(error):
    with pytest.raises(CsvSliceError) as info:
        raise error
    assert info.value is error