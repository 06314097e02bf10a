"""Tests for CSV serialization of accepted records."""

from __future__ import annotations

import csv
import io
import json

import pytest

from billrate.core.exceptions import ErrorCode, WriteError
from billrate.core.models import BillingRecord
from billrate.core.pipeline import CSV_COLUMNS, CsvRecordWriter, to_row


class BrokenStream(io.StringIO):
    def write(self, _: str) -> int:
        raise BrokenPipeError(32, "Broken pipe")

    def flush(self) -> None:
        raise BrokenPipeError(32, "Broken pipe")


def _record(name: str = "alpha", billing_code: str = "1") -> BillingRecord:
    payload = {
        "name": name,
        "billing_code": billing_code,
        "negotiated_rates": [{"negotiated_prices": [{"negotiated_rate": 10}]}],
    }
    return BillingRecord.model_validate_json(json.dumps(payload))


def test_header_is_written_once_before_first_row() -> None:
    stream = io.StringIO()
    writer = CsvRecordWriter(stream)

    writer.write(_record("alpha", "1"), 30.0)
    writer.write(_record("beta", "2"), 12.5)

    assert stream.getvalue() == "name,billing_code,average_rate\nalpha,1,30.0\nbeta,2,12.5\n"
    assert writer.header_written is True
    assert writer.rows_written == 2


def test_nothing_is_written_without_rows() -> None:
    stream = io.StringIO()
    writer = CsvRecordWriter(stream)

    writer.flush()

    assert stream.getvalue() == ""
    assert writer.header_written is False


def test_columns_are_fixed() -> None:
    assert CsvRecordWriter(io.StringIO()).columns == CSV_COLUMNS == ("name", "billing_code", "average_rate")


@pytest.mark.parametrize(
    "name",
    ['Smith, John', 'the "best" plan', "line\nbreak", 'mixed, "all"\nof it'],
)
def test_special_characters_round_trip_through_csv_reader(name: str) -> None:
    stream = io.StringIO()
    CsvRecordWriter(stream).write(_record(name=name, billing_code="A,1"), 7.25)

    rows = list(csv.reader(io.StringIO(stream.getvalue())))

    assert rows == [list(CSV_COLUMNS), [name, "A,1", "7.25"]]


def test_quotes_are_doubled() -> None:
    stream = io.StringIO()
    CsvRecordWriter(stream).write(_record(name='say "hi"'), 1.0)

    assert stream.getvalue().splitlines()[1] == '"say ""hi""",1,1.0'


def test_average_rate_keeps_full_precision() -> None:
    assert to_row(_record(), 100 / 3) == ["alpha", "1", "33.333333333333336"]


def test_broken_stream_raises_write_error() -> None:
    writer = CsvRecordWriter(BrokenStream())

    with pytest.raises(WriteError) as exc_info:
        writer.write(_record(), 1.0)

    assert exc_info.value.code is ErrorCode.WRITE_IO
    assert isinstance(exc_info.value.__cause__, BrokenPipeError)
    assert writer.header_written is False
    assert writer.rows_written == 0


def test_flush_failure_raises_write_error() -> None:
    with pytest.raises(WriteError):
        CsvRecordWriter(BrokenStream()).flush()
