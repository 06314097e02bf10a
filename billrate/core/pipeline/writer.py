"""CSV serialization of accepted billing records."""

from __future__ import annotations

import csv
from typing import Sequence, TextIO

from billrate.core.exceptions import ErrorCode, WriteError
from billrate.core.models import BillingRecord

CSV_COLUMNS: tuple[str, ...] = ("name", "billing_code", "average_rate")


class CsvRecordWriter:
    """Stream accepted records to ``stream`` as CSV.

    The header row is written once, right before the first data row, so a
    run without accepted records leaves the stream untouched. Quoting is
    minimal: fields containing a comma, quote or newline are wrapped in
    quotes with embedded quotes doubled.
    """

    def __init__(self, stream: TextIO, *, line_terminator: str = "\n") -> None:
        self._stream = stream
        self._writer = csv.writer(stream, quoting=csv.QUOTE_MINIMAL, lineterminator=line_terminator)
        self.header_written = False
        self.rows_written = 0

    @property
    def columns(self) -> tuple[str, ...]:
        return CSV_COLUMNS

    def write(self, record: BillingRecord, average_rate: float) -> None:
        """Write ``record`` and its average rate as one CSV row."""

        if not self.header_written:
            self._write_row(CSV_COLUMNS)
            self.header_written = True
        self._write_row(to_row(record, average_rate))
        self.rows_written += 1

    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as exc:
            raise WriteError(f"failed to flush output: {exc}", ErrorCode.WRITE_IO) from exc

    def _write_row(self, row: Sequence[str]) -> None:
        try:
            self._writer.writerow(row)
        except OSError as exc:
            raise WriteError(f"failed to write record: {exc}", ErrorCode.WRITE_IO) from exc


def to_row(record: BillingRecord, average_rate: float) -> list[str]:
    """Project a record onto :data:`CSV_COLUMNS`."""

    return [record.name, record.billing_code, repr(float(average_rate))]


__all__ = ["CSV_COLUMNS", "CsvRecordWriter", "to_row"]
