"""Record pipeline: parse, calculate, write."""

from billrate.core.pipeline.calculator import average_rate, calculate, is_included
from billrate.core.pipeline.parser import parse_record
from billrate.core.pipeline.runner import RunSummary, process_line, run_pipeline
from billrate.core.pipeline.writer import CSV_COLUMNS, CsvRecordWriter, to_row

__all__ = [
    "parse_record",
    "average_rate",
    "calculate",
    "is_included",
    "CSV_COLUMNS",
    "CsvRecordWriter",
    "to_row",
    "RunSummary",
    "process_line",
    "run_pipeline",
]
