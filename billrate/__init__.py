"""billrate - JSONL billing report to CSV filter.

Reads negotiated-rate billing records one JSON object per line, computes
the average negotiated rate of each record and writes the records at or
below the threshold as CSV.
"""

from billrate.core.config import PipelineConfig
from billrate.core.exceptions import (
    BillRateError,
    CalculationError,
    ErrorCode,
    ParseError,
    WriteError,
)
from billrate.core.models import BillingRecord, RateDecision
from billrate.core.pipeline import (
    CsvRecordWriter,
    RunSummary,
    calculate,
    parse_record,
    run_pipeline,
)

__version__ = "0.1.0"

__all__ = [
    "BillingRecord",
    "RateDecision",
    "PipelineConfig",
    "BillRateError",
    "ParseError",
    "CalculationError",
    "WriteError",
    "ErrorCode",
    "parse_record",
    "calculate",
    "CsvRecordWriter",
    "run_pipeline",
    "RunSummary",
    "__version__",
]
