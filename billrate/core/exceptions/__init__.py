"""Exception handling module."""

from billrate.core.exceptions.base import (
    BillRateError,
    CalculationError,
    ParseError,
    PipelineError,
    WriteError,
)
from billrate.core.exceptions.codes import ErrorCode

__all__ = [
    "BillRateError",
    "PipelineError",
    "ParseError",
    "CalculationError",
    "WriteError",
    "ErrorCode",
]
