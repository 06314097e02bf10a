"""Exception types raised by the billrate pipeline."""

from __future__ import annotations

from typing import Any, ClassVar

from billrate.core.exceptions.codes import ErrorCode


class BillRateError(Exception):
    """Base error for billrate."""

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.GENERAL_ERROR.value,
        details: dict[str, Any] | None = None,
    ):
        """Initialise the error.

        Args:
            message: human readable description
            error_code: stable machine readable code
            details: extra context about the failure
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class PipelineError(BillRateError):
    """Fatal failure of one pipeline stage while processing a record.

    Every failure carries the same payload regardless of stage: a tagged
    :class:`ErrorCode`, the stage name, and where known the 1-based input
    line and the dotted path of the offending field.
    """

    stage: ClassVar[str] = "pipeline"
    allowed_codes: ClassVar[frozenset[ErrorCode]] = frozenset()

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        *,
        line_number: int | None = None,
        field: str | None = None,
    ) -> None:
        if self.allowed_codes and code not in self.allowed_codes:
            raise ValueError(f"{code.value} is not a valid code for {type(self).__name__}")
        super().__init__(message, code.value)
        self.code = code
        self.line_number = line_number
        self.field = field
        self._sync_details()

    def with_line(self, line_number: int) -> PipelineError:
        """Attach the input line number unless one is already set."""

        if self.line_number is None:
            self.line_number = line_number
            self._sync_details()
        return self

    def to_payload(self) -> dict[str, Any]:
        """Return a serializable payload representing the error."""

        return {
            "code": self.code.value,
            "message": self.message,
            "details": dict(self.details),
        }

    def _sync_details(self) -> None:
        self.details["stage"] = self.stage
        if self.line_number is not None:
            self.details["line"] = self.line_number
        if self.field is not None:
            self.details["field"] = self.field

    def __str__(self) -> str:
        location = f"line {self.line_number}: " if self.line_number is not None else ""
        return f"{location}{self.message}"


class ParseError(PipelineError):
    """A line could not be decoded into a billing record."""

    stage = "parse"
    allowed_codes = frozenset(
        {
            ErrorCode.PARSE_SYNTAX,
            ErrorCode.PARSE_MISSING_FIELD,
            ErrorCode.PARSE_TYPE_MISMATCH,
        }
    )


class CalculationError(PipelineError):
    """The average rate of a record could not be derived."""

    stage = "calculate"
    allowed_codes = frozenset(
        {
            ErrorCode.CALCULATION_DIVISION_BY_ZERO,
            ErrorCode.CALCULATION_INVALID,
        }
    )


class WriteError(PipelineError):
    """The output stream rejected a write."""

    stage = "write"
    allowed_codes = frozenset({ErrorCode.WRITE_IO})


__all__ = [
    "BillRateError",
    "PipelineError",
    "ParseError",
    "CalculationError",
    "WriteError",
]
