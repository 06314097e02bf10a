"""Tests for the pipeline error types."""

from __future__ import annotations

import pytest

from billrate.core.exceptions import (
    BillRateError,
    CalculationError,
    ErrorCode,
    ParseError,
    PipelineError,
    WriteError,
)


@pytest.mark.parametrize(
    ("error_type", "code", "stage"),
    [
        (ParseError, ErrorCode.PARSE_SYNTAX, "parse"),
        (ParseError, ErrorCode.PARSE_MISSING_FIELD, "parse"),
        (ParseError, ErrorCode.PARSE_TYPE_MISMATCH, "parse"),
        (CalculationError, ErrorCode.CALCULATION_DIVISION_BY_ZERO, "calculate"),
        (CalculationError, ErrorCode.CALCULATION_INVALID, "calculate"),
        (WriteError, ErrorCode.WRITE_IO, "write"),
    ],
)
def test_error_exposes_code_and_stage(error_type: type[PipelineError], code: ErrorCode, stage: str) -> None:
    error = error_type("boom", code)

    assert isinstance(error, BillRateError)
    assert error.code is code
    assert error.error_code == code.value
    assert error.stage == stage
    assert error.details == {"stage": stage}


def test_code_must_belong_to_stage() -> None:
    with pytest.raises(ValueError):
        ParseError("boom", ErrorCode.WRITE_IO)


def test_with_line_does_not_override_existing_line() -> None:
    error = ParseError("bad", ErrorCode.PARSE_SYNTAX, line_number=3)

    error.with_line(9)

    assert error.line_number == 3
    assert error.details["line"] == 3


def test_payload_includes_location() -> None:
    error = CalculationError(
        "negative",
        ErrorCode.CALCULATION_INVALID,
        field="negotiated_rates.0.negotiated_prices.0.negotiated_rate",
    ).with_line(5)

    assert error.to_payload() == {
        "code": "CALCULATION_INVALID",
        "message": "negative",
        "details": {
            "stage": "calculate",
            "line": 5,
            "field": "negotiated_rates.0.negotiated_prices.0.negotiated_rate",
        },
    }
    assert str(error) == "line 5: negative"
