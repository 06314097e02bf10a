"""Error codes shared by the pipeline stages and the CLI."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Tags identifying every failure the pipeline can report."""

    GENERAL_ERROR = "GENERAL_ERROR"

    # parser
    PARSE_SYNTAX = "PARSE_SYNTAX"
    PARSE_MISSING_FIELD = "PARSE_MISSING_FIELD"
    PARSE_TYPE_MISMATCH = "PARSE_TYPE_MISMATCH"

    # calculator
    CALCULATION_DIVISION_BY_ZERO = "CALCULATION_DIVISION_BY_ZERO"
    CALCULATION_INVALID = "CALCULATION_INVALID"

    # writer
    WRITE_IO = "WRITE_IO"


__all__ = ["ErrorCode"]
