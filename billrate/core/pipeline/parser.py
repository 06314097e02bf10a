"""Decode JSONL lines into billing records."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError
from pydantic_core import from_json

from billrate.core.exceptions import ErrorCode, ParseError
from billrate.core.models import BillingRecord

_ROOT_FIELD = "$"

# out-of-range literals such as 1e400 decode to inf and are rejected here
_SYNTAX_ERROR_TYPES = frozenset({"json_invalid", "finite_number"})


def parse_record(line: str, *, line_number: int | None = None) -> BillingRecord:
    """Decode one line of JSON text into a :class:`BillingRecord`.

    Raises:
        ParseError: ``PARSE_SYNTAX`` for malformed JSON (including blank
            lines, ``NaN``/``Infinity`` literals and numbers outside the
            float range), ``PARSE_MISSING_FIELD`` when a required field is
            absent and ``PARSE_TYPE_MISMATCH`` when a field, or the line
            itself, has the wrong JSON type.
    """

    text = line.rstrip("\r\n")
    try:
        data = from_json(text, allow_inf_nan=False)
    except ValueError as exc:
        raise ParseError(
            f"malformed JSON: {exc}",
            ErrorCode.PARSE_SYNTAX,
            line_number=line_number,
        ) from exc

    try:
        return BillingRecord.model_validate(data)
    except ValidationError as exc:
        raise _to_parse_error(exc, line_number) from exc


def _to_parse_error(exc: ValidationError, line_number: int | None) -> ParseError:
    # first error only, processing stops there anyway
    error = exc.errors(include_url=False)[0]
    error_type = error["type"]
    field = _field_path(error.get("loc", ()))

    if error_type in _SYNTAX_ERROR_TYPES:
        return ParseError(
            f"malformed JSON: {error['msg']}",
            ErrorCode.PARSE_SYNTAX,
            line_number=line_number,
            field=None if field == _ROOT_FIELD else field,
        )
    if error_type == "missing":
        return ParseError(
            f"missing required field '{field}'",
            ErrorCode.PARSE_MISSING_FIELD,
            line_number=line_number,
            field=field,
        )
    if field == _ROOT_FIELD:
        message = "expected a JSON object"
    else:
        message = f"field '{field}' has the wrong type: {error['msg']}"
    return ParseError(
        message,
        ErrorCode.PARSE_TYPE_MISMATCH,
        line_number=line_number,
        field=field,
    )


def _field_path(loc: tuple[Any, ...]) -> str:
    if not loc:
        return _ROOT_FIELD
    return ".".join(str(part) for part in loc)


__all__ = ["parse_record"]
