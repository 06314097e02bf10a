"""Structured logging utilities with per-run trace ids."""

from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime
from typing import IO, Any, Iterator
from uuid import uuid4

from loguru import logger

from billrate.core.logging.config import LogConfig

_TRACE_ID_VAR: ContextVar[str | None] = ContextVar("billrate_trace_id", default=None)
_CONTEXT_VAR: ContextVar[dict[str, Any]] = ContextVar("billrate_log_context", default={})

_RESERVED_KEYS = {"trace_id", "error_code", "line"}


def _patch_record(record: dict[str, Any]) -> None:
    extra = record.setdefault("extra", {})
    if not extra.get("trace_id"):
        trace_id = _TRACE_ID_VAR.get()
        if trace_id is None:
            trace_id = uuid4().hex
            _TRACE_ID_VAR.set(trace_id)
        extra["trace_id"] = trace_id

    for key, value in _CONTEXT_VAR.get({}).items():
        extra.setdefault(key, value)

    extra.setdefault("error_code", None)
    extra.setdefault("line", None)


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def _format_payload(record: dict[str, Any]) -> dict[str, Any]:
    extra = record.get("extra", {})
    context = {k: v for k, v in extra.items() if k not in _RESERVED_KEYS}
    payload: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record.get("message"),
        "trace_id": extra.get("trace_id"),
        "error_code": extra.get("error_code"),
        "line": extra.get("line"),
    }
    if context:
        payload["context"] = context
    exception = record.get("exception")
    if exception:
        payload["exception"] = str(exception)
    return payload


class _StreamJsonSink:
    """Sink writing structured JSON payloads to a text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream

    def __call__(self, message: Any) -> None:
        payload = _format_payload(message.record)
        self._stream.write(json.dumps(payload, default=_json_default))
        self._stream.write("\n")
        self._stream.flush()


def configure_logging(level: str = "WARNING", **kwargs: Any) -> LogConfig:
    """Route log events at ``level`` and above to the console stream as JSON lines."""

    config = LogConfig(level=level, **kwargs)
    stream = config.console_stream or sys.stderr
    logger.configure(
        handlers=[{"sink": _StreamJsonSink(stream), "level": config.level.upper()}],
        patcher=_patch_record,
    )
    return config


@contextmanager
def log_context(*, trace_id: str | None = None, **extra: Any) -> Iterator[str]:
    """Scope a trace id and extra fields over every log event emitted inside."""

    previous_context = _CONTEXT_VAR.get({})
    context_token = _CONTEXT_VAR.set({**previous_context, **extra})

    active_trace = trace_id or uuid4().hex
    trace_token = _TRACE_ID_VAR.set(active_trace)

    try:
        yield active_trace
    finally:
        _TRACE_ID_VAR.reset(trace_token)
        _CONTEXT_VAR.reset(context_token)


configure_logging()


__all__ = [
    "configure_logging",
    "log_context",
    "logger",
]
