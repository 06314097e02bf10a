"""Logging configuration primitives for structured logging."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class LogConfig(BaseModel):
    """Configuration model used to initialise structured logging.

    ``console_stream`` defaults to ``sys.stderr`` at configuration time;
    stdout is reserved for CSV output.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    level: str = "WARNING"
    console_stream: Any = None


__all__ = ["LogConfig"]
