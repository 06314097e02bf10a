"""Utility helpers for the CLI."""

from __future__ import annotations

import json
from contextlib import ExitStack
from pathlib import Path
from typing import Mapping, TextIO

import typer

from billrate.core.exceptions import (
    CalculationError,
    ParseError,
    PipelineError,
)

from .constants import CALCULATION_EXIT_CODE, IO_EXIT_CODE, PARSE_EXIT_CODE


def open_input(path: Path | None, stack: ExitStack) -> TextIO:
    """Return the JSONL source: ``path`` if given, stdin otherwise."""

    if path is None:
        return typer.get_text_stream("stdin", encoding="utf-8")
    try:
        return stack.enter_context(open(path, encoding="utf-8"))
    except OSError as exc:
        emit_error(f"Unable to open '{path}': {exc}", "INPUT_OPEN_ERROR")
        raise typer.Exit(code=IO_EXIT_CODE) from exc


def open_output(path: Path | None, stack: ExitStack) -> TextIO:
    """Return the CSV destination: ``path`` if given, stdout otherwise."""

    if path is None:
        return typer.get_text_stream("stdout", encoding="utf-8")
    try:
        return stack.enter_context(open(path, "w", encoding="utf-8", newline=""))
    except OSError as exc:
        emit_error(f"Unable to open '{path}': {exc}", "OUTPUT_OPEN_ERROR")
        raise typer.Exit(code=IO_EXIT_CODE) from exc


def exit_code_for(error: PipelineError) -> int:
    """Map a pipeline failure onto its process exit code."""

    if isinstance(error, ParseError):
        return PARSE_EXIT_CODE
    if isinstance(error, CalculationError):
        return CALCULATION_EXIT_CODE
    return IO_EXIT_CODE


def emit_error(message: str, code: str, *, details: Mapping[str, object] | None = None) -> None:
    """Print a structured error payload to stderr."""

    payload: dict[str, object] = {"code": code, "message": message}
    if details:
        payload["details"] = dict(details)
    typer.echo(json.dumps(payload, ensure_ascii=False, default=str), err=True)


__all__ = ["open_input", "open_output", "exit_code_for", "emit_error"]
