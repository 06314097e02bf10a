"""Main entry point for the billrate command line interface."""

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path

import typer
from pydantic import ValidationError

from billrate.core.config import DEFAULT_RATE_THRESHOLD, PipelineConfig
from billrate.core.exceptions import PipelineError
from billrate.core.logging import configure_logging
from billrate.core.pipeline import CsvRecordWriter, run_pipeline

from .constants import SYSTEM_EXIT_CODE
from .utils import emit_error, exit_code_for, open_input, open_output


def create_app() -> typer.Typer:
    """Create a Typer application instance for billrate."""

    app = typer.Typer(
        add_completion=False,
        help="Extract billing records from JSONL and write those with an average rate at or below the threshold as CSV.",
    )

    @app.command()
    def main(
        input_path: Path | None = typer.Option(
            None,
            "--input",
            "-i",
            help="Read JSONL from a file instead of stdin.",
        ),
        output_path: Path | None = typer.Option(
            None,
            "--output",
            "-o",
            help="Write CSV to a file instead of stdout.",
        ),
        threshold: float = typer.Option(
            DEFAULT_RATE_THRESHOLD,
            "--threshold",
            help="Drop records whose average rate is greater than this value.",
            show_default=True,
        ),
        log_level: str = typer.Option(
            "WARNING",
            "--log-level",
            help="Level of diagnostics written to stderr.",
            show_default=True,
        ),
    ) -> None:
        """Filter a JSONL billing report by average rate and emit CSV."""

        try:
            configure_logging(log_level.strip().upper())
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

        try:
            config = PipelineConfig(threshold=threshold)
        except ValidationError as exc:
            raise typer.BadParameter(exc.errors()[0]["msg"], param_hint="--threshold") from exc

        with ExitStack() as stack:
            source = open_input(input_path, stack)
            sink = open_output(output_path, stack)
            try:
                run_pipeline(source, CsvRecordWriter(sink), config=config)
            except PipelineError as error:
                payload = error.to_payload()
                emit_error(str(error), payload["code"], details=payload["details"])
                raise typer.Exit(code=exit_code_for(error)) from error
            except Exception as error:  # pragma: no cover - safety net
                emit_error(str(error), "UNEXPECTED_ERROR")
                raise typer.Exit(code=SYSTEM_EXIT_CODE) from error

    return app


app = create_app()
