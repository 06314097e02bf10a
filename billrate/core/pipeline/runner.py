"""Drive JSONL lines through parse, calculate and write."""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import asdict, dataclass

from billrate.core.config import PipelineConfig
from billrate.core.exceptions import ErrorCode, ParseError, PipelineError
from billrate.core.logging import log_context, logger
from billrate.core.models import RateDecision

from .calculator import calculate
from .parser import parse_record
from .writer import CsvRecordWriter


@dataclass(slots=True)
class RunSummary:
    """Counters describing a completed run."""

    records_read: int = 0
    records_included: int = 0
    records_excluded: int = 0
    duration_ms: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def process_line(
    line: str,
    writer: CsvRecordWriter,
    *,
    config: PipelineConfig,
    line_number: int | None = None,
) -> RateDecision:
    """Run a single line through every stage, writing it if accepted."""

    record = parse_record(line, line_number=line_number)
    decision = calculate(record, threshold=config.threshold)
    if decision.included:
        writer.write(record, decision.average_rate)
    else:
        logger.bind(line=line_number).debug(
            f"excluded {record.billing_code!r}: average rate {decision.average_rate} > {config.threshold}"
        )
    return decision


def run_pipeline(
    lines: Iterable[str],
    writer: CsvRecordWriter,
    *,
    config: PipelineConfig | None = None,
) -> RunSummary:
    """Process ``lines`` in order and return the run counters.

    Lines are pulled one at a time; the first :class:`PipelineError` stops
    the run and is re-raised with its 1-based line number attached, so no
    line after the failing one is read. The writer is flushed only after
    the input is exhausted.
    """

    config = config or PipelineConfig()
    summary = RunSummary()
    started = time.time()
    iterator = iter(lines)
    line_number = 0

    with log_context(threshold=config.threshold):
        while True:
            line_number += 1
            try:
                line = next(iterator)
            except StopIteration:
                break
            except UnicodeDecodeError as exc:
                raise ParseError(
                    f"input is not valid UTF-8: {exc.reason}",
                    ErrorCode.PARSE_SYNTAX,
                    line_number=line_number,
                ) from exc

            summary.records_read += 1
            try:
                decision = process_line(line, writer, config=config, line_number=line_number)
            except PipelineError as error:
                error.with_line(line_number)
                logger.bind(error_code=error.error_code, line=line_number).info(
                    f"pipeline aborted during {error.stage}"
                )
                raise

            if decision.included:
                summary.records_included += 1
            else:
                summary.records_excluded += 1

        writer.flush()
        summary.duration_ms = round((time.time() - started) * 1000, 2)
        logger.bind(**summary.to_dict()).info("pipeline completed")

    return summary


__all__ = ["RunSummary", "process_line", "run_pipeline"]
