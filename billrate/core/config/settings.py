"""Runtime settings for the billing pipeline."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_RATE_THRESHOLD = 30.0


class PipelineConfig(BaseModel):
    """Options controlling one pipeline run.

    Records whose average rate is strictly greater than ``threshold`` are
    dropped from the output.
    """

    model_config = ConfigDict(frozen=True)

    threshold: float = DEFAULT_RATE_THRESHOLD

    @field_validator("threshold")
    @classmethod
    def _threshold_is_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("threshold must be a finite number")
        return value


__all__ = ["DEFAULT_RATE_THRESHOLD", "PipelineConfig"]
