"""Configuration management module."""

from billrate.core.config.settings import DEFAULT_RATE_THRESHOLD, PipelineConfig

__all__ = ["DEFAULT_RATE_THRESHOLD", "PipelineConfig"]
