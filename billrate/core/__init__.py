"""Core pipeline, models and infrastructure for billrate."""
